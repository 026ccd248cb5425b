"""Core helpers shared across the storefront.

Modules in this package are framework-agnostic and side-effect free:
configuration, error types, unit conversion, input validation, and small
string/object helpers.
"""
