"""Helpers that need shop or media data from the host application."""
