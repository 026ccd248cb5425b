"""Error types raised by the helpers.

Conversions either succeed or raise; validators never raise.
"""

from typing import Any, Dict


class HelperError(Exception):
    """Base exception for all shop helper errors."""

    code = "helper-error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def to_response(self) -> Dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class InvalidParameter(HelperError, ValueError):
    """A conversion was requested between unsupported units."""

    code = "invalid-parameter"

    def __init__(self, message: str = "Invalid from or to value specified"):
        super().__init__(message)
