"""Error Hierarchy: typed exceptions for every failure mode of the service.

Invariants:
    - Every error has a code (str), category (ErrorCategory), http_status (int)
    - Validation errors (400-level) expose their message to the caller
    - Internal errors (500-level) expose only "Internal Server Error";
      the real message is for logs

Design Decisions:
    - Single hierarchy with BfhlError base: one FastAPI handler catches all
    - public_message goes to the caller, message goes to the logs
"""

from enum import Enum


INTERNAL_SERVER_ERROR_MESSAGE = "Internal Server Error"


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


class BfhlError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        public_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.public_message = public_message or message


# ─── Validation Errors (400-level) ──────────────────────────────

class InvalidRequestError(BfhlError):
    """Request body or operation input has the wrong shape."""
    def __init__(self, message: str, operation: str | None = None):
        super().__init__(
            message, "INVALID_REQUEST", ErrorCategory.VALIDATION, 400,
        )
        self.operation = operation


class MalformedBodyError(BfhlError):
    """Request body is not valid JSON."""
    def __init__(self, detail: str):
        super().__init__(
            f"Malformed JSON body: {detail}", "MALFORMED_JSON",
            ErrorCategory.VALIDATION, 400,
            public_message="Malformed JSON body",
        )


class PayloadTooLargeError(BfhlError):
    """Request body exceeds the configured byte limit."""
    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Request body of {size} bytes exceeds limit of {limit} bytes",
            "PAYLOAD_TOO_LARGE", ErrorCategory.VALIDATION, 413,
            public_message="Payload too large",
        )
        self.size = size
        self.limit = limit


# ─── Internal Errors (500-level) ────────────────────────────────

class GeminiAPIError(BfhlError):
    """Delegated Gemini call failed or returned an unusable payload."""
    def __init__(self, message: str = "Gemini API failed", status_code: int | None = None):
        super().__init__(
            message, "GEMINI_API_ERROR", ErrorCategory.EXTERNAL_API, 500,
            public_message=INTERNAL_SERVER_ERROR_MESSAGE,
        )
        self.status_code = status_code
