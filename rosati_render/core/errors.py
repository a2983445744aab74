"""Error Hierarchy - typed exceptions for every relay failure mode.

Invariants:
    - Every error has a code (str) and an http_status (int)
    - to_response() always produces {"error": <message>}
    - Auth failures never say more than "unauthorized"

Design Decisions:
    - Single hierarchy with RelayError base: one FastAPI handler catches all
    - Vendor failures surface as 400 with the vendor's message, matching the
      contract existing clients already parse
"""


class RelayError(Exception):
    """Base exception for all relay errors."""

    def __init__(self, message: str, code: str, http_status: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Client Errors ──────────────────────────────────────────────

class AuthError(RelayError):
    """Missing or incorrect bearer token."""
    def __init__(self):
        super().__init__("unauthorized", "UNAUTHORIZED", 401)


class RequestValidationFailed(RelayError):
    """One or more request fields failed schema constraints."""
    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message, "VALIDATION_ERROR", 400)
        self.fields = fields or []


class UploadTooLargeError(RelayError):
    """Uploaded file exceeds the configured ceiling."""
    def __init__(self, limit_bytes: int):
        super().__init__(
            f"image exceeds upload limit of {limit_bytes} bytes",
            "UPLOAD_TOO_LARGE", 413,
        )
        self.limit_bytes = limit_bytes


class MissingFileError(RelayError):
    """/render called without an image part."""
    def __init__(self):
        super().__init__("image file required", "IMAGE_REQUIRED", 400)


# ─── Vendor Errors ──────────────────────────────────────────────

class ExternalServiceError(RelayError):
    """Text-completion or image-edit vendor call failed."""
    def __init__(self, message: str, provider: str):
        super().__init__(message, "EXTERNAL_SERVICE_ERROR", 400)
        self.provider = provider
