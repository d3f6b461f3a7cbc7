"""
Error taxonomy shared by services and routes.

Services raise these; a single exception handler installed by the app
factory renders them as ``{"detail": ...}`` with the matching status code.
"""
from __future__ import annotations


class StudioError(Exception):
    status_code: int = 500
    default_detail: str = "Server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthorized(StudioError):
    status_code = 401
    default_detail = "Unauthorized"


class Forbidden(StudioError):
    status_code = 403
    default_detail = "Forbidden"


class ValidationFailed(StudioError):
    status_code = 400
    default_detail = "Invalid request"

    def __init__(self, detail: str | None = None, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(detail)


class NotFound(StudioError):
    status_code = 404
    default_detail = "Not found"


class UpstreamError(StudioError):
    """Model API failure; the upstream message is passed through as-is."""

    status_code = 500


class ConfigurationError(StudioError):
    status_code = 500
    default_detail = "Server misconfigured"
