"""Exceptions raised by CV Studio services."""


class CVStudioError(Exception):
    """Base class for CV Studio errors."""


class FieldError(CVStudioError, ValueError):
    """Raised when an edit addresses a field or entry that does not exist."""


class PhotoDecodeError(CVStudioError):
    """Raised when an uploaded photo cannot be turned into an inline payload."""


class ExportError(CVStudioError):
    """Raised when the preview cannot be exported to an image."""


class CaptureError(ExportError):
    """Transient failure while rasterizing the preview; safe to retry."""
