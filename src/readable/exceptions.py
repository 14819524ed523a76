"""Exceptions raised by the readable package."""


class DocumentLoadError(ValueError):
    """Raised when persisted document data fails validation."""
