"""
Simple exceptions for upload functionality.
"""
from typing import Optional


class UploadError(Exception):
    """Base upload error."""
    pass


class InputError(UploadError):
    """Input descriptor does not resolve to anything uploadable."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


class TransportError(UploadError):
    """The HTTP request could not be completed."""

    def __init__(self, message, **kwargs):
        super().__init__(message)
        self.endpoint = kwargs.get('endpoint')
        self.status_code = kwargs.get('status_code')
        self.original_exception = kwargs.get('original_exception')
