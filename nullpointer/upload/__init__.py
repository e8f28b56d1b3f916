"""
0x0 Upload Module

Classifies the input descriptor, builds the multipart form and sends it to
the hosting endpoint in a single POST.
"""

from .api_client import NullPointerClient
from .classifier import classify_input
from .request_builder import build_form
from .models import (
    FilePath,
    Stdin,
    RemoteURL,
    Source,
    UploadRequest,
    UploadResponse,
    UploadConfig,
    MultipartForm,
    FilePart
)
from .exceptions import (
    UploadError,
    InputError,
    TransportError
)

__all__ = [
    'NullPointerClient',
    'classify_input',
    'build_form',
    'FilePath',
    'Stdin',
    'RemoteURL',
    'Source',
    'UploadRequest',
    'UploadResponse',
    'UploadConfig',
    'MultipartForm',
    'FilePart',
    'UploadError',
    'InputError',
    'TransportError'
]
