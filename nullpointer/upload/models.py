"""
Data Models for 0x0 Uploads

Dataclass-based models for the single request/response exchange with the
hosting endpoint.
"""

from dataclasses import dataclass, field
from typing import BinaryIO, Dict, List, Optional, Tuple, Union

DEFAULT_ENDPOINT = "https://0x0.st"

# Response headers echoed in verbose mode
VERBOSE_HEADERS = ("x-expires", "x-token")


@dataclass(frozen=True)
class FilePath:
    """A regular file on the local filesystem"""
    path: str


@dataclass(frozen=True)
class Stdin:
    """Content read from the process's standard input"""


@dataclass(frozen=True)
class RemoteURL:
    """A URL the hosting service fetches server-side"""
    url: str


Source = Union[FilePath, Stdin, RemoteURL]


@dataclass(frozen=True)
class UploadRequest:
    """Everything needed to build the one upload request"""
    source: Source
    expires_hours: int = 0
    mime_type: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        if self.expires_hours < 0:
            raise ValueError("expires_hours must be non-negative")


@dataclass
class UploadConfig:
    """Transport configuration; fixed for this version of the tool"""
    endpoint: str = DEFAULT_ENDPOINT
    timeout: Optional[float] = None


@dataclass
class FilePart:
    """File content attached as the `file` form field"""
    filename: str
    content_type: Optional[str] = None
    path: Optional[str] = None
    stream: Optional[BinaryIO] = None


@dataclass
class MultipartForm:
    """Wire-level form fields for the upload POST"""
    fields: List[Tuple[str, str]] = field(default_factory=list)
    file: Optional[FilePart] = None

    def field_names(self) -> List[str]:
        names = [name for name, _ in self.fields]
        if self.file is not None:
            names.append("file")
        return names


@dataclass
class UploadResponse:
    """Response from the hosting endpoint"""
    body: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def header_lines(self) -> List[str]:
        """Render captured headers as `name: value` lines, names lower-cased."""
        return [f"{name.lower()}: {value}" for name, value in self.headers.items()]

    def verbose_header_lines(self) -> List[str]:
        """Header lines mentioning x-expires or x-token."""
        return [
            line for line in self.header_lines()
            if any(name in line for name in VERBOSE_HEADERS)
        ]
