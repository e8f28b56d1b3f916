"""
Request Builder for 0x0 Uploads

Turns an UploadRequest into the multipart form the hosting endpoint expects:
an optional `expires` field plus exactly one of `file` or `url`.
"""

import logging
import os
import sys
from typing import BinaryIO, Optional

from .models import FilePart, FilePath, MultipartForm, RemoteURL, Stdin, UploadRequest

logger = logging.getLogger(__name__)

STDIN_FILENAME = "-"


def build_form(request: UploadRequest, stdin: Optional[BinaryIO] = None) -> MultipartForm:
    """Build the form fields for a request.

    Args:
        request: The parsed and classified upload request
        stdin: Binary stream used for Stdin sources (defaults to sys.stdin.buffer)

    Returns:
        MultipartForm with text fields in wire order and the optional file part
    """
    form = MultipartForm()

    if request.expires_hours > 0:
        form.fields.append(("expires", str(request.expires_hours)))

    source = request.source
    if isinstance(source, FilePath):
        form.file = FilePart(
            filename=os.path.basename(source.path),
            content_type=request.mime_type,
            path=source.path,
        )
    elif isinstance(source, Stdin):
        form.file = FilePart(
            filename=STDIN_FILENAME,
            content_type=request.mime_type,
            stream=stdin if stdin is not None else sys.stdin.buffer,
        )
    elif isinstance(source, RemoteURL):
        if request.mime_type:
            logger.debug(f"Ignoring mimetype {request.mime_type!r} for remote URL upload")
        form.fields.append(("url", source.url))
    else:
        raise TypeError(f"Unsupported upload source: {source!r}")

    return form
