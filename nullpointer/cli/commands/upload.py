"""
Upload command implementation.

Thin wrapper around UploadService that validates the raw flag values,
picks the input descriptor and delegates the upload to the service layer.
"""
import logging
import re
import sys
from typing import List, Optional

import typer

from nullpointer.cli.errors import UsageError
from nullpointer.core.uploader import UploadService

logger = logging.getLogger(__name__)

EXPIRES_PATTERN = re.compile(r"[0-9]+")


def parse_expires(value: Optional[str]) -> int:
    """Hours from now or an epoch-millisecond timestamp; 0 means unset."""
    if value is None:
        return 0
    if not EXPIRES_PATTERN.fullmatch(value):
        raise UsageError("invalid expires value")
    return int(value)


def parse_mimetype(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not value or value.startswith("-"):
        raise UsageError("missing mimetype")
    return value


def select_input(inputs: Optional[List[str]]) -> str:
    """Return the input descriptor; the last positional wins."""
    if not inputs:
        raise UsageError("no input specified")
    if len(inputs) > 1:
        logger.warning(f"{len(inputs)} inputs given, uploading only the last one: {inputs[-1]!r}")
    return inputs[-1]


def upload_command(
    ctx: typer.Context,
    inputs: Optional[List[str]] = typer.Argument(
        None, metavar="<file|url|->", show_default=False,
        help="File to upload, '-' for standard input, or an http(s) URL for the server to fetch"
    ),
    expires: Optional[str] = typer.Option(
        None, "-e", "--expires", metavar="N",
        help="Expiration as hours from now or an epoch-millisecond timestamp (digits only)"
    ),
    mimetype: Optional[str] = typer.Option(
        None, "-m", "--mimetype", metavar="TYPE",
        help="Force the Content-Type of file/stdin uploads"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Also print x-expires / x-token response headers"
    )
):
    """Upload a file, standard input, or a remote URL to 0x0 and print the hosted URL."""
    try:
        expires_hours = parse_expires(expires)
        mime_type = parse_mimetype(mimetype)
        descriptor = select_input(inputs)
    except UsageError as e:
        raise UsageError(e.message, ctx=ctx) from None

    # Delegate to service layer
    upload_service = UploadService()
    exit_code = upload_service.execute_upload(
        descriptor,
        expires_hours=expires_hours,
        mime_type=mime_type,
        verbose=verbose
    )

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
