"""
Upload service for 0x0.

Runs the parse result through classify -> build -> send -> print and maps
the outcome to a process exit code.
"""
import logging
from typing import BinaryIO, Optional

from nullpointer.rich_utils.ui_helpers import OutputSettings, get_console
from nullpointer.upload import (
    InputError,
    NullPointerClient,
    TransportError,
    UploadConfig,
    UploadRequest,
    UploadResponse,
    build_form,
    classify_input,
)

logger = logging.getLogger(__name__)


class UploadService:
    """Service for uploading one input to the hosting endpoint."""

    def __init__(
        self,
        settings: Optional[OutputSettings] = None,
        config: Optional[UploadConfig] = None,
        stdin: Optional[BinaryIO] = None
    ):
        self.settings = settings or OutputSettings.detect()
        self.config = config or UploadConfig()
        self.stdin = stdin
        self.console = get_console(self.settings)
        self.error_console = get_console(self.settings, stderr=True)

    def print_error(self, message: str) -> None:
        self.error_console.print(
            f"Error: {message}", style=self.settings.error_style,
            markup=False, highlight=False, soft_wrap=True
        )

    def render_response(self, response: UploadResponse, verbose: bool) -> None:
        """Write the body verbatim, then the verbose header lines."""
        # Rich would strip control characters from the body
        self.console.file.write(response.body)
        self.console.file.flush()
        if not verbose:
            return

        lines = response.verbose_header_lines()
        if lines and response.body and not response.body.endswith("\n"):
            self.console.file.write("\n")
        for line in lines:
            self.console.print(
                line, style=self.settings.header_style,
                markup=False, highlight=False, soft_wrap=True
            )

    def execute_upload(
        self,
        descriptor: str,
        expires_hours: int = 0,
        mime_type: Optional[str] = None,
        verbose: bool = False
    ) -> int:
        """Execute upload workflow and return exit code."""
        try:
            source = classify_input(descriptor)
        except InputError as e:
            self.print_error(str(e))
            return 1

        request = UploadRequest(
            source=source,
            expires_hours=expires_hours,
            mime_type=mime_type,
            verbose=verbose
        )
        form = build_form(request, stdin=self.stdin)

        try:
            with NullPointerClient(self.config) as client:
                response = client.upload(form, capture_headers=request.verbose)
        except TransportError as e:
            logger.debug("Transport failure", exc_info=e.original_exception)
            self.print_error(str(e))
            return 1
        except InputError as e:
            # File vanished or became unreadable after classification
            self.print_error(str(e))
            return 1

        self.render_response(response, request.verbose)
        return 0
