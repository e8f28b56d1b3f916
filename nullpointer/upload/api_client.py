"""
0x0 API Client

Sends the single multipart POST to the hosting endpoint and captures the
response body, plus response headers in verbose mode.
"""

import logging
from contextlib import ExitStack
from typing import List, Optional, Tuple

import requests

from .models import MultipartForm, UploadConfig, UploadResponse
from .exceptions import InputError, TransportError

logger = logging.getLogger(__name__)


class NullPointerClient:
    """Handles the upload request to the hosting endpoint"""

    def __init__(self, config: Optional[UploadConfig] = None):
        self.config = config or UploadConfig()
        self.session = requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.session.close()

    def upload(self, form: MultipartForm, capture_headers: bool = False) -> UploadResponse:
        """POST the form to the configured endpoint"""
        url = self.config.endpoint

        with ExitStack() as stack:
            files = self._encode_form(form, stack)
            logger.debug(f"POST {url} fields={form.field_names()}")

            try:
                response = self.session.post(url, files=files, timeout=self.config.timeout)
            except requests.exceptions.RequestException as e:
                raise TransportError(
                    f"Upload to {url} failed: {str(e)}",
                    endpoint=url,
                    original_exception=e
                )
            except OSError as e:
                # requests reads the file part while encoding the body
                raise InputError(e.strerror or str(e), path=self._part_name(form))

        if not response.ok:
            logger.warning(f"Server responded with HTTP {response.status_code}")

        headers = dict(response.headers) if capture_headers else {}
        return UploadResponse(
            body=response.text,
            status_code=response.status_code,
            headers=headers
        )

    def _encode_form(self, form: MultipartForm, stack: ExitStack) -> List[Tuple[str, tuple]]:
        """Convert a MultipartForm into the `files` argument requests expects.

        Text fields are sent as parts without a filename so the body is
        multipart/form-data even when no file is attached.
        """
        files = [(name, (None, value)) for name, value in form.fields]

        part = form.file
        if part is not None:
            if part.stream is not None:
                content = part.stream
            else:
                try:
                    content = stack.enter_context(open(part.path, 'rb'))
                except OSError as e:
                    raise InputError(e.strerror or str(e), path=part.path)

            if part.content_type:
                files.append(("file", (part.filename, content, part.content_type)))
            else:
                files.append(("file", (part.filename, content)))

        return files

    @staticmethod
    def _part_name(form: MultipartForm) -> Optional[str]:
        part = form.file
        if part is None:
            return None
        return part.path or part.filename
