"""
Tests for 0x0 API Client

Tests request encoding, response capture and transport error
classification with a mocked requests session.
"""

import io
import os
import tempfile
import pytest
from unittest.mock import Mock, patch

import requests

from nullpointer.upload.api_client import NullPointerClient
from nullpointer.upload.exceptions import InputError, TransportError
from nullpointer.upload.models import FilePart, MultipartForm, UploadConfig


def make_response(text="https://0x0.st/abc.txt\n", status_code=200, headers=None):
    response = Mock()
    response.text = text
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.headers = headers or {}
    return response


class TestNullPointerClient:
    """Test cases for the upload client"""

    def setup_method(self):
        """Setup for each test"""
        self.config = UploadConfig(endpoint="https://0x0.test")

    @patch('nullpointer.upload.api_client.requests.Session')
    def test_url_fields_are_multipart_parts(self, mock_session_cls):
        """Test that text fields are sent as filename-less multipart parts"""
        session = mock_session_cls.return_value
        session.post.return_value = make_response()
        form = MultipartForm(fields=[("expires", "24"), ("url", "https://example.com")])

        with NullPointerClient(self.config) as client:
            client.upload(form)

        session.post.assert_called_once_with(
            "https://0x0.test",
            files=[("expires", (None, "24")), ("url", (None, "https://example.com"))],
            timeout=None
        )
        session.close.assert_called_once()

    @patch('nullpointer.upload.api_client.requests.Session')
    def test_file_part_is_opened_and_closed(self, mock_session_cls):
        """Test that a file part is read from disk and closed afterwards"""
        session = mock_session_cls.return_value
        session.post.return_value = make_response()

        with tempfile.NamedTemporaryFile(suffix='.txt', delete=False) as f:
            f.write(b"content")
        try:
            form = MultipartForm(file=FilePart(filename="a.txt", content_type="text/plain", path=f.name))

            with NullPointerClient(self.config) as client:
                client.upload(form)

            files = session.post.call_args.kwargs["files"]
            name, (filename, handle, content_type) = files[0]
            assert name == "file"
            assert filename == "a.txt"
            assert handle.name == f.name
            assert handle.closed
            assert content_type == "text/plain"
        finally:
            os.unlink(f.name)

    @patch('nullpointer.upload.api_client.requests.Session')
    def test_stream_part_without_content_type(self, mock_session_cls):
        """Test that a stream part without override is a two-element tuple"""
        session = mock_session_cls.return_value
        session.post.return_value = make_response()
        stream = io.BytesIO(b"piped")

        with NullPointerClient(self.config) as client:
            client.upload(MultipartForm(file=FilePart(filename="-", stream=stream)))

        assert session.post.call_args.kwargs["files"] == [("file", ("-", stream))]

    @patch('nullpointer.upload.api_client.requests.Session')
    def test_headers_only_captured_when_requested(self, mock_session_cls):
        """Test that headers are captured only in verbose mode"""
        session = mock_session_cls.return_value
        session.post.return_value = make_response(headers={"X-Token": "secret"})
        form = MultipartForm(fields=[("url", "https://example.com")])

        with NullPointerClient(self.config) as client:
            quiet = client.upload(form)
            loud = client.upload(form, capture_headers=True)

        assert quiet.headers == {}
        assert loud.headers == {"X-Token": "secret"}
        assert loud.body == "https://0x0.st/abc.txt\n"

    @patch('nullpointer.upload.api_client.requests.Session')
    def test_error_status_is_passed_through(self, mock_session_cls):
        """Test that non-2xx responses are returned, not raised"""
        session = mock_session_cls.return_value
        session.post.return_value = make_response(text="Bad request\n", status_code=400)

        with NullPointerClient(self.config) as client:
            response = client.upload(MultipartForm(fields=[("url", "https://example.com")]))

        assert response.status_code == 400
        assert response.ok is False
        assert response.body == "Bad request\n"

    @patch('nullpointer.upload.api_client.requests.Session')
    def test_request_exception_is_classified(self, mock_session_cls):
        """Test that connection failures become TransportError"""
        session = mock_session_cls.return_value
        error = requests.exceptions.ConnectionError("connection refused")
        session.post.side_effect = error

        with pytest.raises(TransportError) as exc_info:
            with NullPointerClient(self.config) as client:
                client.upload(MultipartForm(fields=[("url", "https://example.com")]))

        assert "connection refused" in str(exc_info.value)
        assert exc_info.value.endpoint == "https://0x0.test"
        assert exc_info.value.original_exception is error
        session.close.assert_called_once()

    @patch('nullpointer.upload.api_client.requests.Session')
    def test_unreadable_file_is_input_error(self, mock_session_cls):
        """Test that a file that cannot be opened becomes InputError"""
        session = mock_session_cls.return_value
        form = MultipartForm(file=FilePart(filename="a.txt", path="/data/a.txt"))

        with patch('nullpointer.upload.api_client.open', create=True,
                   side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(InputError) as exc_info:
                with NullPointerClient(self.config) as client:
                    client.upload(form)

        assert str(exc_info.value) == "Permission denied: /data/a.txt"
        session.post.assert_not_called()

    @patch('nullpointer.upload.api_client.requests.Session')
    def test_read_failure_during_send_is_input_error(self, mock_session_cls):
        """Test that an I/O error while requests reads the part becomes InputError"""
        session = mock_session_cls.return_value
        session.post.side_effect = OSError(5, "Input/output error")
        form = MultipartForm(file=FilePart(filename="-", stream=io.BytesIO(b"x")))

        with pytest.raises(InputError) as exc_info:
            with NullPointerClient(self.config) as client:
                client.upload(form)

        assert str(exc_info.value) == "Input/output error: -"

    @patch('nullpointer.upload.api_client.requests.Session')
    def test_file_content_is_not_read_up_front(self, mock_session_cls):
        """Test that the open handle, not its bytes, is handed to requests"""
        session = mock_session_cls.return_value
        positions = []

        def post(url, files, timeout):
            handle = files[0][1][1]
            positions.append((handle.closed, handle.tell()))
            return make_response()

        session.post.side_effect = post

        with tempfile.NamedTemporaryFile(suffix='.bin', delete=False) as f:
            f.write(b"x" * 4096)
        try:
            with NullPointerClient(self.config) as client:
                client.upload(MultipartForm(file=FilePart(filename="a.bin", path=f.name)))
        finally:
            os.unlink(f.name)

        assert positions == [(False, 0)]

    def test_default_config(self):
        """Test that the client targets the fixed endpoint with no timeout"""
        client = NullPointerClient()

        assert client.config.endpoint == "https://0x0.st"
        assert client.config.timeout is None
        client.session.close()
