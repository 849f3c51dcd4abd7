"""Shared fixtures for uploader tests."""

from typing import Callable, List

import httpx
import pytest

from media_uploader.models import SelectedFile
from media_uploader.submission import PredictionClient

TEST_API_BASE = "http://predict.test"

# Smallest valid PNG header plus padding; content is never decoded.
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


@pytest.fixture
def png_file() -> SelectedFile:
    return SelectedFile(name="face.png", content=PNG_BYTES, mime_type="image/png")


@pytest.fixture
def jpeg_file() -> SelectedFile:
    return SelectedFile(name="other.jpg", content=b"\xff\xd8\xff\xe0jpeg", mime_type="image/jpeg")


@pytest.fixture
def video_file() -> SelectedFile:
    return SelectedFile(name="clip.mp4", content=b"\x00\x00\x00\x18ftypmp42", mime_type="video/mp4")


@pytest.fixture
def text_file() -> SelectedFile:
    return SelectedFile(name="notes.txt", content=b"hello", mime_type="text/plain")


@pytest.fixture
def captured_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(captured_requests) -> Callable[..., PredictionClient]:
    """Build a PredictionClient whose requests go to ``handler`` instead of the network."""

    def _make(handler) -> PredictionClient:
        def _record(request: httpx.Request):
            captured_requests.append(request)
            return handler(request)

        return PredictionClient(base_url=TEST_API_BASE, transport=httpx.MockTransport(_record))

    return _make


def json_handler(payload, status_code: int = 200):
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return _handler


@pytest.fixture
def json_response():
    return json_handler
