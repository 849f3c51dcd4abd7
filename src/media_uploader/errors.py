"""Errors raised inside the uploader.

None of these escape the component's handlers; each is turned into an
error status the user can see and recover from.
"""

from __future__ import annotations

from typing import Optional

INVALID_FILE_MESSAGE = "Please select an image file"
SERVER_ERROR_MESSAGE = "Server error while analysing media"
MALFORMED_RESPONSE_MESSAGE = "Unexpected response from prediction service"
FALLBACK_ERROR_MESSAGE = "Unexpected error"


class UploaderError(Exception):
    """Base class for uploader failures."""


class InvalidFileError(UploaderError):
    """The selected file is not an image."""

    def __init__(self, message: str = INVALID_FILE_MESSAGE) -> None:
        super().__init__(message)


class TransportError(UploaderError):
    """The prediction request could not complete."""


class ServerError(UploaderError):
    """The prediction service answered with a non-success status."""

    def __init__(self, status_code: int, message: str = SERVER_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(UploaderError):
    """The prediction service answered 2xx with a body we cannot use."""

    def __init__(self, message: str = MALFORMED_RESPONSE_MESSAGE, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.detail = detail


def error_message(exc: BaseException) -> str:
    """Message shown to the user for ``exc``."""

    message = str(exc)
    return message if message else FALLBACK_ERROR_MESSAGE


__all__ = [
    "FALLBACK_ERROR_MESSAGE",
    "INVALID_FILE_MESSAGE",
    "InvalidFileError",
    "MALFORMED_RESPONSE_MESSAGE",
    "MalformedResponseError",
    "SERVER_ERROR_MESSAGE",
    "ServerError",
    "TransportError",
    "UploaderError",
    "error_message",
]
