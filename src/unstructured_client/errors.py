"""Exceptions raised by the Unstructured client."""
from __future__ import annotations


class UnstructuredClientError(Exception):
    """Base exception for the Unstructured client."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidConfiguration(UnstructuredClientError):
    """Client or request configuration cannot be used."""


class InvalidFileName(InvalidConfiguration):
    """File name cannot be sent as a multipart part filename."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        super().__init__(f"Invalid file name {filename!r}: {reason}")


class FileIOError(UnstructuredClientError):
    """File to partition could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not read {path}: {reason}")


class RequestFailed(UnstructuredClientError):
    """Network or transport error while talking to the service.

    The underlying httpx exception is kept as ``__cause__``.
    """


class MalformedBody(UnstructuredClientError):
    """Response body is not valid JSON."""

    PREFIX_LENGTH = 200

    def __init__(self, body: bytes, reason: str) -> None:
        self.size = len(body)
        self.prefix = body[: self.PREFIX_LENGTH]
        super().__init__(
            f"Malformed response body ({self.size} bytes): {reason}; "
            f"starts with {self.prefix!r}"
        )
