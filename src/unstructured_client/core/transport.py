"""HTTP transport for partition requests."""
from __future__ import annotations

import threading
from typing import Mapping, Sequence

import httpx

from unstructured_client.core.encoder import FilePart
from unstructured_client.errors import FileIOError, RequestFailed
from unstructured_client.utils.logging import get_logger

logger = get_logger("transport")


class HttpxTransport:
    """Send multipart partition requests with httpx.

    The underlying ``httpx.Client`` and ``httpx.AsyncClient`` are created on
    first use and kept, with their connection pools, until :meth:`close` or
    :meth:`aclose`.

    Args:
        timeout_seconds: Request timeout, or None to wait indefinitely.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        timeout_seconds: float | None = None,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        self._client: httpx.Client | None = None
        self._async_client: httpx.AsyncClient | None = None
        self._lock = threading.Lock()

    def send(
        self,
        url: str,
        fields: Sequence[tuple[str, str]],
        file_part: FilePart,
        headers: Mapping[str, str],
    ) -> tuple[int, bytes]:
        """POST the form and return ``(status_code, body)``."""
        files = self._files(file_part)
        try:
            response = self._get_client().post(
                url, data=dict(fields), files=files, headers=dict(headers)
            )
        except httpx.HTTPError as e:
            raise RequestFailed(f"Request to {url} failed: {e}") from e
        logger.debug("HTTP %d, %d bytes", response.status_code, len(response.content))
        return response.status_code, response.content

    async def asend(
        self,
        url: str,
        fields: Sequence[tuple[str, str]],
        file_part: FilePart,
        headers: Mapping[str, str],
    ) -> tuple[int, bytes]:
        """Async variant of :meth:`send`."""
        files = self._files(file_part)
        try:
            response = await self._get_async_client().post(
                url, data=dict(fields), files=files, headers=dict(headers)
            )
        except httpx.HTTPError as e:
            raise RequestFailed(f"Request to {url} failed: {e}") from e
        logger.debug("HTTP %d, %d bytes", response.status_code, len(response.content))
        return response.status_code, response.content

    def close(self) -> None:
        """Close the sync client. A later :meth:`send` opens a new one."""
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    async def aclose(self) -> None:
        """Close both clients."""
        self.close()
        client, self._async_client = self._async_client, None
        if client is not None:
            await client.aclose()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _get_client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=self.timeout_seconds,
                    transport=self._transport,  # type: ignore[arg-type]
                )
            return self._client

    def _get_async_client(self) -> httpx.AsyncClient:
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(
                timeout=self.timeout_seconds,
                transport=self._transport,  # type: ignore[arg-type]
            )
        return self._async_client

    @staticmethod
    def _files(file_part: FilePart) -> dict[str, tuple[str, bytes]]:
        try:
            content = file_part.path.read_bytes()
        except OSError as e:
            raise FileIOError(str(file_part.path), str(e)) from e
        logger.debug("Read %d bytes from %s", len(content), file_part.path)
        return {file_part.field_name: (file_part.filename, content)}
