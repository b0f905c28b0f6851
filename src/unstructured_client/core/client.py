"""Client for the Unstructured partition API."""
from __future__ import annotations

import logging
from pathlib import Path

import httpx

from unstructured_client._version import __version__
from unstructured_client.core.decoder import decode_partition_response
from unstructured_client.core.encoder import WireForm, encode_form
from unstructured_client.core.transport import HttpxTransport
from unstructured_client.errors import InvalidConfiguration
from unstructured_client.models.config import (
    PARTITION_PATH,
    ClientConfig,
    PartitionParameters,
)
from unstructured_client.models.response import PartitionResponse
from unstructured_client.utils.logging import get_logger, redact_headers

logger = get_logger("client")

DEFAULT_USER_AGENT = f"unstructured-python-client/{__version__}"


class UnstructuredClient:
    """Partition documents with an Unstructured API server.

    The endpoint URL and headers are resolved once at construction, so a
    client can be shared across threads and tasks. Connections are pooled
    by the transport; use the client as a context manager, or call
    :meth:`close`, to release them.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: HttpxTransport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.url = self._partition_url(self.config.base_url)
        self.headers = self._build_headers(self.config)
        self._transport = transport or HttpxTransport(
            timeout_seconds=self.config.timeout_seconds
        )

    def partition_file(
        self,
        file_path: str | Path,
        params: PartitionParameters | None = None,
    ) -> PartitionResponse:
        """Upload a file and decode the elements the service returns.

        Args:
            file_path: Path of the document to partition.
            params: Partition options; defaults are used when omitted.

        Returns:
            PartitionSuccess with the elements, or PartitionFailure with the
            service's error payload.

        Raises:
            InvalidFileName: The file name cannot be sent.
            FileIOError: The file cannot be read.
            RequestFailed: The request did not complete.
            MalformedBody: The response is not JSON.
        """
        form = self._encode(file_path, params)
        status, body = self._transport.send(
            self.url, form.fields, form.file, self.headers
        )
        return self._decode(status, body)

    async def apartition_file(
        self,
        file_path: str | Path,
        params: PartitionParameters | None = None,
    ) -> PartitionResponse:
        """Async variant of :meth:`partition_file`."""
        form = self._encode(file_path, params)
        status, body = await self._transport.asend(
            self.url, form.fields, form.file, self.headers
        )
        return self._decode(status, body)

    def close(self) -> None:
        self._transport.close()

    async def aclose(self) -> None:
        await self._transport.aclose()

    def __enter__(self) -> "UnstructuredClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> "UnstructuredClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _encode(
        self,
        file_path: str | Path,
        params: PartitionParameters | None,
    ) -> WireForm:
        form = encode_form(params or PartitionParameters(), file_path)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "POST %s with %s (%d fields), headers %s",
                self.url,
                form.file.filename,
                len(form.fields),
                redact_headers(self.headers, [self.config.api_key_header]),
            )
        return form

    def _decode(self, status: int, body: bytes) -> PartitionResponse:
        if not 200 <= status < 300:
            logger.warning("Partition request returned HTTP %d", status)
        return decode_partition_response(body)

    @staticmethod
    def _partition_url(base_url: str) -> str:
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise InvalidConfiguration(f"Invalid base URL {base_url!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidConfiguration(
                f"Invalid base URL {base_url!r}: expected an http(s) URL"
            )
        return str(url.join(PARTITION_PATH))

    @staticmethod
    def _build_headers(config: ClientConfig) -> dict[str, str]:
        headers = {"User-Agent": config.user_agent or DEFAULT_USER_AGENT}
        if config.api_key:
            headers[config.api_key_header] = config.api_key
        return headers


def partition(
    file_path: str | Path,
    params: PartitionParameters | None = None,
    config: ClientConfig | None = None,
) -> PartitionResponse:
    """Partition a document.

    This is the main entry point for the library.

    Args:
        file_path: Path of the document
        params: Partition options
        config: Server URL, API key and transport settings

    Returns:
        PartitionSuccess or PartitionFailure
    """
    with UnstructuredClient(config) as client:
        return client.partition_file(file_path, params)
