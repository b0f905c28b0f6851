"""Decode partition responses."""
from __future__ import annotations

import json

from pydantic import TypeAdapter, ValidationError

from unstructured_client.errors import MalformedBody
from unstructured_client.models.element import Element
from unstructured_client.models.response import (
    PartitionFailure,
    PartitionResponse,
    PartitionSuccess,
)
from unstructured_client.utils.logging import get_logger

logger = get_logger("decoder")

_ELEMENT_LIST = TypeAdapter(list[Element])


def decode_partition_response(body: bytes | str) -> PartitionResponse:
    """Decode a response body into a success or failure.

    The body's shape decides the outcome: a JSON array of valid elements is
    a :class:`PartitionSuccess`, any other JSON value is a
    :class:`PartitionFailure` carrying that value.

    Args:
        body: Raw response body.

    Returns:
        The decoded response.

    Raises:
        MalformedBody: If the body is not valid JSON.
    """
    raw = body.encode("utf-8") if isinstance(body, str) else body
    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise MalformedBody(raw, str(e)) from e

    try:
        elements = _ELEMENT_LIST.validate_python(payload)
    except ValidationError as e:
        logger.debug("Response is not an element list: %s", e)
        return PartitionFailure(payload=payload)

    logger.debug("Decoded %d elements", len(elements))
    return PartitionSuccess(elements=elements)
