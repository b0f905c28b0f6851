"""Unstructured client utility functions."""
from unstructured_client.utils.filename import part_filename
from unstructured_client.utils.logging import get_logger, redact_headers, set_log_level

__all__ = [
    "get_logger",
    "part_filename",
    "redact_headers",
    "set_log_level",
]
