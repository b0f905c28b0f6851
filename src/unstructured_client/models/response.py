"""Partition response models."""
from __future__ import annotations

import json
from typing import Any, Union

from pydantic import BaseModel, Field

from unstructured_client.models.element import Element


class PartitionSuccess(BaseModel):
    """The service returned a list of elements."""

    elements: list[Element] = Field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return True

    def texts(self) -> list[str]:
        """Return the text of every element, in order."""
        return [element.text for element in self.elements]

    def to_list(self) -> list[dict[str, Any]]:
        return [element.to_dict() for element in self.elements]

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the elements back to the service's JSON shape."""
        return json.dumps(self.to_list(), indent=indent, ensure_ascii=False)


class PartitionFailure(BaseModel):
    """The service returned JSON that is not an element list.

    ``payload`` is the decoded body, left untouched.
    """

    payload: Any = None

    @property
    def is_success(self) -> bool:
        return False

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.payload, indent=indent, ensure_ascii=False)


PartitionResponse = Union[PartitionSuccess, PartitionFailure]
