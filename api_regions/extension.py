"""
Feature-file extension record carrying an api-regions declaration.

A feature file groups its extensions by name; the ``api-regions`` extension
has JSON type and its text is the region array understood by
:mod:`api_regions.codec`. Only the text is used here, nothing else of the
feature model is interpreted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

API_REGIONS_EXTENSION_NAME = "api-regions"


class ExtensionType(str, Enum):
    """Payload kind of a feature-file extension."""

    JSON = "JSON"
    TEXT = "TEXT"
    ARTIFACTS = "ARTIFACTS"


@dataclass(frozen=True)
class Extension:
    """A named feature-file extension and its textual payload."""

    name: str
    type: ExtensionType
    text: str

    @property
    def is_json(self) -> bool:
        return self.type == ExtensionType.JSON
