from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, StrictStr, TypeAdapter


class RegionDeclaration(BaseModel):
    """One element of the api-regions JSON array."""

    name: StrictStr
    exports: List[StrictStr] = Field(default_factory=list)


RegionDeclarations = TypeAdapter(List[RegionDeclaration])
