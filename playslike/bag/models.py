from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class BagClub(BaseModel):
    key: str
    name: str
    is_enabled: bool = Field(default=True, alias="isEnabled")
    custom_distance: float = Field(..., gt=0, alias="customDistance")
    sort_order: int = Field(default=0, alias="sortOrder")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def normal_yardage(self) -> float:
        return self.custom_distance


class BagSnapshot(BaseModel):
    clubs: List[BagClub]

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["BagClub", "BagSnapshot"]
