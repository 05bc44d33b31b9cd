"""Pagination options applied after filtering and sorting."""

from pydantic import BaseModel, ConfigDict, Field


class PageOptions(BaseModel):
    """Skip ``offset`` matching rows, then return at most ``limit`` rows."""

    offset: int = Field(default=0, ge=0)
    limit: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    def apply(self, items: list) -> list:
        return items[self.offset : self.offset + self.limit]
