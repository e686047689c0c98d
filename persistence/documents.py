from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, JsonValue


class LoadStatus(str, Enum):
    FOUND = "found"
    ABSENT = "absent"
    # Present on disk but unparseable; callers treat it like ABSENT.
    CORRUPTED = "corrupted"


class LoadResult(BaseModel):
    """
    Outcome of reading one page document.

    `value` is only meaningful for FOUND; a stored JSON `null` is FOUND with
    value None, which is why the status is kept separately.
    """

    status: LoadStatus
    value: JsonValue = None
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.status is LoadStatus.FOUND

    @classmethod
    def absent(cls) -> "LoadResult":
        return cls(status=LoadStatus.ABSENT)

    @classmethod
    def corrupted(cls, error: str) -> "LoadResult":
        return cls(status=LoadStatus.CORRUPTED, error=error)
