from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator


class Page(BaseModel):
    """One page of raw upstream records plus whatever continuation hints the API gave.

    ``total`` is an authoritative record count when the indexer reports one.
    ``has_more`` is ``None`` when the indexer exposes no continuation signal,
    in which case only a short page ends the scan.
    """

    records: list[Any] = []
    total: int | None = None
    has_more: bool | None = None

    @field_validator("records", mode="before")
    @classmethod
    def _records_list(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []

    @classmethod
    def empty(cls) -> Page:
        return cls(records=[], total=None, has_more=False)
