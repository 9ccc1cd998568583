"""
Record-level schema for raw transaction input (JSON exports, API payloads).

The engine itself works on DataFrames; this is the ingestion gate that turns
untrusted dicts into well-typed rows before they reach it.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionRecord(BaseModel):
    """One transaction as supplied by the store. Accepts camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: str
    amount: float = Field(gt=0)
    type: Literal["income", "expense"]
    category: str
    date: dt.date
    is_recurring: bool = Field(default=False, alias="isRecurring")

    title: Optional[str] = None
    is_paid: Optional[bool] = Field(default=None, alias="isPaid")
    due_date: Optional[dt.date] = Field(default=None, alias="dueDate")
    notes: Optional[str] = None
    source: Optional[str] = None
    is_variable: Optional[bool] = Field(default=None, alias="isVariable")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> str:
        return str(v)

    @field_validator("category")
    @classmethod
    def _strip_category(cls, v: str) -> str:
        return v.strip()

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=False)


def parse_records(raw: Iterable[Dict[str, Any]]) -> List[TransactionRecord]:
    """Validate raw dicts; pydantic.ValidationError propagates on the first bad record."""
    return [TransactionRecord.model_validate(r) for r in raw]
