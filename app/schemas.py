from __future__ import annotations

import re
from datetime import date
from typing import Any, Iterable, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    requestId: Optional[str] = None


class FieldViolation(BaseModel):
    field: str
    message: str


class Health(BaseModel):
    status: str = "ok"


# === Request payloads ===


class UserIn(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    email: str = Field(min_length=1, max_length=320)


class BoardIn(BaseModel):
    name: str = Field(min_length=3, max_length=50)
    adminUserId: UUID


class ListIn(BaseModel):
    name: str = Field(min_length=1, max_length=140)
    boardId: UUID


class CardIn(BaseModel):
    title: str = Field(min_length=5, max_length=30)
    description: str = Field(min_length=4, max_length=100)
    due_date: date
    list_id: UUID
    ownerUserId: UUID

    @field_validator("due_date", mode="before")
    @classmethod
    def due_date_is_iso_string(cls, value: Any) -> date:
        # pydantic's own date parsing would also take timestamps and datetimes
        if not isinstance(value, str):
            raise ValueError("due_date must be a string")
        if not ISO_DATE.fullmatch(value):
            raise ValueError("due_date must be a YYYY-MM-DD date")
        return date.fromisoformat(value)


class MemberIn(BaseModel):
    cardId: UUID
    memberUserId: UUID


# === Responses ===


class UserOut(BaseModel):
    id: str
    name: str
    email: str


class BoardOut(BaseModel):
    id: str
    name: str


class BoardSummary(BaseModel):
    id: str
    name: str
    adminUserId: str


class ListOut(BaseModel):
    id: str
    name: str
    boardId: str


class ListSummary(BaseModel):
    id: str
    name: str


class CardOut(BaseModel):
    id: str
    title: str
    description: str
    due_date: date
    list_id: str


class CardSummary(BaseModel):
    id: str
    title: str
    description: str
    due_date: date
    ownerUsername: str


class MemberOut(BaseModel):
    id: int
    cardId: str
    userId: str
    isOwner: bool


def field_violations(errors: Iterable[dict[str, Any]]) -> list[FieldViolation]:
    """Flatten pydantic error dicts into one message per offending field."""
    out = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path")]
        out.append(FieldViolation(field=".".join(loc) or "body", message=err.get("msg", "invalid")))
    return out
