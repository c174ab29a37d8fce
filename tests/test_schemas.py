from datetime import date
from uuid import UUID

import pytest
from pydantic import ValidationError

from app.schemas import BoardIn, CardIn, MemberIn, field_violations

LIST_ID = "0b6f3a1e-8a4f-4a53-9d1e-1f0f7d8a2c11"
OWNER_ID = "5d0c2a4e-1b9f-4c8e-8f7a-3e2d1c0b9a87"


def test_card_in_parses_date_and_ids():
    card = CardIn(
        title="Write spec",
        description="Draft v1",
        due_date="2024-01-01",
        list_id=LIST_ID,
        ownerUserId=OWNER_ID,
    )
    assert card.due_date == date(2024, 1, 1)
    assert card.list_id == UUID(LIST_ID)


def test_card_in_reports_every_bad_field():
    with pytest.raises(ValidationError) as exc:
        CardIn(title="abc", description="xy", due_date=20240101, list_id="nope", ownerUserId=OWNER_ID)
    fields = [v.field for v in field_violations(exc.value.errors())]
    assert sorted(fields) == ["description", "due_date", "list_id", "title"]


def test_string_fields_are_not_coerced():
    with pytest.raises(ValidationError):
        BoardIn(name=12345, adminUserId=OWNER_ID)


def test_member_in_missing_fields():
    with pytest.raises(ValidationError) as exc:
        MemberIn.model_validate({})
    assert {v.field for v in field_violations(exc.value.errors())} == {"cardId", "memberUserId"}


def test_due_date_must_be_calendar_date():
    for value in ("0", "1704067200", "2024-01-01T00:00:00", "20240101"):
        with pytest.raises(ValidationError) as exc:
            CardIn(
                title="Write spec",
                description="Draft v1",
                due_date=value,
                list_id=LIST_ID,
                ownerUserId=OWNER_ID,
            )
        assert [v.field for v in field_violations(exc.value.errors())] == ["due_date"]
