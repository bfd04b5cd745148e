"""Tests for the JSON serialization profile."""

import json
import time
from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from nordigen.models import (
    AccountStatus,
    Balance,
    BalanceType,
    Requisition,
    RequisitionCreation,
    RequisitionStatus,
)
from nordigen.models.accounts import Account
from nordigen.serialization import ApiModel, SerializationProfile, ZonedDateTime


class Event(ApiModel):
    occurred_at: ZonedDateTime
    status: AccountStatus | None = None


@pytest.fixture
def profile() -> SerializationProfile:
    return SerializationProfile()


def test_property_names_use_camel_case(profile: SerializationProfile):
    body = Event(occurred_at=datetime(2022, 1, 1, tzinfo=UTC))
    assert json.loads(profile.dump(body)) == {"occurredAt": "2022-01-01T00:00:00Z"}


def test_property_names_match_case_insensitively(profile: SerializationProfile):
    event = profile.load(b'{"OCCURREDAT": "2022-01-01T00:00:00Z"}', Event)
    assert event is not None
    assert event.occurred_at == datetime(2022, 1, 1, tzinfo=UTC)


def test_snake_case_wire_names_are_kept(profile: SerializationProfile):
    """Test fields the API spells in snake_case are written that way."""
    creation = RequisitionCreation(
        redirect="https://example.com", institution_id="SANDBOXFINANCE_SFIN0000"
    )
    assert json.loads(profile.dump(creation)) == {
        "redirect": "https://example.com",
        "institution_id": "SANDBOXFINANCE_SFIN0000",
    }


def test_enum_round_trip_uses_names(profile: SerializationProfile):
    """Test enums travel as their string names, never as ordinals."""
    body = Event(occurred_at=datetime(2022, 1, 1, tzinfo=UTC), status=AccountStatus.READY)

    content = profile.dump(body)
    loaded = profile.load(content, Event)

    assert json.loads(content)["status"] == "READY"
    assert loaded is not None
    assert loaded.status is AccountStatus.READY


def test_requisition_status_codes_decode_to_members(profile: SerializationProfile):
    requisition = profile.load(
        b'{"id": "8126e9fb-93c9-4228-937c-68f0383c2df7", "status": "GC",'
        b' "institution_id": "SANDBOXFINANCE_SFIN0000"}',
        Requisition,
    )
    assert requisition is not None
    assert requisition.status is RequisitionStatus.GIVING_CONSENT


def test_instant_round_trip(profile: SerializationProfile):
    instant = datetime(2022, 3, 27, 1, 30, tzinfo=timezone(timedelta(hours=2)))
    content = profile.dump(Event(occurred_at=instant))
    loaded = profile.load(content, Event)

    assert json.loads(content) == {"occurredAt": "2022-03-26T23:30:00Z"}
    assert loaded is not None
    assert loaded.occurred_at == instant


@pytest.mark.skipif(not hasattr(time, "tzset"), reason="requires time.tzset")
def test_instant_serialization_ignores_host_timezone(profile, monkeypatch):
    """Test the same instant serializes identically under different host zones."""
    instant = datetime(2022, 7, 1, 12, 0, tzinfo=UTC)
    outputs = []
    try:
        for host_zone in ("UTC", "America/New_York", "Asia/Tokyo"):
            monkeypatch.setenv("TZ", host_zone)
            time.tzset()
            content = profile.dump(Event(occurred_at=instant))
            outputs.append(content)
            loaded = profile.load(content, Event)
            assert loaded is not None
            assert loaded.occurred_at == instant
    finally:
        monkeypatch.undo()
        time.tzset()

    assert len(set(outputs)) == 1


def test_naive_values_are_placed_in_profile_zone():
    riga = ZoneInfo("Europe/Riga")
    profile = SerializationProfile(timezone=riga)

    event = profile.load(b'{"occurredAt": "2022-01-01T12:00:00"}', Event)

    assert event is not None
    assert event.occurred_at.tzinfo is riga
    assert event.occurred_at == datetime(2022, 1, 1, 10, 0, tzinfo=UTC)


def test_offset_values_keep_their_offset():
    profile = SerializationProfile(timezone=ZoneInfo("Europe/Riga"))

    event = profile.load(b'{"occurredAt": "2022-01-01T12:00:00+00:00"}', Event)

    assert event is not None
    assert event.occurred_at == datetime(2022, 1, 1, 12, 0, tzinfo=UTC)


@pytest.mark.parametrize("content", [b"", b"   ", b"null", ""])
def test_load_empty_content_returns_none(profile: SerializationProfile, content):
    assert profile.load(content, Event) is None


def test_load_list_of_models(profile: SerializationProfile):
    balances = profile.load(
        b'[{"balanceAmount": {"amount": "657.49", "currency": "EUR"},'
        b' "balanceType": "interimAvailable", "referenceDate": "2021-11-22"}]',
        list[Balance],
    )
    assert balances is not None
    assert balances[0].balance_amount.amount == Decimal("657.49")
    assert balances[0].balance_type is BalanceType.INTERIM_AVAILABLE
    assert balances[0].reference_date == date(2021, 11, 22)


def test_unknown_properties_are_kept(profile: SerializationProfile):
    account = profile.load(
        b'{"id": "3fa85f64-5717-4562-b3fc-2c963f66afa6", "created": "2022-01-01T00:00:00Z",'
        b' "institution_id": "SANDBOXFINANCE_SFIN0000", "status": "READY",'
        b' "new_field": 1}',
        Account,
    )
    assert account is not None
    assert account.model_extra == {"new_field": 1}


def test_profile_is_immutable(profile: SerializationProfile):
    with pytest.raises(AttributeError):
        profile.timezone = ZoneInfo("Europe/Riga")  # type: ignore[misc]
