"""JSON serialization profile shared by every request and response.

All payloads go through one :class:`SerializationProfile`, which fixes how
the wire format maps onto Python types:

- property names use web casing (camelCase), matched case-insensitively when
  reading; fields the API spells in snake_case declare that alias explicitly
- enums are ``str`` enums and travel as the API's string values
- date-times are timezone-aware: values the API sends without an offset are
  placed in the profile's time zone, and every instant is written in UTC
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo
from functools import lru_cache
from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PlainSerializer,
    SerializationInfo,
    TypeAdapter,
    ValidationInfo,
    model_validator,
)
from pydantic.alias_generators import to_camel

T = TypeVar("T")

TIMEZONE_CONTEXT_KEY = "timezone"


def _context_zone(context: Any) -> tzinfo:
    if isinstance(context, dict):
        return context.get(TIMEZONE_CONTEXT_KEY, UTC)
    return UTC


def _attach_zone(value: datetime, info: ValidationInfo) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=_context_zone(info.context))
    return value


def _write_instant(value: datetime, info: SerializationInfo) -> str:
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=_context_zone(info.context))
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


ZonedDateTime = Annotated[
    datetime,
    AfterValidator(_attach_zone),
    PlainSerializer(_write_instant, return_type=str, when_used="json"),
]
"""A timezone-aware date-time as exchanged with the API."""


class ApiModel(BaseModel):
    """Base model for every payload exchanged with the Nordigen API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        """Rename incoming keys to the declared alias when they differ only in case."""
        if not isinstance(data, dict):
            return data
        aliases: dict[str, str] = {}
        for name, model_field in cls.model_fields.items():
            alias = model_field.alias or name
            aliases[alias.lower()] = alias
        declared = set(aliases.values())
        matched: dict[Any, Any] = {}
        for key, value in data.items():
            if isinstance(key, str) and key not in declared:
                key = aliases.get(key.lower(), key)
            matched.setdefault(key, value)
        return matched


@lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


@dataclass(frozen=True)
class SerializationProfile:
    """Immutable codec settings applied to every request and response body.

    Attributes:
        timezone: Zone used for date-times that arrive without an offset.
    """

    timezone: tzinfo = field(default=UTC)

    @property
    def context(self) -> dict[str, Any]:
        return {TIMEZONE_CONTEXT_KEY: self.timezone}

    def dump(self, body: Any) -> bytes:
        """Serializes a request body to JSON bytes."""
        return _adapter(type(body)).dump_json(
            body, by_alias=True, exclude_none=True, context=self.context
        )

    def load(self, content: bytes | str, result_type: type[T]) -> T | None:
        """Deserializes a response body, returning None when it holds nothing.

        Raises:
            pydantic.ValidationError: If the content is not valid JSON for
                ``result_type``.
        """
        raw = content.encode() if isinstance(content, str) else content
        if not raw.strip() or raw.strip() == b"null":
            return None
        return _adapter(result_type).validate_json(raw, context=self.context)

