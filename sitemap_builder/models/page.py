from __future__ import annotations

from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any, Dict, Mapping, Union
from urllib.parse import urlsplit

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator

from sitemap_builder.exceptions import RecordValidationError


class ChangeFrequency(str, Enum):
    """How often a page is expected to change (sitemap ``changefreq``)."""

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


# Formats tried after ISO-8601 and RFC 2822 fail
_DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%d.%m.%Y",
    "%d %B %Y",
    "%B %d, %Y",
)

# Error locations reported by pydantic, mapped to the public field names
_FIELD_NAMES = {
    "url": "url",
    "last_mod": "lastMod",
    "lastMod": "lastMod",
    "priority": "priority",
    "frequency": "frequency",
}

_url_adapter = TypeAdapter(AnyUrl)

TimestampInput = Union[str, date, datetime]
FrequencyInput = Union[str, ChangeFrequency]


def _parse_timestamp(text: str) -> datetime:
    raw = text.strip()
    if not raw:
        raise ValueError("lastMod must not be empty")
    iso = raw[:-1] + "+00:00" if raw.endswith(("Z", "z")) else raw
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    try:
        return parsedate_to_datetime(raw)
    except (TypeError, ValueError):
        pass
    raise ValueError(f"unrecognized date/time: {text!r}")


def canonical_timestamp(value: TimestampInput) -> str:
    """Return ``value`` as ISO-8601 with seconds and a UTC offset.

    Naive values are taken to be UTC.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        moment = _parse_timestamp(value)
    else:
        raise ValueError(f"lastMod must be a string or datetime, got {type(value).__name__}")
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.isoformat(timespec="seconds")


class PageRecord(BaseModel):
    """One sitemap entry.

    Every field is validated on construction and the instance is frozen
    afterwards. Use ``make`` to get a ``RecordValidationError`` naming the
    failing field instead of pydantic's aggregated error.
    """

    url: str = Field(..., description="Absolute page URL (scheme and host required)")
    last_mod: str = Field(..., alias="lastMod", description="Last modification, ISO-8601 with offset")
    priority: float = Field(default=1.0, description="Crawl priority (0.0 - 1.0)")
    frequency: ChangeFrequency = Field(default=ChangeFrequency.WEEKLY, description="Change frequency")

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("url", mode="before")
    @classmethod
    def _check_url(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("url must be a string")
        if value != value.strip():
            raise ValueError("url must not have surrounding whitespace")
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            raise ValueError("url must be absolute (scheme and host)")
        try:
            parsed = _url_adapter.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"malformed url: {exc.errors()[0].get('msg')}") from exc
        if not parsed.host:
            raise ValueError("url must have a host")
        # Keep the caller's spelling; the parsed form may differ (trailing slash, case)
        return value

    @field_validator("last_mod", mode="before")
    @classmethod
    def _check_last_mod(cls, value: Any) -> str:
        return canonical_timestamp(value)

    @field_validator("priority", mode="before")
    @classmethod
    def _check_priority(cls, value: Any) -> float:
        if isinstance(value, bool):
            raise ValueError("priority must be a number")
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError("priority must be a number") from None
        # NaN fails both comparisons
        if not 0.0 <= number <= 1.0:
            raise ValueError("priority must be between 0.0 and 1.0")
        return number

    @field_validator("frequency", mode="before")
    @classmethod
    def _check_frequency(cls, value: Any) -> ChangeFrequency:
        if isinstance(value, ChangeFrequency):
            return value
        if isinstance(value, str):
            try:
                return ChangeFrequency(value)
            except ValueError:
                pass
        allowed = ", ".join(f.value for f in ChangeFrequency)
        raise ValueError(f"frequency must be one of: {allowed}")

    @classmethod
    def make(
        cls,
        url: str,
        last_mod: TimestampInput,
        priority: float = 1.0,
        frequency: FrequencyInput = ChangeFrequency.WEEKLY,
    ) -> "PageRecord":
        try:
            return cls(url=url, last_mod=last_mod, priority=priority, frequency=frequency)
        except ValidationError as exc:
            raise _to_record_error(exc) from exc

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PageRecord":
        """Build from a ``{url, lastMod, priority, frequency}`` mapping.

        ``priority`` and ``frequency`` fall back to their defaults when absent.
        """
        return cls.make(
            url=data.get("url"),
            last_mod=data.get("lastMod"),
            priority=data.get("priority", 1.0),
            frequency=data.get("frequency", ChangeFrequency.WEEKLY),
        )

    def replace(self, **changes: Any) -> "PageRecord":
        """Return a new, re-validated record with some fields changed."""
        values: Dict[str, Any] = {
            "url": self.url,
            "last_mod": self.last_mod,
            "priority": self.priority,
            "frequency": self.frequency,
        }
        unknown = set(changes) - set(values)
        if unknown:
            raise TypeError(f"Unknown PageRecord fields: {', '.join(sorted(unknown))}")
        values.update(changes)
        return type(self).make(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "loc": self.url,
            "lastmod": self.last_mod,
            "priority": self.priority,
            "changefreq": self.frequency.value,
        }


def _to_record_error(exc: ValidationError) -> RecordValidationError:
    # Fields validate in declaration order, so the first error is the first bad field
    first = exc.errors()[0]
    loc = first.get("loc") or ("url",)
    field = _FIELD_NAMES.get(str(loc[0]), str(loc[0]))
    reason = str(first.get("msg", "")).removeprefix("Value error, ")
    return RecordValidationError(field, first.get("input"), reason)
