"""Data models for the Azure Data Share management API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar

from dateutil import parser as dateparser

T = TypeVar("T")


def _parse_dt(s: str | None) -> datetime | None:
    """Parse an ARM timestamp string to an aware datetime, or None if empty.

    ARM returns ISO 8601 with up to seven fractional digits
    ("2024-03-01T10:15:30.1234567Z"). Naive values are taken as UTC.
    """
    if not s:
        return None
    try:
        parsed = dateparser.isoparse(s)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


@dataclass
class Page(Generic[T]):
    """One page of a list operation plus its continuation link."""

    items: list[T] = field(default_factory=list)
    next_link: str | None = None


@dataclass(frozen=True)
class Share:
    """A sent share in a Data Share account."""

    name: str

    @classmethod
    def from_api(cls, data: dict) -> Share:
        """Create from an ARM share resource."""
        return cls(name=data.get("name", ""))


@dataclass(frozen=True)
class ShareSynchronization:
    """One synchronization run of a sent share by its consumer."""

    consumer_tenant_name: str
    start_time: datetime | None = None

    @classmethod
    def from_api(cls, data: dict) -> ShareSynchronization:
        """Create from a ``listSynchronizations`` result item."""
        return cls(
            consumer_tenant_name=data.get("consumerTenantName") or "",
            start_time=_parse_dt(data.get("startTime")),
        )
