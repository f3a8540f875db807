"""Fold shares and their synchronizations into a usage report."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from datetime import UTC, datetime, timedelta
from decimal import ROUND_HALF_EVEN, Decimal
from typing import TYPE_CHECKING

from datashare_report.core.errors import DuplicateTenantError
from datashare_report.datashare.models import ShareSynchronization
from datashare_report.report.models import (
    NO_SHARES_PERCENTAGE,
    ZERO_TIMESTAMP,
    TenantSync,
    UsageReport,
    UsageTotals,
)
from datashare_report.report.paginator import get_all_pages

if TYPE_CHECKING:
    from datashare_report.datashare.client import DataShareClient

logger = logging.getLogger(__name__)

DEFAULT_STALE_AFTER_DAYS = 30

_TWO_PLACES = Decimal("0.01")


class TenantSyncMap:
    """Tenant records keyed by tenant name, rejecting duplicate names."""

    def __init__(self) -> None:
        self._records: dict[str, TenantSync] = {}

    def add(self, record: TenantSync) -> None:
        """Insert a record, raising if the tenant name is already present.

        Raises:
            DuplicateTenantError: If another share already maps to this tenant
        """
        existing = self._records.get(record.name)
        if existing is not None:
            raise DuplicateTenantError(record.name, existing.share_name, record.share_name)
        self._records[record.name] = record

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TenantSync]:
        return iter(self._records.values())


def share_percentage(sent_shares: int, count: int) -> float:
    """Percentage of all sent shares represented by ``count``.

    Computed as ``100 - ((sent_shares - count) / sent_shares * 100)`` in
    decimal arithmetic, rounded half-to-even to two places. Returns -1 when
    there are no sent shares.
    """
    if sent_shares == 0:
        return NO_SHARES_PERCENTAGE

    total = Decimal(sent_shares)
    value = Decimal(100) - (Decimal(sent_shares - count) / total * 100)
    return float(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN))


def tenant_sync_for_share(
    share_name: str, synchronizations: Sequence[ShareSynchronization]
) -> TenantSync | None:
    """Build the tenant record for one share, or None if it never synced.

    A sent share targets a single tenant, so the first synchronization's
    tenant name identifies it. Missing start times count as ZERO_TIMESTAMP.
    """
    if not synchronizations:
        return None

    return TenantSync(
        name=synchronizations[0].consumer_tenant_name,
        last_sync=max(s.start_time or ZERO_TIMESTAMP for s in synchronizations),
        share_name=share_name,
    )


def add_share(
    tenants: TenantSyncMap,
    share_name: str,
    synchronizations: Sequence[ShareSynchronization],
) -> TenantSync | None:
    """Fold one share's synchronizations into ``tenants``.

    Returns the new record, or None if the share never synced.

    Raises:
        DuplicateTenantError: If another share already maps to the same tenant
    """
    record = tenant_sync_for_share(share_name, synchronizations)
    if record is None:
        logger.debug(f"Share '{share_name}' has no synchronizations")
        return None
    tenants.add(record)
    return record


def report_from_tenants(
    share_count: int,
    tenants: TenantSyncMap,
    now: datetime,
    stale_after_days: int = DEFAULT_STALE_AFTER_DAYS,
) -> UsageReport:
    """Compute totals and sorted tenant listings from completed tenant records.

    Args:
        share_count: Number of sent shares, including ones that never synced
        tenants: Tenant records folded from every share
        now: Report time; the staleness threshold is derived from it once
        stale_after_days: Days without a sync before a tenant is stale
    """
    threshold = now - timedelta(days=stale_after_days)
    stale = sorted(t.name for t in tenants if t.is_stale(threshold))
    active = len(tenants)

    totals = UsageTotals(
        synced_at_least_once_but_not_synced_for_30_days=len(stale),
        synced_at_least_once_but_not_synced_for_30_days_percentage=share_percentage(
            share_count, len(stale)
        ),
        sent_shares=share_count,
        sent_share_with_sync_activity=active,
        sent_share_with_sync_activity_percentage=share_percentage(share_count, active),
    )

    return UsageReport(
        totals=totals,
        tenant_syncs=tuple(sorted(tenants, key=lambda t: t.name)),
        tenants_synced_at_least_once_but_not_synced_for_30_days=tuple(stale),
        generated_at=now,
    )


def build_usage_report(
    share_count: int,
    share_syncs: Iterable[tuple[str, Sequence[ShareSynchronization]]],
    now: datetime,
    stale_after_days: int = DEFAULT_STALE_AFTER_DAYS,
) -> UsageReport:
    """Aggregate shares and their synchronizations into a UsageReport.

    ``share_syncs`` is consumed in order and folded one share at a time, so a
    duplicate tenant stops iteration at the offending share.

    Args:
        share_count: Number of sent shares in the account
        share_syncs: ``(share_name, synchronizations)`` pairs; shares that
            never synced may be listed with no synchronizations or left out
        now: Report time
        stale_after_days: Days without a sync before a tenant is stale

    Raises:
        DuplicateTenantError: If two shares resolve to the same tenant name
    """
    tenants = TenantSyncMap()
    for share_name, synchronizations in share_syncs:
        add_share(tenants, share_name, synchronizations)
    return report_from_tenants(share_count, tenants, now, stale_after_days)


async def collect_usage_report(
    client: DataShareClient,
    now: datetime | None = None,
    stale_after_days: int = DEFAULT_STALE_AFTER_DAYS,
) -> UsageReport:
    """Retrieve all shares and synchronizations, then build the report.

    Pages are fetched one at a time: first every share, then each share's
    synchronizations in share order. Each share is folded as soon as its
    synchronizations are drained, so a duplicate tenant aborts before any
    later share is fetched.

    Args:
        client: Open DataShareClient for the account
        now: Report time. If None, the current UTC time is captured once.
        stale_after_days: Days without a sync before a tenant is stale
    """
    now = now or datetime.now(UTC)

    shares = await get_all_pages(client.list_shares, "shares")
    logger.info(f"Found {len(shares)} sent shares in {client.account_name}")

    tenants = TenantSyncMap()
    for share in shares:

        async def fetch(skip_token: str | None, share_name: str = share.name):
            return await client.list_synchronizations(share_name, skip_token)

        synchronizations = await get_all_pages(
            fetch, f"synchronizations for share '{share.name}'"
        )
        add_share(tenants, share.name, synchronizations)

    report = report_from_tenants(len(shares), tenants, now, stale_after_days)
    logger.info(
        f"{report.totals.sent_share_with_sync_activity} of {report.totals.sent_shares} shares "
        f"have synced, {report.totals.synced_at_least_once_but_not_synced_for_30_days} stale"
    )
    return report
