"""Usage report data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

# Last sync for a tenant whose synchronizations carry no start time
ZERO_TIMESTAMP = datetime.min.replace(tzinfo=UTC)

# Percentage reported when the account has no sent shares
NO_SHARES_PERCENTAGE = -1.0


@dataclass(frozen=True)
class TenantSync:
    """Most recent synchronization of one consumer tenant."""

    name: str
    last_sync: datetime = ZERO_TIMESTAMP
    share_name: str = ""

    def is_stale(self, threshold: datetime) -> bool:
        """True if the last sync is strictly earlier than ``threshold``."""
        return self.last_sync < threshold

    def to_dict(self) -> dict:
        return {"name": self.name, "lastSync": self.last_sync.isoformat()}


@dataclass(frozen=True)
class UsageTotals:
    """Account-wide totals."""

    synced_at_least_once_but_not_synced_for_30_days: int
    synced_at_least_once_but_not_synced_for_30_days_percentage: float
    sent_shares: int
    sent_share_with_sync_activity: int
    sent_share_with_sync_activity_percentage: float

    def to_dict(self) -> dict:
        return {
            "syncedAtLeastOnceButNotSyncedFor30Days": (
                self.synced_at_least_once_but_not_synced_for_30_days
            ),
            "syncedAtLeastOnceButNotSyncedFor30DaysPercentage": (
                self.synced_at_least_once_but_not_synced_for_30_days_percentage
            ),
            "sentShares": self.sent_shares,
            "sentShareWithSyncActivity": self.sent_share_with_sync_activity,
            "sentShareWithSyncActivityPercentage": self.sent_share_with_sync_activity_percentage,
        }


@dataclass(frozen=True)
class UsageReport:
    """Point-in-time usage report for a Data Share account."""

    totals: UsageTotals
    tenant_syncs: tuple[TenantSync, ...] = field(default_factory=tuple)
    tenants_synced_at_least_once_but_not_synced_for_30_days: tuple[str, ...] = field(
        default_factory=tuple
    )
    generated_at: datetime | None = None

    @property
    def stale_tenants(self) -> tuple[str, ...]:
        """Names of tenants with no sync in the staleness window."""
        return self.tenants_synced_at_least_once_but_not_synced_for_30_days

    def to_dict(self) -> dict:
        """Convert to the camelCase JSON report shape."""
        return {
            "totals": self.totals.to_dict(),
            "tenantSyncs": [t.to_dict() for t in self.tenant_syncs],
            "tenantsSyncedAtLeastOnceButNotSyncedFor30Days": list(
                self.tenants_synced_at_least_once_but_not_synced_for_30_days
            ),
        }
