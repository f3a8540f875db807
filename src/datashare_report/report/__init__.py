"""Usage report engine: pagination and aggregation."""

from datashare_report.report.aggregator import (
    TenantSyncMap,
    add_share,
    build_usage_report,
    collect_usage_report,
    report_from_tenants,
    share_percentage,
)
from datashare_report.report.models import TenantSync, UsageReport, UsageTotals
from datashare_report.report.output import render_report, write_report
from datashare_report.report.paginator import extract_skip_token, get_all_pages

__all__ = [
    "TenantSync",
    "TenantSyncMap",
    "UsageReport",
    "UsageTotals",
    "add_share",
    "build_usage_report",
    "collect_usage_report",
    "extract_skip_token",
    "get_all_pages",
    "render_report",
    "report_from_tenants",
    "share_percentage",
    "write_report",
]
