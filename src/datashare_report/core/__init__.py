"""Core utilities for Data Share reporting."""

from datashare_report.core.arm_client import get_arm_access_token, get_azure_credential
from datashare_report.core.config import ReportSettings, get_settings
from datashare_report.core.errors import (
    DataShareApiError,
    DataShareReportError,
    DuplicateTenantError,
)

__all__ = [
    "DataShareApiError",
    "DataShareReportError",
    "DuplicateTenantError",
    "ReportSettings",
    "get_arm_access_token",
    "get_azure_credential",
    "get_settings",
]
