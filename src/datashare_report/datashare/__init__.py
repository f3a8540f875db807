"""Azure Data Share API integration module."""

from datashare_report.datashare.client import DataShareClient
from datashare_report.datashare.models import Page, Share, ShareSynchronization

__all__ = [
    "DataShareClient",
    "Page",
    "Share",
    "ShareSynchronization",
]
