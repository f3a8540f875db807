"""CLI script to produce a usage report for an Azure Data Share account."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx

from datashare_report import __version__
from datashare_report.core.config import get_settings
from datashare_report.core.errors import DataShareApiError, DuplicateTenantError
from datashare_report.datashare.client import DataShareClient
from datashare_report.report.aggregator import collect_usage_report
from datashare_report.report.models import UsageReport
from datashare_report.report.output import render_report, write_report

logger = logging.getLogger(__name__)


def missing_arguments(args: argparse.Namespace) -> list[str]:
    """Return the option names whose values are missing or blank."""
    required = {
        "--subscription-id": args.subscription_id,
        "--resource-group-name": args.resource_group_name,
        "--data-share-name": args.data_share_name,
    }
    return [name for name, value in required.items() if not value or not value.strip()]


async def run_report(
    subscription_id: str,
    resource_group_name: str,
    data_share_name: str,
) -> UsageReport:
    """Collect the usage report for one Data Share account."""
    settings = get_settings()
    async with DataShareClient(
        subscription_id, resource_group_name, data_share_name, settings=settings
    ) as client:
        return await collect_usage_report(client, stale_after_days=settings.stale_after_days)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Report sync activity for the sent shares of an Azure Data Share account",
    )
    parser.add_argument(
        "--subscription-id",
        default=settings.datashare_subscription_id,
        help="Azure subscription ID (default: DATASHARE_SUBSCRIPTION_ID)",
    )
    parser.add_argument(
        "--resource-group-name",
        default=settings.datashare_resource_group,
        help="Resource group of the Data Share account (default: DATASHARE_RESOURCE_GROUP)",
    )
    parser.add_argument(
        "--data-share-name",
        default=settings.datashare_account_name,
        help="Data Share account name (default: DATASHARE_ACCOUNT_NAME)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the JSON report to this file instead of stdout",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("azure").setLevel(logging.WARNING)

    missing = missing_arguments(args)
    if missing:
        for name in missing:
            print(f"{name} must be provided.")
        return 0

    try:
        report = asyncio.run(
            run_report(args.subscription_id, args.resource_group_name, args.data_share_name)
        )
    except DuplicateTenantError as e:
        logger.error(str(e))
        return 1
    except (DataShareApiError, httpx.HTTPError) as e:
        logger.error(f"Failed to retrieve Data Share usage: {e}")
        return 1

    if args.output:
        write_report(report, args.output)
    else:
        print(render_report(report))

    return 0


if __name__ == "__main__":
    sys.exit(main())
