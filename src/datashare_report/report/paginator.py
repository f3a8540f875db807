"""Drain cursor-paginated list operations into a single list."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar
from urllib.parse import parse_qsl, urlsplit

from datashare_report.datashare.models import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

SKIP_TOKEN_PARAM = "$skipToken"

PageFetcher = Callable[[str | None], Awaitable[Page[T]]]


def extract_skip_token(next_link: str | None) -> str | None:
    """Read the ``$skipToken`` query parameter from a continuation link.

    Parameter names are matched case-insensitively. Returns None when there
    is no link, no such parameter, or the value is empty.
    """
    if not next_link:
        return None

    query = urlsplit(next_link).query
    for key, value in parse_qsl(query, keep_blank_values=True):
        if key.lower() == SKIP_TOKEN_PARAM.lower():
            return value or None
    return None


async def get_all_pages(fetch: PageFetcher[T], description: str = "results") -> list[T]:
    """Fetch every page from ``fetch`` and return all items in order.

    ``fetch`` is called with None for the first page and then with the skip
    token taken from each page's ``next_link`` until a page carries no
    token. There is no page limit: an API that keeps returning a token
    keeps this loop running.

    Errors raised by ``fetch`` propagate; items from earlier pages are
    discarded with the failed call.

    Args:
        fetch: Coroutine function returning one page for a skip token
        description: What is being retrieved, for progress logging

    Returns:
        All items from all pages
    """
    results: list[T] = []
    skip_token: str | None = None
    page_count = 0

    while True:
        page_count += 1
        logger.info(f"Retrieving page {page_count} of {description}")
        page = await fetch(skip_token)
        results.extend(page.items)

        skip_token = extract_skip_token(page.next_link)
        if not skip_token:
            break

    logger.debug(f"Retrieved {len(results)} {description} in {page_count} page(s)")
    return results
