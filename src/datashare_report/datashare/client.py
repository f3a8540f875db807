"""Azure Data Share management API client."""

import asyncio
import logging
from typing import Self

import httpx
from azure.core.credentials import TokenCredential

from datashare_report.core.arm_client import get_arm_access_token
from datashare_report.core.config import ReportSettings, get_settings
from datashare_report.core.errors import DataShareApiError
from datashare_report.datashare.models import Page, Share, ShareSynchronization

logger = logging.getLogger(__name__)


def _raise_for_error(response: httpx.Response) -> None:
    """Raise DataShareApiError for a non-2xx ARM response.

    ARM error bodies look like ``{"error": {"code": ..., "message": ...}}``.
    """
    if response.is_success:
        return

    code = ""
    message = response.reason_phrase
    try:
        body = response.json()
    except ValueError:
        body = None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        code = error.get("code") or ""
        message = error.get("message") or message

    logger.error(f"{response.request.method} {response.request.url} failed: {response.status_code}")
    raise DataShareApiError(response.status_code, code, message)


class DataShareClient:
    """Client for the list operations of one Data Share account.

    Each list method returns a single page; draining is left to
    :func:`datashare_report.report.paginator.get_all_pages`.
    """

    def __init__(
        self,
        subscription_id: str,
        resource_group_name: str,
        account_name: str,
        settings: ReportSettings | None = None,
        credential: TokenCredential | None = None,
    ) -> None:
        """Initialize the client for a single Data Share account."""
        self.settings = settings or get_settings()
        self.subscription_id = subscription_id
        self.resource_group_name = resource_group_name
        self.account_name = account_name
        self.credential = credential
        self.client: httpx.AsyncClient | None = None

    @property
    def account_path(self) -> str:
        """ARM resource path of the Data Share account."""
        return (
            f"/subscriptions/{self.subscription_id}"
            f"/resourceGroups/{self.resource_group_name}"
            f"/providers/Microsoft.DataShare/accounts/{self.account_name}"
        )

    async def __aenter__(self) -> Self:
        """Enter context manager - acquire a token and create the HTTP client."""
        # azure-identity credentials block on token requests
        token = await asyncio.to_thread(get_arm_access_token, self.credential, self.settings)
        self.client = httpx.AsyncClient(
            base_url=self.settings.arm_endpoint,
            headers={"Authorization": f"Bearer {token}"},
            timeout=self.settings.http_timeout_seconds,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager - close the HTTP client."""
        if self.client:
            await self.client.aclose()
            self.client = None

    def _params(self, skip_token: str | None) -> dict[str, str]:
        params = {"api-version": self.settings.datashare_api_version}
        if skip_token:
            params["$skipToken"] = skip_token
        return params

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        """Send a request and return the decoded JSON body.

        Raises:
            RuntimeError: If the client is not open
            DataShareApiError: If the API returns an error status
        """
        if not self.client:
            raise RuntimeError("Client must be used as async context manager")

        response = await self.client.request(method, path, **kwargs)
        _raise_for_error(response)
        return response.json()

    async def list_shares(self, skip_token: str | None = None) -> Page[Share]:
        """List one page of sent shares in the account."""
        data = await self._request(
            "GET",
            f"{self.account_path}/shares",
            params=self._params(skip_token),
        )
        return Page(
            items=[Share.from_api(item) for item in data.get("value", [])],
            next_link=data.get("nextLink"),
        )

    async def list_synchronizations(
        self, share_name: str, skip_token: str | None = None
    ) -> Page[ShareSynchronization]:
        """List one page of synchronizations for a sent share."""
        data = await self._request(
            "POST",
            f"{self.account_path}/shares/{share_name}/listSynchronizations",
            params=self._params(skip_token),
            json={},
        )
        return Page(
            items=[ShareSynchronization.from_api(item) for item in data.get("value", [])],
            next_link=data.get("nextLink"),
        )
