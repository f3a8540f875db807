"""Azure Resource Manager credential helpers."""

import logging

from azure.core.credentials import TokenCredential
from azure.identity import ClientSecretCredential, DefaultAzureCredential

from datashare_report.core.config import ReportSettings, get_settings

logger = logging.getLogger(__name__)


def get_azure_credential(settings: ReportSettings | None = None) -> TokenCredential:
    """Create a credential for Azure Resource Manager.

    Uses client credentials flow when a service principal is configured,
    otherwise falls back to DefaultAzureCredential (managed identity,
    Azure CLI login, etc).

    Args:
        settings: Report settings. If None, uses the cached settings.

    Returns:
        Credential usable for ARM token requests
    """
    settings = settings or get_settings()

    if settings.has_service_principal:
        logger.debug("Using service principal credential for %s", settings.azure_client_id)
        return ClientSecretCredential(
            tenant_id=settings.azure_tenant_id,
            client_id=settings.azure_client_id,
            client_secret=settings.azure_client_secret,
        )

    logger.debug("No service principal configured, using DefaultAzureCredential")
    return DefaultAzureCredential()


def get_arm_access_token(
    credential: TokenCredential | None = None,
    settings: ReportSettings | None = None,
) -> str:
    """Acquire a bearer token for Azure Resource Manager.

    The token is fetched once per report run; a run that outlives the
    token lifetime fails with an authorization error from the API.
    """
    settings = settings or get_settings()
    credential = credential or get_azure_credential(settings)
    return credential.get_token(settings.arm_scope).token
