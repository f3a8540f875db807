"""Configuration management using Pydantic settings."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ARM_ENDPOINT = "https://management.azure.com"
DEFAULT_API_VERSION = "2021-08-01"


class ReportSettings(BaseSettings):
    """Report settings loaded from environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service principal (optional - falls back to DefaultAzureCredential)
    azure_tenant_id: str = Field(default="", description="Azure AD tenant ID")
    azure_client_id: str = Field(default="", description="App registration client ID")
    azure_client_secret: str = Field(default="", description="App registration client secret")

    # Azure Resource Manager
    arm_endpoint: str = Field(default=DEFAULT_ARM_ENDPOINT, description="ARM base URL")
    datashare_api_version: str = Field(
        default=DEFAULT_API_VERSION, description="Microsoft.DataShare api-version"
    )
    http_timeout_seconds: float = Field(default=30.0, description="Per-request HTTP timeout")

    # Default report target, overridable on the command line
    datashare_subscription_id: str = Field(default="", description="Subscription ID")
    datashare_resource_group: str = Field(default="", description="Resource group name")
    datashare_account_name: str = Field(default="", description="Data Share account name")

    # Report thresholds
    stale_after_days: int = Field(default=30, ge=1, description="Days without sync before stale")

    @property
    def has_service_principal(self) -> bool:
        """Check if service principal credentials are configured."""
        return bool(self.azure_tenant_id and self.azure_client_id and self.azure_client_secret)

    @property
    def arm_scope(self) -> str:
        """Token scope for the configured ARM endpoint."""
        return f"{self.arm_endpoint.rstrip('/')}/.default"


@lru_cache
def get_settings() -> ReportSettings:
    """Get cached settings instance."""
    load_dotenv()
    return ReportSettings()
