"""Shared pytest fixtures."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from datashare_report.core.config import ReportSettings


@pytest.fixture
def report_now():
    """Fixed report time."""
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return ReportSettings(
        _env_file=None,
        azure_tenant_id="",
        azure_client_id="",
        azure_client_secret="",
        arm_endpoint="https://management.azure.com",
        datashare_api_version="2021-08-01",
    )


@pytest.fixture
def mock_credential():
    """Credential returning a fixed ARM token."""
    credential = MagicMock()
    credential.get_token.return_value.token = "test-token"
    return credential


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set mock environment variables for testing."""
    monkeypatch.setenv("AZURE_TENANT_ID", "test-tenant-id")
    monkeypatch.setenv("AZURE_CLIENT_ID", "test-client-id")
    monkeypatch.setenv("AZURE_CLIENT_SECRET", "test-client-secret")
    monkeypatch.setenv("DATASHARE_SUBSCRIPTION_ID", "test-subscription")
    monkeypatch.setenv("DATASHARE_RESOURCE_GROUP", "test-rg")
    monkeypatch.setenv("DATASHARE_ACCOUNT_NAME", "test-account")
