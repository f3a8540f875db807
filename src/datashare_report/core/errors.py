"""Exceptions raised while building a usage report."""


class DataShareReportError(Exception):
    """Base class for report failures."""


class DuplicateTenantError(DataShareReportError):
    """Two sent shares resolved to the same consumer tenant name.

    A sent share targets exactly one tenant, so the report keys tenants by
    name. A second share for the same name cannot be represented.
    """

    def __init__(self, tenant_name: str, existing_share: str, new_share: str) -> None:
        self.tenant_name = tenant_name
        self.existing_share = existing_share
        self.new_share = new_share
        super().__init__(
            f"Tenant '{tenant_name}' is the consumer of both share '{existing_share}' "
            f"and share '{new_share}'; this report does not support multiple shares "
            "for the same tenant name"
        )


class DataShareApiError(DataShareReportError):
    """The Data Share management API returned an error response."""

    def __init__(self, status_code: int, code: str = "", message: str = "") -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        detail = f"{code}: {message}" if code else message
        super().__init__(f"Data Share API error ({status_code}) {detail}".rstrip())
