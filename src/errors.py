"""Exception types for chanpanel."""

from __future__ import annotations


class ChanpanelError(Exception):
    """Base class for all chanpanel errors."""


class TransportError(ChanpanelError):
    """Raised when a remote call fails.

    Covers network failures, non-2xx responses and bodies that cannot be
    parsed into the expected structure.
    """

    def __init__(
        self,
        message: str,
        *,
        integration: str = "",
        method: str = "",
        path: str = "",
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.integration = integration
        self.method = method
        self.path = path
        self.status = status

    def __str__(self) -> str:
        base = super().__str__()
        if not self.method:
            return base
        where = f"{self.method} {self.integration}:{self.path}"
        if self.status is not None:
            return f"{where} -> {self.status}: {base}"
        return f"{where}: {base}"


class PaginationLimitError(ChanpanelError):
    """Raised when catalog pagination does not terminate within its bounds."""


class SettingsError(ChanpanelError):
    """Raised when settings are missing or invalid."""
