"""Panel settings model."""

from dataclasses import dataclass, fields

DEFAULT_INTEGRATION = "twitch"
DEFAULT_PAGE_SIZE = 100
DEFAULT_MAX_PAGES = 500
DEFAULT_THUMBNAIL_WIDTH = 30
DEFAULT_THUMBNAIL_HEIGHT = 40

# Credentials: masked in logs, never written to the settings file
SECRET_FIELDS = ("token", "client_id")


@dataclass
class PanelSettings:
    """Runtime settings for one panel."""

    integration: str = DEFAULT_INTEGRATION
    identity: str = ""  # Opaque operator identity, used in the channel path
    base_url: str = ""  # API root; required
    token: str = ""
    client_id: str = ""
    timeout_seconds: float = 10.0

    # Catalog pagination
    page_size: int = DEFAULT_PAGE_SIZE
    max_pages: int = DEFAULT_MAX_PAGES

    # Selector thumbnails
    thumbnail_width: int = DEFAULT_THUMBNAIL_WIDTH
    thumbnail_height: int = DEFAULT_THUMBNAIL_HEIGHT

    # Raise the loading flag during refresh() as well as save()
    guard_refresh: bool = False

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    def redacted(self) -> dict[str, object]:
        """Settings as a dict with secrets masked, for logging."""
        result: dict[str, object] = {f.name: getattr(self, f.name) for f in fields(self)}
        for secret in SECRET_FIELDS:
            if result[secret]:
                result[secret] = "***"
        return result
