"""Settings loading for chanpanel: defaults, JSON file, environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

from errors import SettingsError
from model import PanelSettings
from model.panel_settings import SECRET_FIELDS

log = logging.getLogger(__name__)


def _config_home(env: Mapping[str, str]) -> Path:
    return Path(env.get("XDG_CONFIG_HOME", str(Path.home() / ".config")))


def default_settings_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the settings file path following XDG Base Directory conventions."""
    env = os.environ if env is None else env
    return _config_home(env) / "chanpanel" / "settings.json"


# Environment variable -> settings field
ENV_OVERRIDES = {
    "CHANPANEL_IDENTITY": "identity",
    "CHANPANEL_BASE_URL": "base_url",
    "CHANPANEL_TOKEN": "token",
    "CHANPANEL_CLIENT_ID": "client_id",
}


def _coerce(name: str, value: Any) -> Any:
    """Coerce a raw settings value to the type of the field's default."""
    default = getattr(PanelSettings, name)
    try:
        if isinstance(default, bool):
            if isinstance(value, str):
                return value.strip().lower() in ("1", "true", "yes", "on")
            return bool(value)
        if isinstance(default, int):
            return int(value)
        if isinstance(default, float):
            return float(value)
        return str(value)
    except (TypeError, ValueError) as e:
        raise SettingsError(f"Invalid value for '{name}': {value!r}") from e


def apply_overrides(settings: PanelSettings, overrides: Mapping[str, Any]) -> list[str]:
    """Apply a mapping of field overrides. Returns warnings for unknown keys."""
    warnings = []
    known = PanelSettings.field_names()
    for name, value in overrides.items():
        if name not in known:
            warnings.append(f"Unknown setting '{name}' ignored")
            continue
        if value is None:
            continue
        setattr(settings, name, _coerce(name, value))
    return warnings


def validate_settings(settings: PanelSettings) -> list[str]:
    """Validate settings and return list of warnings.

    Raises SettingsError for issues the panel cannot run with.
    """
    warnings = []

    if not settings.identity.strip():
        raise SettingsError("No operator identity configured (set 'identity' or CHANPANEL_IDENTITY)")
    if not settings.integration.strip():
        raise SettingsError("Integration name must not be empty")
    if not settings.base_url.strip():
        raise SettingsError("No API base URL configured (set 'base_url' or CHANPANEL_BASE_URL)")
    if not settings.base_url.startswith(("http://", "https://")):
        raise SettingsError(f"base_url must be an HTTP(S) URL: {settings.base_url!r}")

    for name in ("page_size", "max_pages", "thumbnail_width", "thumbnail_height"):
        if getattr(settings, name) <= 0:
            raise SettingsError(f"'{name}' must be positive, got {getattr(settings, name)}")
    if settings.timeout_seconds <= 0:
        raise SettingsError(f"'timeout_seconds' must be positive, got {settings.timeout_seconds}")

    if settings.page_size > 100:
        warnings.append(f"page_size {settings.page_size} exceeds the usual API maximum of 100")
    if not settings.token:
        warnings.append("No API token configured; requests will be unauthenticated")

    return warnings


def load_settings(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> tuple[PanelSettings, list[str]]:
    """Load settings from defaults, the settings file and the environment.

    Args:
        path: Explicit settings file. Must exist if given.
        env: Environment mapping (defaults to os.environ)

    Returns:
        (settings, warnings). Validation is left to the caller so CLI flags
        can be applied first.
    """
    env = os.environ if env is None else env
    settings = PanelSettings()
    warnings: list[str] = []

    explicit = path is not None
    path = path or default_settings_path(env)
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsError(f"Cannot read settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a JSON object")
        warnings.extend(apply_overrides(settings, data))
        log.info(f"Loaded settings from {path}")
    elif explicit:
        raise SettingsError(f"Settings file not found: {path}")

    env_values = {field: env[var] for var, field in ENV_OVERRIDES.items() if env.get(var)}
    warnings.extend(apply_overrides(settings, env_values))

    log.debug(f"Settings: {settings.redacted()}")
    return settings, warnings


def save_settings(settings: PanelSettings, path: Path | None = None) -> Path:
    """Write settings to disk, leaving secrets out."""
    path = path or default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {f.name: getattr(settings, f.name) for f in fields(settings) if f.name not in SECRET_FIELDS}
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path
