"""Tests for CLI argument parsing and headless commands."""

import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

import cli
from cli import build_remote, parse_args, resolve_settings
from model import CatalogItem, PanelSettings


class TestParseArgs:
    """Test parse_args() function."""

    def test_no_args(self):
        """No flags means no overrides and the TUI."""
        args = parse_args([])
        assert args.settings_path is None
        assert args.overrides == {}
        assert args.list_categories is False

    def test_overrides_collected(self):
        """Flags become settings overrides."""
        args = parse_args(["--identity", "42", "--base-url", "http://localhost:8080", "--guard-refresh"])
        assert args.overrides == {
            "identity": "42",
            "base_url": "http://localhost:8080",
            "guard_refresh": True,
        }

    def test_settings_path(self):
        args = parse_args(["--settings", "/tmp/s.json"])
        assert args.settings_path == Path("/tmp/s.json")

    def test_reads_sys_argv(self):
        """Without an explicit argv, sys.argv is used."""
        with patch.object(sys, "argv", ["chanpanel", "--list-categories"]):
            args = parse_args()
        assert args.list_categories is True

    def test_help_is_structured(self, capsys):
        with pytest.raises(SystemExit):
            parse_args(["--help"])
        out = capsys.readouterr().out
        assert "chanpanel --list-categories" in out


class TestResolveSettings:
    """Test resolve_settings()."""

    def test_flags_override_file(self, tmp_path, monkeypatch, capsys):
        """CLI flags win over the settings file; warnings go to stderr."""
        for var in ("CHANPANEL_IDENTITY", "CHANPANEL_BASE_URL", "CHANPANEL_TOKEN", "CHANPANEL_CLIENT_ID"):
            monkeypatch.delenv(var, raising=False)
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"identity": "file", "base_url": "https://api.example"}))

        settings = resolve_settings(parse_args(["--settings", str(path), "--identity", "flag"]))

        assert settings.identity == "flag"
        assert "No API token" in capsys.readouterr().err


class TestBuildRemote:
    """Test build_remote()."""

    def test_integration_configured(self):
        settings = PanelSettings(identity="42", integration="twitch", base_url="https://x", token="t", client_id="c")
        remote = build_remote(settings)
        assert set(remote.integrations) == {"twitch"}
        assert remote.integrations["twitch"].base_url == "https://x"
        assert remote.integrations["twitch"].token == "t"


class TestMain:
    """Test main() dispatch."""

    def test_missing_identity_exits(self, tmp_path, monkeypatch, capsys):
        """Without an identity the CLI prints an error box and exits 1."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        monkeypatch.delenv("CHANPANEL_IDENTITY", raising=False)
        monkeypatch.setattr(sys, "argv", ["chanpanel"])

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 1
        assert "identity" in capsys.readouterr().err

    def test_missing_base_url_exits(self, tmp_path, monkeypatch, capsys):
        """Without an API root the CLI refuses to start."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        monkeypatch.delenv("CHANPANEL_BASE_URL", raising=False)
        monkeypatch.setattr(sys, "argv", ["chanpanel", "--identity", "42"])

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 1
        assert "No API base URL" in capsys.readouterr().err

    def test_list_categories(self, tmp_path, monkeypatch, capsys):
        """--list-categories prints one name per line."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        monkeypatch.setattr(sys, "argv", ["chanpanel", "--identity", "42", "--base-url", "https://api.example", "--list-categories"])
        fetch = AsyncMock(return_value=[CatalogItem("Just Chatting"), CatalogItem("IRL")])

        with patch("controller.catalog.CatalogAggregator.fetch_all", fetch):
            with pytest.raises(SystemExit) as exc_info:
                cli.main()

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.splitlines() == ["Just Chatting", "IRL"]

    def test_save_settings(self, tmp_path, monkeypatch, capsys):
        """--save-settings writes the effective settings file."""
        target = tmp_path / "out.json"
        target.write_text("{}")
        monkeypatch.setattr(sys, "argv", ["chanpanel", "--settings", str(target), "--identity", "99", "--base-url", "https://api.example", "--save-settings"])

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 0
        assert json.loads(target.read_text())["identity"] == "99"
