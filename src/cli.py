"""Command-line interface for chanpanel."""

import argparse
import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path

from controller import CatalogAggregator
from errors import ChanpanelError, SettingsError
from model import PanelSettings
from settings import apply_overrides, load_settings, save_settings, validate_settings
from transport import ChannelApi, HttpRemote, Integration

CHANPANEL_VERSION = "0.1.0"


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    settings_path: Path | None
    overrides: dict[str, object]
    list_categories: bool
    save_settings: bool


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class ChanpanelHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "chanpanel - edit a live channel's title and game from the terminal.",
            f"Version: {CHANPANEL_VERSION}",
            "",
            "Core:",
            "  chanpanel                             Open the channel panel",
            "  chanpanel --list-categories           Print the full game catalog and exit",
            "",
            "Options:",
            "  --settings <path>                     Settings file (default ~/.config/chanpanel/settings.json)",
            "  --identity <id>                       Operator identity (channel id)",
            "  --integration <name>                  Integration name (default: twitch)",
            "  --base-url <url>                      API base URL (required)",
            "  --guard-refresh                       Disable the form while refreshing too",
            "  --save-settings                       Write the effective settings (without token) and exit",
            "",
            "Environment:",
            "  CHANPANEL_IDENTITY, CHANPANEL_BASE_URL, CHANPANEL_TOKEN, CHANPANEL_CLIENT_ID",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for chanpanel CLI."""
    parser = argparse.ArgumentParser(
        prog="chanpanel",
        formatter_class=ChanpanelHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--settings", metavar="PATH", help=argparse.SUPPRESS)
    parser.add_argument("--identity", metavar="ID", help=argparse.SUPPRESS)
    parser.add_argument("--integration", metavar="NAME", help=argparse.SUPPRESS)
    parser.add_argument("--base-url", metavar="URL", help=argparse.SUPPRESS)
    parser.add_argument("--guard-refresh", action="store_true", default=None, help=argparse.SUPPRESS)
    parser.add_argument("--list-categories", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--save-settings", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--version", action="version", version=f"chanpanel {CHANPANEL_VERSION}")
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments."""
    args = create_parser().parse_args(sys.argv[1:] if argv is None else argv)
    overrides = {
        "identity": args.identity,
        "integration": args.integration,
        "base_url": args.base_url,
        "guard_refresh": args.guard_refresh,
    }
    return ParsedArgs(
        settings_path=Path(args.settings).expanduser() if args.settings else None,
        overrides={k: v for k, v in overrides.items() if v is not None},
        list_categories=args.list_categories,
        save_settings=args.save_settings,
    )


def resolve_settings(args: ParsedArgs) -> PanelSettings:
    """Load settings, apply CLI flags, validate, and print warnings."""
    settings, warnings = load_settings(args.settings_path)
    warnings.extend(apply_overrides(settings, args.overrides))
    warnings.extend(validate_settings(settings))
    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    return settings


def build_remote(settings: PanelSettings) -> HttpRemote:
    """Create the HTTP transport for the configured integration."""
    return HttpRemote(
        integrations={
            settings.integration: Integration(
                base_url=settings.base_url,
                token=settings.token,
                client_id=settings.client_id,
            )
        },
        timeout_seconds=settings.timeout_seconds,
    )


async def list_categories(settings: PanelSettings) -> list[str]:
    """Fetch the whole catalog headless and return the category names."""
    remote = build_remote(settings)
    try:
        aggregator = CatalogAggregator(
            ChannelApi(remote, settings.integration),
            page_size=settings.page_size,
            max_pages=settings.max_pages,
        )
        items = await aggregator.fetch_all()
    finally:
        await remote.aclose()
    return [item.name for item in items]


def main() -> None:
    """Main entry point."""
    args = parse_args()

    try:
        settings = resolve_settings(args)
    except SettingsError as e:
        print_error_box(str(e), "Configure ~/.config/chanpanel/settings.json or pass --identity and --base-url.")
        sys.exit(1)

    if args.save_settings:
        path = save_settings(settings, args.settings_path)
        print(f"Settings written to {path}")
        sys.exit(0)

    if args.list_categories:
        try:
            names = asyncio.run(list_categories(settings))
        except ChanpanelError as e:
            print_error_box("Could not load categories", str(e))
            sys.exit(1)
        for name in names:
            print(name)
        sys.exit(0)

    # Imported late: importing app configures file logging
    from app import ChannelPanelApp

    app = ChannelPanelApp(build_remote(settings), settings)
    app.run()


if __name__ == "__main__":
    main()
