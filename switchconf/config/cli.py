"""CLI listing the configured connection profiles."""

from __future__ import annotations

import argparse
import sys

from tabulate import tabulate

from switchconf.config.profiles import config_path, load_profiles
from switchconf.resources.exceptions import ConfigError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for profile listing."""
    parser = argparse.ArgumentParser(
        prog="switchconf-profiles",
        description="List connection profiles",
    )
    parser.add_argument("-c", "--config", help="Profile file (default: $SWITCHCONF_CONF or ~/.switchconf.conf)")
    return parser


def main(args: list[str] | None = None) -> None:
    """Main entry point for the profiles CLI."""
    parsed = build_parser().parse_args(args)

    try:
        profiles = load_profiles(parsed.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not profiles:
        print(f"No profiles found in {config_path(parsed.config)}")
        return

    rows = [[p.name, p.host, p.port, p.username] for p in profiles.values()]
    print(tabulate(rows, headers=["Profile", "Host", "Port", "Username"]))


if __name__ == "__main__":
    main()
