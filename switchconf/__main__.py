"""Orchestrator CLI — dispatches to sub-CLIs.

Sub-commands:
  vlan      VLAN resource management (get, list, create, delete, trunk groups)
  profiles  List configured connection profiles

Examples:
  switchconf vlan --profile leaf01 list

  switchconf vlan --host 192.168.0.11 --password <PW> trunk-group set 10 mlag-peer

  switchconf profiles
"""

from __future__ import annotations

import os
import sys

from tabulate import tabulate

from switchconf import DEFAULT_LOG_LEVEL, __version__, configure_logging
from switchconf import glogger

COMMANDS = {
    "vlan": ("switchconf.resources.cli", "VLAN resource management"),
    "profiles": ("switchconf.config.cli", "List connection profiles"),
}


def _print_usage() -> None:
    print("usage: switchconf <command> [options]\n")
    print("Available commands:")
    for cmd, (_, desc) in COMMANDS.items():
        print(f"  {cmd:14s}  {desc}")
    print("\nRun 'switchconf <command> --help' for command-specific options.")


def _print_startup_banner() -> None:
    startup_rows = [
        ["version", __version__],
        ["config", os.environ.get("SWITCHCONF_CONF", "~/.switchconf.conf")],
        ["log level", os.environ.get("LOGURU_LEVEL", DEFAULT_LOG_LEVEL)],
    ]

    table_str = tabulate(startup_rows, tablefmt="mixed_grid")
    lines = table_str.split("\n")
    table_width = len(lines[0])
    title = "switchconf starting up"
    title_border = "┍" + "━" * (table_width - 2) + "┑"
    title_row = "│ " + title.center(table_width - 4) + " │"
    separator = lines[0].replace("┍", "┝").replace("┑", "┥").replace("┯", "┿")

    glogger.opt(raw=True).info(
        "\n{}\n", title_border + "\n" + title_row + "\n" + separator + "\n" + "\n".join(lines[1:])
    )


def main() -> None:
    """Main entry point, dispatching to sub-CLI."""
    configure_logging()
    _print_startup_banner()

    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        _print_usage()
        sys.exit(0 if len(sys.argv) >= 2 else 1)

    command = sys.argv[1]
    if command not in COMMANDS:
        print(f"switchconf: unknown command '{command}'\n", file=sys.stderr)
        _print_usage()
        sys.exit(1)

    module_path, _ = COMMANDS[command]

    from importlib import import_module

    module = import_module(module_path)
    module.main(sys.argv[2:])


if __name__ == "__main__":
    main()
