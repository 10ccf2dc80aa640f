"""CLI entry point for VLAN resource management (standalone-capable).

Examples:
  # Using a connection profile from ~/.switchconf.conf
  switchconf-vlan --profile leaf01 list

  # Explicit connection parameters
  switchconf-vlan --host 192.168.0.11 --username admin --password <PW> \\
      create 100

  switchconf-vlan --profile leaf01 name 100 servers
  switchconf-vlan --profile leaf01 trunk-group set 100 mlag-peer spine
  switchconf-vlan --profile leaf01 trunk-group default 100
"""

from __future__ import annotations

import argparse
import sys

from tabulate import tabulate

from switchconf import configure_logging
from switchconf.config.profiles import connect_to
from switchconf.resources.base.node import Node
from switchconf.resources.exceptions import SwitchError
from switchconf.resources.transports.eos_cli import EOSCLITransport
from switchconf.resources.vlans import VlanManager


def cmd_list(vlans: VlanManager, args: argparse.Namespace) -> bool:
    """List all VLANs."""
    configured = vlans.list_vlans()
    if not configured:
        print("No VLANs found")
        return True

    rows = [[v.vlan_id, v.name, v.state, ", ".join(v.trunk_groups) or "-"] for v in configured]
    print(tabulate(rows, headers=["VLAN", "Name", "State", "Trunk groups"]))
    return True


def cmd_get(vlans: VlanManager, args: argparse.Namespace) -> bool:
    """Show the attributes of one VLAN."""
    attributes = vlans.get(args.vlan_id)
    if attributes is None:
        print(f"VLAN {args.vlan_id} not found", file=sys.stderr)
        return False
    print(tabulate(list(attributes.items()), headers=["Attribute", "Value"]))
    return True


def cmd_section(vlans: VlanManager, args: argparse.Namespace) -> bool:
    """Print the raw running-config section of one VLAN."""
    section = vlans.get_section(args.vlan_id)
    if not section:
        print(f"VLAN {args.vlan_id} not found", file=sys.stderr)
        return False
    print(section.rstrip())
    return True


def cmd_create(vlans: VlanManager, args: argparse.Namespace) -> bool:
    return _report(vlans.create(args.vlan_id), f"VLAN {args.vlan_id} created")


def cmd_delete(vlans: VlanManager, args: argparse.Namespace) -> bool:
    return _report(vlans.delete(args.vlan_id), f"VLAN {args.vlan_id} deleted")


def cmd_default(vlans: VlanManager, args: argparse.Namespace) -> bool:
    return _report(vlans.default(args.vlan_id), f"VLAN {args.vlan_id} reset to defaults")


def cmd_name(vlans: VlanManager, args: argparse.Namespace) -> bool:
    """Set or default the VLAN name."""
    if args.default:
        return _report(vlans.set_name_default(args.vlan_id), f"VLAN {args.vlan_id} name reset")
    if not args.name:
        print("Either a name or --default is required", file=sys.stderr)
        return False
    return _report(vlans.set_name(args.vlan_id, args.name), f"VLAN {args.vlan_id} renamed to {args.name}")


def cmd_state(vlans: VlanManager, args: argparse.Namespace) -> bool:
    """Set or default the VLAN state."""
    if args.default:
        return _report(vlans.set_state_default(args.vlan_id), f"VLAN {args.vlan_id} state reset")
    if not args.state:
        print("Either a state or --default is required", file=sys.stderr)
        return False
    return _report(vlans.set_state(args.vlan_id, args.state), f"VLAN {args.vlan_id} state set to {args.state}")


def cmd_trunk_group(vlans: VlanManager, args: argparse.Namespace) -> bool:
    """Manage VLAN trunk groups."""
    vid = args.vlan_id
    if args.tg_command == "set":
        return _report(vlans.set_trunk_group(vid, args.names), f"VLAN {vid} trunk groups set")
    if args.tg_command == "add":
        return _report(vlans.add_trunk_group(vid, args.names[0]), f"Trunk group {args.names[0]} added to VLAN {vid}")
    if args.tg_command == "remove":
        return _report(
            vlans.remove_trunk_group(vid, args.names[0]), f"Trunk group {args.names[0]} removed from VLAN {vid}"
        )
    return _report(vlans.set_trunk_group_default(vid), f"VLAN {vid} trunk groups reset")


def _report(ok: bool, message: str) -> bool:
    if ok:
        print(message)
    else:
        print("Operation failed (invalid VLAN id or command rejected by the device)", file=sys.stderr)
    return ok


COMMANDS = {
    "list": cmd_list,
    "get": cmd_get,
    "section": cmd_section,
    "create": cmd_create,
    "delete": cmd_delete,
    "default": cmd_default,
    "name": cmd_name,
    "state": cmd_state,
    "trunk-group": cmd_trunk_group,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for VLAN management."""
    parser = argparse.ArgumentParser(
        prog="switchconf-vlan",
        description="VLAN management through the device running configuration",
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--profile", help="Connection profile name")
    target.add_argument("--host", help="Switch IP address or hostname")
    parser.add_argument("-c", "--config", help="Profile file (default: $SWITCHCONF_CONF or ~/.switchconf.conf)")
    parser.add_argument("--username", default="admin", help="Username (default: admin)")
    parser.add_argument("--password", default="", help="Login password")
    parser.add_argument("--enable-password", help="Enable password, if the device asks for one")
    parser.add_argument("--port", type=int, default=22, help="SSH port (default: 22)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("list", help="List all VLANs")

    for name, help_text in (
        ("get", "Show one VLAN"),
        ("section", "Print the raw config section of a VLAN"),
        ("create", "Create a VLAN"),
        ("delete", "Delete a VLAN"),
        ("default", "Reset a VLAN to defaults"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("vlan_id", help="VLAN ID (1-4094)")

    name_parser = subparsers.add_parser("name", help="Set the VLAN name")
    name_parser.add_argument("vlan_id", help="VLAN ID (1-4094)")
    name_parser.add_argument("name", nargs="?", help="New name")
    name_parser.add_argument("--default", action="store_true", help="Reset the name to the default")

    state_parser = subparsers.add_parser("state", help="Set the VLAN state")
    state_parser.add_argument("vlan_id", help="VLAN ID (1-4094)")
    state_parser.add_argument("state", nargs="?", choices=["active", "suspend"], help="New state")
    state_parser.add_argument("--default", action="store_true", help="Reset the state to the default")

    tg_parser = subparsers.add_parser("trunk-group", help="Trunk group management")
    tg_sub = tg_parser.add_subparsers(dest="tg_command", required=True, help="Trunk group commands")

    tg_set = tg_sub.add_parser("set", help="Replace the trunk groups of a VLAN")
    tg_set.add_argument("vlan_id", help="VLAN ID (1-4094)")
    tg_set.add_argument("names", nargs="*", help="Desired trunk groups")

    for name, help_text in (("add", "Add a trunk group"), ("remove", "Remove a trunk group")):
        sub = tg_sub.add_parser(name, help=help_text)
        sub.add_argument("vlan_id", help="VLAN ID (1-4094)")
        sub.add_argument("names", nargs=1, metavar="name", help="Trunk group name")

    tg_default = tg_sub.add_parser("default", help="Remove all trunk groups of a VLAN")
    tg_default.add_argument("vlan_id", help="VLAN ID (1-4094)")

    return parser


def build_node(parsed: argparse.Namespace) -> Node:
    """Create the node described by the parsed connection arguments."""
    if parsed.profile:
        return connect_to(parsed.profile, parsed.config)

    transport = EOSCLITransport(
        host=parsed.host,
        username=parsed.username,
        password=parsed.password,
        port=parsed.port,
        enable_password=parsed.enable_password,
    )
    return Node(transport)


def main(args: list[str] | None = None) -> None:
    """Main entry point for VLAN management CLI."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        sys.exit(1)

    if parsed.verbose:
        configure_logging()

    try:
        with build_node(parsed) as node:
            ok = COMMANDS[parsed.command](VlanManager(node), parsed)
    except SwitchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
