"""VLAN resource manager.

Reads VLAN state out of ``vlan <id>`` sections of the running config::

    vlan 10
       name BIGDATA
       state active
       trunk group mlag-peer
    !

and writes it back with ``vlan <id>`` context command sequences.
Identifiers are VLAN ids as decimal text; anything outside 1-4094 is
rejected before the device is contacted.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from loguru import logger

from switchconf.resources.base.resource import BaseResource
from switchconf.resources.factory import register_resource
from switchconf.resources.models.vlan import VlanConfig, VlanState
from switchconf.resources.parsing.attributes import parse_list, parse_scalar
from switchconf.resources.parsing.diff import reconcile
from switchconf.resources.parsing.sections import find_headers, get_section

VLAN_MIN = 1
VLAN_MAX = 4094

VLAN_HEADER_RE = re.compile(r"^vlan\s+(\d+)$")
NAME_RE = re.compile(r"^[ \t]*name[ \t]+(\S.*)$", re.MULTILINE)
STATE_RE = re.compile(r"^[ \t]*state[ \t]+(\w+)", re.MULTILINE)
TRUNK_GROUP_RE = re.compile(r"^[ \t]*trunk group[ \t]+(\S+)", re.MULTILINE)
TRUNK_GROUP_NAME_RE = re.compile(r"\S+")


def is_vlan(vid: str | int) -> bool:
    """Return True if *vid* is a VLAN id in 1-4094 written as decimal text."""
    return _normalize(vid) is not None


def is_valid_name(name: str) -> bool:
    """Return True if *name* is a non-blank single line without control characters."""
    return bool(name) and bool(name.strip()) and name.isprintable()


def is_valid_trunk_group(name: str) -> bool:
    """Return True if *name* is one printable token, as ``trunk group`` lines store it."""
    return bool(name) and name.isprintable() and TRUNK_GROUP_NAME_RE.fullmatch(name.strip()) is not None


def _normalize(vid: str | int) -> str | None:
    """Return *vid* as canonical decimal text, or None if it is not a VLAN id."""
    if isinstance(vid, int) and not isinstance(vid, bool):
        return str(vid) if VLAN_MIN <= vid <= VLAN_MAX else None

    text = str(vid).strip()
    if not (text.isascii() and text.isdigit()):
        return None
    # int() refuses very long digit strings
    digits = text.lstrip("0")
    if not digits or len(digits) > len(str(VLAN_MAX)):
        return None
    return digits if VLAN_MIN <= int(digits) <= VLAN_MAX else None


def parse_name(section: str) -> str:
    """Return the VLAN name configured in *section*, or ``""``."""
    return parse_scalar(NAME_RE, section)


def parse_state(section: str) -> str:
    """Return the VLAN state configured in *section*, or ``""``."""
    return parse_scalar(STATE_RE, section)


def parse_trunk_groups(section: str) -> list[str]:
    """Return the trunk groups of *section* in configuration order."""
    return parse_list(TRUNK_GROUP_RE, section)


@register_resource("vlan")
class VlanManager(BaseResource):
    """VLAN configuration over a :class:`Node`.

    Read operations fetch the running config once per call. Mutating
    operations return True only if every command of their sequence was
    accepted; there is no rollback, so after a False the device holds
    whatever the commands before the rejected one configured.
    """

    # ── read path ────────────────────────────────────────────────────

    def get(self, vid: str | int) -> dict[str, str] | None:
        """Return the attribute map of VLAN *vid*.

        Keys are ``vlan_id``, ``name``, ``state`` and ``trunk_groups``
        (comma-joined, configuration order). Attributes missing from the
        section are ``""``.

        Returns:
            The map, or None if the VLAN is not configured or *vid* is invalid.
        """
        vlan_id = _normalize(vid)
        if vlan_id is None:
            return None
        return self._parse(vlan_id, self.running_config())

    def get_all(self) -> dict[str, dict[str, str]]:
        """Return attribute maps of all configured VLANs, in config order."""
        config = self.running_config()
        vlans: dict[str, dict[str, str]] = {}
        for vlan_id in find_headers(config, VLAN_HEADER_RE):
            attributes = self._parse(vlan_id, config)
            if attributes is not None:
                vlans[vlan_id] = attributes
        return vlans

    def get_section(self, vid: str | int) -> str:
        """Return the raw ``vlan <vid>`` section, or ``""`` if absent."""
        vlan_id = _normalize(vid)
        if vlan_id is None:
            return ""
        return self.get_block(f"vlan {vlan_id}")

    def get_trunk_groups(self, vid: str | int) -> str:
        """Return the trunk groups of *vid* comma-joined, ``""`` if none or absent."""
        attributes = self.get(vid)
        if attributes is None:
            return ""
        return attributes["trunk_groups"]

    def list_vlans(self) -> list[VlanConfig]:
        """Return every configured VLAN as a typed model."""
        return [VlanConfig.from_attributes(attrs) for attrs in self.get_all().values()]

    def _parse(self, vlan_id: str, config: str) -> dict[str, str] | None:
        section = get_section(config, f"vlan {vlan_id}")
        if not section:
            return None
        return {
            "vlan_id": vlan_id,
            "name": parse_name(section),
            "state": parse_state(section),
            "trunk_groups": ",".join(parse_trunk_groups(section)),
        }

    # ── resource lifecycle ───────────────────────────────────────────

    def create(self, vid: str | int) -> bool:
        """Create VLAN *vid*. Creating an existing VLAN leaves it unchanged."""
        vlan_id = self._validated(vid, "create")
        if vlan_id is None:
            return False
        ok = self.configure([f"vlan {vlan_id}"])
        if ok:
            logger.info("Created VLAN {}", vlan_id)
        return ok

    def delete(self, vid: str | int) -> bool:
        """Delete VLAN *vid*."""
        vlan_id = self._validated(vid, "delete")
        if vlan_id is None:
            return False
        ok = self.configure([f"no vlan {vlan_id}"])
        if ok:
            logger.info("Deleted VLAN {}", vlan_id)
        return ok

    def default(self, vid: str | int) -> bool:
        """Reset the whole configuration of VLAN *vid* to device defaults."""
        vlan_id = self._validated(vid, "default")
        if vlan_id is None:
            return False
        ok = self.configure([f"default vlan {vlan_id}"])
        if ok:
            logger.info("Defaulted VLAN {}", vlan_id)
        return ok

    def configure_vlan(self, vid: str | int, commands: Sequence[str]) -> bool:
        """Run *commands* inside the ``vlan <vid>`` configuration context.

        The sequence sent is ``vlan <vid>``, *commands*, ``exit``.
        """
        vlan_id = self._validated(vid, "configure")
        if vlan_id is None:
            return False
        return self.configure([f"vlan {vlan_id}", *commands, "exit"])

    # ── scalar attributes ────────────────────────────────────────────

    def set_name(self, vid: str | int, name: str) -> bool:
        """Set the VLAN name.

        Empty names and names containing line breaks or other control
        characters are rejected; use :meth:`set_name_default` to clear it.
        """
        if not is_valid_name(name):
            logger.warning("Refusing name {!r} for VLAN {}", name, vid)
            return False
        return self.configure_vlan(vid, [self.command_builder("name", name)])

    def set_name_default(self, vid: str | int) -> bool:
        """Reset the VLAN name to the device default."""
        return self.configure_vlan(vid, [self.command_builder("name", default=True)])

    def set_state(self, vid: str | int, state: str) -> bool:
        """Set the VLAN state (``active`` or ``suspend``)."""
        if state not in {s.value for s in VlanState}:
            logger.warning("Invalid state {!r} for VLAN {}", state, vid)
            return False
        return self.configure_vlan(vid, [self.command_builder("state", state)])

    def set_state_default(self, vid: str | int) -> bool:
        """Reset the VLAN state to the device default."""
        return self.configure_vlan(vid, [self.command_builder("state", default=True)])

    # ── trunk groups ─────────────────────────────────────────────────

    def set_trunk_group(self, vid: str | int, trunk_groups: Sequence[str]) -> bool:
        """Make the trunk groups of *vid* equal to *trunk_groups* (as a set).

        Only the difference is sent: one ``no trunk group`` per group to
        drop, then one ``trunk group`` per group to add, in a single
        sequence. Nothing is sent when the VLAN already matches.
        """
        vlan_id = self._validated(vid, "set trunk groups on")
        if vlan_id is None:
            return False

        desired = list(dict.fromkeys(g.strip() for g in trunk_groups if g and g.strip()))
        invalid = [g for g in desired if not is_valid_trunk_group(g)]
        if invalid:
            logger.warning("Refusing trunk groups {!r} for VLAN {}", invalid, vlan_id)
            return False

        current_attrs = self._parse(vlan_id, self.running_config())
        current = [g for g in (current_attrs or {}).get("trunk_groups", "").split(",") if g]

        to_remove, to_add = reconcile(current, desired)
        if not to_remove and not to_add:
            logger.debug("Trunk groups of VLAN {} already match", vlan_id)
            return True

        commands = [self.command_builder(f"trunk group {name}", enable=False) for name in to_remove]
        commands += [self.command_builder("trunk group", name) for name in to_add]
        ok = self.configure_vlan(vlan_id, commands)
        if ok:
            logger.info("VLAN {} trunk groups: -{} +{}", vlan_id, to_remove, to_add)
        return ok

    def add_trunk_group(self, vid: str | int, name: str) -> bool:
        """Add one trunk group to VLAN *vid*."""
        if not is_valid_trunk_group(name):
            logger.warning("Refusing trunk group {!r} for VLAN {}", name, vid)
            return False
        return self.configure_vlan(vid, [self.command_builder("trunk group", name)])

    def remove_trunk_group(self, vid: str | int, name: str) -> bool:
        """Remove one trunk group from VLAN *vid*."""
        if not is_valid_trunk_group(name):
            logger.warning("Refusing trunk group {!r} for VLAN {}", name, vid)
            return False
        return self.configure_vlan(vid, [self.command_builder(f"trunk group {name.strip()}", enable=False)])

    def set_trunk_group_default(self, vid: str | int) -> bool:
        """Remove all trunk groups of VLAN *vid*."""
        return self.configure_vlan(vid, [self.command_builder("trunk group", enable=False)])

    def _validated(self, vid: str | int, action: str) -> str | None:
        vlan_id = _normalize(vid)
        if vlan_id is None:
            logger.warning("Cannot {} VLAN {!r}: id must be {}-{}", action, vid, VLAN_MIN, VLAN_MAX)
        return vlan_id
