"""Shared fixtures for the switchconf test suite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from switchconf.resources.base.node import Node
from switchconf.resources.base.transport import BaseTransport
from switchconf.resources.exceptions import CommandError
from switchconf.resources.vlans import VlanManager

# ── running-config samples ────────────────────────────────────────────

SAMPLE_RUNNING_CONFIG = """\
! Command: show running-config all
! device: leaf01 (vEOS, EOS-4.30.1F)
!
hostname leaf01
!
spanning-tree mode mstp
!
vlan 1
   name default
   state active
   no private-vlan
   no trunk group
!
vlan 10
   name BIGDATA
   state active
   no private-vlan
   trunk group tg1
   trunk group mlag-peer
!
vlan 100
   name VLAN0100
   state suspend
   no private-vlan
   no trunk group
!
vlan 4094
   name MLAG
   state active
   trunk group mlag-peer
!
interface Ethernet1
   description vlan 10 uplink
   switchport access vlan 10
!
end
"""


@pytest.fixture()
def running_config():
    """A realistic ``show running-config all`` output."""
    return SAMPLE_RUNNING_CONFIG


# ── transport mocks ───────────────────────────────────────────────────


@pytest.fixture()
def mock_transport():
    """MagicMock of a transport serving SAMPLE_RUNNING_CONFIG."""
    transport = MagicMock()
    transport.host = "leaf01"
    transport.is_connected.return_value = True
    transport.send_command.return_value = SAMPLE_RUNNING_CONFIG
    transport.send_config_commands.return_value = ""
    return transport


@pytest.fixture()
def mock_vlans(mock_transport):
    """VlanManager bound to a node over ``mock_transport``."""
    return VlanManager(Node(mock_transport))


# ── in-memory device ──────────────────────────────────────────────────


class FakeEOSDevice(BaseTransport):
    """In-memory EOS device understanding the VLAN configuration commands.

    Commands listed in ``reject`` raise CommandError; commands before them
    stay applied, as on a real device.
    """

    def __init__(self, vlans: dict[str, dict] | None = None, reject: set[str] | None = None):
        super().__init__("fake-eos", "admin", "")
        self.vlans: dict[int, dict] = {}
        for vid, attrs in (vlans or {"1": {}}).items():
            self.vlans[int(vid)] = self._fresh(int(vid)) | attrs
        self.reject = reject or set()
        self.connected = False
        self.config_calls: list[list[str]] = []
        self.show_calls = 0

    @staticmethod
    def _fresh(vid: int) -> dict:
        return {"name": None, "state": None, "trunk_groups": []}

    def connect(self) -> None:
        self.connected = True

    def disconnect(self) -> None:
        self.connected = False

    def is_connected(self) -> bool:
        return self.connected

    def send_command(self, command: str) -> str:
        if command != "show running-config all":
            return f"% Invalid input: {command}"
        self.show_calls += 1
        return self.render()

    def render(self) -> str:
        lines = ["! Command: show running-config all", "hostname fake-eos", "!"]
        for vid in sorted(self.vlans):
            attrs = self.vlans[vid]
            default_name = "default" if vid == 1 else f"VLAN{vid:04d}"
            lines.append(f"vlan {vid}")
            lines.append(f"   name {attrs['name'] or default_name}")
            lines.append(f"   state {attrs['state'] or 'active'}")
            lines.append("   no private-vlan")
            if attrs["trunk_groups"]:
                lines.extend(f"   trunk group {tg}" for tg in attrs["trunk_groups"])
            else:
                lines.append("   no trunk group")
            lines.append("!")
        lines.append("end")
        return "\n".join(lines) + "\n"

    def send_config_commands(self, commands: list[str]) -> str:
        self.config_calls.append(list(commands))
        context: int | None = None
        for cmd in commands:
            if cmd in self.reject:
                raise CommandError(f"Command '{cmd}' rejected", command=cmd, output="% Invalid input")
            context = self._apply(cmd, context)
        return ""

    def _apply(self, cmd: str, context: int | None) -> int | None:
        words = cmd.split()
        if words[:1] == ["vlan"] and len(words) == 2:
            vid = int(words[1])
            self.vlans.setdefault(vid, self._fresh(vid))
            return vid
        if words[:2] == ["no", "vlan"]:
            self.vlans.pop(int(words[2]), None)
            return None
        if words[:2] == ["default", "vlan"]:
            vid = int(words[2])
            if vid in self.vlans:
                self.vlans[vid] = self._fresh(vid)
            return None
        if cmd == "exit":
            return None
        if context is None:
            raise CommandError(f"Command '{cmd}' rejected", command=cmd, output="% Invalid input")

        attrs = self.vlans[context]
        if words[0] in ("name", "state") and len(words) == 2:
            attrs[words[0]] = words[1]
        elif words[0] in ("default", "no") and words[1:] in (["name"], ["state"]):
            attrs[words[1]] = None
        elif words[:2] == ["trunk", "group"] and len(words) == 3:
            if words[2] not in attrs["trunk_groups"]:
                attrs["trunk_groups"].append(words[2])
        elif words[:3] == ["no", "trunk", "group"] and len(words) == 4:
            if words[3] in attrs["trunk_groups"]:
                attrs["trunk_groups"].remove(words[3])
        elif cmd in ("no trunk group", "default trunk group"):
            attrs["trunk_groups"] = []
        else:
            raise CommandError(f"Command '{cmd}' rejected", command=cmd, output="% Invalid input")
        return context


@pytest.fixture()
def fake_device():
    """Factory fixture returning a FakeEOSDevice."""

    def _make(**kwargs):
        return FakeEOSDevice(**kwargs)

    return _make


@pytest.fixture()
def device_vlans(fake_device):
    """Factory fixture returning ``(device, VlanManager)`` over a FakeEOSDevice."""

    def _make(**kwargs):
        device = fake_device(**kwargs)
        return device, VlanManager(Node(device))

    return _make
