"""Abstract base class for running-config resources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from switchconf.resources.base.node import Node
from switchconf.resources.parsing.sections import get_section


class BaseResource(ABC):
    """Shared plumbing for one class of configuration resource.

    Subclasses parse their own sections and synthesize their own command
    sequences; everything device-facing goes through :class:`Node`.
    """

    def __init__(self, node: Node) -> None:
        self.node = node

    @abstractmethod
    def get(self, resource_id: str) -> dict[str, str] | None:
        """Return the attribute map of one resource, or None if absent."""

    @abstractmethod
    def get_all(self) -> dict[str, dict[str, str]]:
        """Return attribute maps of every configured resource, keyed by id."""

    def running_config(self) -> str:
        """Fetch a fresh copy of the device's running configuration."""
        return self.node.running_config()

    def get_block(self, header: str, config: str | None = None) -> str:
        """Return the section under *header* (``""`` if absent).

        Args:
            header: Header line, e.g. ``"vlan 10"``.
            config: Running config to search. Fetched from the node if omitted.
        """
        if config is None:
            config = self.running_config()
        return get_section(config, header)

    def configure(self, commands: list[str]) -> bool:
        """Apply *commands* on the node."""
        return self.node.config(commands)

    @staticmethod
    def command_builder(cmd: str, value: Any = "", default: bool = False, enable: bool = True) -> str:
        """Build a set, negate or default command line.

        Args:
            cmd: Command keyword(s), e.g. ``"name"``.
            value: Value appended when enabling.
            default: Build ``default <cmd>`` (takes precedence).
            enable: Build ``<cmd> <value>``; otherwise ``no <cmd>``.
        """
        if default:
            return f"default {cmd}"
        if enable:
            value = str(value).strip() if value is not None else ""
            return f"{cmd} {value}" if value else cmd
        return f"no {cmd}"
