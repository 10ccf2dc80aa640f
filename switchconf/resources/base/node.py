"""Device node: running-config fetch and command application."""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING, Any, Self

from loguru import logger

from switchconf.resources.base.transport import BaseTransport
from switchconf.resources.exceptions import CommandError

if TYPE_CHECKING:
    from switchconf.resources.base.resource import BaseResource

RUNNING_CONFIG_COMMAND = "show running-config all"


class Node:
    """One device connection, as seen by the resource managers.

    The running configuration is fetched on every call and never cached,
    so resource reads always reflect the latest applied commands. A node
    does no locking: share one across threads only with external
    serialization.

    Usage::

        with Node(EOSCLITransport("10.0.0.1", "admin", "secret")) as node:
            vlans = node.api("vlan")
            vlans.create("10")
            print(vlans.get("10"))
    """

    def __init__(self, transport: BaseTransport, name: str | None = None) -> None:
        self.transport = transport
        self.name = name or transport.host
        self._log = logger.bind(device=self.name)

    def running_config(self) -> str:
        """Fetch the current running configuration text."""
        self._ensure_connected()
        self._log.debug("Fetching running config")
        return self.transport.send_command(RUNNING_CONFIG_COMMAND)

    def config(self, commands: list[str] | str) -> bool:
        """Apply configuration commands in order.

        Args:
            commands: A command or an ordered list of commands.

        Returns:
            True if every command was accepted. False as soon as one is
            rejected; commands applied before it stay applied.
        """
        if isinstance(commands, str):
            commands = [commands]
        if not commands:
            return True

        # each command must stay a single CLI line
        unsafe = [cmd for cmd in commands if not cmd.isprintable()]
        if unsafe:
            self._log.warning("Refusing commands with control characters: {!r}", unsafe)
            return False

        self._ensure_connected()
        self._log.debug("Applying {}", commands)
        try:
            self.transport.send_config_commands(list(commands))
        except CommandError as e:
            self._log.warning("Rejected {!r}: {}", e.command, e.output or e)
            return False
        return True

    def api(self, name: str, **kwargs: Any) -> BaseResource:
        """Return the resource manager registered as *name* for this node."""
        from switchconf.resources.factory import create_resource

        return create_resource(name, self, **kwargs)

    def connect(self) -> None:
        """Connect the underlying transport."""
        self.transport.connect()

    def disconnect(self) -> None:
        """Disconnect the underlying transport."""
        if self.transport.is_connected():
            self.transport.disconnect()

    def _ensure_connected(self) -> None:
        if not self.transport.is_connected():
            self.transport.connect()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.disconnect()

    def __repr__(self) -> str:
        return f"Node(name={self.name!r})"
