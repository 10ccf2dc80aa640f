"""Configuration resources: section parsing, reconciliation and command synthesis."""

import switchconf.resources.vlans  # noqa: F401  # trigger resource registration

from switchconf.resources.base.node import Node
from switchconf.resources.base.resource import BaseResource
from switchconf.resources.base.transport import BaseTransport
from switchconf.resources.exceptions import (
    AuthenticationError,
    CommandError,
    ConfigError,
    SSHError,
    SwitchError,
)
from switchconf.resources.factory import create_resource, list_resources, resource_class
from switchconf.resources.vlans import VlanManager, is_vlan

__all__ = [
    "create_resource",
    "list_resources",
    "resource_class",
    "Node",
    "BaseResource",
    "BaseTransport",
    "VlanManager",
    "is_vlan",
    "SwitchError",
    "AuthenticationError",
    "SSHError",
    "CommandError",
    "ConfigError",
]
