"""Abstract base classes for resource management."""

from switchconf.resources.base.node import Node
from switchconf.resources.base.resource import BaseResource
from switchconf.resources.base.transport import BaseTransport

__all__ = [
    "BaseTransport",
    "BaseResource",
    "Node",
]
