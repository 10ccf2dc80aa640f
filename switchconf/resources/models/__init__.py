"""Data models for configuration resources."""

from switchconf.resources.models.vlan import VlanConfig, VlanState

__all__ = [
    "VlanConfig",
    "VlanState",
]
