"""Connection profile configuration."""

from switchconf.config.profiles import (
    ConnectionProfile,
    config_path,
    connect_to,
    load_profiles,
    node_from_profile,
)

__all__ = [
    "ConnectionProfile",
    "config_path",
    "connect_to",
    "load_profiles",
    "node_from_profile",
]
