"""Connection profiles loaded from an INI file.

Format::

    [connection:leaf01]
    host = 192.168.0.11
    username = admin
    password = secret
    enable_password = enable-secret
    port = 22

``host`` defaults to the profile name. The file is looked up at the
explicit path, then ``$SWITCHCONF_CONF``, then ``~/.switchconf.conf``.
"""

from __future__ import annotations

import configparser
import os
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from switchconf.resources.base.node import Node
from switchconf.resources.exceptions import ConfigError
from switchconf.resources.transports.eos_cli import EOSCLITransport

CONFIG_ENV_VAR = "SWITCHCONF_CONF"
DEFAULT_CONFIG_PATH = Path("~/.switchconf.conf")
SECTION_PREFIX = "connection:"


class ConnectionProfile(BaseModel):
    name: str
    host: str
    username: str = "admin"
    password: str = Field(default="", repr=False)
    enable_password: str | None = Field(default=None, repr=False)
    port: int = Field(default=22, ge=1, le=65535)


def config_path(path: str | os.PathLike[str] | None = None) -> Path:
    """Return the profile file to read, honouring ``$SWITCHCONF_CONF``."""
    if path is not None:
        return Path(path).expanduser()
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def load_profiles(path: str | os.PathLike[str] | None = None) -> dict[str, ConnectionProfile]:
    """Load all ``[connection:<name>]`` profiles.

    Args:
        path: Explicit profile file. When given it must exist.

    Returns:
        Profiles keyed by name, in file order. Empty if no file was found
        on the default lookup path.

    Raises:
        ConfigError: The file is unreadable or a profile is invalid.
    """
    resolved = config_path(path)
    if not resolved.is_file():
        if path is not None:
            raise ConfigError(f"Profile file not found: {resolved}", path=str(resolved))
        logger.debug("No profile file at {}", resolved)
        return {}

    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(resolved, encoding="utf-8")
    except configparser.Error as e:
        raise ConfigError(f"Cannot parse {resolved}: {e}", path=str(resolved)) from e

    profiles: dict[str, ConnectionProfile] = {}
    for section in parser.sections():
        if not section.startswith(SECTION_PREFIX):
            continue
        name = section[len(SECTION_PREFIX) :].strip()
        values = dict(parser[section])
        values.setdefault("host", name)
        try:
            profiles[name] = ConnectionProfile(name=name, **values)
        except ValidationError as e:
            raise ConfigError(f"Invalid profile '{name}' in {resolved}: {e}", path=str(resolved)) from e

    logger.debug("Loaded {} profile(s) from {}", len(profiles), resolved)
    return profiles


def node_from_profile(profile: ConnectionProfile) -> Node:
    """Build an (unconnected) node for *profile*."""
    transport = EOSCLITransport(
        host=profile.host,
        username=profile.username,
        password=profile.password,
        port=profile.port,
        enable_password=profile.enable_password,
    )
    return Node(transport, name=profile.name)


def connect_to(name: str, path: str | os.PathLike[str] | None = None) -> Node:
    """Return a node for the profile called *name*.

    Raises:
        ConfigError: No such profile.
    """
    profiles = load_profiles(path)
    if name not in profiles:
        available = ", ".join(profiles) or "none"
        raise ConfigError(f"Unknown profile '{name}'. Available: {available}", path=str(config_path(path)))
    return node_from_profile(profiles[name])
