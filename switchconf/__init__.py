"""Running-configuration resource management for EOS-style switches.

Reads resource state (VLANs) straight out of the device's running
configuration and turns desired state into minimal, idempotent
configuration-mode command sequences.
"""

__version__ = "0.1.0"

import os
import sys
from typing import Any, Callable, Dict, TextIO

from loguru import logger as glogger

glogger.disable(__name__)

DEFAULT_LOG_LEVEL = "DEBUG"

# records from a Node carry the device name in extra["device"]
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[device]}</magenta> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    level: str | None = None,
    sink: TextIO | None = None,
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Turn on switchconf's log output.

    The package is silent until this is called. Replaces any existing
    loguru sinks with a single one on *sink*.

    Args:
        level: Minimum level; defaults to ``$LOGURU_LEVEL``, then ``DEBUG``.
        sink: Stream receiving the records; defaults to stderr.
        loguru_filter: Record filter; the default drops ``skiplog`` records.
    """
    level = level or os.getenv("LOGURU_LEVEL", DEFAULT_LOG_LEVEL)
    glogger.remove()
    glogger.configure(extra={"device": "-", "skiplog": False})
    glogger.add(sink or sys.stderr, level=level, format=LOG_FORMAT, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.enable(__name__)


import switchconf.resources.vlans  # noqa: F401, E402  # trigger resource registration
from switchconf.resources.base.node import Node  # noqa: E402
from switchconf.resources.base.transport import BaseTransport  # noqa: E402
from switchconf.resources.exceptions import (  # noqa: E402
    AuthenticationError,
    CommandError,
    ConfigError,
    SSHError,
    SwitchError,
)
from switchconf.resources.factory import create_resource, list_resources  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "create_resource",
    "list_resources",
    "Node",
    "BaseTransport",
    "SwitchError",
    "AuthenticationError",
    "SSHError",
    "CommandError",
    "ConfigError",
]
