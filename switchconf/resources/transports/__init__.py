"""Concrete device transports."""

from switchconf.resources.transports.eos_cli import EOSCLITransport

__all__ = [
    "EOSCLITransport",
]
