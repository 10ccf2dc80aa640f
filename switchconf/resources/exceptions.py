"""Exception hierarchy for switch configuration management."""


class SwitchError(Exception):
    """Base exception for all switch configuration errors."""


class AuthenticationError(SwitchError):
    """SSH authentication failed."""


class SSHError(SwitchError):
    """SSH connection or command execution failed."""


class CommandError(SwitchError):
    """The device rejected a configuration command."""

    def __init__(self, message: str, command: str | None = None, output: str = ""):
        self.command = command
        self.output = output
        super().__init__(message)


class ConfigError(SwitchError):
    """Connection profile configuration is missing or invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
