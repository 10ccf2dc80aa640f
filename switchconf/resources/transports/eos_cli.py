"""EOS-style CLI transport over an interactive SSH shell."""

from __future__ import annotations

import re
import time

import paramiko
from loguru import logger

from switchconf.resources.base.transport import BaseTransport
from switchconf.resources.exceptions import AuthenticationError, CommandError, SSHError

# Prompt patterns: "switch>", "switch#", "switch(config)#", "switch(config-vlan-10)#"
PROMPT_PATTERN = re.compile(r"(?:^|[\r\n])[\w\-.]+(?:\([^\)]*\))?[>#]\s*$")
ENABLE_PROMPT_PATTERN = re.compile(r"(?:^|[\r\n])[\w\-.]+#\s*$")
PASSWORD_PROMPT_PATTERN = re.compile(r"[Pp]assword:\s*$")
ENABLE_RESPONSE_PATTERN = re.compile(f"{PROMPT_PATTERN.pattern}|{PASSWORD_PROMPT_PATTERN.pattern}")

# "% Invalid input", "% Incomplete command", "% Ambiguous command", "% Error ..."
ERROR_PATTERN = re.compile(r"^%\s*\S.*$", re.MULTILINE)

DEFAULT_TIMEOUT = 10
BUFFER_SIZE = 65535
READ_DELAY = 0.1


class EOSCLITransport(BaseTransport):
    """SSH transport driving the EOS CLI through a paramiko interactive shell.

    Paging is switched off on connect so ``show running-config all`` comes
    back in one piece. Configuration commands are checked one by one; the
    first ``% ...`` response stops the sequence.
    """

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        port: int = 22,
        enable_password: str | None = None,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        super().__init__(host, username, password, port)
        self.enable_password = enable_password
        self.timeout = timeout
        self._client: paramiko.SSHClient | None = None
        self._shell: paramiko.Channel | None = None

    def connect(self) -> None:
        """Establish SSH connection, open the shell and enter enable mode."""
        self._client = paramiko.SSHClient()
        self._client.set_missing_host_key_policy(paramiko.AutoAddPolicy())

        try:
            self._client.connect(
                hostname=self.host,
                port=self.port or 22,
                username=self.username,
                password=self.password,
                look_for_keys=False,
                allow_agent=False,
                timeout=self.timeout,
            )
        except paramiko.AuthenticationException as e:
            raise AuthenticationError(f"SSH authentication failed: {e}") from e
        except (paramiko.SSHException, OSError) as e:
            raise SSHError(f"SSH connection failed: {e}") from e

        self._shell = self._client.invoke_shell(width=512)
        self._shell.settimeout(self.timeout)

        try:
            self._read_until_prompt()
            logger.info("SSH connected to {}", self.host)

            self.enter_enable_mode()
            self.send_command("terminal length 0")
        except SSHError:
            self.disconnect()
            raise

    def disconnect(self) -> None:
        """Close SSH shell and connection."""
        if self._shell:
            try:
                self._shell.close()
            except (paramiko.SSHException, OSError) as e:
                logger.debug("Error closing shell on {}: {}", self.host, e)
            self._shell = None
        if self._client:
            self._client.close()
            self._client = None

    def is_connected(self) -> bool:
        """Check if SSH connection and shell are active."""
        if self._client is None or self._shell is None:
            return False
        transport = self._client.get_transport()
        return transport is not None and transport.is_active() and not self._shell.closed

    def enter_enable_mode(self) -> str:
        """Enter privileged EXEC mode, answering the password prompt if one appears."""
        output = self._send_raw("enable", prompt=ENABLE_RESPONSE_PATTERN)
        if PASSWORD_PROMPT_PATTERN.search(output):
            if not self.enable_password:
                raise SSHError("Enable password requested but none configured")
            output = self._send_raw(self.enable_password)

        if not ENABLE_PROMPT_PATTERN.search(output):
            raise SSHError(f"Failed to enter enable mode. Output: {output}")

        logger.debug("Entered enable mode on {}", self.host)
        return output

    def send_command(self, command: str) -> str:
        """Send a single command and return its output (echo and prompt stripped)."""
        return self._strip(command, self._send_raw(command))

    def send_config_commands(self, commands: list[str]) -> str:
        """Enter config mode, send *commands* in order, then ``end``.

        Raises:
            CommandError: The first command answered with a ``% ...`` line.
                Later commands are skipped; ``end`` is still sent.
        """
        outputs: list[str] = [self.send_command("configure terminal")]
        try:
            for cmd in commands:
                output = self.send_command(cmd)
                outputs.append(output)
                error = ERROR_PATTERN.search(output)
                if error:
                    raise CommandError(f"Command '{cmd}' rejected: {error.group(0)}", command=cmd, output=output)
        finally:
            outputs.append(self.send_command("end"))

        return "\n".join(o for o in outputs if o)

    def _send_raw(self, command: str, prompt: re.Pattern[str] = PROMPT_PATTERN) -> str:
        self._ensure_connected()
        assert self._shell is not None
        self._shell.send((command + "\n").encode())
        return self._read_until_prompt(prompt)

    @staticmethod
    def _strip(command: str, output: str) -> str:
        lines = output.splitlines()
        if lines and command in lines[0]:
            lines = lines[1:]
        if lines and PROMPT_PATTERN.search("\n" + lines[-1]):
            lines = lines[:-1]
        return "\n".join(lines).strip()

    def _read_until_prompt(self, prompt: re.Pattern[str] = PROMPT_PATTERN) -> str:
        """Read shell output until *prompt* is seen.

        Raises:
            SSHError: No prompt within ``timeout`` seconds. Partial output
                is never returned, since it may be a truncated config.
        """
        output = ""
        start = time.time()
        assert self._shell is not None

        while time.time() - start < self.timeout:
            if self._shell.recv_ready():
                chunk = self._shell.recv(BUFFER_SIZE).decode("utf-8", errors="replace")
                output += chunk
                if prompt.search(output):
                    return output
            else:
                time.sleep(READ_DELAY)

        raise SSHError(
            f"Timed out after {self.timeout}s waiting for a prompt from {self.host}. Output: {output[-200:]!r}"
        )

    def _ensure_connected(self) -> None:
        if not self.is_connected():
            raise SSHError("Not connected. Call connect() first.")
