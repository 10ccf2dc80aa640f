"""Tests for EOSCLITransport with paramiko mocked out."""

import itertools
from unittest.mock import MagicMock, call, patch

import paramiko
import pytest

from switchconf.resources.exceptions import AuthenticationError, CommandError, SSHError
from switchconf.resources.transports.eos_cli import (
    ERROR_PATTERN,
    PROMPT_PATTERN,
    EOSCLITransport,
)


def make_shell(*responses: bytes) -> MagicMock:
    """Shell mock answering each recv() with the next response."""
    shell = MagicMock()
    shell.closed = False
    shell.recv_ready.return_value = True
    shell.recv.side_effect = list(responses)
    return shell


@pytest.fixture()
def transport():
    return EOSCLITransport(host="10.0.0.1", username="admin", password="pw", timeout=1)


class TestPromptPatterns:
    """Test prompt and error detection patterns."""

    @pytest.mark.parametrize(
        "output",
        ["leaf01>", "leaf01#", "\r\nleaf01(config)#", "\nleaf01(config-vlan-10)# ", "\r\nsw-1.lab#"],
    )
    def test_prompt_detected(self, output):
        assert PROMPT_PATTERN.search(output)

    @pytest.mark.parametrize("output", ["   name BIGDATA", "vlan 10", "! comment"])
    def test_plain_output_not_a_prompt(self, output):
        assert not PROMPT_PATTERN.search(output)

    @pytest.mark.parametrize(
        "output",
        [
            "% Invalid input (at token 1: '5000')",
            "% Incomplete command",
            "something\n% Ambiguous command",
        ],
    )
    def test_error_detected(self, output):
        assert ERROR_PATTERN.search(output)

    def test_warning_is_not_an_error(self):
        assert not ERROR_PATTERN.search("! VLAN 10 has no ports")


class TestConnect:
    """Test connection setup and error mapping."""

    @patch("switchconf.resources.transports.eos_cli.paramiko.SSHClient")
    def test_connect_enters_enable_and_disables_paging(self, mock_client_cls, transport):
        client = mock_client_cls.return_value
        shell = make_shell(b"leaf01>", b"enable\r\nleaf01#", b"terminal length 0\r\nleaf01#")
        client.invoke_shell.return_value = shell

        transport.connect()

        client.connect.assert_called_once()
        assert client.connect.call_args.kwargs["hostname"] == "10.0.0.1"
        assert shell.send.call_args_list == [call(b"enable\n"), call(b"terminal length 0\n")]
        assert transport.is_connected()

    @patch("switchconf.resources.transports.eos_cli.paramiko.SSHClient")
    def test_authentication_failure(self, mock_client_cls, transport):
        mock_client_cls.return_value.connect.side_effect = paramiko.AuthenticationException("denied")
        with pytest.raises(AuthenticationError) as exc_info:
            transport.connect()
        assert "denied" in str(exc_info.value)

    @patch("switchconf.resources.transports.eos_cli.paramiko.SSHClient")
    def test_connection_failure(self, mock_client_cls, transport):
        mock_client_cls.return_value.connect.side_effect = OSError("unreachable")
        with pytest.raises(SSHError) as exc_info:
            transport.connect()
        assert "SSH connection failed" in str(exc_info.value)

    def test_send_command_requires_connection(self, transport):
        with pytest.raises(SSHError) as exc_info:
            transport.send_command("show version")
        assert "Not connected" in str(exc_info.value)

    def test_is_connected_false_initially(self, transport):
        assert transport.is_connected() is False


class TestReadTimeout:
    """A missing prompt is an error, never a short read."""

    @patch("switchconf.resources.transports.eos_cli.time.sleep")
    def test_no_prompt_raises(self, _sleep, transport):
        shell = make_shell(b"vlan 10\r\n   name web\r\n")
        shell.recv_ready.side_effect = itertools.chain([True], itertools.repeat(False))
        transport._shell = shell
        transport.timeout = 0.05

        with pytest.raises(SSHError) as exc_info:
            transport._read_until_prompt()
        assert "Timed out" in str(exc_info.value)
        assert "name web" in str(exc_info.value)

    @patch("switchconf.resources.transports.eos_cli.time.sleep")
    def test_send_command_propagates_timeout(self, _sleep, transport):
        shell = make_shell()
        shell.recv_ready.return_value = False
        transport.timeout = 0.05
        with patch.object(transport, "_ensure_connected"):
            transport._shell = shell
            with pytest.raises(SSHError):
                transport.send_command("show running-config all")

    @patch("switchconf.resources.transports.eos_cli.paramiko.SSHClient")
    def test_connect_without_prompt_disconnects(self, mock_client_cls, transport):
        client = mock_client_cls.return_value
        shell = make_shell()
        shell.recv_ready.return_value = False
        client.invoke_shell.return_value = shell
        transport.timeout = 0.05

        with patch("switchconf.resources.transports.eos_cli.time.sleep"):
            with pytest.raises(SSHError):
                transport.connect()
        shell.close.assert_called_once()
        client.close.assert_called_once()
        assert transport.is_connected() is False


class TestEnableMode:
    """Test enter_enable_mode."""

    def test_password_prompt_answered(self, transport):
        transport.enable_password = "secret"
        with patch.object(transport, "_send_raw", side_effect=["enable\r\nPassword: ", "\r\nleaf01#"]) as raw:
            transport.enter_enable_mode()
        assert raw.call_args_list[1] == call("secret")

    def test_password_prompt_without_password(self, transport):
        with patch.object(transport, "_send_raw", return_value="enable\r\nPassword: "):
            with pytest.raises(SSHError):
                transport.enter_enable_mode()

    def test_still_unprivileged(self, transport):
        with patch.object(transport, "_send_raw", return_value="enable\r\n% Authorization denied\r\nleaf01>"):
            with pytest.raises(SSHError) as exc_info:
                transport.enter_enable_mode()
        assert "Failed to enter enable mode" in str(exc_info.value)


class TestSendConfigCommands:
    """Test configuration-mode command sequencing."""

    def test_wraps_in_configure_and_end(self, transport):
        with patch.object(transport, "send_command", return_value="") as send:
            transport.send_config_commands(["vlan 10", "name web", "exit"])
        assert [c.args[0] for c in send.call_args_list] == [
            "configure terminal",
            "vlan 10",
            "name web",
            "exit",
            "end",
        ]

    def test_stops_at_first_rejected_command(self, transport):
        responses = {"vlan 5000": "% Invalid input (at token 1: '5000')"}
        with patch.object(transport, "send_command", side_effect=lambda c: responses.get(c, "")) as send:
            with pytest.raises(CommandError) as exc_info:
                transport.send_config_commands(["vlan 10", "vlan 5000", "vlan 20"])

        sent = [c.args[0] for c in send.call_args_list]
        assert "vlan 20" not in sent
        assert sent[-1] == "end"
        assert exc_info.value.command == "vlan 5000"
        assert "Invalid input" in exc_info.value.output


class TestStrip:
    """Test echo/prompt stripping."""

    def test_strips_echo_and_prompt(self):
        output = "show running-config all\r\nvlan 10\r\n   name web\r\nleaf01#"
        assert EOSCLITransport._strip("show running-config all", output) == "vlan 10\n   name web"

    def test_keeps_output_without_echo(self):
        assert EOSCLITransport._strip("end", "line one\nleaf01(config)#") == "line one"
