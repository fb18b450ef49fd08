import json
import socket
from pathlib import Path

import pytest
from typer.testing import CliRunner

from jaeger_sender.cli import cli
from jaeger_sender.constants import EXIT_CODE_CONNECTION_ERROR, EXIT_CODE_FAILURE

ENDPOINT = "http://collector:14268/api/traces"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def agent_socket():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2)
    yield sock
    sock.close()


@pytest.fixture
def batch_file(tmp_path: Path) -> Path:
    path = tmp_path / "batch.thrift"
    path.write_bytes(b"batch")
    return path


class TestResolveCommand:
    """
    Tests for `jaeger-sender resolve`.
    """

    def test_defaults_to_udp(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "transport": "udp",
            "host": "localhost",
            "port": 6831,
        }

    def test_environment_endpoint_with_token(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["resolve", "--json"],
            env={"JAEGER_ENDPOINT": ENDPOINT, "JAEGER_AUTH_TOKEN": "tok123"},
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "transport": "http",
            "endpoint": ENDPOINT,
            "auth": "bearer",
        }
        assert "tok123" not in result.stdout

    def test_options_override_environment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "resolve",
                "--json",
                "--endpoint",
                ENDPOINT,
                "--auth-username",
                "u",
                "--auth-password",
                "p",
            ],
            env={"JAEGER_AGENT_HOST": "myagent", "JAEGER_AUTH_TOKEN": "tok123"},
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "transport": "http",
            "endpoint": ENDPOINT,
            "auth": "basic",
            "username": "u",
        }

    def test_malformed_port_falls_back_to_default(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["resolve", "--json"],
            env={"JAEGER_AGENT_HOST": "myagent", "JAEGER_AGENT_PORT": "notanumber"},
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["port"] == 6831

    def test_table_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["resolve", "--agent-host", "myagent", "--agent-port", "6832"]
        )

        assert result.exit_code == 0
        assert "udp sender" in result.stdout
        assert "myagent" in result.stdout
        assert "6832" in result.stdout


class TestSendCommand:
    """
    Tests for `jaeger-sender send`.
    """

    def test_sends_to_agent(
        self, runner: CliRunner, agent_socket: socket.socket, batch_file: Path
    ) -> None:
        host, port = agent_socket.getsockname()

        result = runner.invoke(
            cli,
            ["send", str(batch_file)],
            env={"JAEGER_AGENT_HOST": host, "JAEGER_AGENT_PORT": str(port)},
        )

        assert result.exit_code == 0
        assert "Sent 5 bytes via udp sender" in result.stdout
        assert agent_socket.recvfrom(65535)[0] == b"batch"

    def test_invalid_endpoint_exits_with_failure(
        self, runner: CliRunner, batch_file: Path
    ) -> None:
        result = runner.invoke(
            cli, ["send", str(batch_file), "--endpoint", "not-a-url"]
        )

        assert result.exit_code == EXIT_CODE_FAILURE
        assert "Invalid collector endpoint" in result.output

    def test_out_of_range_agent_port_exits_with_connection_error(
        self, runner: CliRunner, batch_file: Path
    ) -> None:
        result = runner.invoke(
            cli, ["send", str(batch_file)], env={"JAEGER_AGENT_PORT": "70000"}
        )

        assert result.exit_code == EXIT_CODE_CONNECTION_ERROR
        assert "Unable to open UDP socket" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["send", str(tmp_path / "missing.thrift")])

        assert result.exit_code != 0
