import socket
from unittest.mock import patch

import pytest

from jaeger_sender.errors import PacketTooLargeError, SenderConnectionError
from jaeger_sender.senders.udp import UdpSender


@pytest.fixture
def agent_socket():
    """
    A local UDP socket standing in for the agent.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2)
    yield sock
    sock.close()


class TestUdpSenderDefaults:
    """
    Tests for UdpSender default substitution.
    """

    def test_no_arguments(self) -> None:
        sender = UdpSender()

        assert sender.host == "localhost"
        assert sender.port == 6831
        assert sender.max_packet_size == 65000

    def test_empty_and_zero_select_defaults(self) -> None:
        sender = UdpSender("", 0, 0)

        assert (sender.host, sender.port, sender.max_packet_size) == (
            UdpSender.DEFAULT_AGENT_UDP_HOST,
            UdpSender.DEFAULT_AGENT_UDP_COMPACT_PORT,
            UdpSender.DEFAULT_MAX_PACKET_SIZE,
        )

    def test_explicit_values(self) -> None:
        sender = UdpSender("myagent", 6832, 1500)

        assert sender.as_dict() == {
            "sender": "udp",
            "host": "myagent",
            "port": 6832,
            "max_packet_size": 1500,
        }

    def test_construction_opens_no_socket(self) -> None:
        with patch("jaeger_sender.senders.udp.socket.socket") as mock_socket:
            UdpSender("myagent", 6832)

        mock_socket.assert_not_called()


class TestUdpSenderSend:
    """
    Tests for UdpSender.send.
    """

    def test_sends_datagram(self, agent_socket: socket.socket) -> None:
        host, port = agent_socket.getsockname()

        with UdpSender(host, port) as sender:
            sender.send(b"batch")
            data, _ = agent_socket.recvfrom(65535)

        assert data == b"batch"

    def test_reuses_socket(self, agent_socket: socket.socket) -> None:
        host, port = agent_socket.getsockname()

        with UdpSender(host, port) as sender:
            sender.send(b"one")
            first = sender._socket
            sender.send(b"two")

            assert sender._socket is first
            assert agent_socket.recvfrom(65535)[0] == b"one"
            assert agent_socket.recvfrom(65535)[0] == b"two"

    def test_oversized_payload(self) -> None:
        sender = UdpSender("127.0.0.1", 6831, 3)

        with pytest.raises(PacketTooLargeError):
            sender.send(b"1234")

        assert sender._socket is None

    def test_socket_error_is_wrapped(self) -> None:
        sender = UdpSender("127.0.0.1", 6831)

        with patch(
            "jaeger_sender.senders.udp.socket.socket", side_effect=OSError("no sockets")
        ):
            with pytest.raises(SenderConnectionError, match="no sockets"):
                sender.send(b"batch")

    def test_close_is_idempotent(self, agent_socket: socket.socket) -> None:
        host, port = agent_socket.getsockname()
        sender = UdpSender(host, port)
        sender.send(b"batch")

        sender.close()
        sender.close()

        assert sender._socket is None

    @pytest.mark.parametrize("port", [70000, -1])
    def test_port_outside_socket_range_is_wrapped(self, port: int) -> None:
        sender = UdpSender("127.0.0.1", port)

        with pytest.raises(SenderConnectionError, match=f"127.0.0.1:{port}"):
            sender.send(b"batch")

        assert sender._socket is None
