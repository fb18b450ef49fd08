"""UDP sender delivering batches to a local Jaeger agent."""

from __future__ import annotations

import logging
import socket
from typing import Any, Dict, Optional

from jaeger_sender.constants import (
    DEFAULT_AGENT_UDP_COMPACT_PORT,
    DEFAULT_AGENT_UDP_HOST,
    DEFAULT_UDP_MAX_PACKET_SIZE,
)
from jaeger_sender.errors import PacketTooLargeError, SenderConnectionError

from .base import Sender

logger = logging.getLogger(__name__)


class UdpSender(Sender):
    """
    Sender that writes each batch as a single datagram to the agent.

    An empty host, a zero port and a zero packet size each select the
    corresponding default. The socket is opened on the first send.
    """

    DEFAULT_AGENT_UDP_HOST = DEFAULT_AGENT_UDP_HOST
    DEFAULT_AGENT_UDP_COMPACT_PORT = DEFAULT_AGENT_UDP_COMPACT_PORT
    DEFAULT_MAX_PACKET_SIZE = DEFAULT_UDP_MAX_PACKET_SIZE

    def __init__(self, host: str = "", port: int = 0, max_packet_size: int = 0) -> None:
        self.host = host or self.DEFAULT_AGENT_UDP_HOST
        self.port = port or self.DEFAULT_AGENT_UDP_COMPACT_PORT
        self.max_packet_size = max_packet_size or self.DEFAULT_MAX_PACKET_SIZE
        self._socket: Optional[socket.socket] = None

    def _connect(self) -> socket.socket:
        if self._socket is None:
            try:
                self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
                self._socket.connect((self.host, self.port))
            except (OSError, OverflowError) as e:
                self.close()
                raise SenderConnectionError(
                    f"Unable to open UDP socket to {self.host}:{self.port}: {e}"
                ) from e
        return self._socket

    def send(self, payload: bytes) -> None:
        if len(payload) > self.max_packet_size:
            raise PacketTooLargeError(len(payload), self.max_packet_size)

        sock = self._connect()
        try:
            sock.send(payload)
        except OSError as e:
            raise SenderConnectionError(
                f"Unable to send batch to agent at {self.host}:{self.port}: {e}"
            ) from e

        logger.debug("Sent %d bytes to %s:%s", len(payload), self.host, self.port)

    def close(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "sender": "udp",
            "host": self.host,
            "port": self.port,
            "max_packet_size": self.max_packet_size,
        }
