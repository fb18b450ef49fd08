"""Sender implementations for jaeger-sender."""

from .base import Sender
from .http import AuthenticationType, BearerTokenAuth, HttpSender
from .udp import UdpSender

__all__ = [
    "Sender",
    "AuthenticationType",
    "BearerTokenAuth",
    "HttpSender",
    "UdpSender",
]
