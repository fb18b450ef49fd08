# -*- coding: utf-8 -*-

__author__ = """jaeger-sender contributors"""

from jaeger_sender.config import SenderConfiguration, SenderTarget, TransportType
from jaeger_sender.senders import HttpSender, Sender, UdpSender

__all__ = [
    "SenderConfiguration",
    "SenderTarget",
    "TransportType",
    "HttpSender",
    "Sender",
    "UdpSender",
]
