from .env import get_property, get_property_as_int, parse_int
from .sender import (
    AuthStrategy,
    SenderConfiguration,
    SenderTarget,
    TransportType,
    resolve_sender_target,
)

__all__ = [
    "AuthStrategy",
    "SenderConfiguration",
    "SenderTarget",
    "TransportType",
    "get_property",
    "get_property_as_int",
    "parse_int",
    "resolve_sender_target",
]
