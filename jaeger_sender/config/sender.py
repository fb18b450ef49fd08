import logging
from enum import Enum
from typing import Any, Dict, Mapping, NamedTuple, Optional

from jaeger_sender.constants import (
    JAEGER_AGENT_HOST,
    JAEGER_AGENT_PORT,
    JAEGER_AUTH_TOKEN,
    JAEGER_ENDPOINT,
    JAEGER_PASSWORD,
    JAEGER_USER,
)
from jaeger_sender.senders import AuthenticationType, HttpSender, Sender, UdpSender

from .env import get_property, get_property_as_int
from .log_codes import (
    SENDER_BASIC_AUTH,
    SENDER_EXPLICIT,
    SENDER_HTTP,
    SENDER_TOKEN_AUTH,
    SENDER_UDP,
)

logger = logging.getLogger(__name__)

# Lets the UDP sender apply its own packet size limit.
DEFAULT_MAX_PACKET_SIZE = 0


class TransportType(str, Enum):
    explicit = "explicit"
    http = "http"
    udp = "udp"


def _mask(secret: Optional[str]) -> str:
    return "'***'" if secret else repr(secret)


class AuthStrategy(NamedTuple):
    type: AuthenticationType
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"AuthStrategy(type={self.type!r}, username={self.username!r}, "
            f"password={_mask(self.password)}, token={_mask(self.token)})"
        )

    def as_dict(self) -> Dict[str, Optional[str]]:
        result: Dict[str, Optional[str]] = {"auth": self.type.value}
        if self.type == AuthenticationType.basic:
            result["username"] = self.username
        return result


NO_AUTH = AuthStrategy(type=AuthenticationType.none)


class SenderTarget(NamedTuple):
    """
    The outcome of sender resolution.

    Args:
        transport (TransportType): Which sender will be used.
        sender (Optional[Sender]): The caller supplied sender, for explicit transports.
        endpoint (Optional[str]): The collector URL, for HTTP transports.
        auth (AuthStrategy): The authentication attached to HTTP requests.
        host (Optional[str]): The agent host, for UDP transports.
        port (Optional[int]): The agent port, for UDP transports.
        max_packet_size (int): Packet size handed to the UDP sender, 0 means its default.
    """

    transport: TransportType
    sender: Optional[Sender] = None
    endpoint: Optional[str] = None
    auth: AuthStrategy = NO_AUTH
    host: Optional[str] = None
    port: Optional[int] = None
    max_packet_size: int = DEFAULT_MAX_PACKET_SIZE

    def as_dict(self) -> Dict[str, Any]:
        """
        Convert the target to a dictionary that is safe to log.

        Passwords and tokens are never included.

        Returns:
            dict: Dictionary describing the target.
        """
        if self.transport == TransportType.explicit:
            return {
                "transport": self.transport.value,
                "sender": type(self.sender).__name__,
            }
        if self.transport == TransportType.http:
            return {
                "transport": self.transport.value,
                "endpoint": self.endpoint,
                **self.auth.as_dict(),
            }
        return {
            "transport": self.transport.value,
            "host": self.host,
            "port": self.port,
        }


def _string_or_default(value: Optional[str], default: str) -> str:
    return value if value else default


def _resolve_auth(configuration: "SenderConfiguration") -> AuthStrategy:
    username = configuration.auth_username
    password = configuration.auth_password
    token = configuration.auth_token

    # A lone username or password is ignored without a warning.
    if username and password:
        return AuthStrategy(
            type=AuthenticationType.basic, username=username, password=password
        )
    if token:
        return AuthStrategy(type=AuthenticationType.bearer, token=token)

    return NO_AUTH


def resolve_sender_target(configuration: "SenderConfiguration") -> SenderTarget:
    """
    Decide which sender the configuration describes.

    Resolution order (first match wins):
      1. A sender set with ``with_sender`` is used as is
      2. A non-empty endpoint selects the HTTP sender, with basic auth when
         both username and password are set, else bearer auth when a token
         is set, else no auth
      3. The UDP sender, with the agent defaults for a missing host or port

    This performs no I/O and never raises.

    Args:
        configuration (SenderConfiguration): The populated configuration.

    Returns:
        SenderTarget: The resolved target.
    """
    if configuration.sender is not None:
        return SenderTarget(
            transport=TransportType.explicit, sender=configuration.sender
        )

    if configuration.endpoint:
        return SenderTarget(
            transport=TransportType.http,
            endpoint=configuration.endpoint,
            auth=_resolve_auth(configuration),
        )

    port = configuration.agent_port
    return SenderTarget(
        transport=TransportType.udp,
        host=_string_or_default(
            configuration.agent_host, UdpSender.DEFAULT_AGENT_UDP_HOST
        ),
        port=port if port is not None else UdpSender.DEFAULT_AGENT_UDP_COMPACT_PORT,
    )


class SenderConfiguration:
    """
    Holds the configuration related to the sender.

    The sender is either a caller supplied :class:`Sender`, an
    :class:`HttpSender` talking to a collector endpoint or a
    :class:`UdpSender` talking to a local agent. Setters return the
    configuration so calls can be chained; the last call for a field wins.
    """

    def __init__(self, logger: logging.Logger = logger) -> None:
        self._logger = logger
        self._sender: Optional[Sender] = None
        self._agent_host: Optional[str] = None
        self._agent_port: Optional[int] = None
        self._endpoint: Optional[str] = None
        self._auth_token: Optional[str] = None
        self._auth_username: Optional[str] = None
        self._auth_password: Optional[str] = None

    @property
    def sender(self) -> Optional[Sender]:
        """A caller supplied sender. If set, nothing else has effect."""
        return self._sender

    @property
    def agent_host(self) -> Optional[str]:
        return self._agent_host

    @property
    def agent_port(self) -> Optional[int]:
        return self._agent_port

    @property
    def endpoint(self) -> Optional[str]:
        """The collector endpoint, like https://jaeger-collector:14268/api/traces."""
        return self._endpoint

    @property
    def auth_token(self) -> Optional[str]:
        return self._auth_token

    @property
    def auth_username(self) -> Optional[str]:
        return self._auth_username

    @property
    def auth_password(self) -> Optional[str]:
        return self._auth_password

    def with_sender(self, sender: Optional[Sender]) -> "SenderConfiguration":
        self._sender = sender
        return self

    def with_agent_host(self, agent_host: Optional[str]) -> "SenderConfiguration":
        self._agent_host = agent_host
        return self

    def with_agent_port(self, agent_port: Optional[int]) -> "SenderConfiguration":
        self._agent_port = agent_port
        return self

    def with_endpoint(self, endpoint: Optional[str]) -> "SenderConfiguration":
        self._endpoint = endpoint
        return self

    def with_auth_token(self, auth_token: Optional[str]) -> "SenderConfiguration":
        self._auth_token = auth_token
        return self

    def with_auth_username(self, username: Optional[str]) -> "SenderConfiguration":
        self._auth_username = username
        return self

    def with_auth_password(self, password: Optional[str]) -> "SenderConfiguration":
        self._auth_password = password
        return self

    def resolve(self) -> SenderTarget:
        return resolve_sender_target(self)

    def get_sender(self) -> Sender:
        """
        Return the sender set on this configuration, or build a new one from
        the configuration's state.

        Errors raised while building the sender, such as an invalid endpoint,
        propagate to the caller.

        Returns:
            Sender: The explicit sender or a newly built sender.
        """
        target = self.resolve()
        extra = target.as_dict()

        if target.transport == TransportType.explicit:
            self._logger.debug(SENDER_EXPLICIT, extra=extra)
            assert target.sender is not None
            return target.sender

        if target.transport == TransportType.http:
            assert target.endpoint is not None
            builder = HttpSender.Builder(target.endpoint)
            auth = target.auth

            if auth.type == AuthenticationType.basic:
                self._logger.debug(SENDER_BASIC_AUTH, extra=extra)
                builder.with_basic_auth(auth.username, auth.password)
            elif auth.type == AuthenticationType.bearer:
                self._logger.debug(SENDER_TOKEN_AUTH, extra=extra)
                builder.with_token_auth(auth.token)

            self._logger.debug(SENDER_HTTP, extra=extra)
            return builder.build()

        self._logger.debug(SENDER_UDP, extra=extra)
        return UdpSender(target.host, target.port, target.max_packet_size)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        logger: logging.Logger = logger,
    ) -> "SenderConfiguration":
        """
        Create a configuration from the JAEGER_* environment variables.

        Each variable is read on its own; a malformed JAEGER_AGENT_PORT is
        logged and treated as unset.

        Args:
            environ (Optional[Mapping[str, str]]): Where to read from, defaults to os.environ.
            logger (logging.Logger): Receives parse errors and resolution decisions.

        Returns:
            SenderConfiguration: The populated configuration.
        """
        agent_host = get_property(JAEGER_AGENT_HOST, environ)
        agent_port = get_property_as_int(JAEGER_AGENT_PORT, environ, logger=logger)

        collector_endpoint = get_property(JAEGER_ENDPOINT, environ)
        auth_token = get_property(JAEGER_AUTH_TOKEN, environ)
        auth_username = get_property(JAEGER_USER, environ)
        auth_password = get_property(JAEGER_PASSWORD, environ)

        return (
            cls(logger=logger)
            .with_agent_host(agent_host)
            .with_agent_port(agent_port)
            .with_endpoint(collector_endpoint)
            .with_auth_token(auth_token)
            .with_auth_username(auth_username)
            .with_auth_password(auth_password)
        )
