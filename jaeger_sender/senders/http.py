"""HTTP sender delivering batches directly to a Jaeger collector."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from jaeger_sender.constants import (
    DEFAULT_HTTP_MAX_PACKET_SIZE,
    HTTP_CONTENT_TYPE,
    HTTP_FORMAT_PARAM,
    REQUEST_TIMEOUT,
)
from jaeger_sender.errors import (
    InvalidCredentialError,
    PacketTooLargeError,
    RequestTimeoutError,
    SenderConnectionError,
    SenderError,
    ServerError,
    TooManyRequestsError,
)
from jaeger_sender.meta import get_meta_http_headers

from .base import Sender

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")


class AuthenticationType(str, Enum):
    """
    Enum representing the authentication attached to collector requests.
    """

    basic = "basic"
    bearer = "bearer"
    none = "unauthenticated"


class BearerTokenAuth(httpx.Auth):
    """
    Auth that sends the token as a Bearer Authorization header.
    """

    def __init__(self, token: str):
        self.token = token

    def auth_flow(self, request):
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


def _validate_endpoint(endpoint: str) -> httpx.URL:
    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as e:
        raise ValueError(f"Invalid collector endpoint {endpoint!r}: {e}") from e

    if url.scheme not in ALLOWED_SCHEMES or not url.host:
        raise ValueError(
            f"Invalid collector endpoint {endpoint!r}: an absolute http(s) URL is required"
        )
    return url


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return

    if response.status_code in (401, 403):
        raise InvalidCredentialError(
            status_code=response.status_code, reason=response.text or None
        )
    if response.status_code == 429:
        logger.warning("Rate limit exceeded")
        raise TooManyRequestsError(reason=response.text or None)
    if response.is_server_error:
        raise ServerError(reason=response.text or response.reason_phrase)

    raise SenderError(
        message=f"Collector rejected the batch: {response.status_code} {response.reason_phrase}",
        error_code=response.status_code,
    )


class HttpSender(Sender):
    """
    Sender that POSTs each batch to a collector endpoint.

    Instances are created through :class:`HttpSender.Builder`.
    """

    def __init__(
        self,
        endpoint: httpx.URL,
        client: httpx.Client,
        authentication_type: AuthenticationType,
        max_packet_size: int,
    ) -> None:
        self.endpoint = endpoint
        self._url = endpoint.copy_merge_params({"format": HTTP_FORMAT_PARAM})
        self.authentication_type = authentication_type
        self.max_packet_size = max_packet_size
        self._client = client

    @property
    def auth(self) -> Optional[httpx.Auth]:
        return self._client.auth

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential_jitter(initial=0.2, max=8.0, exp_base=3, jitter=0.3),
        reraise=True,
        retry=retry_if_exception_type(
            (SenderConnectionError, TooManyRequestsError, ServerError)
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
    def _post(self, payload: bytes) -> httpx.Response:
        try:
            response = self._client.post(self._url, content=payload)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError() from e
        except httpx.TransportError as e:
            raise SenderConnectionError() from e

        _raise_for_status(response)
        return response

    def send(self, payload: bytes) -> None:
        if len(payload) > self.max_packet_size:
            raise PacketTooLargeError(len(payload), self.max_packet_size)

        self._post(payload)
        logger.debug("Sent %d bytes to %s", len(payload), self.endpoint)

    def close(self) -> None:
        self._client.close()

    def as_dict(self) -> Dict[str, Any]:
        return {
            "sender": "http",
            "endpoint": str(self.endpoint),
            "auth": self.authentication_type.value,
            "max_packet_size": self.max_packet_size,
        }

    class Builder:
        """
        Fluent builder for :class:`HttpSender`.

        Calling neither ``with_basic_auth`` nor ``with_token_auth`` yields an
        unauthenticated sender. The endpoint is validated by ``build``.
        """

        def __init__(self, endpoint: str) -> None:
            self.endpoint = endpoint
            self._auth: Optional[httpx.Auth] = None
            self._authentication_type = AuthenticationType.none
            self._max_packet_size = DEFAULT_HTTP_MAX_PACKET_SIZE
            self._timeout: float = REQUEST_TIMEOUT
            self._transport: Optional[httpx.BaseTransport] = None

        def with_basic_auth(self, username: str, password: str) -> "HttpSender.Builder":
            self._auth = httpx.BasicAuth(username, password)
            self._authentication_type = AuthenticationType.basic
            return self

        def with_token_auth(self, token: str) -> "HttpSender.Builder":
            self._auth = BearerTokenAuth(token)
            self._authentication_type = AuthenticationType.bearer
            return self

        def with_max_packet_size(self, max_packet_size: int) -> "HttpSender.Builder":
            self._max_packet_size = max_packet_size
            return self

        def with_timeout(self, timeout: float) -> "HttpSender.Builder":
            self._timeout = timeout
            return self

        def with_transport(self, transport: httpx.BaseTransport) -> "HttpSender.Builder":
            self._transport = transport
            return self

        def build(self) -> "HttpSender":
            url = _validate_endpoint(self.endpoint)

            headers = {"Content-Type": HTTP_CONTENT_TYPE}
            headers.update(get_meta_http_headers())

            client_kwargs: Dict[str, Any] = {
                "headers": headers,
                "timeout": self._timeout,
            }
            if self._auth is not None:
                client_kwargs["auth"] = self._auth
            if self._transport is not None:
                client_kwargs["transport"] = self._transport

            return HttpSender(
                endpoint=url,
                client=httpx.Client(**client_kwargs),
                authentication_type=self._authentication_type,
                max_packet_size=self._max_packet_size,
            )
