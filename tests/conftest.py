import pytest

from jaeger_sender.constants import (
    JAEGER_AGENT_HOST,
    JAEGER_AGENT_PORT,
    JAEGER_AUTH_TOKEN,
    JAEGER_ENDPOINT,
    JAEGER_PASSWORD,
    JAEGER_USER,
)

JAEGER_ENV_VARS = (
    JAEGER_AGENT_HOST,
    JAEGER_AGENT_PORT,
    JAEGER_ENDPOINT,
    JAEGER_AUTH_TOKEN,
    JAEGER_USER,
    JAEGER_PASSWORD,
)


@pytest.fixture(autouse=True)
def clean_jaeger_env(monkeypatch):
    """
    Keep the JAEGER_* variables of the host out of every test.
    """
    for name in JAEGER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
