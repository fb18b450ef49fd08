# -*- coding: utf-8 -*-

# Environment variables read by SenderConfiguration.from_env
JAEGER_AGENT_HOST = "JAEGER_AGENT_HOST"
JAEGER_AGENT_PORT = "JAEGER_AGENT_PORT"
JAEGER_ENDPOINT = "JAEGER_ENDPOINT"
JAEGER_AUTH_TOKEN = "JAEGER_AUTH_TOKEN"
JAEGER_USER = "JAEGER_USER"
JAEGER_PASSWORD = "JAEGER_PASSWORD"

# UDP agent defaults
DEFAULT_AGENT_UDP_HOST = "localhost"
DEFAULT_AGENT_UDP_COMPACT_PORT = 6831
DEFAULT_UDP_MAX_PACKET_SIZE = 65000

# HTTP collector defaults
DEFAULT_HTTP_MAX_PACKET_SIZE = 1048576
HTTP_CONTENT_TYPE = "application/x-thrift"
HTTP_FORMAT_PARAM = "jaeger.thrift"
REQUEST_TIMEOUT = 10

# Exit codes
EXIT_CODE_OK = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_CONNECTION_ERROR = 2
EXIT_CODE_INVALID_AUTH_CREDENTIAL = 3
EXIT_CODE_TOO_MANY_REQUESTS = 4
EXIT_CODE_PACKET_TOO_LARGE = 5
