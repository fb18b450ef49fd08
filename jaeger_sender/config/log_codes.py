"""
Log codes for configuration-related operations.
"""

CONFIG = "config"

# Environment
ENV = f"{CONFIG}.env"
ENV_INVALID_INT = f"{ENV}.invalid_int"

# Sender resolution
SENDER = f"{CONFIG}.sender"
SENDER_EXPLICIT = f"{SENDER}.explicit"
SENDER_HTTP = f"{SENDER}.http"
SENDER_UDP = f"{SENDER}.udp"
SENDER_BASIC_AUTH = f"{SENDER}.basic_auth"
SENDER_TOKEN_AUTH = f"{SENDER}.token_auth"
