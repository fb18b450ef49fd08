from typing import Optional

from jaeger_sender.constants import (
    EXIT_CODE_CONNECTION_ERROR,
    EXIT_CODE_FAILURE,
    EXIT_CODE_INVALID_AUTH_CREDENTIAL,
    EXIT_CODE_PACKET_TOO_LARGE,
    EXIT_CODE_TOO_MANY_REQUESTS,
)


class SenderError(Exception):
    """
    Generic error raised by a sender while transmitting a batch.

    Args:
        message (str): The error message.
        error_code (Optional[int]): The error code.
    """
    def __init__(self, message: str = "An error occurred while sending spans.\n"
                                      "Please check your sender configuration and try again.",
                 error_code: Optional[int] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        """
        Get the exit code associated with this error.

        Returns:
            int: The exit code.
        """
        return EXIT_CODE_FAILURE


class SenderConnectionError(SenderError):
    """
    Error raised when the agent or collector cannot be reached.

    Args:
        message (str): The error message.
    """

    def __init__(self, message: str = "Connection error: Unable to reach the trace receiver.\n"
                                      "Please check the agent host/port or the collector endpoint."):
        self.message = message
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_CONNECTION_ERROR


class RequestTimeoutError(SenderConnectionError):
    """
    Error raised when the collector does not answer in time.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "Request timed out: The collector did not respond in time."):
        self.message = message
        super().__init__(self.message)


class TooManyRequestsError(SenderError):
    """
    Error raised when the collector rejects the batch because of rate limiting.

    Args:
        reason (Optional[str]): The reason reported by the collector.
        message (str): The error message.
    """

    def __init__(self, reason: Optional[str] = None,
                 message: str = "Too many requests: The collector is rate limiting this client."):
        info = f"\nDetails: {reason}" if reason else ""
        self.message = message + info
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_TOO_MANY_REQUESTS


class ServerError(SenderError):
    """
    Error raised when the collector fails with a 5xx status.

    Args:
        reason (Optional[str]): The reason for the error.
        message (str): The error message template.
    """

    def __init__(self, reason: Optional[str] = None,
                 message: str = "Server error: The collector failed to accept the batch.\n{reason}"):
        self.reason = reason
        self.message = message.format(reason=f"Details: {reason}" if reason else "")
        super().__init__(self.message.rstrip())


class InvalidCredentialError(SenderError):
    """
    Error raised when the collector rejects the configured credentials.

    Args:
        status_code (Optional[int]): The HTTP status returned by the collector.
        reason (Optional[str]): The reason for the error.
    """

    def __init__(self, status_code: Optional[int] = None, reason: Optional[str] = None):
        self.status_code = status_code
        self.message = ("Authentication failed: The collector rejected the configured credentials.\n"
                        "Check JAEGER_USER/JAEGER_PASSWORD or JAEGER_AUTH_TOKEN.")
        if reason:
            self.message += f"\nDetails: {reason}"
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_INVALID_AUTH_CREDENTIAL


class PacketTooLargeError(SenderError):
    """
    Error raised when an encoded batch exceeds the sender's packet limit.

    Args:
        size (int): The size of the rejected payload in bytes.
        max_packet_size (int): The sender's limit in bytes.
    """

    def __init__(self, size: int, max_packet_size: int):
        self.size = size
        self.max_packet_size = max_packet_size
        self.message = f"Batch of {size} bytes exceeds the maximum packet size of {max_packet_size} bytes."
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_PACKET_TOO_LARGE
