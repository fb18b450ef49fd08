from importlib.metadata import PackageNotFoundError, version
import logging
import platform
from typing import Dict, Optional


LOG = logging.getLogger(__name__)


def get_version() -> Optional[str]:
    """
    Get the version of the jaeger-sender package.

    Returns:
      Optional[str]: The package version if found, otherwise None.
    """
    try:
        return version("jaeger-sender")
    except PackageNotFoundError:
        LOG.exception("Unable to get jaeger-sender version.")
        return None


def get_user_agent() -> str:
    """
    Get the user agent string for requests sent to the collector.

    Returns:
      str: The user agent string in the format: jaeger-sender/{version} ({os}; Python/{python_version})
    """
    sender_version = get_version() or "unknown"
    return f"jaeger-sender/{sender_version} ({platform.system()}; Python/{platform.python_version()})"


def get_meta_http_headers() -> Dict[str, str]:
    return {"User-Agent": get_user_agent()}
