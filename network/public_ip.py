"""Public IP as seen by external echo services.

Queries plain-text "what is my IP" services over HTTP(S).
"""

import requests

import config
from counter import CompletionCounter
from logging_config import get_logger
from utils import is_valid_ip, sanitize_for_log

logger = get_logger(__name__)


def probe_public_ip(
    site: str,
    counter: CompletionCounter,
    timeout: float = config.TIMEOUT_SECONDS,
) -> str:
    """Query site for the public IP of this host.

    Failures degrade to "" like every other probe; the run continues.
    Always counts as completed, success or failure.

    Args:
        site: URL returning the caller's IP as plain text
        counter: Completion counter incremented once when done
        timeout: Request timeout in seconds

    Returns:
        Response body minus one trailing newline, or "" on failure.
    """
    try:
        return get_public_ip(site, timeout)
    finally:
        counter.increment()


def get_public_ip(site: str, timeout: float = config.TIMEOUT_SECONDS) -> str:
    """Single GET against an IP echo service (no retries).

    Args:
        site: URL to request
        timeout: Request timeout in seconds

    Returns:
        Response body minus one trailing newline, or "" on failure.
    """
    logger.debug("Querying public IP from %s", sanitize_for_log(site))
    try:
        response = requests.get(site, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(
            "Public IP query to %s failed: %s",
            sanitize_for_log(site),
            sanitize_for_log(str(e)),
        )
        return ""

    body = response.text.removesuffix("\n")

    if not is_valid_ip(body.strip()):
        logger.warning(
            "%s returned a body that is not an IP address: %s",
            sanitize_for_log(site),
            sanitize_for_log(body),
        )

    return body
