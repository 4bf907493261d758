"""Preferred outbound address per remote host.

Connecting a UDP socket sends nothing on the wire; it only makes the
kernel pick a route and bind a local source address, which we read back.
"""

import socket

import config
from counter import CompletionCounter
from logging_config import get_logger
from utils import parse_endpoint, sanitize_for_log

logger = get_logger(__name__)


def probe_outbound_route(
    target: str,
    counter: CompletionCounter,
    timeout: float = config.TIMEOUT_SECONDS,
) -> str:
    """Determine local source address used to reach target.

    Always counts as completed, success or failure.

    Args:
        target: Remote endpoint ("host", "host:port" or "[v6]:port")
        counter: Completion counter incremented once when done
        timeout: Socket timeout in seconds

    Returns:
        Local address (e.g. "192.168.1.100") or "" if no route.
    """
    try:
        return get_outbound_address(target, timeout)
    finally:
        counter.increment()


def get_outbound_address(target: str, timeout: float = config.TIMEOUT_SECONDS) -> str:
    """Resolve target and read back the source address the OS selects.

    Tries each resolved address in turn (e.g. IPv6 then IPv4) and
    returns the first that can be associated.

    Args:
        target: Remote endpoint
        timeout: Socket timeout in seconds

    Returns:
        Local address without IPv6 zone suffix, or "" on failure.
    """
    try:
        host, port = parse_endpoint(target, config.OUTBOUND_DEFAULT_PORT)
    except ValueError as e:
        logger.warning("Invalid outbound target %s: %s", sanitize_for_log(target), e)
        return ""

    try:
        candidates = socket.getaddrinfo(host, port, 0, socket.SOCK_DGRAM)
    except OSError as e:
        logger.warning(
            "Cannot resolve %s: %s",
            sanitize_for_log(host),
            sanitize_for_log(str(e)),
        )
        return ""

    for family, sock_type, proto, _canonname, sockaddr in candidates:
        try:
            with socket.socket(family, sock_type, proto) as sock:
                sock.settimeout(timeout)
                sock.connect(sockaddr)
                local_address = sock.getsockname()[0]
        except OSError as e:
            logger.debug(
                "No route to %s via %s: %s",
                sanitize_for_log(target),
                sockaddr[0],
                sanitize_for_log(str(e)),
            )
            continue

        local_address = local_address.split("%")[0]
        logger.debug("[%s] Outbound address: %s", sanitize_for_log(target), local_address)
        return local_address

    logger.warning("No route to %s", sanitize_for_log(target))
    return ""
