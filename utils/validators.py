"""Input validation utilities.

Provides parsing of probe endpoints and validation of IP addresses.
"""

import ipaddress
import re

# "[2001:db8::1]:53" style IPv6 endpoint with port
_BRACKETED_ENDPOINT = re.compile(r"^\[([^\]]+)\](?::(\d+))?$")


def parse_endpoint(target: str, default_port: int) -> tuple[str, int]:
    """Split probe target into host and port.

    Accepted forms:
        "8.8.8.8"               -> ("8.8.8.8", default_port)
        "dns.google:53"         -> ("dns.google", 53)
        "2001:4860::8888"       -> ("2001:4860::8888", default_port)
        "[2001:4860::8888]:53"  -> ("2001:4860::8888", 53)

    Args:
        target: Configured outbound target
        default_port: Port used when target has none

    Returns:
        Tuple of (host, port).

    Raises:
        ValueError: Empty host, or port outside 1-65535.
    """
    target = target.strip()
    if not target:
        raise ValueError("Empty target")

    match = _BRACKETED_ENDPOINT.match(target)
    if match:
        host = match.group(1)
        port = int(match.group(2)) if match.group(2) else default_port
    elif target.startswith("["):
        raise ValueError(f"Malformed bracketed target: {target}")
    elif is_valid_ipv6(target):
        host, port = target, default_port
    elif target.count(":") == 1:
        host, port_text = target.split(":")
        if not port_text.isdigit():
            raise ValueError(f"Invalid port in target: {target}")
        port = int(port_text)
    else:
        host, port = target, default_port

    if not host:
        raise ValueError(f"Missing host in target: {target}")
    if not 1 <= port <= 65535:
        raise ValueError(f"Port out of range in target: {target}")

    return host, port


def is_valid_ipv4(address: str | None) -> bool:
    """Validate IPv4 address.

    Args:
        address: IPv4 address string or None

    Returns:
        True if valid IPv4 address, False otherwise.
    """
    if not address:
        return False
    try:
        ipaddress.IPv4Address(address)
        return True
    except ValueError:
        return False


def is_valid_ipv6(address: str | None) -> bool:
    """Validate IPv6 address.

    Strips zone identifier (e.g., %eth0) before validation.

    Args:
        address: IPv6 address string or None

    Returns:
        True if valid IPv6 address, False otherwise.
    """
    if not address:
        return False

    address = address.split("%")[0]

    try:
        ipaddress.IPv6Address(address)
        return True
    except ValueError:
        return False


def is_valid_ip(address: str | None) -> bool:
    """Validate IPv4 or IPv6 address."""
    return is_valid_ipv4(address) or is_valid_ipv6(address)
