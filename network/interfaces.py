"""Local interface addresses.

Lists every IPv4/IPv6 address bound to any interface, sorted by the raw
address bytes rather than by text.
"""

import ipaddress
import socket

import psutil

from logging_config import get_logger
from utils import sanitize_for_log

logger = get_logger(__name__)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)

# ::ffff:0:0/96
_IPV4_MAPPED_PREFIX = 0xFFFF_0000_0000


def get_interface_addresses() -> list[str]:
    """Collect and sort addresses of all local interfaces.

    Link-layer (MAC) entries are skipped. Enumeration failures are
    logged and yield an empty list.

    Returns:
        Address strings sorted by raw bytes (see address_sort_key).
    """
    try:
        interfaces = psutil.net_if_addrs()
    except (OSError, RuntimeError) as e:
        logger.warning("Cannot enumerate interfaces: %s", sanitize_for_log(str(e)))
        return []

    addresses: list[IPAddress] = []
    for iface_name, iface_addrs in interfaces.items():
        for addr in iface_addrs:
            if addr.family not in _IP_FAMILIES:
                continue
            parsed = parse_interface_address(addr.address)
            if parsed is None:
                logger.debug(
                    "[%s] Skipping unparseable address: %s",
                    sanitize_for_log(iface_name),
                    sanitize_for_log(addr.address),
                )
                continue
            addresses.append(parsed)

    logger.debug("Found %d interface addresses", len(addresses))
    return [str(address) for address in sort_addresses(addresses)]


def parse_interface_address(address: str) -> IPAddress | None:
    """Parse address text as reported by the OS.

    Zone suffixes (fe80::1%eth0) are dropped.

    Args:
        address: Address string

    Returns:
        IPv4Address/IPv6Address, or None if not an IP address.
    """
    try:
        return ipaddress.ip_address(address.split("%")[0])
    except ValueError:
        return None


def address_sort_key(address: IPAddress) -> bytes:
    """Sort key: 16 raw bytes, IPv4 in IPv4-mapped form (::ffff:a.b.c.d).

    All IPv4 addresses therefore sort together, numerically, after ::1
    and before global and link-local IPv6 (::1 < 10.0.0.1 < 2001:db8::).
    """
    if address.version == 4:
        return ipaddress.IPv6Address(_IPV4_MAPPED_PREFIX | int(address)).packed
    return address.packed


def sort_addresses(addresses: list[IPAddress]) -> list[IPAddress]:
    """Sort addresses lexicographically by raw bytes."""
    return sorted(addresses, key=address_sort_key)
