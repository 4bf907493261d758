"""Network probes for hostsetup.

Provides the outbound-route probe, the public-IP probe and local
interface address enumeration.
"""

from .interfaces import get_interface_addresses, sort_addresses
from .outbound import get_outbound_address, probe_outbound_route
from .public_ip import get_public_ip, probe_public_ip

__all__ = [
    # Outbound route
    "probe_outbound_route",
    "get_outbound_address",
    # Public IP
    "probe_public_ip",
    "get_public_ip",
    # Interfaces
    "get_interface_addresses",
    "sort_addresses",
]
