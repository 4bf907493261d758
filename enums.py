"""Type-safe enumerations for hostsetup.

All categorical values use enum types for type safety and consistency.
"""

from enum import Enum


class ProbeKind(str, Enum):
    """Kinds of concurrent probes dispatched by the orchestrator.

    OUTBOUND_ROUTE: Local source address the OS picks for a remote host
    PUBLIC_IP: Address an external echo service sees this host coming from
    COMMAND: Captured stdout of an OS-specific diagnostic command
    """

    OUTBOUND_ROUTE = "outbound-route"
    PUBLIC_IP = "public-ip"
    COMMAND = "command"
