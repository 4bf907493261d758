"""Data models for host diagnostics.

Plans and probe targets are frozen dataclasses: they are built once from
the configuration tables and read concurrently by every probe task.
Result slots are the only mutable structure shared with probe tasks.

Architecture:
- ProbeTarget: one unit of concurrent work
- CollectionPlan: ordered probe inputs for this run
- ResultSlots: pre-sized, write-once result storage for one probe kind
- ProbeResults: finished results in configuration order
- HostIdentity: hostname and platform facts
- DiagnosticsData: everything the report and the JSON export need
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime

from enums import ProbeKind


@dataclass(frozen=True)
class ProbeTarget:
    """Single configured probe.

    slot is the index into the result array of this probe's kind.
    """

    kind: ProbeKind
    value: str  # host[:port], URL or command line
    slot: int


@dataclass(frozen=True)
class CollectionPlan:
    """Ordered probe inputs for one run.

    Order of each tuple is the order used in the final report,
    independent of the order in which probes finish.
    """

    outbound_targets: tuple[str, ...] = ()
    public_sites: tuple[str, ...] = ()
    commands: tuple[str, ...] = ()

    @property
    def total(self) -> int:
        """Total number of probes the plan dispatches."""
        return len(self.outbound_targets) + len(self.public_sites) + len(self.commands)

    def targets(self) -> list[ProbeTarget]:
        """Expand plan into probe targets, each tagged with its slot.

        Returns:
            Outbound targets first, then public sites, then commands.
        """
        targets = []
        for kind, values in (
            (ProbeKind.OUTBOUND_ROUTE, self.outbound_targets),
            (ProbeKind.PUBLIC_IP, self.public_sites),
            (ProbeKind.COMMAND, self.commands),
        ):
            for slot, value in enumerate(values):
                targets.append(ProbeTarget(kind=kind, value=value, slot=slot))
        return targets


class ResultSlots:
    """Fixed-size, write-once result storage for one probe kind.

    Each task writes only its own pre-assigned index, so concurrent
    writers never collide. The lock only guards the write-once check.
    """

    def __init__(self, size: int) -> None:
        self._values: list[str | None] = [None] * size
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._values)

    def store(self, slot: int, value: str) -> None:
        """Write result into its slot.

        Raises:
            IndexError: Slot outside the pre-sized range.
            RuntimeError: Slot already written.
        """
        with self._lock:
            if self._values[slot] is not None:
                raise RuntimeError(f"Result slot {slot} written twice")
            self._values[slot] = value

    def is_filled(self) -> bool:
        """True once every slot holds a result."""
        with self._lock:
            return all(value is not None for value in self._values)

    def values(self) -> list[str]:
        """Return results in slot order.

        Raises:
            RuntimeError: Any slot is still unwritten.
        """
        with self._lock:
            missing = [i for i, value in enumerate(self._values) if value is None]
            if missing:
                raise RuntimeError(f"Result slots never written: {missing}")
            return [value for value in self._values if value is not None]


@dataclass(frozen=True)
class ProbeResults:
    """Probe results in configuration order ("" means degraded)."""

    routes: list[str] = field(default_factory=list)
    public_ips: list[str] = field(default_factory=list)
    command_outputs: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HostIdentity:
    """Hostname and platform facts of the local machine."""

    hostname: str
    os_id: str  # Raw identifier, e.g. "linux"
    os_name: str  # Display name, e.g. "Linux"
    os_version: str
    arch_id: str  # Raw identifier, e.g. "x86_64"
    arch_name: str  # Display name, e.g. "AMD/Intel x64"

    @property
    def platform_label(self) -> str:
        """OS display name with raw identifier, e.g. "Linux (linux)"."""
        return f"{self.os_name} ({self.os_id})"

    @property
    def arch_label(self) -> str:
        """Architecture display name with raw identifier."""
        return f"{self.arch_name} ({self.arch_id})"


@dataclass(frozen=True)
class DiagnosticsData:
    """Complete, immutable input of the report assembler.

    Only built after the join barrier, so every result is final.
    """

    generated_at: datetime
    host: HostIdentity
    interface_addresses: list[str]
    plan: CollectionPlan
    results: ProbeResults
