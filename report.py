"""Text report assembly.

Builds the final report from finished diagnostics data. Runs only after
the join barrier and depends only on configuration order, never on the
order in which probes completed.

Layout (each section ends with config.DIVIDER):
    1. Timestamp
    2. Host identity
    3. Interface addresses (sorted)
    4. Preferred outbound IP per target
    5. Public IP per site
    6. One block per command
"""

from datetime import datetime

import config
from models import CollectionPlan, DiagnosticsData, HostIdentity, ProbeResults


# English names regardless of LC_TIME
_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def build_report(data: DiagnosticsData) -> str:
    """Assemble complete report text.

    Args:
        data: Diagnostics collected after the join barrier

    Returns:
        Report string ready for display, file output or clipboard.
    """
    parts = [
        format_timestamp(data.generated_at),
        config.DIVIDER,
        build_host_section(data.host),
        config.DIVIDER,
        build_interface_section(data.interface_addresses),
        config.DIVIDER,
        build_route_section(data.plan, data.results),
        config.DIVIDER,
        build_public_ip_section(data.plan, data.results),
        build_command_section(data.plan, data.results),
    ]
    return "".join(parts)


def format_timestamp(generated_at: datetime) -> str:
    """Header line in RFC 1123 style, e.g. "Mon, 02 Jan 2006 15:04:05 CET".

    Day and month names are always English, independent of the locale.
    """
    day = _DAY_NAMES[generated_at.weekday()]
    month = _MONTH_NAMES[generated_at.month - 1]
    stamp = (
        f"{day}, {generated_at.day:02d} {month} {generated_at.year:04d} "
        f"{generated_at:%H:%M:%S} {generated_at.tzname() or ''}"
    )
    return f"Diagnostics run on {stamp.rstrip()}\n"


def build_host_section(host: HostIdentity) -> str:
    """Hostname, OS, OS version and architecture, labels aligned."""
    width = config.HOST_FIELD_WIDTH
    lines = [
        f"{'HOSTNAME:':<{width}}{host.hostname}",
        f"{'OPERATING SYSTEM:':<{width}}{host.platform_label}",
        f"{'OS VERSION:':<{width}}{host.os_version}",
        f"{'ARCHITECTURE:':<{width}}{host.arch_label}",
    ]
    return "\n".join(lines) + "\n\n"


def build_interface_section(addresses: list[str]) -> str:
    """Interface addresses, already sorted by raw bytes."""
    body = "".join(f"{address}\n" for address in addresses)
    return f"HOST INTERFACE IP ADDRESSES (SORTED):\n\n{body}\n"


def build_route_section(plan: CollectionPlan, results: ProbeResults) -> str:
    """One "To <target>:  <local address>" line per outbound target."""
    lines = "".join(
        f"To {target}:  {result}\n"
        for target, result in zip(plan.outbound_targets, results.routes, strict=True)
    )
    return f"PREFERRED OUTBOUND IP (I.E., LOCAL INTERFACE)\n\n{lines}\n"


def build_public_ip_section(plan: CollectionPlan, results: ProbeResults) -> str:
    """One "<site> sees this host coming from <ip>" line per site."""
    lines = "".join(
        f"{site} sees this host coming from {result}\n"
        for site, result in zip(plan.public_sites, results.public_ips, strict=True)
    )
    return f"PUBLIC SITES:\n\n{lines}"


def build_command_section(plan: CollectionPlan, results: ProbeResults) -> str:
    """Divider, then one block per command each closed by a divider.

    A single trailing newline of each output is dropped so blocks are
    spaced uniformly. With no commands this is just the divider.
    """
    blocks = [config.DIVIDER]
    for command, output in zip(plan.commands, results.command_outputs, strict=True):
        blocks.append(f"OUTPUT FROM RUNNING '{command}':\n\n")
        blocks.append(output.removesuffix("\n") + "\n")
        blocks.append("\n" + config.DIVIDER)
    return "".join(blocks)
