"""JSON export functionality.

Exports collected diagnostics to JSON with metadata. Probe results are
keyed by their configured input and listed in configuration order.
"""

import json
from typing import Any

import config
from models import DiagnosticsData, HostIdentity


def export_to_json(data: DiagnosticsData, indent: int = 2) -> str:
    """Export to JSON format with metadata.

    Args:
        data: Diagnostics collected after the join barrier
        indent: JSON indentation (default 2)

    Returns:
        JSON string with metadata, host facts and probe results.
    """
    results = data.results
    plan = data.plan

    metadata = {
        "timestamp": data.generated_at.isoformat(),
        "tool": config.TOOL_NAME,
        "version": config.VERSION,
        "probe_count": plan.total,
        "summary": {
            # "" means the probe degraded
            "failed_routes": sum(1 for r in results.routes if not r),
            "failed_public_ips": sum(1 for r in results.public_ips if not r),
            "failed_commands": sum(1 for r in results.command_outputs if not r),
        },
    }

    output = {
        "metadata": metadata,
        "host": _host_to_dict(data.host),
        "interface_addresses": list(data.interface_addresses),
        "outbound_routes": [
            {"target": target, "local_address": result}
            for target, result in zip(plan.outbound_targets, results.routes, strict=True)
        ],
        "public_ips": [
            {"site": site, "public_ip": result}
            for site, result in zip(plan.public_sites, results.public_ips, strict=True)
        ],
        "commands": [
            {"command": command, "output": result}
            for command, result in zip(plan.commands, results.command_outputs, strict=True)
        ],
    }

    return json.dumps(output, indent=indent)


def _host_to_dict(host: HostIdentity) -> dict[str, Any]:
    """Convert HostIdentity to dictionary.

    Args:
        host: HostIdentity object

    Returns:
        Dictionary representation suitable for JSON serialization.
    """
    return {
        "hostname": host.hostname,
        "os_id": host.os_id,
        "os_name": host.os_name,
        "os_version": host.os_version,
        "arch_id": host.arch_id,
        "arch_name": host.arch_name,
    }
