"""Probe configuration tables.

Loads the outbound target list, public-site list and OS-keyed command
table once at startup. Defaults come from config.py; an optional JSON
file overrides any of them:

    {
        "outbound_targets": ["8.8.8.8", "[2001:4860:4860::8888]:53"],
        "public_sites": ["https://api.ipify.org"],
        "commands": {"linux": ["ip route show"]}
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import config
from commands import commands_for_os
from logging_config import get_logger
from models import CollectionPlan
from utils import sanitize_for_log

logger = get_logger(__name__)

_KNOWN_KEYS = {"outbound_targets", "public_sites", "commands"}


@dataclass(frozen=True)
class ProbeTables:
    """Static probe tables for every supported OS."""

    outbound_targets: list[str] = field(default_factory=lambda: list(config.OUTBOUND_TARGETS))
    public_sites: list[str] = field(default_factory=lambda: list(config.PUBLIC_SITES))
    commands: dict[str, list[str]] = field(
        default_factory=lambda: {os_id: list(cmds) for os_id, cmds in config.COMMANDS.items()}
    )

    def plan_for(self, os_id: str) -> CollectionPlan:
        """Build collection plan for one OS.

        Args:
            os_id: Lowercase OS identifier

        Returns:
            CollectionPlan; commands empty for unknown OS.
        """
        return CollectionPlan(
            outbound_targets=tuple(self.outbound_targets),
            public_sites=tuple(self.public_sites),
            commands=tuple(commands_for_os(os_id, self.commands)),
        )


def load_tables(path: Path | None = None) -> ProbeTables:
    """Load probe tables, applying JSON overrides if a path is given.

    Args:
        path: Optional JSON file

    Returns:
        ProbeTables (defaults for keys the file omits).

    Raises:
        ValueError: Unreadable file, invalid JSON or wrong value types.
    """
    defaults = ProbeTables()
    if path is None:
        return defaults

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read config file {path}: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e.msg} (line {e.lineno})") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", sanitize_for_log(", ".join(unknown)))

    tables = ProbeTables(
        outbound_targets=_string_list(data, "outbound_targets", defaults.outbound_targets),
        public_sites=_string_list(data, "public_sites", defaults.public_sites),
        commands=_command_table(data, defaults.commands),
    )
    logger.info("Loaded probe tables from %s", sanitize_for_log(str(path)))
    return tables


def _string_list(data: dict[str, Any], key: str, default: list[str]) -> list[str]:
    """Validate list-of-strings value or fall back to default."""
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{key}' must be a list of strings")
    return [item for item in value if item.strip()]


def _command_table(data: dict[str, Any], default: dict[str, list[str]]) -> dict[str, list[str]]:
    """Validate OS -> command list mapping or fall back to default."""
    if "commands" not in data:
        return default
    value = data["commands"]
    if not isinstance(value, dict):
        raise ValueError("'commands' must map OS identifiers to lists of strings")

    table = {}
    for os_id, commands in value.items():
        if not isinstance(commands, list) or not all(isinstance(c, str) for c in commands):
            raise ValueError(f"'commands.{os_id}' must be a list of strings")
        table[os_id.lower()] = [c for c in commands if c.strip()]
    return table
