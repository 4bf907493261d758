"""Utilities package for hostsetup.

Provides system command execution, log sanitizing and input validation.
"""

from .system import command_exists, run_command, sanitize_for_log, split_command
from .validators import (
    is_valid_ip,
    is_valid_ipv4,
    is_valid_ipv6,
    parse_endpoint,
)

__all__ = [
    # System
    "run_command",
    "split_command",
    "command_exists",
    "sanitize_for_log",
    # Validators
    "parse_endpoint",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "is_valid_ip",
]
