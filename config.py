"""Configuration constants for hostsetup.

All configurable values stored here for easy customization.
Default probe tables live here; tables.py applies optional overrides.
"""

from enum import IntEnum

# Probe Tables
# Hosts whose route we inspect. The OS picks the local source address
# it would use to reach each one; no traffic is sent.
OUTBOUND_TARGETS: list[str] = [
    "8.8.8.8",
    "1.1.1.1",
    "9.9.9.9",
]

# Services that echo the caller's public IP as a plain-text body
PUBLIC_SITES: list[str] = [
    "https://api.ipify.org",
    "https://ifconfig.me/ip",
    "https://icanhazip.com",
]

# Shell commands per OS identifier (platform.system().lower()).
# Tokenized on whitespace, no shell: pipes and quotes are not supported.
COMMANDS: dict[str, list[str]] = {
    "linux": [
        "ip addr show",
        "ip route show",
        "cat /etc/resolv.conf",
    ],
    "darwin": [
        "ifconfig -a",
        "netstat -rn",
        "scutil --dns",
    ],
    "windows": [
        "ipconfig /all",
        "route print",
        "netsh interface show interface",
    ],
}

# Port used by the outbound-route probe when a target has none
OUTBOUND_DEFAULT_PORT: int = 80

# Timeouts
TIMEOUT_SECONDS: float = 10.0
COMMAND_TIMEOUT_SECONDS: float = 30.0

# Progress polling interval
PROGRESS_INTERVAL_SECONDS: float = 0.25

# Report Layout
DIVIDER: str = "_" * 70 + "\n"
HOST_FIELD_WIDTH: int = 19  # "OPERATING SYSTEM:  " is the widest label

# Display names for raw platform identifiers
OS_NAMES: dict[str, str] = {
    "darwin": "Apple macOS",
    "linux": "Linux",
    "windows": "Microsoft Windows",
}

ARCH_NAMES: dict[str, str] = {
    "x86_64": "AMD/Intel x64",
    "amd64": "AMD/Intel x64",
    "arm64": "Apple Silicon",
    "aarch64": "ARM 64-bit",
    "i386": "Intel x86",
    "i686": "Intel x86",
}

UNKNOWN_NAME: str = "Unknown"

# Progress bar
PROGRESS_BAR_WIDTH: int = 40


class ExitCode(IntEnum):
    """Standard exit codes for hostsetup."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    USER_DECLINED = 3
    INVALID_ARGUMENTS = 4


# Tool Metadata
VERSION: str = "1.0.0"
TOOL_NAME: str = "hostsetup"
TITLE: str = "Host Setup Diagnostics"
