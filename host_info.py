"""Host identity and platform facts.

Hostname, OS and CPU architecture, each with a display name.
"""

import platform
import socket

import config
from logging_config import get_logger
from models import HostIdentity
from utils import sanitize_for_log

logger = get_logger(__name__)


def get_os_id() -> str:
    """Lowercase OS identifier ("linux", "darwin", "windows", ...)."""
    return platform.system().lower()


def get_arch_id() -> str:
    """Lowercase machine identifier ("x86_64", "arm64", ...)."""
    return platform.machine().lower()


def get_hostname() -> str:
    """System hostname, or "" if it cannot be read."""
    try:
        return socket.gethostname()
    except OSError as e:
        logger.warning("Cannot read hostname: %s", sanitize_for_log(str(e)))
        return ""


def get_os_version(os_id: str) -> str:
    """Best available OS version string.

    Linux: VERSION_ID from os-release (e.g. "22.04")
    macOS: product version (e.g. "14.5")
    Windows: build version (e.g. "10.0.22631")
    Fallback: kernel release.

    Args:
        os_id: Lowercase OS identifier

    Returns:
        Version string, or "" if nothing is known.
    """
    version = ""
    if os_id == "linux":
        try:
            version = platform.freedesktop_os_release().get("VERSION_ID", "")
        except OSError:
            logger.debug("No os-release file, falling back to kernel release")
    elif os_id == "darwin":
        version = platform.mac_ver()[0]
    elif os_id == "windows":
        version = platform.version()

    return version or platform.release()


def get_host_identity() -> HostIdentity:
    """Collect hostname and platform facts.

    Returns:
        HostIdentity with display names ("Unknown" for unmapped ids).
    """
    os_id = get_os_id()
    arch_id = get_arch_id()

    identity = HostIdentity(
        hostname=get_hostname(),
        os_id=os_id,
        os_name=config.OS_NAMES.get(os_id, config.UNKNOWN_NAME),
        os_version=get_os_version(os_id),
        arch_id=arch_id,
        arch_name=config.ARCH_NAMES.get(arch_id, config.UNKNOWN_NAME),
    )
    logger.debug(
        "Host: %s, %s %s, %s",
        sanitize_for_log(identity.hostname),
        identity.platform_label,
        sanitize_for_log(identity.os_version),
        identity.arch_label,
    )
    return identity
