"""System command execution utilities.

Provides safe command execution with timeout protection.
Never uses shell=True: command lines are split on whitespace only.
"""

import re
import shutil
import subprocess
from typing import Any

import config
from logging_config import get_logger

logger = get_logger(__name__)


def split_command(command_line: str) -> list[str]:
    """Tokenize command line on whitespace.

    No quoting, escaping or shell metacharacters are interpreted:
    "echo 'a b'" becomes ["echo", "'a", "b'"].

    Args:
        command_line: Command as configured (e.g., "ip route show")

    Returns:
        Tokens, first is the executable. Empty list for blank input.
    """
    return command_line.split()


def run_command(
    cmd: list[str],
    timeout: float = config.COMMAND_TIMEOUT_SECONDS,
) -> str | None:
    """Execute command and capture stdout.

    Security:
        - NEVER shell=True
        - Timeout enforced (default 30 seconds)

    Args:
        cmd: Command as list (e.g., ["ip", "addr", "show"])
        timeout: Seconds before the command is killed

    Returns:
        Raw stdout (not stripped) or None on any failure:
        empty command, not found, non-zero exit, timeout.
    """
    if not cmd:
        return None

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
            shell=False,
        )
    except subprocess.TimeoutExpired:
        logger.warning("Command timed out after %ss: %s", timeout, sanitize_for_log(" ".join(cmd)))
        return None
    except FileNotFoundError:
        logger.warning("Command not found: %s", sanitize_for_log(cmd[0]))
        return None
    except (OSError, ValueError) as e:
        logger.warning(
            "Command failed to start: %s (%s)",
            sanitize_for_log(" ".join(cmd)),
            sanitize_for_log(str(e)),
        )
        return None

    if result.returncode != 0:
        logger.warning(
            "Command exited with status %d: %s",
            result.returncode,
            sanitize_for_log(" ".join(cmd)),
        )
        return None

    return result.stdout


def command_exists(cmd: str) -> bool:
    """Check if command exists in PATH.

    Args:
        cmd: Command name (e.g., "ip", "ipconfig")

    Returns:
        True if command is available, False otherwise.
    """
    return shutil.which(cmd) is not None


def sanitize_for_log(value: Any) -> str:
    """Sanitize values before logging to prevent log injection.

    Command output and HTTP bodies come from outside the process, so
    newlines, ANSI escapes and control characters are stripped and the
    result is capped at 200 characters.

    Args:
        value: Value to sanitize (any type, will be converted to string)

    Returns:
        Sanitized string safe for logging.
    """
    text = str(value)

    text = text.replace("\n", " ").replace("\r", " ")
    text = re.sub(r"\x1b\[[0-9;]*m", "", text)
    text = "".join(c for c in text if c.isprintable() or c.isspace())

    if len(text) > 200:
        text = text[:197] + "..."

    return text
