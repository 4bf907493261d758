"""OS-specific diagnostic commands.

Selects the command table for the running OS and runs single commands
as probes.
"""

import config
from counter import CompletionCounter
from logging_config import get_logger
from utils import command_exists, run_command, sanitize_for_log, split_command

logger = get_logger(__name__)


def probe_command(
    command_line: str,
    counter: CompletionCounter,
    timeout: float = config.COMMAND_TIMEOUT_SECONDS,
) -> str:
    """Run one configured command and capture its stdout.

    Always counts as completed, success or failure.

    Args:
        command_line: Whitespace-separated command (no shell)
        counter: Completion counter incremented once when done
        timeout: Seconds before the command is killed

    Returns:
        Raw stdout, or "" if the command failed, exited non-zero
        or timed out.
    """
    try:
        output = run_command(split_command(command_line), timeout=timeout)
        if output is None:
            return ""
        logger.debug(
            "[%s] Captured %d characters",
            sanitize_for_log(command_line),
            len(output),
        )
        return output
    finally:
        counter.increment()


def commands_for_os(os_id: str, table: dict[str, list[str]] | None = None) -> list[str]:
    """Look up commands for an OS identifier.

    Args:
        os_id: Lowercase OS identifier ("linux", "darwin", "windows")
        table: Command table (default: config.COMMANDS)

    Returns:
        Ordered command lines; empty list for unknown OS.
    """
    if table is None:
        table = config.COMMANDS
    commands = table.get(os_id.lower(), [])
    if not commands:
        logger.info("No commands configured for OS: %s", sanitize_for_log(os_id))
    return list(commands)


def find_missing_executables(command_lines: list[str]) -> list[str]:
    """Check that each command's executable is on PATH.

    Missing executables are not fatal: their probes degrade to "".

    Args:
        command_lines: Configured command lines

    Returns:
        Executables not found, in first-seen order.

    Logs:
        WARNING for each missing executable.
    """
    missing: list[str] = []
    for command_line in command_lines:
        tokens = split_command(command_line)
        if not tokens:
            continue
        executable = tokens[0]
        if executable in missing or command_exists(executable):
            continue
        missing.append(executable)
        logger.warning(
            "Command not found on PATH: %s (output will be empty)",
            sanitize_for_log(executable),
        )
    return missing
