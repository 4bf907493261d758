"""Terminal presentation of a diagnostics run.

Shows what will be collected and asks for confirmation, draws a progress
bar from 0..1 fractions, and copies the finished report to the clipboard.
Prompts and progress go to stderr; the report itself goes to stdout.
"""

import sys
import threading
from typing import Callable, TextIO

import config
from colors import Color, colorize
from logging_config import get_logger
from models import CollectionPlan
from utils import sanitize_for_log

logger = get_logger(__name__)


def format_collection_plan(plan: CollectionPlan) -> str:
    """List every action the run will take, one per line.

    Args:
        plan: Probe inputs for this run

    Returns:
        Text such as "Check outbound path to 8.8.8.8".
    """
    lines = [f"Check outbound path to {target}" for target in plan.outbound_targets]
    lines += [f"Check source IP as seen from {site}" for site in plan.public_sites]
    lines += [f"Run command: {command}" for command in plan.commands]
    return "".join(f"{line}\n" for line in lines)


def confirm_collection(
    plan: CollectionPlan,
    input_func: Callable[[str], str] = input,
    file: TextIO | None = None,
) -> bool:
    """Ask whether the listed information may be collected.

    Args:
        plan: Probe inputs for this run
        input_func: Reads the answer (default: input)
        file: Where the list is printed (default: sys.stderr)

    Returns:
        True only for an explicit yes ("y"/"yes", any case).
        End of input counts as no.
    """
    if file is None:
        file = sys.stderr

    use_colors = file.isatty()
    print(colorize("May we collect the following information?", Color.BOLD, use_colors), file=file)
    print("", file=file)
    print(format_collection_plan(plan), file=file)
    file.flush()

    try:
        answer = input_func(colorize("Continue? [y/N] ", Color.YELLOW, use_colors))
    except EOFError:
        return False

    return answer.strip().lower() in ("y", "yes")


class ProgressBar:
    """Single-line progress bar driven by fractions in [0, 1].

    Passed as the orchestrator's on_progress callback; redraws only
    when the displayed percentage changes.
    """

    def __init__(
        self,
        file: TextIO | None = None,
        width: int = config.PROGRESS_BAR_WIDTH,
    ) -> None:
        self._file = file if file is not None else sys.stderr
        self._width = width
        self._last_percent = -1
        self._closed = False
        self._lock = threading.Lock()
        self._use_colors = self._file.isatty()

    def __call__(self, fraction: float) -> None:
        self.update(fraction)

    def update(self, fraction: float) -> None:
        """Redraw bar for fraction (clamped to [0, 1])."""
        fraction = max(0.0, min(fraction, 1.0))
        percent = int(fraction * 100)
        with self._lock:
            if self._closed or percent == self._last_percent:
                return
            self._last_percent = percent
            self._file.write("\r" + self.render(fraction))
            if percent == 100:
                self._file.write("\n")
            self._file.flush()

    def finish(self) -> None:
        """End the bar's line if a partial bar is showing.

        Later updates are ignored so log output starts on a clean line.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if 0 <= self._last_percent < 100:
                self._file.write("\n")
                self._file.flush()

    def render(self, fraction: float) -> str:
        """Bar text, e.g. "[##########..........]  50%"."""
        filled = int(round(fraction * self._width))
        bar = "#" * filled + "." * (self._width - filled)
        color = Color.GREEN if fraction >= 1.0 else Color.CYAN
        return f"[{colorize(bar, color, self._use_colors)}] {int(fraction * 100):3d}%"


def copy_to_clipboard(text: str) -> bool:
    """Put text on the system clipboard.

    Uses a hidden Tk root window; fails cleanly where no display
    or Tk is available.

    Args:
        text: Report text

    Returns:
        True if copied, False otherwise.
    """
    try:
        import tkinter
    except ImportError:
        logger.warning("Clipboard unavailable: tkinter is not installed")
        return False

    try:
        root = tkinter.Tk()
    except tkinter.TclError as e:
        logger.warning("Clipboard unavailable: %s", sanitize_for_log(str(e)))
        return False

    try:
        root.withdraw()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()  # keep clipboard contents after the window closes
    except tkinter.TclError as e:
        logger.warning("Copy to clipboard failed: %s", sanitize_for_log(str(e)))
        return False
    finally:
        root.destroy()

    logger.info("Report copied to clipboard (%d characters)", len(text))
    return True
