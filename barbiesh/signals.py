"""Interactive signal handling: Ctrl-C abandons the line, Ctrl-\\ is ignored."""

from __future__ import annotations

import signal
import sys
from types import FrameType
from typing import Any, Optional


def sigint_handler(signo: int, frame: Optional[FrameType]) -> None:
    """Move to a fresh line and abandon the line being read."""
    sys.stdout.write("\n")
    sys.stdout.flush()
    raise KeyboardInterrupt


def setup_signal_handlers() -> dict[int, Any]:
    """Install the shell's handlers; returns the previous handler for each signal."""
    previous = {signal.SIGINT: signal.signal(signal.SIGINT, sigint_handler)}
    if hasattr(signal, "SIGQUIT"):
        previous[signal.SIGQUIT] = signal.signal(signal.SIGQUIT, signal.SIG_IGN)
    return previous