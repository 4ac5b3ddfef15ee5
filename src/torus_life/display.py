"""Display drivers that put rendered frames in front of the user.

The simulation only needs two capabilities from a display: wipe the
screen and write a frame. ``TerminalDisplay`` implements them with ANSI
control sequences on a text stream.
"""

import sys
from typing import List, Optional, TextIO

# Erase the whole screen, then move the cursor to the top-left corner
CLEAR_SEQUENCE = '\x1b[2J\x1b[H'


class DisplayDriver:
    """Interface for frame output targets."""

    def clear(self) -> None:
        """Clear everything previously shown."""
        raise NotImplementedError

    def write(self, frame: str) -> None:
        """Show one rendered frame."""
        raise NotImplementedError


class TerminalDisplay(DisplayDriver):
    """Writes frames to a terminal-like text stream.

    Attributes:
        stream: Output stream (stdout when not given)
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def clear(self) -> None:
        self.stream.write(CLEAR_SEQUENCE)
        self.stream.flush()

    def write(self, frame: str) -> None:
        self.stream.write(frame)
        self.stream.flush()


class RecordingDisplay(DisplayDriver):
    """Keeps frames in memory instead of drawing them.

    Useful for headless runs and for inspecting what the loop produced.
    """

    def __init__(self):
        self.frames: List[str] = []
        self.clear_count = 0

    def clear(self) -> None:
        self.clear_count += 1

    def write(self, frame: str) -> None:
        self.frames.append(frame)
