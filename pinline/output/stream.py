# output/stream.py

import io
from typing import Optional

from rich.console import Console

from .queue import OutputQueue

class OutputStream(io.TextIOBase):
    """
    Writable text file over the output queue.

    Lets print(), logging handlers and rich consoles write into the
    scrolling output area like they would into sys.stdout.
    """
    def __init__(self, queue: OutputQueue):
        super().__init__()
        self._queue = queue

    def writable(self) -> bool:
        return True

    def isatty(self) -> bool:
        return True

    def write(self, text: str) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed output stream")
        self._queue.append(text)
        return len(text)

def create_console(stream: OutputStream, width: Optional[int] = None) -> Console:
    """
    Build a rich Console that renders into the output area.

    Only standard SGR colors are emitted, which is all the renderer's
    escape tracking understands.
    """
    return Console(
        file=stream,
        force_terminal=True,
        color_system="standard",
        width=width,
        highlight=False,
    )
