# display/terminal.py

import sys
import shutil
from dataclasses import dataclass
from typing import Optional, Protocol, TextIO

from prompt_toolkit.output.vt100 import Vt100_Output
from prompt_toolkit.styles import DEFAULT_ATTRS

# The front end keeps the terminal in raw mode, where a bare LF only moves
# the cursor down. The position model assumes column 1 after every newline.
NEWLINE = '\r\n'


@dataclass
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


def get_terminal_size() -> TerminalSize:
    """Query the current terminal dimensions."""
    size = shutil.get_terminal_size()
    return TerminalSize(columns=size.columns, lines=size.lines)


class ConsoleWriter(Protocol):
    """Primitive terminal operations the renderer is built on."""

    def cursor_goto(self, row: int, column: int) -> None: ...
    def cursor_up(self, amount: int) -> None: ...
    def erase_line(self) -> None: ...
    def erase_screen(self) -> None: ...
    def write_raw(self, data: str) -> None: ...
    def set_color(self, fg: str = '', bg: str = '', bold: bool = False) -> None: ...
    def flush(self) -> None: ...


class Vt100ConsoleWriter:
    """
    ConsoleWriter backed by prompt_toolkit's VT100 output.

    Writes are buffered by the output object until flush(), which raises
    OSError when the terminal stream is broken. Pass ``output`` to share
    one VT100 output with the input front end.
    """

    def __init__(self, stdout: Optional[TextIO] = None, output: Optional[Vt100_Output] = None):
        self._output = output or Vt100_Output.from_pty(stdout or sys.stdout)
        self._color_depth = self._output.get_default_color_depth()

    def cursor_goto(self, row: int, column: int) -> None:
        """Move to an absolute, 1-indexed cell."""
        self._output.cursor_goto(row, column)

    def cursor_up(self, amount: int) -> None:
        self._output.cursor_up(amount)

    def erase_line(self) -> None:
        """Erase the whole current line."""
        self._output.write_raw('\x1b[2K')

    def erase_screen(self) -> None:
        self._output.erase_screen()

    def write_raw(self, data: str) -> None:
        self._output.write_raw(data)

    def set_color(self, fg: str = '', bg: str = '', bold: bool = False) -> None:
        """Switch colors; empty strings select the terminal defaults."""
        attrs = DEFAULT_ATTRS._replace(color=fg, bgcolor=bg, bold=bold)
        self._output.set_attributes(attrs, self._color_depth)

    def flush(self) -> None:
        self._output.flush()
