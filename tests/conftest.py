# conftest.py

import asyncio
from typing import List, Tuple

import pyte
import pytest
from prompt_toolkit.data_structures import Size
from prompt_toolkit.output.vt100 import Vt100_Output

ESC = '\x1b'

class FakeScreenWriter:
    """
    ConsoleWriter double that behaves like a small terminal.

    Every call is recorded in ``calls``. Written characters land in a
    character grid; a line feed on the last row scrolls the grid and moves
    the top line into ``scrollback``. Escape sequences are dropped from the
    grid but kept in ``raw``.
    """
    def __init__(self, rows: int = 24, columns: int = 80):
        self.rows = rows
        self.columns = columns
        self.grid = [self._blank() for _ in range(rows)]
        self.scrollback: List[str] = []
        self.row, self.column = 1, 1
        self.calls: List[Tuple] = []
        self.flushes = 0
        self.fail_flush = False
        self._in_escape = False

    def _blank(self):
        return [' '] * self.columns

    def reset_log(self) -> None:
        self.calls.clear()

    # ConsoleWriter

    def cursor_goto(self, row: int, column: int) -> None:
        self.calls.append(('cursor_goto', row, column))
        self.row = min(max(row, 1), self.rows)
        self.column = min(max(column, 1), self.columns)

    def cursor_up(self, amount: int) -> None:
        self.calls.append(('cursor_up', amount))
        self.row = max(1, self.row - amount)

    def erase_line(self) -> None:
        self.calls.append(('erase_line',))
        self.grid[self.row - 1] = self._blank()

    def erase_screen(self) -> None:
        self.calls.append(('erase_screen',))
        self.grid = [self._blank() for _ in range(self.rows)]

    def write_raw(self, data: str) -> None:
        self.calls.append(('write_raw', data))
        for char in data:
            self._put(char)

    def set_color(self, fg: str = '', bg: str = '', bold: bool = False) -> None:
        self.calls.append(('set_color', fg, bg, bold))

    def flush(self) -> None:
        self.calls.append(('flush',))
        self.flushes += 1
        if self.fail_flush:
            raise OSError("Broken pipe")

    # Screen simulation

    def _put(self, char: str) -> None:
        if self._in_escape:
            if char.isalpha():
                self._in_escape = False
            return
        if char == ESC:
            self._in_escape = True
        elif char == '\r':
            self.column = 1
        elif char == '\n':
            self._line_feed()
        else:
            if self.column <= self.columns:
                self.grid[self.row - 1][self.column - 1] = char
            self.column = min(self.column + 1, self.columns + 1)

    def _line_feed(self) -> None:
        if self.row == self.rows:
            self.scrollback.append(''.join(self.grid.pop(0)).rstrip())
            self.grid.append(self._blank())
        else:
            self.row += 1

    def line(self, row: int) -> str:
        """Visible text of a 1-indexed row, trailing blanks removed."""
        return ''.join(self.grid[row - 1]).rstrip()

    def snapshot(self) -> List[str]:
        return [self.line(row) for row in range(1, self.rows + 1)]

    @property
    def raw(self) -> str:
        """Everything passed to write_raw since the last reset_log()."""
        return ''.join(call[1] for call in self.calls if call[0] == 'write_raw')

class EmulatedTerminal:
    """
    A pyte screen fed by a real prompt_toolkit VT100 output.

    The same ``output`` can back both the console writer and the input
    session, so the screen shows what a user would see. It does not
    report as a tty, which keeps prompt_toolkit from sending cursor
    position requests.
    """
    def __init__(self, rows: int = 24, columns: int = 80):
        self.size = Size(rows=rows, columns=columns)
        self.screen = pyte.Screen(columns, rows)
        self._stream = pyte.Stream(self.screen)
        self.output = Vt100_Output(self, lambda: self.size, term='xterm')

    def write(self, data: str) -> int:
        self._stream.feed(data)
        return len(data)

    def flush(self) -> None:
        pass

    def isatty(self) -> bool:
        return False

    def resize(self, rows: int, columns: int) -> None:
        self.size = Size(rows=rows, columns=columns)
        self.screen.resize(rows, columns)

    def line(self, row: int) -> str:
        return self.screen.display[row - 1].rstrip()

    def cell(self, row: int, column: int):
        return self.screen.buffer[row - 1][column - 1]

    @property
    def cursor(self) -> Tuple[int, int]:
        """1-indexed (row, column) of the emulated cursor."""
        return self.screen.cursor.y + 1, self.screen.cursor.x + 1

async def wait_until(condition, timeout: float = 2.0) -> None:
    """Poll condition() on the event loop until it holds or time runs out."""
    async def _poll():
        while not condition():
            await asyncio.sleep(0.01)
    await asyncio.wait_for(_poll(), timeout)

@pytest.fixture
def screen():
    return FakeScreenWriter()

@pytest.fixture
def terminal():
    return EmulatedTerminal()
