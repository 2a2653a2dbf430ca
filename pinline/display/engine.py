# display/engine.py

from dataclasses import dataclass, field
from typing import Optional

from ..logger import Logger
from .escapes import EscapeTracker
from .geometry import CursorPosition, Geometry, output_start
from .styles import PinnedStyle, StyleDefinitions
from .terminal import NEWLINE, ConsoleWriter, TerminalSize

# free_rows value that triggers a scroll push, and the value it leaves behind
PUSH_THRESHOLD = 2
ROWS_AFTER_PUSH = 3

@dataclass
class RenderState:
    """
    Everything the renderer remembers between terminal writes.

    resume_pos is where the next batch continues printing. It is written at
    the end of every batch and read at the start of the next one, which is
    what lets status and resize repaints move the cursor in between.
    """
    current_pos: CursorPosition = field(default_factory=output_start)
    resume_pos: CursorPosition = field(default_factory=output_start)
    escapes: EscapeTracker = field(default_factory=EscapeTracker)
    status_text: str = ''
    prompt_prefix: str = ''
    prompt_text: str = ''
    # cursor offset into prompt_text, None meaning its end
    prompt_cursor: Optional[int] = None

    @property
    def active_escape_code(self) -> str:
        return self.escapes.active_code

class RenderEngine:
    """
    Prints output above two pinned rows using absolute cursor moves only.

    The terminal's own scroll region is never set. Instead, output fills
    the screen from the top and, once only two rows are left above the
    pinned rows, the pinned rows are blanked and a line feed is written on
    the bottom row. The terminal scrolls its native history by one line and
    printing continues one row higher.

    None of the methods take the render lock themselves: the coordinator
    holds it around every call.
    """
    def __init__(self, writer: ConsoleWriter, styles: StyleDefinitions,
                 prompt_prefix: str = '', logger=None):
        self.writer = writer
        self.styles = styles
        self.logger = logger or Logger(__name__)
        self.geometry = Geometry()
        self.state = RenderState(prompt_prefix=prompt_prefix)

    def render_batch(self, text: str) -> None:
        """
        Print a drained chunk of output and repaint the pinned rows.

        The active style is replayed before every printable character, line
        feeds included, but not before the bytes of an escape sequence:
        those are passed through as they arrive, so a stale code is never
        written in front of the sequence replacing it.
        """
        geometry, state, writer = self.geometry, self.state, self.writer
        self.logger.debug(f"Rendering batch of {len(text)} characters")

        writer.cursor_goto(state.resume_pos.row, state.resume_pos.column)

        for char in text:
            if state.escapes.feed(char):
                writer.write_raw(char)
                continue

            # Replay the style, the cursor may have been elsewhere in between
            if state.active_escape_code:
                writer.write_raw(state.active_escape_code)
            writer.write_raw(NEWLINE if char == '\n' else char)

            state.current_pos.column += 1
            if char == '\n':
                self._next_line()

            if state.current_pos.column == geometry.total_columns:
                writer.write_raw(NEWLINE)
                self._next_line()

            if geometry.free_rows == PUSH_THRESHOLD:
                self._scroll_push()

        state.resume_pos = state.current_pos.copy()
        self.paint_pinned_rows()
        self._flush_logged("output batch")

    def _next_line(self) -> None:
        self.state.current_pos.column = 1
        self.state.current_pos.row += 1
        self.geometry.free_rows -= 1

    def _scroll_push(self) -> None:
        """Scroll the terminal by one line from the prompt row."""
        geometry, state, writer = self.geometry, self.state, self.writer
        state.resume_pos = state.current_pos.copy()

        # Blank the pinned rows so nothing of them scrolls into the output
        writer.cursor_goto(geometry.status_row, 1)
        writer.erase_line()
        writer.cursor_goto(geometry.prompt_row, 1)
        writer.erase_line()

        # A line feed only scrolls when written on the last row
        writer.write_raw(NEWLINE)

        # Everything moved up by one, including the resume point
        writer.cursor_goto(state.resume_pos.row, state.resume_pos.column)
        writer.cursor_up(1)

        state.current_pos.row = max(1, state.current_pos.row - 1)
        state.current_pos.column = 1
        geometry.free_rows = ROWS_AFTER_PUSH

    def paint_pinned_rows(self) -> None:
        """Repaint status and prompt rows and park the cursor in the prompt."""
        geometry, state = self.geometry, self.state
        self._paint_row(geometry.status_row, ((state.status_text, self.styles.alert),))
        self._paint_row(geometry.prompt_row, (
            (state.prompt_prefix, self.styles.accent),
            (state.prompt_text, self.styles.default),
        ))
        self._park_cursor()

    def _paint_row(self, row: int, segments) -> None:
        writer = self.writer
        writer.cursor_goto(row, 1)
        writer.erase_line()
        for text, style in segments:
            self._set_style(style)
            writer.write_raw(text)
        writer.set_color()

    def _set_style(self, style: PinnedStyle) -> None:
        self.writer.set_color(style.fg, style.bg, style.bold)

    def prompt_cursor_column(self) -> int:
        state = self.state
        offset = len(state.prompt_text)
        if state.prompt_cursor is not None:
            offset = min(state.prompt_cursor, offset)
        return len(state.prompt_prefix) + offset + 1

    def _park_cursor(self) -> None:
        # The input front end draws relative to where it left the cursor
        self.writer.cursor_goto(self.geometry.prompt_row, self.prompt_cursor_column())

    def show_status(self, text: str) -> None:
        """
        Replace the status line text.

        The cursor goes back to the input cursor on the prompt row afterwards
        so typing continues where it was. Raises OSError if the terminal write fails.
        """
        geometry, state = self.geometry, self.state
        state.status_text = text.strip()
        self._paint_row(geometry.status_row, ((state.status_text, self.styles.alert),))
        self._park_cursor()
        self.writer.flush()

    def repaint(self, size: TerminalSize, initial: bool = False) -> None:
        """
        Recompute geometry for a new size and redraw the whole screen.

        On the initial run the visible window is first pushed down by a
        screenful of blank lines so the user's scrollback survives the
        erase. Output restarts at the top-left cell. Raises OSError if the
        terminal write fails.
        """
        writer, state = self.writer, self.state
        if initial:
            self._move_window_down(size.lines)

        writer.erase_screen()
        self.geometry.recompute(size.lines, size.columns)
        state.current_pos = output_start()
        state.resume_pos = output_start()

        self.paint_pinned_rows()
        writer.flush()

    def _move_window_down(self, rows: int) -> None:
        self.writer.cursor_goto(rows, 1)
        self.writer.write_raw(NEWLINE * rows)

    def _flush_logged(self, what: str) -> None:
        try:
            self.writer.flush()
        except OSError as e:
            self.logger.critical(f"Error flushing {what}: {e}", exc_info=True)
