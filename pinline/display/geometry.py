# display/geometry.py

from dataclasses import dataclass

@dataclass
class CursorPosition:
    """Absolute terminal coordinate, 1-indexed like the terminal itself."""
    row: int = 1
    column: int = 1

    def copy(self) -> 'CursorPosition':
        return CursorPosition(self.row, self.column)

def output_start() -> CursorPosition:
    """Top-left cell, where printing starts after every repaint."""
    return CursorPosition(1, 1)

@dataclass
class Geometry:
    """
    Terminal size and the rows derived from it.

    The bottom row holds the prompt and the row above it the status text.
    free_rows counts the rows left between the printed output and the
    status row; the renderer decrements it per line and the scroll push
    resets it. Everything else changes only through recompute().
    """
    total_rows: int = 0
    total_columns: int = 0
    prompt_row: int = 0
    status_row: int = 0
    free_rows: int = 0

    def recompute(self, rows: int, columns: int) -> None:
        """Apply a freshly queried terminal size."""
        self.total_rows = rows
        self.total_columns = columns
        self.prompt_row = rows
        self.status_row = rows - 1
        self.free_rows = rows

    @property
    def ready(self) -> bool:
        return self.total_rows > 0 and self.total_columns > 0

    @property
    def usable_columns(self) -> int:
        """Characters that fit on one output line before the renderer wraps."""
        return max(1, self.total_columns - 1)
