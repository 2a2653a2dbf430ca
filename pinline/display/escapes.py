# display/escapes.py

from enum import Enum

ESC = '\x1b'
SGR_TERMINATOR = 'm'

class EscapeState(Enum):
    NORMAL = 'normal'
    IN_ESCAPE = 'in_escape'

class EscapeTracker:
    """
    Separates printable characters from SGR color/style sequences.

    The terminal cannot be asked for its current style, so the most
    recently started sequence is kept in active_code and replayed by the
    renderer whenever printing resumes somewhere else on the screen.
    Only sequences terminated by 'm' are recognised; anything else keeps
    the tracker inside the escape until an 'm' shows up.
    """
    def __init__(self):
        self.state = EscapeState.NORMAL
        self.active_code = ''

    def feed(self, char: str) -> bool:
        """
        Advance the state machine by one character.

        Returns True when the character belongs to an escape sequence and
        so does not occupy a terminal cell.
        """
        if char == ESC:
            self.active_code = ESC
            self.state = EscapeState.IN_ESCAPE
            return True

        if self.state is EscapeState.IN_ESCAPE:
            self.active_code += char
            if char == SGR_TERMINATOR:
                self.state = EscapeState.NORMAL
            return True

        return False

    @property
    def in_escape(self) -> bool:
        return self.state is EscapeState.IN_ESCAPE
