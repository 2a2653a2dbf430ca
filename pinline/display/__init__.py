# display/__init__.py

from .engine import RenderEngine, RenderState
from .escapes import EscapeState, EscapeTracker
from .geometry import CursorPosition, Geometry
from .styles import PinnedStyle, StyleDefinitions
from .terminal import ConsoleWriter, TerminalSize, Vt100ConsoleWriter, get_terminal_size

__all__ = [
    'RenderEngine', 'RenderState',
    'EscapeState', 'EscapeTracker',
    'CursorPosition', 'Geometry',
    'PinnedStyle', 'StyleDefinitions',
    'ConsoleWriter', 'TerminalSize', 'Vt100ConsoleWriter', 'get_terminal_size',
]
