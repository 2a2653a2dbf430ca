# display/styles.py

from dataclasses import dataclass
from typing import Dict, Optional

from rich.color import Color, ColorType
from rich.errors import StyleSyntaxError
from rich.style import Style

# prompt_toolkit names for the 16 standard terminal colors, by ANSI number
ANSI_NAMES = (
    'ansiblack', 'ansired', 'ansigreen', 'ansiyellow',
    'ansiblue', 'ansimagenta', 'ansicyan', 'ansigray',
    'ansibrightblack', 'ansibrightred', 'ansibrightgreen', 'ansibrightyellow',
    'ansibrightblue', 'ansibrightmagenta', 'ansibrightcyan', 'ansiwhite',
)

def to_terminal_color(color: Optional[Color]) -> str:
    """
    Translate a rich Color into a prompt_toolkit color string.

    Standard colors keep their ANSI name so the user's palette applies;
    anything richer becomes a hex triplet without the leading '#'.
    An empty string means the terminal default.
    """
    if color is None or color.type == ColorType.DEFAULT:
        return ''
    if color.type == ColorType.STANDARD and color.number is not None and color.number < len(ANSI_NAMES):
        return ANSI_NAMES[color.number]
    return color.get_truecolor().hex.lstrip('#')

@dataclass(frozen=True)
class PinnedStyle:
    """Foreground, background and bold flag for one pinned-row element."""
    fg: str = ''
    bg: str = ''
    bold: bool = False

    @classmethod
    def parse(cls, definition: str) -> 'PinnedStyle':
        """Build from a rich style definition such as 'bold red on black'."""
        try:
            style = Style.parse(definition)
        except StyleSyntaxError as e:
            raise ValueError(f"Invalid style definition '{definition}': {e}") from e
        return cls(
            fg=to_terminal_color(style.color),
            bg=to_terminal_color(style.bgcolor),
            bold=bool(style.bold),
        )

class StyleDefinitions:
    """
    Named styles used when painting the pinned rows.

    ALERT colors the status line, ACCENT the prompt prefix and DEFAULT the
    text the user is typing.
    """
    DEFAULTS = {
        'ALERT': 'bold red',
        'ACCENT': 'green',
        'DEFAULT': 'default',
    }

    def __init__(self, definitions: Optional[Dict[str, str]] = None):
        merged = {**self.DEFAULTS, **(definitions or {})}
        self.styles: Dict[str, PinnedStyle] = {}
        for name, definition in merged.items():
            try:
                self.styles[name] = PinnedStyle.parse(definition)
            except ValueError as e:
                raise ValueError(f"Style '{name}': {e}") from e

    def get(self, name: str) -> PinnedStyle:
        """Return a style by name, falling back to the terminal default."""
        return self.styles.get(name, PinnedStyle())

    @property
    def alert(self) -> PinnedStyle:
        return self.get('ALERT')

    @property
    def accent(self) -> PinnedStyle:
        return self.get('ACCENT')

    @property
    def default(self) -> PinnedStyle:
        return self.get('DEFAULT')
