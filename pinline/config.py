# config.py

from dataclasses import dataclass
from typing import Optional

from .display.styles import StyleDefinitions

@dataclass
class PromptConfig:
    """
    Settings for the pinned prompt and status line.

    Style fields take rich style definitions, e.g. 'bold red' or
    'bright_cyan on black'.
    """
    prefix: str = '> '
    prefix_style: str = 'green'
    status_style: str = 'bold red'
    text_style: str = 'default'
    interrupt_key: str = 'c-c'
    logging_enabled: bool = False
    log_file: Optional[str] = None

    def __post_init__(self):
        if not self.interrupt_key:
            raise ValueError("An interrupt key binding is required")
        if '\n' in self.prefix:
            raise ValueError("The prompt prefix must fit on one line")
        # Fail here rather than on the first repaint
        self.styles()

    def styles(self) -> StyleDefinitions:
        return StyleDefinitions({
            'ALERT': self.status_style,
            'ACCENT': self.prefix_style,
            'DEFAULT': self.text_style,
        })
