# __init__.py

from .logger import Logger
from .config import PromptConfig
from .commands import Command, CommandTable, FunctionCommand
from .resize import ResizeEvents, SigwinchEvents
from .prompt import Prompt, PromptEvent, PromptEventType

__all__ = [
    "Prompt", "PromptConfig", "PromptEvent", "PromptEventType",
    "Command", "CommandTable", "FunctionCommand",
    "ResizeEvents", "SigwinchEvents", "Logger",
]
