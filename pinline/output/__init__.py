# output/__init__.py

from .queue import OutputQueue
from .stream import OutputStream, create_console

__all__ = ['OutputQueue', 'OutputStream', 'create_console']
