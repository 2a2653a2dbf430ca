# input/__init__.py

from .frontend import CallbackCompleter, InputFrontEnd

__all__ = ['CallbackCompleter', 'InputFrontEnd']
