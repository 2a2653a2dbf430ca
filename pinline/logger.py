# logger.py

import os, logging
from typing import Optional
from functools import partial

DEFAULT_LOG_NAME = 'pinline_debug.log'

class Logger:
    """
    Thin wrapper around a stdlib logger.

    Stdout and stderr belong to the rendered screen, so records only ever
    go to a file. With logging disabled a NullHandler swallows them.
    """
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            if log_file is None:
                project_root = os.path.dirname(os.path.dirname(__file__))
                os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                log_file = os.path.join(project_root, 'logs', DEFAULT_LOG_NAME)
            self._add_file_handler(os.path.abspath(log_file))
            self._logger.setLevel(logging.DEBUG)
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error', 'critical']:
            setattr(self, level, partial(self._log, level))

    def _add_file_handler(self, log_file: str) -> None:
        # Loggers are process-wide by name; one handler per file
        for handler in self._logger.handlers:
            if getattr(handler, 'baseFilename', None) == log_file:
                return
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s'))
        self._logger.addHandler(handler)

    def _log(self, level: str, msg: str, exc_info=None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
