"""
This module provides logging functionality for the prompt selector.

Curses owns the terminal while the UI runs, so records go to a log file.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

PROMPT_SELECTOR = 'PromptSelector'
DEFAULT_LOGS_FOLDER = Path.home() / '.prompt_selector' / 'logs'


class Singleton(type):
    """
    Metaclass that enforces single-instance creation for subclasses.
    """

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class Logger(metaclass=Singleton):
    """A singleton logger class handing out loggers that share one file handler."""

    def __init__(self):
        self.level = logging.INFO
        self.logs_folder: Optional[Path] = None
        self.logging_file_handler: Optional[logging.Handler] = None
        self.formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self._loggers: Dict[str, logging.Logger] = {}

    def configure(self, logs_folder: Union[str, Path, None] = None, debug: bool = False) -> Path:
        """Create the log folder and attach a file handler to every logger handed out so far.

        Args:
            logs_folder: Folder for the log file. Defaults to ~/.prompt_selector/logs.
            debug: Log DEBUG records as well.

        Returns:
            Path: The log file in use.
        """
        folder = Path(logs_folder).expanduser() if logs_folder else DEFAULT_LOGS_FOLDER
        folder.mkdir(parents=True, exist_ok=True)
        log_file = folder / (PROMPT_SELECTOR + '.log')

        if self.logging_file_handler is not None:
            for logger in self._loggers.values():
                logger.removeHandler(self.logging_file_handler)
            self.logging_file_handler.close()

        self.logs_folder = folder
        self.level = logging.DEBUG if debug else logging.INFO
        self.logging_file_handler = logging.FileHandler(log_file, encoding='utf-8')
        self.logging_file_handler.setFormatter(self.formatter)

        for logger in self._loggers.values():
            self._attach(logger)

        return log_file

    def setup_logger(self, logger_name=None):
        """Set up a logger with the given name and return it.

        Loggers obtained before configure() is called stay silent until it is.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = PROMPT_SELECTOR
        else:
            logger_name = PROMPT_SELECTOR + ' ' + logger_name

        logger = logging.getLogger(f"{logger_name:<28}")
        logger.propagate = False
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        self._loggers[logger_name] = logger
        self._attach(logger)
        return logger

    def _attach(self, logger: logging.Logger) -> None:
        logger.setLevel(self.level)
        if self.logging_file_handler is not None and self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)


__all__ = [
    'Logger',
    'Singleton',
]
