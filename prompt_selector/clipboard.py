"""
Clipboard access for the prompt selector.

The app only talks to a ClipboardWriter. By default the text goes through
pyperclip; a configured `clipboard.command` pipes it into that command
instead. Tests swap in fakes.
"""

import shlex
import subprocess
from abc import ABC, abstractmethod
from typing import Sequence, Union

import pyperclip

import prompt_selector.labels as LABELS
from prompt_selector.logger import Logger

log = Logger().setup_logger('Clipboard')

COPY_TIMEOUT_S = 5


class ClipboardError(Exception):
    """Raised when the text could not be placed on the clipboard."""


class ClipboardWriter(ABC):
    """Places text on the system clipboard."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """
        Put text on the clipboard, replacing what was there.

        Raises:
            ClipboardError: The copy failed; the message carries the diagnostic.
        """


class PyperclipClipboardWriter(ClipboardWriter):
    """Copies through pyperclip, which picks the platform mechanism itself."""

    def copy(self, text: str) -> None:
        log.info('Copying %d characters with pyperclip', len(text))
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CommandClipboardWriter(ClipboardWriter):
    """Writes the text to the stdin of a configured clipboard command."""

    def __init__(self, command: Sequence[str], timeout: float = COPY_TIMEOUT_S):
        if not command:
            raise ValueError("Clipboard command must not be empty")
        self.command = tuple(command)
        self.timeout = timeout

    def copy(self, text: str) -> None:
        name = self.command[0]
        log.info('Copying %d characters with %s', len(text), ' '.join(self.command))
        try:
            subprocess.run(
                self.command,
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
                check=True,
            )
        except FileNotFoundError as e:
            raise ClipboardError(LABELS.ERR_COMMAND_NOT_FOUND.format(name)) from e
        except subprocess.TimeoutExpired as e:
            raise ClipboardError(LABELS.ERR_COMMAND_TIMEOUT.format(name, self.timeout)) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            raise ClipboardError(LABELS.ERR_COMMAND_FAILED.format(name, e.returncode, stderr)) from e
        except OSError as e:
            raise ClipboardError(str(e)) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.command)!r})"


def select_clipboard_writer(command: Union[str, Sequence[str], None] = None) -> ClipboardWriter:
    """
    Pick the clipboard writer.

    Args:
        command (str | Sequence[str], optional): Configured command. Without one, pyperclip is used.

    Returns:
        ClipboardWriter: Writer for the configured command, or the pyperclip writer.
    """
    if command:
        parts = shlex.split(command) if isinstance(command, str) else list(command)
        return CommandClipboardWriter(parts)
    return PyperclipClipboardWriter()
