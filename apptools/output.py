"""
Output interface and the fan-out writer used by Application.

OutputTee always forwards to the terminal; its second sink is a logfile
that Application swaps between the common log and a platform log.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .logfile import LogfileOutput


class OutputIface(ABC):
    """Sink for user-facing messages."""

    @abstractmethod
    def error(self, message: str) -> None: ...

    @abstractmethod
    def warning(self, message: str) -> None: ...

    @abstractmethod
    def info(self, message: str, path: Optional[str] = None) -> None: ...

    @abstractmethod
    def highlight(self, message: str) -> None: ...

    @abstractmethod
    def write(self, message: str) -> None:
        """Raw text, no prefix or newline added."""


class OutputTee(OutputIface):
    """
    Forwards every call to the terminal sink, then to the active logfile sink.

    The terminal sink is fixed for the tee's lifetime; the logfile sink is a
    plain reassignable reference, so a swap is never partially visible.
    """

    def __init__(self, logfile_output: "LogfileOutput", terminal_output: OutputIface) -> None:
        self._logfile_output = logfile_output
        self._terminal_output = terminal_output

    @property
    def logfile_output(self) -> "LogfileOutput":
        return self._logfile_output

    @logfile_output.setter
    def logfile_output(self, logfile_output: "LogfileOutput") -> None:
        self._logfile_output = logfile_output

    @property
    def terminal_output(self) -> OutputIface:
        return self._terminal_output

    def error(self, message: str) -> None:
        self._terminal_output.error(message)
        self._logfile_output.error(message)

    def warning(self, message: str) -> None:
        self._terminal_output.warning(message)
        self._logfile_output.warning(message)

    def info(self, message: str, path: Optional[str] = None) -> None:
        self._terminal_output.info(message, path)
        self._logfile_output.info(message, path)

    def highlight(self, message: str) -> None:
        self._terminal_output.highlight(message)
        self._logfile_output.highlight(message)

    def write(self, message: str) -> None:
        self._terminal_output.write(message)
        self._logfile_output.write(message)
