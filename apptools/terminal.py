"""
Terminal sink.

Errors and warnings go to stderr, everything else to stdout, so piped
stdout stays clean of diagnostics. Use quiet=True in tests or when the
--quiet CLI flag is set; errors are still printed.

One instance per process: TerminalOutput.get_instance().
"""
from __future__ import annotations

import sys
from typing import ClassVar, Optional, TextIO

from .output import OutputIface


class TerminalOutput(OutputIface):

    _instance: ClassVar[Optional["TerminalOutput"]] = None

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        quiet: bool = False,
    ) -> None:
        # None means "whatever sys.stdout/sys.stderr is at write time"
        self._stream = stream
        self._err_stream = err_stream
        self.quiet = quiet

    @classmethod
    def get_instance(cls) -> "TerminalOutput":
        """Return the process-wide terminal sink, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def err_stream(self) -> TextIO:
        return self._err_stream if self._err_stream is not None else sys.stderr

    def error(self, message: str) -> None:
        print(f"*** ERROR: {message}", file=self.err_stream)

    def warning(self, message: str) -> None:
        if not self.quiet:
            print(f"*** WARNING: {message}", file=self.err_stream)

    def info(self, message: str, path: Optional[str] = None) -> None:
        if self.quiet:
            return
        if path:
            print(f"  + {message} {path}", file=self.stream)
        else:
            print(f"  + {message}", file=self.stream)

    def highlight(self, message: str) -> None:
        if not self.quiet:
            print(f"  * {message}", file=self.stream)

    def write(self, message: str) -> None:
        if not self.quiet:
            self.stream.write(message)
            self.stream.flush()
