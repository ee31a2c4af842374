"""
Logfile sink — appends one line per message to a file.

The file is opened per call, so an instance holds no handle and can be
swapped in and out of an OutputTee at any time.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .output import OutputIface


class LogfileOutput(OutputIface):

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _append(self, text: str) -> None:
        with open(self._path, "a", encoding="utf-8") as f:
            f.write(text)

    def error(self, message: str) -> None:
        self._append(f"*** ERROR: {message}\n")

    def warning(self, message: str) -> None:
        self._append(f"*** WARNING: {message}\n")

    def info(self, message: str, path: Optional[str] = None) -> None:
        if path:
            self._append(f"  + {message} {path}\n")
        else:
            self._append(f"  + {message}\n")

    def highlight(self, message: str) -> None:
        self._append(f"  * {message}\n")

    def write(self, message: str) -> None:
        self._append(message)

    def __repr__(self) -> str:
        return f"LogfileOutput({str(self._path)!r})"
