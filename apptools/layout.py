"""
Project directory layout.

A project lives in a single root directory named after its package ID,
with four fixed children:

    <base>/
    └── com.example.foo/     # root_path
        ├── app/             # the html application
        ├── log/             # build logfiles (common.log, <platform>.log)
        ├── pkg/             # built packages
        └── prj/             # platform-specific projects

Computing a layout never touches the filesystem; checking it does.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

StrPath = Union[str, "os.PathLike[str]"]

APP_DIR = "app"
LOG_DIR = "log"
PKG_DIR = "pkg"
PRJ_DIR = "prj"


@dataclass(frozen=True)
class PathLayout:
    """The five canonical directories of one project."""
    root_path: Path
    app_path: Path
    log_path: Path
    pkg_path: Path
    prj_path: Path

    @classmethod
    def for_package(cls, base_path: StrPath, package_id: str) -> "PathLayout":
        """
        Join base_path and package_id into a layout.

        Pure segment joining: an invalid package_id gives an invalid layout,
        which the existence checks reject later.
        """
        root = Path(base_path) / package_id
        return cls(
            root_path=root,
            app_path=root / APP_DIR,
            log_path=root / LOG_DIR,
            pkg_path=root / PKG_DIR,
            prj_path=root / PRJ_DIR,
        )

    def directories(self) -> list[Path]:
        """All five paths, parents first (the order they must be created in)."""
        return [self.root_path, self.app_path, self.log_path, self.pkg_path, self.prj_path]


def is_directory(path: StrPath) -> bool:
    return Path(path).is_dir()


def missing_directories(paths: Iterable[StrPath]) -> list[Path]:
    """Return the paths that are not existing directories, in input order."""
    return [Path(p) for p in paths if not is_directory(p)]
