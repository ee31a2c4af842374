"""
Application — identity, directory layout and output routing of one project
===========================================================================
Two ways to construct one, and they take DIFFERENT paths:

    # New project: cwd is the directory the project is created IN.
    app = Application("/work", "com.example.foo")     # creates /work/com.example.foo/...

    # Existing project: cwd IS the project root, its name is the package ID.
    app = Application("/work/com.example.foo")

Either way the result is the same validated state: all five project
directories exist, log/common.log is fresh and empty, and app.output writes
to the terminal plus the common logfile.

Switching the logfile while building for one platform:

    with app.platform_logging("android"):
        app.output.info("Building")                  # → terminal + log/android.log
    app.output.info("Done")                          # → terminal + log/common.log
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

from .config import Config, get_config
from .exceptions import (
    IllegalAccessError,
    InvalidPackageIdError,
    InvalidPathError,
)
from .layout import PathLayout, is_directory, missing_directories
from .logfile import LogfileOutput
from .output import OutputIface, OutputTee
from .package_id import package_id_error, validate_package_id
from .scaffold import ProjectScaffolder
from .terminal import TerminalOutput

logger = logging.getLogger("apptools.application")

COMMON_LOGFILE = "common.log"

PackageIdValidator = Callable[[str], Optional[str]]


class Application:
    """
    One project on disk, created or loaded at construction.

    Raises
    ------
    InvalidPathError       — cwd empty, relative, not normalized or not a
                             directory; cwd not a project toplevel (load);
                             a project directory missing afterwards
    PathConflictError      — the project root already exists (create)
    InvalidPackageIdError  — the supplied package ID is rejected (create)
    OSError                — creating directories or the logfile failed
    """

    def __init__(
        self,
        cwd: str | os.PathLike[str],
        package_id: Optional[str] = None,
        *,
        terminal: Optional[OutputIface] = None,
        package_id_validator: PackageIdValidator = validate_package_id,
        config_provider: Callable[[], Config] = get_config,
    ) -> None:
        self._config_provider = config_provider

        raw_cwd = os.fspath(cwd) if cwd else ""
        if not raw_cwd or not os.path.isabs(raw_cwd) or os.path.normpath(raw_cwd) != raw_cwd:
            raise InvalidPathError(f"Path not absolute: {raw_cwd!r}", raw_cwd)
        if not is_directory(raw_cwd):
            raise InvalidPathError(f"Path does not exist: {raw_cwd}", raw_cwd)

        if package_id:
            # Create: cwd is the base directory the project goes into.
            valid_id = package_id_validator(package_id)
            if not valid_id:
                reason = package_id_error(package_id) if package_id_validator is validate_package_id else ""
                raise InvalidPackageIdError(package_id, reason or "")
            self._package_id: str = valid_id
            self._layout = PathLayout.for_package(raw_cwd, valid_id)
            ProjectScaffolder().create_project(self._layout)
        else:
            # Load: cwd is the project root, named after the package ID.
            valid_id = package_id_validator(os.path.basename(raw_cwd))
            if not valid_id:
                raise InvalidPathError(
                    f"Path does not seem to be a project toplevel: {raw_cwd}", raw_cwd
                )
            self._package_id = valid_id
            self._layout = PathLayout.for_package(os.path.dirname(raw_cwd), valid_id)

        # Single check for both branches; creation problems surface here too.
        missing = missing_directories(self._layout.directories())
        if missing:
            raise InvalidPathError(f"Failed to load, invalid path: {missing[0]}", str(missing[0]))

        # Always start a new common logfile for each run.
        logfile_path = self._layout.log_path / COMMON_LOGFILE
        logfile_path.unlink(missing_ok=True)
        logfile_path.touch()
        self._logfile_output = LogfileOutput(logfile_path)

        self._platform_logfile_output: Optional[LogfileOutput] = None
        self._output = OutputTee(
            self._logfile_output,
            terminal if terminal is not None else TerminalOutput.get_instance(),
        )
        logger.info("Application %s ready at %s", self._package_id, self._layout.root_path)

    # ------------------------------------------------------------------
    # Identity and paths (read-only)
    # ------------------------------------------------------------------

    @property
    def package_id(self) -> str:
        """Package identifier in reverse host format, i.e. com.example.foo."""
        return self._package_id

    @property
    def layout(self) -> PathLayout:
        return self._layout

    @property
    def root_path(self) -> Path:
        return self._layout.root_path

    @property
    def app_path(self) -> Path:
        """Where the html application is located."""
        return self._layout.app_path

    @property
    def log_path(self) -> Path:
        """Where the build logfiles are located."""
        return self._layout.log_path

    @property
    def pkg_path(self) -> Path:
        """Where built packages are placed."""
        return self._layout.pkg_path

    @property
    def prj_path(self) -> Path:
        """Where the platform-specific projects are located."""
        return self._layout.prj_path

    # ------------------------------------------------------------------
    # Guarded properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> Config:
        """Process-wide Config, fetched from the provider on every access."""
        return self._config_provider()

    @config.setter
    def config(self, value: Any) -> None:
        raise IllegalAccessError("Attempting to write read-only property Application.config", value)

    @property
    def output(self) -> OutputTee:
        return self._output

    @output.setter
    def output(self, value: Any) -> None:
        raise IllegalAccessError("Attempting to write read-only property Application.output", value)

    @property
    def platform_logfile_output(self) -> Optional[LogfileOutput]:
        """Active platform logfile, or None while output goes to the common logfile."""
        return self._platform_logfile_output

    @platform_logfile_output.setter
    def platform_logfile_output(self, value: Optional[LogfileOutput]) -> None:
        self.set_platform_logfile_output(value)

    def set_platform_logfile_output(self, value: Optional[LogfileOutput]) -> None:
        """
        Route the logfile half of output to value, or back to the common
        logfile when value is None. Anything else raises IllegalAccessError
        and changes nothing.
        """
        if isinstance(value, LogfileOutput):
            self._platform_logfile_output = value
            self._output.logfile_output = value
            logger.debug("Output routed to platform logfile %s", value.path)
        elif value is None:
            self._platform_logfile_output = None
            self._output.logfile_output = self._logfile_output
            logger.debug("Output routed to common logfile %s", self._logfile_output.path)
        else:
            raise IllegalAccessError(
                "Attempting invalid write to property Application.platform_logfile_output",
                value,
            )

    # ------------------------------------------------------------------
    # Platform logfiles
    # ------------------------------------------------------------------

    def create_platform_logfile(self, platform: str) -> LogfileOutput:
        """Start a fresh log/<platform>.log and return a sink bound to it."""
        if (
            not platform
            or os.sep in platform
            or platform in (".", "..")
            or f"{platform}.log" == COMMON_LOGFILE
        ):
            raise InvalidPathError(f"Invalid platform name for logfile: {platform!r}", platform)
        path = self.log_path / f"{platform}.log"
        path.unlink(missing_ok=True)
        path.touch()
        return LogfileOutput(path)

    @contextmanager
    def platform_logging(self, platform: str) -> Iterator[LogfileOutput]:
        """
        Route output to log/<platform>.log for the duration of the block, then
        restore whatever was routed before (so blocks nest).
        """
        previous = self._platform_logfile_output
        logfile_output = self.create_platform_logfile(platform)
        self.platform_logfile_output = logfile_output
        try:
            yield logfile_output
        finally:
            self.platform_logfile_output = previous

    def __repr__(self) -> str:
        return f"Application(package_id={self._package_id!r}, root_path={str(self.root_path)!r})"
