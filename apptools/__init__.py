"""
apptools
========
On-disk identity and lifecycle of a generated application project.

Basic usage:
    from apptools import Application

    app = Application("/work", "com.example.foo")   # create /work/com.example.foo
    app = Application("/work/com.example.foo")      # load it again
    app.output.info("Hello")                        # terminal + log/common.log
"""

from .application import Application
from .config import Config, get_config, load_config, reset_config
from .exceptions import (
    AppToolsError, ConfigError, IllegalAccessError,
    InvalidPackageIdError, InvalidPathError, PathConflictError,
)
from .layout import PathLayout, is_directory, missing_directories
from .logfile import LogfileOutput
from .output import OutputIface, OutputTee
from .package_id import validate_package_id
from .scaffold import ProjectScaffolder
from .terminal import TerminalOutput

__all__ = [
    "Application", "PathLayout", "ProjectScaffolder",
    "is_directory", "missing_directories", "validate_package_id",
    "OutputIface", "OutputTee", "TerminalOutput", "LogfileOutput",
    "Config", "get_config", "load_config", "reset_config",
    "AppToolsError", "InvalidPathError", "PathConflictError",
    "InvalidPackageIdError", "IllegalAccessError", "ConfigError",
]
