"""
Domain errors raised while resolving, creating or loading a project.

Every error is raised where it is detected and never caught inside the
package; the CLI is the only place that turns them into messages.
Filesystem failures (OSError) are deliberately not wrapped.
"""
from __future__ import annotations

from typing import Any, Optional


class AppToolsError(Exception):
    """Base exception for all apptools errors."""


class InvalidPathError(AppToolsError):
    """Base path unusable, not a project toplevel, or a project directory is missing."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class PathConflictError(AppToolsError):
    """Creating a project whose root directory already exists."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to create project, path already exists: {path}")
        self.path = path


class InvalidPackageIdError(AppToolsError, ValueError):
    """Package identifier failed validation."""

    def __init__(self, package_id: str, reason: str = "") -> None:
        msg = f"Invalid package ID: {package_id!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.package_id = package_id


class IllegalAccessError(AppToolsError, AttributeError):
    """Write to a read-only property, or an invalid value for a guarded one."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class ConfigError(AppToolsError):
    """Configuration file missing, unreadable or malformed."""
