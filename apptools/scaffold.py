"""
ProjectScaffolder — creates the directory skeleton of a new project.

Usage:
    layout = PathLayout.for_package("/work", "com.example.foo")
    created = ProjectScaffolder().create_project(layout)
"""
from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import PathConflictError
from .layout import PathLayout, is_directory

logger = logging.getLogger("apptools.scaffold")


class ProjectScaffolder:
    """
    Creates root, app, log, pkg and prj, one non-recursive mkdir each.

    Refuses to touch an existing root. OSError from mkdir (permissions,
    a regular file in the way, disk full) propagates unchanged; directories
    created before the failure are left in place.
    """

    def create_project(self, layout: PathLayout) -> list[Path]:
        if is_directory(layout.root_path):
            raise PathConflictError(str(layout.root_path))

        created: list[Path] = []
        for path in layout.directories():
            path.mkdir()
            logger.debug("Created directory: %s", path)
            created.append(path)

        logger.info("Project skeleton created at %s", layout.root_path)
        return created
