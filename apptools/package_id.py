"""
Package ID validation.

A package ID is a reverse-host name such as com.example.foo: at least two
dot-separated parts, each starting with an ASCII letter and otherwise made
of ASCII letters, digits and underscores. The ID doubles as the name of the
project's root directory.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from .output import OutputIface

logger = logging.getLogger("apptools.package_id")

_PART = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


def package_id_error(candidate: str) -> Optional[str]:
    """Return why candidate is not a valid package ID, or None if it is."""
    if not candidate:
        return "empty"
    parts = candidate.split(".")
    if len(parts) < 2:
        return "needs at least two parts, e.g. com.example"
    for part in parts:
        if not part:
            return "empty part"
        if not _PART.match(part):
            return f"part {part!r} must start with a letter and contain only letters, digits and '_'"
    return None


def validate_package_id(candidate: Optional[str], output: Optional[OutputIface] = None) -> Optional[str]:
    """
    Return candidate unchanged when valid, otherwise None.

    The reason for a rejection is reported through output.error() when an
    output sink is given, and logged at DEBUG either way.
    """
    reason = package_id_error(candidate or "")
    if reason is None:
        return candidate
    logger.debug("Rejected package ID %r: %s", candidate, reason)
    if output is not None:
        output.error(f"Invalid package ID {candidate!r}: {reason}")
    return None
