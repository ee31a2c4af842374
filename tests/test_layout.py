"""Tests for apptools/layout.py — pure path computation and existence checks."""
from __future__ import annotations

from pathlib import Path

import pytest

from apptools.layout import PathLayout, is_directory, missing_directories


# ─────────────────────────────────────────────────────────────────────────────
# PathLayout
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("base,package_id", [
    ("/work", "com.example.foo"),
    ("/", "org.test"),
    ("/home/user/projects", "io.github.some_user.app2"),
])
def test_layout_is_base_plus_package_id(base, package_id):
    layout = PathLayout.for_package(base, package_id)
    assert layout.root_path == Path(base) / package_id
    assert layout.root_path.parent == Path(base)
    for child, name in (
        (layout.app_path, "app"),
        (layout.log_path, "log"),
        (layout.pkg_path, "pkg"),
        (layout.prj_path, "prj"),
    ):
        assert child.parent == layout.root_path
        assert child.name == name


def test_layout_accepts_path_objects():
    assert PathLayout.for_package(Path("/work"), "com.example.foo") == \
        PathLayout.for_package("/work", "com.example.foo")


def test_layout_does_not_touch_filesystem(tmp_path):
    layout = PathLayout.for_package(tmp_path, "com.example.foo")
    assert not layout.root_path.exists()
    assert list(tmp_path.iterdir()) == []


def test_layout_directories_parents_first():
    layout = PathLayout.for_package("/work", "com.example.foo")
    dirs = layout.directories()
    assert dirs[0] == layout.root_path
    assert dirs[1:] == [layout.app_path, layout.log_path, layout.pkg_path, layout.prj_path]


def test_layout_is_immutable():
    layout = PathLayout.for_package("/work", "com.example.foo")
    with pytest.raises(AttributeError):
        layout.root_path = Path("/elsewhere")


# ─────────────────────────────────────────────────────────────────────────────
# Directory checks
# ─────────────────────────────────────────────────────────────────────────────

def test_is_directory(tmp_path):
    (tmp_path / "d").mkdir()
    (tmp_path / "f").write_text("x")
    assert is_directory(tmp_path / "d")
    assert is_directory(str(tmp_path / "d"))
    assert not is_directory(tmp_path / "f")
    assert not is_directory(tmp_path / "missing")


def test_missing_directories_keeps_order(tmp_path):
    (tmp_path / "b").mkdir()
    paths = [tmp_path / "a", tmp_path / "b", tmp_path / "c"]
    assert missing_directories(paths) == [tmp_path / "a", tmp_path / "c"]
    assert missing_directories([tmp_path / "b"]) == []
