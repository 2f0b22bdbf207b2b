"""Unit tests for recent_folders.api.link backends."""

import os
import sys
from pathlib import Path

import pytest

from recent_folders.api.link.detect_backend import detect_backend
from recent_folders.api.link.get_backend import get_backend

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")


def test_get_backend_known_types():
    assert get_backend("symlink").link_suffix == ""
    assert get_backend("windows").link_suffix == ".lnk"


def test_get_backend_unknown_type():
    with pytest.raises(ValueError, match="Unknown link backend"):
        get_backend("carrier-pigeon")


def test_detect_backend_matches_platform():
    expected = "windows" if sys.platform == "win32" else "symlink"
    assert detect_backend() == expected


def test_windows_backend_name_matching_without_com(tmp_path):
    backend = get_backend("windows")
    (tmp_path / "Report.LNK").write_text("")
    (tmp_path / "dir.lnk").mkdir()

    assert backend.matches_name("a.lnk")
    assert backend.matches_name("A.LNK")
    assert not backend.matches_name("a.url")
    assert backend.is_link(tmp_path / "Report.LNK")
    assert not backend.is_link(tmp_path / "dir.lnk")


@posix_only
def test_symlink_backend_resolve_absolute_and_relative(tmp_path):
    backend = get_backend("symlink")
    target = tmp_path / "target"
    target.mkdir()
    absolute = tmp_path / "abs"
    relative = tmp_path / "rel"
    os.symlink(target, absolute)
    os.symlink("target", relative)

    assert Path(backend.resolve(absolute)) == target
    assert Path(backend.resolve(relative)) == target


@posix_only
def test_symlink_backend_resolve_dangling_link_returns_target(tmp_path):
    backend = get_backend("symlink")
    link = tmp_path / "dangling"
    os.symlink(tmp_path / "gone", link)

    assert backend.is_link(link)
    assert backend.resolve(link) == str(tmp_path / "gone")


@posix_only
def test_symlink_backend_resolve_regular_file_raises(tmp_path):
    backend = get_backend("symlink")
    plain = tmp_path / "plain"
    plain.write_text("x")

    assert not backend.is_link(plain)
    with pytest.raises(OSError):
        backend.resolve(plain)


@posix_only
def test_symlink_backend_create_replaces_existing(tmp_path):
    backend = get_backend("symlink")
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    shortcut = tmp_path / "01 - x"

    backend.create_shortcut(shortcut, first, first, "Recent folder")
    backend.create_shortcut(shortcut, second, second, "Recent folder")

    assert shortcut.is_symlink()
    assert os.readlink(shortcut) == str(second)


def test_windows_backend_requires_session_for_shortcut_access(tmp_path):
    backend = get_backend("windows")

    with pytest.raises(RuntimeError, match="session"):
        backend.resolve(tmp_path / "A.lnk")
