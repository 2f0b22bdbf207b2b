"""Unit tests for shortcut naming: sanitize, friendly name, file name."""

from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from recent_folders.api.folders.RankedEntry import RankedEntry
from recent_folders.api.folders.RecentFolder import RecentFolder
from recent_folders.api.output.friendly_folder_name import friendly_folder_name
from recent_folders.api.output.sanitize_file_name import sanitize_file_name
from recent_folders.api.output.shortcut_file_name import shortcut_file_name
from tests.conftest import utc


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Reports", "Reports"),
        ('a<b>c:d"e', "a_b_c_d_e"),
        ("x/y\\z|w?v*", "x_y_z_w_v_"),
        ("tab\there", "tab_here"),
        ("  padded  ", "padded"),
    ],
)
def test_sanitize_replaces_invalid_characters(raw, expected):
    assert sanitize_file_name(raw) == expected


def test_sanitize_truncates_to_120():
    assert len(sanitize_file_name("n" * 150)) == 120
    assert sanitize_file_name("n" * 120) == "n" * 120


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_sanitize_empty_falls_back(raw):
    assert sanitize_file_name(raw) == "Folder"


def test_friendly_name_uses_leaf():
    assert friendly_folder_name(PureWindowsPath("C:\\Users\\me\\Projects")) == "Projects"
    assert friendly_folder_name(PurePosixPath("/home/me/src")) == "src"


def test_friendly_name_drive_root():
    assert friendly_folder_name(PureWindowsPath("C:\\")) == "C"
    assert friendly_folder_name(PureWindowsPath("D:/")) == "D"


def test_friendly_name_posix_root_falls_back_to_path():
    assert friendly_folder_name(PurePosixPath("/")) == "/"
    assert sanitize_file_name(friendly_folder_name(PurePosixPath("/"))) == "_"


def test_shortcut_file_name():
    entry = RankedEntry(rank=1, folder=RecentFolder(Path("/work/B"), utc(10)))
    assert shortcut_file_name(entry, ".lnk") == "01 - B.lnk"
    assert shortcut_file_name(entry) == "01 - B"


def test_shortcut_file_name_sanitizes_leaf():
    entry = RankedEntry(rank=7, folder=RecentFolder(PureWindowsPath("C:\\x\\what?"), utc(10)))
    assert shortcut_file_name(entry, ".lnk") == "07 - what_.lnk"


def test_shortcut_file_name_uses_leaf_name_and_suffix():
    entry = RankedEntry(rank=1, folder=RecentFolder(Path("/work/Budget"), utc(9)))

    assert shortcut_file_name(entry, ".lnk") == "01 - Budget.lnk"
