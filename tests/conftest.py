"""Shared pytest configuration and fixtures for all tests."""

import os
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

import pytest

from recent_folders.api.config.RecentFoldersConfig import RecentFoldersConfig
from recent_folders.api.link._AbstractBackend import _AbstractBackend


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests that use real observers and timers")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch) -> Path:
    """Point RECENT_FOLDERS_HOME at a per-test directory."""
    home = tmp_path / "rf_home"
    monkeypatch.setenv("RECENT_FOLDERS_HOME", str(home))
    return home


# =============================================================================
# Fake link backend
# =============================================================================


class FakeBackend(_AbstractBackend):
    """Link files are ``*.lnk`` text files holding the target path.

    ``!corrupt`` content makes resolve() fail; names listed in
    ``fail_create`` make create_shortcut() fail.
    Sessions are counted, along with link operations made outside one.
    """

    link_suffix = ".lnk"

    def __init__(self) -> None:
        self.fail_create: set[str] = set()
        self.descriptions: dict[str, str] = {}
        self.working_dirs: dict[str, Path] = {}
        self.hidden: list[tuple[Path, bool]] = []
        self.customized: list[Path] = []
        self.sessions_opened = 0
        self.sessions_closed = 0
        self.calls_outside_session = 0

    @contextmanager
    def session(self):
        self.sessions_opened += 1
        try:
            yield
        finally:
            self.sessions_closed += 1

    def _track_call(self) -> None:
        if self.sessions_opened == self.sessions_closed:
            self.calls_outside_session += 1

    def is_link(self, path: Path) -> bool:
        return self.matches_name(path.name) and path.is_file()

    def matches_name(self, name: str) -> bool:
        return name.lower().endswith(".lnk")

    def resolve(self, link_path: Path) -> str:
        self._track_call()
        text = link_path.read_text(encoding="utf-8")
        if text.startswith("!corrupt"):
            raise OSError(f"corrupt shortcut: {link_path}")
        return text

    def create_shortcut(self, path: Path, target: Path, working_dir: Path, description: str) -> None:
        self._track_call()
        if path.name in self.fail_create:
            raise OSError(f"access denied: {path}")
        path.write_text(str(target), encoding="utf-8")
        self.descriptions[path.name] = description
        self.working_dirs[path.name] = working_dir

    def mark_hidden(self, path: Path, system: bool = False) -> None:
        self.hidden.append((path, system))

    def mark_customized_folder(self, path: Path) -> None:
        self.customized.append(path)


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


def utc(hour: int, minute: int = 0) -> datetime:
    """A fixed-day UTC timestamp for link mtimes."""
    return datetime(2024, 3, 1, hour, minute, tzinfo=timezone.utc)


def write_link(source_dir: Path, name: str, target: Path | str, when: datetime) -> Path:
    """Write a fake ``.lnk`` file pointing at ``target`` with mtime ``when``."""
    source_dir.mkdir(parents=True, exist_ok=True)
    link = source_dir / name
    link.write_text(str(target), encoding="utf-8")
    stamp = when.timestamp()
    os.utime(link, (stamp, stamp))
    return link


@pytest.fixture
def dirs(tmp_path) -> dict[str, Path]:
    """Source, output and target directories for a pass."""
    paths = {
        "source": tmp_path / "Recent",
        "output": tmp_path / "Recent Folders",
        "targets": tmp_path / "targets",
    }
    paths["source"].mkdir()
    paths["output"].mkdir()
    paths["targets"].mkdir()
    return paths


@pytest.fixture
def rf_config(dirs) -> RecentFoldersConfig:
    """Config pointing at the per-test source/output directories."""
    return RecentFoldersConfig(
        source_dir=dirs["source"],
        output_dir=dirs["output"],
        backend="symlink",
        case_insensitive=False,
    )
