"""Unit tests for the recent-folders CLI."""

import json
import logging

import pytest
from typer.testing import CliRunner

import recent_folders.cli._create_app as create_app_mod
from recent_folders.api.config.get_config_path import get_config_path
from recent_folders.cli import main
from recent_folders.cli._create_app import _create_app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(create_app_mod, "setup_logging", lambda **kwargs: None)


@pytest.fixture
def config_file(dirs):
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(
            {
                "source_dir": str(dirs["source"]),
                "output_dir": str(dirs["output"]),
                "backend": "symlink",
            }
        )
    )
    return path


def test_main_one_shot_build_succeeds(config_file, capsys):
    assert main(["--quiet"]) == 0


def test_main_one_shot_build_prints_summary(config_file, dirs):
    result = runner.invoke(_create_app(), [])

    assert result.exit_code == 0, result.output
    assert str(dirs["output"]) in result.output


def test_main_invalid_config_exits_2():
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text("{broken")

    assert main([]) == 2


def test_main_build_failure_exits_1(dirs):
    blocker = dirs["output"] / "file"
    blocker.write_text("x")
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"source_dir": str(dirs["source"]), "output_dir": str(blocker / "out")}))

    assert main(["-q"]) == 1


def test_main_watch_runs_after_build(config_file, monkeypatch):
    calls = []
    monkeypatch.setattr(create_app_mod, "cmd_watch", lambda cfg: calls.append(cfg))

    assert main(["--watch", "--quiet"]) == 0
    assert len(calls) == 1


def test_main_watch_missing_source_exits_1(config_file, monkeypatch):
    def fail(cfg):
        raise FileNotFoundError("Source directory not found")

    monkeypatch.setattr(create_app_mod, "cmd_watch", fail)

    assert main(["-w", "-q"]) == 1


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("recent-folders ")


def test_main_unknown_option_is_usage_error(capsys):
    assert main(["--no-such-flag"]) == 2
    assert "Unhandled error" not in capsys.readouterr().err


def test_main_interrupted_build_exits_1(config_file, monkeypatch, capsys):
    def interrupt(cfg):
        raise KeyboardInterrupt

    monkeypatch.setattr(create_app_mod, "cmd_build", interrupt)

    assert main(["-q"]) == 1
    assert "Unhandled error" not in capsys.readouterr().err


def test_config_show_prints_json(config_file, dirs):
    result = runner.invoke(_create_app(), ["config", "show"])

    assert result.exit_code == 0, result.output
    assert str(dirs["source"]) in result.output


def test_config_init_then_refuse():
    assert runner.invoke(_create_app(), ["config", "init"]).exit_code == 0
    assert get_config_path().exists()
    assert runner.invoke(_create_app(), ["config", "init"]).exit_code == 1
    assert runner.invoke(_create_app(), ["config", "init", "--force"]).exit_code == 0


@pytest.mark.parametrize("flag", ["--verbose", "-v"])
def test_main_verbose_logs_at_debug(config_file, monkeypatch, flag):
    levels = []
    monkeypatch.setattr(create_app_mod, "setup_logging", lambda **kwargs: levels.append(kwargs["level"]))

    assert main([flag, "-q"]) == 0
    assert levels == [logging.DEBUG]
