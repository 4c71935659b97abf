"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest

from branchsweep.git import GitRepo
from branchsweep.logging_config import get_logger, setup_logging


def test_logger_keeps_package_name() -> None:
    assert get_logger("branchsweep.git").name == "branchsweep.git"
    assert get_logger("branchsweep.git") is not logging.getLogger("git")


def test_verbose_shows_info_messages(test_env: tuple[Path, Path], capsys: pytest.CaptureFixture[str]) -> None:
    """Quieting GitPython's logger does not hide messages from our git module."""
    local_path, _ = test_env
    setup_logging(verbose=True)
    GitRepo(local_path).list_remote_branches()

    err = capsys.readouterr().err
    assert "INFO [branchsweep.git] Found 4 remote branches" in err
    assert logging.getLogger("git").level == logging.WARNING


def test_default_level_hides_info(test_env: tuple[Path, Path], capsys: pytest.CaptureFixture[str]) -> None:
    local_path, _ = test_env
    setup_logging()
    GitRepo(local_path).list_remote_branches()
    assert "Found" not in capsys.readouterr().err


def test_debug_shows_commands(test_env: tuple[Path, Path], capsys: pytest.CaptureFixture[str]) -> None:
    local_path, _ = test_env
    setup_logging(debug=True)
    GitRepo(local_path).merged_remote_branches()
    assert "Running git branch -r --merged HEAD" in capsys.readouterr().err
