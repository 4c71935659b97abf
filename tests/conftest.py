"""Test configuration and fixtures."""

import logging
from pathlib import Path
from typing import Generator

import pytest
from git import Actor, Repo

from branchsweep.i18n import Localizer


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo the root logger changes made by the CLI."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def localizer() -> Localizer:
    return Localizer.for_language("en")


@pytest.fixture
def test_env(tmp_path: Path) -> Generator[tuple[Path, Path], None, None]:
    """Create a local repository with a bare ``origin`` remote.

    Remote branches:
        origin/feature-x          merged into main with a merge commit
        origin/feature/unmerged   has a commit main does not have
        origin/main, origin/master
    plus the symbolic origin/HEAD pointer. The local checkout is on main.

    Returns:
        Tuple of (local_repo_path, remote_repo_path)
    """
    remote_path = tmp_path / "remote"
    local_path = tmp_path / "local"
    remote_path.mkdir()
    local_path.mkdir()

    Repo.init(remote_path, bare=True)
    local_repo = Repo.init(local_path)

    author = Actor("Test User", "test@example.com")
    local_repo.config_writer().set_value("user", "name", author.name).release()
    local_repo.config_writer().set_value("user", "email", author.email).release()

    def commit_file(name: str, content: str) -> None:
        (local_path / name).write_text(content)
        local_repo.index.add([name])
        local_repo.index.commit(f"Add {name}", author=author, committer=author)

    commit_file("README.md", "# Test Repository")

    if "main" not in local_repo.heads:
        local_repo.create_head("main")
    main_branch = local_repo.heads.main
    main_branch.checkout()

    origin = local_repo.create_remote("origin", url=str(remote_path))
    origin.push("main")

    local_repo.create_head("feature-x").checkout()
    commit_file("feature-x.txt", "Merged branch content")
    origin.push("feature-x")
    main_branch.checkout()
    local_repo.git.merge("feature-x", "--no-ff", "-m", "Merge feature-x")
    origin.push("main")

    local_repo.create_head("feature/unmerged").checkout()
    commit_file("unmerged.txt", "Unmerged branch content")
    origin.push("feature/unmerged")
    main_branch.checkout()

    origin.push("main:master")
    origin.fetch()
    local_repo.git.remote("set-head", "origin", "main")

    yield local_path, remote_path


@pytest.fixture
def empty_message_branch(test_env: tuple[Path, Path]) -> str:
    """Push ``origin/empty-msg`` whose tip commit has no message."""
    local_path, _ = test_env
    local_repo = Repo(local_path)
    local_repo.create_head("empty-msg").checkout()
    local_repo.git.commit("--allow-empty", "--allow-empty-message", "-m", "")
    local_repo.remote("origin").push("empty-msg")
    local_repo.heads.main.checkout()
    local_repo.remote("origin").fetch()
    return "origin/empty-msg"
