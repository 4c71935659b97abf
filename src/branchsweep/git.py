"""Git repository operations."""

from dataclasses import dataclass
from pathlib import Path

from git import GitCommandError, GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError, Repo

from branchsweep.errors import ExternalToolError, MissingDependencyError, RepositoryNotFoundError
from branchsweep.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BranchDetail:
    """Metadata of the last commit on a branch."""

    name: str
    hash: str
    author: str
    date: str
    message: str


def _combine(stdout: str, stderr: str) -> str:
    """Join the non-empty parts of a command's stdout and stderr."""
    return "\n".join(part for part in (stdout.strip(), stderr.strip()) if part)


class GitRepo:
    """Git repository operations."""

    def __init__(self, path: Path) -> None:
        """Open the repository containing ``path``."""
        try:
            self.repo: Repo = Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError, GitCommandError, ValueError) as err:
            raise RepositoryNotFoundError(str(path)) from err
        except GitCommandNotFound as err:
            raise MissingDependencyError("git") from err

    def _git(self, subcommand: str, *args: str) -> str:
        """Run a git subcommand through GitPython and return its stdout.

        Raises:
            ExternalToolError: If git exits non-zero
            MissingDependencyError: If git cannot be executed
        """
        command = ["git", subcommand, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            run = getattr(self.repo.git, subcommand)
            status, stdout, stderr = run(*args, with_extended_output=True, with_exceptions=False)
        except GitCommandNotFound as err:
            raise MissingDependencyError("git") from err

        if status != 0:
            raise ExternalToolError(
                f"{' '.join(command)} exited with status {status}",
                command=command,
                status=status,
                output=_combine(stdout, stderr),
            )
        # push reports progress on stderr even when it succeeds
        return _combine(stdout, stderr) if subcommand == "push" else stdout

    def list_remote_branches(self) -> list[str]:
        """List remote branches in the order git prints them.

        The symbolic ``<remote>/HEAD`` pointer is not a branch and is left out.
        """
        branches = []
        for line in self._git("branch", "-r").splitlines():
            branch = line.strip()
            if not branch or branch.endswith("/HEAD") or " -> " in branch:
                continue
            branches.append(branch)
        logger.info("Found %d remote branches", len(branches))
        return branches

    def merged_remote_branches(self) -> set[str]:
        """Remote branches whose commits are all reachable from HEAD."""
        output = self._git("branch", "-r", "--merged", "HEAD")
        return {line.strip() for line in output.splitlines() if line.strip()}

    def get_branch_detail(self, branch: str) -> BranchDetail:
        """Get hash, author, date and subject of the last commit on a branch."""
        output = self._git("log", "-1", "--pretty=format:%H%n%an%n%ad%n%s", branch)
        # An empty subject leaves only three fields once the trailing newline is stripped
        fields = output.split("\n", 3)
        if len(fields) < 3 or not fields[0]:
            raise ExternalToolError(f"Unexpected git log output for {branch}", command=["git", "log"], output=output)
        fields += [""] * (4 - len(fields))
        return BranchDetail(name=branch, hash=fields[0], author=fields[1], date=fields[2], message=fields[3])

    def get_log(self, branch: str) -> str:
        """Get the colorized log of a branch."""
        return self._git("log", "--color=always", branch)

    def delete_remote_branch(self, remote: str, name: str) -> str:
        """Delete a branch on a remote and return git's output."""
        logger.info("Deleting %s on %s", name, remote)
        return self._git("push", remote, "--delete", name)
