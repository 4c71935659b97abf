"""Remote branch identities and their status."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import typer
from rich.text import Text

from branchsweep.errors import BranchSweepError, MalformedInputError
from branchsweep.git import GitRepo
from branchsweep.i18n import Localizer
from branchsweep.logging_config import get_logger

PROTECTED_BRANCHES = frozenset({"main", "master"})

logger = get_logger(__name__)


class BranchStatus(Enum):
    """Branch status."""

    PROTECTED = "protected"
    MERGED = "merged"
    UNMERGED = "unmerged"


STATUS_COLORS = {
    BranchStatus.PROTECTED: typer.colors.YELLOW,
    BranchStatus.MERGED: typer.colors.GREEN,
    BranchStatus.UNMERGED: typer.colors.RED,
}

STATUS_INDICATORS = {
    BranchStatus.PROTECTED: "ProtectedIndicator",
    BranchStatus.MERGED: "MergedIndicator",
    BranchStatus.UNMERGED: "UnmergedIndicator",
}


@dataclass(frozen=True)
class BranchRef:
    """A branch on a named remote."""

    remote: str
    name: str

    @classmethod
    def parse(cls, identity: str) -> "BranchRef":
        """Split ``remote/name`` on the first slash."""
        remote, sep, name = identity.partition("/")
        if not sep or not remote or not name:
            raise MalformedInputError(identity)
        return cls(remote, name)

    def __str__(self) -> str:
        return f"{self.remote}/{self.name}"


@dataclass(frozen=True)
class ClassifiedBranch:
    """A remote branch identity with the status computed at listing time."""

    identity: str
    status: BranchStatus


def clean_branch_name(line: str) -> str:
    """Recover the branch identity from a decorated line.

    Color codes and the trailing status indicator are removed. Plain branch
    names come back unchanged apart from surrounding whitespace.
    """
    cleaned = Text.from_ansi(line).plain
    return cleaned.split(" (", 1)[0].strip()


def is_protected_branch(identity: str) -> bool:
    """Check whether a branch is main or master.

    Only the part after the first slash is compared, so ``origin/main`` is
    protected while ``origin/team/main`` is not.
    """
    _, sep, name = identity.partition("/")
    return (name if sep else identity) in PROTECTED_BRANCHES


def classify_branches(repo: GitRepo, lines: Iterable[str]) -> list[ClassifiedBranch]:
    """Compute the status of every listed branch, keeping the listing order."""
    try:
        merged = repo.merged_remote_branches()
    except BranchSweepError as err:
        logger.warning("Could not get merged branches, treating all branches as unmerged: %s", err)
        merged = set()

    classified = []
    for line in lines:
        identity = clean_branch_name(line)
        if not identity:
            continue
        if is_protected_branch(identity):
            status = BranchStatus.PROTECTED
        elif identity in merged:
            status = BranchStatus.MERGED
        else:
            status = BranchStatus.UNMERGED
        classified.append(ClassifiedBranch(identity, status))
    return classified


def decorate(branch: ClassifiedBranch, localizer: Localizer) -> str:
    """Render a branch as a colored fzf candidate line."""
    indicator = localizer.text(STATUS_INDICATORS[branch.status])
    return typer.style(f"{branch.identity} {indicator}", fg=STATUS_COLORS[branch.status])
