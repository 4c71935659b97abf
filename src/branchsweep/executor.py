"""Delete remote branches one at a time."""

from dataclasses import dataclass
from typing import Iterable

from rich.console import Console
from rich.markup import escape

from branchsweep.branches import BranchRef
from branchsweep.errors import ExternalToolError
from branchsweep.git import GitRepo
from branchsweep.i18n import Localizer
from branchsweep.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeletionOutcome:
    """Result of deleting one branch."""

    ref: BranchRef
    succeeded: bool
    output: str


def delete_branches(repo: GitRepo, refs: Iterable[BranchRef], localizer: Localizer, console: Console) -> list[DeletionOutcome]:
    """Delete each branch on its remote and report the result right away.

    A failed deletion is reported and the remaining branches are still
    attempted.
    """
    outcomes = []
    for ref in refs:
        try:
            output = repo.delete_remote_branch(ref.remote, ref.name)
        except ExternalToolError as err:
            logger.debug("Deleting %s failed: %s", ref, err)
            outcome = DeletionOutcome(ref, False, err.output)
            console.print(localizer.markup("ErrorDeletingBranch", branch=ref, error=err))
        else:
            outcome = DeletionOutcome(ref, True, output)
            console.print(localizer.markup("BranchDeletedSuccessfully", branch=ref))
        if outcome.output:
            console.print(escape(outcome.output), highlight=False)
        outcomes.append(outcome)
    return outcomes
