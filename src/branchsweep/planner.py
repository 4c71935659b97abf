"""Turn a selection into a confirmed deletion plan."""

from dataclasses import dataclass, field
from typing import Iterable

import typer
from rich.table import Table

from branchsweep.branches import BranchRef, is_protected_branch
from branchsweep.errors import MalformedInputError
from branchsweep.i18n import Localizer


@dataclass
class SelectionResult:
    """Selected branches split into what gets deleted and what is skipped."""

    to_delete: list[BranchRef] = field(default_factory=list)
    skipped_protected: list[str] = field(default_factory=list)
    malformed: list[str] = field(default_factory=list)


def plan_deletion(identities: Iterable[str]) -> SelectionResult:
    """Partition selected identities.

    Protected branches are checked again here even though the selector
    already marked them.
    """
    plan = SelectionResult()
    for identity in identities:
        if is_protected_branch(identity):
            plan.skipped_protected.append(identity)
            continue
        try:
            plan.to_delete.append(BranchRef.parse(identity))
        except MalformedInputError:
            plan.malformed.append(identity)
    return plan


def confirmation_table(plan: SelectionResult, localizer: Localizer) -> Table:
    """Create the table of branches about to be deleted."""
    table = Table(show_header=True, header_style="bold", show_edge=True)
    table.add_column(localizer.text("Branch"), style="cyan", no_wrap=True)
    table.add_column(localizer.text("Remote"), style="magenta", no_wrap=True)
    for ref in plan.to_delete:
        table.add_row(ref.name, ref.remote)
    return table


def confirm_deletion(localizer: Localizer) -> bool:
    """Ask before deleting anything. Anything but an explicit yes means no."""
    try:
        return typer.confirm(localizer.text("ProceedWithDeletion"), default=False)
    except typer.Abort:
        return False
