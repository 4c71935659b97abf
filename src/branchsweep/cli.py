"""Command line interface for branchsweep."""

import os
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from branchsweep import selector
from branchsweep.branches import classify_branches, clean_branch_name, decorate
from branchsweep.errors import BranchSweepError, MissingDependencyError, RepositoryNotFoundError
from branchsweep.executor import delete_branches
from branchsweep.git import GitRepo
from branchsweep.i18n import Localizer, resolve_language
from branchsweep.logging_config import get_logger, setup_logging
from branchsweep.planner import confirm_deletion, confirmation_table, plan_deletion

app = typer.Typer(help="Interactively delete remote git branches", add_completion=False)
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def fail(localizer: Localizer, message_id: str, err: BranchSweepError, **data: object) -> NoReturn:
    """Print a localized error with any captured output and exit with status 1."""
    err_console.print(localizer.markup(message_id, **data))
    if err.output:
        err_console.print(escape(err.output), highlight=False)
    raise typer.Exit(code=1) from err


def missing_git(localizer: Localizer, err: MissingDependencyError) -> NoReturn:
    """Print the git install hint and exit with status 1."""
    err_console.print(localizer.markup("GitNotFound"))
    err_console.print(localizer.markup("InstallGit"))
    raise typer.Exit(code=1) from err


def get_repo(path: Path, localizer: Localizer) -> GitRepo:
    """Get git repository instance."""
    try:
        return GitRepo(path)
    except RepositoryNotFoundError as err:
        fail(localizer, "NotAGitRepository", err, path=path)
    except MissingDependencyError as err:
        missing_git(localizer, err)


def print_help(localizer: Localizer) -> None:
    """Print localized usage help."""
    options = [
        ("-h, --help", localizer.text("HelpFlag")),
        ("-lang string", localizer.text("HelpLangFlag")),
        ("--path PATH", localizer.text("HelpPathFlag")),
        ("-v, --verbose", localizer.text("HelpVerboseFlag")),
        ("--debug", localizer.text("HelpDebugFlag")),
    ]
    typer.echo(f"{localizer.text('HelpUsage')}\n\n{localizer.text('HelpDescription')}\n\n{localizer.text('HelpOptions')}")
    for flag, description in options:
        typer.echo(f"  {flag:<16}{description}")


def show_remote_log(path: Path, line: str, localizer: Localizer) -> None:
    """Print the last commit and the log of a branch for the fzf preview pane."""
    branch = clean_branch_name(line)
    repo = get_repo(path, localizer)
    try:
        log = repo.get_log(branch)
    except MissingDependencyError as err:
        missing_git(localizer, err)
    except BranchSweepError as err:
        fail(localizer, "ErrorGettingLog", err, branch=branch, error=err)

    # The header is optional, the log alone is still a useful preview
    try:
        detail = repo.get_branch_detail(branch)
    except BranchSweepError as err:
        logger.debug("Could not get last commit of %s: %s", branch, err)
    else:
        # fzf reads from a pipe, so colors have to be forced
        typer.secho(f"{detail.hash[:12]} {detail.message}", fg=typer.colors.YELLOW, bold=True, color=True)
        typer.secho(f"{detail.author}, {detail.date}", dim=True, color=True)
        typer.echo("")
    typer.echo(log, color=True)


@app.command(add_help_option=False)
def main(
    lang: Annotated[Optional[str], typer.Option("--lang", "-lang", help="Message language (en, ja)")] = None,
    show_help: Annotated[bool, typer.Option("--help", "-help", "-h", help="Show help")] = False,
    path: Annotated[Path, typer.Option(help="Path to git repository")] = Path("."),
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show informational log messages")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show debug log messages")] = False,
    get_remote_log: Annotated[Optional[str], typer.Option("--get-remote-log", "-get-remote-log", hidden=True)] = None,
) -> None:
    """Select remote branches in fzf and delete them."""
    setup_logging(verbose=verbose, debug=debug)
    localizer = Localizer.for_language(resolve_language(lang, os.environ.get("LANG")))
    logger.debug("Using language %s", localizer.lang)

    if get_remote_log:
        show_remote_log(path, get_remote_log, localizer)
        return

    if show_help:
        print_help(localizer)
        return

    try:
        selector.require_selector()
    except MissingDependencyError as err:
        err_console.print(localizer.markup("FzfNotFound"))
        err_console.print(localizer.markup("InstallFzf"))
        raise typer.Exit(code=1) from err

    repo = get_repo(path, localizer)
    try:
        remote_branches = repo.list_remote_branches()
    except MissingDependencyError as err:
        missing_git(localizer, err)
    except BranchSweepError as err:
        fail(localizer, "ErrorGettingRemoteBranches", err, error=err)

    if not remote_branches:
        console.print(localizer.markup("NoRemoteBranches"))
        return
    branches = classify_branches(repo, remote_branches)

    try:
        preview = selector.preview_command(path, localizer.lang)
    except MissingDependencyError as err:
        fail(localizer, "ExecutablePathError", err, error=err)

    try:
        selection = selector.run_selector([decorate(branch, localizer) for branch in branches], preview)
    except BranchSweepError as err:
        fail(localizer, "ErrorRunningSelector", err, error=err)

    if selection.cancelled:
        console.print(localizer.markup("DeletionCancelled"))
        return

    plan = plan_deletion(selection.identities)
    for branch in plan.skipped_protected:
        console.print(localizer.markup("ProtectedBranchSkipped", branch=branch))
    for branch in plan.malformed:
        console.print(localizer.markup("InvalidBranchFormat", branch=branch))

    if not plan.to_delete:
        console.print(localizer.markup("NoBranchesSelected"))
        return

    console.print()
    console.print(localizer.markup("ConfirmDeletion"))
    console.print(confirmation_table(plan, localizer))
    console.print()
    if not confirm_deletion(localizer):
        console.print(localizer.markup("DeletionCancelled"))
        return

    outcomes = delete_branches(repo, plan.to_delete, localizer, console)
    failed = sum(1 for outcome in outcomes if not outcome.succeeded)
    console.print()
    console.print(localizer.markup("DeletionSummary", deleted=len(outcomes) - failed, failed=failed))


if __name__ == "__main__":
    app()
