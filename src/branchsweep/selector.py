"""fzf selection adapter."""

import shlex
import shutil
import subprocess
import sys
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Optional, Sequence

from branchsweep.branches import clean_branch_name
from branchsweep.errors import ExternalToolError, MissingDependencyError
from branchsweep.logging_config import get_logger

SELECTOR = "fzf"
# fzf exits with 130 when the user presses Esc or Ctrl-C
CANCELLED_EXIT_CODE = 130

logger = get_logger(__name__)


@dataclass
class SelectorResult:
    """Branch identities the user picked, or a cancellation."""

    cancelled: bool = False
    identities: list[str] = field(default_factory=list)


def require_selector(binary: str = SELECTOR) -> None:
    """Make sure the selector program is installed."""
    if shutil.which(binary) is None:
        raise MissingDependencyError(binary)


def preview_command(path: Path, lang: str) -> str:
    """Build the command fzf runs to preview a candidate.

    The current program is invoked again with ``--get-remote-log``; fzf
    replaces ``{}`` with the quoted candidate line.
    """
    argv0 = sys.argv[0] if sys.argv else ""
    if Path(argv0).name == "__main__.py":
        base = [sys.executable, "-m", "branchsweep"]
    else:
        executable = shutil.which(argv0) if argv0 else None
        if executable is None or not Path(executable).is_file():
            raise MissingDependencyError(argv0 or "branchsweep", f"Cannot resolve executable path: {argv0!r}")
        base = [str(Path(executable).resolve())]

    args = [*base, "--path", str(path.resolve()), "--lang", lang]
    return " ".join(shlex.quote(arg) for arg in args) + " --get-remote-log {}"


def _feed(stream: IO[str], lines: Sequence[str]) -> None:
    try:
        for line in lines:
            stream.write(line + "\n")
    except BrokenPipeError:
        # fzf can exit before reading everything, e.g. when accepting early
        logger.debug("Selector closed its input early")
    finally:
        try:
            stream.close()
        except BrokenPipeError:
            pass


def run_selector(lines: Sequence[str], preview: Optional[str] = None, binary: str = SELECTOR) -> SelectorResult:
    """Show candidate lines in fzf and return the chosen branch identities.

    Candidates are written from a separate thread while the selection is
    read, so neither side can block on a full pipe.

    Raises:
        MissingDependencyError: If the selector cannot be started
        ExternalToolError: If the selector fails for any reason other than cancellation
    """
    command = [binary, "--multi", "--ansi"]
    if preview:
        command += ["--preview", preview]
    logger.debug("Running %s", " ".join(command))

    try:
        process = subprocess.Popen(command, stdin=subprocess.PIPE, stdout=subprocess.PIPE, text=True, encoding="utf-8")
    except FileNotFoundError as err:
        raise MissingDependencyError(binary) from err

    writer = threading.Thread(target=_feed, args=(process.stdin, lines), daemon=True)
    writer.start()
    try:
        output = process.stdout.read()
    finally:
        process.stdout.close()
        status = process.wait()
        writer.join()

    if status == CANCELLED_EXIT_CODE:
        logger.info("Selection cancelled")
        return SelectorResult(cancelled=True)
    if status != 0:
        raise ExternalToolError(f"{binary} exited with status {status}", command=command, status=status, output=output.strip())

    identities = [clean_branch_name(line) for line in output.splitlines() if line.strip()]
    logger.info("Selected %d branches", len(identities))
    return SelectorResult(identities=identities)
