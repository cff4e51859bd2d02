# create_velist/runner.py
"""
Sequential external-command stages for create-velist.

Every step of the scaffold that shells out (git, bun) is described by a
:class:`Stage`: an ordered list of argument lists, the messages to show on
success or failure, and whether a failure aborts the whole run. Stages are
executed one at a time by :func:`run_stage`; there is no scheduler and no
retry logic.

Output of external commands is captured so it never reaches the console.
With ``--verbose`` the captured stderr of a failing command is logged.

Notes
-----
- Commands are passed as lists to ``subprocess.run`` (never ``shell=True``).
- A missing executable (``FileNotFoundError``) is reported the same way as
  a non-zero exit status.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from create_velist import ui
from create_velist.constants import format_command
from create_velist.log_manager import get_logger

__all__ = [
    "CommandError",
    "FatalStageError",
    "Stage",
    "run_command",
    "run_stage",
]

logger = get_logger(__name__)

WARNING = "warning"
ERROR = "error"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class CommandError(Exception):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, cmd: Sequence[str], returncode: Optional[int], stderr: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            reason = "could not be started"
        else:
            reason = f"exited with status {returncode}"
        super().__init__(f"'{format_command(cmd)}' {reason}")


class FatalStageError(Exception):
    """Raised when a fatal stage fails; the run must stop.

    The message is the user-facing explanation printed before exiting.
    """


# ---------------------------------------------------------------------------
# Stage descriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Stage:
    """One step of the scaffold pipeline.

    Attributes
    ----------
    title : str
        Spinner text shown while the stage runs.
    commands : list of list of str
        Argument lists executed in order; the first failure stops the stage.
    success : str
        Message printed when every command succeeds.
    failure : str
        Message printed when a command fails.
    recovery : str, optional
        Follow-up hint. For fatal stages this becomes the abort message.
    fatal : bool, default False
        Abort the run on failure instead of continuing.
    failure_level : {"warning", "error"}
        Style of the failure line for non-fatal stages.
    cwd : Path, optional
        Working directory for every command of the stage.
    finalize : callable, optional
        Extra filesystem step run after the commands; an ``OSError`` from it
        counts as a stage failure.
    """

    title: str
    commands: List[List[str]]
    success: str
    failure: str
    recovery: Optional[str] = None
    fatal: bool = False
    failure_level: str = WARNING
    cwd: Optional[Path] = None
    finalize: Optional[Callable[[], None]] = field(default=None, compare=False)


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


def run_command(cmd: Sequence[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """Run one external command, capturing its output.

    Parameters
    ----------
    cmd : Sequence[str]
        Program and arguments.
    cwd : Path, optional
        Working directory; defaults to the current directory.

    Returns
    -------
    subprocess.CompletedProcess
        The completed process (exit status 0).

    Raises
    ------
    CommandError
        On a non-zero exit status or when the program cannot be started.
    """
    logger.debug("Running '%s' (cwd=%s)", format_command(cmd), cwd or ".")
    try:
        return subprocess.run(
            list(cmd),
            cwd=str(cwd) if cwd is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as exc:
        logger.debug("stderr of '%s':\n%s", format_command(cmd), (exc.stderr or "").strip())
        raise CommandError(cmd, exc.returncode, exc.stderr or "") from exc
    except OSError as exc:
        raise CommandError(cmd, None, str(exc)) from exc


def run_stage(stage: Stage) -> bool:
    """Execute ``stage`` and report its outcome.

    Returns
    -------
    bool
        True if every command (and ``finalize``) succeeded, False if a
        non-fatal stage failed.

    Raises
    ------
    FatalStageError
        If a fatal stage fails.
    """
    try:
        with ui.spinner(stage.title):
            for cmd in stage.commands:
                run_command(cmd, cwd=stage.cwd)
            if stage.finalize is not None:
                stage.finalize()
    except (CommandError, OSError) as exc:
        if stage.fatal:
            logger.info("%s (fatal): %s", stage.failure, exc)
            ui.log_fail(stage.failure)
            raise FatalStageError(stage.recovery or stage.failure) from exc

        logger.info("%s: %s", stage.failure, exc)
        if stage.failure_level == ERROR:
            ui.log_fail(stage.failure)
        else:
            ui.log_warn(stage.failure)
        if stage.recovery:
            ui.log_tip(stage.recovery)
        return False

    ui.log_ok(stage.success)
    return True
