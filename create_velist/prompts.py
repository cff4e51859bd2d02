# create_velist/prompts.py
"""
Input resolution for create-velist.

Produces the project name and the two option flags, asking interactively
(via questionary) only for what the command line did not already supply.

Notes
-----
- Invalid names never get past the prompt: the validator re-prompts until
  the value is non-blank and does not collide with an existing path.
- Cancelling any prompt (Ctrl-C, ``ask()`` returning None) raises
  ``click.Abort`` so the CLI exits non-zero without a traceback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

import click
import questionary

from create_velist.constants import DEFAULT_PROJECT_NAME

__all__ = [
    "validate_project_name",
    "prompt_project_name",
    "prompt_confirm",
    "resolve_project_name",
    "resolve_options",
]


def validate_project_name(value: str, base_dir: Optional[Path] = None) -> Union[bool, str]:
    """Questionary-style validator for the project name.

    Parameters
    ----------
    value : str
        Raw text typed by the user.
    base_dir : Path, optional
        Directory the name is resolved against; defaults to the cwd.

    Returns
    -------
    bool or str
        True when valid, otherwise the message to show under the prompt.
    """
    name = value.strip()
    if not name:
        return "Project name is required"
    if Path(name).is_absolute():
        return "Project name must be a relative path"
    root = base_dir if base_dir is not None else Path.cwd()
    if (root / name).exists():
        return "Directory already exists"
    return True


def prompt_project_name(default: str = DEFAULT_PROJECT_NAME) -> str:
    """Ask for the project name until a valid one is given."""
    answer = questionary.text(
        "Project name:",
        default=default,
        validate=validate_project_name,
    ).ask()
    if answer is None:
        raise click.Abort()
    return answer.strip()


def prompt_confirm(message: str, default: bool = True) -> bool:
    answer = questionary.confirm(message, default=default).ask()
    if answer is None:
        raise click.Abort()
    return bool(answer)


def resolve_project_name(project_name: Optional[str], assume_yes: bool = False) -> str:
    """Return the positional name if given, else the default or a prompted one.

    An empty or blank positional name counts as not given. A positional
    name is not validated here; the directory guard handles collisions.
    """
    if project_name and project_name.strip():
        return project_name
    if assume_yes:
        return DEFAULT_PROJECT_NAME
    return prompt_project_name()


def resolve_options(
    install_deps: Optional[bool],
    setup_database: Optional[bool],
    assume_yes: bool = False,
) -> Tuple[bool, bool]:
    """Fill in whichever option flag the command line left unset.

    Parameters
    ----------
    install_deps, setup_database : bool, optional
        Values of ``--install/--no-install`` and ``--setup-db/--no-setup-db``;
        None means "ask".
    assume_yes : bool, default False
        Take the default (yes) instead of prompting.

    Returns
    -------
    tuple of bool
        ``(install_deps, setup_database)``.
    """
    if install_deps is None:
        install_deps = True if assume_yes else prompt_confirm("Install dependencies?")

    if setup_database is None:
        setup_database = (
            True if assume_yes else prompt_confirm("Setup database (migrate & seed)?")
        )

    return install_deps, setup_database
