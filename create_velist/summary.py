# create_velist/summary.py
"""
Final summary for create-velist.

The follow-up commands are derived from what actually happened, not only
from what was requested: a failed ``bun install`` is listed exactly like a
declined one.
"""

from __future__ import annotations

from typing import List

import click

from create_velist.constants import (
    DEFAULT_CREDENTIALS,
    DEV_CMD,
    DOCS_URL,
    INSTALL_CMD,
    MIGRATE_CMD,
    SEED_CMD,
    format_command,
)
from create_velist.scaffold import ScaffoldOptions, ScaffoldResult

__all__ = ["next_steps", "print_summary"]


def next_steps(options: ScaffoldOptions, result: ScaffoldResult) -> List[str]:
    """Return the commands the user still has to run, in order.

    Parameters
    ----------
    options : ScaffoldOptions
        The resolved run options.
    result : ScaffoldResult
        Outcomes of the optional stages.

    Returns
    -------
    list of str
        ``cd <name>``, then ``bun install`` if dependencies are missing, the
        migrate/seed pair if dependencies are present but the database was
        not bootstrapped, and finally the dev server command.
    """
    steps = [f"cd {options.project_name}"]
    if not result.deps_installed:
        steps.append(format_command(INSTALL_CMD))
    elif not result.database_ready:
        steps.append(format_command(MIGRATE_CMD))
        steps.append(format_command(SEED_CMD))
    steps.append(format_command(DEV_CMD))
    return steps


def print_summary(options: ScaffoldOptions, result: ScaffoldResult) -> None:
    click.echo()
    click.secho("  ✓ Project created successfully!\n", fg="green", bold=True)

    click.secho("  Next steps:\n", bold=True)
    for step in next_steps(options, result):
        click.echo(f"    {step}")
    click.echo()

    click.secho("  Default credentials:", fg="bright_black")
    for label, value in DEFAULT_CREDENTIALS:
        click.secho(f"    {label}: {value}", fg="bright_black")
    click.echo()

    click.secho(f"  Documentation: {DOCS_URL}\n", fg="cyan")
