# create_velist/ui.py
"""
Console output helpers for create-velist.

Status lines are written with ``click.secho`` so they show up in
``CliRunner`` output; spinners use a shared Rich console.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import click
from rich.console import Console

__all__ = [
    "console",
    "print_banner",
    "log_ok",
    "log_warn",
    "log_fail",
    "log_tip",
    "log_fatal",
    "spinner",
]

console: Console = Console(highlight=False)


def print_banner() -> None:
    click.echo()
    click.secho("  ⚡ Velist", fg="cyan", bold=True)
    click.secho("  Features-first fullstack framework", fg="bright_black")
    click.echo()


def log_ok(msg: str) -> None:
    click.secho(f"✔ {msg}", fg="green")


def log_warn(msg: str) -> None:
    click.secho(f"⚠ {msg}", fg="yellow")


def log_fail(msg: str) -> None:
    click.secho(f"✖ {msg}", fg="red")


def log_tip(msg: str) -> None:
    click.secho(f"  {msg}", fg="yellow")


def log_fatal(msg: str) -> None:
    """Print a fatal error message to stderr, padded like the banner."""
    click.secho(f"\n  {msg}\n", fg="red", err=True)


@contextmanager
def spinner(message: str) -> Iterator[None]:
    """Show a transient spinner while the wrapped block runs."""
    with console.status(f"[cyan]{message}", spinner="dots"):
        yield
