# create_velist/cli.py
"""
create-velist command-line interface.

Usage
-----
    create-velist [PROJECT_NAME] [--install/--no-install]
                  [--setup-db/--no-setup-db] [-y] [--template URL] [-v]

Anything not supplied on the command line is asked interactively. The run
then clones the template, re-initializes git, writes ``.env`` and the
manifest name, optionally installs dependencies and bootstraps the
database, and prints the remaining manual steps.

Exit status
-----------
0 on completion, including runs where optional stages only warned.
1 when the target exists, the template cannot be fetched, or an
unexpected error occurs.
"""

from __future__ import annotations

import dataclasses
import sys
from typing import Optional

import click

from create_velist import __version__, ui
from create_velist.constants import TEMPLATE_REPO
from create_velist.log_manager import get_logger, set_verbosity
from create_velist.prompts import resolve_options, resolve_project_name
from create_velist.runner import FatalStageError
from create_velist.scaffold import ScaffoldOptions, ensure_target_free, run_scaffold
from create_velist.summary import print_summary

__all__ = ["cli", "main"]

logger = get_logger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("project_name", required=False)
@click.option(
    "--install/--no-install",
    "install_deps",
    default=None,
    help="Install dependencies with bun (asked when omitted).",
)
@click.option(
    "--setup-db/--no-setup-db",
    "setup_database",
    default=None,
    help="Run database migrations and seeds (asked when omitted).",
)
@click.option(
    "-y",
    "--yes",
    "assume_yes",
    is_flag=True,
    help="Accept defaults for everything not given explicitly.",
)
@click.option(
    "--template",
    "template_url",
    default=TEMPLATE_REPO,
    show_default=True,
    metavar="URL",
    help="Git repository to use as the project template.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every external command.")
@click.version_option(__version__, prog_name="create-velist")
def cli(
    project_name: Optional[str],
    install_deps: Optional[bool],
    setup_database: Optional[bool],
    assume_yes: bool,
    template_url: str,
    verbose: bool,
) -> None:
    """⚡ Create a new Velist project from the official template."""
    set_verbosity(verbose)
    ui.print_banner()

    try:
        name = resolve_project_name(project_name, assume_yes=assume_yes)
        options = ScaffoldOptions.for_name(name, template_url=template_url)
        ensure_target_free(options)

        install_deps, setup_database = resolve_options(
            install_deps, setup_database, assume_yes=assume_yes
        )
        options = dataclasses.replace(
            options, install_deps=install_deps, setup_database=setup_database
        )
        logger.debug("Resolved options: %s", options)
        click.echo()

        result = run_scaffold(options)
    except FatalStageError as exc:
        ui.log_fatal(str(exc))
        sys.exit(1)
    except (click.Abort, click.ClickException):
        raise
    except Exception as exc:  # top-level guard: report, never traceback
        logger.debug("Unexpected error", exc_info=True)
        ui.log_fatal(f"Unexpected error: {exc}")
        sys.exit(1)

    print_summary(options, result)


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
