"""Tests for create_velist.summary."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_velist import summary
from create_velist.scaffold import ScaffoldOptions, ScaffoldResult


def _opts(install: bool, db: bool) -> ScaffoldOptions:
    return ScaffoldOptions.for_name(
        "demo-app", install_deps=install, setup_database=db, base_dir=Path("/tmp")
    )


@pytest.mark.parametrize(
    "install, db, result, expected",
    [
        # nothing requested
        (False, False, ScaffoldResult(), ["bun install"]),
        # database requested but dependencies were not installed
        (False, True, ScaffoldResult(), ["bun install"]),
        # install failed: only the install step is surfaced
        (True, True, ScaffoldResult(), ["bun install"]),
        # dependencies in place, database declined
        (True, False, ScaffoldResult(deps_installed=True),
         ["bun run db:migrate", "bun run db:seed"]),
        # dependencies in place, database failed
        (True, True, ScaffoldResult(deps_installed=True),
         ["bun run db:migrate", "bun run db:seed"]),
        # everything done
        (True, True, ScaffoldResult(deps_installed=True, database_ready=True), []),
    ],
)
def test_next_steps(install, db, result, expected):
    steps = summary.next_steps(_opts(install, db), result)
    assert steps == ["cd demo-app", *expected, "bun run dev"]


def test_print_summary_includes_hints(capsys):
    summary.print_summary(_opts(True, True), ScaffoldResult(deps_installed=True, database_ready=True))
    out = capsys.readouterr().out
    assert "Project created successfully!" in out
    assert "Next steps:" in out
    assert "    cd demo-app" in out
    assert "    bun run dev" in out
    assert "Email: admin@example.com" in out
    assert "Password: password123" in out
    assert "Documentation: https://velist.dev" in out
    assert "bun install" not in out
