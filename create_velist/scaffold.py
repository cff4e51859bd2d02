# create_velist/scaffold.py
"""
Project scaffolding pipeline for create-velist.

The pipeline is strictly linear:

1. Directory guard          (fatal)
2. Template fetch           (fatal)
3. Repository re-init      (warning)
4. Environment/manifest    (warning)
5. Dependency install      (optional, warning)
6. Database bootstrap      (optional, needs step 5 to succeed, warning)

Fatal steps raise :class:`~create_velist.runner.FatalStageError`; every other
step records its outcome on :class:`ScaffoldResult` so the summary can list
the commands the user still has to run.

Nothing is rolled back on failure: a failed clone or install leaves the
directory exactly as the failing command left it.
"""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from create_velist import ui
from create_velist.constants import (
    ENV_EXAMPLE_FILE,
    ENV_FILE,
    GIT_DIR,
    INITIAL_COMMIT_MESSAGE,
    INSTALL_CMD,
    MANIFEST_FILE,
    MIGRATE_CMD,
    SECRET_PLACEHOLDER,
    SEED_CMD,
    TEMPLATE_REPO,
    format_command,
)
from create_velist.log_manager import get_logger
from create_velist.runner import ERROR, FatalStageError, Stage, run_stage
from create_velist.tokens import random_string

__all__ = [
    "ScaffoldOptions",
    "ScaffoldResult",
    "ensure_target_free",
    "fetch_template",
    "reinit_repository",
    "write_env_file",
    "rename_manifest",
    "materialize_environment",
    "install_dependencies",
    "bootstrap_database",
    "run_scaffold",
]

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Run state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaffoldOptions:
    """Inputs of a single run, resolved before anything touches the disk."""

    project_name: str
    project_path: Path
    install_deps: bool = True
    setup_database: bool = True
    template_url: str = TEMPLATE_REPO

    @classmethod
    def for_name(
        cls,
        project_name: str,
        install_deps: bool = True,
        setup_database: bool = True,
        template_url: str = TEMPLATE_REPO,
        base_dir: Optional[Path] = None,
    ) -> "ScaffoldOptions":
        """Build options with ``project_path`` = ``base_dir`` (or cwd) / name."""
        root = base_dir if base_dir is not None else Path.cwd()
        return cls(
            project_name=project_name,
            project_path=(root / project_name).absolute(),
            install_deps=install_deps,
            setup_database=setup_database,
            template_url=template_url,
        )


@dataclass
class ScaffoldResult:
    """Outcome of every non-fatal stage."""

    git_initialized: bool = False
    env_configured: bool = False
    deps_installed: bool = False
    database_ready: bool = False


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def ensure_target_free(options: ScaffoldOptions) -> None:
    """Abort before any side effect if the name is absolute or the path exists."""
    if Path(options.project_name).is_absolute():
        raise FatalStageError(
            f'Error: Project name "{options.project_name}" must be a relative path'
        )
    if options.project_path.exists():
        raise FatalStageError(f'Error: Directory "{options.project_name}" already exists')


def _remove_git_metadata(git_dir: Path) -> None:
    if git_dir.exists():
        shutil.rmtree(git_dir)


def fetch_template(options: ScaffoldOptions) -> None:
    """Shallow-clone the template and drop its git metadata (fatal on failure)."""
    git_dir = options.project_path / GIT_DIR

    run_stage(
        Stage(
            title=f"Cloning Velist into {options.project_name}...",
            commands=[
                ["git", "clone", "--depth", "1", options.template_url, str(options.project_path)],
            ],
            success=f"Created {options.project_name}",
            failure="Failed to clone repository",
            recovery="Please check your internet connection and try again.",
            fatal=True,
            finalize=lambda: _remove_git_metadata(git_dir),
        )
    )


def reinit_repository(options: ScaffoldOptions) -> bool:
    """Start a fresh history with a single commit."""
    return run_stage(
        Stage(
            title="Initializing git repository...",
            commands=[
                ["git", "init"],
                ["git", "add", "."],
                ["git", "commit", "-m", INITIAL_COMMIT_MESSAGE],
            ],
            success="Git repository initialized",
            failure="Git initialization skipped",
            cwd=options.project_path,
        )
    )


def write_env_file(project_path: Path) -> Optional[str]:
    """Copy ``.env.example`` to ``.env`` and fill in a generated JWT secret.

    Only the first occurrence of the placeholder is replaced.

    Returns
    -------
    str or None
        The generated secret, or None when the template ships no
        ``.env.example`` (nothing is written in that case).
    """
    example = project_path / ENV_EXAMPLE_FILE
    if not example.exists():
        logger.debug("No %s in %s; skipping .env", ENV_EXAMPLE_FILE, project_path)
        return None

    env_path = project_path / ENV_FILE
    shutil.copyfile(example, env_path)

    secret = random_string()
    content = env_path.read_text(encoding="utf-8")
    env_path.write_text(content.replace(SECRET_PLACEHOLDER, secret, 1), encoding="utf-8")
    return secret


def rename_manifest(project_path: Path, project_name: str) -> None:
    """Set the ``name`` field of ``package.json`` to ``project_name``.

    Raises
    ------
    OSError
        If the manifest is missing or unreadable.
    ValueError
        If the manifest is not valid JSON.
    TypeError
        If the manifest is valid JSON but not an object.
    """
    manifest_path = project_path / MANIFEST_FILE
    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    if not isinstance(manifest, dict):
        raise TypeError(f"{MANIFEST_FILE} must contain a JSON object")
    manifest["name"] = project_name
    manifest_path.write_text(
        json.dumps(manifest, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )


def materialize_environment(options: ScaffoldOptions) -> bool:
    """Write ``.env`` and rename the manifest; failures are non-critical."""
    try:
        with ui.spinner("Setting up environment..."):
            write_env_file(options.project_path)
            rename_manifest(options.project_path, options.project_name)
    except (OSError, ValueError, TypeError) as exc:
        logger.info("Environment setup failed: %s", exc)
        ui.log_warn("Environment setup incomplete (non-critical)")
        return False

    ui.log_ok("Environment configured")
    return True


def install_dependencies(options: ScaffoldOptions) -> bool:
    return run_stage(
        Stage(
            title="Installing dependencies...",
            commands=[list(INSTALL_CMD)],
            success="Dependencies installed",
            failure="Failed to install dependencies",
            recovery=f'Run "{format_command(INSTALL_CMD)}" manually to complete setup.',
            failure_level=ERROR,
            cwd=options.project_path,
        )
    )


def bootstrap_database(options: ScaffoldOptions) -> bool:
    """Run migrations, then seeds. Both must succeed."""
    manual = f"{format_command(MIGRATE_CMD)} && {format_command(SEED_CMD)}"
    return run_stage(
        Stage(
            title="Setting up database...",
            commands=[list(MIGRATE_CMD), list(SEED_CMD)],
            success="Database ready",
            failure=f'Database setup incomplete (run "{manual}" manually)',
            cwd=options.project_path,
        )
    )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def run_scaffold(options: ScaffoldOptions) -> ScaffoldResult:
    """Run every stage in order and return the outcomes.

    Raises
    ------
    FatalStageError
        If the target exists or the template cannot be fetched.
    """
    ensure_target_free(options)

    result = ScaffoldResult()
    fetch_template(options)
    result.git_initialized = reinit_repository(options)
    result.env_configured = materialize_environment(options)

    if options.install_deps:
        result.deps_installed = install_dependencies(options)

    if options.setup_database and result.deps_installed:
        result.database_ready = bootstrap_database(options)
    elif options.setup_database:
        logger.debug("Skipping database setup: dependencies are not installed")

    logger.debug("Incomplete stages: %s", _skipped_stages(options, result) or "none")
    return result


def _skipped_stages(options: ScaffoldOptions, result: ScaffoldResult) -> List[str]:
    """Names of optional stages that did not complete, for logging."""
    skipped = []
    if not result.deps_installed:
        skipped.append("install" if options.install_deps else "install (declined)")
    if not result.database_ready:
        skipped.append("database" if options.setup_database else "database (declined)")
    return skipped
