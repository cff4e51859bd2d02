# create_velist/constants.py
"""
Shared constants for the create-velist scaffolder.

Public API
----------
- TEMPLATE_REPO: Default template repository cloned into every new project.
- DEFAULT_PROJECT_NAME: Suggested name offered by the interactive prompt.
- ENV_EXAMPLE_FILE / ENV_FILE / MANIFEST_FILE: Files touched after cloning.
- SECRET_PLACEHOLDER / SECRET_LENGTH / SECRET_ALPHABET: JWT secret settings.
- INSTALL_CMD / MIGRATE_CMD / SEED_CMD / DEV_CMD: Package manager commands.
- DEFAULT_CREDENTIALS / DOCS_URL: Hints printed in the final summary.

Notes
-----
Commands are kept as argument lists (no ``shell=True``); use
``format_command`` to render them for humans.
"""

from __future__ import annotations

import string
from typing import Final, List, Sequence, Tuple

__all__ = [
    "TEMPLATE_REPO",
    "DEFAULT_PROJECT_NAME",
    "GIT_DIR",
    "ENV_EXAMPLE_FILE",
    "ENV_FILE",
    "MANIFEST_FILE",
    "SECRET_PLACEHOLDER",
    "SECRET_LENGTH",
    "SECRET_ALPHABET",
    "INITIAL_COMMIT_MESSAGE",
    "INSTALL_CMD",
    "MIGRATE_CMD",
    "SEED_CMD",
    "DEV_CMD",
    "DEFAULT_CREDENTIALS",
    "DOCS_URL",
    "format_command",
]

CommandList = List[str]

# ---------------------------------------------------------------------------
# Template source
# ---------------------------------------------------------------------------
TEMPLATE_REPO: Final[str] = "https://github.com/velist-framework/velist.git"
DEFAULT_PROJECT_NAME: Final[str] = "my-velist-app"
GIT_DIR: Final[str] = ".git"
INITIAL_COMMIT_MESSAGE: Final[str] = "Initial commit"

# ---------------------------------------------------------------------------
# Files materialized inside the new project
# ---------------------------------------------------------------------------
ENV_EXAMPLE_FILE: Final[str] = ".env.example"
ENV_FILE: Final[str] = ".env"
MANIFEST_FILE: Final[str] = "package.json"

# ---------------------------------------------------------------------------
# JWT secret
# ---------------------------------------------------------------------------
SECRET_PLACEHOLDER: Final[str] = "change-this-in-production"
SECRET_LENGTH: Final[int] = 32
SECRET_ALPHABET: Final[str] = (
    string.ascii_uppercase + string.ascii_lowercase + string.digits + "!@#$%^&*"
)

# ---------------------------------------------------------------------------
# Package manager (bun) commands run inside the project directory
# ---------------------------------------------------------------------------
INSTALL_CMD: Final[CommandList] = ["bun", "install"]
MIGRATE_CMD: Final[CommandList] = ["bun", "run", "db:migrate"]
SEED_CMD: Final[CommandList] = ["bun", "run", "db:seed"]
DEV_CMD: Final[CommandList] = ["bun", "run", "dev"]

# ---------------------------------------------------------------------------
# Summary hints
# ---------------------------------------------------------------------------
DEFAULT_CREDENTIALS: Final[Tuple[Tuple[str, str], ...]] = (
    ("Email", "admin@example.com"),
    ("Password", "password123"),
)
DOCS_URL: Final[str] = "https://velist.dev"


def format_command(cmd: Sequence[str]) -> str:
    """Render an argument list as the string a user would type."""
    return " ".join(str(part) for part in cmd)
