"""
create-velist: scaffold a new Velist project.

Clones the Velist template, re-initializes git, prepares ``.env`` and the
manifest, and optionally installs dependencies and bootstraps the database.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from .cli import cli

__all__ = ["cli"]
