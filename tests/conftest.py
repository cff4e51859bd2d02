# tests/conftest.py
from __future__ import annotations

import json
import subprocess
from pathlib import Path
from types import SimpleNamespace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pytest

ENV_EXAMPLE = (
    "PORT=3000\n"
    "JWT_SECRET=change-this-in-production\n"
    "SESSION_SECRET=change-this-in-production\n"
)
MANIFEST = {"name": "velist", "version": "0.1.0", "scripts": {"dev": "bun run dev"}}


# -------------------------
# Rich console stand-in
# -------------------------
class _StatusCtx:
    def __init__(self, console, msg: str, spinner: Optional[str]):
        self.console = console
        self.msg = msg
        self.spinner = spinner

    def __enter__(self):
        self.console.events.append(("status_enter", self.msg, self.spinner))
        return self

    def __exit__(self, exc_type, exc, tb):
        self.console.events.append(("status_exit", self.msg, self.spinner))
        return False


class DummyConsole:
    """Records spinner usage instead of drawing it."""

    def __init__(self):
        self.events: List[tuple] = []

    def status(self, msg: str, spinner: Optional[str] = None):
        return _StatusCtx(self, msg, spinner)

    def print(self, obj, *_, **__):
        self.events.append(("print", str(obj)))


@pytest.fixture(autouse=True)
def dummy_console(monkeypatch) -> DummyConsole:
    import create_velist.ui as ui

    dc = DummyConsole()
    monkeypatch.setattr(ui, "console", dc, raising=True)
    return dc


# -------------------------
# subprocess.run recorder
# -------------------------
def write_template(path: Path, files: Dict[str, str], with_git: bool = True) -> None:
    """Materialize a fake cloned template (optionally with a .git dir)."""
    path.mkdir(parents=True)
    if with_git:
        (path / ".git").mkdir()
        (path / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    for rel, content in files.items():
        target = path / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")


class FakeRun:
    """Replacement for ``subprocess.run`` used by ``create_velist.runner``.

    - ``calls`` holds ``(argv, cwd)`` tuples in execution order.
    - ``fail(prefix)`` makes any command starting with ``prefix`` exit 1.
    - ``missing(prefix)`` makes it raise FileNotFoundError (binary absent).
    - ``git clone`` writes ``template_files`` into the destination.
    """

    def __init__(self):
        self.calls: List[Tuple[List[str], Optional[str]]] = []
        self._failing: List[Tuple[str, ...]] = []
        self._missing: List[Tuple[str, ...]] = []
        self.clone_with_git = True
        self.template_files: Dict[str, str] = {
            ".env.example": ENV_EXAMPLE,
            "package.json": json.dumps(MANIFEST, indent=2),
            "README.md": "# Velist\n",
        }

    def fail(self, *prefix: str) -> None:
        self._failing.append(tuple(prefix))

    def missing(self, *prefix: str) -> None:
        self._missing.append(tuple(prefix))

    @staticmethod
    def _matches(cmd: Sequence[str], prefixes: Iterable[Tuple[str, ...]]) -> bool:
        return any(tuple(cmd[: len(p)]) == p for p in prefixes)

    def commands(self) -> List[List[str]]:
        return [cmd for cmd, _ in self.calls]

    def __call__(self, cmd, cwd=None, **kwargs):
        cmd = list(cmd)
        self.calls.append((cmd, cwd))
        if self._matches(cmd, self._missing):
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if self._matches(cmd, self._failing):
            raise subprocess.CalledProcessError(1, cmd, output="", stderr="boom")
        if cmd[:2] == ["git", "clone"]:
            write_template(Path(cmd[-1]), self.template_files, self.clone_with_git)
        return SimpleNamespace(args=cmd, returncode=0, stdout="", stderr="")


@pytest.fixture
def fake_run(monkeypatch) -> FakeRun:
    import create_velist.runner as runner

    fr = FakeRun()
    monkeypatch.setattr(runner.subprocess, "run", fr, raising=True)
    return fr


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def no_prompts(monkeypatch):
    """Fail loudly if any questionary prompt is reached."""
    import create_velist.prompts as prompts

    def _boom(*_a, **_k):
        raise AssertionError("unexpected interactive prompt")

    monkeypatch.setattr(prompts.questionary, "text", _boom, raising=True)
    monkeypatch.setattr(prompts.questionary, "confirm", _boom, raising=True)
