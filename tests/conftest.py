"""Pytest fixtures for the rat tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

import settings.config as config_module
from boilerplate.shell import CommandResult

RAT_ENV_VARS = ("RAT_ROOT", "RAT_SELECT_CMD", "RAT_FILTER", "RAT_LOG_LEVEL")


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Run every test with its own HOME, working directory and no RAT_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for name in RAT_ENV_VARS:
        # setenv first so that values loaded from .env files are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(work)

    config_module._config = None
    yield work
    config_module._config = None


# =============================================================================
# Template Fixtures
# =============================================================================


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Template root with three boilerplates.

    alpha/
      README.md
      src/main.py
      src/pkg/__init__.py
      docs/            (empty)
    beta/
      Makefile
    gamma/
      bin/run.sh       (executable)
    """
    root = tmp_path / "boilerplates"

    alpha = root / "alpha"
    (alpha / "src" / "pkg").mkdir(parents=True)
    (alpha / "docs").mkdir()
    (alpha / "README.md").write_text("# alpha\n", encoding="utf-8")
    (alpha / "src" / "main.py").write_text("print('hello')\n", encoding="utf-8")
    (alpha / "src" / "pkg" / "__init__.py").write_text("", encoding="utf-8")

    beta = root / "beta"
    beta.mkdir()
    (beta / "Makefile").write_text("all:\n\techo beta\n", encoding="utf-8")

    gamma = root / "gamma"
    (gamma / "bin").mkdir(parents=True)
    script = gamma / "bin" / "run.sh"
    script.write_text("#!/bin/sh\necho gamma\n", encoding="utf-8")
    script.chmod(0o755)

    return root


# =============================================================================
# Runner Fixtures
# =============================================================================


class FakeRunner:
    """CommandRunner double that records calls and returns a canned result."""

    def __init__(self, stdout: str = "", returncode: int = 0, exists: bool = True):
        self.stdout = stdout
        self.returncode = returncode
        self.found = exists
        self.calls: list[tuple[str, str]] = []

    def exists(self, command: str) -> bool:
        return self.found

    def run(self, command: str, input_text: str) -> CommandResult:
        self.calls.append((command, input_text))
        return CommandResult(returncode=self.returncode, stdout=self.stdout)


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner
