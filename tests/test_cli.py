"""Tests for the rat command line."""

import os
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli.rat import __version__
from cli.rat.cli import app

posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="needs a POSIX shell")
linux_only = pytest.mark.skipif(
    not sys.platform.startswith("linux"), reason="needs byte-string file names"
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def rat_root(template_root: Path, monkeypatch) -> Path:
    monkeypatch.setenv("RAT_ROOT", str(template_root))
    return template_root


def test_version(runner: CliRunner):
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"rat version {__version__}" in result.output


# =============================================================================
# rat list
# =============================================================================


class TestList:
    """rat list."""

    def test_prints_one_name_per_line(self, runner: CliRunner, rat_root: Path):
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["alpha", "beta", "gamma"]

    def test_root_option(self, runner: CliRunner, template_root: Path):
        result = runner.invoke(app, ["list", "--root", str(template_root)])

        assert result.exit_code == 0
        assert "beta" in result.output.splitlines()

    def test_missing_root_is_fatal(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(app, ["list", "--root", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "fatal:" in result.output
        assert "Cannot read template root" in result.output

    @linux_only
    def test_undecodable_name_is_printed(self, runner: CliRunner, rat_root: Path):
        (rat_root / os.fsdecode(b"caf\xe9")).mkdir()

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0, result.output
        assert "caf\ufffd" in result.output.splitlines()

    def test_empty_root_is_fatal(self, runner: CliRunner, tmp_path: Path):
        empty = tmp_path / "empty"
        empty.mkdir()

        result = runner.invoke(app, ["list", "--root", str(empty)])

        assert result.exit_code == 1
        assert "No boilerplates in" in result.output


# =============================================================================
# rat new
# =============================================================================


class TestNew:
    """rat new."""

    def test_named_boilerplate(self, runner: CliRunner, rat_root: Path, tmp_path: Path):
        project = tmp_path / "my-api"

        result = runner.invoke(app, ["new", "beta", str(project)])

        assert result.exit_code == 0, result.output
        assert (project / "Makefile").read_text(encoding="utf-8") == "all:\n\techo beta\n"
        assert "Created" in result.output

    def test_project_path_is_expanded(self, runner: CliRunner, rat_root: Path, monkeypatch):
        monkeypatch.setenv("PROJECTS", str(rat_root.parent / "projects"))
        (rat_root.parent / "projects").mkdir()

        result = runner.invoke(app, ["new", "alpha", "$PROJECTS/expanded"])

        assert result.exit_code == 0, result.output
        assert (rat_root.parent / "projects" / "expanded" / "README.md").exists()

    @posix_only
    def test_picker_from_option(self, runner: CliRunner, rat_root: Path, tmp_path: Path):
        project = tmp_path / "picked"

        result = runner.invoke(app, ["new", str(project), "--filter", "head -n 1"])

        assert result.exit_code == 0, result.output
        assert (project / "README.md").read_text(encoding="utf-8") == "# alpha\n"

    @posix_only
    def test_picker_from_environment(
        self, runner: CliRunner, rat_root: Path, tmp_path: Path, monkeypatch
    ):
        monkeypatch.setenv("RAT_SELECT_CMD", "grep beta")
        project = tmp_path / "picked"

        result = runner.invoke(app, ["new", str(project)])

        assert result.exit_code == 0, result.output
        assert (project / "Makefile").exists()

    def test_picker_not_configured(self, runner: CliRunner, rat_root: Path, tmp_path: Path):
        result = runner.invoke(app, ["new", str(tmp_path / "p")])

        assert result.exit_code == 1
        assert "fatal:" in result.output
        assert "RAT_SELECT_CMD" in result.output
        assert not (tmp_path / "p").exists()

    def test_unknown_boilerplate(self, runner: CliRunner, rat_root: Path, tmp_path: Path):
        result = runner.invoke(app, ["new", "delta", str(tmp_path / "p")])

        assert result.exit_code == 1
        assert "Not exists directory" in result.output

    @posix_only
    def test_picker_printing_undecodable_bytes(
        self, runner: CliRunner, rat_root: Path, tmp_path: Path
    ):
        result = runner.invoke(
            app, ["new", str(tmp_path / "p"), "--filter", r"printf '\377\n'"]
        )

        assert result.exit_code == 1
        assert "fatal:" in result.output
        assert "Not exists directory" in result.output
        assert not (tmp_path / "p").exists()

    def test_too_many_arguments(self, runner: CliRunner, rat_root: Path):
        result = runner.invoke(app, ["new", "alpha", "one", "two"])

        assert result.exit_code == 1
        assert "Too many arguments" in result.output

    def test_destination_parent_missing(self, runner: CliRunner, rat_root: Path, tmp_path: Path):
        result = runner.invoke(app, ["new", "alpha", str(tmp_path / "no" / "such" / "dir")])

        assert result.exit_code == 1
        assert "Cannot create" in result.output

    def test_empty_root_setting(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(app, ["new", "alpha", str(tmp_path / "p"), "--root", ""])

        assert result.exit_code == 1
        assert "RAT_ROOT" in result.output


# =============================================================================
# rat config
# =============================================================================


class TestConfigCommands:
    """rat config show / init."""

    def test_init_writes_default_file(self, runner: CliRunner, isolated_env: Path):
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        text = (isolated_env / "rat.toml").read_text(encoding="utf-8")
        assert "[templates]" in text
        assert 'select_cmd = "peco"' in text

    def test_init_refuses_to_overwrite(self, runner: CliRunner, isolated_env: Path):
        (isolated_env / "rat.toml").write_text("# mine\n", encoding="utf-8")

        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 1
        assert (isolated_env / "rat.toml").read_text(encoding="utf-8") == "# mine\n"

    def test_init_force(self, runner: CliRunner, isolated_env: Path):
        (isolated_env / "rat.toml").write_text("# mine\n", encoding="utf-8")

        result = runner.invoke(app, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert "[templates]" in (isolated_env / "rat.toml").read_text(encoding="utf-8")

    def test_show(self, runner: CliRunner, monkeypatch):
        monkeypatch.setenv("RAT_SELECT_CMD", "fzf")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "templates.select_cmd" in result.output
        assert "fzf" in result.output

    def test_broken_config_file_is_fatal(self, runner: CliRunner, isolated_env: Path):
        (isolated_env / "rat.toml").write_text("[templates\n", encoding="utf-8")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "fatal:" in result.output
