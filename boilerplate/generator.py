"""Project generator: materialize a boilerplate at a project path."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from boilerplate.catalog import list_boilerplates
from boilerplate.copier import CopyResult, TreeCopier
from boilerplate.errors import NoSelectionMadeError, SourceNotFoundError
from boilerplate.selector import TemplateSelector
from boilerplate.shell import CommandRunner

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Outcome of a successful generation."""

    boilerplate: str
    source: Path
    project_dir: Path
    copy: CopyResult


class ProjectGenerator:
    """Creates new projects by copying boilerplate directories.

    Steps:
    - Resolve the boilerplate name (given, or chosen through the picker)
    - Check that the boilerplate directory exists
    - Copy it to the project path
    """

    def __init__(
        self,
        root: Path | str,
        select_cmd: str | None = None,
        runner: CommandRunner | None = None,
    ):
        """Initialize project generator.

        Args:
            root: Template root holding one directory per boilerplate
            select_cmd: Picker command used when no boilerplate is named
            runner: Command runner for the picker (default: ShellRunner)
        """
        self.root = Path(root)
        self.selector = TemplateSelector(self.root, select_cmd, runner=runner)

    def list_boilerplates(self) -> list[str]:
        """List boilerplate names under the root."""
        return list_boilerplates(self.root)

    def resolve(self, boilerplate: str | None = None) -> str:
        """Resolve the boilerplate name, running the picker if none is given."""
        name = self.selector.select(boilerplate)
        if not name:
            raise NoSelectionMadeError("No boilerplate selected")
        return name

    def source_for(self, boilerplate: str) -> Path:
        """Return the boilerplate's directory, checking that it exists."""
        source = self.root / boilerplate
        if not source.is_dir():
            raise SourceNotFoundError(f"Not exists directory '{source}'", path=source)
        return source

    def generate(self, project_dir: Path | str, boilerplate: str | None = None) -> GenerateResult:
        """Generate the project.

        Args:
            project_dir: Path of the project directory to create
            boilerplate: Boilerplate name (default: ask the picker)

        Returns:
            GenerateResult describing what was created

        Raises:
            BoilerplateError: On any failure. A copy aborted midway leaves
                a partially populated project directory behind.
        """
        project_dir = Path(project_dir)
        name = self.resolve(boilerplate)
        source = self.source_for(name)

        logger.info("Copying boilerplate '%s' from %s to %s", name, source, project_dir)
        copied = TreeCopier(source, project_dir).copy()
        logger.info("Created %s (%d entries)", project_dir, copied.total)

        return GenerateResult(
            boilerplate=name,
            source=source,
            project_dir=project_dir,
            copy=copied,
        )


def generate_project(
    root: Path | str,
    project_dir: Path | str,
    boilerplate: str | None = None,
    select_cmd: str | None = None,
) -> GenerateResult:
    """Materialize a boilerplate at a project path (convenience function)."""
    return ProjectGenerator(root, select_cmd).generate(project_dir, boilerplate)
