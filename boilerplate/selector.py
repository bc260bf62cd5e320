"""Template selection: explicit name or interactive picker."""

from __future__ import annotations

import logging
from pathlib import Path

from boilerplate.catalog import list_boilerplates
from boilerplate.errors import (
    NoSelectionMadeError,
    SelectorCommandFailedError,
    SelectorNotConfiguredError,
)
from boilerplate.shell import CommandRunner, ShellRunner

logger = logging.getLogger(__name__)


class TemplateSelector:
    """Resolves which boilerplate to use.

    A name given by the caller is used as is. Otherwise the catalog is piped,
    one name per line, into the configured picker command and the line it
    prints back is the choice.

    Example:
        >>> selector = TemplateSelector(Path("~/.rat").expanduser(), "peco")
        >>> selector.select("python-cli")
        'python-cli'
        >>> selector.select()  # opens peco
    """

    def __init__(
        self,
        root: Path | str,
        select_cmd: str | None = None,
        runner: CommandRunner | None = None,
    ):
        """
        Args:
            root: Template root directory
            select_cmd: Picker command line (empty or None = not configured)
            runner: Command runner (default: ShellRunner)
        """
        self.root = Path(root)
        self.select_cmd = select_cmd or ""
        self.runner = runner or ShellRunner()

    def select(self, name: str | None = None) -> str:
        """Resolve a boilerplate name.

        Args:
            name: Name supplied by the caller, if any

        Returns:
            The boilerplate name

        Raises:
            SelectorNotConfiguredError: No name given and no picker configured.
            RootUnreadableError: The catalog cannot be listed.
            EmptyCatalogError: The catalog is empty.
            SelectorCommandFailedError: The picker is missing, cannot start or fails.
            NoSelectionMadeError: The picker printed nothing.
        """
        if name:
            return name

        if not self.select_cmd:
            raise SelectorNotConfiguredError(
                "No selector command configured. "
                "Set 'RAT_SELECT_CMD' or pass a boilerplate name."
            )

        names = list_boilerplates(self.root)
        output = self._run_picker("\n".join(names))

        if not output:
            raise NoSelectionMadeError("No boilerplate selected")

        if output.endswith("\n"):
            output = output[:-1]
        logger.debug("Picker chose %r", output)
        return output

    def _run_picker(self, catalog_text: str) -> str:
        """Run the picker over the catalog text and return its raw stdout."""
        command = self.select_cmd
        if not self.runner.exists(command):
            raise SelectorCommandFailedError(
                f"Command not found: '{command}'", command=command
            )

        result = self.runner.run(command, catalog_text)
        if not result.success:
            raise SelectorCommandFailedError(
                f"Selector command '{command}' exited with status {result.returncode}",
                command=command,
                returncode=result.returncode,
            )
        return result.stdout


def select_boilerplate(
    root: Path | str,
    name: str | None = None,
    select_cmd: str | None = None,
) -> str:
    """Resolve a boilerplate name (convenience function)."""
    return TemplateSelector(root, select_cmd).select(name)
