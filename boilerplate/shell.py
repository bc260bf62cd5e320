"""Shell command execution for the template picker.

The picker is a user-configured command line such as ``peco`` or
``fzf --height 40%``. It runs through the platform shell so that it may use
pipes and arguments, reads the catalog on stdin, prints the choice on stdout,
and keeps the terminal's stderr for its interactive UI.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import sys
from dataclasses import dataclass
from typing import IO, Protocol

from boilerplate.errors import SelectorCommandFailedError

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a finished command."""

    returncode: int
    stdout: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Runs a command line with text on stdin and returns its captured stdout."""

    def exists(self, command: str) -> bool:
        ...

    def run(self, command: str, input_text: str) -> CommandResult:
        ...


def is_windows(platform: str | None = None) -> bool:
    return (platform or sys.platform).startswith("win")


def shell_argv(command: str, platform: str | None = None) -> list[str]:
    """Wrap a command line in the platform shell.

    Args:
        command: Command line, passed to the shell unparsed
        platform: ``sys.platform`` value to decide for (default: current)

    Returns:
        argv list for subprocess
    """
    if is_windows(platform):
        return ["cmd", "/c", command]
    return ["sh", "-c", command]


def leading_executable(command: str, platform: str | None = None) -> str:
    """Return the program name at the start of a command line."""
    try:
        parts = shlex.split(command, posix=not is_windows(platform))
    except ValueError:
        parts = command.split()
    if not parts:
        return ""
    if is_windows(platform):
        # non-POSIX shlex keeps the quotes around "C:\my tools\pick.exe"
        return parts[0].strip('"')
    return parts[0]


class ShellRunner:
    """Runs commands through ``sh -c`` (or ``cmd /c`` on Windows).

    Example:
        >>> runner = ShellRunner()
        >>> runner.run("head -n 1", "alpha\\nbeta").stdout
        'alpha\\n'
    """

    def __init__(
        self,
        platform: str | None = None,
        stderr: IO[str] | int | None = None,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the runner.

        Args:
            platform: ``sys.platform`` value selecting the shell (default: current)
            stderr: Where the command's stderr goes (default: inherited from this process)
            encoding: Text encoding of stdin and stdout. Undecodable bytes are
                carried as surrogates so names round-trip to the filesystem.
        """
        self.platform = platform or sys.platform
        self.stderr = stderr
        self.encoding = encoding

    def exists(self, command: str) -> bool:
        """Check that the command line's program is found on PATH."""
        program = leading_executable(command, self.platform)
        return bool(program) and shutil.which(program) is not None

    def run(self, command: str, input_text: str) -> CommandResult:
        """Run a command line and wait for it to exit.

        Args:
            command: Command line for the shell
            input_text: Text written to the command's stdin

        Returns:
            CommandResult with exit code and captured stdout

        Raises:
            SelectorCommandFailedError: If the shell cannot be started or the
                text cannot be encoded.
        """
        argv = shell_argv(command, self.platform)
        logger.debug("Running %s", argv)
        try:
            result = subprocess.run(
                argv,
                input=input_text,
                stdout=subprocess.PIPE,
                stderr=self.stderr,
                text=True,
                encoding=self.encoding,
                errors="surrogateescape",
                check=False,
            )
        except OSError as e:
            raise SelectorCommandFailedError(
                f"Cannot start '{command}': {e.strerror or e}", command=command
            ) from e
        except UnicodeError as e:
            raise SelectorCommandFailedError(
                f"Cannot exchange text with '{command}': {e}", command=command
            ) from e

        return CommandResult(returncode=result.returncode, stdout=result.stdout or "")
