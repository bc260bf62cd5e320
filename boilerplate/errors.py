"""Error kinds raised by the boilerplate engine.

Every failure is terminal for the current invocation. The engine raises,
the CLI formats the message and decides the exit status.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Kind of engine failure."""

    ROOT_UNREADABLE = "RootUnreadable"
    EMPTY_CATALOG = "EmptyCatalog"
    SELECTOR_NOT_CONFIGURED = "SelectorNotConfigured"
    SELECTOR_COMMAND_FAILED = "SelectorCommandFailed"
    NO_SELECTION_MADE = "NoSelectionMade"
    SOURCE_NOT_FOUND = "SourceNotFound"
    DESTINATION_CREATE_FAILED = "DestinationCreateFailed"
    DIRECTORY_CREATE_FAILED = "DirectoryCreateFailed"
    DIRECTORY_READ_FAILED = "DirectoryReadFailed"
    FILE_OPEN_FAILED = "FileOpenFailed"
    FILE_CREATE_FAILED = "FileCreateFailed"
    FILE_COPY_FAILED = "FileCopyFailed"


class BoilerplateError(Exception):
    """Base class for all engine failures.

    Attributes:
        kind: Which failure this is.
        path: Filesystem path involved, if any.
    """

    kind: ErrorKind

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class RootUnreadableError(BoilerplateError):
    """Raised when the template root cannot be listed."""

    kind = ErrorKind.ROOT_UNREADABLE


class EmptyCatalogError(BoilerplateError):
    """Raised when the template root holds no templates."""

    kind = ErrorKind.EMPTY_CATALOG


class SelectorNotConfiguredError(BoilerplateError):
    """Raised when a selection is needed but no selector command is set."""

    kind = ErrorKind.SELECTOR_NOT_CONFIGURED


class SelectorCommandFailedError(BoilerplateError):
    """Raised when the selector command is missing, cannot start, or exits non-zero."""

    kind = ErrorKind.SELECTOR_COMMAND_FAILED

    def __init__(
        self,
        message: str,
        command: str,
        returncode: int | None = None,
    ) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(message)


class NoSelectionMadeError(BoilerplateError):
    """Raised when the picker exits without printing a choice."""

    kind = ErrorKind.NO_SELECTION_MADE


class SourceNotFoundError(BoilerplateError):
    kind = ErrorKind.SOURCE_NOT_FOUND


class DestinationCreateFailedError(BoilerplateError):
    kind = ErrorKind.DESTINATION_CREATE_FAILED


class DirectoryCreateFailedError(BoilerplateError):
    kind = ErrorKind.DIRECTORY_CREATE_FAILED


class DirectoryReadFailedError(BoilerplateError):
    kind = ErrorKind.DIRECTORY_READ_FAILED


class FileOpenFailedError(BoilerplateError):
    kind = ErrorKind.FILE_OPEN_FAILED


class FileCreateFailedError(BoilerplateError):
    kind = ErrorKind.FILE_CREATE_FAILED


class FileCopyFailedError(BoilerplateError):
    kind = ErrorKind.FILE_COPY_FAILED
