"""Boilerplate engine for rat.

Creates new projects from boilerplate directories:
- Lists the boilerplates under a template root
- Picks one through an external interactive filter (peco, fzf, ...)
- Copies its directory tree to the project path
"""

from .catalog import list_boilerplates
from .copier import CopyResult, TreeCopier, copy_tree
from .errors import (
    BoilerplateError,
    DestinationCreateFailedError,
    DirectoryCreateFailedError,
    DirectoryReadFailedError,
    EmptyCatalogError,
    ErrorKind,
    FileCopyFailedError,
    FileCreateFailedError,
    FileOpenFailedError,
    NoSelectionMadeError,
    RootUnreadableError,
    SelectorCommandFailedError,
    SelectorNotConfiguredError,
    SourceNotFoundError,
)
from .generator import GenerateResult, ProjectGenerator, generate_project
from .selector import TemplateSelector, select_boilerplate
from .shell import CommandResult, CommandRunner, ShellRunner, shell_argv

__all__ = [
    # Catalog
    "list_boilerplates",
    # Selector
    "TemplateSelector",
    "select_boilerplate",
    "CommandRunner",
    "CommandResult",
    "ShellRunner",
    "shell_argv",
    # Copier
    "TreeCopier",
    "CopyResult",
    "copy_tree",
    # Generator
    "ProjectGenerator",
    "GenerateResult",
    "generate_project",
    # Errors
    "ErrorKind",
    "BoilerplateError",
    "RootUnreadableError",
    "EmptyCatalogError",
    "SelectorNotConfiguredError",
    "SelectorCommandFailedError",
    "NoSelectionMadeError",
    "SourceNotFoundError",
    "DestinationCreateFailedError",
    "DirectoryCreateFailedError",
    "DirectoryReadFailedError",
    "FileOpenFailedError",
    "FileCreateFailedError",
    "FileCopyFailedError",
]
