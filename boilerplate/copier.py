"""Tree copier: reproduce a boilerplate directory under a new project path.

Contents are copied byte for byte. Nothing inside the files is rendered or
substituted.

A failure aborts the walk where it happens. Whatever was already written
stays on disk, so a failed run leaves a partially populated destination.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
from dataclasses import dataclass, field
from pathlib import Path

from boilerplate.errors import (
    DestinationCreateFailedError,
    DirectoryCreateFailedError,
    DirectoryReadFailedError,
    FileCopyFailedError,
    FileCreateFailedError,
    FileOpenFailedError,
)

logger = logging.getLogger(__name__)

DESTINATION_MODE = 0o755


@dataclass
class CopyResult:
    """What a finished copy produced."""

    destination: Path
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    symlinks: list[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.directories) + len(self.files) + len(self.symlinks)


class TreeCopier:
    """Copies a source directory tree into a destination directory.

    Paths inside the destination are computed relative to the source root,
    never by trimming string prefixes, so ``/tpl/app`` and ``/tpl/app/`` behave
    the same and a sibling such as ``/tpl/app-extra`` can never leak in.

    Example:
        >>> copier = TreeCopier(Path("~/.rat/python-cli").expanduser(), Path("my-tool"))
        >>> result = copier.copy()
        >>> result.files
        [PosixPath('README.md'), PosixPath('src/main.py')]
    """

    def __init__(self, source: Path | str, destination: Path | str) -> None:
        self.source = Path(source)
        self.destination = Path(destination)
        # (destination dir, source mode), applied once the walk is done
        self._pending_modes: list[tuple[Path, int]] = []

    def copy(self) -> CopyResult:
        """Copy the whole tree.

        Returns:
            CopyResult listing created entries, relative to the destination

        Raises:
            DestinationCreateFailedError: The destination root cannot be created.
            DirectoryReadFailedError: A source directory cannot be listed.
            DirectoryCreateFailedError: A destination directory cannot be created.
            FileOpenFailedError: A source file cannot be opened.
            FileCreateFailedError: A destination file cannot be created.
            FileCopyFailedError: Copying a file's bytes or mode failed.
        """
        result = CopyResult(destination=self.destination)
        self._pending_modes = []

        self._create_destination()

        for dirpath, dirnames, filenames in os.walk(self.source, onerror=self._on_walk_error):
            current = Path(dirpath)
            rel_dir = current.relative_to(self.source)

            dirnames.sort()
            links = [name for name in dirnames if (current / name).is_symlink()]
            # Directory symlinks are recreated as links and not descended into
            dirnames[:] = [name for name in dirnames if name not in links]

            for name in dirnames:
                self._create_directory(current / name, rel_dir / name)
                result.directories.append(rel_dir / name)

            for name in sorted(filenames + links):
                src = current / name
                rel = rel_dir / name
                if src.is_symlink():
                    self._copy_symlink(src, rel)
                    result.symlinks.append(rel)
                else:
                    self._copy_file(src, rel)
                    result.files.append(rel)

        self._apply_directory_modes()

        logger.debug(
            "Copied %d directories, %d files, %d symlinks into %s",
            len(result.directories),
            len(result.files),
            len(result.symlinks),
            self.destination,
        )
        return result

    def _create_destination(self) -> None:
        try:
            os.mkdir(self.destination, DESTINATION_MODE)
        except FileExistsError as e:
            if not self.destination.is_dir():
                raise DestinationCreateFailedError(
                    f"Cannot create '{self.destination}': exists and is not a directory",
                    path=self.destination,
                ) from e
            logger.debug("Destination %s already exists, copying into it", self.destination)
        except OSError as e:
            raise DestinationCreateFailedError(
                f"Cannot create '{self.destination}': {e.strerror or e}",
                path=self.destination,
            ) from e

    def _on_walk_error(self, error: OSError) -> None:
        raise DirectoryReadFailedError(
            f"Cannot read directory '{error.filename}': {error.strerror or error}",
            path=error.filename,
        ) from error

    def _create_directory(self, src: Path, rel: Path) -> None:
        target = self.destination / rel
        try:
            mode = stat.S_IMODE(src.stat().st_mode)
            os.mkdir(target)
        except OSError as e:
            raise DirectoryCreateFailedError(
                f"Cannot create directory '{target}': {e.strerror or e}", path=target
            ) from e
        self._pending_modes.append((target, mode))
        logger.debug("Created directory %s", rel)

    def _copy_file(self, src: Path, rel: Path) -> None:
        target = self.destination / rel

        try:
            fsrc = open(src, "rb")
        except OSError as e:
            raise FileOpenFailedError(
                f"Cannot open '{src}': {e.strerror or e}", path=src
            ) from e

        with fsrc:
            try:
                fdst = open(target, "wb")
            except OSError as e:
                raise FileCreateFailedError(
                    f"Cannot create '{target}': {e.strerror or e}", path=target
                ) from e

            # close() flushes the last buffer
            try:
                with fdst:
                    shutil.copyfileobj(fsrc, fdst)
            except OSError as e:
                raise FileCopyFailedError(
                    f"Cannot copy '{src}' to '{target}': {e.strerror or e}",
                    path=target,
                ) from e

        try:
            shutil.copymode(src, target)
        except OSError as e:
            raise FileCopyFailedError(
                f"Cannot copy mode of '{src}' to '{target}': {e.strerror or e}",
                path=target,
            ) from e
        logger.debug("Copied %s", rel)

    def _copy_symlink(self, src: Path, rel: Path) -> None:
        target = self.destination / rel
        try:
            link_target = os.readlink(src)
        except OSError as e:
            raise FileOpenFailedError(
                f"Cannot read link '{src}': {e.strerror or e}", path=src
            ) from e
        try:
            os.symlink(link_target, target, target_is_directory=src.is_dir())
        except OSError as e:
            raise FileCreateFailedError(
                f"Cannot create link '{target}': {e.strerror or e}", path=target
            ) from e
        logger.debug("Linked %s -> %s", rel, link_target)

    def _apply_directory_modes(self) -> None:
        # Deepest first, so read-only parents are locked only after their children
        for target, mode in reversed(self._pending_modes):
            try:
                os.chmod(target, mode)
            except OSError as e:
                raise DirectoryCreateFailedError(
                    f"Cannot set mode of '{target}': {e.strerror or e}", path=target
                ) from e


def copy_tree(source: Path | str, destination: Path | str) -> CopyResult:
    """Copy a directory tree (convenience function).

    Args:
        source: Existing source directory
        destination: Directory to create and fill

    Returns:
        CopyResult
    """
    return TreeCopier(source, destination).copy()
