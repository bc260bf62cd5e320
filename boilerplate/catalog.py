"""Template catalog: the boilerplates available under a template root."""

from __future__ import annotations

import logging
from pathlib import Path

from boilerplate.errors import EmptyCatalogError, RootUnreadableError

logger = logging.getLogger(__name__)


def list_boilerplates(root: Path | str) -> list[str]:
    """List the boilerplate names under a template root.

    Every entry directly under ``root`` is a candidate boilerplate. Names
    come back sorted. A name that is not a directory fails later, when the
    generator checks the source.

    Args:
        root: Template root directory

    Returns:
        Boilerplate names, one per entry

    Raises:
        RootUnreadableError: If ``root`` is missing, not a directory, or unreadable.
        EmptyCatalogError: If ``root`` is empty.
    """
    root = Path(root)
    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise RootUnreadableError(
            f"Cannot read template root '{root}': {e.strerror or e}", path=root
        ) from e

    names = sorted(entry.name for entry in entries)
    logger.debug("Found %d boilerplates under %s", len(names), root)

    if not names:
        raise EmptyCatalogError(f"No boilerplates in '{root}'", path=root)

    return names
