"""
Chord set discovery: walk the sets directory and build every qualifying folder.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .builder import build_chord_set, walk_sorted
from .config import ConverterConfig
from .errors import SetsDirectoryError
from .models import ChordSet

__all__ = ['collect_chord_sets', 'is_chord_set_folder']

logger = logging.getLogger(__name__)


def is_chord_set_folder(path: Path, root: Path, config: ConverterConfig) -> bool:
    """A folder holds a chord set unless it is the root, too long a name, or excluded."""
    return (
        path != root
        and len(path.name) <= config.max_folder_name_length
        and path.name not in config.excluded_folder_names
    )


def collect_chord_sets(
    sets_dir: Union[str, Path],
    config: Optional[ConverterConfig] = None
) -> List[ChordSet]:
    """
    Build a chord set for each qualifying folder under sets_dir.

    Folders are visited depth-first in name order. Once config.max_sets sets
    are collected the remaining folders are skipped.

    Raises:
        SetsDirectoryError: If sets_dir is missing or can't be traversed
        ChordSetFolderError: If a folder fails to build
    """
    if config is None:
        config = ConverterConfig()

    root = Path(sets_dir)
    if not root.is_dir():
        raise SetsDirectoryError(f"sets directory not found: {root}")

    chord_sets = []

    try:
        for dirpath, _, _ in walk_sorted(root):
            if not is_chord_set_folder(dirpath, root, config):
                continue

            if len(chord_sets) >= config.max_sets:
                logger.info("Skipping set %s: limit of %d sets reached", dirpath.name, config.max_sets)
                continue

            logger.info("Processing set: %s", dirpath.name)
            chord_sets.append(build_chord_set(dirpath, dirpath.name, config))
    except OSError as e:
        raise SetsDirectoryError(f"directory traversal error in {root}: {e}") from e

    return chord_sets
