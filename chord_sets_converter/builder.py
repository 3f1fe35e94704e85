"""
Chord set assembly: one folder of chord MIDI files -> one ChordSet.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from .config import ConverterConfig
from .errors import ChordFileNameError, ChordSetFolderError, MidiReadError
from .midi import extract_notes, to_relative
from .models import Chord, ChordSet, generate_uuid, placeholder_chords
from .naming import MIDI_EXTENSION, is_valid_chord_slot, parse_chord_file_name

__all__ = ['build_chord_set', 'walk_sorted']

logger = logging.getLogger(__name__)


def _raise(error: OSError):
    raise error


def walk_sorted(root: Union[str, Path]) -> Iterator[Tuple[Path, List[str], List[str]]]:
    """
    os.walk with every directory listing sorted by name.

    The files of a directory come before anything in its subdirectories, so
    the visiting order is the same on every platform. Listing errors are
    raised instead of being ignored.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        filenames.sort()
        yield Path(dirpath), dirnames, filenames


def build_chord_set(
    folder_path: Union[str, Path],
    folder_name: str,
    config: Optional[ConverterConfig] = None
) -> ChordSet:
    """
    Build a chord set from the MIDI files under a folder.

    Every "<slot> <name>.mid" file below folder_path (nested folders included)
    fills slot <slot>. Badly named files and slots outside 1-12 are skipped;
    slots nobody fills keep their "Chd N" placeholder. When two files target
    the same slot the one visited last wins.

    Args:
        folder_path: Folder to scan
        folder_name: Name given to the chord set
        config: Converter settings (defaults if None)

    Returns:
        ChordSet with exactly twelve chords

    Raises:
        ChordSetFolderError: If the folder can't be listed, or a MIDI file
            can't be read and config.skip_invalid_midi is off
    """
    if config is None:
        config = ConverterConfig()

    chords = placeholder_chords(config.placeholder_name)
    sources = {}

    try:
        for dirpath, _, filenames in walk_sorted(folder_path):
            for file_name in filenames:
                if not file_name.endswith(MIDI_EXTENSION):
                    continue

                result = _read_chord_file(dirpath / file_name, config)
                if result is None:
                    continue

                slot, chord = result
                if slot in sources:
                    logger.warning(
                        "Slot %d of set %s: %s replaces %s",
                        slot, folder_name, file_name, sources[slot]
                    )
                sources[slot] = file_name
                chords[slot - 1] = chord
    except (OSError, MidiReadError) as e:
        raise ChordSetFolderError(folder_path, e) from e

    logger.debug("Set %s: %d of %d slots filled", folder_name, len(sources), len(chords))

    return ChordSet(
        chords=tuple(chords),
        name=folder_name,
        uuid=generate_uuid(),
        type_id=config.type_id,
        version=config.version,
    )


def _read_chord_file(path: Path, config: ConverterConfig) -> Optional[Tuple[int, Chord]]:
    """Slot and chord for one file, or None if the file should be skipped."""
    try:
        slot, name = parse_chord_file_name(path.name)
    except ChordFileNameError as e:
        logger.debug("Skipping %s: %s", path, e)
        return None

    if not is_valid_chord_slot(slot, name):
        logger.debug("Skipping %s: slot %d out of range or empty chord name", path, slot)
        return None

    try:
        keys = extract_notes(path)
    except MidiReadError as e:
        if not config.skip_invalid_midi:
            raise
        logger.warning("Skipping unreadable MIDI file: %s", e)
        return None

    notes = sorted(to_relative(keys, config.base_note))
    return slot, Chord(name=name, notes=tuple(notes))
