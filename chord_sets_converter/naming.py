"""Chord file names: "1 Cmin.mid", "12 Amin9.mid"."""

import re
from typing import Tuple

from .errors import ChordFileNameError
from .models import CHORDS_PER_SET, MIN_CHORD_NUMBER

__all__ = ['parse_chord_file_name', 'is_valid_chord_slot', 'MIDI_EXTENSION']

MIDI_EXTENSION = '.mid'

CHORD_FILE_NAME_RE = re.compile(r'([0-9]{1,2}) (.+?)\.mid')


def parse_chord_file_name(file_name: str) -> Tuple[int, str]:
    """
    Split a chord file name into its slot number and chord name.

    Raises:
        ChordFileNameError: If the name is not "<1-2 digits> <label>.mid"
    """
    match = CHORD_FILE_NAME_RE.fullmatch(file_name)
    if match is None:
        raise ChordFileNameError(file_name)

    return int(match.group(1)), match.group(2).strip()


def is_valid_chord_slot(slot: int, name: str) -> bool:
    return MIN_CHORD_NUMBER <= slot <= CHORDS_PER_SET and name != ""
