"""
MIDI File Operations Module

Reads the pitches of a chord out of a Standard MIDI File and converts them
to offsets from the reference note.
"""

import mido
from music21 import pitch
from pathlib import Path
from typing import Iterable, List, Union

from .errors import MidiReadError

__all__ = [
    'extract_notes',
    'to_relative',
    'note_names',
]

BASE_NOTE = 60  # C3 in Maschine numbering, C4 in music21's


def extract_notes(midi_path: Union[str, Path]) -> List[int]:
    """
    Read the distinct keys switched on anywhere in a MIDI file.

    Tracks are read in file order. A note_on with velocity 0 counts as a
    note-off and is ignored, and a key already seen is not recorded again.

    Args:
        midi_path: Path to the MIDI file

    Returns:
        Raw MIDI key numbers (0-127) in order of first occurrence

    Raises:
        MidiReadError: If the file cannot be opened or parsed
    """
    try:
        midi_file = mido.MidiFile(str(midi_path))
    except (OSError, EOFError, ValueError, KeyError, IndexError) as e:
        raise MidiReadError(midi_path, e) from e

    notes = []
    seen = set()

    for track in midi_file.tracks:
        for msg in track:
            if msg.type == 'note_on' and msg.velocity > 0 and msg.note not in seen:
                seen.add(msg.note)
                notes.append(msg.note)

    return notes


def to_relative(keys: Iterable[int], base_note: int = BASE_NOTE) -> List[int]:
    """Express MIDI keys as signed semitone offsets from base_note."""
    return [key - base_note for key in keys]


def note_names(offsets: Iterable[int], base_note: int = BASE_NOTE) -> List[str]:
    """
    Pitch names for chord offsets, numbered the way Maschine shows them.

    music21 calls key 60 "C4"; Maschine calls it "C3", so octaves are shifted
    down by one.
    """
    names = []
    for offset in offsets:
        p = pitch.Pitch(midi=base_note + offset)
        names.append(f"{p.name.replace('-', 'b')}{p.octave - 1}")
    return names
