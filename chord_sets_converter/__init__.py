"""
Chord sets converter package.

Converts folders of chord MIDI files into Native Instruments Maschine user
chord set JSON files.
"""

from .config import ConverterConfig, load_config
from .models import Chord, ChordSet
from .midi import extract_notes, to_relative
from .naming import parse_chord_file_name
from .builder import build_chord_set
from .collector import collect_chord_sets
from .emitter import emit_chord_sets, load_chord_set
from .processor import ChordSetsConverter

__all__ = [
    'ConverterConfig',
    'load_config',
    'Chord',
    'ChordSet',
    'extract_notes',
    'to_relative',
    'parse_chord_file_name',
    'build_chord_set',
    'collect_chord_sets',
    'emit_chord_sets',
    'load_chord_set',
    'ChordSetsConverter',
]
