"""
JSON output for chord sets.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .config import ConverterConfig
from .errors import ChordSetFormatError, ChordSetWriteError
from .models import ChordSet

__all__ = ['render_chord_set', 'output_file_name', 'emit_chord_sets', 'load_chord_set']

logger = logging.getLogger(__name__)

JSON_INDENT = 4


def render_chord_set(chord_set: ChordSet) -> str:
    """Chord set as an indented JSON document."""
    return json.dumps(chord_set.to_dict(), indent=JSON_INDENT, ensure_ascii=False)


def output_file_name(position: int, config: Optional[ConverterConfig] = None) -> str:
    """File name for the chord set at 1-based position."""
    if config is None:
        config = ConverterConfig()
    return config.output_file_pattern.format(position)


def emit_chord_sets(
    chord_sets: Sequence[ChordSet],
    output_dir: Union[str, Path],
    config: Optional[ConverterConfig] = None
) -> List[Path]:
    """
    Write each chord set to its own numbered JSON file.

    Existing files are overwritten. Files written before a failure are left
    in place.

    Args:
        chord_sets: Chord sets in output order
        output_dir: Directory to write into (created if missing)
        config: Converter settings (defaults if None)

    Returns:
        Paths of the written files, in order

    Raises:
        ChordSetWriteError: If a set can't be serialized or written
    """
    if config is None:
        config = ConverterConfig()

    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ChordSetWriteError(f"error creating output directory {output_dir}: {e}") from e

    written = []
    for i, chord_set in enumerate(chord_sets):
        try:
            json_data = render_chord_set(chord_set)
        except (TypeError, ValueError) as e:
            raise ChordSetWriteError(f"error serializing chord set {chord_set.name}: {e}") from e

        out_file = output_dir / output_file_name(i + 1, config)
        try:
            out_file.write_text(json_data, encoding='utf-8')
        except OSError as e:
            raise ChordSetWriteError(f"error writing JSON file {out_file}: {e}") from e

        logger.info("Generated file: %s", out_file)
        written.append(out_file)

    return written


def load_chord_set(path: Union[str, Path]) -> ChordSet:
    """
    Read a chord set JSON file back.

    Raises:
        ChordSetFormatError: If the file is not a valid chord set document
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ChordSetFormatError(f"can't read chord set {path}: {e}") from e

    return ChordSet.from_dict(data)
