"""
Chord Sets Converter
Turns folders of chord MIDI files into Maschine user chord set JSON files
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .collector import collect_chord_sets
from .config import DEFAULT_MAX_SETS, ConverterConfig
from .emitter import emit_chord_sets, load_chord_set, output_file_name
from .models import ChordSet

__all__ = ['ChordSetsConverter']

logger = logging.getLogger(__name__)


class ChordSetsConverter:
    def __init__(
        self,
        sets_dir: Union[str, Path] = "./sets",
        output_dir: Optional[Union[str, Path]] = None,
        config: Optional[ConverterConfig] = None
    ):
        self.sets_dir = Path(sets_dir)
        # JSON files go next to the sets folder unless told otherwise
        self.output_dir = Path(output_dir) if output_dir is not None else self.sets_dir.resolve().parent
        self.config = config if config is not None else ConverterConfig()

    def run(self) -> Dict[str, Any]:
        """Collect every chord set folder and write the JSON files"""
        logger.info("Reading chord sets from %s", self.sets_dir)
        chord_sets = collect_chord_sets(self.sets_dir, self.config)
        written = emit_chord_sets(chord_sets, self.output_dir, self.config)

        return {
            "sets_dir": str(self.sets_dir),
            "output_dir": str(self.output_dir),
            "chord_sets": [chord_set.name for chord_set in chord_sets],
            "files": [str(path) for path in written],
        }

    def list_chord_sets(self) -> List[ChordSet]:
        """Load the chord set files already present in the output directory"""
        chord_sets = []
        # files may have been written with a higher limit
        last = max(self.config.max_sets, DEFAULT_MAX_SETS)
        for position in range(1, last + 1):
            path = self.output_dir / output_file_name(position, self.config)
            if path.exists():
                chord_sets.append(load_chord_set(path))
        return chord_sets
