#!/usr/bin/env python3
"""
Command line entry point for the chord sets converter
"""

import argparse
import logging
import sys

from .config import load_config
from .errors import ConverterError
from .midi import note_names
from .processor import ChordSetsConverter


def build_parser():
    parser = argparse.ArgumentParser(
        description='Convert folders of chord MIDI files into Maschine user chord sets'
    )
    parser.add_argument('--sets-dir', default='./sets', help='Folder containing one subfolder per chord set')
    parser.add_argument('--output-dir', help='Where to write the JSON files (default: parent of --sets-dir)')
    parser.add_argument('--config', help='YAML configuration file')
    parser.add_argument('--max-sets', type=int, help='Maximum number of chord sets to convert')
    parser.add_argument('--skip-invalid-midi', action='store_true', default=None,
                        help='Skip unreadable MIDI files instead of failing the set')
    parser.add_argument('--list', action='store_true', help='List the chord sets already written')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging')
    return parser


def print_chord_sets(chord_sets, base_note):
    print("🎼 Chord Sets")
    print("=" * 40)

    for position, chord_set in enumerate(chord_sets, start=1):
        print(f"🎵 {position:02d} {chord_set.name} ({chord_set.uuid})")
        for slot, chord in enumerate(chord_set.chords, start=1):
            notes = " ".join(note_names(chord.notes, base_note)) or "-"
            print(f"   {slot:2d}. {chord.name}: {notes}")
        print()


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        config = load_config(args.config).with_overrides(
            max_sets=args.max_sets,
            skip_invalid_midi=args.skip_invalid_midi,
        )
        converter = ChordSetsConverter(args.sets_dir, args.output_dir, config)

        if args.list:
            print_chord_sets(converter.list_chord_sets(), config.base_note)
            return 0

        print("🎼 Maschine Chord Sets Converter")
        print("=" * 40)
        summary = converter.run()
    except ConverterError as e:
        logging.getLogger(__name__).error("%s", e)
        return 1

    print(f"\n✅ Converted {len(summary['chord_sets'])} chord sets")
    for name, path in zip(summary['chord_sets'], summary['files']):
        print(f"   - {name}: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
