"""
Tests for building one chord set from a folder.

Run with: pytest chord_sets_converter/test_builder.py -v
"""

import logging
import re

import pytest

from chord_sets_converter.builder import build_chord_set, walk_sorted
from chord_sets_converter.config import ConverterConfig
from chord_sets_converter.errors import ChordSetFolderError, MidiReadError

UUID_RE = re.compile(r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$')


def chord_names(chord_set):
    return [chord.name for chord in chord_set.chords]


class TestBuildChordSet:
    def test_empty_folder_gets_placeholders(self, tmp_path):
        folder = tmp_path / "Empty"
        folder.mkdir()

        chord_set = build_chord_set(folder, "Empty")

        assert len(chord_set.chords) == 12
        assert chord_names(chord_set) == [f"Chd {slot}" for slot in range(1, 13)]
        assert all(chord.notes == () for chord in chord_set.chords)

    def test_metadata(self, tmp_path):
        folder = tmp_path / "My Set"
        folder.mkdir()

        chord_set = build_chord_set(folder, "My Set")

        assert chord_set.name == "My Set"
        assert chord_set.type_id == "native-instruments-chord-set"
        assert chord_set.version == "1.0.0"
        assert UUID_RE.match(chord_set.uuid)

    def test_uuid_is_fresh_per_set(self, tmp_path):
        folder = tmp_path / "Set"
        folder.mkdir()

        assert build_chord_set(folder, "Set").uuid != build_chord_set(folder, "Set").uuid

    def test_files_fill_their_slots(self, sets_dir):
        chord_set = build_chord_set(sets_dir / "Pop", "Pop")

        assert chord_set.chords[0].name == "Cmaj"
        assert chord_set.chords[0].notes == (0, 4, 7)
        assert chord_set.chords[4].name == "Fmaj"
        assert chord_set.chords[4].notes == (5, 9, 12)
        untouched = [c for i, c in enumerate(chord_set.chords) if i not in (0, 4)]
        assert all(c.name.startswith("Chd ") and c.notes == () for c in untouched)

    def test_notes_sorted_ascending(self, tmp_path, midi_writer):
        midi_writer(tmp_path / "Set" / "3 Inv.mid", [(67, 90), (52, 90), (60, 90)])

        chord_set = build_chord_set(tmp_path / "Set", "Set")

        assert chord_set.chords[2].notes == (-8, 0, 7)

    def test_bad_names_and_out_of_range_slots_skipped(self, tmp_path, midi_writer):
        folder = tmp_path / "Set"
        midi_writer(folder / "0 Zero.mid", [(60, 100)])
        midi_writer(folder / "13 Thirteen.mid", [(60, 100)])
        midi_writer(folder / "99 Big.mid", [(60, 100)])
        midi_writer(folder / "2   .mid", [(60, 100)])
        midi_writer(folder / "Cmaj.mid", [(60, 100)])
        midi_writer(folder / "12 Last.mid", [(48, 100)])

        chord_set = build_chord_set(folder, "Set")

        assert chord_names(chord_set) == [f"Chd {slot}" for slot in range(1, 12)] + ["Last"]
        assert chord_set.chords[11].notes == (-12,)

    def test_skipped_names_do_not_read_midi(self, tmp_path):
        folder = tmp_path / "Set"
        folder.mkdir()
        (folder / "Broken.mid").write_bytes(b"garbage")
        (folder / "14 Broken.mid").write_bytes(b"garbage")

        chord_set = build_chord_set(folder, "Set")

        assert chord_names(chord_set) == [f"Chd {slot}" for slot in range(1, 13)]

    def test_only_mid_extension(self, tmp_path, midi_writer):
        folder = tmp_path / "Set"
        midi_writer(folder / "1 Upper.MID", [(60, 100)])
        midi_writer(folder / "2 Long.midi", [(60, 100)])
        (folder / "3 Text.txt").write_text("hello")

        chord_set = build_chord_set(folder, "Set")

        assert chord_names(chord_set)[:3] == ["Chd 1", "Chd 2", "Chd 3"]

    def test_nested_files_included(self, tmp_path, midi_writer):
        midi_writer(tmp_path / "Set" / "deeper" / "4 Deep.mid", [(62, 100)])

        chord_set = build_chord_set(tmp_path / "Set", "Set")

        assert chord_set.chords[3].name == "Deep"
        assert chord_set.chords[3].notes == (2,)

    def test_duplicate_slot_last_wins(self, tmp_path, midi_writer, caplog):
        folder = tmp_path / "Set"
        midi_writer(folder / "3 Cmaj.mid", [(60, 100), (64, 100), (67, 100)])
        midi_writer(folder / "03 Cmaj7.mid", [(60, 100), (64, 100), (67, 100), (71, 100)])

        with caplog.at_level(logging.WARNING, logger="chord_sets_converter.builder"):
            chord_set = build_chord_set(folder, "Set")

        # exactly one of the two files ends up in slot 3, the other is overwritten
        assert chord_set.chords[2].name in ("Cmaj", "Cmaj7")
        assert sum(c.name in ("Cmaj", "Cmaj7") for c in chord_set.chords) == 1
        assert "Slot 3" in caplog.text

    def test_duplicate_slot_order_is_by_name(self, tmp_path, midi_writer):
        folder = tmp_path / "Set"
        midi_writer(folder / "3 Cmaj.mid", [(60, 100)])
        midi_writer(folder / "03 Cmaj7.mid", [(71, 100)])

        chord_set = build_chord_set(folder, "Set")

        # "03 Cmaj7.mid" sorts before "3 Cmaj.mid"
        assert chord_set.chords[2].name == "Cmaj"

    def test_invalid_midi_aborts_folder(self, tmp_path):
        folder = tmp_path / "Set"
        folder.mkdir()
        (folder / "1 Broken.mid").write_bytes(b"garbage data")

        with pytest.raises(ChordSetFolderError) as excinfo:
            build_chord_set(folder, "Set")

        assert isinstance(excinfo.value.__cause__, MidiReadError)

    def test_invalid_midi_skipped_when_configured(self, tmp_path, midi_writer, caplog):
        folder = tmp_path / "Set"
        folder.mkdir()
        (folder / "1 Broken.mid").write_bytes(b"garbage data")
        midi_writer(folder / "2 Good.mid", [(60, 100)])
        config = ConverterConfig(skip_invalid_midi=True)

        with caplog.at_level(logging.WARNING, logger="chord_sets_converter.builder"):
            chord_set = build_chord_set(folder, "Set", config)

        assert chord_set.chords[0].name == "Chd 1"
        assert chord_set.chords[1].name == "Good"
        assert "1 Broken.mid" in caplog.text

    def test_custom_base_note_and_placeholder(self, tmp_path, midi_writer):
        midi_writer(tmp_path / "Set" / "1 C.mid", [(60, 100)])
        config = ConverterConfig(base_note=48, placeholder_name="Chord")

        chord_set = build_chord_set(tmp_path / "Set", "Set", config)

        assert chord_set.chords[0].notes == (12,)
        assert chord_set.chords[1].name == "Chord 2"

    def test_missing_folder_raises(self, tmp_path):
        with pytest.raises(ChordSetFolderError):
            build_chord_set(tmp_path / "nope", "nope")


class TestWalkSorted:
    def test_sorted_listing(self, tmp_path):
        for name in ("b", "a", "c"):
            (tmp_path / name).mkdir()
            (tmp_path / f"{name}.txt").write_text("")

        (top, dirnames, filenames), *rest = list(walk_sorted(tmp_path))

        assert top == tmp_path
        assert dirnames == ["a", "b", "c"]
        assert filenames == ["a.txt", "b.txt", "c.txt"]
        assert [path.name for path, _, _ in rest] == ["a", "b", "c"]
