"""Shared fixtures: tiny MIDI files and chord set folders built with mido."""

import mido
import pytest


def write_midi(path, events, extra_tracks=()):
    """
    Write a MIDI file whose first track plays (note, velocity) note_on events.

    extra_tracks holds more event lists, one per additional track.
    """
    midi_file = mido.MidiFile()
    for track_events in (events, *extra_tracks):
        track = mido.MidiTrack()
        for note, velocity in track_events:
            track.append(mido.Message('note_on', note=note, velocity=velocity, time=0))
        for note, _ in track_events:
            track.append(mido.Message('note_off', note=note, velocity=0, time=480))
        midi_file.tracks.append(track)

    path.parent.mkdir(parents=True, exist_ok=True)
    midi_file.save(str(path))
    return path


@pytest.fixture
def midi_writer():
    return write_midi


@pytest.fixture
def sets_dir(tmp_path):
    """
    A sets folder with two chord sets:

        sets/
          Pop/    1 Cmaj.mid, 5 Fmaj.mid, readme.txt
          Jazz/   2 Dm7.mid, 13 Extra.mid, Notes.mid
    """
    root = tmp_path / "sets"
    write_midi(root / "Pop" / "1 Cmaj.mid", [(60, 100), (64, 100), (67, 100)])
    write_midi(root / "Pop" / "5 Fmaj.mid", [(65, 90), (69, 90), (72, 90)])
    (root / "Pop" / "readme.txt").write_text("not a chord")
    write_midi(root / "Jazz" / "2 Dm7.mid", [(62, 80), (65, 80), (69, 80), (72, 80)])
    write_midi(root / "Jazz" / "13 Extra.mid", [(60, 80)])
    write_midi(root / "Jazz" / "Notes.mid", [(60, 80)])
    return root
