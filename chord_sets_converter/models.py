"""
Chord and chord set records, in the shape Maschine imports them.
"""

import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .config import TYPE_ID, VERSION
from .errors import ChordSetFormatError

__all__ = ['Chord', 'ChordSet', 'generate_uuid', 'placeholder_chords', 'CHORDS_PER_SET', 'MIN_CHORD_NUMBER']

MIN_CHORD_NUMBER = 1
CHORDS_PER_SET = 12          # slots run from MIN_CHORD_NUMBER to CHORDS_PER_SET


def generate_uuid() -> str:
    """Random 128-bit identifier in 8-4-4-4-12 lowercase hex."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Chord:
    name: str
    notes: Tuple[int, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "notes": list(self.notes)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Chord':
        try:
            name = data["name"]
            notes = tuple(int(n) for n in data["notes"])
        except (KeyError, TypeError, ValueError) as e:
            raise ChordSetFormatError(f"invalid chord entry {data!r}: {e}") from e
        return cls(name=name, notes=notes)


@dataclass(frozen=True)
class ChordSet:
    """One importable chord set: exactly twelve chords, slot N at index N-1."""
    chords: Tuple[Chord, ...]
    name: str
    uuid: str
    type_id: str = TYPE_ID
    version: str = VERSION

    def __post_init__(self):
        if len(self.chords) != CHORDS_PER_SET:
            raise ChordSetFormatError(
                f"chord set {self.name!r} has {len(self.chords)} chords, expected {CHORDS_PER_SET}"
            )

    def to_dict(self) -> Dict[str, Any]:
        # key order is the order Maschine writes its own chord set files in
        return {
            "chords": [chord.to_dict() for chord in self.chords],
            "name": self.name,
            "typeId": self.type_id,
            "uuid": self.uuid,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChordSet':
        if not isinstance(data, dict):
            raise ChordSetFormatError(f"chord set document must be an object, got {type(data).__name__}")
        try:
            chords = tuple(Chord.from_dict(c) for c in data["chords"])
            return cls(
                chords=chords,
                name=data["name"],
                uuid=data["uuid"],
                type_id=data["typeId"],
                version=data["version"],
            )
        except (KeyError, TypeError) as e:
            raise ChordSetFormatError(f"invalid chord set document: missing or bad field {e}") from e


def placeholder_chords(base_name: str = "Chd", count: int = CHORDS_PER_SET) -> List[Chord]:
    """Default chords "Chd 1" .. "Chd 12" with no notes."""
    return [Chord(name=f"{base_name} {slot}") for slot in range(1, count + 1)]
