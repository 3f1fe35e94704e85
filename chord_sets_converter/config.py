"""
Configuration for the chord sets converter.

Defaults match what the Maschine chord set importer expects; a YAML file can
override any of them.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Dict, Optional, Tuple, Union
import yaml

from .errors import ConfigError

__all__ = ['ConverterConfig', 'load_config', 'TYPE_ID', 'VERSION', 'DEFAULT_MAX_SETS']


TYPE_ID = "native-instruments-chord-set"
VERSION = "1.0.0"
DEFAULT_MAX_SETS = 16               # Maschine holds at most 16 user chord sets

_INT_FIELDS = ('base_note', 'max_sets', 'max_folder_name_length')
_BOOL_FIELDS = ('skip_invalid_midi',)


@dataclass(frozen=True)
class ConverterConfig:
    """Settings shared by every stage of the conversion."""
    base_note: int = 60                 # C3 in Maschine numbering
    max_sets: int = DEFAULT_MAX_SETS
    max_folder_name_length: int = 10
    excluded_folder_names: Tuple[str, ...] = ("sets",)
    placeholder_name: str = "Chd"
    type_id: str = TYPE_ID
    version: str = VERSION
    output_file_pattern: str = "user_chord_set_{:02d}.json"
    skip_invalid_midi: bool = False

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _INT_FIELDS:
                valid = isinstance(value, int) and not isinstance(value, bool)
            elif f.name in _BOOL_FIELDS:
                valid = isinstance(value, bool)
            elif f.name == 'excluded_folder_names':
                valid = isinstance(value, tuple) and all(isinstance(n, str) for n in value)
            else:
                valid = isinstance(value, str)
            if not valid:
                raise ConfigError(f"invalid value for {f.name}: {value!r}")

        if self.max_sets < 0:
            raise ConfigError(f"max_sets must not be negative: {self.max_sets}")
        if not 0 <= self.base_note <= 127:
            raise ConfigError(f"base_note must be a MIDI key (0-127): {self.base_note}")
        if self.max_folder_name_length < 1:
            raise ConfigError(
                f"max_folder_name_length must be positive: {self.max_folder_name_length}"
            )
        try:
            distinct = self.output_file_pattern.format(1) != self.output_file_pattern.format(2)
        except (KeyError, IndexError, ValueError, AttributeError, TypeError) as e:
            raise ConfigError(f"invalid output_file_pattern {self.output_file_pattern!r}: {e}") from e
        if not distinct:
            raise ConfigError(
                f"output_file_pattern needs a placeholder for the set number: {self.output_file_pattern}"
            )

    def with_overrides(self, **overrides) -> 'ConverterConfig':
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict) -> 'ConverterConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")

        values = dict(data)
        if 'excluded_folder_names' in values:
            names = values['excluded_folder_names'] or ()
            if isinstance(names, str):
                names = (names,)
            elif isinstance(names, list):
                names = tuple(names)
            values['excluded_folder_names'] = names

        try:
            return cls(**values)
        except TypeError as e:
            raise ConfigError(f"invalid configuration: {e}") from e


def load_config(config_path: Optional[Union[str, Path]] = None) -> ConverterConfig:
    """
    Load converter configuration from a YAML file.

    Args:
        config_path: Path to a YAML file, or None for the built-in defaults

    Returns:
        ConverterConfig instance

    Raises:
        ConfigError: If the file is missing, is not valid YAML or holds unknown keys
    """
    if config_path is None:
        return ConverterConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return ConverterConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    return ConverterConfig.from_dict(data)
