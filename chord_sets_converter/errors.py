"""
Exceptions raised by the chord sets converter.

Skip-level problems (a badly named file) are handled inside the builder;
everything else propagates to the caller of the pipeline.
"""

__all__ = [
    'ConverterError',
    'ConfigError',
    'ChordFileNameError',
    'MidiReadError',
    'ChordSetFolderError',
    'SetsDirectoryError',
    'ChordSetWriteError',
    'ChordSetFormatError',
]


class ConverterError(Exception):
    """Base class for all converter errors."""


class ConfigError(ConverterError):
    """Invalid configuration file or value."""


class ChordFileNameError(ConverterError):
    """A file name does not follow the "<slot> <label>.mid" shape."""

    def __init__(self, file_name):
        super().__init__(f"invalid chord file name: {file_name}")
        self.file_name = file_name


class MidiReadError(ConverterError):
    """A MIDI file could not be read or parsed."""

    def __init__(self, path, reason):
        super().__init__(f"failed to read MIDI file {path}: {reason}")
        self.path = path


class ChordSetFolderError(ConverterError):
    """Building one chord set folder was aborted."""

    def __init__(self, folder, reason):
        super().__init__(f"error processing set folder {folder}: {reason}")
        self.folder = folder


class SetsDirectoryError(ConverterError):
    """The sets root directory is missing or could not be traversed."""


class ChordSetWriteError(ConverterError):
    """A chord set could not be serialized or written."""


class ChordSetFormatError(ConverterError):
    """A chord set document does not match the expected layout."""
