# errors.py
class GuessNoteError(Exception):
    """Base class for every fatal error the game reports to the user."""

class ConfigurationError(GuessNoteError):
    pass

class DeviceError(GuessNoteError):
    pass

class InputParseError(GuessNoteError):
    pass

class PlaybackError(GuessNoteError):
    pass

class ChannelClosed(GuessNoteError):
    """The MIDI input side of a NoteChannel is gone."""
