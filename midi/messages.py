# midi/messages.py
from typing import Final, Optional

import mido

NOTE_ON: Final = 0x90
NOTE_OFF: Final = 0x80
VELOCITY: Final = 0x40


def note_from_message(msg: mido.Message) -> Optional[int]:
    """Return the note number of a key press, or None for anything else.

    Some keyboards send note_off with a real velocity on key press, while
    note_on with velocity 0 is a release, so only the velocity decides.
    """
    if msg.type not in ("note_on", "note_off"):
        return None
    if msg.velocity == 0:
        return None
    return msg.note
