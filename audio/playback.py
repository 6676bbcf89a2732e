# audio/playback.py
import logging
import time
from typing import Callable

import pygame.midi

from errors import PlaybackError
from midi.messages import NOTE_OFF, NOTE_ON, VELOCITY


class Player:
    """
    Plays single notes on a pygame.midi.Output (or anything with write_short):
    - play(note, hold_ms): note_on, hold, note_off
    - a failed send raises PlaybackError; nothing is retried
    """
    def __init__(self, output, sleep: Callable[[float], None] = time.sleep):
        self.output = output
        self._sleep = sleep

    def _send(self, status: int, note: int):
        try:
            self.output.write_short(status, note, VELOCITY)
        except (pygame.midi.MidiException, RuntimeError, OSError) as e:
            logging.error("MIDI send failed: status=0x%02X note=%d: %s", status, note, e)
            raise PlaybackError("cannot play note") from e

    def play(self, note: int, hold_duration_ms: int):
        logging.debug("Playing note %d for %d ms", note, hold_duration_ms)
        self._send(NOTE_ON, note)
        self._sleep(hold_duration_ms / 1000)
        self._send(NOTE_OFF, note)
