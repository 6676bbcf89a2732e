# midi/bridge.py
import logging
import queue
from typing import Optional

import mido

from errors import ChannelClosed
from midi.messages import note_from_message

_CLOSED = object()  # sentinel pushed by close()


class NoteChannel:
    """Hands key presses from the MIDI callback thread to the game loop.

    Producer side (callback thread): on_message / close.
    Consumer side (main thread): capture_latest.
    The queue is the only state shared between the two threads.
    """
    def __init__(self):
        self._queue: "queue.Queue" = queue.Queue()
        self._closed = False  # only touched by the consumer

    # ---------- producer ----------
    def on_message(self, msg: mido.Message):
        note = note_from_message(msg)
        if note is not None:
            self._queue.put(note)

    def close(self):
        self._queue.put(_CLOSED)

    # ---------- consumer ----------
    def _take(self, item) -> Optional[int]:
        if item is _CLOSED:
            self._closed = True
            return None
        return item

    def capture_latest(self) -> int:
        """Drop everything queued except the newest note and return it.

        Blocks until a note arrives when the queue is empty.
        Raises ChannelClosed once the producer is closed and nothing is left.
        """
        latest = None
        dropped = 0
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                break
            note = self._take(item)
            if note is not None:
                if latest is not None:
                    dropped += 1
                latest = note
        if latest is not None:
            if dropped:
                logging.debug("Discarded %d stale note(s), keeping %d", dropped, latest)
            return latest

        while not self._closed:
            note = self._take(self._queue.get())
            if note is not None:
                return note
        logging.info("MIDI input channel closed")
        raise ChannelClosed("MIDI input disconnected")
