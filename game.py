# game.py
import logging
import random
from typing import Callable

from audio.playback import Player
from config import GameConfig
from midi.bridge import NoteChannel
from notes.model import Outcome, Round
from notes.naming import note_label


class Game:
    """One target note per round, forever.

    GeneratingTarget -> Playing -> AwaitingGuess -> [Confirming <-> Replaying] -> Resolved
    The confirm/replay loop only runs in interactive mode and has no retry limit.
    """
    def __init__(self, cfg: GameConfig, player: Player, channel: NoteChannel,
                 rng: Callable[[], float] = random.random,
                 read_line: Callable[[], str] = input,
                 write: Callable[[str], None] = print):
        self.cfg = cfg
        self.player = player
        self.channel = channel
        self.rng = rng
        self.read_line = read_line
        self.write = write

    def _play_target(self, rnd: Round):
        self.player.play(rnd.target, self.cfg.guess_play_duration_ms)

    def _capture(self, rnd: Round) -> int:
        note = self.channel.capture_latest()
        rnd.guesses.append(note)
        logging.debug("Captured note %d (attempt %d)", note, len(rnd.guesses))
        return note

    def _confirmed(self, note: int) -> bool:
        self.write(f"Last played note is {note_label(note)}. Confirm your guess? y/n")
        return self.read_line().strip().lower() == "y"

    def _report(self, rnd: Round):
        if rnd.outcome is Outcome.CORRECT:
            self.write(f"Correct, you played the right note ({note_label(rnd.guess)})")
        else:
            self.write(f"Incorrect, you played {note_label(rnd.guess)}, "
                       f"but the right one is {note_label(rnd.target)}")

    def play_round(self) -> Round:
        self.write("\n ~~ Guess the note! ~~")
        rnd = Round(target=self.cfg.note_range.random_note(self.rng))
        logging.debug("New round, target=%d", rnd.target)

        self._play_target(rnd)
        note = self._capture(rnd)
        if not self.cfg.non_interactive:
            while not self._confirmed(note):
                self._play_target(rnd)
                note = self._capture(rnd)

        rnd.resolve()
        logging.info("Round resolved: target=%d guess=%d outcome=%s",
                     rnd.target, rnd.guess, rnd.outcome.value)
        self._report(rnd)
        return rnd

    # ---------- Main loop ----------
    def run(self):
        while True:
            self.play_round()
