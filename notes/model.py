# notes/model.py
import enum
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from errors import ConfigurationError

MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127


@dataclass(frozen=True)
class NoteRange:
    min_note: int = 36
    max_note: int = 96

    def __post_init__(self):
        for label, v in (("min_note", self.min_note), ("max_note", self.max_note)):
            if not (MIDI_NOTE_MIN <= v <= MIDI_NOTE_MAX):
                raise ConfigurationError(
                    f"{label} must be between {MIDI_NOTE_MIN} and {MIDI_NOTE_MAX}, got {v}")
        if self.min_note > self.max_note:
            raise ConfigurationError("Note range cannot be empty")

    def random_note(self, rng: Callable[[], float] = random.random) -> int:
        """Scale a uniform [0, 1) sample onto the range and truncate.

        max_note is only reachable when min_note == max_note.
        """
        return int(rng() * (self.max_note - self.min_note) + self.min_note)


class Outcome(enum.Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class Round:
    target: int
    guesses: List[int] = field(default_factory=list)
    outcome: Optional[Outcome] = None

    @property
    def guess(self) -> Optional[int]:
        return self.guesses[-1] if self.guesses else None

    def resolve(self) -> Outcome:
        self.outcome = Outcome.CORRECT if self.guess == self.target else Outcome.INCORRECT
        return self.outcome
