# ========================= config.py =========================
from dataclasses import dataclass, field
from typing import Optional

from errors import ConfigurationError
from notes.model import NoteRange

@dataclass(frozen=True)
class GameConfig:
    port_no: Optional[int] = None        # None -> ask on the console
    non_interactive: bool = False        # skip the "confirm your guess?" step
    note_range: NoteRange = field(default_factory=NoteRange)
    guess_play_duration_ms: int = 150    # also used for replays

    def __post_init__(self):
        if self.port_no is not None and self.port_no < 0:
            raise ConfigurationError(f"port_no must not be negative, got {self.port_no}")
        if self.guess_play_duration_ms < 0:
            raise ConfigurationError(
                f"guess_play_duration_ms must not be negative, got {self.guess_play_duration_ms}")

    @classmethod
    def from_args(cls, args) -> "GameConfig":
        return cls(
            port_no=args.port_no,
            non_interactive=args.non_interactive,
            note_range=NoteRange(args.min_note, args.max_note),
            guess_play_duration_ms=args.guess_play_duration_ms,
        )
