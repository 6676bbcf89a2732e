# main.py
import sys, os
sys.path.append(os.path.dirname(__file__))  # make config.py etc. importable when run as a script

import argparse
import logging
from logging.handlers import RotatingFileHandler

from audio.playback import Player
from config import GameConfig
from errors import ConfigurationError, GuessNoteError
from game import Game
from midi.bridge import NoteChannel
from midi.ports import open_ports
from utils.crashlog import setup_crashlog, log_exception, log_dir

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def _init_logging():
    if logging.getLogger().handlers:
        return

    # console stays quiet so log lines don't interleave with the game prompts
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    root = logging.getLogger()
    fh = RotatingFileHandler(os.path.join(log_dir(), "app.log"),
                             maxBytes=2*1024*1024, backupCount=3, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)
    root.setLevel(logging.DEBUG)
    for h in root.handlers:
        if h is not fh:
            h.setLevel(logging.WARNING)

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="guess-note", description="Guess the note played on your MIDI device.")
    ap.add_argument('--port_no', type=int, default=None, help="MIDI port number (asked for when omitted)")
    ap.add_argument('-n', '--non_interactive', action='store_true', help="don't ask to confirm each guess")
    ap.add_argument('--min_note', type=int, default=36, help="lowest note to generate")
    ap.add_argument('--max_note', type=int, default=96, help="highest note to generate")
    ap.add_argument('--guess_play_duration_ms', type=int, default=150, help="how long to play the note")
    return ap

def run(cfg: GameConfig):
    channel = NoteChannel()
    with open_ports(cfg.port_no, channel) as midi_out:
        Game(cfg, Player(midi_out), channel).run()

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = GameConfig.from_args(args)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    _init_logging()
    setup_crashlog()
    logging.info("Starting guess-note: %r", cfg)
    try:
        run(cfg)
    except (KeyboardInterrupt, EOFError):
        logging.info("Stopped by user")
        print()
        return 0
    except GuessNoteError as e:
        logging.error("Fatal: %s", e, exc_info=True)
        log_exception("Fatal error", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
