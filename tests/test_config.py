import pytest

from config import GameConfig
from errors import ConfigurationError
from main import build_parser
from notes.model import NoteRange


def test_defaults_from_cli():
    cfg = GameConfig.from_args(build_parser().parse_args([]))
    assert cfg == GameConfig(port_no=None, non_interactive=False,
                             note_range=NoteRange(36, 96), guess_play_duration_ms=150)


def test_all_options_from_cli():
    args = build_parser().parse_args(["--port_no", "2", "-n", "--min_note", "40",
                                      "--max_note", "50", "--guess_play_duration_ms", "300"])
    cfg = GameConfig.from_args(args)
    assert cfg.port_no == 2
    assert cfg.non_interactive
    assert cfg.note_range == NoteRange(40, 50)
    assert cfg.guess_play_duration_ms == 300


def test_inverted_range_fails():
    args = build_parser().parse_args(["--min_note", "96", "--max_note", "36"])
    with pytest.raises(ConfigurationError):
        GameConfig.from_args(args)


@pytest.mark.parametrize("kwargs", [{"port_no": -1}, {"guess_play_duration_ms": -5}])
def test_negative_values_fail(kwargs):
    with pytest.raises(ConfigurationError):
        GameConfig(**kwargs)
