import mido
import pytest

from midi.messages import NOTE_OFF, NOTE_ON, VELOCITY, note_from_message


def test_constants():
    assert (NOTE_ON, NOTE_OFF, VELOCITY) == (0x90, 0x80, 0x40)


@pytest.mark.parametrize("msg, expected", [
    (mido.Message("note_on", note=60, velocity=100), 60),
    (mido.Message("note_off", note=61, velocity=64), 61),
    (mido.Message("note_on", note=62, velocity=0), None),
    (mido.Message("note_off", note=63, velocity=0), None),
    (mido.Message("control_change", control=64, value=127), None),
    (mido.Message("clock"), None),
    (mido.Message("pitchwheel", pitch=100), None),
])
def test_note_from_message(msg, expected):
    assert note_from_message(msg) == expected


@pytest.mark.parametrize("channel", [0, 1, 9, 15])
def test_presses_count_on_every_midi_channel(channel):
    assert note_from_message(mido.Message("note_on", channel=channel, note=60, velocity=90)) == 60
    assert note_from_message(mido.Message("note_off", channel=channel, note=61, velocity=20)) == 61
    assert note_from_message(mido.Message("note_on", channel=channel, note=62, velocity=0)) is None
