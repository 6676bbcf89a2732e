"""Pytest fixtures and fakes for the MIDI devices and the console."""
import pytest


class FakeOutput:
    """Records write_short calls like a pygame.midi.Output would receive them."""
    def __init__(self, fail_on=None):
        self.sent = []
        self.fail_on = fail_on  # status byte that raises

    def write_short(self, status, data1=0, data2=0):
        if self.fail_on is not None and status == self.fail_on:
            import pygame.midi
            raise pygame.midi.MidiException("device gone")
        self.sent.append((status, data1, data2))


class FakePlayer:
    def __init__(self):
        self.played = []

    def play(self, note, hold_duration_ms):
        self.played.append((note, hold_duration_ms))


class ScriptedChannel:
    """capture_latest() hands out pre-recorded notes in order."""
    def __init__(self, notes):
        self.notes = list(notes)
        self.captures = 0

    def capture_latest(self):
        self.captures += 1
        return self.notes.pop(0)


class Console:
    def __init__(self, answers=()):
        self.answers = list(answers)
        self.lines = []

    def read_line(self):
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, line):
        self.lines.append(line)

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture
def fake_output():
    return FakeOutput()


@pytest.fixture
def fake_player():
    return FakePlayer()


@pytest.fixture
def console():
    return Console()
