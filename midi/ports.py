# midi/ports.py
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Tuple

import mido
import pygame.midi

from errors import ChannelClosed, DeviceError, InputParseError
from midi.bridge import NoteChannel


def list_output_ports() -> List[Tuple[int, str]]:
    """(pygame device id, name) for every output device. pygame.midi must be initialised."""
    out = []
    for dev in range(pygame.midi.get_count()):
        _interf, name, _is_input, is_output, _opened = pygame.midi.get_device_info(dev)
        if is_output:
            out.append((dev, name.decode("utf-8", errors="replace")))
    return out


def list_input_ports() -> List[str]:
    return mido.get_input_names()


def choose_port(names: List[str],
                read_line: Callable[[], str] = input,
                write: Callable[[str], None] = print) -> int:
    if not names:
        raise DeviceError("No available MIDI ports found")
    write("Select MIDI port:")
    for i, name in enumerate(names):
        write(f"{i}: {name}")
    answer = read_line().strip()
    try:
        port_no = int(answer)
    except ValueError:
        raise InputParseError("invalid input, must be a number") from None
    if port_no < 0:
        raise InputParseError("invalid input, must be a number")
    return port_no


def _pick(ports: list, port_no: int, kind: str):
    if port_no >= len(ports):
        raise DeviceError(f"No MIDI {kind} port number {port_no} ({len(ports)} available)")
    return ports[port_no]


def _open_output(dev: int, name: str) -> "pygame.midi.Output":
    try:
        return pygame.midi.Output(dev)
    except (pygame.midi.MidiException, RuntimeError) as e:
        raise DeviceError(f"cannot open MIDI output {name!r}: {e}") from e


def _open_input(name: str, channel: NoteChannel):
    try:
        return mido.open_input(name, callback=channel.on_message)
    except OSError as e:
        channel.close()
        raise ChannelClosed(f"cannot open MIDI input {name!r}: {e}") from e


@contextmanager
def open_ports(port_no: Optional[int], channel: NoteChannel,
               read_line: Callable[[], str] = input,
               write: Callable[[str], None] = print) -> Iterator["pygame.midi.Output"]:
    """Open output and input port `port_no` and keep them open for the block.

    Input messages go to channel.on_message. The channel is closed when the
    input port goes away, or right away when it cannot be opened.
    """
    pygame.midi.init()
    try:
        out_ports = list_output_ports()
        in_ports = list_input_ports()
        if port_no is None:
            port_no = choose_port([name for _, name in out_ports], read_line, write)
        dev, out_name = _pick(out_ports, port_no, "output")
        in_name = _pick(in_ports, port_no, "input")
        logging.info("Using MIDI output %r (device %d), input %r", out_name, dev, in_name)

        midi_out = _open_output(dev, out_name)
        try:
            with _open_input(in_name, channel):
                try:
                    yield midi_out
                finally:
                    channel.close()
        finally:
            midi_out.close()
    finally:
        pygame.midi.quit()
