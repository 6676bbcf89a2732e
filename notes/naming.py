# notes/naming.py
NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


def note_name(value: int) -> str:
    """60 -> 'C4', 0 -> 'C-1'."""
    return f"{NOTE_NAMES[value % 12]}{value // 12 - 1}"


def note_label(value: int) -> str:
    # natural notes get a leading space so " C4" and "C#4" line up on the console
    name = note_name(value)
    return name if "#" in name else " " + name
