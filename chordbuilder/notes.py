"""
Note-name handling.

Notes are plain strings: a letter A-G followed by up to four sharps ("#") or
flats ("b"), the most music21 can spell.
music21 spells flats with "-", so names are converted at the boundary with
to_music21_name() / from_music21_name().
"""
import music21

from .constants import NOTE_PATTERN
from .exceptions import UnknownNoteError


def is_valid_note(note) -> bool:
    """Return True if note is a letter A-G followed by up to four '#'s or up to four 'b's."""
    return isinstance(note, str) and NOTE_PATTERN.match(note) is not None


def validate(note) -> str:
    """Return note unchanged, or raise UnknownNoteError."""
    if not is_valid_note(note):
        raise UnknownNoteError(f"Unknown note {note!r}")
    return note


def to_music21_name(note: str) -> str:
    # Only the accidentals can be a lowercase 'b'; the letter is always upper case.
    return validate(note).replace("b", "-")


def from_music21_name(name: str) -> str:
    return name.replace("-", "b")


def to_pitch(note: str) -> music21.pitch.Pitch:
    """Return an octave-less music21 Pitch for note."""
    return music21.pitch.Pitch(to_music21_name(note))


def augment(note: str) -> str:
    """Raise note by one chromatic step, keeping its letter.

    >>> augment("C"), augment("Cb")
    ('C#', 'C')
    """
    validate(note)
    if note.endswith("b"):
        return note[:-1]
    return validate(note + "#")


def diminish(note: str) -> str:
    """Lower note by one chromatic step, keeping its letter.

    >>> diminish("C#"), diminish("Bb")
    ('C', 'Bbb')
    """
    validate(note)
    if note.endswith("#"):
        return note[:-1]
    return validate(note + "b")
