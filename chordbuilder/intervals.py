"""
Intervals above a note.

Absolute intervals (major_third, perfect_fifth, ...) are fixed semitone
distances and are spelled by music21's transposition, so the letter name
always moves by the interval's generic size (C + minor third = Eb, not D#).

Diatonic intervals (third, fifth, ...) are scale-degree lookups inside a key:
the result is whatever note of the key lies that many steps above the note's
letter, so their quality depends on the key.
"""
import music21
import music21.interval

from .constants import MAX_ACCIDENTALS, NOTE_LETTERS
from .diatonic import get_notes
from .exceptions import UnknownNoteError
from .notes import from_music21_name, to_pitch, validate


# ── Diatonic ──────────────────────────────────────────────────────────────────

def interval(key, start_note, steps):
    """
    Return the note `steps` scale degrees above start_note in key.

    Only the letter of start_note is used to find its position in the scale.
    """
    notes_in_key = get_notes(key)
    validate(start_note)
    # Every diatonic scale holds each letter exactly once.
    index = [n[0] for n in notes_in_key].index(start_note[0])
    return notes_in_key[(index + steps) % 7]


def second(note, key):
    return interval(key, note, 1)


def third(note, key):
    return interval(key, note, 2)


def fourth(note, key):
    return interval(key, note, 3)


def fifth(note, key):
    return interval(key, note, 4)


def sixth(note, key):
    return interval(key, note, 5)


def seventh(note, key):
    return interval(key, note, 6)


# ── Absolute ──────────────────────────────────────────────────────────────────

def transpose(note: str, name: str) -> str:
    """
    Transpose note by a music21 interval name ("M3", "d5", ...).

    Raises UnknownNoteError when the result would need more than
    MAX_ACCIDENTALS sharps or flats; music21 respells those on another letter.
    """
    interval_obj = music21.interval.Interval(name)
    result = to_pitch(note).transpose(interval_obj)
    letter = NOTE_LETTERS[(NOTE_LETTERS.index(note[0]) + interval_obj.generic.undirected - 1) % 7]
    if result.step != letter:
        raise UnknownNoteError(
            f"{note} + {name} cannot be spelled on {letter} with at most "
            f"{MAX_ACCIDENTALS} accidentals")
    return from_music21_name(result.name)


def minor_second(note):
    return transpose(note, "m2")


def major_second(note):
    return transpose(note, "M2")


def minor_third(note):
    return transpose(note, "m3")


def major_third(note):
    return transpose(note, "M3")


def perfect_fourth(note):
    return transpose(note, "P4")


def minor_fifth(note):
    """Diminished fifth: C → Gb."""
    return transpose(note, "d5")


def perfect_fifth(note):
    return transpose(note, "P5")


major_fifth = perfect_fifth


def minor_sixth(note):
    return transpose(note, "m6")


def major_sixth(note):
    return transpose(note, "M6")


def minor_seventh(note):
    return transpose(note, "m7")


def major_seventh(note):
    return transpose(note, "M7")
