"""
Diatonic scales.

A key is written as a tonic ("C", "Bb", "F#") for major, and either with an
"m" suffix ("Fm", "C#m") or a lowercase tonic ("f", "c#") for natural minor.
"""
import music21
import music21.key

from .constants import MAJOR_KEYS, MINOR_KEYS
from .exceptions import InvalidKeyError
from .notes import from_music21_name


def parse_key(key) -> tuple[str, str]:
    """
    Split a key string into (tonic, mode), with the tonic capitalised.

    >>> parse_key("Fm"), parse_key("c#"), parse_key("Bb")
    (('F', 'minor'), ('C#', 'minor'), ('Bb', 'major'))
    """
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(f"Invalid key {key!r}")

    if len(key) > 1 and key.endswith("m"):
        tonic, mode = key[:-1], "minor"
        if not tonic[0].isupper():
            raise InvalidKeyError(f"Invalid key {key!r}")
    elif key[0].islower():
        tonic, mode = key, "minor"
    else:
        tonic, mode = key, "major"

    if mode == "minor":
        if tonic.lower() not in MINOR_KEYS:
            raise InvalidKeyError(f"Invalid key {key!r}")
        tonic = tonic[0].upper() + tonic[1:]
    elif tonic not in MAJOR_KEYS:
        raise InvalidKeyError(f"Invalid key {key!r}")
    return tonic, mode


def is_valid_key(key) -> bool:
    try:
        parse_key(key)
    except InvalidKeyError:
        return False
    return True


def get_key(key) -> music21.key.Key:
    """Return the music21 Key object for a key string."""
    tonic, mode = parse_key(key)
    return music21.key.Key(tonic.replace("b", "-"), mode)


def get_notes(key) -> list[str]:
    """
    Return the seven scale notes of key, starting on the tonic.

    >>> get_notes("C")
    ['C', 'D', 'E', 'F', 'G', 'A', 'B']
    >>> get_notes("Fm")
    ['F', 'G', 'Ab', 'Bb', 'C', 'Db', 'Eb']
    """
    pitches = get_key(key).getPitches()[:7]
    return [from_music21_name(p.name) for p in pitches]
