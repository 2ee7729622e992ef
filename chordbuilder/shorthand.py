"""
Chord shorthand.

CHORD_SHORTHAND_MEANING maps an abbreviation ("m7b5", "sus4", ...) to a
description meant to follow the root name: "C" + " minor seventh".
SHORTHAND_BUILDERS maps the same abbreviations to the builder that makes
the chord, which from_shorthand() uses to turn "Cm7" into notes.

Both tables are read-only and can be shared between threads freely.
"""
from types import MappingProxyType

from . import chords
from .constants import ROOT_PATTERN
from .exceptions import UnknownNoteError, UnknownShorthandError
from .logger_config import logger

CHORD_SHORTHAND_MEANING = MappingProxyType({
    # Triads
    "m": " minor triad",
    "M": " major triad",
    "": " major triad",
    "dim": " diminished triad",

    # Augmented chords
    "aug": " augmented triad",
    "+": " augmented triad",
    "7#5": " augmented minor seventh",
    "M7+5": " augmented minor seventh",
    "M7+": " augmented major seventh",
    "m7+": " augmented minor seventh",
    "7+": " augmented major seventh",

    # Suspended chords
    "sus47": " suspended seventh",
    "sus4": " suspended fourth triad",
    "sus2": " suspended second triad",
    "sus": " suspended fourth triad",
    "11": " eleventh",
    "sus4b9": " suspended fourth ninth",
    "susb9": " suspended fourth ninth",

    # Sevenths
    "m7": " minor seventh",
    "M7": " major seventh",
    "dom7": " dominant seventh",
    "7": " dominant seventh",
    "m7b5": " half diminished seventh",
    "dim7": " diminished seventh",
    "m/M7": " minor/major seventh",
    "mM7": " minor/major seventh",

    # Sixths
    "m6": " minor sixth",
    "M6": " major sixth",
    "6": " major sixth",
    "6/7": " dominant sixth",
    "67": " dominant sixth",
    "6/9": " sixth ninth",
    "69": " sixth ninth",

    # Ninths
    "9": " dominant ninth",
    "7b9": " dominant flat ninth",
    "7#9": " dominant sharp ninth",
    "M9": " major ninth",
    "m9": " minor ninth",

    # Elevenths
    "7#11": " lydian dominant seventh",
    "m11": " minor eleventh",

    # Thirteenths
    "M13": " major thirteenth",
    "m13": " minor thirteenth",
    "13": " dominant thirteenth",

    # Altered chords
    "7b5": " dominant flat five",

    # Special
    "hendrix": " hendrix chord",
    "7b12": " hendrix chord",
    "5": " perfect fifth",
})

# Description → builder. Every description above has exactly one entry here.
_DESCRIPTION_BUILDERS = {
    " minor triad": chords.minor_triad,
    " major triad": chords.major_triad,
    " diminished triad": chords.diminished_triad,
    " augmented triad": chords.augmented_triad,
    " augmented minor seventh": chords.augmented_minor_seventh,
    " augmented major seventh": chords.augmented_major_seventh,
    " suspended seventh": chords.suspended_seventh,
    " suspended fourth triad": chords.suspended_fourth_triad,
    " suspended second triad": chords.suspended_second_triad,
    " eleventh": chords.eleventh,
    " suspended fourth ninth": chords.suspended_fourth_ninth,
    " minor seventh": chords.minor_seventh,
    " major seventh": chords.major_seventh,
    " dominant seventh": chords.dominant_seventh,
    " half diminished seventh": chords.half_diminished_seventh,
    " diminished seventh": chords.diminished_seventh,
    " minor/major seventh": chords.minor_major_seventh,
    " minor sixth": chords.minor_sixth,
    " major sixth": chords.major_sixth,
    " dominant sixth": chords.dominant_sixth,
    " sixth ninth": chords.sixth_ninth,
    " dominant ninth": chords.dominant_ninth,
    " dominant flat ninth": chords.dominant_flat_ninth,
    " dominant sharp ninth": chords.dominant_sharp_ninth,
    " major ninth": chords.major_ninth,
    " minor ninth": chords.minor_ninth,
    " lydian dominant seventh": chords.lydian_dominant_seventh,
    " minor eleventh": chords.minor_eleventh,
    " major thirteenth": chords.major_thirteenth,
    " minor thirteenth": chords.minor_thirteenth,
    " dominant thirteenth": chords.dominant_thirteenth,
    " dominant flat five": chords.dominant_flat_five,
    " hendrix chord": chords.hendrix_chord,
    " perfect fifth": chords.power_chord,
}

SHORTHAND_BUILDERS = MappingProxyType({
    abbreviation: _DESCRIPTION_BUILDERS[meaning]
    for abbreviation, meaning in CHORD_SHORTHAND_MEANING.items()
})


def split_shorthand(name: str) -> tuple[str, str]:
    """
    Split a chord name into (root, suffix).

    >>> split_shorthand("Bbm7b5")
    ('Bb', 'm7b5')
    """
    root_match = ROOT_PATTERN.match(name) if isinstance(name, str) else None
    if not root_match:
        raise UnknownNoteError(f"Chord {name!r} does not start with a note")
    root = root_match.group(1)
    return root, name[len(root):]


def describe(name: str) -> str:
    """
    Return the readable name of a chord.

    >>> describe("Cm7b5")
    'C half diminished seventh'
    """
    root, suffix = split_shorthand(name)
    if suffix not in CHORD_SHORTHAND_MEANING:
        raise UnknownShorthandError(f"Unknown chord shorthand {suffix!r} in {name!r}")
    return root + CHORD_SHORTHAND_MEANING[suffix]


def from_shorthand(name: str) -> list[str]:
    """
    Build the chord named by a shorthand string.

    >>> from_shorthand("Cm7")
    ['C', 'Eb', 'G', 'Bb']
    >>> from_shorthand("F#7#9")
    ['F#', 'A#', 'C#', 'E', 'G##']
    """
    root, suffix = split_shorthand(name)
    try:
        build = SHORTHAND_BUILDERS[suffix]
    except KeyError:
        raise UnknownShorthandError(
            f"Unknown chord shorthand {suffix!r} in {name!r}") from None
    logger.debug("Shorthand %r -> %s(%r)", name, build.__name__, root)
    return build(root)
