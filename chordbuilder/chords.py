"""
Absolute chord builders.

Every builder takes a root note and returns a fresh list of note names,
root first and the remaining tones in construction order. Tones are fixed
intervals above the root, so the result does not depend on any key.

The base triads are written out; everything else is composed from them:

    extend(base, *tones)        base chord + tone(root) for each tone
    alter(base, index, change)  base chord with chord[index] = change(root, chord[index])

so a dominant ninth is literally extend(dominant_seventh, major_second).
"""
from . import intervals
from .notes import augment, diminish


# ── Composition helpers ───────────────────────────────────────────────────────

def extend(base, *tones):
    """Return a builder that appends tone(root) for every tone to base(root)."""
    def build(note):
        chord = base(note)
        chord.extend(tone(note) for tone in tones)
        return chord
    return build


def alter(base, index, change):
    """Return a builder that replaces base(root)[index] with change(root, old_tone)."""
    def build(note):
        chord = base(note)
        chord[index] = change(note, chord[index])
        return chord
    return build


def _define(name, build, summary, example):
    # Give composed builders a real name and a docstring with their C example.
    build.__name__ = build.__qualname__ = name
    build.__doc__ = f"""{summary}

    >>> {name}("C")
    {example!r}
    """
    return build


def _raised(tone):
    return lambda note: augment(tone(note))


def _lowered(tone):
    return lambda note: diminish(tone(note))


# ── Triads ────────────────────────────────────────────────────────────────────

def major_triad(note):
    """Builds a major triad on note.

    >>> major_triad("C")
    ['C', 'E', 'G']
    """
    return [note, intervals.major_third(note), intervals.perfect_fifth(note)]


def minor_triad(note):
    """Builds a minor triad on note.

    >>> minor_triad("C")
    ['C', 'Eb', 'G']
    """
    return [note, intervals.minor_third(note), intervals.perfect_fifth(note)]


def diminished_triad(note):
    """Builds a diminished triad on note.

    >>> diminished_triad("C")
    ['C', 'Eb', 'Gb']
    """
    return [note, intervals.minor_third(note), intervals.minor_fifth(note)]


def augmented_triad(note):
    """Builds an augmented triad on note.

    >>> augmented_triad("C")
    ['C', 'E', 'G#']
    """
    return [note, intervals.major_third(note), augment(intervals.major_fifth(note))]


def power_chord(note):
    """Root and perfect fifth, the "5" chord.

    >>> power_chord("C")
    ['C', 'G']
    """
    return [note, intervals.perfect_fifth(note)]


# ── Sevenths ──────────────────────────────────────────────────────────────────

major_seventh = _define(
    "major_seventh", extend(major_triad, intervals.major_seventh),
    "Builds a major seventh on note.", ["C", "E", "G", "B"])

minor_seventh = _define(
    "minor_seventh", extend(minor_triad, intervals.minor_seventh),
    "Builds a minor seventh on note.", ["C", "Eb", "G", "Bb"])

dominant_seventh = _define(
    "dominant_seventh", extend(major_triad, intervals.minor_seventh),
    "Builds a dominant seventh on note.", ["C", "E", "G", "Bb"])

half_diminished_seventh = _define(
    "half_diminished_seventh", extend(diminished_triad, intervals.minor_seventh),
    "Builds a half diminished seventh (= minor seventh flat five) on note.",
    ["C", "Eb", "Gb", "Bb"])


def minor_seventh_flat_five(note):
    """See half_diminished_seventh(note)."""
    return half_diminished_seventh(note)


diminished_seventh = _define(
    "diminished_seventh", extend(diminished_triad, _lowered(intervals.minor_seventh)),
    "Builds a diminished seventh on note; the seventh is a doubly flattened one.",
    ["C", "Eb", "Gb", "Bbb"])

minor_major_seventh = _define(
    "minor_major_seventh", extend(minor_triad, intervals.major_seventh),
    "Builds a minor major seventh on note.", ["C", "Eb", "G", "B"])


# ── Sixths ────────────────────────────────────────────────────────────────────

minor_sixth = _define(
    "minor_sixth", extend(minor_triad, intervals.major_sixth),
    "Builds a minor sixth chord on note.", ["C", "Eb", "G", "A"])

major_sixth = _define(
    "major_sixth", extend(major_triad, intervals.major_sixth),
    "Builds a major sixth chord on note.", ["C", "E", "G", "A"])

# Both of these carry five notes: a sixth chord with a 7th or 9th on top.
dominant_sixth = _define(
    "dominant_sixth", extend(major_sixth, intervals.minor_seventh),
    "Builds the altered chord 6/7 on note.", ["C", "E", "G", "A", "Bb"])

sixth_ninth = _define(
    "sixth_ninth", extend(major_sixth, intervals.major_second),
    "Builds the sixth/ninth chord on note.", ["C", "E", "G", "A", "D"])


# ── Ninths ────────────────────────────────────────────────────────────────────

minor_ninth = _define(
    "minor_ninth", extend(minor_seventh, intervals.major_second),
    "Builds a minor ninth chord on note.", ["C", "Eb", "G", "Bb", "D"])

major_ninth = _define(
    "major_ninth", extend(major_seventh, intervals.major_second),
    "Builds a major ninth chord on note.", ["C", "E", "G", "B", "D"])

dominant_ninth = _define(
    "dominant_ninth", extend(dominant_seventh, intervals.major_second),
    "Builds a dominant ninth chord on note.", ["C", "E", "G", "Bb", "D"])

dominant_flat_ninth = _define(
    "dominant_flat_ninth",
    alter(dominant_ninth, 4, lambda root, ninth: intervals.minor_second(root)),
    "Builds a dominant flat ninth chord on note.", ["C", "E", "G", "Bb", "Db"])

dominant_sharp_ninth = _define(
    "dominant_sharp_ninth",
    alter(dominant_ninth, 4, lambda root, ninth: augment(intervals.major_second(root))),
    "Builds a dominant sharp ninth chord on note.", ["C", "E", "G", "Bb", "D#"])


# ── Elevenths ─────────────────────────────────────────────────────────────────

def eleventh(note):
    """Builds an eleventh chord on note. The third and ninth are left out.

    >>> eleventh("C")
    ['C', 'G', 'Bb', 'F']
    """
    return [note, intervals.perfect_fifth(note), intervals.minor_seventh(note),
            intervals.perfect_fourth(note)]


minor_eleventh = _define(
    "minor_eleventh", extend(minor_seventh, intervals.perfect_fourth),
    "Builds a minor eleventh chord on note.", ["C", "Eb", "G", "Bb", "F"])


# ── Thirteenths ───────────────────────────────────────────────────────────────

minor_thirteenth = _define(
    "minor_thirteenth", extend(minor_ninth, intervals.major_sixth),
    "Builds a minor thirteenth chord on note.", ["C", "Eb", "G", "Bb", "D", "A"])

major_thirteenth = _define(
    "major_thirteenth", extend(major_ninth, intervals.major_sixth),
    "Builds a major thirteenth chord on note.", ["C", "E", "G", "B", "D", "A"])

dominant_thirteenth = _define(
    "dominant_thirteenth", extend(dominant_ninth, intervals.major_sixth),
    "Builds a dominant thirteenth chord on note.", ["C", "E", "G", "Bb", "D", "A"])


# ── Suspended chords ──────────────────────────────────────────────────────────

def suspended_second_triad(note):
    """Builds a suspended second triad on note.

    >>> suspended_second_triad("C")
    ['C', 'D', 'G']
    """
    return [note, intervals.major_second(note), intervals.perfect_fifth(note)]


def suspended_fourth_triad(note):
    """Builds a suspended fourth triad on note.

    >>> suspended_fourth_triad("C")
    ['C', 'F', 'G']
    """
    return [note, intervals.perfect_fourth(note), intervals.perfect_fifth(note)]


def suspended_triad(note):
    """An alias for suspended_fourth_triad."""
    return suspended_fourth_triad(note)


suspended_seventh = _define(
    "suspended_seventh", extend(suspended_fourth_triad, intervals.minor_seventh),
    "Builds a suspended (flat) seventh chord on note.", ["C", "F", "G", "Bb"])

suspended_fourth_ninth = _define(
    "suspended_fourth_ninth", extend(suspended_fourth_triad, intervals.minor_second),
    "Builds a suspended fourth flat ninth chord on note.", ["C", "F", "G", "Db"])


# ── Augmented chords ──────────────────────────────────────────────────────────

augmented_major_seventh = _define(
    "augmented_major_seventh", extend(augmented_triad, intervals.major_seventh),
    "Builds an augmented major seventh chord on note.", ["C", "E", "G#", "B"])

augmented_minor_seventh = _define(
    "augmented_minor_seventh", extend(augmented_triad, intervals.minor_seventh),
    "Builds an augmented minor seventh chord on note.", ["C", "E", "G#", "Bb"])


# ── Altered and special chords ────────────────────────────────────────────────

dominant_flat_five = _define(
    "dominant_flat_five",
    alter(dominant_seventh, 2, lambda root, fifth: diminish(fifth)),
    "Builds a dominant flat five chord on note.", ["C", "E", "Gb", "Bb"])

lydian_dominant_seventh = _define(
    "lydian_dominant_seventh", extend(dominant_seventh, _raised(intervals.perfect_fourth)),
    "Builds the lydian dominant seventh (7#11) on note.", ["C", "E", "G", "Bb", "F#"])

hendrix_chord = _define(
    "hendrix_chord", extend(dominant_seventh, intervals.minor_third),
    "Builds the famous Hendrix chord (7b12) on note.", ["C", "E", "G", "Bb", "Eb"])


# Every absolute builder by name, in the order above.
ABSOLUTE_BUILDERS = {
    f.__name__: f for f in (
        major_triad, minor_triad, diminished_triad, augmented_triad, power_chord,
        major_seventh, minor_seventh, dominant_seventh, half_diminished_seventh,
        minor_seventh_flat_five, diminished_seventh, minor_major_seventh,
        minor_sixth, major_sixth, dominant_sixth, sixth_ninth,
        minor_ninth, major_ninth, dominant_ninth, dominant_flat_ninth, dominant_sharp_ninth,
        eleventh, minor_eleventh,
        minor_thirteenth, major_thirteenth, dominant_thirteenth,
        suspended_triad, suspended_second_triad, suspended_fourth_triad,
        suspended_seventh, suspended_fourth_ninth,
        augmented_major_seventh, augmented_minor_seventh,
        dominant_flat_five, lydian_dominant_seventh, hendrix_chord,
    )
}
