"""
Diatonic chords and chords by harmonic function.

A ChordBuilder owns two ChordCache instances, one for the seven triads of a
key and one for its seven seventh chords. Harmonic-function accessors
(tonic, supertonic, ...) and their roman-numeral aliases index into those
cached tables.

The module-level functions at the bottom are bound to DEFAULT_BUILDER, so

    from chordbuilder.builder import triads, tonic, V7

share one pair of caches for the lifetime of the process.
"""
from . import intervals
from .cache import ChordCache
from .constants import LEGACY_VII7_ALIAS
from .diatonic import get_notes


def triad(note, key):
    """Returns the triad on note in key as a list.

    >>> triad("E", "C")
    ['E', 'G', 'B']
    >>> triad("E", "B")
    ['E', 'G#', 'B']
    """
    return [note, intervals.third(note, key), intervals.fifth(note, key)]


def seventh(note, key):
    """Returns the seventh chord on note in key.

    >>> seventh("C", "C")
    ['C', 'E', 'G', 'B']
    """
    chord = triad(note, key)
    chord.append(intervals.seventh(note, key))
    return chord


class ChordBuilder:
    """
    Diatonic chord tables with per-key memoisation.

    legacy_vii7 chooses what vii7() returns: the subtonic triad (True, the
    historical behaviour) or the subtonic seventh chord (False). VII7()
    always returns the seventh chord.
    """

    def __init__(self, legacy_vii7=LEGACY_VII7_ALIAS):
        self.legacy_vii7 = legacy_vii7
        self.triads_cache = ChordCache(self._compute_triads, name="triads")
        self.sevenths_cache = ChordCache(self._compute_sevenths, name="sevenths")

    # ── Diatonic tables ─────────────────────────────────────────────────────

    @staticmethod
    def _compute_triads(key):
        return [triad(x, key) for x in get_notes(key)]

    @staticmethod
    def _compute_sevenths(key):
        return [seventh(x, key) for x in get_notes(key)]

    def triads(self, key):
        """Returns all the triads in key. The same list is returned on every call."""
        return self.triads_cache.get_or_compute(key)

    def sevenths(self, key):
        """Returns all the seventh chords in key. The same list is returned on every call."""
        return self.sevenths_cache.get_or_compute(key)

    # ── Chords by harmonic function ─────────────────────────────────────────

    def tonic(self, key):
        """Returns the tonic chord in key.

        >>> DEFAULT_BUILDER.tonic("C")
        ['C', 'E', 'G']
        """
        return self.triads(key)[0]

    def tonic7(self, key):
        """Same as tonic(key), but returns the seventh chord."""
        return self.sevenths(key)[0]

    def supertonic(self, key):
        """Returns the supertonic chord in key.

        >>> DEFAULT_BUILDER.supertonic("C")
        ['D', 'F', 'A']
        """
        return self.triads(key)[1]

    def supertonic7(self, key):
        return self.sevenths(key)[1]

    def mediant(self, key):
        """Returns the mediant chord in key.

        >>> DEFAULT_BUILDER.mediant("C")
        ['E', 'G', 'B']
        """
        return self.triads(key)[2]

    def mediant7(self, key):
        return self.sevenths(key)[2]

    def subdominant(self, key):
        """Returns the subdominant chord in key.

        >>> DEFAULT_BUILDER.subdominant("C")
        ['F', 'A', 'C']
        """
        return self.triads(key)[3]

    def subdominant7(self, key):
        return self.sevenths(key)[3]

    def dominant(self, key):
        """Returns the dominant chord in key.

        >>> DEFAULT_BUILDER.dominant("C")
        ['G', 'B', 'D']
        """
        return self.triads(key)[4]

    def dominant7(self, key):
        return self.sevenths(key)[4]

    def submediant(self, key):
        """Returns the submediant chord in key.

        >>> DEFAULT_BUILDER.submediant("C")
        ['A', 'C', 'E']
        """
        return self.triads(key)[5]

    def submediant7(self, key):
        return self.sevenths(key)[5]

    def subtonic(self, key):
        """Returns the subtonic chord in key.

        >>> DEFAULT_BUILDER.subtonic("C")
        ['B', 'D', 'F']
        """
        return self.triads(key)[6]

    def subtonic7(self, key):
        return self.sevenths(key)[6]

    # ── Roman numerals ──────────────────────────────────────────────────────
    # Case is not significant: ii and II are both the supertonic.

    I = tonic
    I7 = tonic7
    ii = II = supertonic
    ii7 = II7 = supertonic7
    iii = III = mediant
    iii7 = III7 = mediant7
    IV = subdominant
    IV7 = subdominant7
    V = dominant
    V7 = dominant7
    vi = VI = submediant
    vi7 = VI7 = submediant7
    vii = VII = subtonic
    VII7 = subtonic7

    def vii7(self, key):
        if self.legacy_vii7:
            return self.subtonic(key)
        return self.subtonic7(key)


DEFAULT_BUILDER = ChordBuilder()

triads = DEFAULT_BUILDER.triads
sevenths = DEFAULT_BUILDER.sevenths

tonic = DEFAULT_BUILDER.tonic
tonic7 = DEFAULT_BUILDER.tonic7
supertonic = DEFAULT_BUILDER.supertonic
supertonic7 = DEFAULT_BUILDER.supertonic7
mediant = DEFAULT_BUILDER.mediant
mediant7 = DEFAULT_BUILDER.mediant7
subdominant = DEFAULT_BUILDER.subdominant
subdominant7 = DEFAULT_BUILDER.subdominant7
dominant = DEFAULT_BUILDER.dominant
dominant7 = DEFAULT_BUILDER.dominant7
submediant = DEFAULT_BUILDER.submediant
submediant7 = DEFAULT_BUILDER.submediant7
subtonic = DEFAULT_BUILDER.subtonic
subtonic7 = DEFAULT_BUILDER.subtonic7

I = DEFAULT_BUILDER.I
I7 = DEFAULT_BUILDER.I7
ii = DEFAULT_BUILDER.ii
II = DEFAULT_BUILDER.II
ii7 = DEFAULT_BUILDER.ii7
II7 = DEFAULT_BUILDER.II7
iii = DEFAULT_BUILDER.iii
III = DEFAULT_BUILDER.III
iii7 = DEFAULT_BUILDER.iii7
III7 = DEFAULT_BUILDER.III7
IV = DEFAULT_BUILDER.IV
IV7 = DEFAULT_BUILDER.IV7
V = DEFAULT_BUILDER.V
V7 = DEFAULT_BUILDER.V7
vi = DEFAULT_BUILDER.vi
VI = DEFAULT_BUILDER.VI
vi7 = DEFAULT_BUILDER.vi7
VI7 = DEFAULT_BUILDER.VI7
vii = DEFAULT_BUILDER.vii
VII = DEFAULT_BUILDER.VII
vii7 = DEFAULT_BUILDER.vii7
VII7 = DEFAULT_BUILDER.VII7
