import re

# ── Notes ─────────────────────────────────────────────────────────────────────

# music21 spells at most quadruple sharps and flats.
MAX_ACCIDENTALS = 4
# One letter followed by up to MAX_ACCIDENTALS sharps OR flats.
NOTE_PATTERN = re.compile(r"^[A-G](#{0,4}|b{0,4})$")
NOTE_LETTERS = "CDEFGAB"
# Root at the start of a chord name, e.g. "C#" in "C#m7" or "Bb" in "Bb7#9".
ROOT_PATTERN = re.compile(r"^([A-G](?:#+|b+)?)")

# ── Keys ──────────────────────────────────────────────────────────────────────

# Circle of fifths, seven flats to seven sharps.
MAJOR_KEYS: tuple[str, ...] = (
    "Cb", "Gb", "Db", "Ab", "Eb", "Bb", "F",
    "C",
    "G", "D", "A", "E", "B", "F#", "C#",
)
# Relative minors of MAJOR_KEYS, in the same order.
MINOR_KEYS: tuple[str, ...] = (
    "ab", "eb", "bb", "f", "c", "g", "d",
    "a",
    "e", "b", "f#", "c#", "g#", "d#", "a#",
)

# ── Roman numerals ────────────────────────────────────────────────────────────

# Scale-degree index → (harmonic function, roman numeral)
_DEGREE_NAMES: dict[int, tuple[str, str]] = {
    0: ("tonic",       "I"),
    1: ("supertonic",  "ii"),
    2: ("mediant",     "iii"),
    3: ("subdominant", "IV"),
    4: ("dominant",    "V"),
    5: ("submediant",  "vi"),
    6: ("subtonic",    "vii"),
}

# vii7 historically resolved to the subtonic *triad*; keep that unless a
# ChordBuilder is constructed with legacy_vii7=False.
LEGACY_VII7_ALIAS = True
