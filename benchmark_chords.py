import timeit
from chordbuilder.builder import ChordBuilder


def run_benchmark():
    # Warmup (music21 imports lazily on first use)
    ChordBuilder().triads("C")

    setup = """
from chordbuilder.builder import ChordBuilder, triads, sevenths
from chordbuilder.chords import dominant_thirteenth, hendrix_chord
from chordbuilder.shorthand import from_shorthand
triads("C"); sevenths("G")
    """

    cached = """
triads("C")
sevenths("G")
    """

    uncached = """
ChordBuilder().triads("Eb")
    """

    absolute = """
dominant_thirteenth("F#")
hendrix_chord("Bb")
from_shorthand("Cm7b5")
    """

    for label, stmt, number in [
        ("cached diatonic tables", cached, 10000),
        ("uncached diatonic table", uncached, 20),
        ("absolute builders", absolute, 200),
    ]:
        times = timeit.repeat(stmt, setup, number=number, repeat=5)
        print(f"{label:<26} (min of 5 runs, {number} loops each): {min(times):.5f} seconds")


if __name__ == '__main__':
    run_benchmark()
