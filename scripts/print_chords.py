#!/usr/bin/env python3
"""
scripts/print_chords.py — print the diatonic chords of a key.

For each scale degree prints the roman numeral, harmonic function and the
triad (or seventh chord) built on it:

    [Degree]  [Function]  →  [Notes]

Optionally also builds chords from shorthand names.

Usage:
    python scripts/print_chords.py --key C
    python scripts/print_chords.py --key Fm --sevenths --verbose
    python scripts/print_chords.py --key G --chord D7 Em7 CM7
"""
import os
import sys
import argparse
import logging

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from chordbuilder.builder import ChordBuilder
from chordbuilder.constants import _DEGREE_NAMES
from chordbuilder.diatonic import parse_key
from chordbuilder.exceptions import ChordBuilderError
from chordbuilder.shorthand import describe, from_shorthand

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
GREEN = "\033[92m"
YELL  = "\033[93m"
RED   = "\033[91m"
RESET = "\033[0m"

# Highlight the primary chords
_PRIMARY = {"I", "IV", "V"}


def print_key_table(chord_builder: ChordBuilder, key: str, sevenths: bool = False) -> None:
    """Print one row per scale degree of key."""
    tonic, mode = parse_key(key)
    table = chord_builder.sevenths(key) if sevenths else chord_builder.triads(key)
    kind = "sevenths" if sevenths else "triads"

    print(f"\n{BOLD}── {CYAN}{tonic} {mode}{RESET}{BOLD}  ({kind}){RESET}")
    print(f"   {'Degree':<7}  {'Function':<12}  Notes")
    print(f"   {'─'*7}  {'─'*12}  {'─'*20}")

    for index, chord in enumerate(table):
        function, numeral = _DEGREE_NAMES[index]
        if sevenths:
            numeral += "7"
        if index == 0:
            deg_col = f"{GREEN}{BOLD}{numeral:<7}{RESET}"
        elif numeral.rstrip("7") in _PRIMARY:
            deg_col = f"{YELL}{numeral:<7}{RESET}"
        else:
            deg_col = f"{numeral:<7}"
        print(f"   {deg_col}  {function:<12}  {' '.join(chord)}")


def print_shorthand(names: list[str]) -> int:
    """Print each chord name with its description and notes. Returns the number of failures."""
    failures = 0
    print(f"\n{BOLD}── Chords{RESET}")
    for name in names:
        try:
            notes = from_shorthand(name)
            meaning = describe(name)
        except ChordBuilderError as e:
            print(f"   {RED}{name:<10}  {e}{RESET}")
            failures += 1
            continue
        print(f"   {name:<10}  {meaning:<32}  {' '.join(notes)}")
    return failures


def main():
    parser = argparse.ArgumentParser(description="Print the diatonic chords of a key.")
    parser.add_argument("--key", type=str, default="C",
                        help='Key name, e.g. "C", "Bb", "Fm" or "f#" (default: C)')
    parser.add_argument("--sevenths", action="store_true",
                        help="Show seventh chords instead of triads")
    parser.add_argument("--chord", nargs="*", default=[],
                        help='Shorthand chord names to build, e.g. "Cm7" "G7b9"')
    parser.add_argument("--fix-vii7", action="store_true",
                        help="Resolve vii7 to the subtonic seventh chord")
    parser.add_argument("--verbose", action="store_true",
                        help="Log cache population and shorthand lookups")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    chord_builder = ChordBuilder(legacy_vii7=not args.fix_vii7)
    try:
        print_key_table(chord_builder, args.key, sevenths=args.sevenths)
    except ChordBuilderError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"\n   vii7 → {' '.join(chord_builder.vii7(args.key))}")

    if args.chord and print_shorthand(args.chord):
        sys.exit(1)


if __name__ == "__main__":
    main()
