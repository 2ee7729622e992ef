import threading
import unittest
from unittest.mock import patch
from chordbuilder import builder
from chordbuilder.builder import ChordBuilder, DEFAULT_BUILDER, triad, seventh
from chordbuilder.exceptions import InvalidKeyError, UnknownNoteError

_C_TRIADS = [
    ["C", "E", "G"], ["D", "F", "A"], ["E", "G", "B"], ["F", "A", "C"],
    ["G", "B", "D"], ["A", "C", "E"], ["B", "D", "F"],
]
_C_SEVENTHS = [
    ["C", "E", "G", "B"], ["D", "F", "A", "C"], ["E", "G", "B", "D"],
    ["F", "A", "C", "E"], ["G", "B", "D", "F"], ["A", "C", "E", "G"],
    ["B", "D", "F", "A"],
]


class TestDiatonicChords(unittest.TestCase):
    def test_triad(self):
        self.assertEqual(triad("E", "C"), ["E", "G", "B"])
        self.assertEqual(triad("E", "B"), ["E", "G#", "B"])
        self.assertEqual(triad("F", "Fm"), ["F", "Ab", "C"])

    def test_seventh(self):
        self.assertEqual(seventh("C", "C"), ["C", "E", "G", "B"])
        self.assertEqual(seventh("G", "C"), ["G", "B", "D", "F"])

    def test_triads_and_sevenths(self):
        b = ChordBuilder()
        self.assertEqual(b.triads("C"), _C_TRIADS)
        self.assertEqual(b.sevenths("C"), _C_SEVENTHS)

    def test_minor_key(self):
        b = ChordBuilder()
        self.assertEqual(b.tonic("a"), ["A", "C", "E"])
        self.assertEqual(b.dominant("Am"), ["E", "G", "B"])
        self.assertEqual(b.subtonic7("Fm"), ["Eb", "G", "Bb", "Db"])


class TestCaching(unittest.TestCase):
    def test_same_instance_for_same_key(self):
        b = ChordBuilder()
        first = b.triads("C")
        self.assertIs(b.triads("C"), first)
        self.assertIs(b.sevenths("C"), b.sevenths("C"))

    def test_interleaved_keys_do_not_disturb_entries(self):
        b = ChordBuilder()
        c_triads = b.triads("C")
        d_triads = b.triads("D")
        self.assertIs(b.triads("C"), c_triads)
        self.assertEqual(b.triads("C"), _C_TRIADS)
        self.assertEqual(d_triads[0], ["D", "F#", "A"])

    def test_caches_are_separate(self):
        b = ChordBuilder()
        b.triads("C")
        self.assertIn("C", b.triads_cache)
        self.assertNotIn("C", b.sevenths_cache)

    def test_second_call_does_not_recompute(self):
        b = ChordBuilder()
        b.triads("G")
        with patch("chordbuilder.builder.get_notes") as mock_get_notes:
            self.assertEqual(b.triads("G")[0], ["G", "B", "D"])
            mock_get_notes.assert_not_called()

    def test_raw_key_strings(self):
        b = ChordBuilder()
        self.assertEqual(b.triads("Am"), b.triads("a"))
        self.assertIsNot(b.triads("Am"), b.triads("a"))

    def test_invalid_key_propagates_and_is_not_cached(self):
        b = ChordBuilder()
        with self.assertRaises(InvalidKeyError):
            b.triads("H")
        self.assertNotIn("H", b.triads_cache)
        with self.assertRaises(InvalidKeyError):
            b.tonic7("E#")

    def test_invalid_note_propagates(self):
        with self.assertRaises(UnknownNoteError):
            triad("X", "C")

    def test_threads_share_one_table(self):
        b = ChordBuilder()
        results = []

        def worker():
            results.append(b.sevenths("Eb"))

        threads = [threading.Thread(target=worker) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        for value in results:
            self.assertIs(value, results[0])
        self.assertEqual(results[0][0], ["Eb", "G", "Bb", "D"])


class TestHarmonicFunctions(unittest.TestCase):
    def test_triads_in_c(self):
        self.assertEqual(builder.tonic("C"), ["C", "E", "G"])
        self.assertEqual(builder.supertonic("C"), ["D", "F", "A"])
        self.assertEqual(builder.mediant("C"), ["E", "G", "B"])
        self.assertEqual(builder.subdominant("C"), ["F", "A", "C"])
        self.assertEqual(builder.dominant("C"), ["G", "B", "D"])
        self.assertEqual(builder.submediant("C"), ["A", "C", "E"])
        self.assertEqual(builder.subtonic("C"), ["B", "D", "F"])

    def test_sevenths_in_c(self):
        self.assertEqual(builder.tonic7("C"), _C_SEVENTHS[0])
        self.assertEqual(builder.supertonic7("C"), _C_SEVENTHS[1])
        self.assertEqual(builder.mediant7("C"), _C_SEVENTHS[2])
        self.assertEqual(builder.subdominant7("C"), _C_SEVENTHS[3])
        self.assertEqual(builder.dominant7("C"), _C_SEVENTHS[4])
        self.assertEqual(builder.submediant7("C"), _C_SEVENTHS[5])
        self.assertEqual(builder.subtonic7("C"), _C_SEVENTHS[6])

    def test_accessors_index_the_cached_table(self):
        self.assertIs(builder.dominant("C"), builder.triads("C")[4])
        self.assertIs(builder.dominant7("C"), builder.sevenths("C")[4])

    def test_module_functions_use_default_builder(self):
        self.assertIs(builder.triads("F"), DEFAULT_BUILDER.triads("F"))


class TestRomanNumerals(unittest.TestCase):
    def test_aliases(self):
        self.assertEqual(builder.I("C"), builder.tonic("C"))
        self.assertEqual(builder.I7("C"), builder.tonic7("C"))
        self.assertEqual(builder.IV("C"), builder.subdominant("C"))
        self.assertEqual(builder.IV7("C"), builder.subdominant7("C"))
        self.assertEqual(builder.V("C"), builder.dominant("C"))
        self.assertEqual(builder.V7("C"), builder.dominant7("C"))
        self.assertEqual(builder.VII7("C"), builder.subtonic7("C"))

    def test_case_is_not_significant(self):
        pairs = [
            (builder.ii, builder.II), (builder.ii7, builder.II7),
            (builder.iii, builder.III), (builder.iii7, builder.III7),
            (builder.vi, builder.VI), (builder.vi7, builder.VI7),
            (builder.vii, builder.VII),
        ]
        for key in ["C", "G", "Fm"]:
            for lower, upper in pairs:
                self.assertEqual(lower(key), upper(key))

    def test_lower_case_maps_to_function(self):
        self.assertEqual(builder.ii("C"), ["D", "F", "A"])
        self.assertEqual(builder.iii7("C"), ["E", "G", "B", "D"])
        self.assertEqual(builder.vi7("C"), ["A", "C", "E", "G"])
        self.assertEqual(builder.vii("C"), ["B", "D", "F"])

    def test_vii7_legacy_returns_triad(self):
        # Historical behaviour: vii7 is the subtonic triad, unlike VII7
        self.assertEqual(builder.vii7("C"), builder.subtonic("C"))
        self.assertEqual(len(builder.vii7("C")), 3)
        self.assertNotEqual(builder.vii7("C"), builder.VII7("C"))

    def test_vii7_corrected(self):
        b = ChordBuilder(legacy_vii7=False)
        self.assertEqual(b.vii7("C"), ["B", "D", "F", "A"])
        self.assertEqual(b.vii7("C"), b.VII7("C"))


if __name__ == "__main__":
    unittest.main()
