"""
Minimal test runner using only the standard library.
Run: python3 run_tests.py
"""

import sys
import unittest
from pathlib import Path

# Add src to path so cikmov is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))


# ── Grammar Tests ─────────────────────────────────────────────

class TestGrammar(unittest.TestCase):
    def test_valid(self):
        from cikmov.postcode import is_valid_compact
        for pc in ["EC1A1AL", "W1A0AX", "M11AE", "B338TH", "GIR0AA"]:
            self.assertTrue(is_valid_compact(pc), f"Expected valid: {pc}")

    def test_invalid(self):
        from cikmov.postcode import is_valid_compact
        for pc in ["", "EC1A1AI", "ZZ999ZZ", "Q11AA", "B01AA", "EC5A1AA"]:
            self.assertFalse(is_valid_compact(pc), f"Expected invalid: {pc}")

    def test_format(self):
        from cikmov.postcode import format_compact
        self.assertEqual(format_compact("EC1A1AL"), "EC1A 1AL")
        self.assertEqual(format_compact("GIR0AA"), "GIR 0AA")

    def test_format_raises_on_invalid(self):
        from cikmov.exceptions import PostcodeInvalid
        from cikmov.postcode import format_compact
        with self.assertRaises(PostcodeInvalid):
            format_compact("ABCDE")


class TestNormalisation(unittest.TestCase):
    def test_compact(self):
        from cikmov.postcode import compact_from_input
        self.assertEqual(compact_from_input("  wc2h-7lt\t"), "WC2H7LT")

    def test_display(self):
        from cikmov.postcode import display_from_compact
        self.assertEqual(display_from_compact("EC1A1AL"), "EC1A 1AL")
        self.assertEqual(display_from_compact("AB12"), "AB12")


# ── Correction Tests ──────────────────────────────────────────

class TestCandidates(unittest.TestCase):
    def test_area_repair(self):
        from cikmov.candidates import generate_candidates
        self.assertEqual(
            generate_candidates("S011AA"), {"SO11AA": 92, "SL11AA": 89}
        )

    def test_unrepairable(self):
        from cikmov.candidates import generate_candidates
        self.assertEqual(generate_candidates("EC1A1AI"), {})


class TestAnalyse(unittest.TestCase):
    def test_valid(self):
        from cikmov import analyse
        result = analyse("ec1a1al")
        self.assertTrue(result.input_was_valid)
        self.assertEqual(result.applied_postcode, "EC1A 1AL")
        self.assertEqual(result.confidence, 100)

    def test_corrected(self):
        from cikmov import analyse
        result = analyse("EC1A IAL")
        self.assertFalse(result.input_was_valid)
        self.assertEqual(result.applied_postcode, "EC1A 1AL")
        self.assertGreaterEqual(result.confidence, 85)

    def test_rejected(self):
        from cikmov import analyse
        for raw in ["ZZ99 9ZZ", "EC1A 1AI", "!!!!", "123456"]:
            result = analyse(raw)
            self.assertIsNone(result.best_candidate, raw)
            self.assertEqual(result.confidence, 0, raw)

    def test_tie(self):
        from cikmov import analyse
        self.assertIsNone(analyse("W5J 10T").applied_postcode)
        self.assertEqual(analyse("W5J 10T", 79).applied_postcode, "W5J 1DT")

    def test_alternatives_capped(self):
        from cikmov import analyse
        self.assertEqual(len(analyse("8BG GFT", 0).alternatives), 5)

    def test_threshold_validation(self):
        from cikmov import analyse
        from cikmov.exceptions import InvalidThreshold
        with self.assertRaises(InvalidThreshold):
            analyse("EC1A 1AL", 101)


class TestResult(unittest.TestCase):
    def test_invariants(self):
        from cikmov import Result
        from cikmov.exceptions import InvalidResult
        with self.assertRaises(InvalidResult):
            Result(
                input="B01 8TH", normalized_input="B01 8TH",
                input_was_valid=False, best_candidate="BD1 8TH",
                confidence=84, applied_postcode=None,
                alternatives=("BD1 8TH",),
            )

    def test_to_dict(self):
        from cikmov import analyse
        d = analyse("B01 8TH").to_dict()
        self.assertEqual(d["best_candidate"], "BD1 8TH")
        self.assertEqual(d["alternatives"], ["BL1 8TH"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
