import unittest
from decimal import Decimal

import numpy as np

from ahp_engine import criteria as edits
from ahp_engine.core import Alternative
from ahp_engine.pairwise import PairwiseMatrix
from ahp_engine.weights import derive_weights

CRITERIA = ("Cost", "Speed", "Comfort", "Safety")
RATIOS = {
    (0, 1): 3.0,
    (0, 2): 5.0,
    (0, 3): 0.5,
    (1, 2): 2.0,
    (1, 3): 0.25,
    (2, 3): 1.0 / 7.0,
}
ALTERNATIVES = (
    Alternative("Car", [1.0, 2.0, 3.0, 4.0]),
    Alternative("Bike", [5.0, 6.0, 7.0, 8.0]),
)


class TestRemoveCriterion(unittest.TestCase):
    def test_reindexes_ratios_and_scores(self) -> None:
        names, ratios, alternatives = edits.remove_criterion(CRITERIA, RATIOS, ALTERNATIVES, 1)
        self.assertEqual(names, ("Cost", "Comfort", "Safety"))
        self.assertEqual(ratios, {(0, 1): 5.0, (0, 2): 0.5, (1, 2): 1.0 / 7.0})
        self.assertEqual(alternatives[0].scores, (1.0, 3.0, 4.0))
        self.assertEqual(alternatives[1].scores, (5.0, 7.0, 8.0))

    def test_matches_weights_derived_without_the_criterion(self) -> None:
        for removed in range(len(CRITERIA)):
            _, ratios, _ = edits.remove_criterion(CRITERIA, RATIOS, ALTERNATIVES, removed)
            kept = [idx for idx in range(len(CRITERIA)) if idx != removed]
            direct = {
                (kept.index(i), kept.index(j)): ratio
                for (i, j), ratio in RATIOS.items()
                if removed not in (i, j)
            }
            self.assertEqual(
                derive_weights(PairwiseMatrix(3, ratios)),
                derive_weights(PairwiseMatrix(3, direct)),
            )

    def test_last_criterion_cannot_be_removed(self) -> None:
        with self.assertRaises(ValueError):
            edits.remove_criterion(("Only",), {}, (Alternative("A", [1.0]),), 0)

    def test_out_of_range(self) -> None:
        with self.assertRaises(IndexError):
            edits.remove_criterion(CRITERIA, RATIOS, ALTERNATIVES, 4)

    def test_inputs_are_untouched(self) -> None:
        ratios = dict(RATIOS)
        edits.remove_criterion(CRITERIA, ratios, ALTERNATIVES, 0)
        self.assertEqual(ratios, RATIOS)
        self.assertEqual(len(ALTERNATIVES[0].scores), 4)


class TestAddCriterion(unittest.TestCase):
    def test_new_pairs_and_scores_default(self) -> None:
        names, ratios, alternatives = edits.add_criterion(CRITERIA, RATIOS, ALTERNATIVES, "Range")
        self.assertEqual(names[-1], "Range")
        for i in range(4):
            self.assertEqual(ratios[(i, 4)], 1.0)
        self.assertEqual(ratios[(0, 1)], 3.0)
        self.assertEqual(alternatives[0].scores, (1.0, 2.0, 3.0, 4.0, 1.0))

    def test_custom_default_score(self) -> None:
        _, _, alternatives = edits.add_criterion(CRITERIA, RATIOS, ALTERNATIVES, "Range", default_score=0.0)
        self.assertEqual(alternatives[1].scores[-1], 0.0)


class TestAlternativeEdits(unittest.TestCase):
    def test_add_with_default_scores(self) -> None:
        alternatives = edits.add_alternative(ALTERNATIVES, "Train", 4)
        self.assertEqual(alternatives[-1], Alternative("Train", [1.0, 1.0, 1.0, 1.0]))

    def test_remove_and_rename(self) -> None:
        alternatives = edits.remove_alternative(ALTERNATIVES, 0)
        self.assertEqual([alt.name for alt in alternatives], ["Bike"])
        renamed = edits.rename_alternative(ALTERNATIVES, 1, "E-bike")
        self.assertEqual(renamed[1].name, "E-bike")
        self.assertEqual(renamed[1].scores, ALTERNATIVES[1].scores)

    def test_set_score(self) -> None:
        alternatives = edits.set_score(ALTERNATIVES, 0, 2, 9.5)
        self.assertEqual(alternatives[0].scores, (1.0, 2.0, 9.5, 4.0))
        cleared = edits.set_score(ALTERNATIVES, 0, 2, float("nan"))
        self.assertEqual(cleared[0].scores[2], 0.0)
        with self.assertRaises(IndexError):
            edits.set_score(ALTERNATIVES, 0, 4, 1.0)

    def test_set_score_accepts_any_numeric_type(self) -> None:
        for value, expected in [
            (np.int64(7), 7.0),
            (np.float32(7.5), 7.5),
            (Decimal("2.25"), 2.25),
            ("5", 5.0),
        ]:
            alternatives = edits.set_score(ALTERNATIVES, 1, 0, value)
            self.assertEqual(alternatives[1].scores[0], expected)

    def test_set_score_clears_non_numeric(self) -> None:
        for value in ("abc", None, float("inf")):
            alternatives = edits.set_score(ALTERNATIVES, 1, 0, value)
            self.assertEqual(alternatives[1].scores[0], 0.0)

    def test_rename_criterion(self) -> None:
        self.assertEqual(edits.rename_criterion(CRITERIA, 0, "Price")[0], "Price")


if __name__ == "__main__":
    unittest.main()
