#!/usr/bin/env python3
"""
Test suite for score aggregation and rounding.
"""

import unittest

from carematch.scorer.aggregator import aggregate
from carematch.scorer.models import MatchBreakdown, ScoreComponent
from carematch.utils import round_half_up


def make_breakdown(**scores):
    maxima = dict(age_range=15, modality=10, activities=15, regime=10, availability=15,
                  children_count=10, seal=10, reviews=10, distance_bonus=3, budget_bonus=2)
    return MatchBreakdown(**{
        name: ScoreComponent(score=scores.get(name, 0.0), max_score=float(m))
        for name, m in maxima.items()
    })


class TestRoundHalfUp(unittest.TestCase):

    def test_ties_round_up(self):
        self.assertEqual(round_half_up(0.5), 1.0)
        self.assertEqual(round_half_up(2.5), 3.0)
        self.assertEqual(round_half_up(84.5), 85.0)

    def test_decimals(self):
        self.assertEqual(round_half_up(6.665, 2), 6.67)
        self.assertEqual(round_half_up(3.3333333, 2), 3.33)


class TestAggregator(unittest.TestCase):

    def test_subtotals(self):
        print("\n📊 UNIT Test: Fit/trust/bonus sub-totals")
        breakdown = make_breakdown(age_range=15, modality=10, activities=7.5, regime=5,
                                   availability=6, children_count=10, seal=6.67, reviews=7,
                                   distance_bonus=2.55, budget_bonus=1)
        totals = aggregate(breakdown)
        self.assertEqual(totals.fit_score, 53.5)
        self.assertEqual(totals.trust_score, 13.67)
        self.assertEqual(totals.bonus_score, 3.55)
        self.assertEqual(totals.score, 71)
        print(f"  ✓ fit={totals.fit_score} trust={totals.trust_score} bonus={totals.bonus_score} -> {totals.score}")

    def test_half_point_rounds_up(self):
        totals = aggregate(make_breakdown(age_range=12.5))
        self.assertEqual(totals.score, 13)

    def test_all_zero(self):
        totals = aggregate(make_breakdown())
        self.assertEqual(totals.score, 0)
        self.assertIsInstance(totals.score, int)

    def test_all_full_is_100(self):
        breakdown = make_breakdown(age_range=15, modality=10, activities=15, regime=10, availability=15,
                                   children_count=10, seal=10, reviews=10, distance_bonus=3, budget_bonus=2)
        self.assertEqual(breakdown.max_total, 100.0)
        self.assertEqual(aggregate(breakdown).score, 100)


if __name__ == '__main__':
    unittest.main()
