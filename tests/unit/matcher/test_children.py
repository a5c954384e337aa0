#!/usr/bin/env python3
"""
Test suite for child age resolution and special-needs coverage.
"""

import unittest
from datetime import date

from carematch.matcher.children import (
    age_in_months, bucket_for_age, effective_age_range, relevant_children,
    special_needs_covered, uncovered_special_needs,
)
from carematch.matcher.enums import AgeRange, SpecialNeed
from carematch.matcher.models import ChildContext
from tests.mocks.snapshot_factories import (
    AS_OF, TODAY, birth_date_for_age, make_caregiver, make_child, make_job,
)


class TestAgeBuckets(unittest.TestCase):

    def test_bucket_boundaries(self):
        print("\n📊 UNIT Test: Age bucket boundaries")
        cases = [
            (0, AgeRange.NEWBORN),
            (2, AgeRange.NEWBORN),
            (3, AgeRange.BABY),
            (11, AgeRange.BABY),
            (12, AgeRange.TODDLER),
            (35, AgeRange.TODDLER),
            (36, AgeRange.PRESCHOOL),
            (71, AgeRange.PRESCHOOL),
            (72, AgeRange.SCHOOL_AGE),
            (155, AgeRange.SCHOOL_AGE),
            (156, AgeRange.TEENAGER),
            (210, AgeRange.TEENAGER),
        ]
        for months, expected in cases:
            with self.subTest(months=months):
                self.assertEqual(bucket_for_age(months), expected)
        print(f"  ✓ {len(cases)} boundaries checked")

    def test_age_in_months_counts_completed_months(self):
        self.assertEqual(age_in_months(date(2024, 3, 2), TODAY), 24)
        self.assertEqual(age_in_months(date(2024, 3, 3), TODAY), 23)

    def test_born_child_uses_birth_date(self):
        self.assertEqual(effective_age_range(make_child(years=2), AS_OF), AgeRange.TODDLER)
        self.assertEqual(effective_age_range(make_child(years=5), AS_OF), AgeRange.PRESCHOOL)
        self.assertEqual(effective_age_range(make_child(years=0, months=1), AS_OF), AgeRange.NEWBORN)

    def test_unborn_child_is_newborn(self):
        child = ChildContext(id="u", unborn=True, expected_birth_date=date(2026, 6, 1))
        self.assertEqual(effective_age_range(child, AS_OF), AgeRange.NEWBORN)

    def test_unborn_flag_without_expected_date_is_newborn(self):
        child = ChildContext(id="u", unborn=True)
        self.assertEqual(effective_age_range(child, AS_OF), AgeRange.NEWBORN)

    def test_expected_birth_date_in_future_is_newborn(self):
        child = ChildContext(id="u", expected_birth_date=date(2026, 8, 1))
        self.assertEqual(effective_age_range(child, AS_OF), AgeRange.NEWBORN)

    def test_unborn_child_with_past_expected_date_is_excluded(self):
        print("\n📊 UNIT Test: Unborn child whose expected birth date has passed")
        child = ChildContext(id="u", unborn=True, expected_birth_date=date(2025, 1, 1))
        with self.assertLogs('carematch.matcher.children', level='WARNING'):
            self.assertIsNone(effective_age_range(child, AS_OF))
        print("  ✓ Stale prenatal record excluded")

    def test_expected_birth_date_today_is_newborn(self):
        child = ChildContext(id="u", unborn=True, expected_birth_date=TODAY)
        self.assertEqual(effective_age_range(child, AS_OF), AgeRange.NEWBORN)

    def test_expected_birth_date_in_past_is_excluded(self):
        print("\n📊 UNIT Test: Past expected birth date without a birth date")
        child = ChildContext(id="x", expected_birth_date=date(2025, 1, 1))
        with self.assertLogs('carematch.matcher.children', level='WARNING'):
            self.assertIsNone(effective_age_range(child, AS_OF))
        print("  ✓ Child excluded and inconsistency logged")

    def test_nothing_known_is_excluded(self):
        with self.assertLogs('carematch.matcher.children', level='WARNING'):
            self.assertIsNone(effective_age_range(ChildContext(id="x"), AS_OF))

    def test_birth_date_wins_over_unborn_flag(self):
        child = ChildContext(id="b", birth_date=birth_date_for_age(1), unborn=True)
        self.assertEqual(effective_age_range(child, AS_OF), AgeRange.TODDLER)


class TestRelevantChildren(unittest.TestCase):

    def test_only_referenced_children_in_job_order(self):
        children = [make_child("a"), make_child("b"), make_child("c")]
        job = make_job(child_ids=("c", "a"))
        self.assertEqual([c.id for c in relevant_children(job, children)], ["c", "a"])

    def test_no_child_ids_means_all_children(self):
        children = [make_child("a"), make_child("b")]
        job = make_job(child_ids=())
        self.assertEqual([c.id for c in relevant_children(job, children)], ["a", "b"])

    def test_unresolved_ids_are_skipped(self):
        job = make_job(child_ids=("missing",))
        self.assertEqual(relevant_children(job, [make_child("a")]), [])


class TestSpecialNeedsCoverage(unittest.TestCase):

    def test_child_without_needs_is_covered(self):
        self.assertTrue(special_needs_covered(make_child(), make_caregiver()))

    def test_caregiver_without_experience(self):
        child = make_child(has_special_needs=True, special_needs_types=frozenset({SpecialNeed.AUTISM}))
        caregiver = make_caregiver(has_special_needs_experience=False)
        self.assertFalse(special_needs_covered(child, caregiver))
        self.assertEqual(uncovered_special_needs(child, caregiver), {SpecialNeed.AUTISM})

    def test_declared_specialty_covers(self):
        child = make_child(has_special_needs=True, special_needs_types=frozenset({SpecialNeed.AUTISM}))
        caregiver = make_caregiver(
            has_special_needs_experience=True,
            special_needs_specialties=frozenset({SpecialNeed.AUTISM, SpecialNeed.ADHD}),
        )
        self.assertTrue(special_needs_covered(child, caregiver))

    def test_missing_specialty_is_uncovered(self):
        child = make_child(
            has_special_needs=True,
            special_needs_types=frozenset({SpecialNeed.AUTISM, SpecialNeed.DOWN_SYNDROME}),
        )
        caregiver = make_caregiver(
            has_special_needs_experience=True,
            special_needs_specialties=frozenset({SpecialNeed.AUTISM}),
        )
        self.assertFalse(special_needs_covered(child, caregiver))
        self.assertEqual(uncovered_special_needs(child, caregiver), {SpecialNeed.DOWN_SYNDROME})

    def test_child_other_is_accepted_by_any_experience(self):
        child = make_child(has_special_needs=True, special_needs_types=frozenset({SpecialNeed.OTHER}))
        caregiver = make_caregiver(
            has_special_needs_experience=True,
            special_needs_specialties=frozenset({SpecialNeed.ADHD}),
        )
        self.assertTrue(special_needs_covered(child, caregiver))

    def test_caregiver_other_covers_everything(self):
        child = make_child(
            has_special_needs=True,
            special_needs_types=frozenset({SpecialNeed.CEREBRAL_PALSY}),
        )
        caregiver = make_caregiver(
            has_special_needs_experience=True,
            special_needs_specialties=frozenset({SpecialNeed.OTHER}),
        )
        self.assertTrue(special_needs_covered(child, caregiver))


if __name__ == '__main__':
    unittest.main()
