#!/usr/bin/env python3
"""
Test suite for display labels.
"""

import unittest

from carematch.matcher import enums
from carematch.matcher.labels import LABELS, join_labels, label_for


class TestLabels(unittest.TestCase):

    def test_every_enum_is_labelled(self):
        enum_classes = [
            enums.AgeRange, enums.Requirement, enums.Modality, enums.Regime,
            enums.RateBucket, enums.DistanceBucket, enums.PetComfort, enums.Activity,
            enums.SpecialNeed, enums.Certification, enums.Gender, enums.Day, enums.Shift,
        ]
        for enum_cls in enum_classes:
            for member in enum_cls:
                with self.subTest(member=member):
                    label = label_for(member)
                    self.assertTrue(label)
                    self.assertNotEqual(label, member.value)
        self.assertEqual(set(LABELS), set(enum_classes))

    def test_task_alias_shares_activity_labels(self):
        self.assertEqual(label_for(enums.Task.COOKING), label_for(enums.Activity.COOKING))

    def test_join_labels_declaration_order(self):
        joined = join_labels({enums.Shift.NIGHT, enums.Shift.MORNING})
        self.assertEqual(joined, "Morning, Night")
        self.assertEqual(join_labels([]), "")


if __name__ == '__main__':
    unittest.main()
