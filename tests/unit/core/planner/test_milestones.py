#!/usr/bin/env python3
"""
Unit tests for the preparation planner.
"""

import unittest
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from core.planner import (
    calculate_progress,
    daily_recommendations,
    days_between,
    generate_milestones,
    next_milestone,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@dataclass
class Milestone:
    title: str
    target_date: datetime
    completed: bool = False
    completed_at: Optional[datetime] = None


def offsets(plans):
    return [(p.title, (p.target_date - NOW).days) for p in plans]


class TestDaysBetween(unittest.TestCase):

    def test_partial_days_round_up(self):
        self.assertEqual(days_between(NOW, NOW + timedelta(days=29, hours=1)), 30)
        self.assertEqual(days_between(NOW, NOW + timedelta(days=30)), 30)
        self.assertEqual(days_between(NOW, NOW + timedelta(minutes=1)), 1)

    def test_naive_datetimes_are_utc(self):
        naive = (NOW + timedelta(days=3)).replace(tzinfo=None)
        self.assertEqual(days_between(NOW, naive), 3)


class TestGenerateMilestones(unittest.TestCase):
    """Tests for generate_milestones."""

    def test_thirty_days_or_more(self):
        plans = generate_milestones(30, "Google", NOW)
        self.assertEqual(offsets(plans), [
            ("Foundation Building", 7),
            ("Practice Phase", 20),
            ("Mock Interviews", 25),
            ("Interview Day Prep", 29),
        ])
        self.assertEqual(plans[2].description, "Complete 5 Google-specific mock interviews")

    def test_two_to_four_weeks(self):
        for days in (14, 29):
            with self.subTest(days=days):
                plans = generate_milestones(days, "Google", NOW)
                self.assertEqual(offsets(plans), [
                    ("Intensive Practice", 7),
                    ("Company Research", 10),
                    ("Interview Day Prep", days - 1),
                ])
                self.assertEqual(plans[1].description, "Study Google interview patterns")

    def test_one_to_two_weeks(self):
        for days in (7, 13):
            with self.subTest(days=days):
                self.assertEqual(offsets(generate_milestones(days, "Google", NOW)), [
                    ("Focused Practice", 3),
                    ("Final Review", 5),
                    ("Interview Day Prep", days - 1),
                ])

    def test_under_a_week(self):
        self.assertEqual(offsets(generate_milestones(6, "Google", NOW)), [
            ("Crash Course", 2),
            ("Interview Day Prep", 5),
        ])
        self.assertEqual(offsets(generate_milestones(1, "Google", NOW)), [
            ("Crash Course", 2),
            ("Interview Day Prep", 0),
        ])


class TestDailyRecommendations(unittest.TestCase):

    def test_buckets(self):
        self.assertEqual(daily_recommendations(15, "Google")[0], "Complete 1 practice interview")
        self.assertIn("Review Google interview questions", daily_recommendations(14, "Google"))
        self.assertIn("Review Google interview questions", daily_recommendations(8, "Google"))
        self.assertIn("Study Google culture and values", daily_recommendations(7, "Google"))
        self.assertIn("Study Google culture and values", daily_recommendations(4, "Google"))
        self.assertEqual(daily_recommendations(3, "Google")[0], "Light practice only")
        self.assertEqual(daily_recommendations(-2, "Google")[0], "Light practice only")

    def test_four_items_each(self):
        for days in (20, 10, 5, 1):
            self.assertEqual(len(daily_recommendations(days, "Stripe")), 4)


class TestProgress(unittest.TestCase):

    def _milestones(self, completed_flags):
        return [
            Milestone(title=f"m{i}", target_date=NOW + timedelta(days=i), completed=flag)
            for i, flag in enumerate(completed_flags)
        ]

    def test_percentages(self):
        self.assertEqual(calculate_progress([]), 0)
        self.assertEqual(calculate_progress(self._milestones([False, False])), 0)
        self.assertEqual(calculate_progress(self._milestones([True, False, False])), 33)
        self.assertEqual(calculate_progress(self._milestones([True, True, False])), 67)
        self.assertEqual(calculate_progress(self._milestones([True] + [False] * 7)), 13)
        self.assertEqual(calculate_progress(self._milestones([True, True])), 100)

    def test_next_milestone_is_earliest_incomplete(self):
        milestones = [
            Milestone("late", NOW + timedelta(days=9)),
            Milestone("done", NOW + timedelta(days=1), completed=True),
            Milestone("soon", NOW + timedelta(days=3)),
        ]
        self.assertEqual(next_milestone(milestones).title, "soon")

    def test_no_next_milestone_when_all_done(self):
        self.assertIsNone(next_milestone([Milestone("done", NOW, completed=True)]))


if __name__ == '__main__':
    unittest.main()
