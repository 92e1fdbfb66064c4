#!/usr/bin/env python3
"""
Unit tests for the company fit scoring engine.
"""

import unittest

from core.config_loader import FitConfig
from core.fit.fit_score import (
    compute_fit,
    readiness_for,
    category_fit,
    partition_by_category,
    COMPANY_NOT_AVAILABLE,
)
from core.fit.models import CompanyProfile, HiringBar, InterviewSample, ReadinessLevel


def sample(interview_type, score, company="Google"):
    return InterviewSample(interview_type=interview_type, overall_score=score, target_company=company)


GOOGLE = CompanyProfile(
    name="Google",
    hiring_bar=HiringBar(technical=80, behavioral=70, system_design=80, overall=78),
    acceptance_rate=20,
    difficulty_rating=9,
)


class TestComputeFit(unittest.TestCase):
    """Tests for compute_fit."""

    def test_mixed_history(self):
        """Category means are compared with the bar; fit is the mean of category fits."""
        history = [
            sample("technical", 80),
            sample("technical", 90),
            sample("behavioral", 70),
            sample("system-design", 60),
        ]
        fit = compute_fit(history, GOOGLE)

        self.assertEqual(fit.company, "Google")
        self.assertEqual(fit.scores, {"technical": 85, "behavioral": 70, "system_design": 60})
        self.assertEqual(fit.gaps, {"technical": -5, "behavioral": 0, "system_design": 20})
        # (95 + 100 + 80) / 3 = 91.67
        self.assertEqual(fit.fit_score, 92)
        self.assertEqual(fit.readiness_level, ReadinessLevel.EXCELLENT)
        # 92 * 20 / 100 = 18.4
        self.assertEqual(fit.success_probability, 18)
        self.assertEqual(fit.hiring_bar["system_design"], 80)
        self.assertIsNone(fit.analysis)

    def test_empty_history_uses_zero_means(self):
        company = CompanyProfile(name="Default")
        fit = compute_fit([], company)

        self.assertEqual(fit.scores, {"technical": 0, "behavioral": 0, "system_design": 0})
        # fits 30, 35, 25
        self.assertEqual(fit.fit_score, 30)
        self.assertEqual(fit.readiness_level, ReadinessLevel.NOT_READY)
        self.assertEqual(fit.success_probability, 15)

    def test_half_values_round_up(self):
        """98.5 rounds to 99 and 49.5 to 50, not to the nearest even number."""
        company = CompanyProfile(name="Default")
        history = [
            sample("technical", 70),
            sample("behavioral", 65),
            sample("system-design", 70),
            sample("system-design", 71),
        ]
        fit = compute_fit(history, company)

        self.assertEqual(fit.fit_score, 99)
        self.assertEqual(fit.success_probability, 50)
        self.assertEqual(fit.gaps["system_design"], 5)

    def test_overperformance_is_penalized(self):
        company = CompanyProfile(name="Default", hiring_bar=HiringBar(technical=70, behavioral=70, system_design=70))
        history = [
            sample("technical", 100),
            sample("behavioral", 70),
            sample("system-design", 70),
        ]
        fit = compute_fit(history, company)
        self.assertEqual(fit.fit_score, 90)

        lenient = compute_fit(history, company, FitConfig(penalize_overperformance=False))
        self.assertEqual(lenient.fit_score, 100)

    def test_missing_score_counts_as_zero(self):
        history = [sample("technical", None), sample("technical", 80)]
        fit = compute_fit(history, GOOGLE)
        self.assertEqual(fit.scores["technical"], 40)

    def test_unknown_interview_type_is_ignored(self):
        history = [sample("mixed", 100), sample("technical", 80)]
        buckets = partition_by_category(history)
        self.assertEqual(buckets["technical"], [80.0])
        self.assertEqual(buckets["behavioral"], [])

    def test_missing_company_gives_degenerate_result(self):
        fit = compute_fit([sample("technical", 90)], None, company_name="Acme")

        self.assertEqual(fit.company, "Acme")
        self.assertEqual(fit.fit_score, 0)
        self.assertEqual(fit.success_probability, 0)
        self.assertEqual(fit.readiness_level, ReadinessLevel.NOT_READY)
        self.assertEqual(fit.analysis, COMPANY_NOT_AVAILABLE)

    def test_deterministic(self):
        history = [sample("technical", 77), sample("behavioral", 64)]
        self.assertEqual(compute_fit(history, GOOGLE), compute_fit(history, GOOGLE))


class TestReadiness(unittest.TestCase):
    """Tests for readiness level thresholds."""

    def test_threshold_boundaries(self):
        cases = [
            (100, ReadinessLevel.EXCELLENT),
            (85, ReadinessLevel.EXCELLENT),
            (84, ReadinessLevel.GOOD),
            (70, ReadinessLevel.GOOD),
            (69, ReadinessLevel.MODERATE),
            (55, ReadinessLevel.MODERATE),
            (54, ReadinessLevel.NEEDS_WORK),
            (40, ReadinessLevel.NEEDS_WORK),
            (39, ReadinessLevel.NOT_READY),
            (0, ReadinessLevel.NOT_READY),
        ]
        for score, expected in cases:
            with self.subTest(score=score):
                self.assertEqual(readiness_for(score), expected)

    def test_configured_thresholds(self):
        config = FitConfig(excellent_threshold=95)
        self.assertEqual(readiness_for(90, config), ReadinessLevel.GOOD)


class TestCategoryFit(unittest.TestCase):

    def test_floor_at_zero(self):
        self.assertEqual(category_fit(120), 0.0)
        self.assertEqual(category_fit(-120), 0.0)

    def test_symmetric(self):
        self.assertEqual(category_fit(10), category_fit(-10))


if __name__ == '__main__':
    unittest.main()
