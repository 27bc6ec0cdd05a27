import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_analyzer.keywords import KeywordExtractor  # noqa: E402
from ats_analyzer.schemas import Breakdown, ScoreResult  # noqa: E402
from ats_analyzer.scoring import SCORE_WEIGHTS, compute_insights, compute_score, round_half_up  # noqa: E402

RESUME = """Jane Doe
jane.doe@example.com | (555) 123-4567

Summary
Backend engineer who developed Python services and managed AWS infrastructure for retail clients.

Experience
Senior Engineer, Acme Corp, Jan 2019 - Dec 2023
Developed Python APIs on AWS and reduced 40% of latency. Led a team of 5+ engineers.
Implemented Docker based delivery pipelines and optimized SQL queries for reporting.

Education
BSc Computer Science, 2018

Skills
Python, SQL, Docker, AWS, Git
"""

JOB = "We are hiring a backend engineer with Python, SQL, Docker and AWS experience. Kubernetes is a plus."


class NoNouns:
    def nouns(self, text):
        return []


class ComputeScoreTests(unittest.TestCase):
    def setUp(self):
        self.extractor = KeywordExtractor(NoNouns())

    def test_weights_sum_to_one(self):
        self.assertAlmostEqual(sum(SCORE_WEIGHTS.values()), 1.0)

    def test_scores_stay_in_range(self):
        result = compute_score(RESUME, JOB, extractor=self.extractor)
        self.assertGreaterEqual(result.total_score, 0)
        self.assertLessEqual(result.total_score, 100)
        for value in result.breakdown.model_dump().values():
            self.assertGreaterEqual(value, 0)
            self.assertLessEqual(value, 100)
        self.assertGreater(result.total_score, 0)

    def test_degenerate_resumes_stay_in_range(self):
        resumes = {
            "empty": "",
            "tab_heavy": "\t" * 50 + " resume",
            "glyph_heavy": "\u2605" * 40 + " resume",
            "keyword_stuffed": "python " * 200,
        }
        for label, resume in resumes.items():
            with self.subTest(resume=label):
                result = compute_score(resume, JOB, extractor=self.extractor)
                self.assertTrue(0 <= result.total_score <= 100)
                for value in result.breakdown.model_dump().values():
                    self.assertTrue(0 <= value <= 100)

    def test_repeated_calls_are_identical(self):
        first = compute_score(RESUME, JOB, extractor=self.extractor)
        second = compute_score(RESUME, JOB, extractor=self.extractor)
        self.assertEqual(first, second)

    def test_total_uses_unrounded_weighted_sum(self):
        sub_scores = {
            "keyword_match": 63.0,
            "formatting": 80.0,
            "readability": 100.0,
            "structure": 70.0,
            "keyword_balance": 100.0,
        }
        with patch("ats_analyzer.scoring.aggregator.compute_sub_scores", return_value=sub_scores):
            result = compute_score(RESUME, JOB, extractor=self.extractor)
        self.assertEqual(result.total_score, 77)
        self.assertEqual(result.breakdown.keyword_match, 63)

    def test_breakdown_rounds_half_up(self):
        sub_scores = {
            "keyword_match": 62.5,
            "formatting": 0.0,
            "readability": 0.0,
            "structure": 0.0,
            "keyword_balance": 0.0,
        }
        with patch("ats_analyzer.scoring.aggregator.compute_sub_scores", return_value=sub_scores):
            result = compute_score(RESUME, JOB, extractor=self.extractor)
        self.assertEqual(result.breakdown.keyword_match, 63)

    def test_failure_returns_zeroed_result(self):
        with patch(
            "ats_analyzer.scoring.aggregator.compute_sub_scores",
            side_effect=RuntimeError("boom"),
        ):
            with self.assertLogs("ats_analyzer.scoring.aggregator", level="ERROR"):
                result = compute_score(RESUME, JOB, extractor=self.extractor)
        self.assertEqual(result, ScoreResult.zeroed())

    def test_default_extractor_is_used_when_none_given(self):
        with patch(
            "ats_analyzer.scoring.aggregator.get_default_keyword_extractor",
            return_value=self.extractor,
        ) as factory:
            compute_score(RESUME, JOB)
        factory.assert_called_once_with()


class RoundHalfUpTests(unittest.TestCase):
    def test_halves_round_away_from_even(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(62.5), 63)
        self.assertEqual(round_half_up(0.49), 0)


class InsightTests(unittest.TestCase):
    def test_exact_high_thresholds_are_all_strengths(self):
        breakdown = Breakdown(keyword_match=70, formatting=80, readability=75, structure=80, keyword_balance=70)
        insight = compute_insights(breakdown, RESUME, JOB)
        self.assertEqual(len(insight.strengths), 5)
        self.assertEqual(insight.weaknesses, [])
        self.assertEqual(insight.strengths[0], "Excellent keyword alignment with job description")

    def test_below_low_thresholds_are_all_weaknesses(self):
        breakdown = Breakdown(keyword_match=49, formatting=59, readability=59, structure=59, keyword_balance=49)
        insight = compute_insights(breakdown, RESUME, JOB)
        self.assertEqual(insight.strengths, [])
        self.assertEqual(len(insight.weaknesses), 5)
        self.assertEqual(insight.weaknesses[-1], "Adjust keyword usage - either too sparse or stuffed")

    def test_middle_band_produces_nothing(self):
        breakdown = Breakdown(keyword_match=60, formatting=70, readability=70, structure=70, keyword_balance=60)
        insight = compute_insights(breakdown, RESUME, JOB)
        self.assertEqual(insight.strengths, [])
        self.assertEqual(insight.weaknesses, [])

    def test_zeroed_breakdown_lists_every_weakness(self):
        insight = compute_insights(Breakdown.zeroed(), "", "")
        self.assertEqual(len(insight.weaknesses), 5)


if __name__ == "__main__":
    unittest.main()
