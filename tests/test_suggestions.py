import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_analyzer.keywords import KeywordExtractor, KeywordSet  # noqa: E402
from ats_analyzer.schemas import Breakdown, Suggestion  # noqa: E402
from ats_analyzer.suggestions import (  # noqa: E402
    CompositeSuggestionStrategy,
    RuleBasedSuggestionStrategy,
    RuleContext,
    generate_suggestions,
)
from ats_analyzer.suggestions.rules import (  # noqa: E402
    certifications_rule,
    missing_keywords_rule,
    missing_sections_rule,
    phone_rule,
    skill_gaps_rule,
)

WEAK_RESUME = "★ I me my mine I me my need job"
DEMANDING_JOB = "react python aws certified"


class NoNouns:
    def nouns(self, text):
        return []


class ExplodingStrategy:
    def suggest(self, resume_text, job_text, breakdown):
        raise RuntimeError("strategy down")


class FixedStrategy:
    def __init__(self, suggestions):
        self._suggestions = suggestions

    def suggest(self, resume_text, job_text, breakdown):
        return list(self._suggestions)


def _breakdown(**overrides):
    values = {"keyword_match": 0, "formatting": 0, "readability": 0, "structure": 0, "keyword_balance": 0}
    values.update(overrides)
    return Breakdown(**values)


def _context(resume, job, *, job_keywords=(), **breakdown):
    return RuleContext(
        resume_text=resume,
        job_text=job,
        breakdown=_breakdown(**breakdown),
        job_keywords=KeywordSet.from_terms(job_keywords),
    )


class RuleBasedStrategyTests(unittest.TestCase):
    def setUp(self):
        self.extractor = KeywordExtractor(NoNouns())

    def test_weak_resume_triggers_every_applicable_rule_in_order(self):
        strategy = RuleBasedSuggestionStrategy(self.extractor)
        suggestions = strategy.suggest(WEAK_RESUME, DEMANDING_JOB, _breakdown())
        self.assertEqual(len(suggestions), 17)
        self.assertEqual(
            suggestions[0].message,
            "Add these important keywords from job description: react, python, aws",
        )
        self.assertEqual(suggestions[-1].category, "Certifications")
        self.assertEqual(suggestions[-1].priority, "low")

    def test_generate_suggestions_keeps_first_ten_in_rule_order(self):
        suggestions = generate_suggestions(
            WEAK_RESUME,
            DEMANDING_JOB,
            _breakdown(),
            extractor=self.extractor,
        )
        self.assertEqual(len(suggestions), 10)
        self.assertEqual(
            [item.category for item in suggestions],
            [
                "Keywords",
                "Structure",
                "Structure",
                "Structure",
                "Content",
                "Content",
                "Formatting",
                "Writing Style",
                "Content",
                "Structure",
            ],
        )
        # High-priority contact advice falls past the cap; order is not re-sorted by priority.
        self.assertNotIn("Contact", {item.category for item in suggestions})

    def test_missing_keywords_lists_at_most_five(self):
        ctx = _context("nothing relevant", "", job_keywords=["a1", "b2", "c3", "d4", "e5", "f6"])
        (suggestion,) = missing_keywords_rule(ctx)
        self.assertTrue(suggestion.message.endswith("a1, b2, c3, d4, e5"))

    def test_missing_keywords_uses_substring_containment(self):
        ctx = _context("JavaScript developer", "Java developer", job_keywords=["java"])
        self.assertEqual(missing_keywords_rule(ctx), [])

    def test_section_advice_only_when_formatting_is_low(self):
        self.assertEqual(missing_sections_rule(_context("plain text", "", formatting=70)), [])
        priorities = [item.priority for item in missing_sections_rule(_context("Work history", "", formatting=69))]
        self.assertEqual(priorities, ["high", "medium"])

    def test_skill_gaps_use_specific_messages(self):
        suggestions = skill_gaps_rule(_context("Python developer", "React, Python and AWS"))
        self.assertEqual(
            [item.message for item in suggestions],
            [
                "Job requires React - add this skill if you have experience with it",
                "Job requires AWS - add cloud experience if you have it",
            ],
        )

    def test_certification_rule(self):
        self.assertEqual(len(certifications_rule(_context("Skills", "AWS certified preferred"))), 1)
        self.assertEqual(certifications_rule(_context("Certification: AWS", "AWS certified preferred")), [])

    def test_parenthesised_phone_number_is_recognised(self):
        self.assertEqual(phone_rule(_context("Call (555) 123-4567 any time", "")), [])
        self.assertEqual(phone_rule(_context("Call 555.123.4567", "")), [])
        self.assertEqual(len(phone_rule(_context("No number listed", ""))), 1)


class StrategyCompositionTests(unittest.TestCase):
    def setUp(self):
        self.extractor = KeywordExtractor(NoNouns())
        self.extra = Suggestion(
            category="Insight",
            message="Consider tailoring your experience section to better match the job requirements",
            priority="low",
        )

    def test_composite_appends_extra_strategies_after_rules(self):
        strategy = CompositeSuggestionStrategy(
            [RuleBasedSuggestionStrategy(self.extractor), FixedStrategy([self.extra])]
        )
        suggestions = strategy.suggest("Summary", "short", _breakdown(formatting=100, keyword_balance=100))
        self.assertEqual(suggestions[-1], self.extra)
        self.assertGreater(len(suggestions), 1)

    def test_failing_member_contributes_nothing(self):
        strategy = CompositeSuggestionStrategy([ExplodingStrategy(), FixedStrategy([self.extra])])
        with self.assertLogs("ats_analyzer.suggestions.generator", level="ERROR"):
            suggestions = strategy.suggest("resume", "job", _breakdown())
        self.assertEqual(suggestions, [self.extra])

    def test_failing_strategy_yields_empty_list(self):
        with self.assertLogs("ats_analyzer.suggestions.generator", level="ERROR"):
            suggestions = generate_suggestions("resume", "job", _breakdown(), strategy=ExplodingStrategy())
        self.assertEqual(suggestions, [])

    def test_custom_strategy_output_is_capped(self):
        suggestions = generate_suggestions(
            "resume",
            "job",
            _breakdown(),
            strategy=FixedStrategy(
                [Suggestion(category="Insight", message=f"Tip {index}", priority="low") for index in range(15)]
            ),
        )
        self.assertEqual([item.message for item in suggestions], [f"Tip {index}" for index in range(10)])

    def test_repeated_suggestions_are_dropped_before_capping(self):
        reprioritised = self.extra.model_copy(update={"priority": "high"})
        tips = [Suggestion(category="Insight", message=f"Tip {index}", priority="low") for index in range(10)]
        suggestions = generate_suggestions(
            "resume",
            "job",
            _breakdown(),
            strategy=FixedStrategy([self.extra, reprioritised, self.extra] + tips),
        )
        self.assertEqual(suggestions[0], self.extra)
        self.assertEqual(suggestions[1:], tips[:9])

    def test_composite_drops_pairs_already_suggested(self):
        strategy = CompositeSuggestionStrategy([FixedStrategy([self.extra]), FixedStrategy([self.extra])])
        self.assertEqual(strategy.suggest("resume", "job", _breakdown()), [self.extra])


if __name__ == "__main__":
    unittest.main()
