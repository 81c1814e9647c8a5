"""Unit tests for option generation."""

import random
import unittest

from simulation_engine.options import (
    TEXT_RESPONSE_ID,
    format_money,
    generate_options,
    option_from_response,
)

SCENARIO = {"challenge": "Decide whether to pivot your product strategy or double down on current approach."}


def _context(budget=10000):
    return {
        "industry": "Agriculture",
        "location": "Gbarnga",
        "businessStage": "startup",
        "resources": {"budget": budget, "team_size": 4, "time_constraint": "3 months"},
        "market_conditions": "volatile",
        "user_background": {"career_path": "finance", "skill_level": 30, "previous_decisions": []},
    }


class TestArchetypes(unittest.TestCase):
    """Three options, one per archetype, in fixed order."""

    def test_risk_levels_fixed(self):
        for seed in range(25):
            options = generate_options(SCENARIO, _context(), random.Random(seed))
            self.assertEqual([o["risk_level"] for o in options], ["high", "low", "medium"])
            self.assertEqual([o["id"] for o in options], ["option_1", "option_2", "option_3"])

    def test_budget_shares(self):
        options = generate_options(SCENARIO, _context(budget=10000), random.Random(0))
        for option, expected in zip(options, (-3000, -1000, -2000)):
            self.assertAlmostEqual(option["resource_impact"]["budget_change"], expected)

    def test_skill_development(self):
        aggressive, conservative, innovative = generate_options(SCENARIO, _context(), random.Random(0))
        self.assertEqual(aggressive["skill_development"], {"leadership": 3, "risk_management": 2, "strategic_thinking": 3})
        self.assertEqual(conservative["skill_development"], {"planning": 3, "risk_assessment": 3, "financial_management": 2})
        self.assertEqual(innovative["skill_development"], {"creativity": 3, "problem_solving": 3, "adaptability": 2})

    def test_resource_profiles(self):
        aggressive, conservative, innovative = generate_options(SCENARIO, _context(), random.Random(0))
        self.assertEqual(aggressive["resource_impact"]["time_required"], "2-4 weeks")
        self.assertEqual(conservative["resource_impact"]["team_involvement"], ["core_team", "gradual_rollout"])
        self.assertEqual(innovative["resource_impact"]["team_involvement"], ["r&d_team", "pilot_group"])

    def test_text_is_filled(self):
        for seed in range(25):
            for option in generate_options(SCENARIO, _context(), random.Random(seed)):
                self.assertNotIn("{", option["text"])
                self.assertNotIn("{", option["reasoning"])
                self.assertTrue(option["immediate_consequences"])
                self.assertTrue(option["long_term_effects"])

    def test_options_do_not_share_lists(self):
        first = generate_options(SCENARIO, _context(), random.Random(0))
        first[0]["immediate_consequences"].append("mutated")
        second = generate_options(SCENARIO, _context(), random.Random(0))
        self.assertNotIn("mutated", second[0]["immediate_consequences"])


class TestTextResponse(unittest.TestCase):
    """Free-text answers become a balanced, budget-neutral option."""

    def test_short_answer(self):
        option = option_from_response("  Partner with a local bank.  ")
        self.assertEqual(option["id"], TEXT_RESPONSE_ID)
        self.assertEqual(option["text"], "Partner with a local bank.")
        self.assertEqual(option["risk_level"], "medium")
        self.assertEqual(option["resource_impact"]["budget_change"], 0)

    def test_long_answer_truncated(self):
        option = option_from_response("x" * 250)
        self.assertEqual(option["text"], "x" * 100 + "...")

    def test_empty_answer(self):
        self.assertEqual(option_from_response("")["text"], "User response")


class TestFormatMoney(unittest.TestCase):

    def test_whole_and_fractional(self):
        self.assertEqual(format_money(5000), "5,000")
        self.assertEqual(format_money(12500.0), "12,500")
        self.assertEqual(format_money(1234.5), "1,234.50")


if __name__ == "__main__":
    unittest.main()
