"""Unit tests for decision scoring and simulation results."""

import random
import unittest

from simulation_engine.options import generate_options, option_from_response
from simulation_engine.rules_engine import (
    calculate_performance_score,
    calculate_skill_gains,
    expected_score,
    generate_simulation_result,
    score_tier,
)


class FixedNoise(random.Random):
    """Random source whose integer draws are pinned."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def randint(self, a, b):
        return max(a, min(b, self.value))


def _context(stage="startup", budget=10000, career="ceo"):
    return {
        "industry": "Technology",
        "location": "Monrovia, Liberia",
        "businessStage": stage,
        "resources": {"budget": budget, "team_size": 3, "time_constraint": "2 months"},
        "market_conditions": "stable",
        "user_background": {"career_path": career, "skill_level": 20, "previous_decisions": []},
    }


def _option(risk, budget_change):
    option = option_from_response("Test decision")
    option["id"] = f"{risk}_option"
    option["risk_level"] = risk
    option["resource_impact"] = dict(option["resource_impact"], budget_change=budget_change)
    return option


SCENARIO = {"id": "sim_test", "title": "Test", "challenge": "Test the scorer", "stakeholders": ["a", "b"]}


class TestScoreFormula(unittest.TestCase):
    """Base 70 plus context-fit adjustments plus bounded noise."""

    def test_expected_scores(self):
        self.assertEqual(expected_score(_option("high", -1000), _context("startup")), 90)
        self.assertEqual(expected_score(_option("high", -5000), _context("startup")), 85)
        self.assertEqual(expected_score(_option("high", -1000), _context("growth")), 75)
        self.assertEqual(expected_score(_option("medium", -1000), _context("growth")), 85)
        self.assertEqual(expected_score(_option("low", -1000), _context("established")), 85)
        self.assertEqual(expected_score(_option("low", -1000), _context("startup")), 75)

    def test_budget_boundary_is_exclusive(self):
        self.assertEqual(expected_score(_option("high", -2000), _context("startup", budget=10000)), 85)
        self.assertEqual(expected_score(_option("high", -1999), _context("startup", budget=10000)), 90)

    def test_startup_bold_efficient_move(self):
        option = _option("high", -1000)
        for seed in range(50):
            score = calculate_performance_score(option, SCENARIO, _context("startup"), random.Random(seed))
            self.assertGreaterEqual(score, 80)
            self.assertLessEqual(score, 100)

    def test_noise_extremes(self):
        option = _option("high", -1000)
        self.assertEqual(calculate_performance_score(option, SCENARIO, _context(), FixedNoise(10)), 100)
        self.assertEqual(calculate_performance_score(option, SCENARIO, _context(), FixedNoise(-10)), 80)

    def test_noiseless_score_is_expected_score(self):
        for stage in ("startup", "growth", "established"):
            for risk in ("low", "medium", "high"):
                for change in (0, -1999, -5000):
                    option, context = _option(risk, change), _context(stage)
                    self.assertEqual(
                        calculate_performance_score(option, SCENARIO, context, FixedNoise(0)),
                        min(expected_score(option, context), 100),
                    )

    def test_always_within_bounds(self):
        for stage in ("startup", "growth", "established", "unknown"):
            for risk in ("low", "medium", "high"):
                for change in (0, -1999, -5000, -50000):
                    for noise in (-10, 0, 10):
                        score = calculate_performance_score(
                            _option(risk, change), SCENARIO, _context(stage), FixedNoise(noise)
                        )
                        self.assertGreaterEqual(score, 0)
                        self.assertLessEqual(score, 100)

    def test_zero_budget(self):
        score = calculate_performance_score(_option("low", 0), SCENARIO, _context(budget=0), FixedNoise(0))
        self.assertEqual(score, 70)


class TestSkillGains(unittest.TestCase):
    """Option skills merged with the career bonus."""

    def test_career_bonus_overrides(self):
        option = _option("high", 0)
        option["skill_development"] = {"innovation": 1, "leadership": 3}
        gains = calculate_skill_gains(option, "cto")
        self.assertEqual(
            gains,
            {"innovation": 2, "leadership": 3, "technical_leadership": 3, "system_thinking": 2},
        )

    def test_unknown_career_gets_ceo_bonus(self):
        gains = calculate_skill_gains(_option("low", 0), "astronaut")
        self.assertEqual(gains["decision_making"], 3)
        self.assertEqual(gains["strategic_thinking"], 3)


class TestSimulationResult(unittest.TestCase):
    """Full result bundle for a chosen option."""

    def test_result_fields(self):
        context = _context("startup")
        options = generate_options(SCENARIO, context, random.Random(1))
        result = generate_simulation_result(SCENARIO, options[1], context, rng=random.Random(2))
        self.assertEqual(result["selected_option"], options[1])
        self.assertEqual(result["consequences"]["immediate"], options[1]["immediate_consequences"])
        self.assertEqual(result["consequences"]["long_term"], options[1]["long_term_effects"])
        self.assertEqual(len(result["consequences"]["short_term"]), 2)
        self.assertIn("planning", result["skill_gains"])
        self.assertTrue(0 <= result["performance_score"] <= 100)
        self.assertTrue(result["outcome_description"])
        self.assertTrue(result["next_scenario_context"])
        self.assertIn("overall_assessment", result["ai_feedback"])

    def test_tiers(self):
        self.assertEqual(score_tier(80), "high")
        self.assertEqual(score_tier(79), "medium")
        self.assertEqual(score_tier(60), "medium")
        self.assertEqual(score_tier(59), "low")

    def test_next_context_follows_score(self):
        result = generate_simulation_result(SCENARIO, _option("high", -1000), _context(), rng=FixedNoise(10))
        self.assertEqual(result["performance_score"], 100)
        self.assertIn("successful decision", result["next_scenario_context"])


if __name__ == "__main__":
    unittest.main()
