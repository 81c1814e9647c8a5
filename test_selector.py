"""Unit tests for template selection and the difficulty curve."""

import random
import unittest

from simulation_engine.selector import calculate_difficulty, select_template, used_scenarios
from simulation_engine.templates import BUSINESS_STAGES, load_templates


def _context(stage="startup", skill_level=10, market="stable", previous=None):
    return {
        "industry": "Technology",
        "location": "Monrovia, Liberia",
        "businessStage": stage,
        "resources": {"budget": 5000, "team_size": 3, "time_constraint": "2 months"},
        "market_conditions": market,
        "user_background": {
            "career_path": "ceo",
            "skill_level": skill_level,
            "previous_decisions": previous or [],
        },
    }


def _performance(average):
    return {"average_score": average, "strong_skills": [], "weak_skills": []}


class TestDifficulty(unittest.TestCase):
    """Difficulty stays within 1-5 and follows the adjustment order."""

    def test_always_in_range(self):
        for stage in BUSINESS_STAGES + ("unknown",):
            for skill in (0, 10, 50, 51, 100, 1000):
                for market in ("stable", "volatile"):
                    for average in (0, 40, 70, 95):
                        level = calculate_difficulty(
                            _context(stage, skill, market), _performance(average), has_history=average > 0
                        )
                        self.assertIsInstance(level, int)
                        self.assertGreaterEqual(level, 1)
                        self.assertLessEqual(level, 5)

    def test_stage_baseline(self):
        self.assertEqual(calculate_difficulty(_context("startup")), 1)
        self.assertEqual(calculate_difficulty(_context("growth")), 2)
        self.assertEqual(calculate_difficulty(_context("established")), 3)

    def test_skill_and_volatility(self):
        self.assertEqual(calculate_difficulty(_context("startup", skill_level=51)), 2)
        self.assertEqual(calculate_difficulty(_context("startup", skill_level=50)), 1)
        self.assertEqual(calculate_difficulty(_context("growth", market="highly volatile market")), 3)

    def test_strong_performance_nudges_up(self):
        self.assertEqual(calculate_difficulty(_context("growth"), _performance(85), has_history=True), 3)

    def test_weak_performance_nudges_down_with_floor(self):
        self.assertEqual(calculate_difficulty(_context("growth"), _performance(50), has_history=True), 1)
        self.assertEqual(calculate_difficulty(_context("startup"), _performance(50), has_history=True), 1)

    def test_no_history_no_downward_nudge(self):
        self.assertEqual(calculate_difficulty(_context("growth"), _performance(0), has_history=False), 2)

    def test_clamped_at_five(self):
        context = _context("established", skill_level=90, market="volatile")
        self.assertEqual(calculate_difficulty(context, _performance(95), has_history=True), 5)


class TestTemplateSelection(unittest.TestCase):
    """Templates come from the right stage and avoid repeats while possible."""

    def test_stage_templates(self):
        titles = {t["title"] for t in load_templates("growth")}
        for seed in range(20):
            template = select_template("growth", [], random.Random(seed))
            self.assertIn(template["title"], titles)

    def test_unknown_stage_falls_back_to_startup(self):
        self.assertEqual(load_templates("pre-seed"), load_templates("startup"))
        startup_titles = {t["title"] for t in load_templates("startup")}
        self.assertIn(select_template("pre-seed", [], random.Random(1))["title"], startup_titles)

    def test_avoids_used_titles(self):
        templates = load_templates("startup")
        keep = templates[0]["title"]
        used = [f"CTO Decision: {t['title']}" for t in templates[1:]]
        for seed in range(20):
            self.assertEqual(select_template("startup", used, random.Random(seed))["title"], keep)

    def test_repeats_once_exhausted(self):
        used = [t["title"] for t in load_templates("established")]
        template = select_template("established", used, random.Random(3))
        self.assertEqual(template["title"], "Legacy System Modernization Crisis")

    def test_used_scenarios_merges_history(self):
        context = _context(previous=["Co-founder Conflict"])
        history = [{"scenario_type": "Technology Investment"}, {"scenarioType": "First Customer Acquisition"}, {}]
        self.assertEqual(
            used_scenarios(context, history),
            ["Co-founder Conflict", "Technology Investment", "First Customer Acquisition"],
        )


if __name__ == "__main__":
    unittest.main()
