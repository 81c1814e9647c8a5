"""Unit tests for multi-round sessions."""

import random
import unittest

from simulation_engine import state_machine
from simulation_engine.options import option_from_response
from simulation_engine.rules_engine import generate_simulation_result
from simulation_engine.synthesizer import generate_simulation, primary_decision
from simulation_engine.synthetic_data import build_round_context, stage_for_round


def _play_round(state, rng):
    context = state_machine.current_context(state)
    simulation = generate_simulation(context, state["history"], rng)
    primary = primary_decision(simulation["tasks"])
    options = primary.get("options")
    option = options[0] if options else option_from_response("Talk to customers before spending anything.")
    result = generate_simulation_result(simulation["scenario"], option, context, state["history"], rng)
    return simulation, result


def _result(score, skills=None):
    return {
        "performance_score": score,
        "skill_gains": skills or {},
        "selected_option": {"id": "option_1"},
    }


def _simulation(title):
    return {"scenario": {"title": title}}


class TestRoundContext(unittest.TestCase):
    """Context ramps with the round number."""

    def test_stages(self):
        self.assertEqual([stage_for_round(n) for n in range(1, 7)],
                         ["startup", "startup", "growth", "growth", "established", "established"])

    def test_resources_ramp(self):
        first = build_round_context(1, "cto")
        fifth = build_round_context(5, "cto", ["Market Entry Strategy"])
        self.assertEqual(first["resources"]["budget"], 7000)
        self.assertEqual(first["resources"]["team_size"], 3)
        self.assertEqual(first["user_background"]["skill_level"], 20)
        self.assertEqual(fifth["resources"]["budget"], 15000)
        self.assertEqual(fifth["resources"]["team_size"], 7)
        self.assertEqual(fifth["user_background"]["previous_decisions"], ["Market Entry Strategy"])
        self.assertEqual(fifth["businessStage"], "established")

    def test_team_size_capped(self):
        self.assertEqual(build_round_context(20, "ceo")["resources"]["team_size"], 10)


class TestSessionTransitions(unittest.TestCase):

    def test_initialize(self):
        state = state_machine.initialize_session("finance", 3)
        self.assertEqual(state["status"], state_machine.IN_PROGRESS)
        self.assertEqual(state["current_round"], 1)
        self.assertEqual(state["history"], [])
        self.assertEqual(state_machine.session_progress(state), 33)

    def test_rejects_non_positive_rounds(self):
        with self.assertRaises(ValueError):
            state_machine.initialize_session("ceo", -1)

    def test_advance_then_complete(self):
        state = state_machine.initialize_session("ceo", 2)
        state = state_machine.record_round(state, _simulation("A"), _result(70, {"leadership": 2}))
        self.assertEqual(state["current_round"], 2)
        self.assertEqual(state["status"], state_machine.IN_PROGRESS)
        self.assertEqual(state_machine.played_scenarios(state), ["A"])

        state = state_machine.record_round(state, _simulation("B"), _result(90, {"leadership": 4}), round_number=2)
        self.assertEqual(state["status"], state_machine.COMPLETED)
        self.assertEqual(state_machine.session_progress(state), 100)
        self.assertEqual([r["round_number"] for r in state["history"]], [1, 2])

    def test_record_does_not_mutate(self):
        state = state_machine.initialize_session("ceo", 2)
        state_machine.record_round(state, _simulation("A"), _result(70))
        self.assertEqual(state["history"], [])
        self.assertEqual(state["current_round"], 1)

    def test_completed_session_rejects_rounds(self):
        state = state_machine.initialize_session("ceo", 1)
        state = state_machine.record_round(state, _simulation("A"), _result(70))
        with self.assertRaises(ValueError):
            state_machine.record_round(state, _simulation("B"), _result(70))

    def test_round_mismatch(self):
        state = state_machine.initialize_session("ceo", 3)
        with self.assertRaises(ValueError):
            state_machine.record_round(state, _simulation("A"), _result(70), round_number=2)

    def test_previous_titles_feed_next_context(self):
        state = state_machine.initialize_session("ceo", 3)
        state = state_machine.record_round(state, _simulation("Cash Flow Crisis"), _result(50))
        context = state_machine.current_context(state)
        self.assertEqual(context["user_background"]["previous_decisions"], ["Cash Flow Crisis"])
        self.assertEqual(context["resources"]["budget"], 9000)


class TestProgress(unittest.TestCase):

    def test_running_average(self):
        progress = state_machine.update_progress({}, {"leadership": 2}, 60)
        progress = state_machine.update_progress(progress, {"leadership": 3, "planning": 1}, 90)
        self.assertEqual(progress["leadership"]["skill_level"], 5)
        self.assertEqual(progress["leadership"]["total_scenarios_completed"], 2)
        self.assertAlmostEqual(progress["leadership"]["average_score"], 75)
        self.assertEqual(progress["planning"]["total_scenarios_completed"], 1)

    def test_input_untouched(self):
        original = {"leadership": {"skill_level": 1, "total_scenarios_completed": 1, "average_score": 50}}
        state_machine.update_progress(original, {"leadership": 2}, 100)
        self.assertEqual(original["leadership"]["skill_level"], 1)


class TestSummary(unittest.TestCase):

    def test_empty_session(self):
        summary = state_machine.summarize_session(state_machine.initialize_session("ceo", 2))
        self.assertEqual(summary["rounds_played"], 0)
        self.assertEqual(summary["average_score"], 0)
        self.assertTrue(summary["strengths"])
        self.assertTrue(summary["weaknesses"])

    def test_improving_session(self):
        state = state_machine.initialize_session("ceo", 2)
        state = state_machine.record_round(state, _simulation("A"), _result(75, {"leadership": 2}))
        state = state_machine.record_round(state, _simulation("B"), _result(95, {"leadership": 4, "planning": 1}))
        summary = state_machine.summarize_session(state)
        self.assertEqual(summary["status"], state_machine.COMPLETED)
        self.assertEqual(summary["average_score"], 85)
        self.assertEqual(summary["skill_totals"], {"leadership": 6, "planning": 1})
        self.assertEqual(summary["strong_skills"][0], "leadership")
        self.assertIn("Your scores improved from the first round to the latest one.", summary["strengths"])

    def test_full_generated_session(self):
        rng = random.Random(11)
        state = state_machine.initialize_session("product", 5)
        titles = []
        while state["status"] == state_machine.IN_PROGRESS:
            simulation, result = _play_round(state, rng)
            titles.append(simulation["scenario"]["title"])
            state = state_machine.record_round(state, simulation, result)
        self.assertEqual(len(state["history"]), 5)
        self.assertEqual(state_machine.played_scenarios(state), titles)
        summary = state_machine.summarize_session(state)
        self.assertTrue(0 <= summary["average_score"] <= 100)


if __name__ == "__main__":
    unittest.main()
