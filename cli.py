#!/usr/bin/env python3
"""CLI tool for exploring the venture simulation engine.

Usage:
    python cli.py templates [--stage=startup]                 # List scenario templates
    python cli.py generate --career=cto [--round=1] [--json]  # Synthesize one round
    python cli.py play --career=ceo [--rounds=5] [--strategy=random]  # Auto-play a session
"""

import argparse
import json
import logging
import random
import sys

from pydantic import ValidationError

import settings
from simulation_engine import state_machine, templates
from simulation_engine.options import ARCHETYPES
from simulation_engine.synthesizer import PRIMARY_TASK_IDS
from simulation_engine.synthetic_data import build_round_context
from simulations import create_simulation, evaluate_decision


def _rng(args) -> random.Random:
    seed = args.seed if args.seed is not None else settings.SIMULATION_SEED
    return random.Random(seed)


def cmd_templates(args):
    """Show scenario templates grouped by business stage."""
    summaries = [s for s in templates.get_all_summaries() if not args.stage or s["stage"] == args.stage]
    current = None
    for summary in summaries:
        if summary["stage"] != current:
            current = summary["stage"]
            print(f"\n📚 {current}")
        print(f"   {summary['title']}")
        print(f"   {'':3}{summary['challenge'][:90]}")
    print(f"\n✅ Total: {len(summaries)} templates\n")


def cmd_generate(args):
    """Synthesize one round and print it."""
    context = build_round_context(args.round, args.career)
    simulation = create_simulation(context, rng=_rng(args))

    if args.json:
        print(json.dumps(simulation.model_dump(exclude_none=True), indent=2))
        return

    scenario = simulation.scenario
    print(f"\n🎯 {scenario.title}  (difficulty {scenario.difficulty_level}/5, ~{scenario.estimated_time} min)")
    print(f"\n{scenario.context}\n{scenario.situation}\n\nChallenge: {scenario.challenge}\n")
    for task in simulation.tasks:
        flag = "required" if task.required else "optional"
        print(f"   [{task.type:17}] {task.title} ({flag})")
        for option in task.options or []:
            print(f"   {'':19} {option.id}: {option.text} [{option.risk_level} risk]")
    print(f"\nTotal points: {simulation.total_points}\n")


def _primary(simulation):
    return next(task for task in simulation.tasks if task.id in PRIMARY_TASK_IDS)


def _choose(strategy: str, task, rng: random.Random):
    """Pick an option id (multiple choice) or a canned answer (written tasks)."""
    if task.type != "multiple_choice":
        return None, f"I would focus on {task.title.lower()} first, then involve the core team."
    if strategy == "random":
        return rng.choice(task.options).id, None
    return task.options[ARCHETYPES.index(strategy)].id, None


def cmd_play(args):
    """Auto-play a full session and print the debrief."""
    rng = _rng(args)
    state = state_machine.initialize_session(args.career, args.rounds)
    print(f"\n🚀 Playing {state['total_rounds']} rounds as {args.career} (strategy={args.strategy})\n")

    while state["status"] == state_machine.IN_PROGRESS:
        context = state_machine.current_context(state)
        history = state["history"]
        simulation = create_simulation(context, history, rng=rng)
        option_id, response_text = _choose(args.strategy, _primary(simulation), rng)
        result = evaluate_decision(
            simulation,
            context,
            option_id=option_id,
            response_text=response_text,
            history=history,
            rng=rng,
        )
        print(
            f"   Round {state['current_round']}: {simulation.scenario.title[:60]:60} "
            f"score {result.performance_score:3d}"
        )
        state = state_machine.record_round(
            state,
            simulation.model_dump(),
            result.model_dump(),
        )

    summary = state_machine.summarize_session(state)
    print(f"\n📈 Average score: {summary['average_score']:.1f}")
    print(f"   Strong skills: {', '.join(summary['strong_skills']) or '-'}")
    print(f"   Weak skills:   {', '.join(summary['weak_skills']) or '-'}")
    for line in summary["strengths"]:
        print(f"   + {line}")
    for line in summary["weaknesses"]:
        print(f"   - {line}")
    print()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Venture simulation engine CLI")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    templates_parser = subparsers.add_parser("templates", help="List scenario templates")
    templates_parser.add_argument("--stage", choices=templates.BUSINESS_STAGES, default=None)

    generate_parser = subparsers.add_parser("generate", help="Synthesize one round")
    generate_parser.add_argument("--career", default="ceo", help="Career path (ceo, cto, marketing, ...)")
    generate_parser.add_argument("--round", type=int, default=1, help="Session round (1-based)")
    generate_parser.add_argument("--json", action="store_true", help="Print raw JSON")

    play_parser = subparsers.add_parser("play", help="Auto-play a full session")
    play_parser.add_argument("--career", default="ceo", help="Career path (ceo, cto, marketing, ...)")
    play_parser.add_argument("--rounds", type=int, default=settings.TOTAL_ROUNDS, help="Rounds to play")
    play_parser.add_argument(
        "--strategy",
        choices=list(ARCHETYPES) + ["random"],
        default="random",
        help="Which option archetype to pick on multiple-choice rounds",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "templates": cmd_templates,
        "generate": cmd_generate,
        "play": cmd_play,
    }
    try:
        commands[args.command](args)
    except (ValidationError, ValueError) as e:
        print(f"\n❌ Error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
