"""
Command line interface for FitPlan.

Usage:
    fitplan plan --age 25 --height 175 --weight 70 --goal fat_loss --location home
    fitplan today --age 25 --height 175 --weight 70 --goal fat_loss --date 2024-01-03
    fitplan serve --port 8000
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import date

from .config import SETTINGS
from .errors import ValidationError
from .logging_setup import setup_logging
from .models import Experience, Goal, Location, UserProfile
from .services import PlanService

EXIT_INVALID_PROFILE = 2
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _profile_from_args(args: argparse.Namespace) -> UserProfile:
    return UserProfile.from_dict(
        {
            "age": args.age,
            "height_cm": args.height,
            "weight_kg": args.weight,
            "goal": args.goal,
            "location": args.location,
            "experience": args.experience,
        }
    )


def cmd_plan(args: argparse.Namespace) -> int:
    """Print the weekly plan, diet and coaching message."""
    service = PlanService()
    try:
        profile = _profile_from_args(args)
        bundle = asyncio.run(service.build(profile, with_coach=not args.no_coach))
    except ValidationError as e:
        print(f"Error: {e}")
        return EXIT_INVALID_PROFILE

    print(service.render_plan_message(bundle.plan))
    print()
    print(service.render_diet_message(bundle.diet))
    if not args.no_coach:
        print()
        print(bundle.coach_message)
    return 0


def cmd_today(args: argparse.Namespace) -> int:
    """Print the session scheduled for one day."""
    service = PlanService()
    try:
        plan, _ = service.compute(_profile_from_args(args))
    except ValidationError as e:
        print(f"Error: {e}")
        return EXIT_INVALID_PROFILE

    print(service.render_day(service.todays_session(plan, args.date)))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("fitplan.server.main:app", host=args.host, port=args.port)
    return 0


def _add_profile_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--age", type=int, required=True, help="Age in years")
    parser.add_argument("--height", type=float, required=True, help="Height in cm")
    parser.add_argument("--weight", type=float, required=True, help="Weight in kg")
    parser.add_argument("--goal", choices=[g.value for g in Goal], default=Goal.STAY_HEALTHY.value)
    parser.add_argument(
        "--location", choices=[loc.value for loc in Location], default=Location.GYM.value
    )
    parser.add_argument(
        "--experience", choices=[e.value for e in Experience], default=Experience.BEGINNER.value
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fitplan", description="FitPlan workout and diet planner")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override LOG_LEVEL",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_plan = subparsers.add_parser("plan", help="Show the weekly plan and diet")
    _add_profile_args(p_plan)
    p_plan.add_argument("--no-coach", action="store_true", help="Skip the coaching message")
    p_plan.set_defaults(func=cmd_plan)

    p_today = subparsers.add_parser("today", help="Show one day of the plan")
    _add_profile_args(p_today)
    p_today.add_argument(
        "--date", type=date.fromisoformat, default=None, help="YYYY-MM-DD, defaults to today"
    )
    p_today.set_defaults(func=cmd_today)

    p_serve = subparsers.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or SETTINGS.LOG_LEVEL)
    logging.getLogger(__name__).debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
