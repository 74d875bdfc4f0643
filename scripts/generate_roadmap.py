"""
Generate a career roadmap or career guide from the command line.

Usage:
    python scripts/generate_roadmap.py "Data Scientist"                  # Remote, with fallback
    python scripts/generate_roadmap.py "Data Scientist" --offline        # Local dataset only
    python scripts/generate_roadmap.py "Game Designer" --user Ada --source
    python scripts/generate_roadmap.py "Data Scientist" --guide \\
        --skill "Statistics" --hobby "Puzzles" --salary "$90k - $150k"
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from career_roadmap.common.config import Config, GenerationConfig
from career_roadmap.common.logger import set_global_debug_mode, setup_logging
from career_roadmap.common.types import CareerProfile
from career_roadmap.services.roadmap_service import RoadmapService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a career roadmap")
    parser.add_argument("career", help="Career name, e.g. 'Software Engineer'")
    parser.add_argument("--user", default=None, help="Name used to personalize the prompt")
    parser.add_argument("--dataset", default=None, help="Roadmap dataset path or URL")
    parser.add_argument("--offline", action="store_true", help="Skip the remote call")
    parser.add_argument("--source", action="store_true", help="Report which path produced the roadmap")
    parser.add_argument("--guide", action="store_true", help="Generate the long-form career guide")
    parser.add_argument("--skill", default="", help="Core skill (career guide)")
    parser.add_argument("--hobby", default="", help="Related interest (career guide)")
    parser.add_argument("--salary", default="", help="Salary range (career guide)")
    parser.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(level="DEBUG" if args.debug else args.log_level)
    set_global_debug_mode(args.debug)
    if args.debug:
        print(Config.summary(), file=sys.stderr)

    service = RoadmapService(
        GenerationConfig.from_env(dataset_location=args.dataset),
        use_remote=not args.offline,
    )

    if args.guide:
        profile = CareerProfile(
            career=args.career,
            skill=args.skill,
            hobby=args.hobby,
            salary_range=args.salary,
        )
        print(service.generate_career_guide(profile, user_name=args.user))
        return 0

    outcome = service.generate_roadmap_outcome(args.career, user_name=args.user)
    print(outcome.content)
    if args.source:
        detail = f" ({outcome.matched_key})" if outcome.matched_key else ""
        print(f"\n[source: {outcome.source}{detail}]", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
