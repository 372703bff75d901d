"""CLI entry point for mentor matching."""

import argparse
import json
import logging
import sys

from peal_mentors.config import load_config, validate_config
from peal_mentors.matching.engine import ProfileNotFoundError
from peal_mentors.matching.matcher import MentorMatcher
from peal_mentors.mentors.models import AVAILABILITY_STATES, MatchingCriteria, SearchFilters
from peal_mentors.models import init_db, make_session_factory
from peal_mentors.storage.repository import MentorRepository
from peal_mentors.storage.seed import load_seed_file
from peal_mentors.utils.logging_config import setup_logging

logger = logging.getLogger("peal_mentors")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="PEAL mentor matching - rank and search mentors",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument("--seed", metavar="FILE", help="Load users and mentors from a YAML seed file")
    parser.add_argument("--stats", action="store_true", help="Print database statistics and exit")
    parser.add_argument("--user-id", help="Rank mentors for this user")
    parser.add_argument(
        "--recommend", action="store_true",
        help="With --user-id: profile-only recommendations",
    )
    parser.add_argument("--search", metavar="QUERY", help="Unscored search over bio, name and skills")

    criteria = parser.add_argument_group("match criteria")
    criteria.add_argument("--skills", help="Comma separated skills (overrides profile)")
    criteria.add_argument("--interests", help="Comma separated interests (overrides profile)")
    criteria.add_argument("--location", help="Location (overrides profile)")
    criteria.add_argument("--min-experience", type=float, help="Minimum years of experience")
    criteria.add_argument("--availability", choices=AVAILABILITY_STATES)
    criteria.add_argument(
        "--remote", dest="accepts_remote", action="store_true", default=None,
        help="Only mentors accepting remote mentees",
    )
    criteria.add_argument(
        "--no-remote", dest="accepts_remote", action="store_false",
        help="Only mentors not accepting remote mentees",
    )
    criteria.add_argument("--limit", type=int, help="Maximum number of matches")
    parser.set_defaults(accepts_remote=None)
    return parser.parse_args(argv)


def _split(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def criteria_from_args(args: argparse.Namespace) -> MatchingCriteria:
    return MatchingCriteria(
        skills=_split(args.skills),
        interests=_split(args.interests),
        location=args.location,
        min_experience=args.min_experience,
        availability=args.availability,
        accepts_remote=args.accepts_remote,
    )


def print_stats(repository: MentorRepository):
    stats = repository.get_stats()
    print("\n=== PEAL Mentor Statistics ===")
    print(f"Users:              {stats['total_users']}")
    print(f"Mentor profiles:    {stats['total_mentors']}")
    print(f"Open for mentees:   {stats['available_mentors']}")
    if stats["by_availability"]:
        print("\nBy availability:")
        for availability, count in sorted(stats["by_availability"].items()):
            print(f"  {availability}: {count}")
    print()


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.log_dir, config.log_level)

    for w in validate_config(config):
        logger.warning("Config: %s", w)

    session_factory = make_session_factory(config.database_url)
    init_db(session_factory.kw["bind"])

    with session_factory() as db:
        repository = MentorRepository(db)

        if args.seed:
            try:
                created = load_seed_file(db, args.seed)
            except FileNotFoundError as e:
                print(f"Error: {e}", file=sys.stderr)
                sys.exit(1)
            print(f"Seeded {created} users")

        if args.stats:
            print_stats(repository)
            return

        matcher = MentorMatcher(repository, config.matching)

        if args.search is not None:
            filters = SearchFilters(availability=args.availability, accepts_remote=args.accepts_remote)
            results = matcher.search_candidates(args.search, filters)
        elif args.user_id:
            try:
                if args.recommend:
                    results = matcher.get_recommendations(args.user_id)
                else:
                    results = matcher.find_matches(args.user_id, criteria_from_args(args), args.limit)
            except ProfileNotFoundError as e:
                print(f"Error: {e}", file=sys.stderr)
                sys.exit(1)
        else:
            if not args.seed:
                print("Nothing to do: pass --user-id, --search, --seed or --stats", file=sys.stderr)
                sys.exit(1)
            return

    print(json.dumps([r.to_dict() for r in results], indent=2))


if __name__ == "__main__":
    main()
