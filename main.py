import os
import sys
import json
import logging
import argparse

from core.app_context import AppContext
from core.config_loader import load_config
from core.errors import MatchEngineError
from core.ranking import Viewer, ROLE_FOUNDER, ROLE_TALENT
from core.sync import SyncReport
from database.database import get_engine
from database.init_db import init_db

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _print_report(report: SyncReport) -> int:
    print(json.dumps(report.to_dict(), indent=2))
    return 0 if report.ok else 1


def _print_matches(matches) -> None:
    for rank, match in enumerate(matches, start=1):
        other = match.startup.name if match.startup else (match.talent.display_name if match.talent else "")
        print(
            f"{rank:>3}. {match.score:>3}  "
            f"(skills {match.skill_points}, industry {match.industry_points}, stage {match.stage_bonus})  "
            f"{other}  [talent {match.talent_id} / startup {match.startup_id}]"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FounderMatch Match Engine")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to config.yaml (default: config.yaml)')
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('init-db', help='Create tables, waiting for the database')

    p = sub.add_parser('recompute', help='Recompute the cross-product of the given ids')
    p.add_argument('--talent', action='append', default=[], metavar='ID', help='Talent id (repeatable)')
    p.add_argument('--startup', action='append', default=[], metavar='ID', help='Startup id (repeatable)')

    p = sub.add_parser('recompute-talent', help="Refresh one talent's matches")
    p.add_argument('talent_id')

    p = sub.add_parser('recompute-startup', help="Refresh one startup's matches")
    p.add_argument('startup_id')

    p = sub.add_parser('list-talent', help="Show a talent's ranked matches")
    p.add_argument('talent_id')
    p.add_argument('--limit', type=int, default=None)

    p = sub.add_parser('list-founder', help="Show the ranked matches across a founder's startups")
    p.add_argument('founder_id')
    p.add_argument('--limit', type=int, default=None)

    sub.add_parser('serve', help='Run the HTTP API')
    return parser


def run(args: argparse.Namespace) -> int:
    if args.command == 'serve':
        from web.backend.app import main as serve
        from web.backend.config import CONFIG_PATH_ENV, get_config

        os.environ[CONFIG_PATH_ENV] = os.path.abspath(args.config)
        get_config.cache_clear()
        serve()
        return 0

    config = load_config(args.config)

    if args.command == 'init-db':
        init_db(get_engine(config.database.url))
        return 0

    ctx = AppContext.build(config)

    if args.command == 'recompute':
        return _print_report(ctx.recompute_service.recompute(args.talent, args.startup))

    if args.command == 'recompute-talent':
        return _print_report(ctx.recompute_service.recompute_for_talent(args.talent_id))

    if args.command == 'recompute-startup':
        return _print_report(ctx.recompute_service.recompute_for_startup(args.startup_id))

    if args.command == 'list-talent':
        # The operator acts as the talent whose matches are listed
        viewer = Viewer.of(args.talent_id, ROLE_TALENT)
        _print_matches(ctx.ranking_service.list_matches_for_talent(viewer, args.talent_id, args.limit))
        return 0

    if args.command == 'list-founder':
        viewer = Viewer.of(args.founder_id, ROLE_FOUNDER)
        result = ctx.ranking_service.list_matches_for_founder(viewer, args.founder_id, args.limit)
        for group in result.groups:
            print(f"== {group.startup_name} ({group.startup_id}): {len(group.matches)} matches")
            _print_matches(group.matches)
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except MatchEngineError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
