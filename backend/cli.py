"""
Command line tools for the local store.

    dreamshape export [-o FILE] [--store PATH]
    dreamshape stats [--today YYYY-MM-DD] [--json] [--store PATH]
    dreamshape serve [--host HOST] [--port PORT] [--reload]

export and stats read the local store only; nothing is sent to Supabase.
"""
import argparse
import dataclasses
import json
import logging
import sys
from datetime import date

import uvicorn

from api.deps import build_tracker
from backend.settings import get_settings

logger = logging.getLogger(__name__)


def _load_tracker(args):
    settings = get_settings()
    if args.store:
        settings = settings.model_copy(update={"local_store_path": args.store})
    return build_tracker(settings)


def cmd_export(args) -> int:
    tracker = _load_tracker(args)
    try:
        export = tracker.export()
    finally:
        tracker.close()

    output = args.output or export.filename
    body = json.dumps(export.payload, indent=2)
    if output == "-":
        print(body)
    else:
        with open(output, "w", encoding="utf-8") as f:
            f.write(body)
        logger.info(f"Exported {len(export.payload['workouts'])} workout(s) to {output}")
    return 0


def cmd_stats(args) -> int:
    tracker = _load_tracker(args)
    try:
        today = date.fromisoformat(args.today) if args.today else None
        stats = tracker.history.stats(today)
        summary = tracker.history.profile_summary(today)
    finally:
        tracker.close()

    if args.json:
        print(json.dumps(
            {"stats": dataclasses.asdict(stats), "summary": dataclasses.asdict(summary)},
            indent=2,
        ))
        return 0

    print(f"Total workouts:    {stats.total_workouts}")
    print(f"Average per week:  {stats.average_per_week}")
    print(f"Current streak:    {stats.current_streak} day(s)")
    print(f"Total volume:      {summary.total_volume:g}")
    print(f"Favorite exercise: {summary.favorite_exercise}")
    if stats.best_records:
        print("Personal records:")
        for record in stats.best_records:
            print(f"  {record.exercise_name}: {record.weight:g}")
    return 0


def cmd_serve(args) -> int:
    uvicorn.run("backend.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dreamshape", description="DreamShape workout tracker tools")
    parser.add_argument("--store", help="Local store file (default: LOCAL_STORE_PATH setting)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Write a JSON backup of history and profile")
    export_parser.add_argument(
        "-o", "--output",
        help="Output file ('-' for stdout, default: dreamshape-backup-YYYY-MM-DD.json)",
    )
    export_parser.set_defaults(func=cmd_export)

    stats_parser = subparsers.add_parser("stats", help="Print workout statistics")
    stats_parser.add_argument("--today", help="Reference day as YYYY-MM-DD (default: today)")
    stats_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    stats_parser.set_defaults(func=cmd_stats)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8001)
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
