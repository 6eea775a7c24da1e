#!/usr/bin/env python3
"""
yday - what did I work on yesterday?

A CLI tool that reports recent commit activity across every git
repository under a parent directory.

Usage:
    python -m yday [options]
    yday [options]
"""

import argparse
import sys
from datetime import date, datetime, timezone
from typing import Optional

from yday.config.loader import load_config, get_parent_dir
from yday.models.entities import TimeDirective
from yday.timeline.timespan import WEEKDAY_NAMES
from yday.output.formatter import Colors, colorize
from yday.utils.paths import display_path, expand_path
from yday.utils.progress import print_error, print_status, print_verbose
from yday.utils.timestamps import parse_date


def parse_cli_date(value: str) -> date:
    """argparse type for --after/--before."""
    parsed = parse_date(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"invalid date '{value}' (expected YYYY-MM-DD)")
    return parsed


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all CLI flags."""
    parser = argparse.ArgumentParser(
        prog='yday',
        description='Summarize recent git activity across your repositories'
    )

    # Views
    views = parser.add_mutually_exclusive_group()
    views.add_argument('--timeline', action='store_true',
                       help='Timeline view (week pattern for multi-day spans)')
    views.add_argument('--week', action='store_true',
                       help='Timeline view, always as a week pattern')
    views.add_argument('--projects', action='store_true',
                       help='List repositories under the parent directory')
    views.add_argument('--serve', action='store_true',
                       help='Start the JSON API server')

    # Time period (mutually exclusive day selectors)
    days = parser.add_argument_group('time period')
    day_flags = days.add_mutually_exclusive_group()
    for index, name in enumerate(WEEKDAY_NAMES):
        day_flags.add_argument(f'--last-{name}', dest='last_weekday',
                               action='store_const', const=index,
                               help=f'Show the most recent {name.capitalize()} before today')
    day_flags.add_argument('--last-workday', action='store_true',
                           help='Show the previous workday (Friday on Sunday and Monday)')
    day_flags.add_argument('--on', type=int, metavar='N',
                           help='Show the single day N days ago')
    day_flags.add_argument('--today', action='store_true',
                           help='Show today')
    day_flags.add_argument('--days', type=int, metavar='N',
                           help='Show the last N days, including today')
    days.add_argument('--after', type=parse_cli_date, metavar='DATE',
                      help='Start date (YYYY-MM-DD, default 30 days ago)')
    days.add_argument('--before', type=parse_cli_date, metavar='DATE',
                      help='End date (YYYY-MM-DD, default today)')

    # Sources
    parser.add_argument('--parent', '-p', metavar='DIR',
                        help='Directory containing git repositories (default from config)')
    parser.add_argument('--author', metavar='NAME',
                        help='Only count commits by this author')

    # Output options
    parser.add_argument('--details', action='store_true',
                        help='Show a legend under week patterns')
    parser.add_argument('--symbols', action='store_true',
                        help='Show x and / instead of commit counts in week patterns')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colors')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    # API server
    parser.add_argument('--port', type=int,
                        help='Port for --serve (default from config)')
    parser.add_argument('--host',
                        help='Host for --serve (default from config)')

    return parser


def build_directive(args) -> Optional[TimeDirective]:
    """Turn parsed flags into a single time directive (None for the default)."""
    if args.last_weekday is not None:
        return TimeDirective.last_weekday(args.last_weekday)
    if args.last_workday:
        return TimeDirective.last_workday()
    if args.on is not None:
        return TimeDirective.days_ago(args.on)
    if args.today:
        return TimeDirective.today()
    if args.days is not None:
        return TimeDirective.last_n_days(args.days)
    if args.after or args.before:
        return TimeDirective.date_range(args.after, args.before)
    return None


def main(argv=None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config()
    color_enabled = config['display'].get('color_enabled', True) and not args.no_color
    parent_dir = expand_path(args.parent) if args.parent else get_parent_dir(config)
    if args.author:
        config['git']['author'] = args.author

    if args.serve:
        _run_serve(config, parent_dir, args, color_enabled)
        return

    from yday.sources import SourceError, find_repositories, make_collector

    try:
        if args.projects:
            from yday.reports.projects import generate_projects_list
            print(generate_projects_list(find_repositories(parent_dir)))
            return

        now = datetime.now(timezone.utc)
        directive = build_directive(args)
        collect = make_collector(parent_dir, config, verbose=args.verbose)
        print_verbose(f"Directive: {directive}", args.verbose)
        print_verbose(f"Parent directory: {parent_dir}", args.verbose)

        if args.timeline or args.week:
            _show_timeline(directive, now, collect, parent_dir, config, args, color_enabled)
        else:
            _show_summary(directive, now, collect, parent_dir, args)

    except SourceError as e:
        print_error(str(e), color_enabled)
        sys.exit(1)


def _show_timeline(directive, now, collect, parent_dir, config, args, color_enabled):
    """Run the timeline pipeline and print it, exiting 1 on validation failure."""
    from yday.reports.timeline import generate_timeline_report
    from yday.timeline.pipeline import run_pipeline

    report = run_pipeline(directive, now, collect, force_week_view=args.week)

    print_verbose(f"Step 1 - Timespan: {report.span.description} "
                  f"({report.span.start_date} to {report.span.end_date})", args.verbose)
    print_verbose(f"Step 2 - Repositories with commits: {len(report.items)}", args.verbose)
    print_verbose(f"Step 3 - Timeline generated: {report.display_kind.value}", args.verbose)

    if not report.validation.is_valid:
        print_error("Timeline validation failed: " + ', '.join(report.validation.errors),
                    color_enabled)
        sys.exit(1)
    print_verbose("Step 4 - Validation passed", args.verbose)

    details = args.details or config['display'].get('show_legend', False)
    print(generate_timeline_report(report, display_path(parent_dir),
                                   details=details, symbols=args.symbols))


def _show_summary(directive, now, collect, parent_dir, args):
    """Default view: per-repository commit counts with heuristic summaries."""
    from yday.analysis.semantic import summarize
    from yday.reports.summary import generate_summary_report
    from yday.timeline.ingest import ingest
    from yday.timeline.timespan import resolve

    span = resolve(directive, now)
    activities = ingest(collect(span), span)
    print_verbose(f"Parsed {len(activities)} repos with commits", args.verbose)
    print(generate_summary_report(summarize(activities), span, display_path(parent_dir)))


def _run_serve(config, parent_dir, args, color_enabled):
    """Start the JSON API server."""
    try:
        import uvicorn
    except ImportError:
        print("Error: The API server requires additional dependencies.")
        print("Install them with: python -m pip install fastapi uvicorn pydantic")
        sys.exit(1)

    from yday.server.app import create_app
    app = create_app(config=config, parent_dir=parent_dir)

    host = args.host or config['server']['host']
    port = args.port or config['server']['port']
    print_status(colorize(f"Starting yday API at http://{host}:{port}", Colors.GREEN, color_enabled))
    print_status("Press Ctrl+C to stop")

    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == '__main__':
    main()
