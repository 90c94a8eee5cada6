"""Command line interface for enroll-advisor.

Examples::

    enroll-advisor sample --output roster.json
    enroll-advisor recommend --roster roster.json --today 2025-03-04
    enroll-advisor weekly --roster roster.json --start 30 --days 7
    enroll-advisor serve < requests.jsonl
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from enroll_advisor.api import get_recommendation, get_weekly_recommendations, load_roster_file
from enroll_advisor.config import AdvisorConfig
from enroll_advisor.days import parse_day
from enroll_advisor.exceptions import AdvisorError
from enroll_advisor.logging import setup_logging
from enroll_advisor.rpc import serve
from enroll_advisor.scenarios import sample_payload
from enroll_advisor.sinks import ConsoleSink, JsonFileSink

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enroll-advisor",
        description="Advise which admission payment to make today.",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--log-format", choices=["standard", "json"], default=None)
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("--output-dir", type=Path, default=None, help="Write results to JSON files")
    parser.add_argument(
        "--pay-top-choice-immediately",
        action="store_true",
        default=None,
        help="Pay the top choice's fee as soon as it passes instead of at its deadline",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    recommend = sub.add_parser("recommend", help="Recommend today's payment action")
    recommend.add_argument("--roster", type=Path, required=True)
    recommend.add_argument("--today", required=True, help="Day number or YYYY-MM-DD")

    weekly = sub.add_parser("weekly", help="Project recommendations over several days")
    weekly.add_argument("--roster", type=Path, required=True)
    weekly.add_argument("--start", required=True, help="Day number or YYYY-MM-DD")
    weekly.add_argument("--days", type=int, default=None)

    sample = sub.add_parser("sample", help="Write the built-in sample roster")
    sample.add_argument("--output", type=Path, default=None)

    sub.add_parser("serve", help="Answer JSON-RPC requests on stdin/stdout")
    return parser


def _config_from_args(args: argparse.Namespace) -> AdvisorConfig:
    config = AdvisorConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format
    if args.pay_top_choice_immediately is not None:
        config.pay_top_choice_immediately = args.pay_top_choice_immediately
    return config


def _run(args: argparse.Namespace, config: AdvisorConfig) -> int:
    if args.command == "serve":
        serve(sys.stdin, sys.stdout, config)
        return 0

    if args.command == "sample":
        payload = sample_payload()
        if args.output:
            args.output.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
            logger.info("Sample roster written to %s", args.output)
        else:
            sink = ConsoleSink(pretty=True)
            sink.write("sample", payload)
            sink.close()
        return 0

    schools, states = load_roster_file(args.roster)
    if args.command == "recommend":
        today = parse_day(args.today, config.base_year)
        name = f"recommendation_day{today}"
        result = get_recommendation(today, schools, states, config)
    else:
        start = parse_day(args.start, config.base_year)
        name = f"weekly_day{start}"
        result = get_weekly_recommendations(start, schools, states, args.days, config)

    if args.output_dir:
        sink = JsonFileSink(args.output_dir, pretty=args.pretty)
    else:
        sink = ConsoleSink(pretty=args.pretty)
    sink.write(name, result)
    sink.close()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _config_from_args(args)
    except AdvisorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    setup_logging(config.log_level, config.log_format)

    try:
        return _run(args, config)
    except AdvisorError as exc:
        logger.warning("Invalid input: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except (OSError, ValueError) as exc:
        logger.warning("Invalid input: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
