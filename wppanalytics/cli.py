"""Command line entry point for the analytics report."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .client import ApiError, GraphClient
from .config import Config, ConfigError, load_access_token, validate
from .dateparse import DateParseError, parse_to_epoch
from .formatter import format_analytics, format_template_analytics
from .prompt import prompt_for_token


def split_list(value: str) -> list[str]:
    """Split a comma-separated option value into trimmed items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",")]


def load_timezone(name: str) -> tzinfo:
    """Return the named time zone, falling back to UTC with a warning."""
    if name in ("", "UTC"):
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        print(f"Warning: Could not load timezone '{name}': {exc}", file=sys.stderr)
        print("Falling back to UTC timezone", file=sys.stderr)
        return timezone.utc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report WhatsApp Business message and template analytics.",
        allow_abbrev=False,
    )

    def option(name: str, default: str, help_text: str) -> None:
        parser.add_argument(f"-{name}", f"--{name}", dest=name, default=default, help=help_text)

    option("wbaid", "", "WBA ID (required)")
    option(
        "start",
        "",
        "Start date in ISO-8601 format: YYYY-MM-DD or YYYY-MM-DDTHH:MM:SSZ (required)",
    )
    option(
        "end",
        "",
        "End date in ISO-8601 format: YYYY-MM-DD or YYYY-MM-DDTHH:MM:SSZ (required)",
    )
    option(
        "granularity",
        "DAY",
        "Granularity: HALF_HOUR, DAY, or MONTH (for analytics) / daily (for templates)",
    )
    option("timezone", "America/Sao_Paulo", "Timezone for date display")
    option("mode", "analytics", "Mode: analytics or template")
    option(
        "metrics",
        "",
        "Comma-separated metric types for templates (cost,clicked,delivered,read,sent)",
    )
    option("templates", "", "Comma-separated template IDs for template analytics")
    return parser


def _print_usage(prog: str) -> None:
    err = sys.stderr
    print(f"Usage: {prog} -wbaid=<id> -start=<date> -end=<date> [options]", file=err)
    print("\nBasic Analytics:", file=err)
    print(f"  {prog} -wbaid=123 -start=2025-06-20 -end=2025-06-24", file=err)
    print("\nTemplate Analytics:", file=err)
    print(
        f"  {prog} -mode=template -wbaid=123 -start=2025-06-20 -end=2025-06-24 "
        "-templates=<template-id> -metrics=cost,clicked,delivered,read,sent",
        file=err,
    )
    print("\nDate formats: YYYY-MM-DD or YYYY-MM-DDTHH:MM:SSZ", file=err)


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the report and return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = Config(
        wba_id=args.wbaid,
        start_date=args.start,
        end_date=args.end,
        granularity=args.granularity,
        timezone=args.timezone,
        mode=args.mode,
        metric_types=split_list(args.metrics),
        template_ids=split_list(args.templates),
    )

    if not (config.wba_id and config.start_date and config.end_date):
        _print_usage(parser.prog)
        return 1

    tz = load_timezone(config.timezone)

    try:
        config.access_token = load_access_token(prompt_for_token)
    except (EOFError, OSError) as exc:
        return _fail(f"Error reading access token: {exc}")

    try:
        validate(config)
    except ConfigError as exc:
        return _fail(f"Error: {exc}")

    try:
        start_epoch = parse_to_epoch(config.start_date)
    except DateParseError as exc:
        return _fail(f"Error parsing start date: {exc}")
    try:
        end_epoch = parse_to_epoch(config.end_date)
    except DateParseError as exc:
        return _fail(f"Error parsing end date: {exc}")

    client = GraphClient()
    if config.mode == "template":
        try:
            template_response = client.get_template_analytics(
                config.wba_id,
                start_epoch,
                end_epoch,
                config.granularity,
                config.metric_types,
                config.template_ids,
                config.access_token,
            )
        except ApiError as exc:
            return _fail(f"Error making template request: {exc}")
        print(format_template_analytics(template_response, tz), end="")
    else:
        try:
            response = client.get_analytics(
                config.wba_id,
                start_epoch,
                end_epoch,
                config.granularity,
                config.access_token,
            )
        except ApiError as exc:
            return _fail(f"Error making request: {exc}")
        print(format_analytics(response, tz), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())