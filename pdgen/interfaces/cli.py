"""
interfaces/cli.py
──────────────────────────────────────────────────────────────────────────────
Command-line interface for the position description generator.

Usage:
  # Browse the OPM taxonomy
  python -m pdgen.interfaces.cli --list-groups
  python -m pdgen.interfaces.cli --list-series 2200

  # Generate a description
  python -m pdgen.interfaces.cli --job-title "IT Specialist" \\
      --department "Office of the CIO" --grade GS-12 --family 2200 --series 2210

  # JSON output
  python -m pdgen.interfaces.cli ... --json

  # Via installed entry-point (pyproject.toml [project.scripts])
  pdgen-generate --list-groups

Exit codes:
  0 — success
  1 — fatal error (configuration, provider, catalog)
  2 — argument or validation error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from pdgen.config.log import configure_logging
from pdgen.domain.exceptions import PDGenError
from pdgen.domain.models import PayScaleGrade
from pdgen.services.catalog import get_catalog
from pdgen.services.container import get_generator
from pdgen.services.validation import validate_for_submission

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pdgen-generate",
        description="Generate a federal position description from OPM classification codes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    browse = p.add_mutually_exclusive_group()
    browse.add_argument(
        "--list-groups",
        action="store_true",
        help="List OPM occupational groups (job families) and exit.",
    )
    browse.add_argument(
        "--list-series",
        metavar="CODE",
        help="List the series of one job family and exit.",
    )
    p.add_argument("--job-title", "-t", dest="job_title", default="", help="Job title (3-100 chars).")
    p.add_argument("--department", "-d", default="", help="Department (2-100 chars).")
    p.add_argument(
        "--grade", "-g",
        dest="pay_scale_grade",
        default="",
        help=f"Pay scale and grade, one of: {', '.join(PayScaleGrade.values())}",
    )
    p.add_argument("--family", "-f", dest="job_family", default="", help="Job family code, e.g. 2200.")
    p.add_argument("--series", "-s", default="", help="Series code, e.g. 2210.")
    p.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON.",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


# ── Listing ────────────────────────────────────────────────────────────────

def _list_groups(json_output: bool) -> int:
    groups = get_catalog().list_occupational_groups()
    if json_output:
        print(json.dumps([g.model_dump() for g in groups], indent=2))
        return 0
    for g in groups:
        print(f"  {g.code}  {g.title}")
    return 0


def _list_series(group_code: str, json_output: bool) -> int:
    catalog = get_catalog()
    series = catalog.list_series_for_group(group_code)
    if json_output:
        print(json.dumps([s.model_dump() for s in series], indent=2))
        return 0
    if not series:
        print(f"No series found for job family {group_code!r}", file=sys.stderr)
        return 2
    group = catalog.get_group(group_code)
    print(f"\n{group.label}")
    print(f"{'─' * 60}")
    for s in series:
        print(f"  {s.code}  {s.title}")
    print()
    return 0


# ── Main logic ─────────────────────────────────────────────────────────────

def run(args: argparse.Namespace) -> int:
    """Execute the requested action.

    Returns:
        Exit code (0 = success, 1 = error, 2 = invalid input).
    """
    try:
        if args.list_groups:
            return _list_groups(args.json_output)
        if args.list_series is not None:
            return _list_series(args.list_series, args.json_output)
    except PDGenError as exc:
        logger.exception("Failed to load taxonomy")
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    candidate = {
        "jobTitle": args.job_title,
        "department": args.department,
        "payScaleGrade": args.pay_scale_grade,
        "jobFamily": args.job_family,
        "series": args.series,
    }

    try:
        validation = validate_for_submission(candidate)
        if not validation.ok:
            if args.json_output:
                print(json.dumps(
                    {"success": False, "details": [e.model_dump() for e in validation.error_list()]},
                    indent=2,
                ))
            else:
                for field_name, message in validation.errors.items():
                    print(f"  {field_name}: {message}", file=sys.stderr)
            return 2

        generator = get_generator()
        # Server-side validation runs again inside the generator path.
        server_check, result = generator.generate_from_candidate(candidate)
        if result is None:
            for field_name, message in server_check.errors.items():
                print(f"  {field_name}: {message}", file=sys.stderr)
            return 2
    except PDGenError as exc:
        logger.exception("Generation failed")
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        logger.exception("Generation failed: unexpected error")
        print(f"ERROR: generation failed: {exc}", file=sys.stderr)
        return 1

    if args.json_output:
        print(json.dumps(
            {
                "success": True,
                "request": validation.request.to_wire(),
                "description": result.text,
                "model": result.model,
                "usage": {"input": result.input_tokens, "output": result.output_tokens},
            },
            indent=2,
            ensure_ascii=False,
        ))
    else:
        print(f"\n{'─' * 60}")
        print(f"{validation.request.job_title}  |  {validation.request.pay_scale_grade.value}"
              f"  |  {validation.request.job_family}/{validation.request.series}")
        print(f"{'─' * 60}\n")
        print(result.text)
        print()
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the pdgen-generate console script."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "WARNING")

    sys.exit(run(args))


if __name__ == "__main__":
    main()
