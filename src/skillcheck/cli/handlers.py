"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys

from skillcheck.constants.checks import CHECK_SUMMARIES
from skillcheck.exceptions import ConfigError, SkillCheckError
from skillcheck.exceptions.validation import format_errors
from skillcheck.reporting import StdoutReporter, write_report
from skillcheck.scanner import validate_workspace
from skillcheck.validation import preflight_validate


def handle_validate(args: argparse.Namespace) -> int:
    """Validate skills and return 0 on success, 1 on failure, 2 on bad configuration."""
    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        run = validate_workspace(
            root=args.root,
            paths=tuple(args.paths),
            config_path=args.config,
            disabled_checks=tuple(args.disable),
            fail_on_warnings=True if args.strict else None,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkillCheckError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        write_report(args.output, run)

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(run, color=use_color, verbose=args.verbose).render())

    if not run.reports:
        return 1
    return 0 if run.passed else 1


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_list_checks(args: argparse.Namespace) -> int:
    """Print every check id with its summary."""
    width = max(len(check_id) for check_id in CHECK_SUMMARIES)
    for check_id, summary in CHECK_SUMMARIES.items():
        print(f"{check_id:<{width}}  {summary}")
    return 0
