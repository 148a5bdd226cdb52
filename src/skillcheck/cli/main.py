"""CLI entrypoint for skillcheck."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from skillcheck import __version__
from skillcheck.cli.handlers import handle_list_checks, handle_validate, handle_validate_config
from skillcheck.constants.branding import BRAND_NAME, CLI_DESCRIPTION

VALIDATE_EPILOG: str = """\
examples:
  skillcheck validate                              validate every skill under skills/
  skillcheck validate skills/tanstack-query        validate a single skill
  skillcheck validate skills/tanstack-query/SKILL.md references/a.md
                                                   validate the skills containing these files
"""


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser(
        "validate",
        help="Validate skill documents",
        epilog=VALIDATE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    validate.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Skill directories, directories of skills, or files inside a skill (default: all skills)",
    )
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Workspace root path (default: .)")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    validate.add_argument("-o", "--output", type=Path, default=None, help="Write a JSON report to this path")
    validate.add_argument(
        "-d",
        "--disable",
        action="append",
        default=[],
        metavar="CHECK_ID",
        help="Disable a check by id (repeat flag for multiple values)",
    )
    validate.add_argument("--strict", action="store_true", help="Fail when any warning is reported")
    validate.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    validate.add_argument("--no-color", action="store_true", help="Disable colored output")
    validate.add_argument("-v", "--verbose", action="store_true", help="Show check ids, all warnings and diagnostics")

    validate_config = subparsers.add_parser("validate-config", help="Validate configuration without checking skills")
    validate_config.add_argument("-r", "--root", type=Path, default=Path("."), help="Workspace root path (default: .)")
    validate_config.add_argument("-c", "--config", type=Path, help="Explicit config file")

    subparsers.add_parser("list-checks", help="List available check ids")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(message)s")

    if args.command == "validate":
        return handle_validate(args)
    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "list-checks":
        return handle_list_checks(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
