"""CLI entrypoint for Regimen."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from regimen import __version__
from regimen.cli.handlers import handle_classify, handle_recommend, handle_validate_config
from regimen.constants.branding import CLI_DESCRIPTION
from regimen.constants.config import LOG_FORMAT
from regimen.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="regimen",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rec = subparsers.add_parser("recommend", help="Recommend products for a set of analysis findings")
    rec.add_argument("-C", "--catalog", type=Path, required=True, help="Catalog YAML file")
    rec.add_argument("-F", "--findings", type=Path, required=True, help="Analysis findings JSON file")
    rec.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding regimen.yaml")
    rec.add_argument("-c", "--config", type=Path, help="Explicit config file")
    rec.add_argument("-o", "--out", type=Path, default=None, help="Also write the JSON report to this path")
    rec.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Stdout format: text (default) or json",
    )
    rec.add_argument("--no-color", action="store_true", help="Disable colored output")
    rec.add_argument("-v", "--verbose", action="store_true", help="Show diagnostics and debug logging")

    classify = subparsers.add_parser("classify", help="Print the severity bucket for a 1-10 rating")
    classify.add_argument("rating", type=float, help="Rating to classify")
    classify.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding regimen.yaml")
    classify.add_argument("-c", "--config", type=Path, help="Explicit config file")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without recommending")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding regimen.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if args.command == "recommend":
        return handle_recommend(args)
    if args.command == "classify":
        return handle_classify(args)
    if args.command == "validate-config":
        return handle_validate_config(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
