"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from regimen.catalog import load_catalog
from regimen.config import load_config, validate_config_file
from regimen.engine import recommend
from regimen.exceptions import (
    CatalogError,
    ConfigError,
    FindingsParseError,
    InvalidRatingConfigError,
)
from regimen.exceptions.validation import format_errors
from regimen.parsers import load_findings
from regimen.rating import classify_rating
from regimen.reporting import StdoutReporter, build_payload, write_recommendations

logger = logging.getLogger(__name__)


def handle_recommend(args: argparse.Namespace) -> int:
    """Load config, catalog and findings, then print ranked recommendations."""
    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        store = load_catalog(args.catalog)
    except (CatalogError, InvalidRatingConfigError) as exc:
        print(f"Catalog error: {exc}", file=sys.stderr)
        return 2

    try:
        findings = load_findings(args.findings)
    except FindingsParseError as exc:
        print(f"Findings error: {exc}", file=sys.stderr)
        return 2

    logger.debug("Loaded %d findings from %s", len(findings), args.findings)
    result = recommend(findings, store, config)

    if args.out is not None:
        write_recommendations(args.out, result)

    if args.format == "json":
        print(json.dumps(build_payload(result), indent=2, sort_keys=True))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(result, color=use_color, verbose=args.verbose).render())

    if result.catalog_error is not None:
        print(f"Catalog unavailable: {result.catalog_error}", file=sys.stderr)
        return 1
    return 0


def handle_classify(args: argparse.Namespace) -> int:
    """Print the severity bucket for a single rating."""
    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print(classify_rating(args.rating, config.rating))
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
