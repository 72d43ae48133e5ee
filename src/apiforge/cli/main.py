# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the apiforge command-line interface."""

import argparse
import sys
from pathlib import Path

from apiforge.compiler.artifact import ArtifactError, serialize, write_artifact
from apiforge.compiler.build import load_api
from apiforge.generator.config import ConfigurationError, load_configuration
from apiforge.generator.errors import ResolveError
from apiforge.generator.renderer import JinjaRenderer
from apiforge.generator.resolver import resolve
from apiforge.generator.writer import DEFAULT_OUTPUT_DIRECTORY, WriteError, write_target_files
from apiforge.model.entities import RawApi
from apiforge.scraper.scraper import DEFAULT_HEADING_TAG, ScrapeError
from apiforge.validation.checks import validate

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the apiforge CLI."""
    parser = argparse.ArgumentParser(
        prog="apiforge",
        description="apiforge: generate code from HTML API documentation",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate code from an API document",
        description="Scrape an API document and render the configured templates into the output directory.",
    )
    _add_document_arguments(generate_parser)
    generate_parser.add_argument(
        "--config",
        default=_DEFAULT_CONFIGURATION,
        help=f"Path to the generation configuration (default: {_DEFAULT_CONFIGURATION})",
    )
    generate_parser.add_argument(
        "--templates",
        default=None,
        help="Directory that template paths are relative to (default: directory of the configuration)",
    )
    generate_parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_DIRECTORY,
        help=f"Output directory, recreated on every run (default: {DEFAULT_OUTPUT_DIRECTORY})",
    )

    # scrape subcommand
    scrape_parser = subparsers.add_parser(
        "scrape",
        help="Print the scraped API model as JSON",
        description="Scrape an API document and print (or store) the raw API model as JSON.",
    )
    _add_document_arguments(scrape_parser)
    scrape_parser.add_argument(
        "--output",
        default=None,
        help="Write the model to this file instead of printing it",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the scraped API model for consistency",
        description="Report duplicate entities and members and references to unknown types.",
    )
    _add_document_arguments(check_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_DEFAULT_CONFIGURATION = "templates/configuration.json"


def _add_document_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "document",
        help="HTML API document, or a JSON model written by 'apiforge scrape --output'",
    )
    parser.add_argument(
        "--heading-tag",
        default=DEFAULT_HEADING_TAG,
        help=f"Tag whose text names the following table (default: {DEFAULT_HEADING_TAG})",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "scrape":
        return _cmd_scrape(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _load_api(args: argparse.Namespace) -> RawApi | None:
    """Load the API model named on the command line, reporting failures."""
    document = Path(args.document)
    try:
        raw_api = load_api(document, heading_tag=args.heading_tag)
    except (ScrapeError, ArtifactError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    print(f"Loaded {len(raw_api.dtos)} DTO(s) and {len(raw_api.methods)} method(s) from '{document}'.", file=sys.stderr)
    return raw_api


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    config_path = Path(args.config)
    template_dir = Path(args.templates) if args.templates is not None else config_path.parent
    output_dir = Path(args.output)

    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    raw_api = _load_api(args)
    if raw_api is None:
        return 1

    try:
        renderer = JinjaRenderer.from_configuration(configuration, template_dir)
        target_files = resolve(raw_api, configuration, renderer)
    except ResolveError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        write_target_files(target_files, output_dir)
    except WriteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Generated {len(target_files)} file(s) in '{output_dir}'.")
    return 0


def _cmd_scrape(args: argparse.Namespace) -> int:
    """Handle the scrape subcommand."""
    raw_api = _load_api(args)
    if raw_api is None:
        return 1

    if args.output is None:
        print(serialize(raw_api))
        return 0

    output = Path(args.output)
    try:
        write_artifact(raw_api, output)
    except ArtifactError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Model written to '{output}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    raw_api = _load_api(args)
    if raw_api is None:
        return 1

    result = validate(raw_api)
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    for error in result.errors:
        print(f"Error: {error.message}", file=sys.stderr)

    if result.has_errors:
        return 1

    print("No issues found.")
    return 0
