#!/usr/bin/env python3
"""
Command line entry point: generate all web favicons from a single source image.

Usage: generate-favicons <source-image> <app-name> [output-folder] [--verbose]
"""
import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file before config reads them
load_dotenv()

from config import DEFAULT_OUTPUT_DIR
from errors import GenerationError, ValidationError
from logger import get_logger
from main import generate
from models import GenerationConfig

SCRIPT_NAME = "generate-favicons"

HELP_TEXT = f"""
Usage: {SCRIPT_NAME} <source-image.png> <app-name> [output-folder]

Required arguments:
  <source-image.png>       Path to the source image file
  <app-name>               Name of your application

Optional arguments:
  [output-folder]          Output directory for generated files (default: "{DEFAULT_OUTPUT_DIR}")

Options:
  --help, -h               Show this help message
  --verbose, -v            Enable verbose logging (show all output)

Example:
  {SCRIPT_NAME} logo.png "My Awesome App" custom-output"""


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports usage errors with exit code 1"""

    def print_help(self, file=None):
        print(HELP_TEXT, file=file or sys.stdout)

    def error(self, message):
        print(f"Error: {message}", file=sys.stderr)
        self.print_help()
        sys.exit(1)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog=SCRIPT_NAME)
    parser.add_argument("source_image", nargs="?")
    parser.add_argument("app_name", nargs="?")
    parser.add_argument("output_folder", nargs="?")
    # Positionals past [output-folder] are ignored
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def build_config(args: argparse.Namespace) -> GenerationConfig:
    """
    Turn parsed arguments into a validated GenerationConfig

    Raises:
        ValidationError: missing arguments or source image not found
    """
    config = GenerationConfig(
        source_image=args.source_image or "",
        name=args.app_name or "",
        output_dir=args.output_folder or DEFAULT_OUTPUT_DIR,
        verbose=args.verbose,
    )
    config.validate()
    return config


def display_welcome_message(verbose: bool) -> None:
    if verbose:
        print("===================================")
        print("        Favicons Generator         ")
        print("===================================")
        print("Generating all standard web favicons from a single source image.\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    try:
        config = build_config(args)
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        parser.print_help()
        return 1

    logger = get_logger(verbose=config.verbose)
    display_welcome_message(config.verbose)

    try:
        report = generate(config, logger)
    except GenerationError as e:
        print(f"\n❌ Error generating icons: {e}", file=sys.stderr)
        return 1

    failed = report.failed_results()
    if failed:
        logger.warning(f"{len(failed)} file(s) could not be generated", failed=[r.path for r in failed])

    if config.verbose:
        print("\n✅ All done! Your icons are ready to use.")
        print(f"Check the {config.output_dir} directory for all the generated files.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
