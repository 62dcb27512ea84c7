"""Command-line entry point."""

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from localekeys.config.settings import Config
from localekeys.core.constants import BranchValues, Defaults, LogLevels
from localekeys.core.exceptions import LocaleKeysError
from localekeys.exporters.summary import print_summary
from localekeys.generator import LocaleKeysGenerator
from localekeys.utils.logger import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Every default is None so unset flags do not override config."""
    parser = argparse.ArgumentParser(
        prog='localekeys',
        description='Generate locale key constants and an embedded messages table from JSON locale files'
    )
    parser.add_argument(
        '-S', '--source-dir',
        help=f'Folder containing localization files (default: {Defaults.SOURCE_DIR})'
    )
    parser.add_argument(
        '-s', '--source-file',
        help='File to use for localization, relative to the source folder'
    )
    parser.add_argument(
        '-t', '--template-locale',
        help='Document name (e.g. "en") whose keys define the constants (default: first file)'
    )
    parser.add_argument(
        '-O', '--output-dir',
        help=f'Output folder for the generated files (default: {Defaults.OUTPUT_DIR})'
    )
    parser.add_argument(
        '-o', '--output-file',
        help=f'Output keys file name (default: {Defaults.OUTPUT_FILE})'
    )
    parser.add_argument(
        '-m', '--output-message-file',
        help=f'Output messages file name (default: {Defaults.OUTPUT_MESSAGE_FILE})'
    )
    parser.add_argument(
        '--branch-values',
        choices=BranchValues.ALL,
        help='Value stored for intermediate keys in the messages table (default: json)'
    )
    parser.add_argument(
        '--strict',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Fail on colliding or invalid constant names (default: on)'
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        help=f'Maximum nesting depth of a document, at most {Defaults.MAX_DEPTH_LIMIT} '
             f'(default: {Defaults.MAX_DEPTH})'
    )
    parser.add_argument(
        '--max-workers',
        type=int,
        help=f'Threads used to parse documents (default: {Defaults.MAX_WORKERS})'
    )
    parser.add_argument(
        '-c', '--config',
        help=f'YAML config file (default: {Defaults.CONFIG_FILE} when present)'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LogLevels.ALL,
        help='Logging level'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--summary',
        action='store_true',
        help='Print a generation summary'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit code (0 on success, 1 on any generation error)
    """
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        config = Config.from_args(args)
    except LocaleKeysError as e:
        setup_logging(LogLevels.INFO)
        get_logger(__name__).error(f"[ERROR] {e}")
        return 1

    setup_logging(config.log_level)
    logger = get_logger(__name__)
    logger.debug(f"Configuration: {config}")

    try:
        result = LocaleKeysGenerator(config).run()
    except LocaleKeysError as e:
        logger.error(f"[ERROR] {e}")
        return 1

    if args.summary:
        print_summary(result.summary())
    return 0


if __name__ == '__main__':
    sys.exit(main())
