"""
RowLayout CLI

Command-line interface with subcommands for checking and laying out specs.
"""

import argparse
import logging
import sys
from .cli import layout, validate
from .errors import LayoutError

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        prog='rowlayout',
        description='RowLayout: Row-based box layout with fractional item widths'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    validate.add_parser(subparsers)
    layout.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    try:
        if args.command == 'validate':
            validate.run(args)
        elif args.command == 'layout':
            layout.run(args)
    except (LayoutError, FileNotFoundError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
