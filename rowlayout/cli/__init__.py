"""
Command-line subcommands for RowLayout

Shared helpers for logging setup and spec loading.
"""

from __future__ import annotations
from typing import Optional, Tuple
from argparse import ArgumentParser, Namespace
import logging

from ..config import LayoutConfig
from ..data import DEFAULT_DEMO_SPEC
from ..io import read_spec
from ..layout.types import LayoutSpec

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure root logging for a subcommand run"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )


def add_spec_arguments(parser: ArgumentParser) -> None:
    """Add the --spec / --demo input options and --debug"""
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--spec', metavar='JSON_FILE',
                        help='Layout spec file (alignment, rows, optional config)')
    source.add_argument('--demo', action='store_true',
                        help='Use the built-in demo spec')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging for troubleshooting')


def load_spec(args: Namespace) -> Tuple[LayoutSpec, Optional[LayoutConfig]]:
    """Read the spec selected by --spec or --demo"""
    if getattr(args, 'demo', False):
        logger.info("Using built-in demo spec")
        return read_spec(DEFAULT_DEMO_SPEC)
    logger.info(f"Using spec file: {args.spec}")
    return read_spec(args.spec)
