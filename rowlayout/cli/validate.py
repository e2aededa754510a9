"""Validate subcommand - check a layout spec without laying it out"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from . import add_spec_arguments, load_spec, setup_logging
from ..config import LayoutConfig
from ..layout import validate
from ..layout.types import ValidationResult

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add validate subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for validate subcommand
    """
    parser = subparsers.add_parser(
        'validate',
        help='Check a layout spec for empty and overfull rows'
    )
    add_spec_arguments(parser)
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> ValidationResult:
    """
    Execute validate subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        ValidationResult of the spec

    Raises:
        EmptyRowError, OverfullRowError: The spec is invalid
    """
    setup_logging(getattr(args, 'debug', False))

    spec, file_config = load_spec(args)
    result = validate(spec, file_config or LayoutConfig())

    for row_index, total in enumerate(result.row_totals):
        logger.info(f"Row {row_index}: {len(spec.rows[row_index])} items, fractions sum {total:.3f}")
    logger.info(f"✓ Spec is valid: {result.row_count} rows, {result.item_count} items")
    return result
