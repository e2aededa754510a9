"""Layout subcommand - compute item rects for a container width"""

from __future__ import annotations
from typing import Callable, Dict, Optional
from argparse import ArgumentParser, Namespace, _SubParsersAction
from dataclasses import replace
import logging

from . import add_spec_arguments, load_spec, setup_logging
from ..config import LayoutConfig
from ..errors import LayoutError
from ..io import RectWriter
from ..layout import RowLayoutEngine
from ..layout.types import LayoutResult
from ..types import PresetName

logger = logging.getLogger(__name__)

PRESETS: Dict[PresetName, Callable[[], LayoutConfig]] = {
    'default': LayoutConfig,
    'compact': LayoutConfig.compact,
    'flush': LayoutConfig.flush,
}


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Compute item rectangles and content size'
    )
    add_spec_arguments(parser)

    parser.add_argument('--width', type=float, required=True,
                        help='Container width (px)')
    parser.add_argument('--output', metavar='TSV_FILE',
                        help='Output TSV file (default: print to stdout)')

    # Layout policy (optional, use spec file config or defaults)
    parser.add_argument('--preset', choices=sorted(PRESETS),
                        help='Start from a preset config instead of the spec file config')
    parser.add_argument('--item-spacing', type=float,
                        help='Horizontal gap between items px (default: 20)')
    parser.add_argument('--row-spacing', type=float,
                        help='Vertical gap between rows px (default: 20)')
    parser.add_argument('--item-height', type=float,
                        help='Fixed item height px (default: 30)')
    parser.add_argument('--trim-trailing-spacing', action='store_true',
                        help='End content height at the last row instead of after one more row gap')

    return parser  # type: ignore[no-any-return]


def build_config(args: Namespace, file_config: Optional[LayoutConfig]) -> LayoutConfig:
    """Preset (or spec file config, or defaults) with command-line overrides applied"""
    preset = getattr(args, 'preset', None)
    if preset:
        config = PRESETS[preset]()
    else:
        config = file_config or LayoutConfig()

    overrides = {
        name: getattr(args, name, None)
        for name in ('item_spacing', 'row_spacing', 'item_height')
        if getattr(args, name, None) is not None
    }
    if getattr(args, 'trim_trailing_spacing', False):
        overrides['trim_trailing_row_spacing'] = True
    if not overrides:
        return config
    try:
        return replace(config, **overrides)
    except ValueError as e:
        raise LayoutError(f"Invalid layout options: {e}") from e


def run(args: Namespace) -> LayoutResult:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        LayoutResult that was written
    """
    setup_logging(getattr(args, 'debug', False))

    spec, file_config = load_spec(args)
    config = build_config(args, file_config)
    logger.info(f"Container width: {args.width}")
    logger.info(f"Item spacing: {config.item_spacing}, row spacing: {config.row_spacing}, "
                f"item height: {config.item_height}")

    engine = RowLayoutEngine(config)
    result = engine.layout(args.width, spec)

    output = getattr(args, 'output', None)
    RectWriter().write(result, output)
    if output:
        logger.info(f"✓ Rects saved: {output}")
    return result
