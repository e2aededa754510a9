"""
I/O Readers

Handles reading of layout spec files.
"""

from __future__ import annotations
from typing import Any, Optional
from pathlib import Path
import json
import logging

from ..config import LayoutConfig
from ..errors import SpecFormatError
from ..layout.types import Alignment, LayoutSpec, RowSpec
from ..types import LayoutSpecDict, PathLike, SpecReadResult

logger = logging.getLogger(__name__)


class LayoutSpecReader:
    """Reads layout specs from JSON files"""

    @staticmethod
    def parse(data: Any, source: str = '<data>') -> SpecReadResult:
        """
        Build a spec (and optional config) from decoded JSON

        Expected format:
            {"alignment": "right",
             "rows": [["small", 0.4], ["normal"]],
             "config": {"item_spacing": 10}}

        Args:
            data: Decoded JSON document
            source: Name used in error messages

        Returns:
            Tuple of (spec, config or None when the file carries no overrides)

        Raises:
            SpecFormatError: Missing keys, wrong types or unknown values
        """
        if not isinstance(data, dict):
            raise SpecFormatError(f"{source}: top level must be an object")
        for key in ('alignment', 'rows'):
            if key not in data:
                raise SpecFormatError(f"{source}: missing required key '{key}'")

        doc: LayoutSpecDict = data
        rows = doc['rows']
        if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
            raise SpecFormatError(f"{source}: 'rows' must be a list of lists")

        try:
            alignment = Alignment.parse(doc['alignment'])
            row_specs = tuple(RowSpec(tuple(r)) for r in rows)
        except ValueError as e:
            raise SpecFormatError(f"{source}: {e}") from e

        config: Optional[LayoutConfig] = None
        if 'config' in doc:
            if not isinstance(doc['config'], dict):
                raise SpecFormatError(f"{source}: 'config' must be an object")
            try:
                config = LayoutConfig.from_dict(doc['config'])
            except (TypeError, ValueError) as e:
                raise SpecFormatError(f"{source}: invalid config: {e}") from e

        return LayoutSpec(alignment, row_specs), config

    @classmethod
    def read(cls, filepath: PathLike) -> SpecReadResult:
        """
        Read a layout spec from a JSON file

        Args:
            filepath: Path to spec file

        Returns:
            Tuple of (spec, config or None)

        Raises:
            FileNotFoundError: If the file does not exist
            SpecFormatError: If the file is not a valid spec
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Spec file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise SpecFormatError(f"{path}: invalid JSON ({e})") from e

        spec, config = cls.parse(data, source=str(path))
        logger.info(f"Loaded spec from {path}: {spec.row_count} rows, "
                    f"{spec.item_count} items, alignment {spec.alignment.value}")
        return spec, config


def read_spec(filepath: PathLike) -> SpecReadResult:
    """
    Convenience function to read a spec file

    Args:
        filepath: Path to JSON spec file

    Returns:
        Tuple of (spec, config or None)
    """
    return LayoutSpecReader.read(filepath)
