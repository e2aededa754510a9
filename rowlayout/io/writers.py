"""
I/O Writers

Handles writing of layout results.
"""

from __future__ import annotations
from typing import Optional, TextIO
from pathlib import Path
import logging
import sys

from ..layout.types import LayoutResult
from ..types import LayoutMetadata, PathLike

logger = logging.getLogger(__name__)


class RectWriter:
    """
    Writes item rects as TSV with '# key=value' metadata lines

    Format:
        # container_width=300.0
        # content_width=300.0
        # content_height=50.0
        # alignment=right
        index  row  column  fraction  x  y  width  height
        ...
    """

    def __init__(self, float_format: str = '%.4f'):
        """
        Initialize rect writer

        Args:
            float_format: printf-style format for float columns
        """
        self.float_format = float_format

    @staticmethod
    def metadata(result: LayoutResult) -> LayoutMetadata:
        return {
            'container_width': result.container_width,
            'content_width': result.content_size.width,
            'content_height': result.content_size.height,
            'alignment': result.alignment.value,
        }

    def _write_to(self, result: LayoutResult, handle: TextIO) -> None:
        for key, value in self.metadata(result).items():
            handle.write(f"# {key}={value}\n")
        result.to_dataframe().to_csv(
            handle, sep='\t', index=False, float_format=self.float_format
        )

    def write(self, result: LayoutResult, output_file: Optional[PathLike] = None) -> None:
        """
        Write rects to a TSV file, or to stdout when output_file is None

        Args:
            result: Layout result to export
            output_file: Path to output TSV file
        """
        if output_file is None:
            self._write_to(result, sys.stdout)
            return

        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            self._write_to(result, f)

        if len(result) == 0:
            logger.warning(f"Layout has no items, wrote metadata only to {path}")
        logger.info(f"Wrote {len(result)} rects to {path}")


def write_rects(result: LayoutResult, output_file: Optional[PathLike] = None) -> None:
    """
    Convenience function to write rects

    Args:
        result: Layout result to export
        output_file: Output TSV path (stdout when None)
    """
    RectWriter().write(result, output_file)
