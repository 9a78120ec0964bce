"""Column width resolution

Computes, for every column index, the widest rendered segment across all
participating lines.
"""

from typing import Dict, List, Optional
import logging

import numpy as np

from ..models import AlignConfig, TokenizedLine


logger = logging.getLogger(__name__)


def effective_width(text: str, delimiter: Optional[str], align_after: bool) -> int:
    """Rendered width of a text segment within its column.

    When aligning after the delimiter, the delimiter is part of the column.
    """
    width = len(text)
    if align_after:
        width += len(delimiter or "")
    return width


def participates(line: TokenizedLine, config: AlignConfig) -> bool:
    """Whether ``line`` takes part in alignment at all.

    Lines without an occurrence are left alone unless ``force`` is set.
    """
    return line.is_matched or config.force


def in_scope(index: int, config: AlignConfig) -> bool:
    """Whether the pair at segment ``index`` is below the bounded-count cutoff."""
    cutoff = config.cutoff()
    return cutoff is None or index < cutoff


class ColumnWidthResolver:
    """Build the column width table for a block of tokenized lines"""

    def __init__(self, config: AlignConfig):
        self.config = config

    def row_widths(self, line: TokenizedLine) -> List[int]:
        """Effective widths of the in-scope columns of one line."""
        widths = []
        for i, text, delimiter in line.pairs():
            if not in_scope(i, self.config):
                break
            widths.append(effective_width(text, delimiter, self.config.align_after))
        return widths

    def resolve(self, lines: List[TokenizedLine]) -> Dict[int, int]:
        """Map each column index to its maximum width.

        Columns that no line reaches are absent from the result.
        """
        rows = [self.row_widths(line) for line in lines if participates(line, self.config)]
        if not rows:
            return {}

        n_cols = max(len(row) for row in rows)
        # -1 marks cells a line does not reach
        matrix = np.full((len(rows), n_cols), -1, dtype=np.int64)
        for r, row in enumerate(rows):
            matrix[r, : len(row)] = row

        maxima = matrix.max(axis=0)
        table = {col: int(width) for col, width in enumerate(maxima) if width >= 0}
        logger.debug(f"Resolved {len(table)} column widths from {len(rows)} lines: {table}")
        return table
