"""
Core modules for column alignment.
"""

from .matcher import (
    PatternMatcher,
    LiteralMatcher,
    RegexMatcher,
    build_matcher,
    escape_literal,
)
from .tokenizer import LineTokenizer
from .widths import ColumnWidthResolver
from .reconstructor import LineReconstructor
from .engine import AlignmentEngine, align_text

__all__ = [
    "PatternMatcher",
    "LiteralMatcher",
    "RegexMatcher",
    "build_matcher",
    "escape_literal",
    "LineTokenizer",
    "ColumnWidthResolver",
    "LineReconstructor",
    "AlignmentEngine",
    "align_text",
]
