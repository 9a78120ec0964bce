"""
Easy Align: align delimiter-separated columns of text.
"""

import logging

from .api import align, align_with_modifiers, run_with_modifiers, validate_pattern
from .models import (
    AlignConfig,
    AlignmentResult,
    InvalidPatternError,
    ParsedPattern,
    SegmentKind,
    TokenizedLine,
)
from .parser import PatternParser, parse_pattern
from . import core

# Engine internals
from .core import (
    AlignmentEngine,
    ColumnWidthResolver,
    LineReconstructor,
    LineTokenizer,
    LiteralMatcher,
    PatternMatcher,
    RegexMatcher,
    align_text,
    build_matcher,
    escape_literal,
)

__version__ = "0.3.0"
__all__ = [
    "align",
    "align_with_modifiers",
    "run_with_modifiers",
    "validate_pattern",
    "escape_literal",
    "AlignConfig",
    "AlignmentResult",
    "InvalidPatternError",
    "ParsedPattern",
    "SegmentKind",
    "TokenizedLine",
    "PatternParser",
    "parse_pattern",
    "AlignmentEngine",
    "ColumnWidthResolver",
    "LineReconstructor",
    "LineTokenizer",
    "LiteralMatcher",
    "PatternMatcher",
    "RegexMatcher",
    "align_text",
    "build_matcher",
    "core",
]

# Configure default logging format to be minimal
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger = logging.getLogger("easy_align")
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)
