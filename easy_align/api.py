"""
API module for column alignment.
Provides high-level interface for easy integration with editors and scripts.
"""

from typing import Optional
import logging

from .core.engine import AlignmentEngine, align_text
from .core.matcher import build_matcher, escape_literal
from .models import AlignConfig, AlignmentResult, InvalidPatternError
from .parser import parse_pattern


logger = logging.getLogger(__name__)


def align(
    text: str,
    pattern: str,
    align_after: bool = False,
    is_global: bool = False,
    global_count: int = 0,
    is_regex: bool = False,
    align_right: bool = False,
    force: bool = False,
) -> str:
    """Align ``text`` on ``pattern``.

    Never raises for a malformed pattern: the original text is returned
    instead, so a caller can show a validation message without corrupting
    the document.
    """
    return align_text(
        text,
        pattern,
        align_after=align_after,
        is_global=is_global,
        global_count=global_count,
        is_regex=is_regex,
        align_right=align_right,
        force=force,
    )


def align_with_modifiers(text: str, raw: str) -> str:
    """Align ``text`` using a raw input such as ``"r/\\s+=/g2n"``.

    An input that leaves no pattern after its modifiers are stripped
    (``""``, ``"r/"``, ``"/g"``) returns the original text.
    """
    return run_with_modifiers(text, raw).text


def run_with_modifiers(text: str, raw: str) -> AlignmentResult:
    """Like :func:`align_with_modifiers` but returns the full result."""
    parsed = parse_pattern(raw)
    if parsed is None:
        return AlignmentResult(
            text=text, original_text=text, config=AlignConfig(), pattern=""
        )
    return AlignmentEngine(parsed.to_config()).run(text, parsed.pattern)


def validate_pattern(pattern: str, is_regex: bool = False) -> Optional[str]:
    """Return None if ``pattern`` is usable, otherwise a message for display."""
    try:
        build_matcher(pattern, is_regex)
    except InvalidPatternError as e:
        logger.debug(f"Pattern rejected: {e}")
        return str(e)
    return None


__all__ = [
    "align",
    "align_with_modifiers",
    "run_with_modifiers",
    "validate_pattern",
    "escape_literal",
]
