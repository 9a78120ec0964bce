"""Alignment engine

Composes the tokenizer, the column width resolver and the reconstructor
into a single pure transform from (text, pattern, configuration) to the
aligned text.
"""

from typing import Optional
import logging

from ..models import AlignConfig, AlignmentResult, InvalidPatternError
from .matcher import build_matcher
from .reconstructor import LineReconstructor
from .tokenizer import LineTokenizer
from .widths import ColumnWidthResolver


class AlignmentEngine:
    """Stateless alignment engine

    One instance can be reused for any number of texts; nothing is kept
    between calls.
    """

    def __init__(self, config: Optional[AlignConfig] = None, **config_kwargs):
        self.config = config or AlignConfig(**config_kwargs)
        self.logger = logging.getLogger(__name__)

    def run(self, text: str, pattern: str) -> AlignmentResult:
        """Align ``text`` on ``pattern`` and report what happened.

        An invalid regular expression leaves the text untouched; the
        compilation message is kept on ``result.error``.
        """
        result = AlignmentResult(
            text=text, original_text=text, config=self.config, pattern=pattern
        )

        try:
            matcher = build_matcher(pattern, self.config.is_regex)
        except InvalidPatternError as e:
            self.logger.warning(f"{e}; leaving text unchanged")
            result.error = str(e)
            return result

        lines = LineTokenizer(matcher, self.config).tokenize(text)
        widths = ColumnWidthResolver(self.config).resolve(lines)
        result.text = LineReconstructor(self.config).rebuild(lines, widths)

        result.line_count = len(lines)
        result.matched_lines = sum(1 for line in lines if line.is_matched)
        result.column_widths = widths
        self.logger.debug(
            f"Aligned {result.matched_lines}/{result.line_count} lines on {matcher!r}"
        )
        return result

    def align(self, text: str, pattern: str) -> str:
        return self.run(text, pattern).text


def align_text(
    text: str,
    pattern: str,
    align_after: bool = False,
    is_global: bool = False,
    global_count: int = 0,
    is_regex: bool = False,
    align_right: bool = False,
    force: bool = False,
) -> str:
    """Align delimiter occurrences of ``pattern`` across the lines of ``text``.

    Args:
        text: Block of ``\\n``-separated lines
        pattern: Delimiter, literal text unless ``is_regex`` is set
        align_after: Align the text following the delimiter instead of the delimiter
        is_global: Align all occurrences per line instead of only the first
        global_count: With ``is_global``, align only the first N occurrences (0 = all)
        is_regex: Interpret ``pattern`` as a regular expression
        align_right: Right-align the text in front of each delimiter
        force: Include lines without any occurrence in the first column

    Returns:
        The aligned text, or ``text`` unchanged if the pattern is invalid
    """
    config = AlignConfig(
        align_after=align_after,
        is_global=is_global,
        global_count=global_count,
        is_regex=is_regex,
        align_right=align_right,
        force=force,
    )
    return AlignmentEngine(config).align(text, pattern)
