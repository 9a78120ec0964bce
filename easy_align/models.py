"""对齐数据模型

包含对齐引擎使用的配置、分词结果、运行结果和异常类。
"""

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Optional, Any
from enum import Enum


class SegmentKind(Enum):
    """分段类型"""

    TEXT = "text"
    DELIMITER = "delimiter"


class InvalidPatternError(ValueError):
    """Raised when a delimiter pattern cannot be compiled.

    Wraps the underlying ``re.error`` or ``OverflowError`` so callers can
    tell a malformed pattern apart from other ValueError conditions.
    """

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid regex pattern '{pattern}': {reason}")
        self.pattern = pattern
        self.reason = reason


@dataclass
class AlignConfig:
    """对齐配置

    Attributes:
        align_after: pad after the delimiter instead of before it
        is_global: align every occurrence per line, not only the first
        global_count: in global mode, align only the first N occurrences (0 or less = all)
        is_regex: treat the pattern as a regular expression
        align_right: right-align the text in front of each delimiter
        force: let lines without any occurrence take part in alignment
    """

    align_after: bool = False
    is_global: bool = False
    global_count: int = 0
    is_regex: bool = False
    align_right: bool = False
    force: bool = False

    def validate(self):
        """Reject settings a user most likely mistyped; the engine itself accepts them."""
        if self.global_count < 0:
            raise ValueError(
                f"global_count must be >= 0, got {self.global_count}"
            )

    def cutoff(self) -> Optional[int]:
        """Segment index at which alignment stops, or None if unbounded."""
        if self.is_global and self.global_count > 0:
            return 2 * self.global_count
        return None

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)


@dataclass
class ParsedPattern:
    """Result of parsing a raw modifier-bearing input string."""

    pattern: str
    is_regex: bool = False
    is_global: bool = False
    global_count: int = 0
    is_after: bool = False
    is_right: bool = False
    is_forced: bool = False

    def to_config(self) -> AlignConfig:
        return AlignConfig(
            align_after=self.is_after,
            is_global=self.is_global,
            global_count=self.global_count,
            is_regex=self.is_regex,
            align_right=self.is_right,
            force=self.is_forced,
        )


@dataclass
class TokenizedLine:
    """单行分词结果

    ``segments`` alternates text and delimiter and always ends with text.
    A line without any occurrence holds a single text segment.
    """

    segments: List[str]

    @property
    def is_matched(self) -> bool:
        return len(self.segments) > 1

    @property
    def delimiter_count(self) -> int:
        return len(self.segments) // 2

    def kind_of(self, index: int) -> SegmentKind:
        return SegmentKind.TEXT if index % 2 == 0 else SegmentKind.DELIMITER

    def pairs(self):
        """Yield ``(index, text, delimiter)`` for every even index.

        The trailing text segment is yielded with ``delimiter=None``.
        """
        for i in range(0, len(self.segments), 2):
            delimiter = self.segments[i + 1] if i + 1 < len(self.segments) else None
            yield i, self.segments[i], delimiter

    def __repr__(self):
        return f"TokenizedLine({self.segments!r})"


@dataclass
class AlignmentResult:
    """对齐运行结果"""

    text: str
    original_text: str
    config: AlignConfig
    pattern: str
    line_count: int = 0
    matched_lines: int = 0
    column_widths: Dict[int, int] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.text != self.original_text

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "pattern": self.pattern,
            "config": self.config.to_dict(),
            "success": self.success,
            "changed": self.changed,
            "line_count": self.line_count,
            "matched_lines": self.matched_lines,
            "column_widths": {str(k): v for k, v in self.column_widths.items()},
            "error": self.error,
            "text": self.text,
        }
