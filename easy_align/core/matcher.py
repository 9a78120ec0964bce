"""Pattern matcher strategies

Defines the unified interface for locating delimiter occurrences in a line.
Two strategies are provided: exact literal text and regular expressions.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple
import re

from ..models import InvalidPatternError


# Characters that carry meaning inside a regular expression
_SPECIAL_CHARS = re.compile(r"[.*+?^${}()|\[\]\\]")


def escape_literal(text: str) -> str:
    """Prefix every regex metacharacter in ``text`` with a backslash.

    Only ``. * + ? ^ $ { } ( ) | [ ] \\`` are escaped; everything else
    (spaces, ``=``, ``:`` ...) is left untouched.
    """
    return _SPECIAL_CHARS.sub(r"\\\g<0>", text)


class PatternMatcher(ABC):
    """Matcher base class

    Subclasses only need to enumerate match spans; first-match lookup and
    split-with-delimiters are built on top of that.
    """

    def __init__(self, pattern: str):
        self.pattern = pattern

    @property
    @abstractmethod
    def expression(self) -> str:
        """Regular expression equivalent of this matcher."""
        raise NotImplementedError

    @abstractmethod
    def iter_spans(self, line: str) -> Iterator[Tuple[int, int]]:
        """Yield ``(start, end)`` of every non-overlapping occurrence, left to right.

        Implementations must always advance past zero-width occurrences.
        """
        raise NotImplementedError

    def find_first(self, line: str) -> Optional[Tuple[int, str]]:
        """Return ``(offset, matched_text)`` of the first occurrence, or None."""
        for start, end in self.iter_spans(line):
            return start, line[start:end]
        return None

    def split(self, line: str) -> List[str]:
        """Split ``line`` on every occurrence, keeping the delimiters.

        Returns ``[T0, D0, T1, D1, ..., Tn]``. Zero-width occurrences at the
        line edges or directly after the previous occurrence are dropped so
        they never produce empty edge columns.
        """
        segments = []
        last = 0
        for start, end in self.iter_spans(line):
            if start == end and (start == last or start == len(line)):
                continue
            segments.append(line[last:start])
            segments.append(line[start:end])
            last = end
        segments.append(line[last:])
        return segments

    def __repr__(self):
        return f"{self.__class__.__name__}({self.pattern!r})"


class LiteralMatcher(PatternMatcher):
    """Exact-text matcher; never interprets regex syntax."""

    @property
    def expression(self) -> str:
        return escape_literal(self.pattern)

    def iter_spans(self, line: str) -> Iterator[Tuple[int, int]]:
        size = len(self.pattern)
        pos = line.find(self.pattern)
        while pos != -1:
            yield pos, pos + size
            # Step at least one character so an empty pattern terminates
            pos = line.find(self.pattern, pos + max(size, 1))


class RegexMatcher(PatternMatcher):
    """Regular expression matcher."""

    def __init__(self, pattern: str):
        super().__init__(pattern)
        try:
            self.regex = re.compile(pattern)
        except (re.error, OverflowError) as e:
            # OverflowError: repeat counts beyond the engine limit, e.g. a{99999999999}
            raise InvalidPatternError(pattern, str(e)) from e

    @property
    def expression(self) -> str:
        return self.pattern

    def iter_spans(self, line: str) -> Iterator[Tuple[int, int]]:
        # re.finditer already steps over empty matches
        for match in self.regex.finditer(line):
            yield match.span()

    def find_first(self, line: str) -> Optional[Tuple[int, str]]:
        match = self.regex.search(line)
        if match is None:
            return None
        return match.start(), match.group(0)


def build_matcher(pattern: str, is_regex: bool = False) -> PatternMatcher:
    """Create the matcher strategy for ``pattern``.

    Raises:
        InvalidPatternError: ``is_regex`` is set and the pattern does not compile
    """
    if is_regex:
        return RegexMatcher(pattern)
    return LiteralMatcher(pattern)
