from typing import List

from .matcher import PatternMatcher
from ..models import AlignConfig, TokenizedLine


class LineTokenizer:
    """Split lines into alternating text/delimiter segments"""

    def __init__(self, matcher: PatternMatcher, config: AlignConfig):
        self.matcher = matcher
        self.config = config

    def tokenize_line(self, line: str) -> TokenizedLine:
        """Tokenize a single line

        Global mode keeps every occurrence; otherwise only the first one is
        used and the rest of the line stays in the trailing text segment.
        """
        if self.config.is_global:
            return TokenizedLine(self.matcher.split(line))

        found = self.matcher.find_first(line)
        if found is None:
            return TokenizedLine([line])

        index, matched = found
        return TokenizedLine(
            [line[:index], matched, line[index + len(matched) :]]
        )

    def tokenize(self, text: str) -> List[TokenizedLine]:
        return [self.tokenize_line(line) for line in text.split("\n")]
