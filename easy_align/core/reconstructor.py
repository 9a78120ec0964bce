from typing import Dict, List

from ..models import AlignConfig, TokenizedLine
from .widths import effective_width, in_scope, participates


class LineReconstructor:
    """Re-emit tokenized lines with column padding

    Padding placement by configuration:

    ===========  ===========  ===========================
    align_after  align_right  layout
    ===========  ===========  ===========================
    False        False        text + pad + delimiter
    False        True         pad + text + delimiter
    True         False        text + delimiter + pad
    True         True         pad + text + delimiter
    ===========  ===========  ===========================
    """

    def __init__(self, config: AlignConfig):
        self.config = config

    def _place(self, text: str, delimiter: str, pad: str) -> str:
        if self.config.align_right:
            return pad + text + delimiter
        if self.config.align_after:
            return text + delimiter + pad
        return text + pad + delimiter

    def rebuild_line(self, line: TokenizedLine, widths: Dict[int, int]) -> str:
        if not participates(line, self.config):
            return "".join(line.segments)

        parts = []
        for i, text, delimiter in line.pairs():
            if delimiter is None:
                parts.append(text)
                break

            if not in_scope(i, self.config):
                parts.append(text + delimiter)
                continue

            missing = widths[i // 2] - effective_width(
                text, delimiter, self.config.align_after
            )
            parts.append(self._place(text, delimiter, " " * missing))
        return "".join(parts)

    def rebuild(self, lines: List[TokenizedLine], widths: Dict[int, int]) -> str:
        return "\n".join(self.rebuild_line(line, widths) for line in lines)
