"""
Parser for the modifier-bearing pattern strings typed by the user.

Grammar::

    [r/]<pattern>[/<flags>]

``r/`` at the start selects regex mode. ``<flags>`` is any combination of

- ``g`` / ``g<digits>``: global mode, optionally bounded to the first N occurrences
- ``n``: align the text after the delimiter
- ``r``: right-align
- ``f``: force lines without any occurrence into the alignment
"""

import re
import logging
from typing import Optional

from .models import ParsedPattern


logger = logging.getLogger(__name__)


class PatternParser:
    """Split a raw input string into the pattern and its modifiers"""

    REGEX_PREFIX = "r/"
    FLAGS_PATTERN = re.compile(r"^(.*)/((?:g\d*|[nrf])+)$", re.DOTALL)
    GLOBAL_FLAG_PATTERN = re.compile(r"g(\d*)")

    @classmethod
    def parse(cls, raw: str) -> Optional[ParsedPattern]:
        """Parse ``raw``; returns None when no pattern is left after stripping modifiers."""
        if not raw:
            return None

        parsed = ParsedPattern(pattern=raw)

        # Trailing flags are recognised before the regex prefix is stripped
        flag_match = cls.FLAGS_PATTERN.match(raw)
        if flag_match:
            parsed.pattern = flag_match.group(1)
            flags = flag_match.group(2)

            for global_match in cls.GLOBAL_FLAG_PATTERN.finditer(flags):
                parsed.is_global = True
                if global_match.group(1):
                    parsed.global_count = int(global_match.group(1))

            # Digits only follow "g", so the remaining letters are plain flags
            letters = cls.GLOBAL_FLAG_PATTERN.sub("", flags)
            parsed.is_after = "n" in letters
            parsed.is_right = "r" in letters
            parsed.is_forced = "f" in letters

        if parsed.pattern.startswith(cls.REGEX_PREFIX):
            parsed.is_regex = True
            parsed.pattern = parsed.pattern[len(cls.REGEX_PREFIX) :]

        if not parsed.pattern:
            logger.debug(f"No pattern left in input {raw!r}")
            return None

        return parsed


def parse_pattern(raw: str) -> Optional[ParsedPattern]:
    """Convenience wrapper around :meth:`PatternParser.parse`."""
    return PatternParser.parse(raw)
