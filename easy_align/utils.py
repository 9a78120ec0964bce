"""
Utility functions for easy_align.
"""

import sys
from typing import Optional

from .models import AlignConfig, ParsedPattern


def build_config_from_args(args, parsed: Optional[ParsedPattern] = None) -> AlignConfig:
    """Build an AlignConfig from an argparse Namespace.

    Modifiers found in the pattern string (``parsed``) are combined with the
    explicit command line flags; a flag set either way is set.
    """
    config = {
        "align_after": getattr(args, "after", None),
        "is_global": getattr(args, "is_global", None)
        or getattr(args, "global_count", None) is not None
        or None,
        "global_count": getattr(args, "global_count", None),
        "is_regex": getattr(args, "regex", None),
        "align_right": getattr(args, "right", None),
        "force": getattr(args, "force", None),
    }

    # Remove None values to avoid overriding defaults
    config = {k: v for k, v in config.items() if v is not None}

    base = parsed.to_config() if parsed is not None else AlignConfig()
    for key, value in config.items():
        if key == "global_count":
            # An explicit bound wins over the one typed after the pattern
            if value:
                base.global_count = value
        else:
            setattr(base, key, getattr(base, key) or value)
    return base


def read_text(path: Optional[str]) -> str:
    """Read the input block from ``path`` or stdin, keeping newlines verbatim."""
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text(text: str, path: Optional[str]):
    if not path or path == "-":
        sys.stdout.write(text)
        return
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
