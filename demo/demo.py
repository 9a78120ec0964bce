#!/usr/bin/env python3
"""
Easy Align Demo Script

This script demonstrates basic usage of the easy_align API.

Usage:
    python demo.py

Requirements:
    - Install the package: pip install -e .
    - Run from the project root directory
"""

import sys
import logging
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from easy_align import AlignmentEngine, AlignConfig, align_with_modifiers


SAMPLE = (
    'name = "easy-align"\n'
    'version = "0.3.0"\n'
    'requires_python = ">=3.8"\n'
    "# not an assignment\n"
    'license = "MIT"'
)


def show(title, text):
    print(title)
    print("-" * 50)
    print(text)
    print()


def main():
    """Main demo function"""

    # Set demo logging level to DEBUG
    logging.basicConfig(
        level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Disable propagation to avoid duplicate output
    easy_align_logger = logging.getLogger("easy_align")
    easy_align_logger.propagate = False

    print("Easy Align Demo")
    print("=" * 50)
    show("Original", SAMPLE)

    # Raw input strings as typed into an editor prompt
    for raw in ("=", "=/n", "=/r", "=/f", 'r/"[^"]*"/g'):
        show(f"Pattern {raw!r}", align_with_modifiers(SAMPLE, raw))

    # Direct engine call with an explicit configuration
    engine = AlignmentEngine(AlignConfig(is_global=True, global_count=1))
    result = engine.run("a = 1 = x\nab = 22 = y", "=")
    show("Engine result (global, first occurrence only)", result.text)
    print(f"Column widths: {result.column_widths}")

    # An invalid regex leaves the text unchanged
    result = AlignmentEngine(is_regex=True).run(SAMPLE, "[invalid")
    print(f"Invalid pattern handled: changed={result.changed}, error={result.error}")

    print("\nDemo completed successfully!")


if __name__ == "__main__":
    sys.exit(main())
