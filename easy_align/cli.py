import argparse
import json
import logging

from .core.engine import AlignmentEngine
from .parser import parse_pattern
from .utils import build_config_from_args, read_text, write_text


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Align delimiter-separated columns of text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Pattern modifiers:
  r/<pattern>        treat the pattern as a regular expression
  <pattern>/g        align every occurrence (g2: only the first two)
  <pattern>/n        align the text after the delimiter
  <pattern>/r        right-align the text before the delimiter
  <pattern>/f        also pad lines without any occurrence

Examples:
  easy-align "=" -i settings.ini
  cat table.txt | easy-align "r/\\s+\\|/g" > aligned.txt
  easy-align ":" -n -i data.yaml -o data.yaml
  easy-align "=" -c 2 -i chained.txt
        """,
    )

    parser.add_argument(
        "pattern", help="Delimiter pattern, optionally with r/ prefix and /flags suffix"
    )
    parser.add_argument(
        "-i", "--input", required=False, help="Input file (default: stdin)"
    )
    parser.add_argument(
        "-o", "--output", required=False, help="Output file (default: stdout)"
    )
    parser.add_argument(
        "-x",
        "--regex",
        action="store_true",
        help="Treat the pattern as a regular expression (same as the r/ prefix)",
    )
    parser.add_argument(
        "-g",
        "--global",
        dest="is_global",
        action="store_true",
        help="Align all occurrences per line (same as the /g modifier)",
    )
    parser.add_argument(
        "-c",
        "--count",
        dest="global_count",
        type=int,
        default=None,
        metavar="N",
        help="Align only the first N occurrences per line; implies --global",
    )
    parser.add_argument(
        "-n", "--after", action="store_true", help="Align the text after the delimiter"
    )
    parser.add_argument(
        "-r", "--right", action="store_true", help="Right-align text before the delimiter"
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Include lines without any occurrence in the alignment",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the alignment result and statistics as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (show debug information)",
    )

    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    parsed = parse_pattern(args.pattern)
    if parsed is None:
        logging.error(f"Error: no pattern left in '{args.pattern}' after modifiers")
        return 1

    try:
        config = build_config_from_args(args, parsed)
        config.validate()
        engine = AlignmentEngine(config)
        text = read_text(args.input)
    except (OSError, ValueError) as e:
        logging.error(f"Error: {e}")
        return 1

    result = engine.run(text, parsed.pattern)
    if not result.success:
        logging.error(f"Error: {result.error}")
        return 1

    try:
        if args.json:
            payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
            write_text(payload + "\n", args.output)
        else:
            write_text(result.text, args.output)
    except OSError as e:
        logging.error(f"Error writing output: {e}")
        return 1

    logging.debug(
        f"Aligned {result.matched_lines} of {result.line_count} lines, "
        f"column widths: {result.column_widths}"
    )
    return 0


if __name__ == "__main__":
    exit(main())
