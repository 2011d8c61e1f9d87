"""Command-line entry point for generating Markdown from C# code."""

import argparse
import logging
from pathlib import Path

from cs_to_markdown.run_conversion import run_conversion


def main() -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="A tool to generate markdown from C# code.",
    )
    ap.add_argument(
        "--input",
        "-i",
        type=Path,
        required=True,
        help="Specifies the input directory path.",
    )
    ap.add_argument(
        "--output",
        "-o",
        type=Path,
        required=True,
        help="Specifies the output directory path.",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every class as it is rendered",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
