"""Orchestration logic for converting C# sources to Markdown pages."""

import argparse

from cs_to_markdown.convert_directory import convert_directory
from cs_to_markdown.load_config import load_config


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    config = load_config(args.config)
    out_root = args.output.resolve()
    written = convert_directory(args.input, out_root, config)
    print(f"Generated {written} Markdown pages into: {out_root}")
    return 0
