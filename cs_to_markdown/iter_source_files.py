"""Utility for discovering C# source files."""

from pathlib import Path

SOURCE_SUFFIX = ".cs"


def iter_source_files(input_dir: Path) -> list[Path]:
    """Return every *.cs file under ``input_dir``, recursively, sorted."""
    return sorted(p for p in input_dir.rglob(f"*{SOURCE_SUFFIX}") if p.is_file())
