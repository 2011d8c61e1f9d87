"""Per-file pipeline: parse, project, render and write every declaration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cs_to_markdown.iter_source_files import iter_source_files
from cs_to_markdown.load_config import DEFAULT_CONFIG
from cs_to_markdown.project_declaration import iter_declarations, project_declaration
from cs_to_markdown.render_document import render_document
from cs_to_markdown.syntax_tree import CLASS_LIKE_KINDS, parse_source
from cs_to_markdown.write_document import write_document

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def declaration_kinds(config: dict[str, Any]) -> list[str]:
    """Return the configured class-like node kinds, rejecting unknown ones."""
    kinds = list(config.get("declaration_kinds") or [])
    allowed = ", ".join(sorted(CLASS_LIKE_KINDS))
    if not kinds:
        msg = f"No declaration kinds configured; expected any of: {allowed}"
        raise SystemExit(msg)
    unknown = sorted(set(kinds) - CLASS_LIKE_KINDS)
    if unknown:
        msg = f"Unknown declaration kinds {unknown}; expected any of: {allowed}"
        raise SystemExit(msg)
    return kinds


def convert_file(
    path: Path, out_dir: Path, config: dict[str, Any], kinds: list[str]
) -> int:
    """Write one page per class-like declaration found in ``path``."""
    print(f"Processing {path}...")
    code = path.read_text(encoding=config.get("source_encoding", "utf-8"))
    tree = parse_source(code)
    if tree.root_node.has_error:
        logger.warning("Syntax errors in %s; rendering the recovered tree", path)

    sections = config.get("sections") or {}
    links = config.get("links") or {}
    written = 0
    for node in iter_declarations(tree.root_node, kinds):
        declaration = project_declaration(node, source=path)
        logger.info("Class: %s", declaration.name)
        document = render_document(
            declaration,
            include_exceptions=bool(sections.get("exceptions")),
            namespace_links=bool(links.get("namespace_qualified_bases")),
        )
        write_document(document, out_dir)
        written += 1
    return written


def convert_directory(
    input_dir: Path, out_dir: Path, config: dict[str, Any] | None = None
) -> int:
    """Convert every C# file under ``input_dir``; return the pages written.

    Pages are named after their class, so a later class with the same name
    replaces an earlier page.
    """
    config = config or DEFAULT_CONFIG
    if not input_dir.is_dir():
        msg = f"Input directory not found: {input_dir}"
        raise SystemExit(msg)
    kinds = declaration_kinds(config)

    out_dir.mkdir(parents=True, exist_ok=True)
    written = 0
    for path in iter_source_files(input_dir):
        written += convert_file(path, out_dir, config, kinds)
    return written
