"""Logic for collecting XML documentation comments attached to a node."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from cs_to_markdown.syntax_tree import node_text

if TYPE_CHECKING:
    from tree_sitter import Node

LINE_DOC_PREFIX = "///"
BLOCK_DOC_PREFIX = "/**"
BLOCK_LINE_STAR_RE = re.compile(r"^\s*\*(?!/)")


def _strip_block_comment(text: str) -> str:
    """Remove /** */ delimiters and the leading star of each line."""
    body = text[len(BLOCK_DOC_PREFIX) :]
    body = body.removesuffix("*/")
    return "\n".join(BLOCK_LINE_STAR_RE.sub("", line) for line in body.splitlines())


def leading_doc_blocks(node: Node) -> list[str]:
    """Return the documentation comment blocks written just before ``node``.

    Consecutive /// lines form one block; each /** */ comment is its own block.
    Plain // and /* */ comments are skipped.
    """
    comments = []
    prev = node.prev_sibling
    while prev is not None and prev.type == "comment":
        comments.insert(0, node_text(prev).strip())
        prev = prev.prev_sibling

    blocks: list[str] = []
    run: list[str] = []
    for text in comments:
        if text.startswith(LINE_DOC_PREFIX) and not text.startswith("////"):
            run.append(text[len(LINE_DOC_PREFIX) :])
            continue
        if run:
            blocks.append("\n".join(run))
            run = []
        if text.startswith(BLOCK_DOC_PREFIX) and text != "/**/":
            blocks.append(_strip_block_comment(text))
    if run:
        blocks.append("\n".join(run))
    return blocks


def clean_content(content: str) -> str:
    """Strip every line of an element's content and trim the result."""
    lines = [line.strip() for line in content.splitlines()]
    return "\n".join(lines).strip()
