"""Logic for projecting a class-like syntax node into a Declaration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cs_to_markdown.doc_comments import leading_doc_blocks
from cs_to_markdown.get_summary import get_summary
from cs_to_markdown.models import Declaration
from cs_to_markdown.project_members import (
    project_fields,
    project_methods,
    project_properties,
)
from cs_to_markdown.syntax_tree import (
    child_of_type,
    iter_descendants,
    name_of,
    node_text,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Iterator
    from pathlib import Path

    from tree_sitter import Node


def iter_declarations(root: Node, kinds: Collection[str]) -> Iterator[Node]:
    """Yield class-like nodes of the given kinds, nested ones included."""
    return iter_descendants(root, kinds)


def base_types_of(class_node: Node) -> list[str]:
    """Return the raw texts of the base list, or [] when there is none.

    Primary constructor arguments stay attached to their base: `B(x)`.
    """
    base_list = child_of_type(class_node, ("base_list",))
    if base_list is None:
        return []
    bases: list[str] = []
    for child in base_list.named_children:
        if child.type == "comment":
            continue
        if child.type == "argument_list" and bases:
            bases[-1] += node_text(child)
        else:
            bases.append(node_text(child))
    return bases


def project_declaration(class_node: Node, source: Path | None = None) -> Declaration:
    """Build the Declaration for one class-like node."""
    return Declaration(
        name=name_of(class_node),
        base_types=base_types_of(class_node),
        summary=get_summary(leading_doc_blocks(class_node)),
        fields=project_fields(class_node),
        properties=project_properties(class_node),
        methods=project_methods(class_node),
        source=source,
    )
