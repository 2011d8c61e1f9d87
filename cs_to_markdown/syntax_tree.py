"""Thin read-only query layer over tree-sitter C# syntax trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tree_sitter_c_sharp as tscsharp
from tree_sitter import Language, Node, Parser, Tree

if TYPE_CHECKING:
    from collections.abc import Collection, Iterator

CLASS_LIKE_KINDS = frozenset(
    {
        "class_declaration",
        "struct_declaration",
        "record_declaration",
        "interface_declaration",
    }
)

# Parser is initialized lazily
_parser: Parser | None = None


def get_parser() -> Parser:
    """Get or create the C# parser."""
    global _parser
    if _parser is None:
        _parser = Parser(Language(tscsharp.language()))
    return _parser


def parse_source(text: str) -> Tree:
    """Parse C# source text into a syntax tree."""
    return get_parser().parse(text.encode("utf-8"))


def node_text(node: Node | None) -> str:
    """Get text content of a node."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def iter_descendants(node: Node, kinds: Collection[str]) -> Iterator[Node]:
    """Yield descendants of ``node`` whose type is in ``kinds``, in source order.

    The node itself is not included.
    """
    stack = list(reversed(node.children))
    while stack:
        current = stack.pop()
        if current.type in kinds:
            yield current
        stack.extend(reversed(current.children))


def child_of_type(node: Node, kinds: Collection[str]) -> Node | None:
    """Return the first direct child whose type is in ``kinds``."""
    for child in node.children:
        if child.type in kinds:
            return child
    return None


def name_of(node: Node) -> str:
    """Return the declared identifier of a declaration-like node."""
    name = node.child_by_field_name("name")
    if name is None:
        # older grammars do not label every declarator
        name = child_of_type(node, ("identifier",))
    return node_text(name)
