"""Logic for sampling the calls and constructions inside a method."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cs_to_markdown.models import CallGraph
from cs_to_markdown.syntax_tree import iter_descendants, node_text

if TYPE_CHECKING:
    from tree_sitter import Node


def _distinct(values: list[str]) -> list[str]:
    """Deduplicate while keeping first-seen order."""
    return list(dict.fromkeys(values))


def invoked_names(method: Node) -> list[str]:
    """Collect identifier tokens found anywhere inside call expressions.

    Arguments of a call are included along with the callee chain.
    """
    names = [
        node_text(ident)
        for call in iter_descendants(method, ("invocation_expression",))
        for ident in iter_descendants(call, ("identifier",))
    ]
    return _distinct(names)


def constructed_types(method: Node) -> list[str]:
    """Collect the raw type text of every `new T(...)` expression."""
    types = []
    for creation in iter_descendants(method, ("object_creation_expression",)):
        type_node = creation.child_by_field_name("type")
        if type_node is None:
            type_node = creation.named_children[0] if creation.named_children else None
        if type_node is not None:
            types.append(node_text(type_node))
    return _distinct(types)


def sample_call_graph(method: Node) -> CallGraph:
    """Sample invoked identifiers and constructed types of a method."""
    return CallGraph(invoked=invoked_names(method), created=constructed_types(method))
