"""Logic for projecting fields, properties and methods of a class node."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cs_to_markdown.doc_comments import leading_doc_blocks
from cs_to_markdown.get_exception_documentation import get_exception_documentation
from cs_to_markdown.get_summary import get_summary
from cs_to_markdown.models import Member, Parameter
from cs_to_markdown.sample_call_graph import sample_call_graph
from cs_to_markdown.syntax_tree import (
    child_of_type,
    iter_descendants,
    name_of,
    node_text,
)

if TYPE_CHECKING:
    from tree_sitter import Node


def project_fields(class_node: Node) -> list[Member]:
    """Project every field declared inside the class.

    Only the first variable of `int a, b;` is taken.
    """
    fields = []
    for node in iter_descendants(class_node, ("field_declaration",)):
        declaration = child_of_type(node, ("variable_declaration",))
        if declaration is None:
            continue
        declarator = child_of_type(declaration, ("variable_declarator",))
        fields.append(
            Member(
                kind="Field",
                name=name_of(declarator) if declarator is not None else "",
                type_text=node_text(declaration.child_by_field_name("type")),
                summary=get_summary(leading_doc_blocks(node)),
            )
        )
    return fields


def project_properties(class_node: Node) -> list[Member]:
    """Project every property declared inside the class."""
    return [
        Member(
            kind="Property",
            name=name_of(node),
            type_text=node_text(node.child_by_field_name("type")),
            summary=get_summary(leading_doc_blocks(node)),
        )
        for node in iter_descendants(class_node, ("property_declaration",))
    ]


def _parameter_default(param: Node) -> str | None:
    clause = child_of_type(param, ("equals_value_clause",))
    if clause is not None:
        value = clause.named_children[-1] if clause.named_children else None
        return node_text(value) if value is not None else None
    children = param.children
    for i, child in enumerate(children):
        if child.type == "=" and i + 1 < len(children):
            return node_text(children[i + 1])
    return None


def project_parameters(method: Node) -> list[Parameter]:
    """Return the ordered parameters of a method.

    A `params` parameter has no node of its own; its type and name are
    labelled children of the parameter list.
    """
    param_list = method.child_by_field_name("parameters")
    if param_list is None:
        param_list = child_of_type(method, ("parameter_list",))
    if param_list is None:
        return []

    params = []
    loose_type = ""
    for i, child in enumerate(param_list.children):
        if child.type == "parameter":
            params.append(
                Parameter(
                    name=name_of(child),
                    type_text=node_text(child.child_by_field_name("type")),
                    default=_parameter_default(child),
                )
            )
            continue
        field_name = param_list.field_name_for_child(i)
        if field_name == "type":
            loose_type = node_text(child)
        elif field_name == "name":
            params.append(Parameter(name=node_text(child), type_text=loose_type))
            loose_type = ""
    return params


def project_methods(class_node: Node) -> list[Member]:
    """Project every method declared inside the class, with its call graph."""
    methods = []
    for node in iter_descendants(class_node, ("method_declaration",)):
        returns = node.child_by_field_name("returns")
        if returns is None:
            returns = node.child_by_field_name("type")
        doc_blocks = leading_doc_blocks(node)
        methods.append(
            Member(
                kind="Method",
                name=name_of(node),
                type_text=node_text(returns),
                summary=get_summary(doc_blocks),
                parameters=project_parameters(node),
                exceptions=get_exception_documentation(doc_blocks),
                calls=sample_call_graph(node),
            )
        )
    return methods
