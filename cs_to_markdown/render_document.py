"""Logic for rendering a declaration page."""

from cs_to_markdown.format_parameters import format_parameters
from cs_to_markdown.format_type_name import format_type_name
from cs_to_markdown.format_type_name_with_namespace import (
    format_type_name_with_namespace,
)
from cs_to_markdown.markdown_tokens import BULLET, H1, H2, H3, H4, LVL1, LVL2, LVL3
from cs_to_markdown.models import Declaration, Member, RenderedDocument


def render_document(
    declaration: Declaration,
    *,
    include_exceptions: bool = False,
    namespace_links: bool = False,
) -> RenderedDocument:
    """Render a class-like declaration as a Markdown page."""
    parts = [f"{H1} {declaration.name}", ""]
    parts.append(_render_inheritance(declaration, namespace_links=namespace_links))

    if declaration.summary:
        parts += ["", declaration.summary, ""]

    parts += [f"{H2} Fields", ""]
    parts.extend(_render_variables(declaration.fields))

    parts += ["", f"{H2} Properties", ""]
    parts.extend(_render_variables(declaration.properties))

    parts += ["", f"{H2} Methods", ""]
    for method in declaration.methods:
        parts.extend(_render_method(method, include_exceptions=include_exceptions))

    return RenderedDocument(name=declaration.name, lines=parts)


def _render_inheritance(declaration: Declaration, *, namespace_links: bool) -> str:
    """Render the inheritance line; bare header when there are no base types."""
    header = f"{H3} Inheritance"
    if not declaration.base_types:
        return header
    fmt = format_type_name_with_namespace if namespace_links else format_type_name
    return f"{header}: " + ", ".join(fmt(b) for b in declaration.base_types)


def _render_variables(members: list[Member]) -> list[str]:
    """Render field or property entries."""
    parts = []
    for m in members:
        parts.append(f"{LVL1}{BULLET}{format_type_name(m.type_text)} {m.name}")
        if m.summary:
            parts += [f"{LVL2}{BULLET}Summary:", m.summary]
    return parts


def _render_method(method: Member, *, include_exceptions: bool) -> list[str]:
    """Render one method with its parameters, docs and call graph."""
    return_type = format_type_name(method.type_text)
    parts = [
        f"{LVL1}{BULLET}{H3} {return_type} {method.name}",
        f"{LVL2}{BULLET}{H4} Parameters: {format_parameters(method.parameters)}",
    ]
    if method.summary:
        parts += [f"{LVL3}{BULLET}Summary:", method.summary]
    if include_exceptions and method.exceptions:
        parts += [f"{LVL3}{BULLET}Exceptions:", method.exceptions]

    calls = method.calls
    if calls is not None and calls.invoked:
        parts.append(f"{LVL2}{BULLET}**Invoked methods/properties:**")
        parts.extend(f"{LVL3}{BULLET}{name}" for name in calls.invoked)
    if calls is not None and calls.created:
        parts.append(f"{LVL2}{BULLET}**Objects created:**")
        parts.extend(f"{LVL3}{BULLET}{format_type_name(t)}" for t in calls.created)
    return parts
