"""Logic for namespace-qualified type links."""


def format_type_name_with_namespace(type_text: str) -> str:
    """Convert Namespace.a1.a2.ClassName to [[Namespace/a1/a2/ClassName]].

    Angle brackets are escaped so generic names survive Markdown rendering.
    """
    escaped = type_text.strip().replace("<", "&lt;").replace(">", "&gt;")
    return f"[[{escaped.replace('.', '/')}]]"
