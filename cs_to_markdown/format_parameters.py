"""Utility for rendering a method parameter list."""

from cs_to_markdown.models import Parameter


def format_parameter(param: Parameter) -> str:
    """Render one parameter as [[Type]] `name` [= default]."""
    text = f"[[{param.type_text}]] `{param.name}`"
    if param.default is not None:
        text += f" = {param.default}"
    return text


def format_parameters(parameters: list[Parameter]) -> str:
    """Render a parenthesised, comma-separated parameter list."""
    return "(" + ", ".join(format_parameter(p) for p in parameters) + ")"
