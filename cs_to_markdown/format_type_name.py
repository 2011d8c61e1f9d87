"""Logic for turning C# type text into wiki-linked display text."""

import re

# Name<Args>, e.g. List<Parcel> or System.Collections.Generic.Dictionary<K, V>
GENERIC_TYPE_RE = re.compile(r"([\w.]+)<(.+)>", re.DOTALL)

OPENERS = "<(["
CLOSERS = ">)]"


def split_generic_arguments(arguments: str) -> list[str]:
    """Split a generic argument list on commas at depth 0.

    Anything nested inside brackets is kept as opaque text.
    """
    parts = []
    depth = 0
    current = ""
    for ch in arguments:
        if ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(current)
            current = ""
            continue
        current += ch
    parts.append(current)
    return parts


def format_type_name(type_text: str) -> str:
    """Format a type as a link, linking each generic argument separately.

    List<Parcel> -> List<[[Parcel]]>, Parcel -> [[Parcel]]
    """
    type_text = type_text.strip()
    m = GENERIC_TYPE_RE.fullmatch(type_text)
    if m:
        generic_type = m.group(1)
        args = split_generic_arguments(m.group(2))
        formatted = ", ".join(f"[[{arg.strip()}]]" for arg in args)
        return f"{generic_type}<{formatted}>"
    return f"[[{type_text}]]"
