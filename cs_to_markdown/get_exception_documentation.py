"""Logic for extracting <exception> entries of a documentation comment."""

import re

from cs_to_markdown.doc_comments import clean_content

EXCEPTION_RE = re.compile(r"<exception(\s[^>]*)?>(.*?)</exception\s*>", re.DOTALL)
ATTRIBUTE_RE = re.compile(r"[\w:.-]+\s*=\s*(?:\"[^\"]*\"|'[^']*')")


def get_exception_documentation(doc_blocks: list[str]) -> str:
    """Return one "<attribute> - <content>" line per <exception> element."""
    entries = []
    for block in doc_blocks:
        for m in EXCEPTION_RE.finditer(block):
            attr = ATTRIBUTE_RE.search(m.group(1) or "")
            attr_text = attr.group(0) if attr else ""
            entries.append(f"{attr_text} - {clean_content(m.group(2))}")
    return "\n".join(entries)
