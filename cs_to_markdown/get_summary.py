"""Logic for extracting the <summary> text of a documentation comment."""

import re

from cs_to_markdown.doc_comments import clean_content

SUMMARY_RE = re.compile(r"<summary(?:\s[^>]*)?>(.*?)</summary\s*>", re.DOTALL)


def get_summary(doc_blocks: list[str]) -> str:
    """Return the first <summary> content across the blocks, or ""."""
    for block in doc_blocks:
        m = SUMMARY_RE.search(block)
        if m:
            return clean_content(m.group(1))
    return ""
