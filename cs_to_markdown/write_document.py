"""Logic for writing a rendered page to disk."""

from pathlib import Path

from cs_to_markdown.models import RenderedDocument


def write_document(document: RenderedDocument, out_dir: Path) -> Path:
    """Write the page as <Name>.md directly inside ``out_dir``.

    An existing file with the same name is overwritten.
    """
    out_file = out_dir / document.file_name
    with open(out_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(document.text())
    return out_file
