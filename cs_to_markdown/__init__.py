"""Generate wiki-linked Markdown pages from C# class declarations."""
