"""Data models for projected C# declarations and rendered pages."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Parameter:
    """A single method parameter."""

    name: str
    type_text: str
    default: str | None = None  # raw default-value expression


@dataclass
class CallGraph:
    """Identifiers invoked and types constructed inside a method body."""

    invoked: list[str] = field(default_factory=list)
    created: list[str] = field(default_factory=list)  # raw type texts


@dataclass
class Member:
    """Represents a documented member (field, property or method)."""

    kind: str  # Field/Property/Method
    name: str
    type_text: str  # declared type, or return type for methods
    summary: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    exceptions: str = ""
    calls: CallGraph | None = None


@dataclass
class Declaration:
    """A class-like declaration projected out of a syntax tree."""

    name: str
    base_types: list[str] = field(default_factory=list)
    summary: str = ""
    fields: list[Member] = field(default_factory=list)
    properties: list[Member] = field(default_factory=list)
    methods: list[Member] = field(default_factory=list)
    source: Path | None = None


@dataclass(frozen=True)
class RenderedDocument:
    """The Markdown lines of one declaration page."""

    name: str
    lines: list[str]

    @property
    def file_name(self) -> str:
        """Return the output file name for this page."""
        return f"{self.name}.md"

    def text(self) -> str:
        """Return the page content with a trailing newline."""
        return "\n".join(self.lines) + "\n"
