"""Core data models for element export.

This module defines the element tree handed to the exporter, the
per-node style records produced by extraction, and the export result.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from .tokens import VOID_TAGS


def escape_text(text: str) -> str:
    """Escape text content for markup output."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_attribute(value: str) -> str:
    """Escape an attribute value for double-quoted markup output."""
    return value.replace("&", "&amp;").replace('"', "&quot;")


def format_attributes(attributes: dict[str, str]) -> str:
    """Render attributes in insertion order; empty values render bare."""
    parts = []
    for name, value in attributes.items():
        if value == "":
            parts.append(name)
        else:
            parts.append(f'{name}="{escape_attribute(value)}"')
    return " " + " ".join(parts) if parts else ""


@dataclass
class TextNode:
    """A run of character data inside an element."""

    text: str

    def clone(self) -> "TextNode":
        return TextNode(self.text)

    def to_html(self) -> str:
        return escape_text(self.text)


@dataclass
class ElementNode:
    """An element of the rendered subtree.

    Attributes keep their document order. Children are elements and text
    runs in document order.
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Union["ElementNode", TextNode]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.tag = self.tag.lower()

    @property
    def element_children(self) -> list["ElementNode"]:
        """Child elements only, in document order."""
        return [child for child in self.children if isinstance(child, ElementNode)]

    @property
    def element_id(self) -> str:
        """The id attribute, or an empty string."""
        return self.attributes.get("id", "")

    def has_id_prefix(self, prefix: str) -> bool:
        """Whether the id starts with prefix (never true for an empty prefix)."""
        return bool(prefix) and self.element_id.startswith(prefix)

    def clone(self) -> "ElementNode":
        """Deep structural copy; the original is left untouched."""
        return ElementNode(
            tag=self.tag,
            attributes=dict(self.attributes),
            children=[child.clone() for child in self.children],
        )

    def iter_elements(self) -> Iterator["ElementNode"]:
        """Yield this element and all descendant elements in pre-order."""
        yield self
        for child in self.element_children:
            yield from child.iter_elements()

    def to_html(self) -> str:
        """Flat (single-line) markup for this element and its subtree."""
        attrs = format_attributes(self.attributes)
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{attrs}>"
        inner = "".join(child.to_html() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


@dataclass(frozen=True)
class NodeStyleRecord:
    """Surviving declarations for one visited element.

    ``index`` is the element's pre-order position among visited
    elements and serves as its identity across the pipeline.
    """

    index: int
    tag: str
    class_name: str
    styles: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_empty(self) -> bool:
        return len(self.styles) == 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "index": self.index,
            "tag": self.tag,
            "class_name": self.class_name,
            "styles": dict(self.styles),
        }


@dataclass
class ExportResult:
    """The three synchronized artifacts produced for one subtree."""

    markup: str
    stylesheet: str
    utility_markup: str
    root_utility_tokens: list[str] = field(default_factory=list)
    records: list[NodeStyleRecord] = field(default_factory=list)
    utility_tokens: dict[int, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the dictionary shape handed back to the host."""
        return {
            "markup": self.markup,
            "stylesheet": self.stylesheet,
            "utilityMarkup": self.utility_markup,
            "rootUtilityTokens": list(self.root_utility_tokens),
        }

    def format_raw(self) -> str:
        """Combine all artifacts into one commented text block."""
        return "\n".join(
            [
                "/* ── HTML ── */",
                self.markup,
                "",
                "/* ── CSS ── */",
                self.stylesheet,
                "",
                "/* ── Tailwind ── */",
                f"<!-- Tailwind classes: {' '.join(self.root_utility_tokens)} -->",
                self.utility_markup,
            ]
        )
