"""Lookup tables shared by the extraction and compilation stages.

Tracked properties, tag baselines, the color palette and the markup
tables are built once at import and never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class PaletteEntry:
    """A named palette color.

    Matching is exact on the lowercase hex value; there is no distance
    metric.
    """

    hex: str  # Lowercase #rrggbb
    name: str  # e.g. "gray-800" or "black"

    @property
    def family(self) -> str:
        """Hue family, e.g. "gray"."""
        return self.name.split("-", 1)[0]

    @property
    def shade(self) -> str | None:
        """Shade suffix, or None for black and white."""
        parts = self.name.split("-", 1)
        return parts[1] if len(parts) == 2 else None


# Tracked properties, grouped by concern. Order matters: it is the
# declaration order of every emitted stylesheet rule.
LAYOUT_PROPERTIES = (
    "display", "position", "top", "right", "bottom", "left", "z-index",
    "float", "clear", "overflow", "overflow-x", "overflow-y", "visibility",
    "box-sizing",
)
BOX_PROPERTIES = (
    "width", "height", "min-width", "max-width", "min-height", "max-height",
    "padding", "padding-top", "padding-right", "padding-bottom", "padding-left",
    "margin", "margin-top", "margin-right", "margin-bottom", "margin-left",
)
FLEX_PROPERTIES = (
    "flex", "flex-direction", "flex-wrap", "flex-flow",
    "justify-content", "align-items", "align-content", "align-self",
    "flex-grow", "flex-shrink", "flex-basis", "gap", "row-gap", "column-gap",
    "order",
)
GRID_PROPERTIES = (
    "grid-template-columns", "grid-template-rows", "grid-template-areas",
    "grid-column", "grid-row", "grid-area", "justify-items", "place-items",
    "place-content",
)
TEXT_PROPERTIES = (
    "font-family", "font-size", "font-weight", "font-style", "font-variant",
    "line-height", "letter-spacing", "word-spacing", "text-align",
    "text-decoration", "text-transform", "text-overflow", "white-space", "color",
)
BACKGROUND_PROPERTIES = (
    "background-color", "background-image", "background-size",
    "background-position", "background-repeat",
)
BORDER_PROPERTIES = (
    "border", "border-top", "border-right", "border-bottom", "border-left",
    "border-width", "border-style", "border-color", "border-radius", "outline",
)
EFFECT_PROPERTIES = (
    "box-shadow", "text-shadow", "opacity", "transform", "transition",
    "cursor", "pointer-events", "list-style", "table-layout",
    "border-collapse", "border-spacing", "vertical-align",
)

TRACKED_PROPERTIES: tuple[str, ...] = (
    LAYOUT_PROPERTIES
    + BACKGROUND_PROPERTIES
    + BOX_PROPERTIES
    + FLEX_PROPERTIES
    + GRID_PROPERTIES
    + TEXT_PROPERTIES
    + BORDER_PROPERTIES
    + EFFECT_PROPERTIES
)

PROPERTY_ORDER = MappingProxyType(
    {prop: position for position, prop in enumerate(TRACKED_PROPERTIES)}
)

# Properties subject to inheritance elision
INHERITED_PROPERTIES = frozenset(TEXT_PROPERTIES)

# Color-valued properties normalized from rgb()/rgba() to hex
COLOR_PROPERTIES = frozenset(
    ["color", "background-color", "border-color", "outline-color"]
)

# Values that never carry information worth emitting (compared lowercase)
NOOP_VALUES = frozenset(
    [
        "none",
        "0px",
        "auto",
        "initial",
        "inherit",
        "unset",
        "revert",
        "rgba(0, 0, 0, 0)",
        "transparent",
        "currentcolor",
        "normal",
    ]
)

# Displays that never need to be forced back into a record
IMPLIED_DISPLAYS = frozenset(["inline", "block"])


def _freeze(table: dict[str, dict[str, str]]) -> MappingProxyType:
    return MappingProxyType(
        {tag: MappingProxyType(dict(defaults)) for tag, defaults in table.items()}
    )


TAG_BASELINES = _freeze(
    {
        "div": {"display": "block"},
        "span": {"display": "inline"},
        "p": {"display": "block", "margin-top": "16px", "margin-bottom": "16px"},
        "ul": {"display": "block", "list-style": "disc", "padding-left": "40px"},
        "ol": {"display": "block", "list-style": "decimal", "padding-left": "40px"},
        "li": {"display": "list-item"},
        "a": {
            "color": "rgb(0, 0, 238)",
            "text-decoration": "underline",
            "cursor": "pointer",
        },
        "button": {"display": "inline-block", "cursor": "pointer"},
        "input": {"display": "inline-block"},
        "h1": {
            "display": "block",
            "font-size": "32px",
            "font-weight": "700",
            "margin-top": "21.44px",
            "margin-bottom": "21.44px",
        },
        "h2": {"display": "block", "font-size": "24px", "font-weight": "700"},
        "h3": {"display": "block", "font-size": "18.72px", "font-weight": "700"},
        "h4": {"display": "block", "font-size": "16px", "font-weight": "700"},
        "img": {"display": "inline-block"},
        "table": {"display": "table", "border-collapse": "separate"},
        "thead": {"display": "table-header-group"},
        "tbody": {"display": "table-row-group"},
        "tr": {"display": "table-row"},
        "td": {"display": "table-cell", "vertical-align": "inherit"},
        "th": {"display": "table-cell", "font-weight": "700"},
    }
)

PALETTE: tuple[PaletteEntry, ...] = tuple(
    PaletteEntry(hex_value, name)
    for hex_value, name in (
        ("#000000", "black"), ("#ffffff", "white"),
        ("#f9fafb", "gray-50"), ("#f3f4f6", "gray-100"), ("#e5e7eb", "gray-200"),
        ("#d1d5db", "gray-300"), ("#9ca3af", "gray-400"), ("#6b7280", "gray-500"),
        ("#4b5563", "gray-600"), ("#374151", "gray-700"), ("#1f2937", "gray-800"),
        ("#111827", "gray-900"),
        ("#fef2f2", "red-50"), ("#fca5a5", "red-300"), ("#ef4444", "red-500"),
        ("#dc2626", "red-600"), ("#991b1b", "red-800"),
        ("#fff7ed", "orange-50"), ("#fdba74", "orange-300"), ("#f97316", "orange-500"),
        ("#ea580c", "orange-600"),
        ("#fefce8", "yellow-50"), ("#fde047", "yellow-300"), ("#eab308", "yellow-500"),
        ("#ca8a04", "yellow-600"),
        ("#f0fdf4", "green-50"), ("#86efac", "green-300"), ("#22c55e", "green-500"),
        ("#16a34a", "green-600"), ("#14532d", "green-900"),
        ("#ecfdf5", "emerald-50"), ("#6ee7b7", "emerald-300"), ("#10b981", "emerald-500"),
        ("#059669", "emerald-600"),
        ("#f0fdfa", "teal-50"), ("#5eead4", "teal-300"), ("#14b8a6", "teal-500"),
        ("#0d9488", "teal-600"), ("#025a4e", "teal-900"),
        ("#eff6ff", "blue-50"), ("#93c5fd", "blue-300"), ("#3b82f6", "blue-500"),
        ("#2563eb", "blue-600"), ("#1e3a8a", "blue-900"),
        ("#eef2ff", "indigo-50"), ("#a5b4fc", "indigo-300"), ("#6366f1", "indigo-500"),
        ("#4f46e5", "indigo-600"),
        ("#faf5ff", "purple-50"), ("#d8b4fe", "purple-300"), ("#a855f7", "purple-500"),
        ("#9333ea", "purple-600"),
        ("#fdf4ff", "fuchsia-50"), ("#f0abfc", "fuchsia-300"), ("#d946ef", "fuchsia-500"),
        ("#fdf2f8", "pink-50"), ("#f9a8d4", "pink-300"), ("#ec4899", "pink-500"),
        ("#db2777", "pink-600"),
    )
)

PALETTE_BY_HEX = MappingProxyType({entry.hex: entry for entry in PALETTE})

# Markup tables
VOID_TAGS = frozenset(
    [
        "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
        "meta", "param", "source", "track", "wbr",
    ]
)
INLINE_TAGS = frozenset(
    [
        "a", "abbr", "b", "bdi", "bdo", "cite", "code", "dfn", "em", "i", "kbd",
        "mark", "q", "s", "samp", "small", "span", "strong", "sub", "sup",
        "time", "u", "var", "wbr",
    ]
)

# Attribute name patterns stripped from cleaned markup
DIRTY_ATTRIBUTE_PATTERNS = (
    r"^data-",
    r"^svelte-",
    r"^_svelte",
    r"^ng-",
    r"^v-",
    r"^x-",
    r"^fdprocessedid$",
    r"^jsaction$",
    r"^jsmodel$",
    r"^jscontroller$",
    r"^jsrenderer$",
    r"^jsshadow$",
)
