"""Color normalization and palette quantization.

Resolved colors arrive as ``rgb()``/``rgba()`` strings or hex. They are
normalized to lowercase hex and matched exactly against the palette;
colors outside the palette are emitted as arbitrary values instead of
being approximated.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType

from ..tokens import PALETTE_BY_HEX, PaletteEntry

# rgb(37, 99, 235), rgba(0, 0, 0, 0.5), rgb(37 99 235 / 50%)
RGB_PATTERN = re.compile(
    r"rgba?\(\s*(\d{1,3})\s*[,\s]\s*(\d{1,3})\s*[,\s]\s*(\d{1,3})"
    r"\s*(?:[,/]\s*([\d.]+%?)\s*)?\)",
    re.IGNORECASE,
)

HEX_PATTERN = re.compile(r"#(?:[0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})", re.IGNORECASE)

WHITESPACE = re.compile(r"\s+")


def rgb_to_hex(value: str) -> str | None:
    """Convert an ``rgb()``/``rgba()`` color to lowercase hex.

    Opaque colors become ``#rrggbb``; anything with an alpha below 1
    keeps it as ``#rrggbbaa``.

    Args:
        value: Color string.

    Returns:
        Hex string, or None if the value is not an rgb color.
    """
    match = RGB_PATTERN.fullmatch(value.strip())
    if not match:
        return None

    channels = [min(int(match.group(i)), 255) for i in (1, 2, 3)]
    hex_value = "#" + "".join(f"{channel:02x}" for channel in channels)

    alpha_raw = match.group(4)
    if alpha_raw is None:
        return hex_value
    try:
        if alpha_raw.endswith("%"):
            alpha = float(alpha_raw[:-1]) / 100
        else:
            alpha = float(alpha_raw)
    except ValueError:
        return None
    alpha = max(0.0, min(alpha, 1.0))
    if alpha >= 1.0:
        return hex_value
    return f"{hex_value}{round(alpha * 255):02x}"


def normalize_color(value: str) -> str | None:
    """Normalize a color to lowercase hex.

    Expands ``#rgb`` shorthand. Returns None for anything that is neither
    hex nor rgb (named colors, gradients, ``color-mix()`` ...).
    """
    value = value.strip()
    if value.lower().startswith("rgb"):
        return rgb_to_hex(value)
    if HEX_PATTERN.fullmatch(value):
        value = value.lower()
        if len(value) == 4:
            return "#" + "".join(ch * 2 for ch in value[1:])
        return value
    return None


def escape_arbitrary(value: str) -> str:
    """Escape a literal for use inside an arbitrary-value token."""
    return WHITESPACE.sub("_", value.strip())


@dataclass(frozen=True)
class QuantizedColor:
    """Result of mapping one color onto the palette."""

    token: str
    entry: PaletteEntry | None = None

    @property
    def matched(self) -> bool:
        """Whether the color hit a palette entry exactly."""
        return self.entry is not None


class ColorQuantizer:
    """Maps colors onto a fixed named palette.

    Matching is exact: a color one unit away from a palette entry is
    still emitted as an arbitrary value.
    """

    def __init__(self, palette: MappingProxyType = PALETTE_BY_HEX):
        """Initialize the quantizer.

        Args:
            palette: Mapping of lowercase ``#rrggbb`` to PaletteEntry.
        """
        self.palette = palette

    def quantize(self, value: str, prefix: str) -> QuantizedColor:
        """Map a color to a prefixed utility token.

        Args:
            value: Hex or rgb()/rgba() color.
            prefix: Utility prefix, e.g. "bg", "text" or "border".

        Returns:
            QuantizedColor with the token and the matched entry, if any.
        """
        hex_value = normalize_color(value)
        if hex_value is None:
            return QuantizedColor(token=f"{prefix}-[{escape_arbitrary(value)}]")

        entry = self.palette.get(hex_value)
        if entry is not None:
            return QuantizedColor(token=f"{prefix}-{entry.name}", entry=entry)
        return QuantizedColor(token=f"{prefix}-[{hex_value}]")

    def to_token(self, value: str, prefix: str) -> str:
        """Shortcut for ``quantize(value, prefix).token``."""
        return self.quantize(value, prefix).token
