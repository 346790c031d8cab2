"""Value quantizers used by the utility compiler."""

from .color import ColorQuantizer, QuantizedColor, normalize_color, rgb_to_hex
from .spacing import SpacingQuantizer, format_pixels, parse_pixels

__all__ = [
    "ColorQuantizer",
    "QuantizedColor",
    "normalize_color",
    "rgb_to_hex",
    "SpacingQuantizer",
    "format_pixels",
    "parse_pixels",
]
