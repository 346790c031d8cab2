"""Pixel length quantization onto the 4px spacing scale."""

import math
import re

PIXEL_PATTERN = re.compile(r"(-?\d*\.?\d+)(?:px)?", re.IGNORECASE)

# Quarter-step results with a dedicated scale entry
HALF_STEPS = {0.5: "0.5", 1.5: "1.5", 2.5: "2.5", 3.5: "3.5"}

SCALE_MAX = 96


def parse_pixels(value: str | None) -> float | None:
    """Parse ``"12px"`` or ``"12"`` into a float.

    Returns None for any other unit or keyword, and for lengths too
    large to represent.
    """
    if value is None:
        return None
    match = PIXEL_PATTERN.fullmatch(value.strip())
    if not match:
        return None
    amount = float(match.group(1))
    return amount if math.isfinite(amount) else None


def format_pixels(amount: float) -> str:
    """Render a pixel amount: integers unadorned, others to 4 decimals."""
    if amount == int(amount):
        return f"{int(amount)}px"
    return f"{round(amount, 4)}px"


class SpacingQuantizer:
    """Maps pixel lengths onto the spacing scale (1 unit = 4px)."""

    def __init__(self, unit: float = 4.0, scale_max: int = SCALE_MAX):
        self.unit = unit
        self.scale_max = scale_max

    def quantize_pixels(self, amount: float) -> str:
        """Map a pixel amount to a scale key or an arbitrary value.

        Args:
            amount: Length in pixels.

        Returns:
            Scale key such as "4", "1.5", "px", or "[13px]".
        """
        if amount == 0:
            return "0"
        if amount == 1:
            return "px"

        steps = amount / self.unit
        if steps in HALF_STEPS:
            return HALF_STEPS[steps]
        if steps == int(steps) and 1 <= steps <= self.scale_max:
            return str(int(steps))
        return f"[{format_pixels(amount)}]"

    def quantize(self, value: str | None) -> str | None:
        """Map a resolved length to a scale key.

        Args:
            value: Resolved length such as "16px".

        Returns:
            Scale key, or None when the value is not a pixel length
            (percentages, viewport units, keywords, ``calc()``).
        """
        amount = parse_pixels(value)
        if amount is None:
            return None
        return self.quantize_pixels(amount)
