"""Padding/margin side consolidation and sizing rules."""

from .base import RuleContext, UtilityRule, arbitrary_property

SIDES = ("top", "right", "bottom", "left")

SIZE_PROPERTIES = (
    ("w", "width"),
    ("h", "height"),
    ("min-w", "min-width"),
    ("max-w", "max-width"),
    ("min-h", "min-height"),
    ("max-h", "max-height"),
)

NAMED_SIZES = {
    "100%": "full",
    "100vw": "screen",
    "100vh": "screen",
    "50%": "1/2",
    "33.3333%": "1/3",
    "66.6667%": "2/3",
    "25%": "1/4",
    "75%": "3/4",
    "max-content": "max",
    "min-content": "min",
    "fit-content": "fit",
}


def expand_box(value: str) -> tuple[str, str, str, str] | None:
    """Expand a 1-4 value box shorthand into (top, right, bottom, left)."""
    parts = value.split()
    if len(parts) == 1:
        return (parts[0],) * 4
    if len(parts) == 2:
        return (parts[0], parts[1], parts[0], parts[1])
    if len(parts) == 3:
        return (parts[0], parts[1], parts[2], parts[1])
    if len(parts) == 4:
        return (parts[0], parts[1], parts[2], parts[3])
    return None


def consolidate_sides(
    prefix: str,
    top: str | None,
    right: str | None,
    bottom: str | None,
    left: str | None,
) -> list[str]:
    """Collapse four quantized sides into the fewest utility tokens.

    Args:
        prefix: "p" or "m".
        top, right, bottom, left: Scale keys, None when the side is absent.

    Returns:
        Tokens such as ``["p-2"]`` or ``["py-2", "px-1"]``.
    """
    if top and top == right == bottom == left:
        return [f"{prefix}-{top}"]

    tokens = []
    if top == bottom and right == left:
        if top:
            tokens.append(f"{prefix}y-{top}")
        if right:
            tokens.append(f"{prefix}x-{right}")
        return tokens

    if top and top == bottom:
        tokens.append(f"{prefix}y-{top}")
    else:
        if top:
            tokens.append(f"{prefix}t-{top}")
        if bottom:
            tokens.append(f"{prefix}b-{bottom}")

    if right and right == left:
        tokens.append(f"{prefix}x-{right}")
    else:
        if right:
            tokens.append(f"{prefix}r-{right}")
        if left:
            tokens.append(f"{prefix}l-{left}")
    return tokens


class BoxSpacingRule(UtilityRule):
    """Padding or margin, from longhands or the expanded shorthand."""

    def __init__(self, shorthand: str, prefix: str):
        """Initialize the rule.

        Args:
            shorthand: "padding" or "margin".
            prefix: Utility prefix, "p" or "m".
        """
        self.shorthand = shorthand
        self.prefix = prefix

    @property
    def rule_id(self) -> str:
        return f"BOX.{self.shorthand.upper()}"

    @property
    def properties(self) -> tuple[str, ...]:
        return (self.shorthand,) + tuple(f"{self.shorthand}-{side}" for side in SIDES)

    def apply(self, context: RuleContext) -> None:
        longhands = [context.get(f"{self.shorthand}-{side}") for side in SIDES]
        if any(longhands):
            sides = [
                self._side_key(context, f"{self.shorthand}-{side}", value)
                for side, value in zip(SIDES, longhands)
            ]
        else:
            shorthand = context.get(self.shorthand)
            if shorthand is None:
                return
            expanded = expand_box(shorthand)
            sides = (
                [self._side_key(context, self.shorthand, value) for value in expanded]
                if expanded
                else [None] * 4
            )
            if not any(sides):
                context.add_fallback(
                    arbitrary_property(self.shorthand, shorthand),
                    self.shorthand,
                    shorthand,
                )
                return

        for token in consolidate_sides(self.prefix, *sides):
            context.add(token)

    def _side_key(self, context: RuleContext, prop: str, value: str | None) -> str | None:
        if value is None:
            return None
        key = context.spacing_key(prop, value)
        # Zero sides carry nothing once another side is set
        return None if key == "0" else key


class SizingRule(UtilityRule):
    """width/height and their min/max variants."""

    @property
    def rule_id(self) -> str:
        return "BOX.SIZING"

    @property
    def properties(self) -> tuple[str, ...]:
        return tuple(prop for _, prop in SIZE_PROPERTIES)

    def apply(self, context: RuleContext) -> None:
        for prefix, prop in SIZE_PROPERTIES:
            value = context.get(prop)
            if value is None:
                continue
            if value in NAMED_SIZES:
                context.add(f"{prefix}-{NAMED_SIZES[value]}")
                continue
            context.add(f"{prefix}-{context.spacing_key(prop, value)}")
