"""Border radius, border and outline rules."""

import re

from .base import RuleContext, UtilityRule, arbitrary_property, arbitrary_value

RADIUS_MAP = {
    "0px": "rounded-none",
    "2px": "rounded-sm",
    "4px": "rounded",
    "6px": "rounded-md",
    "8px": "rounded-lg",
    "12px": "rounded-xl",
    "16px": "rounded-2xl",
    "24px": "rounded-3xl",
    "9999px": "rounded-full",
    "50%": "rounded-full",
}
FULL_RADIUS_PX = 50
PIXEL_RADIUS = re.compile(r"(\d+(?:\.\d+)?)px")

# Suffix appended to the border prefix for each width
BORDER_WIDTH_SUFFIX = {"1px": "", "2px": "-2", "4px": "-4", "8px": "-8"}
BORDER_STYLES = frozenset(
    ["solid", "dashed", "dotted", "double", "hidden", "none", "groove", "ridge", "inset", "outset"]
)
BORDER_SIDES = {
    "border-top": "border-t",
    "border-right": "border-r",
    "border-bottom": "border-b",
    "border-left": "border-l",
}

# "<width> <style> <color>", e.g. "1px solid rgb(229, 231, 235)"
BORDER_PATTERN = re.compile(r"(\d+(?:\.\d+)?px)\s+([a-z]+)\s+(.+)")
ZERO_WIDTH = re.compile(r"0(?:\.0+)?(?:px)?")


class BorderRadiusRule(UtilityRule):
    """border-radius -> rounded-*."""

    @property
    def rule_id(self) -> str:
        return "SHAPE.RADIUS"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("border-radius",)

    def apply(self, context: RuleContext) -> None:
        value = context.get("border-radius")
        if value is None:
            return
        if value in RADIUS_MAP:
            context.add(RADIUS_MAP[value])
            return
        match = PIXEL_RADIUS.fullmatch(value)
        if match and float(match.group(1)) >= FULL_RADIUS_PX:
            context.add("rounded-full")
            return
        context.add_fallback(arbitrary_value("rounded", value), "border-radius", value)


class BorderRule(UtilityRule):
    """border shorthand, side borders, border longhands and outline."""

    @property
    def rule_id(self) -> str:
        return "SHAPE.BORDER"

    @property
    def properties(self) -> tuple[str, ...]:
        return (
            "border",
            "border-top",
            "border-right",
            "border-bottom",
            "border-left",
            "border-width",
            "border-style",
            "border-color",
            "outline",
        )

    def apply(self, context: RuleContext) -> None:
        border = context.get("border")
        if border is not None:
            self._apply_shorthand(context, "border", "border", border)
        for prop, prefix in BORDER_SIDES.items():
            value = context.get(prop)
            if value is not None:
                self._apply_shorthand(context, prop, prefix, value)

        self._apply_width(context)
        self._apply_style(context)
        self._apply_color(context)
        self._apply_outline(context)

    def _apply_shorthand(
        self, context: RuleContext, prop: str, prefix: str, value: str
    ) -> None:
        match = BORDER_PATTERN.fullmatch(value)
        if match is None:
            context.add_fallback(prefix, prop, value)
            return

        width, style, color = match.groups()
        if style not in BORDER_STYLES:
            context.add_fallback(prefix, prop, value)
            return
        if style in ("none", "hidden") or ZERO_WIDTH.fullmatch(width):
            context.add(f"{prefix}-0")
            return

        self._add_width(context, prop, prefix, width)
        if style != "solid":
            if prefix == "border":
                context.add(f"border-{style}")
            else:
                # Style utilities have no per-side form
                context.add_fallback(
                    arbitrary_property(f"{prop}-style", style), prop, value
                )
        context.add_color(prefix, prop, color.strip())

    def _add_width(self, context: RuleContext, prop: str, prefix: str, width: str) -> None:
        suffix = BORDER_WIDTH_SUFFIX.get(width)
        if suffix is not None:
            context.add(f"{prefix}{suffix}")
        else:
            context.add_fallback(arbitrary_value(prefix, width), prop, width)

    def _apply_width(self, context: RuleContext) -> None:
        value = context.get("border-width")
        if value is None:
            return
        if " " in value:
            context.add_fallback(
                arbitrary_property("border-width", value), "border-width", value
            )
        elif ZERO_WIDTH.fullmatch(value):
            context.add("border-0")
        else:
            self._add_width(context, "border-width", "border", value)

    def _apply_style(self, context: RuleContext) -> None:
        value = context.get("border-style")
        if value is None:
            return
        if value in BORDER_STYLES:
            context.add(f"border-{value}")
        else:
            context.add_fallback(
                arbitrary_property("border-style", value), "border-style", value
            )

    def _apply_color(self, context: RuleContext) -> None:
        value = context.get("border-color")
        if value is None:
            return
        if " " in value and not value.startswith("rgb"):
            context.add_fallback(
                arbitrary_property("border-color", value), "border-color", value
            )
        else:
            context.add_color("border", "border-color", value)

    def _apply_outline(self, context: RuleContext) -> None:
        value = context.get("outline")
        if value is None:
            return
        parts = value.split()
        if "none" in parts or (parts and ZERO_WIDTH.fullmatch(parts[0])):
            context.add("outline-none")
        else:
            context.add_fallback(arbitrary_property("outline", value), "outline", value)
