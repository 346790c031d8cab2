"""Layout rules: display, position and inset, overflow, visibility/float."""

from .base import RuleContext, UtilityRule, arbitrary_value

DISPLAY_MAP = {
    "flex": "flex",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "inline-grid": "inline-grid",
    "block": "block",
    "inline-block": "inline-block",
    "inline": "inline",
    "none": "hidden",
    "table": "table",
    "table-row": "table-row",
    "table-cell": "table-cell",
    "table-header-group": "table-header-group",
    "table-row-group": "table-row-group",
    "table-footer-group": "table-footer-group",
    "list-item": "list-item",
    "flow-root": "flow-root",
    "contents": "contents",
}

POSITION_MAP = {
    "static": "static",
    "relative": "relative",
    "absolute": "absolute",
    "fixed": "fixed",
    "sticky": "sticky",
}

INSET_SIDES = ("top", "right", "bottom", "left")
INSET_NAMED = {"100%": "full", "50%": "1/2"}

OVERFLOW_VALUES = ("hidden", "scroll", "auto", "visible", "clip")

VISIBILITY_MAP = {"visible": "visible", "hidden": "invisible", "collapse": "collapse"}
FLOAT_MAP = {
    "left": "float-left",
    "right": "float-right",
    "inline-start": "float-start",
    "inline-end": "float-end",
}
CLEAR_MAP = {
    "left": "clear-left",
    "right": "clear-right",
    "both": "clear-both",
    "inline-start": "clear-start",
    "inline-end": "clear-end",
}
BOX_SIZING_MAP = {"border-box": "box-border", "content-box": "box-content"}


class DisplayRule(UtilityRule):
    """display -> flex / grid / hidden / ..."""

    @property
    def rule_id(self) -> str:
        return "LAYOUT.DISPLAY"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("display",)

    def apply(self, context: RuleContext) -> None:
        context.add_mapped("display", DISPLAY_MAP)


class PositionRule(UtilityRule):
    """position keyword plus top/right/bottom/left offsets."""

    @property
    def rule_id(self) -> str:
        return "LAYOUT.POSITION"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("position",) + INSET_SIDES

    def apply(self, context: RuleContext) -> None:
        context.add_mapped("position", POSITION_MAP)

        for side in INSET_SIDES:
            value = context.get(side)
            if value is None:
                continue
            if value in INSET_NAMED:
                context.add(f"{side}-{INSET_NAMED[value]}")
                continue
            context.add(f"{side}-{context.spacing_key(side, value)}")


class OverflowRule(UtilityRule):
    """overflow, overflow-x, overflow-y."""

    @property
    def rule_id(self) -> str:
        return "LAYOUT.OVERFLOW"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("overflow", "overflow-x", "overflow-y")

    def apply(self, context: RuleContext) -> None:
        for prop in self.properties:
            value = context.get(prop)
            if value is None:
                continue
            prefix = prop  # "overflow", "overflow-x", "overflow-y"
            if value in OVERFLOW_VALUES:
                context.add(f"{prefix}-{value}")
            else:
                context.add_fallback(arbitrary_value(prefix, value), prop, value)


class VisibilityRule(UtilityRule):
    """visibility, float, clear and box-sizing keywords."""

    @property
    def rule_id(self) -> str:
        return "LAYOUT.VISIBILITY"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("visibility", "float", "clear", "box-sizing")

    def apply(self, context: RuleContext) -> None:
        context.add_mapped("visibility", VISIBILITY_MAP)
        context.add_mapped("float", FLOAT_MAP)
        context.add_mapped("clear", CLEAR_MAP)
        context.add_mapped("box-sizing", BOX_SIZING_MAP)
