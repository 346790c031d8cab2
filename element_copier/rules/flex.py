"""Flexbox, grid and gap rules."""

import math
import re

from .base import (
    RuleContext,
    UtilityRule,
    arbitrary_property,
    arbitrary_value,
    format_number,
)

FLEX_MAP = {
    "1 1 0%": "flex-1",
    "1 1 0px": "flex-1",
    "1 1 auto": "flex-auto",
    "0 1 auto": "flex-initial",
    "0 0 auto": "flex-none",
}
FLEX_DIRECTION_MAP = {
    "row": "flex-row",
    "column": "flex-col",
    "row-reverse": "flex-row-reverse",
    "column-reverse": "flex-col-reverse",
}
FLEX_WRAP_MAP = {
    "wrap": "flex-wrap",
    "nowrap": "flex-nowrap",
    "wrap-reverse": "flex-wrap-reverse",
}
JUSTIFY_CONTENT_MAP = {
    "flex-start": "justify-start",
    "flex-end": "justify-end",
    "start": "justify-start",
    "end": "justify-end",
    "center": "justify-center",
    "space-between": "justify-between",
    "space-around": "justify-around",
    "space-evenly": "justify-evenly",
    "stretch": "justify-stretch",
}
ALIGN_ITEMS_MAP = {
    "flex-start": "items-start",
    "flex-end": "items-end",
    "start": "items-start",
    "end": "items-end",
    "center": "items-center",
    "stretch": "items-stretch",
    "baseline": "items-baseline",
}
ALIGN_CONTENT_MAP = {
    "flex-start": "content-start",
    "flex-end": "content-end",
    "start": "content-start",
    "end": "content-end",
    "center": "content-center",
    "space-between": "content-between",
    "space-around": "content-around",
    "space-evenly": "content-evenly",
    "stretch": "content-stretch",
    "baseline": "content-baseline",
}
ALIGN_SELF_MAP = {
    "auto": "self-auto",
    "flex-start": "self-start",
    "flex-end": "self-end",
    "start": "self-start",
    "end": "self-end",
    "center": "self-center",
    "stretch": "self-stretch",
    "baseline": "self-baseline",
}
BASIS_NAMED = {"100%": "basis-full", "50%": "basis-1/2", "25%": "basis-1/4"}

JUSTIFY_ITEMS_MAP = {
    "start": "justify-items-start",
    "end": "justify-items-end",
    "center": "justify-items-center",
    "stretch": "justify-items-stretch",
}
PLACE_ITEMS_MAP = {
    "start": "place-items-start",
    "end": "place-items-end",
    "center": "place-items-center",
    "stretch": "place-items-stretch",
    "baseline": "place-items-baseline",
}
PLACE_CONTENT_MAP = {
    "start": "place-content-start",
    "end": "place-content-end",
    "center": "place-content-center",
    "space-between": "place-content-between",
    "space-around": "place-content-around",
    "space-evenly": "place-content-evenly",
    "stretch": "place-content-stretch",
    "baseline": "place-content-baseline",
}

# repeat(3, minmax(0, 1fr)) / repeat(3, minmax(0px, 1fr))
EQUAL_TRACKS = re.compile(r"repeat\((\d+),\s*minmax\(0(?:px)?,\s*1fr\)\)")
# span 2 / span 2
SPAN = re.compile(r"span (\d+)(?: / span \1)?")


def _parse_number(value: str) -> float | None:
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


class FlexRule(UtilityRule):
    """Flex container and flex item properties."""

    @property
    def rule_id(self) -> str:
        return "FLEX.CONTAINER_ITEM"

    @property
    def properties(self) -> tuple[str, ...]:
        return (
            "flex",
            "flex-direction",
            "flex-wrap",
            "flex-flow",
            "justify-content",
            "align-items",
            "align-content",
            "align-self",
            "flex-grow",
            "flex-shrink",
            "flex-basis",
            "order",
        )

    def apply(self, context: RuleContext) -> None:
        context.add_mapped("flex", FLEX_MAP, fallback_prefix="flex")
        context.add_mapped("flex-direction", FLEX_DIRECTION_MAP)
        context.add_mapped("flex-wrap", FLEX_WRAP_MAP)
        self._apply_flow(context)
        context.add_mapped("justify-content", JUSTIFY_CONTENT_MAP)
        context.add_mapped("align-items", ALIGN_ITEMS_MAP)
        context.add_mapped("align-content", ALIGN_CONTENT_MAP)
        context.add_mapped("align-self", ALIGN_SELF_MAP)
        self._apply_grow_shrink(context)
        self._apply_basis(context)

        order = context.get("order")
        if order and order != "0":
            context.add(f"order-[{order}]")

    def _apply_flow(self, context: RuleContext) -> None:
        flow = context.get("flex-flow")
        if flow is None:
            return
        tokens = []
        for part in flow.split():
            token = FLEX_DIRECTION_MAP.get(part) or FLEX_WRAP_MAP.get(part)
            if token is None:
                context.add_fallback(
                    arbitrary_property("flex-flow", flow), "flex-flow", flow
                )
                return
            tokens.append(token)
        for token in tokens:
            context.add(token)

    def _apply_grow_shrink(self, context: RuleContext) -> None:
        grow_raw = context.get("flex-grow")
        if grow_raw is not None:
            grow = _parse_number(grow_raw)
            if grow is None:
                context.add_fallback(
                    arbitrary_property("flex-grow", grow_raw), "flex-grow", grow_raw
                )
            elif grow != 0:
                context.add("grow" if grow == 1 else f"grow-[{format_number(grow)}]")

        shrink_raw = context.get("flex-shrink")
        if shrink_raw is not None:
            shrink = _parse_number(shrink_raw)
            if shrink is None:
                context.add_fallback(
                    arbitrary_property("flex-shrink", shrink_raw),
                    "flex-shrink",
                    shrink_raw,
                )
            elif shrink != 1:
                context.add(
                    "shrink-0" if shrink == 0 else f"shrink-[{format_number(shrink)}]"
                )

    def _apply_basis(self, context: RuleContext) -> None:
        basis = context.get("flex-basis")
        if basis is None:
            return
        if basis in BASIS_NAMED:
            context.add(BASIS_NAMED[basis])
            return
        context.add(f"basis-{context.spacing_key('flex-basis', basis)}")


class GridRule(UtilityRule):
    """Grid templates, placement and item alignment."""

    @property
    def rule_id(self) -> str:
        return "GRID.TEMPLATE_PLACEMENT"

    @property
    def properties(self) -> tuple[str, ...]:
        return (
            "grid-template-columns",
            "grid-template-rows",
            "grid-template-areas",
            "grid-column",
            "grid-row",
            "grid-area",
            "justify-items",
            "place-items",
            "place-content",
        )

    def apply(self, context: RuleContext) -> None:
        self._apply_template(context, "grid-template-columns", "grid-cols")
        self._apply_template(context, "grid-template-rows", "grid-rows")
        self._apply_span(context, "grid-column", "col")
        self._apply_span(context, "grid-row", "row")

        for prop in ("grid-template-areas", "grid-area"):
            value = context.get(prop)
            if value is not None:
                context.add_fallback(arbitrary_property(prop, value), prop, value)

        context.add_mapped("justify-items", JUSTIFY_ITEMS_MAP)
        self._apply_place(context, "place-items", PLACE_ITEMS_MAP)
        self._apply_place(context, "place-content", PLACE_CONTENT_MAP)

    def _apply_template(self, context: RuleContext, prop: str, prefix: str) -> None:
        value = context.get(prop)
        if value is None:
            return
        match = EQUAL_TRACKS.fullmatch(value)
        if match:
            context.add(f"{prefix}-{match.group(1)}")
        else:
            context.add_fallback(arbitrary_value(prefix, value), prop, value)

    def _apply_span(self, context: RuleContext, prop: str, prefix: str) -> None:
        value = context.get(prop)
        if value is None:
            return
        if value == "1 / -1":
            context.add(f"{prefix}-span-full")
            return
        match = SPAN.fullmatch(value)
        if match:
            context.add(f"{prefix}-span-{match.group(1)}")
        else:
            context.add_fallback(arbitrary_value(prefix, value), prop, value)

    def _apply_place(self, context: RuleContext, prop: str, mapping: dict) -> None:
        value = context.get(prop)
        if value is None:
            return
        # Two equal halves ("center center") read as one keyword
        parts = value.split()
        if len(parts) == 2 and parts[0] == parts[1]:
            value = parts[0]
        token = mapping.get(value)
        if token:
            context.add(token)
        else:
            context.add_fallback(arbitrary_property(prop, value), prop, value)


class GapRule(UtilityRule):
    """gap shorthand, falling back to the row-gap/column-gap longhands."""

    @property
    def rule_id(self) -> str:
        return "FLEX.GAP"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("gap", "row-gap", "column-gap")

    def apply(self, context: RuleContext) -> None:
        gap = context.get("gap")
        if gap is not None:
            parts = gap.split()
            if len(parts) == 1 or (len(parts) == 2 and parts[0] == parts[1]):
                context.add(f"gap-{context.spacing_key('gap', parts[0])}")
            elif len(parts) == 2:
                context.add(f"gap-y-{context.spacing_key('gap', parts[0])}")
                context.add(f"gap-x-{context.spacing_key('gap', parts[1])}")
            else:
                context.add_fallback(arbitrary_property("gap", gap), "gap", gap)
            return

        row_gap = context.get("row-gap")
        if row_gap is not None:
            context.add(f"gap-y-{context.spacing_key('row-gap', row_gap)}")
        column_gap = context.get("column-gap")
        if column_gap is not None:
            context.add(f"gap-x-{context.spacing_key('column-gap', column_gap)}")
