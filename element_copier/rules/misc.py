"""List and table rules."""

from .base import RuleContext, UtilityRule, arbitrary_property

TABLE_LAYOUT_MAP = {"fixed": "table-fixed", "auto": "table-auto"}
BORDER_COLLAPSE_MAP = {"collapse": "border-collapse", "separate": "border-separate"}
VERTICAL_ALIGN_MAP = {
    "baseline": "align-baseline",
    "top": "align-top",
    "middle": "align-middle",
    "bottom": "align-bottom",
    "text-top": "align-text-top",
    "text-bottom": "align-text-bottom",
    "sub": "align-sub",
    "super": "align-super",
}


class ListTableRule(UtilityRule):
    """list-style, table-layout, border-collapse/spacing, vertical-align."""

    @property
    def rule_id(self) -> str:
        return "MISC.LIST_TABLE"

    @property
    def properties(self) -> tuple[str, ...]:
        return (
            "list-style",
            "table-layout",
            "border-collapse",
            "border-spacing",
            "vertical-align",
        )

    def apply(self, context: RuleContext) -> None:
        self._apply_list_style(context)
        context.add_mapped("table-layout", TABLE_LAYOUT_MAP)
        context.add_mapped("border-collapse", BORDER_COLLAPSE_MAP)
        self._apply_border_spacing(context)
        context.add_mapped("vertical-align", VERTICAL_ALIGN_MAP, fallback_prefix="align")

    def _apply_list_style(self, context: RuleContext) -> None:
        value = context.get("list-style")
        if value is None:
            return
        # Resolved shorthand reads "disc outside none"
        words = value.split()
        if "disc" in words:
            context.add("list-disc")
        elif "decimal" in words:
            context.add("list-decimal")
        elif words and words[0] == "none":
            context.add("list-none")
        else:
            context.add_fallback(
                arbitrary_property("list-style", value), "list-style", value
            )

    def _apply_border_spacing(self, context: RuleContext) -> None:
        value = context.get("border-spacing")
        if value is None:
            return
        parts = value.split()
        if len(parts) == 1 or (len(parts) == 2 and parts[0] == parts[1]):
            context.add(
                f"border-spacing-{context.spacing_key('border-spacing', parts[0])}"
            )
        elif len(parts) == 2:
            context.add(
                f"border-spacing-x-{context.spacing_key('border-spacing', parts[0])}"
            )
            context.add(
                f"border-spacing-y-{context.spacing_key('border-spacing', parts[1])}"
            )
        else:
            context.add_fallback(
                arbitrary_property("border-spacing", value), "border-spacing", value
            )
