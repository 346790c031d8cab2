"""Typography rules: size, weight, leading, alignment and text styling."""

import re

from .base import RuleContext, UtilityRule, arbitrary_value, format_number

FONT_SIZE_MAP = {
    "12px": "text-xs",
    "14px": "text-sm",
    "16px": "text-base",
    "18px": "text-lg",
    "20px": "text-xl",
    "24px": "text-2xl",
    "30px": "text-3xl",
    "36px": "text-4xl",
    "48px": "text-5xl",
    "60px": "text-6xl",
    "72px": "text-7xl",
    "96px": "text-8xl",
    "128px": "text-9xl",
}
FONT_WEIGHT_MAP = {
    "100": "font-thin",
    "200": "font-extralight",
    "300": "font-light",
    "400": "font-normal",
    "500": "font-medium",
    "600": "font-semibold",
    "700": "font-bold",
    "800": "font-extrabold",
    "900": "font-black",
    "bold": "font-bold",
}
LINE_HEIGHT_MAP = {
    "1": "leading-none",
    "1.25": "leading-tight",
    "1.375": "leading-snug",
    "1.5": "leading-normal",
    "1.625": "leading-relaxed",
    "2": "leading-loose",
}
TEXT_ALIGN_MAP = {
    "left": "text-left",
    "center": "text-center",
    "right": "text-right",
    "justify": "text-justify",
    "start": "text-start",
    "end": "text-end",
}
TEXT_TRANSFORM_MAP = {
    "uppercase": "uppercase",
    "lowercase": "lowercase",
    "capitalize": "capitalize",
    "none": "normal-case",
}
LETTER_SPACING_MAP = {
    "-0.05em": "tracking-tighter",
    "-0.025em": "tracking-tight",
    "0em": "tracking-normal",
    "0.025em": "tracking-wide",
    "0.05em": "tracking-wider",
    "0.1em": "tracking-widest",
}
FONT_STYLE_MAP = {"italic": "italic", "oblique": "italic", "normal": "not-italic"}
FONT_VARIANT_MAP = {"small-caps": "[font-variant:small-caps]"}
TEXT_OVERFLOW_MAP = {"ellipsis": "text-ellipsis", "clip": "text-clip"}
WHITE_SPACE_MAP = {
    "normal": "whitespace-normal",
    "nowrap": "whitespace-nowrap",
    "pre": "whitespace-pre",
    "pre-line": "whitespace-pre-line",
    "pre-wrap": "whitespace-pre-wrap",
    "break-spaces": "whitespace-break-spaces",
}

UNITLESS = re.compile(r"\d*\.?\d+")


class FontRule(UtilityRule):
    """Font family, size, weight, style, variant and line height."""

    @property
    def rule_id(self) -> str:
        return "TYPOGRAPHY.FONT"

    @property
    def properties(self) -> tuple[str, ...]:
        return (
            "font-family",
            "font-size",
            "font-weight",
            "font-style",
            "font-variant",
            "line-height",
        )

    def apply(self, context: RuleContext) -> None:
        family = context.get("font-family")
        if family is not None:
            # Quotes never survive inside an arbitrary value
            context.add_fallback(
                arbitrary_value("font", family.replace('"', "'")),
                "font-family",
                family,
            )

        context.add_mapped("font-size", FONT_SIZE_MAP, fallback_prefix="text")
        context.add_mapped("font-weight", FONT_WEIGHT_MAP, fallback_prefix="font")
        context.add_mapped("font-style", FONT_STYLE_MAP)
        context.add_mapped("font-variant", FONT_VARIANT_MAP)

        line_height = context.get("line-height")
        if line_height is not None:
            token = None
            if UNITLESS.fullmatch(line_height):
                number = round(float(line_height), 3)
                token = LINE_HEIGHT_MAP.get(format_number(number))
            if token:
                context.add(token)
            else:
                context.add_fallback(
                    arbitrary_value("leading", line_height), "line-height", line_height
                )


class TextRule(UtilityRule):
    """Alignment, decoration, case, tracking, overflow and white-space."""

    @property
    def rule_id(self) -> str:
        return "TYPOGRAPHY.TEXT"

    @property
    def properties(self) -> tuple[str, ...]:
        return (
            "text-align",
            "text-decoration",
            "text-transform",
            "letter-spacing",
            "word-spacing",
            "text-overflow",
            "white-space",
        )

    def apply(self, context: RuleContext) -> None:
        context.add_mapped("text-align", TEXT_ALIGN_MAP)
        self._apply_decoration(context)
        context.add_mapped("text-transform", TEXT_TRANSFORM_MAP)
        context.add_mapped(
            "letter-spacing", LETTER_SPACING_MAP, fallback_prefix="tracking"
        )
        context.add_mapped("word-spacing", {})
        context.add_mapped("text-overflow", TEXT_OVERFLOW_MAP)
        context.add_mapped("white-space", WHITE_SPACE_MAP)

    def _apply_decoration(self, context: RuleContext) -> None:
        value = context.get("text-decoration")
        if value is None:
            return
        if "underline" in value:
            context.add("underline")
        elif "line-through" in value:
            context.add("line-through")
        elif "overline" in value:
            context.add("overline")
        elif value.startswith("none"):
            context.add("no-underline")
        else:
            context.add_fallback(
                arbitrary_value("decoration", value), "text-decoration", value
            )
