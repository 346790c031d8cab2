"""Text color, background color and background image rules."""

from .base import RuleContext, UtilityRule, arbitrary_property, arbitrary_value

BACKGROUND_SIZE_MAP = {
    "cover": "bg-cover",
    "contain": "bg-contain",
    "auto": "bg-auto",
}
BACKGROUND_POSITION_MAP = {
    "center": "bg-center",
    "50% 50%": "bg-center",
    "0% 0%": "bg-left-top",
    "top": "bg-top",
    "bottom": "bg-bottom",
    "left": "bg-left",
    "right": "bg-right",
    "50% 0%": "bg-top",
    "50% 100%": "bg-bottom",
    "0% 50%": "bg-left",
    "100% 50%": "bg-right",
}
BACKGROUND_REPEAT_MAP = {
    "repeat": "bg-repeat",
    "no-repeat": "bg-no-repeat",
    "repeat-x": "bg-repeat-x",
    "repeat-y": "bg-repeat-y",
    "round": "bg-repeat-round",
    "space": "bg-repeat-space",
}


class ColorRule(UtilityRule):
    """background-color -> bg-*, color -> text-*."""

    @property
    def rule_id(self) -> str:
        return "COLOR.FILL_TEXT"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("background-color", "color")

    def apply(self, context: RuleContext) -> None:
        context.add_color("bg", "background-color")
        context.add_color("text", "color")


class BackgroundRule(UtilityRule):
    """Background image, size, position and repeat."""

    @property
    def rule_id(self) -> str:
        return "COLOR.BACKGROUND"

    @property
    def properties(self) -> tuple[str, ...]:
        return (
            "background-image",
            "background-size",
            "background-position",
            "background-repeat",
        )

    def apply(self, context: RuleContext) -> None:
        image = context.get("background-image")
        if image is not None:
            context.add_fallback(
                arbitrary_value("bg", image), "background-image", image
            )

        context.add_mapped("background-size", BACKGROUND_SIZE_MAP)

        position = context.get("background-position")
        if position is not None:
            token = BACKGROUND_POSITION_MAP.get(position)
            if token:
                context.add(token)
            else:
                context.add_fallback(
                    arbitrary_property("background-position", position),
                    "background-position",
                    position,
                )

        context.add_mapped("background-repeat", BACKGROUND_REPEAT_MAP)
