"""Effect rules: opacity, shadow, cursor, stacking, transform and motion."""

import math

from .base import RuleContext, UtilityRule, arbitrary_property, arbitrary_value

OPACITY_SCALE = frozenset([0, 5, 10, 20, 25, 30, 40, 50, 60, 70, 75, 80, 90, 95, 100])

# Shadow alpha fingerprint -> utility; first match wins
SHADOW_FINGERPRINTS = (
    ("rgba(0, 0, 0, 0.05)", "shadow-sm"),
    ("rgba(0, 0, 0, 0.1)", "shadow"),
    ("rgba(0, 0, 0, 0.15)", "shadow-md"),
    ("rgba(0, 0, 0, 0.25)", "shadow-lg"),
    ("rgba(0, 0, 0, 0.3)", "shadow-xl"),
)

CURSOR_MAP = {
    "pointer": "cursor-pointer",
    "not-allowed": "cursor-not-allowed",
    "default": "cursor-default",
    "move": "cursor-move",
    "text": "cursor-text",
    "wait": "cursor-wait",
    "crosshair": "cursor-crosshair",
    "grab": "cursor-grab",
    "grabbing": "cursor-grabbing",
    "help": "cursor-help",
}
Z_INDEX_MAP = {"10": "z-10", "20": "z-20", "30": "z-30", "40": "z-40", "50": "z-50"}
POINTER_EVENTS_MAP = {"none": "pointer-events-none", "auto": "pointer-events-auto"}
NO_TRANSITION = "all 0s ease 0s"


def opacity_token(value: str) -> str | None:
    """Token for an opacity value, None when it is fully opaque."""
    try:
        number = float(value)
    except ValueError:
        return arbitrary_value("opacity", value)
    if not math.isfinite(number) or not 0 <= number <= 1:
        return arbitrary_value("opacity", value)
    if number == 1:
        return None
    # Half-up rounding, so 0.125 lands on 13 rather than 12
    percent = math.floor(number * 100 + 0.5)
    if percent in OPACITY_SCALE:
        return f"opacity-{percent}"
    return arbitrary_value("opacity", value)


class OpacityRule(UtilityRule):
    """opacity -> opacity-N on the fixed scale, else opacity-[v]."""

    @property
    def rule_id(self) -> str:
        return "EFFECT.OPACITY"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("opacity",)

    def apply(self, context: RuleContext) -> None:
        value = context.get("opacity")
        if value is None:
            return
        token = opacity_token(value)
        if token is None:
            return
        if token.startswith("opacity-["):
            context.add_fallback(token, "opacity", value)
        else:
            context.add(token)


class ShadowRule(UtilityRule):
    """box-shadow and text-shadow."""

    @property
    def rule_id(self) -> str:
        return "EFFECT.SHADOW"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("box-shadow", "text-shadow")

    def apply(self, context: RuleContext) -> None:
        shadow = context.get("box-shadow")
        if shadow is not None:
            for fingerprint, token in SHADOW_FINGERPRINTS:
                if fingerprint in shadow:
                    context.add(token)
                    break
            else:
                context.add_fallback(
                    arbitrary_value("shadow", shadow), "box-shadow", shadow
                )

        text_shadow = context.get("text-shadow")
        if text_shadow is not None:
            context.add_fallback(
                arbitrary_property("text-shadow", text_shadow),
                "text-shadow",
                text_shadow,
            )


class InteractionRule(UtilityRule):
    """cursor, pointer-events and z-index."""

    @property
    def rule_id(self) -> str:
        return "EFFECT.INTERACTION"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("cursor", "pointer-events", "z-index")

    def apply(self, context: RuleContext) -> None:
        context.add_mapped("cursor", CURSOR_MAP, fallback_prefix="cursor")
        context.add_mapped("pointer-events", POINTER_EVENTS_MAP)

        z_index = context.get("z-index")
        if z_index and z_index not in ("auto", "0"):
            context.add_mapped("z-index", Z_INDEX_MAP, fallback_prefix="z")


class MotionRule(UtilityRule):
    """transform and transition."""

    @property
    def rule_id(self) -> str:
        return "EFFECT.MOTION"

    @property
    def properties(self) -> tuple[str, ...]:
        return ("transform", "transition")

    def apply(self, context: RuleContext) -> None:
        transform = context.get("transform")
        if transform is not None:
            context.add_fallback(
                arbitrary_property("transform", transform), "transform", transform
            )

        transition = context.get("transition")
        if transition is None:
            return
        if transition == NO_TRANSITION:
            context.add("transition-none")
        else:
            context.add_fallback(
                arbitrary_property("transition", transition), "transition", transition
            )
