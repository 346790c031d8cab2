"""Utility compiler.

This module provides the UtilityCompiler that runs the registered rules
over one element's declarations, in registration order, and collects
the resulting Tailwind tokens.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from ..copier_logging import LogCategory, get_category_logger
from ..models import NodeStyleRecord
from ..normalizers.color import ColorQuantizer
from ..normalizers.spacing import SpacingQuantizer
from .base import Fallback, RuleContext, UtilityRule, arbitrary_property

logger = get_category_logger(LogCategory.COMPILE)


@dataclass
class CompileResult:
    """Tokens for one element plus the fallbacks taken to produce them."""

    tokens: list[str] = field(default_factory=list)
    fallbacks: list[Fallback] = field(default_factory=list)

    @property
    def fallback_count(self) -> int:
        return len(self.fallbacks)


class UtilityCompiler:
    """Maps surviving declarations to utility tokens.

    Rules run in registration order. Every surviving property no rule
    declares is emitted by a final catch-all as ``[property:value]``.
    """

    def __init__(
        self,
        colors: ColorQuantizer | None = None,
        spacing: SpacingQuantizer | None = None,
    ):
        """Initialize the compiler.

        Args:
            colors: Color quantizer shared by all rules.
            spacing: Spacing quantizer shared by all rules.
        """
        self.colors = colors or ColorQuantizer()
        self.spacing = spacing or SpacingQuantizer()
        self._rules: dict[str, UtilityRule] = {}

    def register(self, rule: UtilityRule) -> None:
        """Register a rule with the compiler.

        Args:
            rule: Rule instance to register.

        Raises:
            ValueError: If a rule with the same ID is already registered.
        """
        if rule.rule_id in self._rules:
            raise ValueError(f"Rule {rule.rule_id} is already registered")
        self._rules[rule.rule_id] = rule

    def unregister(self, rule_id: str) -> None:
        """Unregister a rule by ID."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> UtilityRule | None:
        """Get a rule by ID, or None if not registered."""
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[UtilityRule]:
        """All registered rules in execution order."""
        return list(self._rules.values())

    @property
    def rule_count(self) -> int:
        """Number of registered rules."""
        return len(self._rules)

    @property
    def declared_properties(self) -> frozenset[str]:
        """Every property claimed by a registered rule."""
        return frozenset(
            prop for rule in self._rules.values() for prop in rule.properties
        )

    def compile(self, source: NodeStyleRecord | Mapping[str, str]) -> CompileResult:
        """Compile one element's declarations.

        Args:
            source: A style record or a bare property -> value mapping.

        Returns:
            CompileResult with deduplicated tokens in emission order.
        """
        styles = source.styles if isinstance(source, NodeStyleRecord) else source
        context = RuleContext(styles=styles, colors=self.colors, spacing=self.spacing)

        for rule in self._rules.values():
            if rule.applies_to(context):
                rule.apply(context)

        declared = self.declared_properties
        for prop, value in styles.items():
            if prop not in declared:
                context.add_fallback(arbitrary_property(prop, value), prop, value)

        for fallback in context.fallbacks:
            logger.debug(
                f"Fallback for {fallback.property}: {fallback.token}",
                extra={
                    "property": fallback.property,
                    "value": fallback.value,
                    "token": fallback.token,
                },
            )

        return CompileResult(tokens=list(context.tokens), fallbacks=list(context.fallbacks))

    def register_default_rules(self) -> None:
        """Register the built-in rules in their fixed execution order."""
        from . import box, color, effects, flex, layout, misc, shape, typography

        for rule in (
            layout.DisplayRule(),
            layout.PositionRule(),
            layout.OverflowRule(),
            layout.VisibilityRule(),
            flex.FlexRule(),
            flex.GridRule(),
            flex.GapRule(),
            color.ColorRule(),
            color.BackgroundRule(),
            box.BoxSpacingRule("padding", "p"),
            box.BoxSpacingRule("margin", "m"),
            box.SizingRule(),
            shape.BorderRadiusRule(),
            typography.FontRule(),
            typography.TextRule(),
            shape.BorderRule(),
            effects.OpacityRule(),
            effects.ShadowRule(),
            effects.InteractionRule(),
            effects.MotionRule(),
            misc.ListTableRule(),
        ):
            self.register(rule)


def create_utility_compiler(register_defaults: bool = True) -> UtilityCompiler:
    """Create and configure a utility compiler.

    Args:
        register_defaults: Whether to register the built-in rules.

    Returns:
        Configured UtilityCompiler instance.
    """
    compiler = UtilityCompiler()

    if register_defaults:
        compiler.register_default_rules()

    return compiler
