"""Base rule class for utility-class compilation.

This module defines the abstract base class for utility rules and the
context they share while compiling one element's declarations.
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field

from ..errors import FallbackReason
from ..normalizers.color import ColorQuantizer, escape_arbitrary
from ..normalizers.spacing import SpacingQuantizer


@dataclass(frozen=True)
class Fallback:
    """A declaration emitted as an arbitrary-value token."""

    property: str
    value: str
    token: str
    reason: FallbackReason = FallbackReason.UNMAPPABLE_VALUE


def arbitrary_value(prefix: str, value: str) -> str:
    """``prefix-[value]`` with whitespace escaped."""
    return f"{prefix}-[{escape_arbitrary(value)}]"


def arbitrary_property(prop: str, value: str) -> str:
    """``[property:value]`` with whitespace escaped."""
    return f"[{prop}:{escape_arbitrary(value)}]"


def format_number(number: float) -> str:
    """Render a float the way it reads in CSS: ``2`` rather than ``2.0``."""
    if math.isfinite(number) and number == int(number):
        return str(int(number))
    return str(number)


@dataclass
class RuleContext:
    """Context passed to rules while compiling one element.

    Collects tokens in emission order, drops repeats (first occurrence
    wins) and records every arbitrary-value fallback.
    """

    styles: Mapping[str, str]
    colors: ColorQuantizer = field(default_factory=ColorQuantizer)
    spacing: SpacingQuantizer = field(default_factory=SpacingQuantizer)
    tokens: list[str] = field(default_factory=list)
    fallbacks: list[Fallback] = field(default_factory=list)

    def get(self, prop: str) -> str | None:
        """Surviving value of a property, or None if it was elided."""
        return self.styles.get(prop)

    def add(self, token: str | None) -> None:
        """Append a token unless it is empty or already present."""
        if token and token not in self.tokens:
            self.tokens.append(token)

    def add_fallback(
        self,
        token: str,
        prop: str,
        value: str,
        reason: FallbackReason = FallbackReason.UNMAPPABLE_VALUE,
    ) -> None:
        """Append an arbitrary-value token and record why it was needed."""
        self.add(token)
        self.fallbacks.append(Fallback(prop, value, token, reason))

    def add_mapped(
        self,
        prop: str,
        mapping: Mapping[str, str],
        fallback_prefix: str | None = None,
    ) -> None:
        """Look a property's value up in a keyword table.

        Unmapped values become ``fallback_prefix-[value]`` when a prefix is
        given, ``[property:value]`` otherwise.
        """
        value = self.get(prop)
        if value is None:
            return
        token = mapping.get(value)
        if token:
            self.add(token)
        elif fallback_prefix:
            self.add_fallback(arbitrary_value(fallback_prefix, value), prop, value)
        else:
            self.add_fallback(arbitrary_property(prop, value), prop, value)

    def add_color(self, prefix: str, prop: str, value: str | None = None) -> None:
        """Emit a palette token for a color property."""
        value = value if value is not None else self.get(prop)
        if value is None:
            return
        quantized = self.colors.quantize(value, prefix)
        if quantized.matched:
            self.add(quantized.token)
        else:
            self.add_fallback(
                quantized.token, prop, value, FallbackReason.UNMATCHED_COLOR
            )

    def spacing_key(self, prop: str, value: str) -> str:
        """Scale key for a length; non-pixel values become ``[value]``."""
        key = self.spacing.quantize(value)
        if key is None:
            key = f"[{escape_arbitrary(value)}]"
        if key.startswith("["):
            self.fallbacks.append(
                Fallback(prop, value, key, FallbackReason.UNMAPPABLE_VALUE)
            )
        return key


class UtilityRule(ABC):
    """Abstract base class for utility rules.

    A rule reads only the properties it declares and emits zero or more
    tokens. It never fires for a property that was elided upstream.
    """

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier, e.g. 'LAYOUT.DISPLAY'."""

    @property
    @abstractmethod
    def properties(self) -> tuple[str, ...]:
        """Properties this rule consumes."""

    def applies_to(self, context: RuleContext) -> bool:
        """Whether any declared property survived extraction."""
        return any(prop in context.styles for prop in self.properties)

    @abstractmethod
    def apply(self, context: RuleContext) -> None:
        """Emit tokens for the declared properties into the context."""

    def __repr__(self) -> str:
        """String representation of the rule."""
        return f"<{self.__class__.__name__} {self.rule_id}>"
