"""Utility rules that compile declarations into Tailwind tokens.

Rules are grouped by concern:
- layout: display, position, overflow, visibility
- flex: flex container/item, grid, gap
- box: padding/margin side consolidation, sizing
- shape: border radius, border, outline
- color: text/background colors and background images
- typography: font and text styling
- effects: opacity, shadow, cursor, z-index, transform, transition
- misc: list and table properties
"""

from .base import Fallback, RuleContext, UtilityRule
from .box import consolidate_sides, expand_box
from .effects import opacity_token
from .engine import CompileResult, UtilityCompiler, create_utility_compiler

__all__ = [
    "Fallback",
    "RuleContext",
    "UtilityRule",
    "CompileResult",
    "UtilityCompiler",
    "create_utility_compiler",
    "consolidate_sides",
    "expand_box",
    "opacity_token",
]
