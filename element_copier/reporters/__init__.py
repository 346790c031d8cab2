"""Renderers for the exported artifacts."""

from .css import CssSerializer
from .markup import MarkupCleaner, is_dirty_attribute
from .pretty import PrettyPrinter

__all__ = [
    "CssSerializer",
    "MarkupCleaner",
    "PrettyPrinter",
    "is_dirty_attribute",
]
