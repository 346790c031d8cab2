"""Markup cleaning: strip framework noise and attach generated classes."""

import re

from ..config import ExportConfig
from ..copier_logging import LogCategory, get_category_logger
from ..models import ElementNode
from ..tokens import DIRTY_ATTRIBUTE_PATTERNS

logger = get_category_logger(LogCategory.RENDER)

DIRTY_ATTRIBUTES = tuple(re.compile(pattern) for pattern in DIRTY_ATTRIBUTE_PATTERNS)


def is_dirty_attribute(name: str) -> bool:
    """Whether an attribute name belongs to the framework/tooling denylist."""
    return any(pattern.search(name) for pattern in DIRTY_ATTRIBUTES)


class MarkupCleaner:
    """Produces cleaned copies of a subtree; the original is never touched."""

    def __init__(self, config: ExportConfig | None = None):
        self.config = config or ExportConfig()

    def clean(self, root: ElementNode, class_names: dict[int, str]) -> ElementNode:
        """Deep-copy the subtree and clean every element of the copy.

        Args:
            root: Original root element.
            class_names: Pre-order index -> generated class name. Elements
                without an entry lose their class attribute.

        Returns:
            The cleaned copy.
        """
        copy = root.clone()
        counter = 0

        def visit(original: ElementNode, cloned: ElementNode) -> None:
            nonlocal counter
            index = counter
            counter += 1
            self._clean_element(cloned, class_names.get(index))

            # Walk both trees by child position; overlays are dropped from
            # the copy and take no index
            kept = []
            for position, child in enumerate(original.children):
                twin = cloned.children[position]
                if isinstance(child, ElementNode):
                    if child.has_id_prefix(self.config.ignored_id_prefix):
                        logger.debug(f"Dropping overlay element #{child.element_id}")
                        continue
                    visit(child, twin)
                kept.append(twin)
            cloned.children = kept

        visit(root, copy)
        return copy

    def _clean_element(self, element: ElementNode, class_name: str | None) -> None:
        # An existing class attribute keeps its position
        attributes = {}
        for name, value in element.attributes.items():
            if name == "class":
                if class_name:
                    attributes["class"] = class_name
            elif name != "style" and not is_dirty_attribute(name):
                attributes[name] = value
        if class_name:
            attributes.setdefault("class", class_name)
        element.attributes = attributes

    def apply_utility_classes(
        self, cleaned: ElementNode, tokens_by_index: dict[int, list[str]]
    ) -> ElementNode:
        """Copy a cleaned tree, swapping generated classes for utility tokens.

        Args:
            cleaned: Output of ``clean``. Overlays are already gone, so its
                pre-order positions are the record indices.
            tokens_by_index: Pre-order index -> utility tokens.

        Returns:
            A new tree; elements without tokens have no class attribute.
        """
        copy = cleaned.clone()
        for index, element in enumerate(copy.iter_elements()):
            tokens = tokens_by_index.get(index, [])
            if tokens:
                element.attributes["class"] = " ".join(tokens)
            else:
                element.attributes.pop("class", None)
        return copy
