"""Style extraction by diffing resolved styles against baselines.

Resolved values are captured once into an immutable snapshot, then each
element's declarations are filtered against:
- the always-ignorable no-op values,
- the tag's baseline defaults,
- the parent's resolved value for inherited (text) properties.
"""

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from ..config import ExportConfig
from ..copier_logging import LogCategory, get_category_logger
from ..models import ElementNode, NodeStyleRecord
from ..normalizers.color import rgb_to_hex
from ..tokens import (
    COLOR_PROPERTIES,
    IMPLIED_DISPLAYS,
    INHERITED_PROPERTIES,
    NOOP_VALUES,
    PROPERTY_ORDER,
    TAG_BASELINES,
    TRACKED_PROPERTIES,
)

logger = get_category_logger(LogCategory.EXTRACT)

# Resolver supplied by the host: (element, property) -> resolved value
Resolver = Callable[[ElementNode, str], str]

# Sub-pixel layout noise, e.g. "312.671875px"
SUBPIXEL_NOISE = re.compile(r"\.\d{3,}px$")
NOISY_PROPERTIES = frozenset(["width", "height"])


@dataclass(frozen=True)
class VisitedElement:
    """One element reached by the pre-order walk."""

    index: int
    element: ElementNode
    parent_index: int | None


@dataclass(frozen=True)
class StyleSnapshot:
    """Resolved values for every visited element, frozen at capture time."""

    visited: tuple[VisitedElement, ...]
    resolved: tuple[MappingProxyType, ...]

    def __len__(self) -> int:
        return len(self.visited)

    def values_for(self, index: int) -> MappingProxyType:
        return self.resolved[index]


def walk_elements(
    root: ElementNode, ignored_id_prefix: str = ""
) -> Iterator[VisitedElement]:
    """Pre-order walk that skips overlay elements and their subtrees.

    The root itself is always visited.
    """
    counter = 0

    def visit(element: ElementNode, parent_index: int | None) -> Iterator[VisitedElement]:
        nonlocal counter
        index = counter
        counter += 1
        yield VisitedElement(index=index, element=element, parent_index=parent_index)
        for child in element.element_children:
            if child.has_id_prefix(ignored_id_prefix):
                continue
            yield from visit(child, index)

    yield from visit(root, None)


class StyleExtractor:
    """Produces one NodeStyleRecord per visited element.

    Elision is approximate by intent: inherited properties are compared
    with the immediate parent's resolved value only, not with the true
    cascade origin.
    """

    def __init__(
        self,
        config: ExportConfig | None = None,
        tracked_properties: tuple[str, ...] = TRACKED_PROPERTIES,
        baselines: MappingProxyType = TAG_BASELINES,
        noop_values: frozenset[str] = NOOP_VALUES,
    ):
        """Initialize the extractor.

        Args:
            config: Export configuration (class naming, overlay prefix).
            tracked_properties: Properties read for every element, in
                output order.
            baselines: Tag -> {property: default} table.
            noop_values: Values never worth emitting.
        """
        self.config = config or ExportConfig()
        self.tracked_properties = tracked_properties
        self.baselines = baselines
        self.noop_values = noop_values

    def capture(self, root: ElementNode, resolver: Resolver) -> StyleSnapshot:
        """Read every tracked property of every visited element once.

        Args:
            root: Root of the picked subtree.
            resolver: Host resolver returning resolved values.

        Returns:
            Immutable snapshot of the resolved values.
        """
        visited = tuple(walk_elements(root, self.config.ignored_id_prefix))
        resolved = []
        for item in visited:
            values = {}
            for prop in self.tracked_properties:
                value = resolver(item.element, prop)
                values[prop] = (value or "").strip()
            resolved.append(MappingProxyType(values))
        return StyleSnapshot(visited=visited, resolved=tuple(resolved))

    def extract(self, root: ElementNode, resolver: Resolver) -> list[NodeStyleRecord]:
        """Capture and diff a subtree.

        Returns:
            Records in pre-order, root first, including empty records.
        """
        return self.extract_snapshot(self.capture(root, resolver))

    def extract_snapshot(self, snapshot: StyleSnapshot) -> list[NodeStyleRecord]:
        """Diff every element of an already captured snapshot."""
        records = []
        for item in snapshot.visited:
            parent_values = (
                snapshot.values_for(item.parent_index)
                if item.parent_index is not None
                else None
            )
            styles = self.diff_element(
                item.element.tag, snapshot.values_for(item.index), parent_values
            )
            records.append(
                NodeStyleRecord(
                    index=item.index,
                    tag=item.element.tag,
                    class_name=self.class_name_for(item.index),
                    styles=styles,
                )
            )

        logger.debug(
            f"Extracted {len(records)} element records, "
            f"{sum(1 for r in records if r.is_empty)} without declarations"
        )
        return records

    def class_name_for(self, index: int) -> str:
        """Generated class name for the element at a pre-order index."""
        if index == 0:
            return self.config.root_class_name
        return self.config.child_class_name(index)

    def diff_element(
        self,
        tag: str,
        resolved: MappingProxyType,
        parent_resolved: MappingProxyType | None,
    ) -> MappingProxyType:
        """Filter one element's resolved values down to meaningful ones.

        Args:
            tag: Lowercase tag name.
            resolved: Resolved values of the element.
            parent_resolved: Resolved values of the parent, None for root.

        Returns:
            Surviving declarations in tracked-property order.
        """
        baseline = self.baselines.get(tag, {})
        result: dict[str, str] = {}

        for prop in self.tracked_properties:
            value = resolved.get(prop, "")
            if not value or value.lower() in self.noop_values:
                continue
            if baseline.get(prop) == value:
                continue
            if (
                parent_resolved is not None
                and prop in INHERITED_PROPERTIES
                and parent_resolved.get(prop) == value
            ):
                continue
            if prop in COLOR_PROPERTIES and value.lower().startswith("rgb"):
                value = rgb_to_hex(value) or value
            if prop in NOISY_PROPERTIES and SUBPIXEL_NOISE.search(value):
                continue
            result[prop] = value

        if "display" not in result:
            display = resolved.get("display", "")
            if (
                display
                and display not in IMPLIED_DISPLAYS
                and baseline.get("display") != display
            ):
                result["display"] = display
                result = dict(
                    sorted(result.items(), key=lambda item: PROPERTY_ORDER.get(item[0], 0))
                )

        return MappingProxyType(result)
