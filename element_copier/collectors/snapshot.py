"""Host-side adapters for exporting from saved page snapshots.

A snapshot is the picked element's outer markup plus a JSON list of
resolved styles, one ``{property: value}`` object per element in
document (pre-order) order. These adapters turn both into the element
tree and resolver the exporter consumes.
"""

import json
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from ..config import DEFAULT_IGNORED_ID_PREFIX
from ..copier_logging import get_logger
from ..errors import InputFileNotFoundError, InvalidSnapshotError, SnapshotMismatchError
from ..models import ElementNode, TextNode
from .style_extractor import walk_elements

logger = get_logger()


def _convert(tag: Tag) -> ElementNode:
    element = ElementNode(
        tag=tag.name,
        attributes={name: _attribute_text(value) for name, value in tag.attrs.items()},
    )
    for child in tag.children:
        if isinstance(child, Tag):
            element.children.append(_convert(child))
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            element.children.append(TextNode(str(child)))
    return element


def _attribute_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def parse_fragment(markup: str) -> ElementNode:
    """Parse outer markup into an element tree rooted at its first element.

    Args:
        markup: Markup of the picked element.

    Returns:
        Root ElementNode.

    Raises:
        InvalidSnapshotError: If the markup contains no element.
    """
    soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
    root = soup.find(True)
    if root is None:
        raise InvalidSnapshotError("Markup contains no element")
    return _convert(root)


class SnapshotResolver:
    """Resolver backed by a pre-order list of resolved style objects.

    Overlay elements are not part of a snapshot, so they take no entry.
    """

    def __init__(
        self,
        root: ElementNode,
        styles: list[dict[str, str]],
        ignored_id_prefix: str = DEFAULT_IGNORED_ID_PREFIX,
    ):
        """Bind snapshot entries to elements by pre-order position.

        Args:
            root: Root of the parsed markup.
            styles: One property map per visited element, in pre-order.
            ignored_id_prefix: id prefix of overlay elements to skip.

        Raises:
            SnapshotMismatchError: If the counts differ.
            InvalidSnapshotError: If an entry is not an object.
        """
        elements = [item.element for item in walk_elements(root, ignored_id_prefix)]
        if len(elements) != len(styles):
            raise SnapshotMismatchError(len(elements), len(styles))

        self._values: dict[int, dict[str, str]] = {}
        for position, (element, entry) in enumerate(zip(elements, styles, strict=True)):
            if not isinstance(entry, dict):
                raise InvalidSnapshotError(
                    f"Style entry {position} is not an object"
                )
            self._values[id(element)] = {
                str(prop): "" if value is None else str(value)
                for prop, value in entry.items()
            }

    def __call__(self, element: ElementNode, prop: str) -> str:
        return self._values.get(id(element), {}).get(prop, "")


def load_snapshot(
    markup_path: Path,
    styles_path: Path,
    ignored_id_prefix: str = DEFAULT_IGNORED_ID_PREFIX,
) -> tuple[ElementNode, SnapshotResolver]:
    """Load markup and resolved styles from disk.

    Args:
        markup_path: File with the picked element's outer markup.
        styles_path: JSON file with the pre-order style list.
        ignored_id_prefix: id prefix of overlay elements to skip.

    Returns:
        Tuple of (root element, resolver).
    """
    for path in (markup_path, styles_path):
        if not path.exists():
            raise InputFileNotFoundError(str(path))

    root = parse_fragment(markup_path.read_text(encoding="utf-8"))

    try:
        styles = json.loads(styles_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidSnapshotError(
            f"Style snapshot is not valid JSON: {e}", source=str(styles_path)
        ) from e
    if not isinstance(styles, list):
        raise InvalidSnapshotError(
            "Style snapshot must be a JSON list", source=str(styles_path)
        )

    logger.debug(f"Loaded snapshot with {len(styles)} style entries from {styles_path}")
    return root, SnapshotResolver(root, styles, ignored_id_prefix)
