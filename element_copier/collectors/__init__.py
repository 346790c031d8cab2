"""Collectors that turn a rendered subtree into style records.

- style_extractor: snapshot capture and baseline/inheritance diffing
- snapshot: host-side loaders for saved markup and style snapshots
"""

from .snapshot import SnapshotResolver, load_snapshot, parse_fragment
from .style_extractor import (
    Resolver,
    StyleExtractor,
    StyleSnapshot,
    VisitedElement,
    walk_elements,
)

__all__ = [
    "Resolver",
    "StyleExtractor",
    "StyleSnapshot",
    "VisitedElement",
    "walk_elements",
    "SnapshotResolver",
    "load_snapshot",
    "parse_fragment",
]
