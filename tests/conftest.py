"""
Shared fixtures for the element-copier test suite.

Provides test fixtures for:
- Element trees and snapshot-backed resolvers
- Export configuration
- Logger isolation between tests
"""

import json
import logging
from pathlib import Path

import pytest

from element_copier.collectors.snapshot import SnapshotResolver
from element_copier.config import ExportConfig
from element_copier.copier_logging import LOGGER_NAME
from element_copier.models import ElementNode, TextNode


@pytest.fixture(autouse=True)
def isolate_package_logger():
    """Undo any handler setup a test (e.g. a CLI run) leaves behind."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config() -> ExportConfig:
    """Default export configuration."""
    return ExportConfig()


@pytest.fixture
def make_resolver():
    """Build a resolver from one style dict per element, in pre-order."""

    def _make(root: ElementNode, styles: list[dict[str, str]]) -> SnapshotResolver:
        return SnapshotResolver(root, styles)

    return _make


@pytest.fixture
def card_tree() -> ElementNode:
    """A small card: div > (h2, p > (text, a), span#__html-picker-overlay)."""
    link = ElementNode("a", {"href": "/more", "data-track": "1"}, [TextNode("More")])
    paragraph = ElementNode(
        "p",
        {"class": "body svelte-1x2y", "ng-model": "x"},
        [TextNode("Read the "), link],
    )
    title = ElementNode("h2", {"class": "title", "style": "color: red"}, [TextNode("Hello")])
    overlay = ElementNode("div", {"id": "__html-picker-overlay"}, [TextNode("x")])
    return ElementNode(
        "div",
        {"class": "card", "id": "main", "fdprocessedid": "abc"},
        [title, paragraph, overlay],
    )


@pytest.fixture
def card_styles() -> list[dict[str, str]]:
    """Resolved styles for card_tree in pre-order (root, h2, p, a)."""
    return [
        {
            "display": "flex",
            "flex-direction": "column",
            "padding": "16px",
            "background-color": "rgb(255, 255, 255)",
            "color": "rgb(31, 41, 55)",
            "font-size": "16px",
            "border-radius": "8px",
        },
        {
            "display": "block",
            "font-size": "24px",
            "font-weight": "700",
            "color": "rgb(31, 41, 55)",
        },
        {
            "display": "block",
            "margin-top": "16px",
            "margin-bottom": "16px",
            "color": "rgb(107, 114, 128)",
            "font-size": "16px",
        },
        {
            "display": "inline",
            "color": "rgb(37, 99, 235)",
            "text-decoration": "underline",
            "cursor": "pointer",
            "font-size": "16px",
        },
    ]


@pytest.fixture
def snapshot_files(tmp_path: Path):
    """Write a markup file and a matching style snapshot to disk."""
    page = tmp_path / "page.html"
    page.write_text(
        '<div class="btn" data-id="7" style="x"><span>Go</span></div>',
        encoding="utf-8",
    )
    styles = tmp_path / "styles.json"
    styles.write_text(
        json.dumps(
            [
                {
                    "display": "block",
                    "background-color": "rgb(37, 99, 235)",
                    "padding": "8px",
                },
                {"display": "inline", "color": "rgb(255, 255, 255)"},
            ]
        ),
        encoding="utf-8",
    )
    return page, styles
