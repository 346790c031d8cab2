"""Tests for the stylesheet, markup cleaning and pretty-printing renderers."""

from types import MappingProxyType

import pytest

from element_copier.config import ExportConfig
from element_copier.models import ElementNode, NodeStyleRecord, TextNode
from element_copier.reporters import (
    CssSerializer,
    MarkupCleaner,
    PrettyPrinter,
    is_dirty_attribute,
)

pytestmark = pytest.mark.unit


def record(index, class_name, **values):
    styles = {k.replace("_", "-"): v for k, v in values.items()}
    return NodeStyleRecord(
        index=index, tag="div", class_name=class_name, styles=MappingProxyType(styles)
    )


class TestCssSerializer:
    """Tests for rule rendering."""

    def test_single_rule(self):
        rule = CssSerializer().serialize(
            record(0, "copied-el", background_color="#2563eb", padding="8px")
        )
        assert rule == ".copied-el {\n  background-color: #2563eb;\n  padding: 8px;\n}"

    def test_empty_record_renders_nothing(self):
        assert CssSerializer().serialize(record(1, "copied-el-c1")) == ""

    def test_stylesheet_skips_empty_rules(self):
        stylesheet = CssSerializer().stylesheet(
            [
                record(0, "copied-el", display="flex"),
                record(1, "copied-el-c1"),
                record(2, "copied-el-c2", color="#ffffff"),
            ]
        )
        assert stylesheet == (
            ".copied-el {\n  display: flex;\n}\n\n"
            ".copied-el-c2 {\n  color: #ffffff;\n}"
        )

    def test_empty_stylesheet(self):
        assert CssSerializer().stylesheet([record(0, "copied-el")]) == ""

    def test_indent_width(self):
        rule = CssSerializer(indent_width=4).serialize(record(0, "x", color="#000000"))
        assert rule == ".x {\n    color: #000000;\n}"


class TestDirtyAttributes:
    @pytest.mark.parametrize(
        "name",
        ["data-id", "svelte-abc", "_svelte_x", "ng-model", "v-if", "x-data",
         "fdprocessedid", "jsaction", "jsmodel", "jscontroller", "jsrenderer", "jsshadow"],
    )
    def test_denylisted(self, name):
        assert is_dirty_attribute(name)

    @pytest.mark.parametrize("name", ["id", "href", "aria-label", "jsactions", "role"])
    def test_kept(self, name):
        assert not is_dirty_attribute(name)


class TestMarkupCleaner:
    """Tests for structural cleaning."""

    @pytest.fixture
    def cleaner(self):
        return MarkupCleaner()

    def test_strips_noise_and_applies_classes(self, cleaner):
        child = ElementNode("span", {"data-x": "1", "style": "color: red"}, [TextNode("a")])
        root = ElementNode(
            "div", {"class": "old", "id": "k", "ng-click": "go()"}, [child]
        )

        cleaned = cleaner.clean(root, {0: "copied-el", 1: "copied-el-c1"})

        assert cleaned.to_html() == (
            '<div class="copied-el" id="k"><span class="copied-el-c1">a</span></div>'
        )

    def test_class_removed_without_name(self, cleaner):
        root = ElementNode("div", {"class": "old", "title": "t"})
        assert cleaner.clean(root, {}).to_html() == '<div title="t"></div>'

    def test_original_untouched(self, cleaner):
        root = ElementNode("div", {"class": "old", "data-x": "1"}, [ElementNode("b")])
        before = root.to_html()

        cleaner.clean(root, {0: "copied-el", 1: "copied-el-c1"})

        assert root.to_html() == before

    def test_overlay_removed_and_indices_aligned(self, cleaner):
        overlay = ElementNode("div", {"id": "__html-picker-hover"}, [ElementNode("i")])
        root = ElementNode(
            "ul", children=[ElementNode("li"), overlay, ElementNode("li")]
        )

        cleaned = cleaner.clean(root, {0: "r", 1: "c1", 2: "c2"})

        assert cleaned.to_html() == (
            '<ul class="r"><li class="c1"></li><li class="c2"></li></ul>'
        )

    def test_custom_overlay_prefix(self):
        cleaner = MarkupCleaner(ExportConfig(ignored_id_prefix="tool-"))
        root = ElementNode("div", children=[ElementNode("p", {"id": "tool-1"})])
        assert cleaner.clean(root, {}).to_html() == "<div></div>"

    def test_text_preserved(self, cleaner):
        root = ElementNode("p", children=[TextNode("a < b"), ElementNode("br")])
        assert cleaner.clean(root, {}).to_html() == "<p>a &lt; b<br></p>"

    def test_apply_utility_classes(self, cleaner):
        root = ElementNode("div", children=[ElementNode("span"), ElementNode("b")])
        cleaned = cleaner.clean(root, {0: "copied-el", 1: "copied-el-c1", 2: "copied-el-c2"})

        utility = cleaner.apply_utility_classes(
            cleaned,
            {0: ["flex", "p-2"], 1: [], 2: ["font-bold"]},
        )

        assert utility.to_html() == (
            '<div class="flex p-2"><span></span><b class="font-bold"></b></div>'
        )
        # The cleaned tree keeps its generated classes
        assert 'class="copied-el"' in cleaned.to_html()

    def test_utility_classes_follow_position_not_name(self, cleaner):
        root = ElementNode("div", children=[ElementNode("span")])
        # Both elements carry the same generated name
        cleaned = cleaner.clean(root, {0: "x1", 1: "x1"})

        utility = cleaner.apply_utility_classes(cleaned, {0: ["flex"], 1: ["italic"]})

        assert utility.to_html() == '<div class="flex"><span class="italic"></span></div>'


class TestPrettyPrinter:
    """Tests for indentation rules."""

    @pytest.fixture
    def printer(self):
        return PrettyPrinter()

    def test_nested_elements(self, printer):
        assert printer.format("<div><p>Hi</p><span>there</span></div>") == (
            "<div>\n  <p>Hi</p>\n  <span>there</span>\n</div>"
        )

    def test_void_tags(self, printer):
        assert printer.format('<div><img src="a.png"><br></div>') == (
            '<div>\n  <img src="a.png">\n  <br>\n</div>'
        )

    def test_empty_element(self, printer):
        assert printer.format("<section></section>") == "<section></section>"

    def test_whitespace_only_text_is_empty(self, printer):
        assert printer.format("<p>   </p>") == "<p></p>"

    def test_long_text_breaks_for_block_tags(self, printer):
        text = "x" * 80
        assert printer.format(f"<p>{text}</p>") == f"<p>\n  {text}\n</p>"

    def test_long_text_stays_inline_for_inline_tags(self, printer):
        text = "x" * 100
        assert printer.format(f"<span>{text}</span>") == f"<span>{text}</span>"

    def test_mixed_content(self, printer):
        assert printer.format("<p>Read <a href='/x'>more</a> now</p>") == (
            '<p>\n  Read\n  <a href="/x">more</a>\n  now\n</p>'
        )

    def test_comments_dropped(self, printer):
        assert printer.format("<div><!-- note --><b>x</b></div>") == (
            "<div>\n  <b>x</b>\n</div>"
        )

    def test_bare_attribute(self, printer):
        assert printer.format("<button disabled>Go</button>") == (
            "<button disabled>Go</button>"
        )

    def test_escaping(self, printer):
        assert printer.format('<p title="a &quot;b&quot; &amp; c">1 &lt; 2</p>') == (
            '<p title="a &quot;b&quot; &amp; c">1 &lt; 2</p>'
        )

    def test_configurable_indent(self):
        printer = PrettyPrinter(indent_width=4)
        assert printer.format("<ul><li>a</li></ul>") == "<ul>\n    <li>a</li>\n</ul>"

    def test_configurable_inline_limit(self):
        printer = PrettyPrinter(inline_text_limit=3)
        assert printer.format("<p>abcd</p>") == "<p>\n  abcd\n</p>"

    def test_no_element_returns_input(self, printer):
        assert printer.format("just text") == "just text"

    def test_empty_input_returns_input(self, printer):
        assert printer.format("") == ""
