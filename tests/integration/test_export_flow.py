"""End-to-end tests for the export pipeline."""

import pytest

from element_copier import (
    ElementExporter,
    ElementNode,
    ExportConfig,
    TextNode,
    export_element,
)
from element_copier.rules import create_utility_compiler

pytestmark = pytest.mark.integration


def dict_resolver(values_by_element):
    """Resolver over {id(element): {property: value}}."""

    def resolve(element, prop):
        return values_by_element.get(id(element), {}).get(prop, "")

    return resolve


CARD_MARKUP = (
    '<div class="copied-el" id="main">\n'
    '  <h2 class="copied-el-c1">Hello</h2>\n'
    '  <p class="copied-el-c2">\n'
    "    Read the\n"
    '    <a href="/more" class="copied-el-c3">More</a>\n'
    "  </p>\n"
    "</div>"
)

CARD_STYLESHEET = (
    ".copied-el {\n"
    "  display: flex;\n"
    "  background-color: #ffffff;\n"
    "  padding: 16px;\n"
    "  flex-direction: column;\n"
    "  font-size: 16px;\n"
    "  color: #1f2937;\n"
    "  border-radius: 8px;\n"
    "}\n\n"
    ".copied-el-c2 {\n"
    "  color: #6b7280;\n"
    "}\n\n"
    ".copied-el-c3 {\n"
    "  display: inline;\n"
    "  color: #2563eb;\n"
    "}"
)

CARD_UTILITY_MARKUP = (
    '<div class="flex flex-col bg-white text-gray-800 p-4 rounded-lg text-base" id="main">\n'
    "  <h2>Hello</h2>\n"
    '  <p class="text-gray-500">\n'
    "    Read the\n"
    '    <a href="/more" class="inline text-blue-600">More</a>\n'
    "  </p>\n"
    "</div>"
)


class TestSingleElementExport:
    """A lone element with a background and padding."""

    @pytest.fixture
    def button(self):
        return ElementNode("div")

    @pytest.fixture
    def resolver(self, button):
        return dict_resolver(
            {
                id(button): {
                    "display": "block",
                    "background-color": "rgb(37, 99, 235)",
                    "padding": "8px",
                }
            }
        )

    def test_artifacts(self, button, resolver):
        result = export_element(button, resolver)

        assert result.markup == '<div class="copied-el"></div>'
        assert result.stylesheet == (
            ".copied-el {\n  background-color: #2563eb;\n  padding: 8px;\n}"
        )
        assert result.utility_markup == '<div class="bg-blue-600 p-2"></div>'
        assert result.root_utility_tokens == ["bg-blue-600", "p-2"]

    def test_to_dict(self, button, resolver):
        data = export_element(button, resolver).to_dict()
        assert list(data) == ["markup", "stylesheet", "utilityMarkup", "rootUtilityTokens"]
        assert data["rootUtilityTokens"] == ["bg-blue-600", "p-2"]

    def test_format_raw(self, button, resolver):
        raw = export_element(button, resolver).format_raw()
        assert raw.splitlines() == [
            "/* ── HTML ── */",
            '<div class="copied-el"></div>',
            "",
            "/* ── CSS ── */",
            ".copied-el {",
            "  background-color: #2563eb;",
            "  padding: 8px;",
            "}",
            "",
            "/* ── Tailwind ── */",
            "<!-- Tailwind classes: bg-blue-600 p-2 -->",
            '<div class="bg-blue-600 p-2"></div>',
        ]


class TestCardExport:
    """A nested card with noisy attributes and an overlay."""

    @pytest.fixture
    def result(self, card_tree, card_styles, make_resolver):
        return ElementExporter().export(card_tree, make_resolver(card_tree, card_styles))

    def test_markup(self, result):
        assert result.markup == CARD_MARKUP

    def test_stylesheet(self, result):
        assert result.stylesheet == CARD_STYLESHEET

    def test_utility_markup(self, result):
        assert result.utility_markup == CARD_UTILITY_MARKUP

    def test_root_tokens(self, result):
        assert result.root_utility_tokens == [
            "flex",
            "flex-col",
            "bg-white",
            "text-gray-800",
            "p-4",
            "rounded-lg",
            "text-base",
        ]

    def test_every_element_has_a_class(self, result):
        assert [record.class_name for record in result.records] == [
            "copied-el",
            "copied-el-c1",
            "copied-el-c2",
            "copied-el-c3",
        ]
        assert result.records[1].is_empty
        assert result.utility_tokens[1] == []

    def test_no_noise_survives(self, result):
        for artifact in (result.markup, result.utility_markup):
            assert "__html-picker" not in artifact
            assert "svelte" not in artifact
            assert "ng-model" not in artifact
            assert "data-track" not in artifact
            assert "fdprocessedid" not in artifact
            assert "style=" not in artifact

    def test_original_not_mutated(self, card_tree, card_styles, make_resolver):
        before = card_tree.to_html()
        ElementExporter().export(card_tree, make_resolver(card_tree, card_styles))
        assert card_tree.to_html() == before

    def test_idempotent(self, card_tree, card_styles, make_resolver):
        exporter = ElementExporter()
        resolver = make_resolver(card_tree, card_styles)

        first = exporter.export(card_tree, resolver)
        second = exporter.export(card_tree, resolver)

        assert first.to_dict() == second.to_dict()


class TestExportConfiguration:
    """Exports under non-default settings."""

    def test_custom_class_names_and_indent(self):
        child = ElementNode("span", children=[TextNode("x")])
        root = ElementNode("section", children=[child])
        resolver = dict_resolver({id(child): {"font-weight": "700"}})
        config = ExportConfig(
            root_class_name="snippet", child_class_prefix="snippet-", indent_width=4
        )

        result = export_element(root, resolver, config)

        assert result.markup == (
            '<section class="snippet">\n'
            '    <span class="snippet-1">x</span>\n'
            "</section>"
        )
        assert result.stylesheet == ".snippet-1 {\n    font-weight: 700;\n}"
        assert result.utility_markup == (
            "<section>\n" '    <span class="font-bold">x</span>\n' "</section>"
        )
        assert result.root_utility_tokens == []

    def test_custom_compiler(self):
        compiler = create_utility_compiler(register_defaults=False)
        root = ElementNode("div")
        resolver = dict_resolver({id(root): {"padding": "8px"}})

        result = ElementExporter(compiler=compiler).export(root, resolver)

        # Only the catch-all remains without registered rules
        assert result.root_utility_tokens == ["[padding:8px]"]
        assert result.stylesheet == ".copied-el {\n  padding: 8px;\n}"
