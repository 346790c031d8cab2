"""Indented markup rendering."""

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from ..copier_logging import LogCategory, get_category_logger
from ..errors import MalformedFragmentError
from ..models import escape_text, format_attributes
from ..tokens import INLINE_TAGS, VOID_TAGS

logger = get_category_logger(LogCategory.RENDER)


class PrettyPrinter:
    """Re-indents flat markup one element per line.

    Text-only elements stay on one line when the text is short or the
    element is inline-level. Comments are dropped.
    """

    def __init__(self, indent_width: int = 2, inline_text_limit: int = 80):
        """Initialize the printer.

        Args:
            indent_width: Spaces per nesting level.
            inline_text_limit: Text shorter than this stays on the tag's line.
        """
        self.indent = " " * indent_width
        self.inline_text_limit = inline_text_limit

    def format(self, markup: str) -> str:
        """Pretty-print markup, returning it unchanged if it cannot be parsed."""
        try:
            root = self._parse(markup)
        except (MalformedFragmentError, ParserRejectedMarkup) as e:
            logger.warning(f"Returning markup unformatted: {e}")
            return markup
        return self._render(root, 0)

    def _parse(self, markup: str) -> Tag:
        soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
        root = soup.find(True)
        if root is None:
            raise MalformedFragmentError("Fragment contains no element")
        return root

    def _render(self, element: Tag, depth: int) -> str:
        pad = self.indent * depth
        tag = element.name.lower()
        attrs = format_attributes(
            {
                name: "" if value is None else str(value)
                for name, value in element.attrs.items()
            }
        )
        empty = f"{pad}<{tag}{attrs}></{tag}>"

        if tag in VOID_TAGS:
            return f"{pad}<{tag}{attrs}>"

        children = [
            child
            for child in element.children
            if isinstance(child, Tag)
            or (
                isinstance(child, NavigableString)
                and not isinstance(child, PreformattedString)
            )
        ]
        if not children:
            return empty

        if all(isinstance(child, NavigableString) for child in children):
            text = "".join(str(child) for child in children).strip()
            if not text:
                return empty
            if len(text) < self.inline_text_limit or tag in INLINE_TAGS:
                return f"{pad}<{tag}{attrs}>{escape_text(text)}</{tag}>"

        lines = []
        for child in children:
            if isinstance(child, Tag):
                lines.append(self._render(child, depth + 1))
                continue
            text = str(child).strip()
            if text:
                lines.append(f"{pad}{self.indent}{escape_text(text)}")

        if not lines:
            return empty
        body = "\n".join(lines)
        return f"{pad}<{tag}{attrs}>\n{body}\n{pad}</{tag}>"
