"""Export orchestration.

Runs the full pipeline for one picked subtree: extract the meaningful
declarations, compile them to utility tokens, then render the cleaned
markup, the stylesheet and the utility-class markup.
"""

from .collectors.style_extractor import Resolver, StyleExtractor
from .config import ExportConfig
from .copier_logging import get_logger
from .models import ElementNode, ExportResult
from .reporters.css import CssSerializer
from .reporters.markup import MarkupCleaner
from .reporters.pretty import PrettyPrinter
from .rules.engine import UtilityCompiler, create_utility_compiler

logger = get_logger()


class ElementExporter:
    """Produces the three synchronized artifacts for a subtree.

    Holds no state between calls; each export reads a fresh snapshot.
    """

    def __init__(
        self,
        config: ExportConfig | None = None,
        compiler: UtilityCompiler | None = None,
    ):
        """Initialize the exporter.

        Args:
            config: Export configuration, defaults when omitted.
            compiler: Utility compiler, the built-in rule set when omitted.
        """
        self.config = config or ExportConfig()
        self.extractor = StyleExtractor(self.config)
        self.compiler = compiler or create_utility_compiler()
        self.serializer = CssSerializer(self.config.indent_width)
        self.cleaner = MarkupCleaner(self.config)
        self.printer = PrettyPrinter(
            indent_width=self.config.indent_width,
            inline_text_limit=self.config.inline_text_limit,
        )

    def export(self, root: ElementNode, resolver: Resolver) -> ExportResult:
        """Export a subtree.

        Args:
            root: Picked element.
            resolver: Host resolver returning resolved style values.

        Returns:
            ExportResult with markup, stylesheet and utility markup.
        """
        records = self.extractor.extract(root, resolver)

        utility_tokens = {
            record.index: self.compiler.compile(record).tokens for record in records
        }

        class_names = {record.index: record.class_name for record in records}
        cleaned = self.cleaner.clean(root, class_names)
        utility_root = self.cleaner.apply_utility_classes(cleaned, utility_tokens)

        result = ExportResult(
            markup=self.printer.format(cleaned.to_html()),
            stylesheet=self.serializer.stylesheet(records),
            utility_markup=self.printer.format(utility_root.to_html()),
            root_utility_tokens=list(utility_tokens[0]),
            records=records,
            utility_tokens=utility_tokens,
        )

        logger.debug(
            f"Exported <{root.tag}> with {len(records)} elements",
            extra={"node_count": len(records)},
        )
        return result


def export_element(
    root: ElementNode, resolver: Resolver, config: ExportConfig | None = None
) -> ExportResult:
    """Export a subtree with a one-off exporter."""
    return ElementExporter(config).export(root, resolver)
