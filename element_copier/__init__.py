"""Element Copier - export a rendered element subtree as clean markup,
an equivalent stylesheet and an equivalent Tailwind rendition."""

__version__ = "0.1.0"

from .config import ExportConfig, load_export_config
from .models import ElementNode, ExportResult, NodeStyleRecord, TextNode
from .orchestrator import ElementExporter, export_element

__all__ = [
    "__version__",
    "ElementExporter",
    "ElementNode",
    "ExportConfig",
    "ExportResult",
    "NodeStyleRecord",
    "TextNode",
    "export_element",
    "load_export_config",
]
