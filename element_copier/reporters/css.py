"""Stylesheet rendering for style records."""

from ..models import NodeStyleRecord


class CssSerializer:
    """Renders records as plain class rules."""

    def __init__(self, indent_width: int = 2):
        self.indent = " " * indent_width

    def serialize(self, record: NodeStyleRecord) -> str:
        """One rule for a record, or an empty string when it has no styles."""
        if record.is_empty:
            return ""
        lines = [f".{record.class_name} {{"]
        lines.extend(
            f"{self.indent}{prop}: {value};" for prop, value in record.styles.items()
        )
        lines.append("}")
        return "\n".join(lines)

    def stylesheet(self, records: list[NodeStyleRecord]) -> str:
        """All non-empty rules in record order, separated by a blank line."""
        rules = [self.serialize(record) for record in records]
        return "\n\n".join(rule for rule in rules if rule)
