"""
Structured dump of an attribute set.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .attribute_set import AttributeSet


class SchemaReport:
    """Outline of all attributes, their ids and nominal value ids."""

    def __init__(self):
        self.attributes: List[Dict[str, Any]] = []
        self.class_attribute: Optional[str] = None

    @classmethod
    def from_attribute_set(cls, attribute_set: "AttributeSet") -> "SchemaReport":
        report = cls()
        # position in the set is the id, whatever the attribute object claims
        report.attributes = [dict(attr.to_dict(), id=attr_id)
                             for attr_id, attr in enumerate(attribute_set)]
        if attribute_set.has_class():
            report.class_attribute = attribute_set.class_attr_name
        return report

    @property
    def num_attributes(self) -> int:
        return len(self.attributes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attributes": [dict(entry) for entry in self.attributes],
            "class_attribute": self.class_attribute,
        }

    def __str__(self):
        lines = ["ATTRIBUTES:"]
        for entry in self.attributes:
            lines.append(f"{entry['name']}, {entry['id']}")
            if "values" in entry:
                lines.append("Nominal Values:")
                lines.extend(f"{value}, {value_id}"
                             for value, value_id in entry["values"].items())
            else:
                lines.append("Continuous")
            lines.append("")
        lines.append(f"Class attribute: {self.class_attribute or 'NONE'}")
        return "\n".join(lines)
