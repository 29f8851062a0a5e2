# src/lighthtml/dom/core.py
from abc import abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr


def is_blank(value: Any) -> bool:
    """True for None, non-strings and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


class DisplayType(str, Enum):
    """How an element is meant to flow. Informational only, never rendered."""
    BLOCK = "block"
    INLINE = "inline"


class TagClosingType(str, Enum):
    SELF_CLOSING = "self_closing"
    WITH_CLOSING_TAG = "with_closing_tag"


class Node(BaseModel):
    """
    Base of the node tree.

    The set of variants is closed: TextNode, ElementNode and ImageNode.
    Every node can render itself and its inner content as HTML.
    """
    model_config = ConfigDict(extra="forbid")

    @abstractmethod
    def to_html(self) -> str:
        """Returns the HTML for this node, including its own tag."""

    @abstractmethod
    def inner_html(self) -> str:
        """Returns the HTML of this node's content only."""


class TextNode(Node):
    """A leaf node holding literal text. Rendered verbatim."""
    model_config = ConfigDict(frozen=True)

    text: str = ""

    def __init__(self, text: Optional[str] = ""):
        super().__init__(text=text if text is not None else "")

    def to_html(self) -> str:
        return self.text

    def inner_html(self) -> str:
        return self.text


class AttributedNode(Node):
    """
    Shared builder surface for nodes that carry CSS classes and attributes.
    """
    _css_classes: List[str] = PrivateAttr(default_factory=list)
    _attributes: Dict[str, str] = PrivateAttr(default_factory=dict)

    @property
    def css_classes(self) -> List[str]:
        """Copy of the class list, in first-seen order."""
        return list(self._css_classes)

    @property
    def attributes(self) -> Dict[str, str]:
        """Copy of the attributes, in insertion order."""
        return dict(self._attributes)

    def add_class(self, css_class: Optional[str]):
        """Appends a class unless it is blank or already present. Returns self."""
        if not is_blank(css_class) and css_class not in self._css_classes:
            self._css_classes.append(css_class)
        return self

    def add_attribute(self, name: Optional[str], value: Optional[str] = None):
        """Sets an attribute (last write wins). Blank names are ignored. Returns self."""
        if not is_blank(name):
            self._attributes[name] = value if value is not None else ""
        return self

    def render_attributes(self) -> str:
        """
        Renders ` name="value"` pairs in insertion order.

        When CSS classes are present, an explicit 'class' attribute is not
        rendered in place; its value is merged in front of the class list into
        one trailing class attribute instead.
        """
        parts = []
        for name, value in self._attributes.items():
            if name == "class" and self._css_classes:
                continue
            parts.append(f' {name}="{value}"')

        if self._css_classes:
            merged = " ".join(self._css_classes)
            explicit = self._attributes.get("class")
            if explicit:
                merged = f"{explicit} {merged}"
            parts.append(f' class="{merged}"')

        return "".join(parts)
