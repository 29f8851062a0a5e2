# src/lighthtml/dom/elements/element.py
from typing import Any, Dict, Iterator, List, Optional

from pydantic import Field, PrivateAttr, field_validator

from ..core import AttributedNode, DisplayType, Node, TagClosingType, TextNode, is_blank
from ..events import EventHandler, EventRegistry
from .image import ImageNode


class ElementNode(AttributedNode):
    """
    Composite node: a tag with classes, attributes and ordered children.

    Self-closing elements never hold children; anything added to them is
    dropped. Every element owns its own EventRegistry.
    """
    tag_name: str = Field(frozen=True)
    display_type: DisplayType = Field(default=DisplayType.BLOCK, frozen=True)
    closing_type: TagClosingType = Field(default=TagClosingType.WITH_CLOSING_TAG, frozen=True)

    _children: List[Node] = PrivateAttr(default_factory=list)
    _events: EventRegistry = PrivateAttr(default_factory=EventRegistry)

    def __init__(
            self,
            tag_name: str,
            display_type: DisplayType = DisplayType.BLOCK,
            closing_type: TagClosingType = TagClosingType.WITH_CLOSING_TAG
    ):
        super().__init__(tag_name=tag_name, display_type=display_type, closing_type=closing_type)

    @field_validator("tag_name", mode="before")
    @classmethod
    def _normalize_tag_name(cls, value: Any) -> str:
        if is_blank(value):
            raise ValueError("tag_name must be a non-empty string")
        return value.lower()

    @property
    def is_self_closing(self) -> bool:
        return self.closing_type == TagClosingType.SELF_CLOSING

    @property
    def children(self) -> List[Node]:
        """Copy of the child list. Use add_child/add_text to build the tree."""
        return list(self._children)

    @property
    def children_count(self) -> int:
        return len(self._children)

    # --- Building ---

    def add_child(self, child: Optional[Node]) -> "ElementNode":
        if child is not None and not self.is_self_closing:
            self._children.append(child)
        return self

    def add_text(self, text: Optional[str]) -> "ElementNode":
        if text:
            self.add_child(TextNode(text))
        return self

    # --- Serialization ---

    def _opening_tag(self) -> str:
        return f"<{self.tag_name}{self.render_attributes()}"

    def inner_html(self) -> str:
        if self.is_self_closing:
            return ""
        return "".join(child.to_html() for child in self._children)

    def to_html(self) -> str:
        if self.is_self_closing:
            return f"{self._opening_tag()}/>"
        return f"{self._opening_tag()}>{self.inner_html()}</{self.tag_name}>"

    def to_formatted_html(self, indent: int = 0) -> str:
        """
        Renders the subtree with one element per line, indented two spaces
        per level. Text and image children get a line of their own.
        """
        pad = "  " * indent
        if self.is_self_closing:
            return f"{pad}{self._opening_tag()}/>\n"

        lines = [f"{pad}{self._opening_tag()}>\n"]
        child_pad = "  " * (indent + 1)
        for child in self._children:
            if isinstance(child, ElementNode):
                lines.append(child.to_formatted_html(indent + 1))
            else:
                lines.append(f"{child_pad}{child.to_html()}\n")
        lines.append(f"{pad}</{self.tag_name}>\n")
        return "".join(lines)

    # --- Traversal ---

    def iter_nodes(self) -> Iterator[Node]:
        """Depth-first, pre-order walk over this subtree, starting with self."""
        yield self
        if self.is_self_closing:
            return
        for child in self._children:
            if isinstance(child, ElementNode):
                yield from child.iter_nodes()
            else:
                yield child

    def find_images(self) -> List[ImageNode]:
        return [node for node in self.iter_nodes() if isinstance(node, ImageNode)]

    # --- Events ---

    def add_event_listener(self, event_type: Optional[str], handler: Optional[EventHandler]) -> "ElementNode":
        self._events.add_event_listener(event_type, handler)
        return self

    def remove_event_listener(self, event_type: Optional[str], handler: Optional[EventHandler]) -> "ElementNode":
        self._events.remove_event_listener(event_type, handler)
        return self

    def dispatch_event(self, event_type: Optional[str], data: Optional[Dict[str, Any]] = None) -> int:
        """Dispatches directly to this element's listeners. No propagation."""
        return self._events.dispatch_event(event_type, data, target=self)

    def has_event_listener(self, event_type: Optional[str]) -> bool:
        return self._events.has_event_listener(event_type)

    def get_event_listener_count(self, event_type: Optional[str]) -> int:
        return self._events.get_event_listener_count(event_type)

    def get_event_types(self) -> List[str]:
        return self._events.get_event_types()
