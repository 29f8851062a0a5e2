from typing import Union

from .core import DisplayType, Node, TagClosingType, TextNode
from .events import EventRegistry, LightEvent
from .elements.element import ElementNode
from .elements.image import ImageNode

AnyNode = Union[TextNode, ElementNode, ImageNode]

__all__ = [
    "AnyNode",
    "DisplayType",
    "ElementNode",
    "EventRegistry",
    "ImageNode",
    "LightEvent",
    "Node",
    "TagClosingType",
    "TextNode",
]
