from lighthtml.dom import (
    DisplayType,
    ElementNode,
    EventRegistry,
    ImageNode,
    LightEvent,
    Node,
    TagClosingType,
    TextNode,
)
from lighthtml.loading.factory import is_network_source, select_loading_strategy
from lighthtml.loading.strategies import (
    FileSystemImageStrategy,
    ImageLoadingStrategy,
    NetworkImageStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "DisplayType",
    "ElementNode",
    "EventRegistry",
    "FileSystemImageStrategy",
    "ImageLoadingStrategy",
    "ImageNode",
    "LightEvent",
    "NetworkImageStrategy",
    "Node",
    "TagClosingType",
    "TextNode",
    "is_network_source",
    "select_loading_strategy",
]
