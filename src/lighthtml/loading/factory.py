# src/lighthtml/loading/factory.py
from typing import Any

from .strategies import FileSystemImageStrategy, ImageLoadingStrategy, NetworkImageStrategy

NETWORK_PREFIXES = ("http://", "https://")


def is_network_source(source: Any) -> bool:
    """True if `source` starts with http:// or https://, ignoring case."""
    return isinstance(source, str) and source.lower().startswith(NETWORK_PREFIXES)


def select_loading_strategy(source: str) -> ImageLoadingStrategy:
    """
    Maps an image source to its loading strategy. Anything that is not an
    http(s) URL is treated as a filesystem path, without further validation.
    """
    if is_network_source(source):
        return NetworkImageStrategy()
    return FileSystemImageStrategy()
