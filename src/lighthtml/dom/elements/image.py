# src/lighthtml/dom/elements/image.py
import logging
from typing import Any, Optional

from pydantic import Field, PrivateAttr, field_validator

from lighthtml.loading.factory import select_loading_strategy
from lighthtml.loading.strategies import ImageLoadingStrategy

from ..core import AttributedNode, is_blank

logger = logging.getLogger(__name__)


class ImageNode(AttributedNode):
    """
    An <img> node backed by a loading strategy.

    The strategy is picked once from the source string (network for http(s)
    URLs, filesystem otherwise) and stays bound for the node's lifetime.
    """
    source: str = Field(frozen=True)
    alt_text: str = Field(default="", frozen=True)

    _loading_strategy: ImageLoadingStrategy = PrivateAttr()
    _is_loaded: bool = PrivateAttr(default=False)

    def __init__(self, source: str, alt_text: Optional[str] = ""):
        super().__init__(source=source, alt_text=alt_text if alt_text is not None else "")
        self._loading_strategy = select_loading_strategy(self.source)

    @field_validator("source", mode="before")
    @classmethod
    def _require_source(cls, value: Any) -> str:
        if is_blank(value):
            raise ValueError("source must be a non-empty string")
        return value

    @property
    def loading_strategy(self) -> ImageLoadingStrategy:
        return self._loading_strategy

    @property
    def is_loaded(self) -> bool:
        return self._is_loaded

    async def load_async(self) -> bool:
        """
        Checks the source through the bound strategy and records the result.
        Every call re-checks; failures come back as False.
        """
        self._is_loaded = await self._loading_strategy.load_image(self.source)
        logger.debug("Image %s loaded: %s", self.source, self._is_loaded)
        return self._is_loaded

    def get_image_info(self) -> str:
        return self._loading_strategy.get_image_info(self.source)

    def to_html(self) -> str:
        return f'<img src="{self.source}" alt="{self.alt_text}"{self.render_attributes()}/>'

    def inner_html(self) -> str:
        return ""
