# src/lighthtml/services/image_load_service.py
import asyncio
import logging
from typing import Dict, Iterable, Optional

from tqdm import tqdm

from lighthtml.core.managers.config_manager import config_manager
from lighthtml.dom.elements.element import ElementNode
from lighthtml.dom.elements.image import ImageNode

logger = logging.getLogger(__name__)


class ImageLoadService:
    """
    Loads many ImageNodes concurrently.
    The number of in-flight loads is bounded by a semaphore.
    """

    def __init__(self, concurrency: Optional[int] = None, show_progress: bool = False):
        if concurrency is None:
            concurrency = config_manager.get_nested("network.concurrency", 8)
        self.concurrency = max(1, int(concurrency))
        self.show_progress = show_progress

    async def load_all(self, images: Iterable[ImageNode]) -> Dict[str, bool]:
        """
        Loads every image and returns a mapping of source -> loaded.
        When a source occurs more than once, the last one in input order wins.
        An image whose load raises is logged and reported as not loaded; the
        other loads still complete.
        """
        images = list(images)
        if not images:
            return {}

        semaphore = asyncio.Semaphore(self.concurrency)

        with tqdm(total=len(images), desc="Loading images", unit="img", disable=not self.show_progress) as progress:
            async def _load(image: ImageNode) -> bool:
                async with semaphore:
                    try:
                        return await image.load_async()
                    finally:
                        progress.update(1)

            outcomes = await asyncio.gather(*(_load(image) for image in images), return_exceptions=True)

        results: Dict[str, bool] = {}
        for image, outcome in zip(images, outcomes):
            if isinstance(outcome, BaseException):
                logger.error("Loading image %s failed: %s", image.source, outcome, exc_info=outcome)
                outcome = False
            results[image.source] = outcome

        logger.info("Loaded %d of %d images.", sum(1 for loaded in results.values() if loaded), len(results))
        return results

    async def load_tree(self, root: ElementNode) -> Dict[str, bool]:
        """Loads every ImageNode found under `root`."""
        return await self.load_all(root.find_images())
