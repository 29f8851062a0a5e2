# src/lighthtml/loading/strategies.py
import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import aiohttp

from lighthtml.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "LightHTML/0.1 (+image-probe)"


class ImageLoadingStrategy(ABC):
    """
    Resolves whether an image source can be loaded and describes it.
    Implementations keep no per-call state and may be shared between nodes.
    """

    @abstractmethod
    async def load_image(self, source: str) -> bool:
        """Returns True if the resource is available. Never raises for I/O failures."""

    @abstractmethod
    def get_image_info(self, source: str) -> str:
        """Returns a human-readable description of the resource."""


class FileSystemImageStrategy(ImageLoadingStrategy):
    """Images on the local filesystem. 'Loaded' means the file exists."""

    @staticmethod
    def _is_existing_file(source: str) -> bool:
        try:
            return Path(source).is_file()
        except (OSError, ValueError) as e:
            logger.debug("Cannot inspect local path %r: %s", source, e)
            return False

    async def load_image(self, source: str) -> bool:
        # Stat calls can block on slow or network mounts.
        return await asyncio.to_thread(self._is_existing_file, source)

    def get_image_info(self, source: str) -> str:
        if self._is_existing_file(source):
            path = Path(source)
            try:
                return f"Local file: {path.name}, size: {path.stat().st_size} bytes"
            except OSError as e:
                logger.debug("File %s vanished while reading its size: %s", source, e)
        return f"File not found: {source}"


class NetworkImageStrategy(ImageLoadingStrategy):
    """
    Images behind an http(s) URL.

    Loading sends a HEAD request and reports success for any 2xx status.
    Any non-2xx answer to HEAD is retried with a GET whose body is never
    read.
    """

    def __init__(
            self,
            timeout: Optional[float] = None,
            user_agent: Optional[str] = None,
            fallback_to_get: Optional[bool] = None
    ):
        if timeout is None:
            timeout = config_manager.get_nested("network.time_out", DEFAULT_TIMEOUT)
        if user_agent is None:
            user_agent = config_manager.get_nested("network.user_agent", DEFAULT_USER_AGENT)
        if fallback_to_get is None:
            fallback_to_get = config_manager.get_nested("network.head_fallback_to_get", True)

        self.timeout = float(timeout)
        self.user_agent = user_agent
        self.fallback_to_get = bool(fallback_to_get)

    async def load_image(self, source: str) -> bool:
        try:
            async with aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                    headers={"User-Agent": self.user_agent}
            ) as session:
                status = await self._probe(session, "HEAD", source)
                if not self._is_success(status) and self.fallback_to_get:
                    logger.debug("HEAD failed for %s (%s). Retrying with GET.", source, status)
                    status = await self._probe(session, "GET", source)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("Network image %s is unreachable: %s", source, e)
            return False
        except Exception as e:
            logger.warning("Unexpected error while probing %s: %s", source, e, exc_info=True)
            return False

        logger.debug("Network image %s answered with status %s.", source, status)
        return self._is_success(status)

    @staticmethod
    def _is_success(status: int) -> bool:
        return 200 <= status < 300

    @staticmethod
    async def _probe(session: aiohttp.ClientSession, method: str, url: str) -> int:
        # Leaving the context releases the connection without reading the body.
        async with session.request(method, url, allow_redirects=True) as response:
            return response.status

    def get_image_info(self, source: str) -> str:
        return f"Network image: {source}"
