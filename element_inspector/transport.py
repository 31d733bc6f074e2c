"""
Asynchronous boundary between the assembler and the component-tree walk.

The walk runs against the page through a blocking WebDriver call, so it is
moved onto a worker thread. Requests always resolve, never raise.
"""

import asyncio
import itertools
import logging
from concurrent.futures import Executor
from typing import Optional

from element_inspector.runtime.adapter import RuntimeAdapter
from element_inspector.runtime.naming import ComponentClassifier
from element_inspector.runtime.walker import walk_component_tree
from element_inspector.types import ComponentInfo

logger = logging.getLogger(__name__)


class RequestTracker:
    """Issues per-request tokens; only the latest one is current."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._active: Optional[int] = None

    def begin(self) -> int:
        token = next(self._counter)
        self._active = token
        return token

    def is_current(self, token: int) -> bool:
        return token == self._active

    def reset(self) -> None:
        self._active = None


class ComponentInfoRequester:
    """
    Requests component info for a selector from the page world.

    A caller-side timeout abandons the result but cannot stop the blocking
    WebDriver call. With a single-worker executor, later walks queue behind
    it until that call returns or the driver's own script timeout fires.
    """

    def __init__(
        self,
        adapter: RuntimeAdapter,
        classifier: Optional[ComponentClassifier] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self.adapter = adapter
        self.classifier = classifier or ComponentClassifier()
        self.executor = executor
        self.tracker = RequestTracker()

    async def request_component_info(self, selector: str) -> ComponentInfo:
        """
        Walk the component tree behind the element matching `selector`.

        Returns:
            The walk's result, or an empty ComponentInfo if the request failed
        """
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(
                self.executor,
                walk_component_tree,
                self.adapter,
                selector,
                self.classifier,
            )
        except Exception as e:
            logger.warning(f"Component info request for {selector!r} failed: {str(e)}")
            return ComponentInfo()

    async def request_latest(self, selector: str) -> Optional[ComponentInfo]:
        """
        Like request_component_info, for callers that follow a moving target.

        Returns:
            The result, or None if a newer request started meanwhile
        """
        token = self.tracker.begin()
        info = await self.request_component_info(selector)
        if not self.tracker.is_current(token):
            logger.debug(f"Discarding stale component info for {selector!r}")
            return None
        return info
