import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from selenium.common.exceptions import NoSuchElementException, WebDriverException
from selenium.webdriver.chrome.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait

from element_inspector.assembler import DescriptorAssembler
from element_inspector.config import InspectorConfig
from element_inspector.dom.js_scripts import (ELEMENT_AT_POINT_SCRIPT,
                                              HIGHLIGHT_SCRIPT)
from element_inspector.dom.selector import unique_selector
from element_inspector.dom.snapshot import DOMSnapshotter
from element_inspector.driver import new_webdriver
from element_inspector.runtime.naming import ComponentClassifier
from element_inspector.runtime.react import ReactFiberAdapter
from element_inspector.transport import ComponentInfoRequester
from element_inspector.types import ComponentInfo, ElementDescriptor
from element_inspector.utils.decorators import error_handler

logger = logging.getLogger(__name__)

__all__ = ["ComponentInfo", "ElementDescriptor", "ElementInspector", "InspectorConfig"]


class ElementInspector:
    def __init__(
        self,
        config: Optional[InspectorConfig] = None,
        driver: Optional[WebDriver] = None,
    ) -> None:
        """
        Initialize the ElementInspector instance.

        Args:
            config: Inspection settings, read from the environment when omitted
            driver: Existing WebDriver to inspect through; a Chrome driver is
                started (and owned) when omitted
        """
        self.config: InspectorConfig = config or InspectorConfig.from_env()
        self._owns_driver: bool = driver is None
        self.driver: WebDriver = driver or new_webdriver(
            self.config.headless, self.config.page_load_timeout
        )
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="component-info")

        self.snapshotter = DOMSnapshotter(self.driver)
        self.requester = ComponentInfoRequester(
            ReactFiberAdapter(self.driver),
            ComponentClassifier(self.config.user_components, self.config.host_components),
            self._executor,
        )
        self.assembler = DescriptorAssembler(
            self.snapshotter, self.requester, self.config.component_timeout
        )

    def __enter__(self):
        """Support for context manager protocol."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Ensure browser is closed when exiting context."""
        self.close()

    def close(self) -> None:
        """Stop the worker thread and quit the browser if this instance started it."""
        self._executor.shutdown(wait=False)
        if self.driver and self._owns_driver:
            self.driver.quit()
        self.driver = None

    async def describe(self, element: WebElement) -> Optional[ElementDescriptor]:
        """
        Describe an element: locator, DOM context and owning component.

        Args:
            element: Element picked by the user

        Returns:
            ElementDescriptor, or None if the element could not be read
        """
        descriptor = await self.assembler.assemble(element)
        if descriptor and self.config.highlight_on_describe:
            self.highlight(element)
        return descriptor

    async def describe_selector(self, selector: str) -> Optional[ElementDescriptor]:
        """Describe the element currently matching a CSS selector."""
        element = self.resolve_selector(selector)
        if element is None:
            return None
        return await self.describe(element)

    async def preview(self, element: WebElement) -> Optional[ComponentInfo]:
        """
        Component info for a hovered element.

        Returns:
            ComponentInfo, or None when the pointer moved on before it arrived
        """
        snapshot = self.snapshotter.capture(element)
        if snapshot is None:
            self.requester.tracker.reset()
            return None
        return await self.requester.request_latest(unique_selector(snapshot))

    @error_handler()
    def element_at_point(self, x: int, y: int) -> Optional[WebElement]:
        """Topmost element at viewport coordinates."""
        return self.driver.execute_script(ELEMENT_AT_POINT_SCRIPT, x, y)

    @error_handler(default=False)
    def highlight(self, target: Union[WebElement, str]) -> bool:
        """
        Outline an element, or the element matching a selector, for a moment.

        The page restores the element's original outline on its own after
        the configured duration; highlighting again before then restarts
        the timer.

        Returns:
            bool: True if an element was outlined
        """
        return bool(self.driver.execute_script(
            HIGHLIGHT_SCRIPT, target, self.config.highlight_duration_ms
        ))

    def highlight_selector(self, selector: str) -> bool:
        return self.highlight(selector)

    def navigate_to(self, url: str) -> bool:
        """
        Navigate to the specified URL and wait for it to load.

        Args:
            url: The URL to navigate to

        Returns:
            bool: True if navigation was successful, False otherwise
        """
        try:
            self.driver.get(url)
            self._wait_for_page_load()
            return True
        except WebDriverException as e:
            logger.error(f"Navigation failed: {e.msg or e}")
            return False

    def resolve_selector(self, selector: str) -> Optional[WebElement]:
        """
        Find the element a selector points at.

        Returns:
            The element, or None if the selector went stale or is invalid
        """
        try:
            return self.driver.find_element("css selector", selector)
        except NoSuchElementException:
            logger.info(f"Selector no longer matches: {selector}")
        except WebDriverException as e:
            logger.warning(f"Could not resolve selector {selector!r}: {e.msg or e}")
        return None

    def _wait_for_page_load(self):
        """Wait for the page to fully load."""
        WebDriverWait(self.driver, self.config.page_load_timeout).until(
            lambda d: d.execute_script("return document.readyState")
            == "complete"
        )
