import logging
from typing import Optional

from selenium.webdriver.chrome.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from element_inspector.dom.js_scripts import SNAPSHOT_SCRIPT
from element_inspector.dom.models import ElementSnapshot, RawNode, RawSnapshot
from element_inspector.dom.sampler import RELEVANT_STYLES

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 200
MAX_HTML_LENGTH = 500


class DOMSnapshotter:
    """Captures an element and its ancestors in one script round trip."""

    def __init__(self, driver: WebDriver) -> None:
        self.driver = driver

    def capture(self, element: WebElement) -> Optional[ElementSnapshot]:
        """
        Capture the element's snapshot chain.

        Args:
            element: WebElement to capture

        Returns:
            ElementSnapshot of the element linked to its ancestors,
            None if the element could not be read
        """
        try:
            raw = self.driver.execute_script(
                SNAPSHOT_SCRIPT,
                element,
                list(RELEVANT_STYLES),
                MAX_TEXT_LENGTH,
                MAX_HTML_LENGTH,
            )
        except Exception as e:
            logger.warning(f"Failed to snapshot element: {str(e)}")
            return None

        if not raw or not raw.get("chain"):
            logger.warning("Snapshot script returned no element")
            return None
        return self.link(raw)

    @staticmethod
    def link(raw: RawSnapshot) -> ElementSnapshot:
        """Turn the raw chain into linked snapshots and return the target."""
        parent: Optional[ElementSnapshot] = None
        for node in reversed(raw["chain"]):
            parent = DOMSnapshotter._to_snapshot(node, parent)

        target = parent
        target.text = str(raw.get("text") or "")
        target.inner_html = str(raw.get("innerHTML") or "")
        target.computed_styles = {
            str(k): str(v) for k, v in (raw.get("computedStyles") or {}).items() if v
        }
        return target

    @staticmethod
    def _to_snapshot(node: RawNode, parent: Optional[ElementSnapshot]) -> ElementSnapshot:
        return ElementSnapshot(
            tag=str(node.get("tag", "")).lower(),
            attributes={
                str(pair[0]): str(pair[1])
                for pair in node.get("attributes") or []
                if len(pair) == 2
            },
            class_name=node.get("className") or "",
            same_tag_index=max(1, int(node.get("sameTagIndex", 1))),
            same_tag_count=max(1, int(node.get("sameTagCount", 1))),
            sibling_index=max(0, int(node.get("siblingIndex", 0))),
            child_count=max(0, int(node.get("childCount", 0))),
            is_body=bool(node.get("isBody", False)),
            parent=parent,
        )
