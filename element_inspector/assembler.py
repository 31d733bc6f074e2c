import asyncio
import logging
from typing import Optional

from selenium.webdriver.remote.webelement import WebElement

from element_inspector.dom.ancestry import dom_path, parent_chain
from element_inspector.dom.models import ElementSnapshot
from element_inspector.dom.sampler import sample_attributes, sample_styles
from element_inspector.dom.selector import unique_selector
from element_inspector.dom.snapshot import (MAX_HTML_LENGTH, MAX_TEXT_LENGTH,
                                            DOMSnapshotter)
from element_inspector.transport import ComponentInfoRequester
from element_inspector.types import (MAX_COMPONENT_STACK, ComponentInfo,
                                     ElementDescriptor)
from element_inspector.utils.text import truncate

logger = logging.getLogger(__name__)


class DescriptorAssembler:
    """Composes DOM sampling and the component walk into one ElementDescriptor."""

    def __init__(
        self,
        snapshotter: DOMSnapshotter,
        requester: ComponentInfoRequester,
        component_timeout: Optional[float] = None,
    ) -> None:
        self.snapshotter = snapshotter
        self.requester = requester
        self.component_timeout = component_timeout

    async def assemble(self, element: WebElement) -> Optional[ElementDescriptor]:
        """
        Describe a live element.

        Returns:
            The descriptor, or None if the element itself could not be read
        """
        snapshot = self.snapshotter.capture(element)
        if snapshot is None:
            return None
        return await self.assemble_snapshot(snapshot)

    async def assemble_snapshot(self, snapshot: ElementSnapshot) -> ElementDescriptor:
        """Describe an already captured element."""
        selector = unique_selector(snapshot)
        info = await self._component_info(selector)
        return build_descriptor(snapshot, selector, info)

    async def _component_info(self, selector: str) -> ComponentInfo:
        try:
            return await asyncio.wait_for(
                self.requester.request_component_info(selector),
                timeout=self.component_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"No component info for {selector!r} within {self.component_timeout}s"
            )
        except Exception as e:
            logger.warning(f"Component info for {selector!r} unavailable: {str(e)}")
        return ComponentInfo()


def build_descriptor(
    snapshot: ElementSnapshot, selector: str, info: ComponentInfo
) -> ElementDescriptor:
    """Merge the DOM-derived fields with a component walk result."""
    chain = parent_chain(snapshot)
    primary = info.component_hierarchy[0] if info.component_hierarchy else None
    return ElementDescriptor(
        selector=selector,
        dom_path=dom_path(snapshot),
        tag=snapshot.tag,
        text=truncate(snapshot.text.strip(), MAX_TEXT_LENGTH),
        inner_html=truncate(snapshot.inner_html, MAX_HTML_LENGTH),
        test_id=snapshot.test_id,
        all_classes=tuple(snapshot.classes) or None,
        all_attributes=sample_attributes(snapshot),
        computed_styles=sample_styles(snapshot),
        parent_chain=tuple(chain) or None,
        sibling_index=snapshot.sibling_index,
        child_count=snapshot.child_count,
        has_component_runtime=info.has_component_runtime,
        component_name=primary,
        display_name=primary,
        component_hierarchy=info.component_hierarchy,
        full_component_tree=info.full_component_tree,
        component_stack=info.component_stack[:MAX_COMPONENT_STACK] if info.component_stack else None,
        source_file=info.source_file,
        source_line=info.source_line,
        source_column=info.source_column,
        props=info.props,
    )
