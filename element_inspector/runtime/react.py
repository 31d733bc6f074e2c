import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from selenium.webdriver.chrome.webdriver import WebDriver

from element_inspector.runtime.adapter import (ElementNotFoundError, Hop,
                                               RuntimeAdapter, TypeDescriptor)
from element_inspector.runtime.js_scripts import FIBER_WALK_SCRIPT
from element_inspector.runtime.sanitizer import (RemoteArray, RemoteFunction,
                                                 RemoteObject)
from element_inspector.runtime.walker import MAX_HOPS, PROPS_DEPTH
from element_inspector.types import DebugSource

logger = logging.getLogger(__name__)

FIBER_KEY_PREFIXES = ("__reactFiber$", "__reactInternalInstance$")
MAX_ANCESTOR_ATTEMPTS = 10


@dataclass
class FiberHandle:
    """Fiber hops already read out of the page, nearest first."""
    hops: list[dict] = field(default_factory=list)
    error: Optional[str] = None


class ReactFiberAdapter(RuntimeAdapter[FiberHandle]):
    """
    Reads React's fiber tree through the page's own JavaScript world.

    Fibers cannot leave the page, so locating the handle runs the whole
    walk in one script call and the handle carries the hops read.
    """

    def __init__(
        self,
        driver: WebDriver,
        max_hops: int = MAX_HOPS,
        props_depth: int = PROPS_DEPTH,
    ) -> None:
        self.driver = driver
        self.max_hops = max_hops
        self.props_depth = props_depth

    def locate_instance_handle(self, target: str) -> Optional[FiberHandle]:
        result = self.driver.execute_script(FIBER_WALK_SCRIPT, target, {
            "prefixes": list(FIBER_KEY_PREFIXES),
            "maxAncestors": MAX_ANCESTOR_ATTEMPTS,
            "maxHops": self.max_hops,
            "propsDepth": self.props_depth,
        }) or {}

        if not result.get("found"):
            raise ElementNotFoundError(f"Element not found: {target}")
        if not result.get("hasRuntime"):
            return None
        return FiberHandle(hops=list(result.get("hops") or []), error=result.get("error"))

    def walk_ancestors(self, handle: FiberHandle) -> Iterable[Hop]:
        for raw in handle.hops:
            yield self.decode_hop(raw)
        if handle.error:
            raise RuntimeError(handle.error)

    @staticmethod
    def decode_hop(raw: dict) -> Hop:
        """
        Rebuild a Hop from the script's plain-data form.

        A hop with an error still carries whichever fields could be read.
        """
        raw_type = raw.get("type")
        type_descriptor = None
        if raw_type:
            type_descriptor = TypeDescriptor(
                kind=raw_type.get("kind"),
                name=raw_type.get("name"),
                display_name=raw_type.get("displayName"),
                has_render=bool(raw_type.get("hasRender")),
                render_name=raw_type.get("renderName"),
                render_display_name=raw_type.get("renderDisplayName"),
                inner_name=raw_type.get("innerName"),
                inner_display_name=raw_type.get("innerDisplayName"),
                marker=raw_type.get("marker"),
            )

        raw_source = raw.get("source")
        source = None
        if raw_source and raw_source.get("fileName"):
            source = DebugSource(
                file_name=raw_source["fileName"],
                line_number=raw_source.get("lineNumber") or 0,
                column_number=raw_source.get("columnNumber"),
            )

        raw_props = raw.get("props")
        props = None
        if raw_props is not None:
            props = {key: decode_value(value) for key, value in raw_props.items()}

        error = raw.get("error")
        return Hop(
            type=type_descriptor,
            source=source,
            props=props,
            error=str(error) if error else None,
        )


def decode_value(value: Any) -> Any:
    """Map a wire marker back to its stand-in; plain values pass through."""
    if not isinstance(value, dict) or "$kind" not in value:
        return value
    kind = value["$kind"]
    if kind == "function":
        return RemoteFunction()
    if kind == "array":
        return RemoteArray(length=int(value.get("length") or 0))
    return RemoteObject()
