"""
Recovery of the named component chain behind a DOM node.

The walk is runtime-agnostic: a RuntimeAdapter supplies the hops, this
module names, filters, classifies and summarizes them. Nothing raised by
the adapter escapes; the best partial result is returned instead.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from element_inspector.runtime.adapter import Hop, RuntimeAdapter
from element_inspector.runtime.naming import (ComponentClassifier,
                                              derive_display_name,
                                              is_reportable)
from element_inspector.runtime.sanitizer import sanitize_props
from element_inspector.types import (MAX_COMPONENT_STACK, ComponentFrame,
                                     ComponentInfo, DebugSource)

logger = logging.getLogger(__name__)

MAX_HOPS = 30
PROPS_DEPTH = 5


@dataclass
class _Frame:
    name: str
    source: Optional[DebugSource]
    props: Optional[dict[str, Any]]
    is_user_component: bool


def walk_component_tree(
    adapter: RuntimeAdapter,
    target: Any,
    classifier: Optional[ComponentClassifier] = None,
    max_hops: int = MAX_HOPS,
    props_depth: int = PROPS_DEPTH,
) -> ComponentInfo:
    """
    Walk the instance tree above a DOM node and summarize its components.

    Args:
        adapter: Runtime adapter used to reach the instance tree
        target: Node reference the adapter understands (a selector for page adapters)
        classifier: User-component classifier, the naming convention by default
        max_hops: Maximum number of parent links followed
        props_depth: Props are captured only for hops nearer than this

    Returns:
        ComponentInfo; has_component_runtime is False when no tree was found
    """
    classifier = classifier or ComponentClassifier()

    try:
        handle = adapter.locate_instance_handle(target)
    except Exception as e:
        logger.warning(f"Could not locate instance handle for {target!r}: {str(e)}")
        return ComponentInfo(error=str(e))

    if handle is None:
        return ComponentInfo(has_component_runtime=False)

    frames: list[_Frame] = []
    error: Optional[str] = None
    try:
        for depth, hop in enumerate(adapter.walk_ancestors(handle)):
            if depth >= max_hops:
                break
            frame = _read_hop(hop, depth < props_depth, classifier)
            if frame:
                frames.append(frame)
    except Exception as e:
        logger.warning(f"Component walk stopped after {len(frames)} components: {str(e)}")
        error = str(e)

    return _summarize(frames, error)


def _read_hop(
    hop: Hop, with_props: bool, classifier: ComponentClassifier
) -> Optional[_Frame]:
    if hop.error:
        logger.debug(f"Hop only partially readable: {hop.error}")
    try:
        name = derive_display_name(hop.type)
    except Exception as e:
        logger.debug(f"Could not name hop: {str(e)}")
        return None
    if not is_reportable(name):
        return None

    props = None
    if with_props:
        try:
            props = sanitize_props(hop.props)
        except Exception as e:
            logger.debug(f"Could not read props of {name}: {str(e)}")

    return _Frame(
        name=name,
        source=hop.source,
        props=props,
        is_user_component=classifier.is_user_component(name),
    )


def _summarize(frames: list[_Frame], error: Optional[str]) -> ComponentInfo:
    user_frames = [f for f in frames if f.is_user_component]
    first = user_frames[0] if user_frames else None
    source = first.source if first else None

    return ComponentInfo(
        has_component_runtime=True,
        component_name=first.name if first else None,
        source_file=source.file_name if source else None,
        source_line=(source.line_number or None) if source else None,
        source_column=source.column_number if source else None,
        props=first.props if first else None,
        component_hierarchy=tuple(f.name for f in user_frames) or None,
        full_component_tree=tuple(f.name for f in frames) or None,
        component_stack=tuple(
            ComponentFrame(name=f.name, source=f.source)
            for f in user_frames[:MAX_COMPONENT_STACK]
        ) or None,
        error=error,
    )
