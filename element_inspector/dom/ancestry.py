"""Ancestor summaries: the readable DOM path and the structured parent chain."""

from typing import Optional

from element_inspector.dom.models import ElementSnapshot
from element_inspector.dom.selector import nth_of_type
from element_inspector.types import ParentRecord

MAX_DOM_PATH_DEPTH = 15
MAX_PARENT_CHAIN_DEPTH = 8
MAX_PATH_CLASSES = 2


def path_token(node: ElementSnapshot) -> str:
    """Tag plus its most telling identifier and a positional suffix."""
    token = node.tag
    if node.id:
        token += f"#{node.id}"
    elif node.test_id:
        token += f"[data-testid='{node.test_id}']"
    elif node.classes:
        token += "." + ".".join(node.classes[:MAX_PATH_CLASSES])
    return token + nth_of_type(node)


def dom_path(node: ElementSnapshot, max_depth: int = MAX_DOM_PATH_DEPTH) -> str:
    """
    Human-readable path from the outermost kept ancestor down to the node.

    The body is never included; at most `max_depth` segments are kept,
    nearest ones first.
    """
    parts: list[str] = []
    current: Optional[ElementSnapshot] = node
    while current is not None and not current.is_body and len(parts) < max_depth:
        parts.insert(0, path_token(current))
        current = current.parent
    return " > ".join(parts)


def parent_chain(
    node: ElementSnapshot, max_depth: int = MAX_PARENT_CHAIN_DEPTH
) -> list[ParentRecord]:
    """Structured ancestors, nearest first, stopping before the body."""
    chain: list[ParentRecord] = []
    current = node.parent
    while current is not None and not current.is_body and len(chain) < max_depth:
        chain.append(ParentRecord(
            tag=current.tag,
            id=current.id,
            classes=tuple(current.classes) or None,
            test_id=current.test_id,
        ))
        current = current.parent
    return chain
