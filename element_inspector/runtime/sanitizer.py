"""
Bounded, JSON-safe summaries of component props.

Values coming from a page script arrive with non-serializable JS values
already replaced by the marker classes below.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from element_inspector.utils.text import truncate

FUNCTION_PLACEHOLDER = "[Function]"
OBJECT_PLACEHOLDER = "[Object]"
TRUNCATION_MARKER = "..."
MAX_STRING_LENGTH = 100

RESERVED_PROPS = frozenset({"children", "ref", "key", "__self", "__source"})


@dataclass(frozen=True)
class RemoteFunction:
    """A JS function left behind in the page."""


@dataclass(frozen=True)
class RemoteArray:
    """A JS array left behind in the page."""
    length: int = 0


@dataclass(frozen=True)
class RemoteObject:
    """Any other JS object left behind in the page."""


def sanitize_value(value: Any) -> Any:
    """
    Summarize one prop value.

    Containers are summarized by kind and size, never traversed.
    """
    if isinstance(value, RemoteFunction) or callable(value):
        return FUNCTION_PLACEHOLDER
    if isinstance(value, RemoteArray):
        return f"[Array({value.length})]"
    if isinstance(value, (list, tuple)):
        return f"[Array({len(value)})]"
    if isinstance(value, str):
        return truncate(value, MAX_STRING_LENGTH, TRUNCATION_MARKER)
    if value is None or isinstance(value, (bool, int, float)):
        return value
    return OBJECT_PLACEHOLDER


def sanitize_props(props: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
    """
    Summarize a props record, skipping reserved keys.

    Returns:
        Sanitized mapping, or None when no props survive
    """
    if not props:
        return None
    safe = {
        str(key): sanitize_value(value)
        for key, value in props.items()
        if key not in RESERVED_PROPS
    }
    return safe or None
