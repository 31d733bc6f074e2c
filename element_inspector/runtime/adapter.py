"""
Interface between the component-tree walker and a rendering runtime.

An adapter knows how one runtime links DOM nodes to its internal instance
tree. The walker only sees the hops it yields.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Mapping, Optional, TypeVar

from element_inspector.types import DebugSource

Handle = TypeVar("Handle")


class ElementNotFoundError(LookupError):
    """The locator handed to an adapter no longer matches any element."""


@dataclass(frozen=True)
class TypeDescriptor:
    """
    What can be read off an instance's type without touching the runtime.

    Attributes:
        kind: "function", "object", "string", or another JS type name
        name: Function name, or the tag for host elements
        display_name: Declared displayName
        has_render: Whether an object type wraps a render function
        render_name: Name of the wrapped render function
        render_display_name: displayName of the wrapped render function
        inner_name: Name of the wrapped inner type (memo)
        inner_display_name: displayName of the wrapped inner type (memo)
        marker: String form of the type's element marker, e.g. "Symbol(react.memo)"
    """
    kind: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = None
    has_render: bool = False
    render_name: Optional[str] = None
    render_display_name: Optional[str] = None
    inner_name: Optional[str] = None
    inner_display_name: Optional[str] = None
    marker: Optional[str] = None


@dataclass(frozen=True)
class Hop:
    """One step of the instance-tree walk, nearest to the DOM node first."""
    type: Optional[TypeDescriptor] = None
    source: Optional[DebugSource] = None
    props: Optional[Mapping[str, Any]] = None
    error: Optional[str] = None


class RuntimeAdapter(ABC, Generic[Handle]):
    """Locates a runtime's instance handle and walks its parent links."""

    @abstractmethod
    def locate_instance_handle(self, target: Any) -> Optional[Handle]:
        """
        Find the instance handle for a DOM node or one of its close ancestors.

        Returns:
            The handle, or None when no runtime tree is attached

        Raises:
            ElementNotFoundError: If the target no longer resolves to a node
        """

    @abstractmethod
    def walk_ancestors(self, handle: Handle) -> Iterable[Hop]:
        """Yield hops from the handle's instance up through its parents."""
