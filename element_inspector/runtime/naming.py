import re
from typing import Iterable, Optional

from element_inspector.runtime.adapter import TypeDescriptor

FRAGMENT_NAME = "Fragment"

_USER_COMPONENT_PATTERN = re.compile(r"[A-Z]")


def derive_display_name(descriptor: Optional[TypeDescriptor]) -> Optional[str]:
    """
    Name a hop from its type.

    Functions use displayName or name. Objects use their displayName, else
    the wrapped render function's names, else the name behind a memo or
    forward-ref marker. Host elements are named by their tag.
    """
    if descriptor is None or descriptor.kind is None:
        return None

    if descriptor.kind == "function":
        return descriptor.display_name or descriptor.name or None

    if descriptor.kind == "object":
        if descriptor.display_name:
            return descriptor.display_name
        if descriptor.has_render:
            return descriptor.render_display_name or descriptor.render_name or None
        marker = descriptor.marker or ""
        if "forward_ref" in marker:
            return "ForwardRef"
        if "memo" in marker:
            return descriptor.inner_display_name or descriptor.inner_name or "Memo"
        return None

    if descriptor.kind == "string":
        return descriptor.name or None

    return None


def is_reportable(name: Optional[str]) -> bool:
    """Anonymous, internal and fragment hops are left out of the walk."""
    return bool(name) and not name.startswith("_") and name != FRAGMENT_NAME


class ComponentClassifier:
    """
    Decides whether a hop is an authored component or a host element.

    The default rule is a naming convention, not a structural fact: names
    starting with an upper-case letter are treated as user components.
    Explicit lists override it for known false positives and negatives.
    """

    def __init__(
        self,
        user_components: Iterable[str] = (),
        host_components: Iterable[str] = (),
    ) -> None:
        self.user_components = frozenset(user_components)
        self.host_components = frozenset(host_components)

    def is_user_component(self, name: str) -> bool:
        if name in self.host_components:
            return False
        if name in self.user_components:
            return True
        return _USER_COMPONENT_PATTERN.match(name) is not None
