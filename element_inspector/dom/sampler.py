"""Sampling of attributes and computed styles for one element."""

from typing import Optional

from element_inspector.dom.models import ElementSnapshot
from element_inspector.utils.text import truncate

INSTRUMENTATION_ATTRIBUTE_PREFIXES = ("__react", "data-element-inspector")
MAX_ATTRIBUTE_LENGTH = 200

RELEVANT_STYLES = (
    "display",
    "position",
    "flex-direction",
    "justify-content",
    "align-items",
    "width",
    "height",
    "padding",
    "margin",
    "background-color",
    "color",
    "font-size",
    "font-weight",
    "border",
    "border-radius",
    "opacity",
    "visibility",
)
UNINFORMATIVE_STYLE_VALUES = frozenset({"none", "normal", "auto", "0px"})


def sample_attributes(node: ElementSnapshot) -> Optional[dict[str, str]]:
    """
    Copy the element's attributes, minus instrumentation ones.

    Values are cut to MAX_ATTRIBUTE_LENGTH characters.

    Returns:
        Attribute mapping, or None when nothing is left
    """
    attributes = {
        name: truncate(value, MAX_ATTRIBUTE_LENGTH)
        for name, value in node.attributes.items()
        if not name.startswith(INSTRUMENTATION_ATTRIBUTE_PREFIXES)
    }
    return attributes or None


def sample_styles(node: ElementSnapshot) -> Optional[dict[str, str]]:
    """
    Keep allow-listed computed styles whose value says something.

    Returns:
        Style mapping in allow-list order, or None when nothing is left
    """
    styles = {}
    for prop in RELEVANT_STYLES:
        value = node.computed_styles.get(prop)
        if value and value not in UNINFORMATIVE_STYLE_VALUES:
            styles[prop] = value
    return styles or None
