"""Locator synthesis for a captured element."""

from typing import Optional

from element_inspector.dom.models import ElementSnapshot


def nth_of_type(node: ElementSnapshot) -> str:
    """Positional suffix, empty when the node is the only child of its tag."""
    if node.parent is None or node.same_tag_count <= 1:
        return ""
    return f":nth-of-type({node.same_tag_index})"


def attribute_selector(name: str, value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'[{name}="{escaped}"]'


def unique_selector(node: ElementSnapshot) -> str:
    """
    Build a CSS selector intended to re-resolve to the same element.

    Tries the element id, then its test id, then a tag path walked up to
    the nearest ancestor with an id or to the body. Uniqueness is not
    verified against the document.

    Args:
        node: Captured element

    Returns:
        Non-empty selector string
    """
    if node.id:
        return f"#{node.id}"

    test_id_attribute = node.test_id_attribute
    if test_id_attribute:
        return attribute_selector(test_id_attribute, node.attributes[test_id_attribute])

    path: list[str] = []
    current: Optional[ElementSnapshot] = node
    while current is not None and not current.is_body:
        if current.id:
            path.insert(0, f"#{current.id}")
            break
        path.insert(0, current.tag + nth_of_type(current))
        current = current.parent

    return " > ".join(path) or node.tag
