from dataclasses import dataclass, field
from typing import Optional, TypedDict

from element_inspector.utils.text import split_classes

TEST_ID_ATTRIBUTES = ("data-testid", "data-test-id")


class RawNode(TypedDict):
    """One element of the snapshot chain as returned by the page script."""
    attributes: list[list[str]]
    childCount: int
    className: str
    isBody: bool
    sameTagCount: int
    sameTagIndex: int
    siblingIndex: int
    tag: str


class RawSnapshot(TypedDict):
    """Snapshot of the target element, nearest node first in `chain`."""
    chain: list[RawNode]
    computedStyles: dict[str, str]
    innerHTML: str
    text: str


@dataclass
class ElementSnapshot:
    """
    A DOM element as captured at one instant.

    Attributes:
        tag: Lower-cased tag name
        attributes: Attribute name/value pairs (identifier attributes only for ancestors)
        class_name: Raw class string, empty for non-string className (SVG)
        same_tag_index: 1-based position among same-tag siblings
        same_tag_count: Number of same-tag children of the parent, this one included
        sibling_index: Position among all element children of the parent
        child_count: Number of element children
        is_body: Whether this is the document body
        parent: Parent element snapshot, None for detached nodes and the root
        text: Trimmed rendered text (target only)
        inner_html: Markup snapshot (target only)
        computed_styles: Allow-listed computed style values (target only)
    """
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    class_name: str = ""
    same_tag_index: int = 1
    same_tag_count: int = 1
    sibling_index: int = 0
    child_count: int = 0
    is_body: bool = False
    parent: Optional["ElementSnapshot"] = None
    text: str = ""
    inner_html: str = ""
    computed_styles: dict[str, str] = field(default_factory=dict)

    @property
    def id(self) -> Optional[str]:
        return self.attributes.get("id") or None

    @property
    def test_id(self) -> Optional[str]:
        attribute = self.test_id_attribute
        return self.attributes[attribute] if attribute else None

    @property
    def test_id_attribute(self) -> Optional[str]:
        """Name of the test-identifier attribute carrying a value, if any."""
        for name in TEST_ID_ATTRIBUTES:
            if self.attributes.get(name):
                return name
        return None

    @property
    def classes(self) -> list[str]:
        return split_classes(self.class_name)
