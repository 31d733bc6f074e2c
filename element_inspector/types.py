from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from element_inspector.utils.text import format_source_path

MAX_COMPONENT_STACK = 10


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        frozen=True,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, leaving absent fields out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class DebugSource(_Record):
    """Where a component instance was declared, as recorded by a development build."""
    file_name: str
    line_number: int = 0
    column_number: Optional[int] = None


class ComponentFrame(_Record):
    """One user component of the component stack."""
    name: str
    source: Optional[DebugSource] = None


class ParentRecord(_Record):
    """Structured summary of one DOM ancestor."""
    tag: str
    id: Optional[str] = None
    classes: Optional[tuple[str, ...]] = None
    test_id: Optional[str] = None


class ComponentInfo(_Record):
    """
    Result of the component-tree walk.

    A default instance is the empty result: no runtime detected, or the
    request failed or timed out.
    """
    has_component_runtime: bool = False
    component_name: Optional[str] = None
    source_file: Optional[str] = None
    source_line: Optional[int] = None
    source_column: Optional[int] = None
    props: Optional[dict[str, Any]] = None
    component_hierarchy: Optional[tuple[str, ...]] = None
    full_component_tree: Optional[tuple[str, ...]] = None
    component_stack: Optional[tuple[ComponentFrame, ...]] = None
    error: Optional[str] = None


class ElementDescriptor(_Record):
    """What one user-selected element is: locator, DOM context and owning component."""
    selector: str = Field(min_length=1)
    dom_path: str
    tag: str
    text: str = ""
    inner_html: str = Field(default="", alias="innerHTML")
    test_id: Optional[str] = None
    all_classes: Optional[tuple[str, ...]] = None
    all_attributes: Optional[dict[str, str]] = None
    computed_styles: Optional[dict[str, str]] = None
    parent_chain: Optional[tuple[ParentRecord, ...]] = None
    sibling_index: int = Field(default=0, ge=0)
    child_count: int = Field(default=0, ge=0)
    has_component_runtime: bool = False
    component_name: Optional[str] = None
    display_name: Optional[str] = None
    component_hierarchy: Optional[tuple[str, ...]] = None
    full_component_tree: Optional[tuple[str, ...]] = None
    component_stack: Optional[tuple[ComponentFrame, ...]] = Field(
        default=None, max_length=MAX_COMPONENT_STACK
    )
    source_file: Optional[str] = None
    source_line: Optional[int] = None
    source_column: Optional[int] = None
    props: Optional[dict[str, Any]] = None

    @model_validator(mode="after")
    def _check_primary_component(self) -> "ElementDescriptor":
        if self.component_hierarchy and self.component_name != self.component_hierarchy[0]:
            raise ValueError("componentName must be the first entry of componentHierarchy")
        return self

    @property
    def source_location(self) -> Optional[str]:
        """Project-relative `file:line` of the primary component, if known."""
        if not self.source_file:
            return None
        location = format_source_path(self.source_file)
        if self.source_line:
            location += f":{self.source_line}"
        return location
