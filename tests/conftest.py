from __future__ import annotations

from typing import Any, Callable

import pytest

from element_inspector.dom.models import ElementSnapshot


class FakeDom:
    """Builds linked ElementSnapshot trees the way the page script reports them."""

    def __init__(self) -> None:
        self.html = ElementSnapshot(tag="html")
        self.body = ElementSnapshot(tag="body", is_body=True, parent=self.html)
        self._children: dict[int, list[ElementSnapshot]] = {id(self.html): [self.body]}
        self.html.child_count = 1

    def add(
        self,
        parent: ElementSnapshot | None,
        tag: str,
        class_name: str = "",
        **attributes: str,
    ) -> ElementSnapshot:
        attrs = {name.replace("_", "-"): value for name, value in attributes.items()}
        node = ElementSnapshot(tag=tag, attributes=attrs, class_name=class_name, parent=parent)
        if parent is None:
            return node

        siblings = self._children.setdefault(id(parent), [])
        siblings.append(node)
        parent.child_count = len(siblings)
        same_tag = [s for s in siblings if s.tag == tag]
        for index, sibling in enumerate(same_tag, start=1):
            sibling.same_tag_index = index
            sibling.same_tag_count = len(same_tag)
        node.sibling_index = len(siblings) - 1
        return node

    def chain(self, depth: int, tag: str = "div") -> ElementSnapshot:
        """Nest `depth` elements under the body and return the innermost."""
        node = self.body
        for _ in range(depth):
            node = self.add(node, tag)
        return node


class FakeDriver:
    """Stands in for a WebDriver; answers execute_script from a handler."""

    def __init__(self, handler: Callable[..., Any] | Any = None) -> None:
        self.handler = handler
        self.calls: list[tuple] = []

    def execute_script(self, script: str, *args: Any) -> Any:
        self.calls.append((script, args))
        if isinstance(self.handler, BaseException):
            raise self.handler
        if callable(self.handler):
            return self.handler(script, *args)
        return self.handler


@pytest.fixture
def dom() -> FakeDom:
    return FakeDom()


@pytest.fixture
def fake_driver() -> type[FakeDriver]:
    return FakeDriver
