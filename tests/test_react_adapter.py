from __future__ import annotations

import pytest
from selenium.common.exceptions import JavascriptException

from element_inspector.runtime.adapter import ElementNotFoundError
from element_inspector.runtime.react import (FIBER_KEY_PREFIXES,
                                             ReactFiberAdapter, decode_value)
from element_inspector.runtime.sanitizer import (RemoteArray, RemoteFunction,
                                                 RemoteObject)
from element_inspector.runtime.walker import walk_component_tree


def fiber_payload() -> dict:
    return {
        "found": True,
        "hasRuntime": True,
        "error": None,
        "hops": [
            {"type": {"kind": "string", "name": "div"}, "source": None,
             "props": {"className": "row", "children": {"$kind": "array", "length": 2}}},
            {"type": {"kind": "function", "name": "Icon", "displayName": None}, "source": None,
             "props": {}},
            {"type": {"kind": "object", "displayName": None, "hasRender": True,
                      "renderName": "Button", "renderDisplayName": None,
                      "marker": "Symbol(react.forward_ref)"},
             "source": {"fileName": "/repo/src/ui/Button.tsx", "lineNumber": 8, "columnNumber": None},
             "props": {"onClick": {"$kind": "function"}, "icon": {"$kind": "object"},
                       "size": 2, "label": "Save"}},
            {"type": None, "source": None, "props": None},
            {"error": "TypeError: cannot read 'type'"},
            {"type": {"kind": "function", "name": "Toolbar"},
             "source": {"fileName": "/repo/src/ui/Toolbar.tsx", "lineNumber": 3},
             "props": {"items": {"$kind": "array", "length": 4}}},
        ],
    }


def test_script_receives_selector_and_limits(fake_driver) -> None:
    driver = fake_driver({"found": True, "hasRuntime": False})
    adapter = ReactFiberAdapter(driver)

    assert adapter.locate_instance_handle("#save-btn") is None

    _, args = driver.calls[0]
    assert args[0] == "#save-btn"
    assert args[1]["prefixes"] == list(FIBER_KEY_PREFIXES)
    assert args[1]["maxAncestors"] == 10
    assert args[1]["maxHops"] == 30
    assert args[1]["propsDepth"] == 5


def test_missing_element_raises_not_found(fake_driver) -> None:
    adapter = ReactFiberAdapter(fake_driver({"found": False}))
    with pytest.raises(ElementNotFoundError):
        adapter.locate_instance_handle("#gone")


def test_decode_wire_markers() -> None:
    assert decode_value({"$kind": "function"}) == RemoteFunction()
    assert decode_value({"$kind": "array", "length": 3}) == RemoteArray(length=3)
    assert decode_value({"$kind": "object"}) == RemoteObject()
    assert decode_value({"$kind": "unknown"}) == RemoteObject()
    assert decode_value({"plain": 1}) == {"plain": 1}
    assert decode_value("text") == "text"


def test_decode_hop_of_unreadable_hop() -> None:
    hop = ReactFiberAdapter.decode_hop({"error": "boom"})
    assert hop.error == "boom"
    assert hop.type is None


def test_hop_with_unreadable_props_keeps_its_name(fake_driver) -> None:
    payload = {
        "found": True,
        "hasRuntime": True,
        "hops": [
            {"type": {"kind": "function", "name": "Button"}, "source": None, "props": None,
             "error": "props: Error: getter threw"},
            {"type": {"kind": "function", "name": "Toolbar"}, "source": None, "props": None},
        ],
    }

    hop = ReactFiberAdapter.decode_hop(payload["hops"][0])
    info = walk_component_tree(ReactFiberAdapter(fake_driver(payload)), "button")

    assert hop.type.name == "Button"
    assert hop.error == "props: Error: getter threw"
    assert info.component_name == "Button"
    assert info.component_hierarchy == ("Button", "Toolbar")
    assert info.props is None


def test_walk_through_page_payload(fake_driver) -> None:
    adapter = ReactFiberAdapter(fake_driver(fiber_payload()))

    info = walk_component_tree(adapter, "#toolbar > button")

    assert info.has_component_runtime
    assert info.full_component_tree == ("div", "Icon", "Button", "Toolbar")
    assert info.component_hierarchy == ("Icon", "Button", "Toolbar")
    assert info.component_name == "Icon"
    assert info.props is None
    assert [frame.name for frame in info.component_stack] == ["Icon", "Button", "Toolbar"]
    assert info.component_stack[1].source.file_name == "/repo/src/ui/Button.tsx"
    assert info.component_stack[2].source.line_number == 3


def test_button_props_are_sanitized_when_primary(fake_driver) -> None:
    payload = fiber_payload()
    del payload["hops"][1]
    adapter = ReactFiberAdapter(fake_driver(payload))

    info = walk_component_tree(adapter, "button")

    assert info.component_name == "Button"
    assert info.source_file == "/repo/src/ui/Button.tsx"
    assert info.source_line == 8
    assert info.source_column is None
    assert info.props == {
        "onClick": "[Function]",
        "icon": "[Object]",
        "size": 2,
        "label": "Save",
    }


def test_page_side_walk_error_keeps_partial_result(fake_driver) -> None:
    payload = fiber_payload()
    payload["hops"] = payload["hops"][:3]
    payload["error"] = "Error: fiber.return getter threw"
    adapter = ReactFiberAdapter(fake_driver(payload))

    info = walk_component_tree(adapter, "button")

    assert info.full_component_tree == ("div", "Icon", "Button")
    assert info.error == "Error: fiber.return getter threw"


def test_script_failure_becomes_error_result(fake_driver) -> None:
    adapter = ReactFiberAdapter(fake_driver(JavascriptException("script crashed")))

    info = walk_component_tree(adapter, "button")

    assert info.has_component_runtime is False
    assert "script crashed" in info.error
