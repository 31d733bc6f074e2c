from __future__ import annotations

from selenium.common.exceptions import StaleElementReferenceException

from element_inspector.dom.sampler import RELEVANT_STYLES
from element_inspector.dom.snapshot import (MAX_HTML_LENGTH, MAX_TEXT_LENGTH,
                                            DOMSnapshotter)


def raw_snapshot() -> dict:
    return {
        "chain": [
            {"tag": "BUTTON", "attributes": [["id", "save-btn"], ["type", "button"]],
             "className": "btn primary", "sameTagIndex": 2, "sameTagCount": 3,
             "siblingIndex": 4, "childCount": 1, "isBody": False},
            {"tag": "div", "attributes": [["data-testid", "toolbar"]], "className": "",
             "sameTagIndex": 1, "sameTagCount": 1, "siblingIndex": 0, "childCount": 5,
             "isBody": False},
            {"tag": "body", "attributes": [], "className": "", "sameTagIndex": 1,
             "sameTagCount": 1, "siblingIndex": 1, "childCount": 1, "isBody": True},
        ],
        "text": "Save",
        "innerHTML": "<span>Save</span>",
        "computedStyles": {"display": "inline-block", "margin": "0px", "color": ""},
    }


def test_capture_links_chain_and_passes_limits(fake_driver) -> None:
    driver = fake_driver(raw_snapshot())
    element = object()

    snapshot = DOMSnapshotter(driver).capture(element)

    _, args = driver.calls[0]
    assert args == (element, list(RELEVANT_STYLES), MAX_TEXT_LENGTH, MAX_HTML_LENGTH)

    assert snapshot.tag == "button"
    assert snapshot.id == "save-btn"
    assert snapshot.classes == ["btn", "primary"]
    assert (snapshot.same_tag_index, snapshot.same_tag_count) == (2, 3)
    assert snapshot.sibling_index == 4
    assert snapshot.text == "Save"
    assert snapshot.inner_html == "<span>Save</span>"
    assert snapshot.computed_styles == {"display": "inline-block", "margin": "0px"}

    toolbar = snapshot.parent
    assert toolbar.test_id == "toolbar"
    assert toolbar.parent.is_body
    assert toolbar.parent.parent is None


def test_capture_returns_none_for_non_element(fake_driver) -> None:
    assert DOMSnapshotter(fake_driver(None)).capture(object()) is None
    assert DOMSnapshotter(fake_driver({"chain": []})).capture(object()) is None


def test_capture_returns_none_for_stale_element(fake_driver) -> None:
    driver = fake_driver(StaleElementReferenceException("stale element reference"))
    assert DOMSnapshotter(driver).capture(object()) is None


def test_malformed_fields_get_safe_defaults() -> None:
    snapshot = DOMSnapshotter.link({
        "chain": [{"tag": "p", "attributes": [["lonely"]], "className": None,
                   "sameTagIndex": 0, "sameTagCount": 0, "siblingIndex": -1,
                   "childCount": -2, "isBody": False}],
        "text": None,
        "innerHTML": None,
        "computedStyles": None,
    })

    assert snapshot.attributes == {}
    assert snapshot.class_name == ""
    assert snapshot.same_tag_index == 1
    assert snapshot.same_tag_count == 1
    assert snapshot.sibling_index == 0
    assert snapshot.child_count == 0
    assert snapshot.text == ""
    assert snapshot.computed_styles == {}
    assert snapshot.parent is None
