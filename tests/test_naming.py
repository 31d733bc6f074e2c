from __future__ import annotations

import pytest

from element_inspector.runtime.adapter import TypeDescriptor
from element_inspector.runtime.naming import (ComponentClassifier,
                                              derive_display_name,
                                              is_reportable)


@pytest.mark.parametrize(
    ("descriptor", "expected"),
    [
        (TypeDescriptor(kind="function", name="Button"), "Button"),
        (TypeDescriptor(kind="function", name="Button", display_name="Fancy(Button)"), "Fancy(Button)"),
        (TypeDescriptor(kind="function", name=""), None),
        (TypeDescriptor(kind="object", display_name="ThemeContext"), "ThemeContext"),
        (TypeDescriptor(kind="object", has_render=True, render_name="Input"), "Input"),
        (TypeDescriptor(kind="object", has_render=True, render_name="Input",
                        render_display_name="TextInput"), "TextInput"),
        (TypeDescriptor(kind="object", has_render=True, marker="Symbol(react.forward_ref)"), None),
        (TypeDescriptor(kind="object", marker="Symbol(react.forward_ref)"), "ForwardRef"),
        (TypeDescriptor(kind="object", marker="Symbol(react.memo)", inner_name="Row"), "Row"),
        (TypeDescriptor(kind="object", marker="Symbol(react.memo)"), "Memo"),
        (TypeDescriptor(kind="object"), None),
        (TypeDescriptor(kind="string", name="div"), "div"),
        (TypeDescriptor(kind="symbol"), None),
        (None, None),
    ],
)
def test_derive_display_name(descriptor, expected) -> None:
    assert derive_display_name(descriptor) == expected


def test_internal_and_fragment_names_are_not_reported() -> None:
    assert not is_reportable(None)
    assert not is_reportable("")
    assert not is_reportable("_InternalWrapper")
    assert not is_reportable("Fragment")
    assert is_reportable("div")
    assert is_reportable("Toolbar")


def test_upper_case_heuristic_classifies_user_components() -> None:
    # Naming convention only: authored components start upper-case, host elements lower-case.
    classifier = ComponentClassifier()
    assert classifier.is_user_component("Button")
    assert not classifier.is_user_component("div")
    assert not classifier.is_user_component("ÉtatPanel")


def test_explicit_lists_override_heuristic() -> None:
    classifier = ComponentClassifier(user_components={"myWidget"}, host_components={"Provider"})
    assert classifier.is_user_component("myWidget")
    assert not classifier.is_user_component("Provider")
    assert classifier.is_user_component("Button")
