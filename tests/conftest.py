"""Shared fixtures for component-forge tests."""

import pytest

from component_forge.codegen.core.blueprint import Blueprint


@pytest.fixture
def primary_button_data():
    """Two-axis button blueprint in wire form."""
    return {
        "name": "PrimaryButton",
        "kind": "fragment",
        "base": "button",
        "variants": {"intent": ["primary", "danger"], "size": ["sm", "lg"]},
        "styles": {
            "base": "flex",
            "intent": {"primary": "bg-blue", "danger": "bg-red"},
            "size": {"sm": "h-8", "lg": "h-12"},
        },
    }


@pytest.fixture
def primary_button(primary_button_data):
    return Blueprint.from_dict(primary_button_data)


@pytest.fixture
def static_box():
    """Blueprint without any variant axes."""
    return Blueprint.from_dict({"name": "Box", "styles": {"base": "p-4"}})


@pytest.fixture
def text_input():
    """Void host element with custom props."""
    return Blueprint.from_dict(
        {
            "name": "TextInput",
            "base": "input",
            "variants": {"size": ["md", "sm"]},
            "styles": {"base": "border", "size": {"md": "h-10", "sm": "h-8"}},
            "props": ["placeholder", "onChange"],
        }
    )
