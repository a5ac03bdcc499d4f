"""Pytest configuration and fixtures for formatter tests."""

from typing import Any

import pytest

from tool_output.values import ABSENT


@pytest.fixture
def product_result() -> dict[str, Any]:
    """Product as returned by a resource accessor."""
    return {
        "productName": "Widget",
        "tags": ["a", "b"],
        "variants": [{"sku": "X1", "inStock": True}],
        "description": ABSENT,
    }


@pytest.fixture
def nested_result() -> dict[str, Any]:
    """Objects and arrays nested several levels deep."""
    return {
        "l1Object": {
            "l2Object": {
                "l3Object": {
                    "l4StringVal": "my string",
                    "l4Array": [1, 2, 3],
                },
            },
            "l2Object2": {
                "l3Array": [
                    {
                        "l4StringVal": "my string",
                        "l4Array": [
                            {"l5StringVal": "my string"},
                            {"l5StringVal2": "my string"},
                        ],
                    },
                ],
            },
        },
        "l1Array": [
            {"l2StringVal": "my string", "l2NumberVal": 123},
            {"l2StringVal": "my second string", "l2NumberVal": 321},
        ],
    }
