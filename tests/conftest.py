"""Shared fixtures for docview tests."""

import pytest


@pytest.fixture
def sample_docs():
    """A small documentation.json payload with every entry kind."""
    return [
        {
            "name": "Geometry",
            "comment": "Shapes on a plane.\n\n# Points\n@docs Point, origin\n\n# Operators\n@docs (<+>)",
            "aliases": [
                {
                    "name": "Point",
                    "comment": "A point.",
                    "args": [],
                    "type": "{ x : Basics.Float, y : Basics.Float }",
                }
            ],
            "types": [
                {
                    "name": "Shape",
                    "comment": "",
                    "args": [],
                    "cases": [
                        ["Circle", ["Geometry.Point", "Basics.Float"]],
                        ["Polygon", ["List.List Geometry.Point"]],
                    ],
                }
            ],
            "values": [
                {"name": "origin", "comment": "The origin.", "type": "Geometry.Point"},
            ],
            "binops": [
                {
                    "name": "<+>",
                    "comment": "Add points.",
                    "type": "Geometry.Point -> Geometry.Point -> Geometry.Point",
                    "associativity": "left",
                    "precedence": 6,
                }
            ],
        }
    ]
