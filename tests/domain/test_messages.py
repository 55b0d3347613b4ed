"""Tests for default message rendering."""

from decimal import Decimal

import pytest

from valchain.domain import messages


class TestRender:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, "0"),
            (10.0, "10"),
            (-3.0, "-3"),
            (1e20, "100000000000000000000"),
            (0.5, "0.5"),
            (2.25, "2.25"),
            (1e21, "1e+21"),
            (float("inf"), "inf"),
            (10, "10"),
            (Decimal("10.0"), "10.0"),
            ("hello", "hello"),
            (["world"], "['world']"),
            ([1.0], "[1.0]"),
            (None, "None"),
        ],
    )
    def test_render(self, value: object, expected: str) -> None:
        assert messages.render(value) == expected

    def test_bound_template(self) -> None:
        text = messages.BETWEEN.format(name="x", min=messages.render(0.0), max=messages.render(10.0))
        assert text == "x must be between 0 and 10."
