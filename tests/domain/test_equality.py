"""Tests for type-strict deep equality."""

import ctypes
import math
from decimal import Decimal

import pytest

from valchain.domain.equality import deep_equal
from valchain.domain.kinds import Ref


class TestDeepEqual:
    @pytest.mark.parametrize(
        "left,right",
        [
            ("hello", "hello"),
            (1, 1),
            ((), ()),
            (("hello",), ("hello",)),
            ([], []),
            (["world"], ["world"]),
            ({}, {}),
            ({"hello": "world"}, {"hello": "world"}),
            ({"a": [1, {"b": (2,)}]}, {"a": [1, {"b": (2,)}]}),
            (None, None),
            (Ref(["a"]), Ref(["a"])),
            ({1, 2}, {2, 1}),
            (frozenset({(1, "a")}), frozenset({(1, "a")})),
            ({(1, 2): "x"}, {(1, 2): "x"}),
            (ctypes.c_uint8(3), ctypes.c_uint8(3)),
        ],
    )
    def test_equal(self, left: object, right: object) -> None:
        assert deep_equal(left, right)

    @pytest.mark.parametrize(
        "left,right",
        [
            ("hello", "world"),
            (["hello"], ["world"]),
            ({"hello": "world"}, {"world": "hello"}),
            ([1], [1, 1]),
            (1, 1.0),
            (1, True),
            ([1], (1,)),
            ({"a": 1}, {"a": 1.0}),
            ([], None),
            (Ref(1), Ref(2)),
            ({1, 2}, {1.0, 2.0}),
            ({1, 0}, {True, False}),
            (frozenset({1}), frozenset({1.0})),
            (frozenset({(1,)}), frozenset({(1.0,)})),
            ({1, 2}, {1, 2, 3}),
            ({1: "a"}, {True: "a"}),
            ({1: "a"}, {1.0: "a"}),
            ({(1, 2): "x"}, {(1.0, 2): "x"}),
            ({1: "a", 2: "b"}, {1: "a", 3: "b"}),
            (ctypes.c_uint8(3), ctypes.c_uint16(3)),
        ],
    )
    def test_not_equal(self, left: object, right: object) -> None:
        assert not deep_equal(left, right)

    def test_nan_is_never_equal(self) -> None:
        assert not deep_equal(math.nan, math.nan)

    def test_decimal_nan_is_never_equal(self) -> None:
        assert not deep_equal(Decimal("NaN"), Decimal("NaN"))

    def test_signaling_nan_does_not_raise(self) -> None:
        assert not deep_equal(Decimal("sNaN"), Decimal("sNaN"))
        assert not deep_equal(Decimal("sNaN"), Decimal(0))
        assert not deep_equal([Decimal(1)], [Decimal("sNaN")])
