"""Type-strict deep equality used by the ``equal``/``not_equal`` rules.

Python's ``==`` treats ``1``, ``1.0`` and ``True`` as equal.  Validation
compares values the way they were submitted, so both sides must have the
same concrete type at every level of nesting, mapping keys and set
members included.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence, Set
from typing import Any

from valchain.domain.kinds import Ref, is_nan, scalar

# Compared with ``==`` directly; iterating them would yield chars/ints.
_FLAT_SEQUENCES: tuple[type, ...] = (str, bytes, bytearray)

_MISSING = object()


def _strict_key(value: Hashable) -> Hashable:
    """Tag a hashable value with its type, recursing into tuples and frozensets.

    Two tags are equal only when :func:`deep_equal` would hold for the
    tagged values, so ``1``, ``1.0`` and ``True`` get distinct tags.
    """
    if isinstance(value, tuple):
        return (tuple, tuple(_strict_key(item) for item in value))
    if isinstance(value, frozenset):
        return (frozenset, frozenset(_strict_key(item) for item in value))
    return (type(value), value)


def deep_equal(left: Any, right: Any) -> bool:
    """Return True if *left* and *right* have the same type and equal contents.

    Mappings pair keys by type and value, then compare values recursively;
    sets compare members by type and value; sequences compare element-wise;
    ``Ref`` compares its targets.  NaN never equals itself.

    Examples:
        >>> deep_equal([1, 2], [1, 2])
        True
        >>> deep_equal(1, 1.0)
        False
        >>> deep_equal({"a": [1]}, {"a": [1.0]})
        False
        >>> deep_equal({1: "a"}, {True: "a"})
        False
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, Ref):
        return deep_equal(left.target, right.target)
    if isinstance(left, Mapping):
        if len(left) != len(right):
            return False
        keys = {_strict_key(key): key for key in right}
        for key in left:
            other = keys.get(_strict_key(key), _MISSING)
            if other is _MISSING or not deep_equal(left[key], right[other]):
                return False
        return True
    if isinstance(left, Set):
        if len(left) != len(right):
            return False
        return {_strict_key(item) for item in left} == {_strict_key(item) for item in right}
    if isinstance(left, Sequence) and not isinstance(left, _FLAT_SEQUENCES):
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right, strict=True))
    left, right = scalar(left), scalar(right)
    if is_nan(left) or is_nan(right):
        return False
    return bool(left == right)
