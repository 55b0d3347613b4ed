"""Runtime kind classification for validated values.

Every chain classifies its value exactly once, at construction, into one of
the :class:`Kind` members.  Rules then dispatch on the kind instead of
re-inspecting the value's type.

Python has no unsigned integers or pointers of its own, so two families are
borrowed:

- UINT: unsigned ``ctypes`` scalars (``c_uint8`` … ``c_uint64``).
- POINTER: :class:`Ref`, an immutable box around another value.
"""

from __future__ import annotations

import array
import asyncio
import ctypes
import math
import numbers
import queue
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Kind(StrEnum):
    """Coarse runtime shape of a validated value."""

    NIL = "nil"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    ARRAY = "array"
    SLICE = "slice"
    MAP = "map"
    POINTER = "pointer"
    CHANNEL = "channel"
    OTHER = "other"


NUMERIC_KINDS: frozenset[Kind] = frozenset({Kind.INT, Kind.UINT, Kind.FLOAT})
SIZED_KINDS: frozenset[Kind] = frozenset({Kind.ARRAY, Kind.SLICE, Kind.MAP, Kind.CHANNEL})


@dataclass(frozen=True, slots=True)
class Ref(Generic[T]):
    """A pointer-like reference to another value.

    ``Ref(None)`` is a nil pointer: it classifies as POINTER, not NIL, the
    same way a typed nil pointer is still a pointer.
    """

    target: T | None = None


# --- ctypes scalar families (aliases such as c_uint64 collapse onto these) ---

_CTYPES_UNSIGNED: tuple[type, ...] = (
    ctypes.c_ubyte,
    ctypes.c_ushort,
    ctypes.c_uint,
    ctypes.c_ulong,
    ctypes.c_ulonglong,
)
_CTYPES_SIGNED: tuple[type, ...] = (
    ctypes.c_byte,
    ctypes.c_short,
    ctypes.c_int,
    ctypes.c_long,
    ctypes.c_longlong,
)
_CTYPES_FLOAT: tuple[type, ...] = (ctypes.c_float, ctypes.c_double, ctypes.c_longdouble)
_CTYPES_SCALARS: tuple[type, ...] = (
    ctypes.c_bool,
    *_CTYPES_UNSIGNED,
    *_CTYPES_SIGNED,
    *_CTYPES_FLOAT,
)

# Fixed-size collections; their mutable counterparts classify as SLICE.
_ARRAY_TYPES: tuple[type, ...] = (tuple, bytes, frozenset, range)
_SLICE_TYPES: tuple[type, ...] = (bytearray, array.array, Sequence, Set)
_CHANNEL_TYPES: tuple[type, ...] = (queue.Queue, queue.SimpleQueue, asyncio.Queue)


def classify(value: Any) -> Kind:
    """Return the :class:`Kind` of *value*.

    Order matters: ``bool`` is an ``int`` subclass and ``str`` is a
    ``Sequence``, so both are tested before the broader families.
    """
    if value is None:
        return Kind.NIL
    if isinstance(value, Ref):
        return Kind.POINTER
    if isinstance(value, (bool, ctypes.c_bool)):
        return Kind.BOOL
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, _CTYPES_UNSIGNED):
        return Kind.UINT
    if isinstance(value, (numbers.Integral, *_CTYPES_SIGNED)):
        return Kind.INT
    if isinstance(value, (numbers.Real, Decimal, *_CTYPES_FLOAT)):
        return Kind.FLOAT
    if isinstance(value, numbers.Complex):
        return Kind.COMPLEX
    if isinstance(value, Mapping):
        return Kind.MAP
    if isinstance(value, _ARRAY_TYPES):
        return Kind.ARRAY
    if isinstance(value, _SLICE_TYPES):
        return Kind.SLICE
    if isinstance(value, _CHANNEL_TYPES):
        return Kind.CHANNEL
    return Kind.OTHER


def scalar(value: Any) -> Any:
    """Unbox a ``ctypes`` scalar to its Python value; other values pass through."""
    if isinstance(value, _CTYPES_SCALARS):
        return value.value
    return value


def is_nan(value: Any) -> bool:
    """True for a float NaN or a quiet or signaling ``Decimal`` NaN.

    ``Decimal`` NaNs raise ``InvalidOperation`` on ordering comparisons (and
    signaling ones on ``==`` too), so callers test for them before comparing.
    """
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def size_of(value: Any, kind: Kind) -> int | None:
    """Return the element count of a sized value, or None if it has none.

    A POINTER only has a size when it points at an ARRAY.  Channels report
    the number of queued items.
    """
    if kind is Kind.CHANNEL:
        return int(value.qsize())
    if kind in SIZED_KINDS:
        return len(value)
    if kind is Kind.POINTER:
        target = value.target
        if classify(target) is Kind.ARRAY:
            return len(target)
    return None


def is_blank(text: str) -> bool:
    """True if *text* is empty or contains only whitespace."""
    return not text or text.isspace()
