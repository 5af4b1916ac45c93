"""Helpers for tensor shapes of up to four dimensions.

A shape is a sequence of positive ints. A zero marks the end of the used
dimensions, so ``(2, 3)`` and ``(2, 3, 0, 0)`` describe the same shape.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile

MAX_DIMS = 4

Shape = Sequence[int]


def _padded(shape: Shape) -> tuple[int, int, int, int]:
    dims = tuple(int(d) for d in shape)
    if len(dims) > MAX_DIMS:
        raise ValueError(f"shape {dims} has more than {MAX_DIMS} dimensions")
    if any(d < 0 for d in dims):
        raise ValueError(f"shape {dims} has a negative dimension")
    return dims + (0,) * (MAX_DIMS - len(dims))  # type: ignore[return-value]


def _used_dims(shape: Shape) -> tuple[int, ...]:
    return tuple(takewhile(lambda d: d != 0, _padded(shape)))


def numel(shape: Shape) -> int:
    """Return the number of elements: the product of the dimensions before the first zero."""
    total = 1
    for dim in _used_dims(shape):
        total *= dim
    return total


def ndim(shape: Shape) -> int:
    """Return the number of dimensions before the first zero."""
    return len(_used_dims(shape))


def normalize_dim(shape: Shape, dim: int) -> int:
    """Turn a possibly negative dimension index into a non-negative one.

    Raises IndexError when the index does not name a dimension of the shape.
    """
    count = ndim(shape)
    if dim < 0:
        dim += count
    if not 0 <= dim < count:
        raise IndexError(f"dim {dim} out of range")
    return dim


def shape_to_string(shape: Shape) -> str:
    """Render the shape with all four slots, e.g. ``(2, 3, 0, 0)``."""
    return "({}, {}, {}, {})".format(*_padded(shape))