"""Tensors of up to four dimensions with an optional gradient node."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from .shape import MAX_DIMS, ndim, numel

GradFn = Callable[["Tensor", int], "Tensor"]


def _compact(shape: Sequence[int]) -> tuple[int, ...]:
    """Return only the used dimensions of a shape (those before the first zero)."""
    count = ndim(shape)
    return tuple(int(d) for d in tuple(shape)[:count])


@dataclass(eq=False)
class GradNode:
    """Bookkeeping for automatic differentiation attached to a tensor."""

    grad: Optional[Tensor] = None
    grad_fn: Optional[GradFn] = None
    inputs: list[Tensor] = field(default_factory=list)
    name: str = ""
    params: tuple[int, ...] = ()

    @property
    def n_inputs(self) -> int:
        return len(self.inputs)


@dataclass(eq=False)
class Tensor:
    """A dense row-major tensor of floats.

    ``shape`` holds only the used dimensions; ``node`` is None when the
    tensor does not track gradients.
    """

    shape: tuple[int, ...]
    data: list[float]
    node: Optional[GradNode] = None

    def __post_init__(self) -> None:
        self.shape = _compact(self.shape)
        expected = numel(self.shape)
        if len(self.data) != expected:
            raise ValueError(
                f"shape {self.shape} needs {expected} values, got {len(self.data)}"
            )

    @property
    def requires_grad(self) -> bool:
        return self.node is not None

    @property
    def grad(self) -> Optional[Tensor]:
        return self.node.grad if self.node is not None else None

    def numel(self) -> int:
        """Return the number of elements."""
        return len(self.data)

    def transpose(self) -> Tensor:
        """Swap the first two dimensions; tensors with fewer than two are returned as is."""
        if len(self.shape) < 2:
            return self
        rows, cols, *rest = self.shape
        block = numel(rest)
        out = [0.0] * len(self.data)
        for i in range(rows):
            for j in range(cols):
                src = (i * cols + j) * block
                dst = (j * rows + i) * block
                out[dst:dst + block] = self.data[src:src + block]
        return Tensor((cols, rows, *rest), out)

    def _offset(self, index: Sequence[int]) -> int:
        if len(index) > MAX_DIMS:
            raise IndexError(f"at most {MAX_DIMS} indices, got {len(index)}")
        padded = tuple(index) + (0,) * (MAX_DIMS - len(index))
        offset = 0
        for axis, idx in enumerate(padded):
            if axis < len(self.shape):
                size = self.shape[axis]
                if not 0 <= idx < size:
                    raise IndexError(f"index {idx} out of range for dim {axis} of size {size}")
                offset = offset * size + idx
            elif idx != 0:
                raise IndexError(f"index {idx} given for unused dim {axis}")
        return offset

    def get(self, *args: int) -> float:
        """Return the element at the given indices; missing trailing indices are 0."""
        return self.data[self._offset(args)]

    def set(self, index: int | Sequence[int], value: float) -> None:
        """Store ``value`` at ``index`` (an int or a sequence of up to four ints)."""
        idx = (index,) if isinstance(index, int) else tuple(index)
        self.data[self._offset(idx)] = float(value)

    def detach(self) -> Tensor:
        """Return a tensor sharing this data but outside the computation graph."""
        detached = Tensor.__new__(Tensor)
        detached.shape = self.shape
        detached.data = self.data
        detached.node = None
        return detached

    def walk_graph(self, fn: Optional[Callable[[Tensor], None]] = None) -> int:
        """Call ``fn`` on every tracked tensor reachable from here; return how many."""
        if self.node is None:
            return 0
        if fn is not None:
            fn(self)
        return 1 + sum(t.walk_graph(fn) for t in self.node.inputs)

    def describe(self) -> str:
        """Return a readable rendering of values, shape and gradient."""
        values = ", ".join(f"{v:.4f}" for v in self.data)
        dims = ", ".join(str(d) for d in self.shape)
        text = f"Tensor([{values}], shape=({dims})"
        if self.node is not None:
            fn = self.node.grad_fn
            fn_name = getattr(fn, "__name__", repr(fn)) if fn is not None else "None"
            grad = self.node.grad.describe() if self.node.grad is not None else "Tensor()"
            text += f", grad_fn=<{fn_name}>, grad={grad}"
        return text + ")"

    __str__ = describe


def _make(shape: Sequence[int], values: list[float], requires_grad: bool) -> Tensor:
    return Tensor(tuple(shape), values, GradNode() if requires_grad else None)


def new_tensor(shape: Sequence[int], requires_grad: bool = False) -> Tensor:
    """Create a tensor filled with uniform random values in [-1, 1]."""
    count = numel(shape)
    return _make(shape, [random.uniform(-1.0, 1.0) for _ in range(count)], requires_grad)


def zeros(shape: Sequence[int], requires_grad: bool = False) -> Tensor:
    """Create a tensor filled with zeros."""
    return _make(shape, [0.0] * numel(shape), requires_grad)


def ones(shape: Sequence[int], requires_grad: bool = False) -> Tensor:
    """Create a tensor filled with ones."""
    return _make(shape, [1.0] * numel(shape), requires_grad)


def from_values(
    shape: Sequence[int], values: Iterable[float], requires_grad: bool = False
) -> Tensor:
    """Create a tensor of the given shape from row-major values."""
    return _make(shape, [float(v) for v in values], requires_grad)


def zero_grad(params: Iterable[Tensor]) -> None:
    """Reset the gradient of every tracked tensor to zeros of its shape."""
    for t in params:
        if t.node is not None:
            t.node.grad = zeros(t.shape)