# ctensor

A small, dependency-free library of dense float tensors with up to four
dimensions. A tensor can carry a gradient node (`GradNode`) that holds its
gradient, the function that computes local gradients, and the input tensors
it was made from. The package also has an evaluation-mode switch and ships
the classic Iris dataset.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Shapes (`ctensor.shape`)

A shape is a sequence of up to four non-negative sizes. A zero marks the end
of the used dimensions, so `(2, 3)` and `(2, 3, 0, 0)` are the same shape.

```python
from ctensor.shape import numel, ndim, normalize_dim, shape_to_string

numel((2, 3))                 # 6
ndim((2, 3, 0, 0))            # 2
normalize_dim((2, 3), -1)     # 1
shape_to_string((2, 3))       # "(2, 3, 0, 0)"
```

`normalize_dim` raises `IndexError` when the dimension is out of range. A
shape with more than four sizes, or a negative size, raises `ValueError`.

## Tensors (`ctensor.tensor`)

```python
from ctensor.tensor import from_values, zeros, ones, new_tensor, zero_grad

t = from_values((2, 2), [1.0, 2.0, 3.0, 4.0])
t.get(1, 0)                   # 3.0
t.set((0, 1), 5.0)
t.get(0, 1)                   # 5.0
t.numel()                     # 4
t.transpose()                 # a new tensor with the first two dimensions swapped
print(t.describe())           # Tensor([1.0000, 5.0000, 3.0000, 4.0000], shape=(2, 2))

z = zeros((3,), requires_grad=True)
o = ones((2, 2))
r = new_tensor((4,))          # uniform random values in [-1, 1]
```

- Data is stored row-major in `Tensor.data`; `Tensor.shape` holds only the
  used dimensions. `from_values` raises `ValueError` if the number of values
  does not match the shape.
- `get` and `set` raise `IndexError` for indices outside the shape.
  Missing trailing indices count as 0.
- `requires_grad=True` attaches an empty `GradNode`; `requires_grad` and
  `grad` are read-only properties on the tensor.
- `detach()` returns a tensor that shares the data but has no gradient node.
- `walk_graph(fn)` calls `fn` on every tensor with a gradient node reachable
  through the nodes' `inputs`, and returns how many it visited.
- `zero_grad(params)` sets the gradient of each tracked tensor to zeros of
  its shape.

## Evaluation mode (`ctensor.context`)

```python
from ctensor.context import eval_mode, is_eval

with eval_mode():
    assert is_eval()
```

`begin_eval()` and `end_eval()` do the same by hand and nest; `end_eval()`
outside evaluation mode raises `RuntimeError`.

## Iris dataset (`ctensor.iris`)

```python
from ctensor.iris import load_iris_dataset

features, labels = load_iris_dataset()
len(features)   # 150, each row holds four measurements
labels[0]       # 0; classes are 0, 1 and 2, fifty samples each
```

## What this package does not do

There are no arithmetic or matrix operations on tensors, no backward pass,
no activation, loss or layer functions, no optimizers and no gradient
clipping. `GradNode` only stores gradient bookkeeping; nothing in the
package fills in `grad_fn` or `inputs` for you.