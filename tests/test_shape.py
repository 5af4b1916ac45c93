import pytest

from ctensor.shape import ndim, normalize_dim, numel, shape_to_string


@pytest.mark.parametrize(
    "shape", [(1,), (6,), (4, 5), (3, 4, 5), (2, 3, 4, 5), (2, 2)]
)
def test_ndim_counts_given_dims(shape):
    assert ndim(shape) == len(shape)


def test_zero_terminates_shape():
    assert ndim((6, 0, 0, 0)) == ndim((6,))
    assert numel((6, 0, 0, 0)) == numel((6,))
    assert ndim((2, 0, 3, 0)) == ndim((2,))
    assert numel((2, 0, 3, 0)) == numel((2,))


def test_numel_of_single_dim_is_that_dim():
    assert numel((7,)) == 7
    assert numel((1,)) == 1


def test_numel_is_multiplicative():
    assert numel((2, 3, 4, 5)) == numel((2, 3)) * numel((4, 5))
    assert numel((3, 4, 5)) == numel((3,)) * numel((4, 5))


def test_empty_shape():
    assert ndim(()) == 0
    assert numel(()) == 1


def test_normalize_dim_positive_is_unchanged():
    shape = (2, 3, 4, 5)
    assert [normalize_dim(shape, d) for d in range(4)] == [0, 1, 2, 3]


def test_normalize_dim_negative_counts_from_end():
    shape = (3, 4, 5)
    for d in range(1, 4):
        assert normalize_dim(shape, -d) == len(shape) - d


@pytest.mark.parametrize("dim", [2, 5, -3, -10])
def test_normalize_dim_out_of_range(dim):
    with pytest.raises(IndexError):
        normalize_dim((4, 5), dim)


def test_shape_to_string_pads_to_four():
    assert shape_to_string((2, 3)) == "(2, 3, 0, 0)"
    assert shape_to_string((2, 3, 4, 5)) == "(2, 3, 4, 5)"


def test_shape_to_string_equal_for_padded_forms():
    assert shape_to_string((6,)) == shape_to_string((6, 0, 0, 0))


def test_too_many_dims_rejected():
    with pytest.raises(ValueError):
        numel((1, 2, 3, 4, 5))


def test_negative_dim_size_rejected():
    with pytest.raises(ValueError):
        ndim((2, -1))