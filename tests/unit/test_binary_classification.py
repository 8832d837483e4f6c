import numpy as np
import pytest
from scipy import sparse

from layerkit.core.types import ShapeMismatchError
from layerkit.layers import BinaryClassificationLayer


def test_error_and_class_for_known_scenario():
    layer = BinaryClassificationLayer()
    activations = np.array([[0.2, 0.7], [0.9, 0.4]])
    target = np.array([[0.0, 1.0], [1.0, 0.0]])

    error = layer.calculate_error(activations, target)
    assert np.allclose(error, np.array([[0.2, -0.3], [-0.1, 0.4]]))
    assert np.array_equal(layer.output_class(activations), target)


def test_error_is_difference_and_zero_on_self():
    rng = np.random.default_rng(0)
    layer = BinaryClassificationLayer()
    for shape in [(1, 1), (3, 5), (8, 2)]:
        a = rng.uniform(0.0, 1.0, size=shape)
        t = rng.integers(0, 2, size=shape).astype(float)
        assert np.array_equal(layer.calculate_error(a, t), a - t)
        assert not np.any(layer.calculate_error(a, a))


def test_error_does_not_mutate_inputs():
    layer = BinaryClassificationLayer()
    a = np.array([[0.3, 0.8]])
    t = np.array([[1.0, 0.0]])
    layer.calculate_error(a, t)
    assert np.array_equal(a, np.array([[0.3, 0.8]]))
    assert np.array_equal(t, np.array([[1.0, 0.0]]))


def test_error_rejects_shape_mismatch():
    layer = BinaryClassificationLayer()
    with pytest.raises(ShapeMismatchError):
        layer.calculate_error(np.zeros((2, 3)), np.zeros((3, 2)))


def test_output_class_threshold_boundary():
    layer = BinaryClassificationLayer()
    activations = np.array([[0.5, 0.5000001, -3.0, 7.0]])
    out = layer.output_class(activations)
    assert np.array_equal(out, np.array([[0.0, 1.0, 0.0, 1.0]]))
    assert out.dtype == activations.dtype
    assert activations[0, 0] == 0.5


def test_output_class_is_idempotent():
    rng = np.random.default_rng(1)
    layer = BinaryClassificationLayer()
    activations = rng.normal(0.5, 1.0, size=(6, 4))
    once = layer.output_class(activations)
    assert np.array_equal(layer.output_class(once), once)
    assert set(np.unique(once)) <= {0.0, 1.0}


def test_sparse_inputs_match_dense():
    layer = BinaryClassificationLayer()
    dense = np.array([[0.0, 0.7, 0.0], [0.9, 0.0, 0.4]])
    target = np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0]])
    a_sp = sparse.csr_matrix(dense)
    t_sp = sparse.csr_matrix(target)

    error = layer.calculate_error(a_sp, t_sp)
    assert sparse.issparse(error)
    assert np.allclose(error.toarray(), dense - target)

    classes = layer.output_class(a_sp)
    assert sparse.issparse(classes)
    assert np.array_equal(classes.toarray(), layer.output_class(dense))


def test_unsupported_matrix_type_raises():
    layer = BinaryClassificationLayer()
    with pytest.raises(TypeError):
        layer.output_class([[0.1, 0.9]])


def test_mixed_dense_and_sparse_operands_give_dense_error():
    layer = BinaryClassificationLayer()
    activations = np.array([[0.2, 0.7], [0.9, 0.4]])
    target = np.array([[0.0, 1.0], [1.0, 0.0]])
    expected = activations - target

    error = layer.calculate_error(activations, sparse.csr_matrix(target))
    assert type(error) is np.ndarray
    assert np.allclose(error, expected)

    error = layer.calculate_error(sparse.csr_matrix(activations), target)
    assert type(error) is np.ndarray
    assert np.allclose(error, expected)

    with pytest.raises(ShapeMismatchError):
        layer.calculate_error(activations, sparse.csr_matrix(np.zeros((3, 2))))


def test_sparse_array_inputs_keep_array_flavour():
    layer = BinaryClassificationLayer()
    activations = sparse.csr_array(np.array([[0.0, 0.7], [0.9, 0.0]]))
    target = sparse.csr_array(np.array([[0.0, 1.0], [1.0, 0.0]]))
    assert isinstance(layer.output_class(activations), sparse.csr_array)
    assert isinstance(layer.calculate_error(activations, target), sparse.csr_array)
