from __future__ import annotations

import numpy as np
import pytest

from moeadpy.engine.algorithm.components.weight_vectors import load_or_generate_weight_vectors
from moeadpy.foundation.exceptions import ConfigurationError, InvalidWeightsError


@pytest.mark.parametrize(
    "pop_size,n_obj,method",
    [
        (10, 2, "lattice"),
        (100, 2, "lattice"),
        (91, 3, "lattice"),
        (50, 3, "lattice"),
        (37, 4, "lattice"),
        (64, 3, "random"),
    ],
)
def test_weights_on_unit_simplex(pop_size, n_obj, method):
    weights = load_or_generate_weight_vectors(pop_size, n_obj, method=method, rng=np.random.default_rng(0))
    assert weights.shape == (pop_size, n_obj)
    assert np.all(weights >= 0.0)
    np.testing.assert_allclose(weights.sum(axis=1), 1.0, atol=1e-12)


def test_lattice_weights_are_distinct_and_cover_corners():
    weights = load_or_generate_weight_vectors(15, 2)
    assert np.unique(weights, axis=0).shape[0] == 15
    assert weights[0].tolist() == [0.0, 1.0]
    assert weights[-1].tolist() == [1.0, 0.0]


def test_lattice_subset_is_distinct_for_many_objectives():
    weights = load_or_generate_weight_vectors(50, 3)
    assert np.unique(weights, axis=0).shape[0] == 50


def test_weights_are_read_only():
    weights = load_or_generate_weight_vectors(10, 2)
    with pytest.raises(ValueError):
        weights[0, 0] = 0.5


def test_single_objective_weights():
    weights = load_or_generate_weight_vectors(5, 1)
    assert weights.shape == (5, 1)
    assert np.all(weights == 1.0)


def test_random_weights_follow_seed():
    a = load_or_generate_weight_vectors(20, 3, method="random", rng=np.random.default_rng(4))
    b = load_or_generate_weight_vectors(20, 3, method="random", rng=np.random.default_rng(4))
    np.testing.assert_array_equal(a, b)


def test_unknown_method_rejected():
    with pytest.raises(ConfigurationError):
        load_or_generate_weight_vectors(10, 2, method="sobol")


def test_weights_roundtrip_through_csv(tmp_path):
    path = tmp_path / "weights" / "w.csv"
    generated = load_or_generate_weight_vectors(12, 3, path=str(path))
    assert path.exists()
    loaded = load_or_generate_weight_vectors(12, 3, path=str(path))
    np.testing.assert_allclose(loaded, generated)


def test_invalid_weight_file_rejected(tmp_path):
    path = tmp_path / "bad.csv"
    np.savetxt(path, np.array([[0.5, 0.6], [0.2, 0.8]]), delimiter=",")
    with pytest.raises(InvalidWeightsError):
        load_or_generate_weight_vectors(2, 2, path=str(path))


def test_short_weight_file_rejected(tmp_path):
    path = tmp_path / "short.csv"
    np.savetxt(path, np.array([[0.5, 0.5], [0.2, 0.8]]), delimiter=",")
    with pytest.raises(InvalidWeightsError):
        load_or_generate_weight_vectors(5, 2, path=str(path))
