from __future__ import annotations

import json

import numpy as np
import pytest

from moeadpy.engine.algorithm.config import MOEADConfig, resolve_bounds
from moeadpy.foundation.exceptions import BoundsError, ConfigurationError, InvalidParameterError


def test_defaults():
    cfg = MOEADConfig()
    assert cfg.pop_size == 100
    assert cfg.crossover_prob == 0.6
    assert cfg.mutation_prob == 0.3
    assert cfg.mutation_strength == 1e-3
    assert cfg.neighbourhood_size == 50
    assert cfg.lower_bound == [0.0]
    assert cfg.upper_bound == [1.0]


def test_json_roundtrip():
    cfg = MOEADConfig(pop_size=30, neighbourhood_size=5, lower_bound=[-1.0, -2.0], upper_bound=[1.0, 2.0], seed=3)
    restored = MOEADConfig.from_json(cfg.to_json())
    assert restored == cfg
    assert json.loads(cfg.to_json())["pop_size"] == 30


def test_to_dict_converts_array_bounds():
    cfg = MOEADConfig(lower_bound=np.array([-4.0]), upper_bound=np.array([4.0]))
    data = cfg.to_dict()
    assert data["lower_bound"] == [-4.0]
    assert data["upper_bound"] == [4.0]
    json.dumps(data)


def test_unknown_keys_rejected():
    with pytest.raises(ConfigurationError) as info:
        MOEADConfig.from_dict({"pop_size": 10, "popsize": 10})
    assert "popsize" in str(info.value)


def test_fields_are_mutable_and_checked_late():
    cfg = MOEADConfig()
    cfg.crossover_prob = 2.0
    with pytest.raises(InvalidParameterError):
        cfg.validate(n_var=1)
    cfg.crossover_prob = 0.9
    cfg.validate(n_var=1)


def test_replace_returns_new_config():
    cfg = MOEADConfig()
    other = cfg.replace(pop_size=12)
    assert other.pop_size == 12
    assert cfg.pop_size == 100


@pytest.mark.parametrize(
    "changes",
    [
        {"pop_size": 1},
        {"pop_size": 10.5},
        {"crossover_prob": -0.1},
        {"mutation_prob": 1.1},
        {"mutation_strength": -1.0},
        {"mutation_strength": float("nan")},
        {"neighbourhood_size": 0},
        {"max_generations": -1},
        {"weights": "sobol"},
        {"weight_divisions": 0},
    ],
)
def test_invalid_parameters_rejected(changes):
    cfg = MOEADConfig(**changes)
    with pytest.raises(ConfigurationError):
        cfg.validate(n_var=2)


def test_bounds_broadcast_from_length_one():
    xl, xu = resolve_bounds([-2.0], [3.0], 4)
    assert xl.tolist() == [-2.0] * 4
    assert xu.tolist() == [3.0] * 4


def test_bounds_length_mismatch_rejected():
    with pytest.raises(BoundsError):
        resolve_bounds([0.0, 0.0], [1.0], 3)


def test_inverted_bounds_rejected():
    with pytest.raises(BoundsError):
        resolve_bounds([1.0, 0.0], [0.0, 1.0], 2)


def test_non_finite_bounds_rejected():
    with pytest.raises(BoundsError):
        resolve_bounds([-np.inf], [1.0], 2)
