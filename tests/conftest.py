"""Shared fixtures for kinematic model tests."""

import jax.numpy as jnp
import pytest


@pytest.fixture
def reference_state_factory():
    """Factory for stacked reference states of a given shape.

    Usage:
        def test_something(reference_state_factory):
            x = reference_state_factory(num_dim=3, order=2)  # length 9
    """

    def _make(num_dim: int, order: int, column: bool = False) -> jnp.ndarray:
        length = (order + 1) * num_dim
        # Values are arbitrary; only the length is ever used
        x = jnp.arange(length) + 1.0
        return x.reshape(length, 1) if column else x

    return _make
