"""Tests for PolynomialMotionModel."""

import dataclasses

import jax.numpy as jnp
import jax.scipy.linalg as jla
import numpy as np
import pytest

from kinematic_ssm.errors import InvalidDimensionError, InvalidOrderError
from kinematic_ssm.models.poly import PolynomialMotionModel, polynomial_transition_matrix


class TestConstruction:
    def test_defaults(self):
        model = PolynomialMotionModel()
        assert model.order == 1
        assert model.num_dim == 3
        assert model.state_dim == 6

    def test_from_state(self):
        model = PolynomialMotionModel.from_state(jnp.zeros(9), order=2)
        assert model.num_dim == 3
        assert model.state_dim == 9

    def test_from_state_indivisible_raises(self):
        with pytest.raises(InvalidDimensionError):
            PolynomialMotionModel.from_state(jnp.zeros(5), order=1)

    def test_numpy_ints_normalised(self):
        model = PolynomialMotionModel(order=np.int64(2), num_dim=np.int32(2))
        assert type(model.order) is int
        assert type(model.num_dim) is int

    def test_negative_order_raises(self):
        with pytest.raises(InvalidOrderError):
            PolynomialMotionModel(order=-1, num_dim=2)

    def test_zero_dims_raises(self):
        with pytest.raises(InvalidDimensionError):
            PolynomialMotionModel(order=1, num_dim=0)

    def test_bool_dims_raises(self):
        with pytest.raises(InvalidDimensionError):
            PolynomialMotionModel(order=1, num_dim=True)

    def test_from_list_state(self):
        model = PolynomialMotionModel.from_state([0.0] * 6, order=1)
        assert model.num_dim == 3

    def test_frozen(self):
        model = PolynomialMotionModel(order=1, num_dim=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            model.order = 2


class TestMotionModelInterface:
    """F(x, dt) and f(x, dt) as consumed by a predict step."""

    def test_F_matches_functional(self):
        model = PolynomialMotionModel(order=2, num_dim=3)
        F = model.F(jnp.zeros(9), 0.4)
        assert jnp.array_equal(F, polynomial_transition_matrix(0.4, 3, 2))

    def test_F_wrong_state_length_raises(self):
        model = PolynomialMotionModel(order=1, num_dim=2)
        with pytest.raises(InvalidDimensionError, match="does not match"):
            model.F(jnp.zeros(6), 1.0)

    def test_F_list_state(self):
        model = PolynomialMotionModel(order=1, num_dim=2)
        F = model.F([0.0, 0.0, 0.0, 0.0], 1.0)
        assert F.shape == (4, 4)

    def test_f_list_state(self):
        model = PolynomialMotionModel(order=1, num_dim=1)
        assert jnp.allclose(model.f([1.0, 2.0], 3.0), jnp.array([7.0, 2.0]))

    def test_f_constant_velocity(self):
        model = PolynomialMotionModel(order=1, num_dim=2)
        x = jnp.array([0.0, 1.0, 2.0, -1.0])
        assert jnp.allclose(model.f(x, 0.5), jnp.array([1.0, 0.5, 2.0, -1.0]))

    def test_drift_exponential_is_transition(self):
        model = PolynomialMotionModel(order=3, num_dim=2)
        assert jnp.allclose(
            jla.expm(model.drift * 0.6), model.transition_matrix(0.6), rtol=1e-8, atol=1e-10
        )

    def test_transition_matrices(self):
        model = PolynomialMotionModel(order=1, num_dim=3)
        F = model.transition_matrices(jnp.array([0.0, 1.0]))
        assert F.shape == (2, 6, 6)
        assert jnp.array_equal(F[0], jnp.eye(6))

    def test_predict_covariance(self):
        """F P F' stays symmetric positive definite."""
        model = PolynomialMotionModel(order=2, num_dim=2)
        F = model.transition_matrix(0.25)
        P = jnp.eye(model.state_dim)
        P_pred = F @ P @ F.T
        assert jnp.allclose(P_pred, P_pred.T)
        assert jnp.all(jnp.linalg.eigvalsh(P_pred) > 0)
