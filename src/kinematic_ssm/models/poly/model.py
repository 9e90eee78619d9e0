"""Polynomial motion model with a fixed order and dimensionality."""

from dataclasses import dataclass

import jax.numpy as jnp

from kinematic_ssm.errors import InvalidDimensionError
from kinematic_ssm.models.poly.core import (
    infer_num_dim,
    polynomial_drift,
    validate_num_dim,
    validate_order,
)
from kinematic_ssm.models.poly.transition import (
    polynomial_transition_matrix,
    transition_matrix_batched,
)


@dataclass(frozen=True)
class PolynomialMotionModel:
    """Constant p-th derivative motion in num_dim independent axes.

    order=1 is constant velocity, 2 constant acceleration, 3 constant jerk.
    Exposes the F(x, dt) / f(x, dt) pair trackers expect from a motion
    model: F is the transition matrix, f applies it to a state.
    """

    order: int = 1
    num_dim: int = 3

    def __post_init__(self):
        order = validate_order(self.order)
        num_dim = validate_num_dim(self.num_dim, order)
        # Normalise numpy ints etc. to plain ints
        object.__setattr__(self, "order", order)
        object.__setattr__(self, "num_dim", num_dim)

    @classmethod
    def from_state(cls, x, order: int) -> "PolynomialMotionModel":
        """Infer num_dim from the length of a stacked state."""
        return cls(order=order, num_dim=infer_num_dim(x, order))

    @property
    def state_dim(self) -> int:
        """Length of the stacked state, (order + 1) * num_dim."""
        return (self.order + 1) * self.num_dim

    @property
    def drift(self) -> jnp.ndarray:
        """Continuous-time generator A with expm(A*dt) == F(dt)."""
        return polynomial_drift(self.num_dim, self.order)

    def transition_matrix(self, dt) -> jnp.ndarray:
        return polynomial_transition_matrix(dt, self.num_dim, self.order)

    def transition_matrices(self, dt_array) -> jnp.ndarray:
        return transition_matrix_batched(dt_array, self.num_dim, self.order)

    def F(self, x, dt) -> jnp.ndarray:
        """Transition matrix for propagating x by dt."""
        self._check_state(x)
        return self.transition_matrix(dt)

    def f(self, x, dt) -> jnp.ndarray:
        """Propagate x(t) to x(t+dt)."""
        x = jnp.asarray(x)
        return self.F(x, dt) @ x

    def _check_state(self, x):
        shape = jnp.shape(jnp.asarray(x))
        state_length = shape[0] if shape else 0
        if state_length != self.state_dim:
            raise InvalidDimensionError(state_length, self.order, expected=self.state_dim)
