"""State transition matrices for polynomial kinematic models.

A model of order p keeps position and its first p derivatives for each of
num_dim spatial axes, stacked as [position; velocity; acceleration; ...]
with every derivative spanning num_dim contiguous entries. Under constant
p-th derivative the state evolves as x(t+dt) = F x(t), where

1. Scalar block: F1[0, k] = dt^k / k!, and row r is row 0 shifted right by r
   (zero padded), i.e. F1[r, r:] = F1[0, :p+1-r]
2. Multi-axis: F = kron(F1, I_num_dim), so axes never mix

This is the truncated Taylor series of expm(A*dt) for the nilpotent drift
returned by polynomial_drift (Zarchan & Musoff, Fundamentals of Kalman
Filtering, ch. 4). It serves both discretized continuous-time and direct
discrete-time models.

dt is traceable (jit/vmap friendly); order and num_dim must be static ints.
Returned arrays follow NumPy row-major semantics: x_next = F @ x.
"""

import logging

import jax.numpy as jnp
from jax import vmap

from kinematic_ssm.models.poly.core import infer_num_dim, validate_num_dim, validate_order

logger = logging.getLogger(__name__)


def scalar_transition_block(dt, order) -> jnp.ndarray:
    """Single-axis transition block F1.

    Args:
        dt: Propagation interval (any real, including 0 and negative)
        order: Polynomial order >= 0

    Returns:
        F1: (order+1, order+1) upper-triangular Toeplitz matrix
    """
    order = validate_order(order)
    num_el = order + 1

    # Running product dt/1 * dt/2 * ... * dt/k == dt^k / k!
    ratios = jnp.concatenate([jnp.ones(1), dt / jnp.arange(1.0, num_el)])
    first_row = jnp.cumprod(ratios)

    F1 = jnp.zeros((num_el, num_el), dtype=first_row.dtype)
    F1 = F1.at[0].set(first_row)
    for row in range(1, num_el):
        F1 = F1.at[row, row:].set(first_row[: num_el - row])
    return F1


def polynomial_transition_matrix(dt, num_dim, order) -> jnp.ndarray:
    """Transition matrix for num_dim independent axes.

    Args:
        dt: Propagation interval
        num_dim: Number of spatial axes (> 0)
        order: Polynomial order >= 0

    Returns:
        F: ((order+1)*num_dim, (order+1)*num_dim) transition matrix
    """
    order = validate_order(order)
    num_dim = validate_num_dim(num_dim, order)

    F1 = scalar_transition_block(dt, order)
    logger.debug("Assembling transition matrix: order=%d, num_dim=%d", order, num_dim)
    return jnp.kron(F1, jnp.eye(num_dim, dtype=F1.dtype))


def build_transition_matrix(dt, reference_state, order) -> jnp.ndarray:
    """Transition matrix sized to match a reference state.

    The reference state only supplies its length L (num_dim = L/(order+1)),
    which lets this act as the Jacobian of a state transition function
    f(dt, x).

    Args:
        dt: Propagation interval
        reference_state: Stacked state of length L; values are ignored
        order: Polynomial order >= 0 (1 = constant velocity,
            2 = constant acceleration, 3 = constant jerk, ...)

    Returns:
        F: (L, L) transition matrix

    Raises:
        InvalidOrderError: order is negative or not an integer
        InvalidDimensionError: L is not a positive multiple of order + 1
    """
    num_dim = infer_num_dim(reference_state, order)
    return polynomial_transition_matrix(dt, num_dim, order)


def transition_matrix_batched(dt_array, num_dim, order) -> jnp.ndarray:
    """Transition matrices over an array of time intervals.

    Uses jax.vmap over the dt dimension.

    Args:
        dt_array: (K,) array of time intervals
        num_dim: Number of spatial axes
        order: Polynomial order >= 0

    Returns:
        F: (K, L, L) stacked transition matrices
    """
    # Validate eagerly so errors surface outside the vmap trace
    order = validate_order(order)
    num_dim = validate_num_dim(num_dim, order)
    return vmap(lambda dt: polynomial_transition_matrix(dt, num_dim, order))(
        jnp.asarray(dt_array)
    )


def propagate_state(x, dt, order) -> jnp.ndarray:
    """Propagate a stacked state forward by dt: x(t+dt) = F x(t).

    Accepts (L,) vectors or (L, 1) columns; the output keeps the input shape.
    """
    x = jnp.asarray(x)
    F = build_transition_matrix(dt, x, order)
    return F @ x
