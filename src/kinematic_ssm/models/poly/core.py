"""Core helpers for polynomial kinematic models.

Contains input validation and the continuous-time generator. Nothing here
depends on the time interval.
"""

import operator

import jax.numpy as jnp

from kinematic_ssm.errors import InvalidDimensionError, InvalidOrderError


def validate_order(order) -> int:
    """Return order as a plain int, or raise InvalidOrderError.

    Booleans are rejected even though they are ints.
    """
    if isinstance(order, bool):
        raise InvalidOrderError(order)
    try:
        order = operator.index(order)
    except TypeError:
        raise InvalidOrderError(order) from None
    if order < 0:
        raise InvalidOrderError(order)
    return order


def validate_num_dim(num_dim, order: int) -> int:
    """Return num_dim as a plain int, or raise InvalidDimensionError."""
    if isinstance(num_dim, bool):
        raise InvalidDimensionError(num_dim, order)
    try:
        num_dim = operator.index(num_dim)
    except TypeError:
        raise InvalidDimensionError(num_dim, order) from None
    if num_dim <= 0:
        raise InvalidDimensionError(num_dim * (order + 1), order)
    return num_dim


def infer_num_dim(reference_state, order) -> int:
    """Number of spatial axes implied by a stacked state vector.

    Only the length of reference_state is used (its first axis, so both
    (L,) and (L, 1) column vectors work); the values are never read.

    Args:
        reference_state: State stacked [position; velocity; ...], length L
        order: Polynomial order >= 0

    Returns:
        num_dim = L / (order + 1)

    Raises:
        InvalidOrderError: order is negative or not an integer
        InvalidDimensionError: L is zero or not divisible by order + 1
    """
    order = validate_order(order)
    shape = jnp.shape(jnp.asarray(reference_state))
    state_length = shape[0] if shape else 0

    num_el = order + 1
    if state_length == 0 or state_length % num_el != 0:
        raise InvalidDimensionError(state_length, order)
    return state_length // num_el


def polynomial_drift(num_dim: int, order: int) -> jnp.ndarray:
    """Continuous-time generator A of the polynomial motion model.

    Each derivative drives the one below it: dx_r/dt = x_{r+1}. In the
    stacked layout that is a superdiagonal of ones in the scalar block,
    replicated over axes with a Kronecker product. A is nilpotent
    (A^{order+1} = 0), so expm(A*dt) is exactly the truncated Taylor series
    built by build_transition_matrix.

    Args:
        num_dim: Number of spatial axes
        order: Polynomial order >= 0

    Returns:
        A: ((order+1)*num_dim, (order+1)*num_dim) drift matrix
    """
    order = validate_order(order)
    num_dim = validate_num_dim(num_dim, order)
    A1 = jnp.eye(order + 1, k=1)
    return jnp.kron(A1, jnp.eye(num_dim))
