"""Polynomial kinematic motion models in JAX.

This module builds state transition matrices for constant velocity,
constant acceleration, constant jerk, ... models in any number of spatial
dimensions, for use in the predict step of linear trackers.
"""

from kinematic_ssm.models.poly.core import (
    infer_num_dim,
    polynomial_drift,
    validate_num_dim,
    validate_order,
)
from kinematic_ssm.models.poly.model import PolynomialMotionModel
from kinematic_ssm.models.poly.transition import (
    build_transition_matrix,
    polynomial_transition_matrix,
    propagate_state,
    scalar_transition_block,
    transition_matrix_batched,
)

__all__ = [
    # Core utilities
    "infer_num_dim",
    "polynomial_drift",
    "validate_num_dim",
    "validate_order",
    # Transition matrices
    "build_transition_matrix",
    "polynomial_transition_matrix",
    "propagate_state",
    "scalar_transition_block",
    "transition_matrix_batched",
    # Model
    "PolynomialMotionModel",
]
