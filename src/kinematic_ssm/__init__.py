"""State transition matrices for polynomial kinematic motion models."""

from kinematic_ssm.utils.config import apply_config

# Runs once at import time so float64 is in effect before any arrays exist.
# jax_enable_x64 is process-wide: it changes default dtypes for all JAX code.
apply_config()

from kinematic_ssm.errors import (  # noqa: E402
    InvalidDimensionError,
    InvalidOrderError,
    KinematicModelError,
)
from kinematic_ssm.models.poly import (  # noqa: E402
    PolynomialMotionModel,
    build_transition_matrix,
    infer_num_dim,
    polynomial_drift,
    polynomial_transition_matrix,
    propagate_state,
    scalar_transition_block,
    transition_matrix_batched,
)

__all__ = [
    "InvalidDimensionError",
    "InvalidOrderError",
    "KinematicModelError",
    "PolynomialMotionModel",
    "build_transition_matrix",
    "infer_num_dim",
    "polynomial_drift",
    "polynomial_transition_matrix",
    "propagate_state",
    "scalar_transition_block",
    "transition_matrix_batched",
]
