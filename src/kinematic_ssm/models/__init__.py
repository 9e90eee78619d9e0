"""Kinematic motion models."""

from .poly import (
    PolynomialMotionModel,
    build_transition_matrix,
    polynomial_transition_matrix,
)

__all__ = [
    "PolynomialMotionModel",
    "build_transition_matrix",
    "polynomial_transition_matrix",
]
