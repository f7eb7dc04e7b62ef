"""Strategies for the probability that one Beta posterior exceeds another."""

from .approximation import approximate_probability, beta_moments, difference_moments
from .base import ComparisonResult
from .exact import exact_probability
from .integration import integrate_probability, support_bounds
from .simulation import simulate_probability

__all__ = [
    "ComparisonResult",
    "approximate_probability",
    "beta_moments",
    "difference_moments",
    "exact_probability",
    "integrate_probability",
    "simulate_probability",
    "support_bounds",
]
