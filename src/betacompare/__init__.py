"""Bayesian comparison of two Beta-distributed success rates."""

__all__ = [
    "ComparisonResult",
    "ConfigurationError",
    "CredibleInterval",
    "DEFAULT_CONFIDENCE_LEVEL",
    "DimensionError",
    "NumericalStabilityWarning",
    "Posterior",
    "Prior",
    "Strategy",
    "ValidationError",
    "approximate_probability",
    "batch_credible_interval",
    "compare",
    "compare_all",
    "credible_interval",
    "credible_intervals_df",
    "exact_probability",
    "integrate_probability",
    "simulate_probability",
    "support_bounds",
]

import logging

from betacompare.comparators import (
    ComparisonResult,
    approximate_probability,
    exact_probability,
    integrate_probability,
    simulate_probability,
    support_bounds,
)
from betacompare.errors import (
    ConfigurationError,
    DimensionError,
    NumericalStabilityWarning,
    ValidationError,
)
from betacompare.facade import Strategy, compare, compare_all
from betacompare.interval import (
    DEFAULT_CONFIDENCE_LEVEL,
    CredibleInterval,
    batch_credible_interval,
    credible_interval,
    credible_intervals_df,
)
from betacompare.posterior import Posterior, Prior

# Attach a NullHandler to avoid logging warnings on import
logging.getLogger(__name__).addHandler(logging.NullHandler())
