"""
Closed-form probability that one Beta posterior beats another.

For :math:`p_A \\sim Beta(\\alpha_A, \\beta_A)` and
:math:`p_B \\sim Beta(\\alpha_B, \\beta_B)` with integer :math:`\\alpha_B`,

.. math::

    P(p_B > p_A) = \\sum_{i=0}^{\\alpha_B - 1}
        \\frac{B(\\alpha_A + i, \\beta_A + \\beta_B)}
             {(\\beta_B + i) B(1 + i, \\beta_B) B(\\alpha_A, \\beta_A)}

(Evan Miller, "Formulas for Bayesian A/B Testing"). The complementary
:math:`P(p_A > p_B)` is one minus the sum.
"""

import logging
import warnings

import numpy as np

from betacompare.comparators.base import ComparisonResult, check_posteriors
from betacompare.errors import NumericalStabilityWarning
from betacompare.special import log_sum_exact_terms, log_term_error

logger = logging.getLogger(__name__)

METHOD = "exact"

# Accumulated probabilities further than this above 1 indicate lost precision.
OVERSHOOT_TOL = 1e-9

# Relative error in the probability above which precision counts as degraded.
PRECISION_TOL = 1e-8


def summation_bound(alpha_b):
    """Returns the number of terms in the sum and whether rounding was needed.

    Args:
        alpha_b: Alpha parameter of posterior B.

    Returns:
        A tuple (n_terms, rounded).
    """
    n_terms = int(np.round(alpha_b))
    return n_terms, not np.isclose(alpha_b, n_terms, rtol=0, atol=1e-9)


def exact_probability(posterior_a, posterior_b):
    """Calculates P(B > A) from the closed-form sum.

    Every term is formed in log space from log-Beta values and the terms are
    combined with a log-sum-exp, so large parameters neither overflow nor
    underflow.

    Warning:
        The sum has ``round(alpha_b)`` terms. With thousands of observed
        successes for B this is thousands of log-Gamma evaluations per call,
        and nothing is shared between calls, so comparing many candidates
        this way is slow. Use the Normal approximation for large batches.

    Warning:
        The formula needs an integer ``alpha_b``. A non-integer value (the
        usual case with a fitted prior) is rounded to the nearest integer and
        a :class:`~betacompare.errors.NumericalStabilityWarning` is issued;
        the result is then an approximation, not exact.

    Warning:
        With very large parameters for A (around 1e11 and beyond) the
        log-Gamma values in each term are so large that their differences
        lose precision. A :class:`~betacompare.errors.NumericalStabilityWarning`
        is issued when the estimated relative error exceeds ``PRECISION_TOL``.

    Args:
        posterior_a: The baseline posterior.
        posterior_b: The challenger posterior.

    Returns:
        :class:`ComparisonResult`.

    Raises:
        FloatingPointError: If the log-space sum is not finite, which happens
            only when the log-Gamma values overflow a double.

    Examples:
        >>> from betacompare.posterior import Posterior
        >>> r = exact_probability(Posterior(1, 1), Posterior(2, 1))
        >>> round(r.probability, 10)
        0.6666666667
    """
    check_posteriors(posterior_a, posterior_b)
    n_terms, rounded = summation_bound(posterior_b.alpha)
    if rounded:
        warnings.warn(
            f"alpha_b = {posterior_b.alpha} is not an integer; rounded to {n_terms}. "
            "The result is an approximation.",
            NumericalStabilityWarning,
            stacklevel=2,
        )
    if n_terms == 0:
        warnings.warn(
            "alpha_b rounds to zero; the sum is empty and P(B > A) is reported as 0.",
            NumericalStabilityWarning,
            stacklevel=2,
        )
        return ComparisonResult(probability=0.0, method=METHOD)

    logger.debug("Summing %s closed-form terms", n_terms)
    error = log_term_error(posterior_a.alpha, posterior_a.beta, posterior_b.beta, n_terms)
    if error > PRECISION_TOL:
        warnings.warn(
            f"Log-space terms lose about {error:.2g} relative precision to cancellation; "
            "precision is degraded.",
            NumericalStabilityWarning,
            stacklevel=2,
        )
    with np.errstate(invalid="ignore", over="ignore"):
        log_prob = log_sum_exact_terms(
            posterior_a.alpha, posterior_a.beta, posterior_b.beta, n_terms
        )
    if np.isnan(log_prob) or log_prob == np.inf:
        raise FloatingPointError(
            "Closed-form sum is not finite in log space; parameters are too large "
            "for the exact strategy."
        )
    prob = float(np.exp(log_prob))

    if prob > 1 + OVERSHOOT_TOL:
        warnings.warn(
            f"Closed-form sum exceeded 1 ({prob!r}); precision is degraded.",
            NumericalStabilityWarning,
            stacklevel=2,
        )
    return ComparisonResult(probability=min(max(prob, 0.0), 1.0), method=METHOD)
