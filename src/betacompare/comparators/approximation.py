"""
Normal approximation to the difference of two Beta posteriors.
"""

import logging

import numpy as np
from scipy.stats import norm

from betacompare.comparators.base import ComparisonResult, check_posteriors

logger = logging.getLogger(__name__)

METHOD = "approximation"


def beta_moments(alpha, beta):
    """Calculates the mean and variance of Beta(alpha, beta).

    Args:
        alpha: Alpha parameters, scalar or array.
        beta: Beta parameters, scalar or array.

    Returns:
        A tuple (mean, variance) with the broadcast shape of the inputs.
    """
    alpha = np.asarray(alpha, dtype=float)
    beta = np.asarray(beta, dtype=float)
    total = alpha + beta
    return alpha / total, alpha * beta / (total**2 * (total + 1))


def difference_moments(alpha_a, beta_a, alpha_b, beta_b):
    """Moments of the Normal matched to ``p_B - p_A``.

    Vectorised: one baseline (scalars for A) can be paired with arrays of
    candidate parameters for B.

    Returns:
        A tuple (mean_diff, sd_diff).
    """
    mean_a, var_a = beta_moments(alpha_a, beta_a)
    mean_b, var_b = beta_moments(alpha_b, beta_b)
    return mean_b - mean_a, np.sqrt(var_a + var_b)


def approximate_probability(posterior_a, posterior_b):
    """Approximates P(B > A) by moment-matching each Beta to a Normal.

    The difference ``p_B - p_A`` is treated as Normal with mean
    ``mu_b - mu_a`` and variance ``sigma_a**2 + sigma_b**2`` and the returned
    probability is ``1 - Phi(0; mu_b - mu_a, sd)``, i.e. P(B > A). Its
    complement ``Phi(0; ...)`` is P(A > B).

    This is O(1) per comparison, but it is a biased estimator, not just a
    noisy one: when either posterior has a small alpha or beta the Beta is
    skewed and a symmetric Normal misplaces its tail mass, pulling the
    estimate in the direction of that skew. Prefer the exact or simulation
    strategies for sparse data.

    Args:
        posterior_a: The baseline posterior.
        posterior_b: The challenger posterior.

    Returns:
        :class:`ComparisonResult`.
    """
    check_posteriors(posterior_a, posterior_b)
    mean_diff, sd_diff = difference_moments(
        posterior_a.alpha, posterior_a.beta, posterior_b.alpha, posterior_b.beta
    )
    prob = float(norm.sf(0, loc=mean_diff, scale=sd_diff))
    logger.debug("Normal approximation: mean %s, sd %s", mean_diff, sd_diff)
    return ComparisonResult(probability=prob, method=METHOD)
