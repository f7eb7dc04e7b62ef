"""
Monte Carlo estimate of the probability that one Beta posterior beats another.
"""

import logging

import numpy as np

from betacompare.comparators.base import ComparisonResult, check_posteriors
from betacompare.errors import ValidationError
from betacompare.utils import check_count

logger = logging.getLogger(__name__)

METHOD = "simulation"


def simulate_probability(posterior_a, posterior_b, draw_count, random_seed):
    """Estimates P(B > A) by sampling both posteriors.

    `draw_count` independent draws are taken from each Beta posterior and the
    fraction of pairs in which B's draw exceeds A's is returned. This is an
    unbiased Monte Carlo estimator, not an exact value: its standard error is
    ``sqrt(p * (1 - p) / draw_count)``, shrinking as
    ``O(1 / sqrt(draw_count))``.

    Args:
        posterior_a: The baseline :class:`~betacompare.posterior.Posterior`.
        posterior_b: The challenger posterior.
        draw_count: Number of draws from each posterior, a positive integer.
        random_seed: An int seed, ``numpy.random.SeedSequence`` or
            ``numpy.random.Generator``. The same seed always gives the same
            answer. A generator is used as given and its state advances.
            There is no fallback to global random state.

    Returns:
        :class:`ComparisonResult` carrying the estimate and its standard error.

    Raises:
        ValidationError: If `draw_count` is not a positive integer or no seed
            is given.
    """
    check_posteriors(posterior_a, posterior_b)
    draw_count = check_count(draw_count, "draw_count", 1)
    if random_seed is None:
        raise ValidationError("random_seed is required for simulation.")

    rng = np.random.default_rng(random_seed)
    draws_a = rng.beta(posterior_a.alpha, posterior_a.beta, size=draw_count)
    draws_b = rng.beta(posterior_b.alpha, posterior_b.beta, size=draw_count)
    prob = float(np.mean(draws_b > draws_a))
    se = float(np.sqrt(prob * (1 - prob) / draw_count))
    logger.debug("Simulated %s draws: P(B > A) = %s (se %s)", draw_count, prob, se)
    return ComparisonResult(probability=prob, method=METHOD, standard_error=se)
