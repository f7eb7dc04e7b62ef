""" Credible intervals for the difference between two success rates. """

import logging
from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass, fields

import pandas as pd
from scipy.stats import norm

from betacompare.comparators.approximation import difference_moments
from betacompare.comparators.base import check_posteriors
from betacompare.errors import DimensionError, ValidationError
from betacompare.posterior import Posterior
from betacompare.utils import check_confidence_level

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE_LEVEL = 0.95


@dataclass(frozen=True)
class CredibleInterval:
    """Summary of ``p_B - p_A`` under the Normal approximation.

    Attributes:
        posterior_probability: P(B > A).
        estimate: Point estimate of ``p_B - p_A``, i.e. ``mean_b - mean_a``.
        low: The ``(1 - confidence_level) / 2`` quantile.
        high: The ``1 - (1 - confidence_level) / 2`` quantile.
        confidence_level: Mass between `low` and `high`.
    """

    posterior_probability: float
    estimate: float
    low: float
    high: float
    confidence_level: float

    def as_dict(self):
        """Returns the fields as an ordered dictionary."""
        return OrderedDict((f.name, getattr(self, f.name)) for f in fields(self))


def credible_interval(posterior_a, posterior_b, confidence_level=DEFAULT_CONFIDENCE_LEVEL):
    """Calculates P(B > A) and a credible interval for ``p_B - p_A``.

    The difference is approximated by a Normal with mean ``mu_b - mu_a`` and
    variance ``sigma_a**2 + sigma_b**2``, where each ``mu`` and ``sigma**2``
    are the exact Beta moments. The interval is the equal-tailed quantile
    interval of that Normal. The same bias caveat as
    :func:`~betacompare.comparators.approximation.approximate_probability`
    applies to posteriors with small parameters.

    Args:
        posterior_a: The baseline posterior.
        posterior_b: The challenger posterior.
        confidence_level: Mass inside the interval, strictly between 0 and 1.

    Returns:
        :class:`CredibleInterval`.

    Raises:
        ValidationError: If `confidence_level` is outside (0, 1).
    """
    check_posteriors(posterior_a, posterior_b)
    confidence_level = check_confidence_level(confidence_level)
    mean_diff, sd_diff = difference_moments(
        posterior_a.alpha, posterior_a.beta, posterior_b.alpha, posterior_b.beta
    )
    tail = (1 - confidence_level) / 2
    low, high = norm.ppf([tail, 1 - tail], loc=mean_diff, scale=sd_diff)
    return CredibleInterval(
        posterior_probability=float(norm.sf(0, loc=mean_diff, scale=sd_diff)),
        estimate=float(mean_diff),
        low=float(low),
        high=float(high),
        confidence_level=confidence_level,
    )


def _check_candidates(candidates):
    if isinstance(candidates, Posterior) or not isinstance(candidates, Iterable):
        raise DimensionError(
            "candidates must be a sequence of Posterior objects, "
            f"got {type(candidates).__name__}."
        )
    candidates = list(candidates)
    for i, candidate in enumerate(candidates):
        if not isinstance(candidate, Posterior):
            raise DimensionError(
                f"Candidate {i} is a {type(candidate).__name__}, not a Posterior."
            )
    return candidates


def _check_baseline(baseline, confidence_level):
    if not isinstance(baseline, Posterior):
        raise ValidationError(
            f"baseline must be a Posterior, got {type(baseline).__name__}."
        )
    check_confidence_level(confidence_level)


def batch_credible_interval(
    baseline, candidates, confidence_level=DEFAULT_CONFIDENCE_LEVEL
):
    """Compares many candidates against one baseline.

    Each candidate is compared independently as B against the baseline as A,
    so the work can be split across threads or processes freely.

    Args:
        baseline: The fixed posterior, used as A.
        candidates: Sequence of posteriors, each used as B. May be empty.
        confidence_level: Mass inside each interval.

    Returns:
        List of :class:`CredibleInterval`, one per candidate, in order.

    Raises:
        ValidationError: If `baseline` is not a :class:`Posterior` or the
            confidence level is outside (0, 1), even with no candidates.
        DimensionError: If `candidates` is not a sequence of posteriors.
    """
    _check_baseline(baseline, confidence_level)
    candidates = _check_candidates(candidates)
    logger.debug("Computing %s credible intervals", len(candidates))
    return [credible_interval(baseline, c, confidence_level) for c in candidates]


def credible_intervals_df(
    baseline, candidates, labels=None, confidence_level=DEFAULT_CONFIDENCE_LEVEL
):
    """Tabulates :func:`batch_credible_interval` as a pandas DataFrame.

    Args:
        baseline: The fixed posterior, used as A.
        candidates: Sequence of posteriors, each used as B.
        labels: Optional row labels, one per candidate.
        confidence_level: Mass inside each interval.

    Returns:
        A DataFrame with one row per candidate and one column per
        :class:`CredibleInterval` field.

    Raises:
        DimensionError: If the number of labels differs from the number of
            candidates.
    """
    _check_baseline(baseline, confidence_level)
    candidates = _check_candidates(candidates)
    if labels is not None:
        labels = list(labels)
        if len(labels) != len(candidates):
            raise DimensionError(
                f"Got {len(labels)} labels for {len(candidates)} candidates."
            )
    intervals = batch_credible_interval(baseline, candidates, confidence_level)
    columns = [f.name for f in fields(CredibleInterval)]
    return pd.DataFrame([ci.as_dict() for ci in intervals], index=labels, columns=columns)
