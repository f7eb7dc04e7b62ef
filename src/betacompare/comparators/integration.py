"""
Numerical integration of the joint posterior density over the region B > A.
"""

import logging
import warnings

import numpy as np
from scipy.stats import beta as beta_dist

from betacompare.comparators.base import ComparisonResult, check_posteriors
from betacompare.errors import NumericalStabilityWarning, ValidationError
from betacompare.utils import check_positive

logger = logging.getLogger(__name__)

METHOD = "integration"

# Posterior mass outside the bounds above which a warning is issued.
COVERAGE_TOL = 1e-3


def support_bounds(posterior_a, posterior_b, tail=1e-6):
    """Finds integration bounds that cover the mass of both posteriors.

    Args:
        posterior_a: The baseline posterior.
        posterior_b: The challenger posterior.
        tail: Mass allowed outside the bounds in each tail of each posterior.

    Returns:
        A tuple (lower_bound, upper_bound) inside [0, 1].
    """
    check_posteriors(posterior_a, posterior_b)
    if not 0 < tail < 0.5:
        raise ValidationError(f"tail must lie in (0, 0.5), got {tail!r}.")
    lows = [beta_dist.ppf(tail, p.alpha, p.beta) for p in (posterior_a, posterior_b)]
    highs = [beta_dist.ppf(1 - tail, p.alpha, p.beta) for p in (posterior_a, posterior_b)]
    return float(min(lows)), float(max(highs))


def _grid(lower_bound, upper_bound, step):
    """Midpoints of the cells of width `step` that fit inside the bounds."""
    n_cells = int(np.floor((upper_bound - lower_bound) / step + 1e-9))
    if n_cells < 1:
        raise ValidationError(
            f"step ({step}) is wider than the integration range "
            f"[{lower_bound}, {upper_bound}]."
        )
    return lower_bound + step * (np.arange(n_cells) + 0.5)


def _uncovered_mass(posterior, lower_bound, upper_bound):
    inside = beta_dist.cdf(upper_bound, posterior.alpha, posterior.beta) - beta_dist.cdf(
        lower_bound, posterior.alpha, posterior.beta
    )
    return float(1 - inside)


def integrate_probability(posterior_a, posterior_b, lower_bound, upper_bound, step):
    """Approximates P(B > A) with a double sum over a grid.

    The interval ``[lower_bound, upper_bound]`` is cut into cells of width
    `step`. For every pair of cell midpoints ``(x, y)`` with ``x > y`` the
    joint density ``pdf_b(x) * pdf_a(y) * step**2`` is added up. The result
    is deterministic and its discretisation error shrinks with `step`.

    Note:
        Time grows as ``((upper_bound - lower_bound) / step) ** 2`` because
        every grid pair contributes. The pairs are collapsed with a running
        sum of ``pdf_a``, so memory stays linear in the number of cells. The
        method is still only practical for two entities; comparing ``k``
        entities at once would need a ``k``-dimensional grid.

    Note:
        The bounds must cover the effective support of both posteriors.
        Mass outside them is simply lost, so bounds that are too narrow bias
        the result low. This issues a
        :class:`~betacompare.errors.NumericalStabilityWarning` rather than
        raising. See :func:`support_bounds` for safe bounds.

    Args:
        posterior_a: The baseline posterior.
        posterior_b: The challenger posterior.
        lower_bound: Lower end of the integration range, clipped to 0.
        upper_bound: Upper end of the integration range, clipped to 1.
        step: Grid cell width, positive.

    Returns:
        :class:`ComparisonResult`.

    Raises:
        ValidationError: On a non-positive step or empty range.
    """
    check_posteriors(posterior_a, posterior_b)
    step = check_positive(step, "step")
    if not (np.isfinite(lower_bound) and np.isfinite(upper_bound)):
        raise ValidationError("Integration bounds must be finite.")
    lower_bound = max(float(lower_bound), 0.0)
    upper_bound = min(float(upper_bound), 1.0)
    if lower_bound >= upper_bound:
        raise ValidationError(
            f"lower_bound ({lower_bound}) must be less than upper_bound ({upper_bound})."
        )

    uncovered = max(
        _uncovered_mass(p, lower_bound, upper_bound) for p in (posterior_a, posterior_b)
    )
    if uncovered > COVERAGE_TOL:
        warnings.warn(
            f"Integration bounds [{lower_bound}, {upper_bound}] miss {uncovered:.3g} "
            "of posterior mass; P(B > A) will be biased low.",
            NumericalStabilityWarning,
            stacklevel=2,
        )

    xs = _grid(lower_bound, upper_bound, step)
    density_a = posterior_a.pdf(xs)
    density_b = posterior_b.pdf(xs)
    # for each x (B), the mass of A on cells strictly below it
    below = np.cumsum(density_a)[:-1]
    prob = float(density_b[1:] @ below) * step**2
    logger.debug("Integrated over a %s x %s grid: P(B > A) = %s", len(xs), len(xs), prob)
    return ComparisonResult(probability=min(max(prob, 0.0), 1.0), method=METHOD)
