"""
Log-space special functions used by the closed-form comparator.
"""

import numpy as np
from scipy.special import gammaln, logsumexp


def log_beta(a, b):
    """Calculates the logarithm of the Beta function.

    :math:`\\log B(a, b) = \\log\\Gamma(a) + \\log\\Gamma(b) - \\log\\Gamma(a + b)`,
    evaluated from log-Gamma terms so that it stays finite for parameters
    whose Beta function under- or overflows a double.

    Args:
        a: First shape parameter, scalar or array, positive.
        b: Second shape parameter, scalar or array, positive.

    Returns:
        The log-Beta value with the broadcast shape of `a` and `b`.

    Examples:
        >>> float(np.round(np.exp(log_beta(2, 3)), 12))
        0.083333333333
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return gammaln(a) + gammaln(b) - gammaln(a + b)


def exact_log_terms(alpha_a, beta_a, beta_b, n_terms):
    """Calculates the log of each term in the closed-form ``P(B > A)`` sum.

    Term ``i`` is

    :math:`\\log B(\\alpha_A + i, \\beta_A + \\beta_B) - \\log(\\beta_B + i)
    - \\log B(1 + i, \\beta_B) - \\log B(\\alpha_A, \\beta_A)`

    for ``i = 0, ..., n_terms - 1``.

    Args:
        alpha_a: Alpha parameter of posterior A.
        beta_a: Beta parameter of posterior A.
        beta_b: Beta parameter of posterior B.
        n_terms: Number of terms, i.e. the integer alpha parameter of B.

    Returns:
        numpy array of length `n_terms` with the log terms.
    """
    i = np.arange(n_terms, dtype=float)
    return (
        log_beta(alpha_a + i, beta_a + beta_b)
        - np.log(beta_b + i)
        - log_beta(1 + i, beta_b)
        - log_beta(alpha_a, beta_a)
    )


def log_sum_exact_terms(alpha_a, beta_a, beta_b, n_terms):
    """Accumulates the closed-form sum in log space.

    The terms are combined with a log-sum-exp so that only the final value
    is exponentiated by the caller.

    Args:
        alpha_a: Alpha parameter of posterior A.
        beta_a: Beta parameter of posterior A.
        beta_b: Beta parameter of posterior B.
        n_terms: Number of terms in the sum.

    Returns:
        :math:`\\log P(B > A)`; ``-inf`` when `n_terms` is zero.
    """
    if n_terms <= 0:
        return -np.inf
    return float(logsumexp(exact_log_terms(alpha_a, beta_a, beta_b, n_terms)))


def log_term_error(alpha_a, beta_a, beta_b, n_terms):
    """Estimates the absolute rounding error in each closed-form log term.

    Each term is a difference of log-Gamma values whose size grows like
    :math:`x \\log x`. Their rounding error is about machine epsilon times the
    largest of them, and that absolute error in log space becomes a relative
    error of the same size in the probability.

    Args:
        alpha_a: Alpha parameter of posterior A.
        beta_a: Beta parameter of posterior A.
        beta_b: Beta parameter of posterior B.
        n_terms: Number of terms in the sum.

    Returns:
        The error estimate; ``inf`` when the log-Gamma values overflow.
    """
    with np.errstate(over="ignore"):
        largest = gammaln(alpha_a + beta_a + beta_b + n_terms) + gammaln(alpha_a + beta_a)
    return float(np.finfo(float).eps * abs(largest))
