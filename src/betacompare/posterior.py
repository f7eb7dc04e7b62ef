""" Beta priors and posteriors for binomial success rates. """

from dataclasses import dataclass

import numpy as np
from scipy.stats import beta as beta_dist

from betacompare.errors import ValidationError
from betacompare.utils import check_confidence_level, check_count, check_positive


@dataclass(frozen=True)
class Posterior:
    """An immutable Beta(alpha, beta) belief about one entity's success rate.

    Attributes:
        alpha: Prior pseudo-successes plus observed successes. Positive.
        beta: Prior pseudo-failures plus observed failures. Positive.
    """

    alpha: float
    beta: float

    def __post_init__(self):
        object.__setattr__(self, "alpha", check_positive(self.alpha, "alpha"))
        object.__setattr__(self, "beta", check_positive(self.beta, "beta"))

    @classmethod
    def from_counts(cls, successes, trials, prior):
        """Builds the posterior after observing `successes` in `trials`.

        Args:
            successes: Number of successes, a non-negative integer.
            trials: Number of trials, a positive integer.
            prior: The shared :class:`Prior`.

        Returns:
            A new Posterior.
        """
        return prior.posterior(successes, trials)

    @property
    def mean(self):
        """The posterior mean, i.e. the shrunken estimate of the rate."""
        return self.alpha / (self.alpha + self.beta)

    @property
    def variance(self):
        """The exact variance of the Beta distribution."""
        total = self.alpha + self.beta
        return self.alpha * self.beta / (total**2 * (total + 1))

    def interval(self, confidence_level=0.95):
        """Calculates the equal-tailed credible interval for the rate.

        Args:
            confidence_level: Probability mass inside the interval.

        Returns:
            A tuple (low, high) of Beta quantiles.
        """
        confidence_level = check_confidence_level(confidence_level)
        tail = (1 - confidence_level) / 2
        low, high = beta_dist.ppf([tail, 1 - tail], self.alpha, self.beta)
        return float(low), float(high)

    def pdf(self, x):
        """Evaluates the Beta density at `x` (scalar or array)."""
        return beta_dist.pdf(x, self.alpha, self.beta)

    def sample(self, size, random_state):
        """Draws samples from the posterior.

        Args:
            size: Number of draws.
            random_state: A seed, ``numpy.random.SeedSequence`` or
                ``numpy.random.Generator``. A generator's state is consumed.

        Returns:
            numpy array of `size` draws.
        """
        if random_state is None:
            raise ValidationError("An explicit seed or generator is required.")
        rng = np.random.default_rng(random_state)
        return rng.beta(self.alpha, self.beta, size=check_count(size, "size", 1))


@dataclass(frozen=True)
class Prior:
    """The shared Beta prior every entity's posterior is built from.

    The prior is fitted elsewhere (e.g. by an empirical-Bayes estimator over
    all entities) and passed here explicitly, so comparisons made under
    different priors stay independent.

    Attributes:
        alpha: Prior pseudo-successes. Positive.
        beta: Prior pseudo-failures. Positive.
    """

    alpha: float
    beta: float

    def __post_init__(self):
        object.__setattr__(self, "alpha", check_positive(self.alpha, "prior alpha"))
        object.__setattr__(self, "beta", check_positive(self.beta, "prior beta"))

    @property
    def mean(self):
        """The rate that entities with little data are shrunk toward."""
        return self.alpha / (self.alpha + self.beta)

    def posterior(self, successes, trials):
        """Updates the prior with observed binomial data.

        Args:
            successes: Number of successes, a non-negative integer.
            trials: Number of trials, a positive integer.

        Returns:
            Posterior with ``alpha = prior.alpha + successes`` and
            ``beta = prior.beta + trials - successes``.

        Raises:
            ValidationError: If the counts are not valid binomial data.

        Examples:
            >>> Prior(1, 1).posterior(3, 10)
            Posterior(alpha=4.0, beta=8.0)
        """
        successes = check_count(successes, "successes", 0)
        trials = check_count(trials, "trials", 1)
        if successes > trials:
            raise ValidationError(
                f"successes ({successes}) cannot exceed trials ({trials})."
            )
        return Posterior(self.alpha + successes, self.beta + (trials - successes))
