""" The result type shared by all comparison strategies. """

from dataclasses import dataclass
from typing import Optional

from betacompare.errors import ValidationError
from betacompare.posterior import Posterior


@dataclass(frozen=True)
class ComparisonResult:
    """The answer to "how likely is B's rate to exceed A's?".

    Attributes:
        probability: Estimate of P(B > A), in [0, 1].
        method: Identifier of the strategy that produced it.
        standard_error: Monte Carlo standard error, where one exists.
    """

    probability: float
    method: str
    standard_error: Optional[float] = None


def check_posteriors(posterior_a, posterior_b):
    """Checks that both arguments are :class:`Posterior` instances."""
    for name, posterior in (("posterior_a", posterior_a), ("posterior_b", posterior_b)):
        if not isinstance(posterior, Posterior):
            raise ValidationError(
                f"{name} must be a Posterior, got {type(posterior).__name__}."
            )
