"""One entry point for every comparison strategy."""

import enum
import logging
from collections import OrderedDict
from collections.abc import Mapping

from betacompare.comparators import (
    approximate_probability,
    exact_probability,
    integrate_probability,
    simulate_probability,
)
from betacompare.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Strategy(enum.Enum):
    """The ways of computing P(B > A)."""

    SIMULATION = "simulation"
    INTEGRATION = "integration"
    EXACT = "exact"
    APPROXIMATION = "approximation"

    @classmethod
    def parse(cls, value):
        """Converts a Strategy or its (case-insensitive) name to a Strategy.

        Raises:
            ConfigurationError: If `value` names no strategy.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        known = ", ".join(s.value for s in cls)
        raise ConfigurationError(f"Unknown strategy {value!r}; expected one of {known}.")


# strategy -> (function, required parameters)
_DISPATCH = OrderedDict(
    [
        (Strategy.SIMULATION, (simulate_probability, ("draw_count", "random_seed"))),
        (
            Strategy.INTEGRATION,
            (integrate_probability, ("lower_bound", "upper_bound", "step")),
        ),
        (Strategy.EXACT, (exact_probability, ())),
        (Strategy.APPROXIMATION, (approximate_probability, ())),
    ]
)


def _merge_params(strategy_params, kwargs):
    if strategy_params is None:
        strategy_params = {}
    elif not isinstance(strategy_params, Mapping):
        raise ConfigurationError(
            "strategy_params must be a mapping of parameter names to values, "
            f"got {type(strategy_params).__name__}."
        )
    params = dict(strategy_params)
    params.update(kwargs)
    return params


def compare(posterior_a, posterior_b, strategy, strategy_params=None, **kwargs):
    """Calculates P(B > A) with the chosen strategy.

    Callers swap strategies by changing `strategy` alone. Strategy-specific
    parameters come from the `strategy_params` mapping and/or keyword
    arguments, keywords taking precedence:

    ============= ==========================================
    Strategy      Required parameters
    ============= ==========================================
    simulation    ``draw_count``, ``random_seed``
    integration   ``lower_bound``, ``upper_bound``, ``step``
    exact         none
    approximation none
    ============= ==========================================

    Args:
        posterior_a: The baseline posterior.
        posterior_b: The challenger posterior.
        strategy: A :class:`Strategy` or its name.
        strategy_params: Optional mapping of strategy parameters.
        **kwargs: Strategy parameters.

    Returns:
        :class:`~betacompare.comparators.ComparisonResult`.

    Raises:
        ConfigurationError: For an unknown strategy, missing or unexpected
            parameters, or a `strategy_params` that is not a mapping.

    Examples:
        >>> from betacompare.posterior import Posterior
        >>> a = b = Posterior(10, 10)
        >>> compare(a, b, "approximation").probability
        0.5
    """
    strategy = Strategy.parse(strategy)
    func, required = _DISPATCH[strategy]
    params = _merge_params(strategy_params, kwargs)

    missing = [name for name in required if params.get(name) is None]
    if missing:
        raise ConfigurationError(
            f"Strategy {strategy.value!r} requires parameter(s): {', '.join(missing)}."
        )
    unexpected = sorted(set(params) - set(required))
    if unexpected:
        raise ConfigurationError(
            f"Strategy {strategy.value!r} does not take parameter(s): "
            f"{', '.join(unexpected)}."
        )

    logger.debug("Comparing with strategy %s", strategy.value)
    return func(posterior_a, posterior_b, **params)


def compare_all(posterior_a, posterior_b, strategy_params=None, **kwargs):
    """Runs every strategy whose parameters are available.

    Parameters are shared: ``draw_count`` and ``random_seed`` enable
    simulation; ``lower_bound``, ``upper_bound`` and ``step`` enable
    integration. Exact and approximation always run.

    Returns:
        OrderedDict mapping strategy name to
        :class:`~betacompare.comparators.ComparisonResult`.
    """
    params = _merge_params(strategy_params, kwargs)
    known = {name for _, required in _DISPATCH.values() for name in required}
    unexpected = sorted(set(params) - known)
    if unexpected:
        raise ConfigurationError(f"Unknown parameter(s): {', '.join(unexpected)}.")

    results = OrderedDict()
    for strategy, (_, required) in _DISPATCH.items():
        if any(params.get(name) is None for name in required):
            logger.info("Skipping %s: parameters not supplied", strategy.value)
            continue
        own = {name: params[name] for name in required}
        results[strategy.value] = compare(posterior_a, posterior_b, strategy, own)
    return results
