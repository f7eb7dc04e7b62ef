import warnings
from collections import OrderedDict

import numpy as np
import pytest

from betacompare import (
    ConfigurationError,
    Posterior,
    Strategy,
    compare,
    compare_all,
    exact_probability,
    support_bounds,
)

SIMULATION = {"draw_count": 200_000, "random_seed": 17}
INTEGRATION = {"lower_bound": 0.0, "upper_bound": 1.0, "step": 0.001}


@pytest.fixture
def posteriors():
    return Posterior(60, 80), Posterior(70, 75)


@pytest.mark.parametrize("strategy", ["exact", "EXACT", " Exact ", Strategy.EXACT])
def test_strategy_names(posteriors, strategy):
    a, b = posteriors
    assert compare(a, b, strategy) == exact_probability(a, b)


def test_method_recorded(posteriors):
    a, b = posteriors
    assert compare(a, b, "simulation", SIMULATION).method == "simulation"
    assert compare(a, b, "integration", INTEGRATION).method == "integration"
    assert compare(a, b, "exact").method == "exact"
    assert compare(a, b, "approximation").method == "approximation"


def test_unknown_strategy(posteriors):
    a, b = posteriors
    with pytest.raises(ConfigurationError):
        compare(a, b, "bootstrap")
    with pytest.raises(ConfigurationError):
        compare(a, b, None)


def test_missing_simulation_params(posteriors):
    a, b = posteriors
    with pytest.raises(ConfigurationError, match="draw_count"):
        compare(a, b, "simulation", random_seed=1)
    with pytest.raises(ConfigurationError, match="random_seed"):
        compare(a, b, "simulation", draw_count=100)


def test_missing_integration_params(posteriors):
    a, b = posteriors
    with pytest.raises(ConfigurationError, match="step"):
        compare(a, b, "integration", lower_bound=0, upper_bound=1)
    with pytest.raises(ConfigurationError, match="lower_bound"):
        compare(a, b, "integration", step=0.01)


def test_unexpected_params(posteriors):
    a, b = posteriors
    with pytest.raises(ConfigurationError, match="draw_count"):
        compare(a, b, "exact", draw_count=100)


@pytest.mark.parametrize("params", [[1, 2], "draw_count=100", 100])
def test_non_mapping_params_are_configuration_errors(posteriors, params):
    a, b = posteriors
    with pytest.raises(ConfigurationError, match="mapping"):
        compare(a, b, "simulation", params)
    with pytest.raises(ConfigurationError, match="mapping"):
        compare_all(a, b, params)


def test_empty_mapping_is_accepted(posteriors):
    a, b = posteriors
    assert compare(a, b, "exact", {}).method == "exact"


def test_keywords_override_mapping(posteriors):
    a, b = posteriors
    via_mapping = compare(a, b, "simulation", {"draw_count": 500, "random_seed": 3})
    overridden = compare(a, b, "simulation", {"draw_count": 500, "random_seed": 4}, random_seed=3)
    assert via_mapping == overridden


def test_strategies_agree_for_large_parameters(posteriors):
    a, b = posteriors
    lower, upper = support_bounds(a, b)
    results = [
        compare(a, b, "simulation", SIMULATION),
        compare(a, b, "integration", lower_bound=lower, upper_bound=upper, step=0.0005),
        compare(a, b, "exact"),
        compare(a, b, "approximation"),
    ]
    probs = np.array([r.probability for r in results])
    assert np.ptp(probs) < 0.01


def test_identical_posteriors_give_half():
    post = Posterior(10, 10)
    params = {"simulation": SIMULATION, "integration": INTEGRATION}
    for strategy in Strategy:
        res = compare(post, post, strategy, params.get(strategy.value))
        assert abs(res.probability - 0.5) < 0.01, strategy


@pytest.mark.parametrize("strategy", ["exact", "approximation"])
def test_symmetry(posteriors, strategy):
    a, b = posteriors
    total = compare(a, b, strategy).probability + compare(b, a, strategy).probability
    assert np.isclose(total, 1.0, atol=1e-9)


@pytest.mark.parametrize(
    "strategy, params, tol",
    [("simulation", SIMULATION, 0.01), ("integration", INTEGRATION, 0.01)],
)
def test_approximate_symmetry(posteriors, strategy, params, tol):
    a, b = posteriors
    total = compare(a, b, strategy, params).probability + compare(b, a, strategy, params).probability
    assert abs(total - 1) < tol


def test_compare_all(posteriors):
    a, b = posteriors
    results = compare_all(a, b, {**SIMULATION, **INTEGRATION})
    assert isinstance(results, OrderedDict)
    assert list(results) == ["simulation", "integration", "exact", "approximation"]


def test_compare_all_skips_unconfigured(posteriors):
    a, b = posteriors
    results = compare_all(a, b, draw_count=1000)
    assert list(results) == ["exact", "approximation"]


def test_compare_all_unknown_param(posteriors):
    a, b = posteriors
    with pytest.raises(ConfigurationError):
        compare_all(a, b, grid=10)


def test_strategy_swap_needs_no_other_change(posteriors):
    a, b = posteriors
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        for strategy in ("exact", "approximation"):
            assert 0.5 < compare(a, b, strategy).probability < 1
