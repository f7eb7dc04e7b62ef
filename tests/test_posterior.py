import dataclasses

import numpy as np
import pytest
from scipy.stats import beta

from betacompare import Posterior, Prior, ValidationError


@pytest.fixture
def prior():
    return Prior(101.4, 287.3)


def test_prior_posterior_update():
    assert Prior(1, 1).posterior(3, 10) == Posterior(4.0, 8.0)


def test_posterior_from_counts(prior):
    post = Posterior.from_counts(3771, 12364, prior)
    assert np.isclose(post.alpha, 3872.4)
    assert np.isclose(post.beta, 287.3 + 12364 - 3771)
    assert post == prior.posterior(3771, 12364)


def test_zero_successes_and_all_successes(prior):
    assert prior.posterior(0, 5) == Posterior(101.4, 292.3)
    assert prior.posterior(5, 5) == Posterior(106.4, 287.3)


@pytest.mark.parametrize(
    "alpha, beta_",
    [(0, 1), (1, 0), (-1, 2), (2, -0.5), (float("nan"), 1), (1, np.inf), ("1", 1), (True, 1)],
)
def test_posterior_rejects_invalid_parameters(alpha, beta_):
    with pytest.raises(ValidationError):
        Posterior(alpha, beta_)


@pytest.mark.parametrize("alpha, beta_", [(0, 1), (1, -3)])
def test_prior_rejects_invalid_parameters(alpha, beta_):
    with pytest.raises(ValidationError):
        Prior(alpha, beta_)


@pytest.mark.parametrize(
    "successes, trials",
    [(11, 10), (-1, 10), (0, 0), (2.5, 10), (3, 10.0)],
)
def test_prior_rejects_invalid_counts(prior, successes, trials):
    with pytest.raises(ValidationError):
        prior.posterior(successes, trials)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        Posterior(0, 1)


def test_posterior_is_immutable():
    post = Posterior(2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        post.alpha = 10


def test_numpy_scalars_accepted():
    post = Prior(np.float64(1.5), 2).posterior(np.int64(3), np.int64(7))
    assert post == Posterior(4.5, 6.0)
    assert isinstance(post.alpha, float)


def test_moments_match_scipy():
    post = Posterior(12.5, 30)
    mean, var = beta.stats(12.5, 30, moments="mv")
    assert np.isclose(post.mean, mean)
    assert np.isclose(post.variance, var)


def test_prior_mean(prior):
    assert np.isclose(prior.mean, 101.4 / (101.4 + 287.3))


def test_shrinkage_toward_prior_mean(prior):
    # 1 success in 1 trial is pulled almost all the way back to the prior
    post = prior.posterior(1, 1)
    assert abs(post.mean - prior.mean) < 0.005


def test_interval():
    post = Posterior(30, 70)
    low, high = post.interval(0.9)
    assert np.isclose(low, beta.ppf(0.05, 30, 70))
    assert np.isclose(high, beta.ppf(0.95, 30, 70))
    assert low < post.mean < high


def test_interval_rejects_bad_level():
    with pytest.raises(ValidationError):
        Posterior(3, 4).interval(1.0)


def test_pdf_vectorised():
    post = Posterior(2, 2)
    xs = np.array([0.25, 0.5])
    assert np.allclose(post.pdf(xs), 6 * xs * (1 - xs))


def test_sample_is_reproducible():
    post = Posterior(5, 5)
    first = post.sample(100, 123)
    second = post.sample(100, 123)
    assert np.array_equal(first, second)
    assert np.all((first > 0) & (first < 1))


def test_sample_requires_seed():
    with pytest.raises(ValidationError):
        Posterior(5, 5).sample(10, None)
