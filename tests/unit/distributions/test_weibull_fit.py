"""Unit tests for Newton-method maximum-likelihood Weibull fitting."""

import numpy as np
import pytest
from scipy import stats

from statdist.distributions.weibull import Weibull, fit_mle, newton_shape, scale_for_shape
from statdist.exceptions import InvalidParameterError


@pytest.fixture(scope="module")
def weibull_samples() -> np.ndarray:
    return Weibull(2.5, 3.0).sample(10_000, rng=np.random.default_rng(42))


def test_fit_recovers_known_parameters(weibull_samples) -> None:
    fitted = fit_mle(weibull_samples)
    assert isinstance(fitted, Weibull)
    assert fitted.shape == pytest.approx(2.5, rel=0.05)
    assert fitted.scale == pytest.approx(3.0, rel=0.05)


def test_classmethod_fit_matches_function(weibull_samples) -> None:
    assert Weibull.fit(weibull_samples) == fit_mle(weibull_samples)


def test_fit_agrees_with_scipy_mle(weibull_samples) -> None:
    fitted = fit_mle(weibull_samples)
    shape, _, scale = stats.weibull_min.fit(weibull_samples, floc=0)
    assert fitted.shape == pytest.approx(shape, rel=1e-3)
    assert fitted.scale == pytest.approx(scale, rel=1e-3)


def test_fit_solves_likelihood_equation(weibull_samples) -> None:
    fitted = fit_mle(weibull_samples)
    x = weibull_samples
    a = float(fitted.shape)
    score = np.sum(x**a * np.log(x)) / np.sum(x**a) - np.mean(np.log(x)) - 1 / a
    assert abs(score) < 1e-10


def test_fit_on_exponential_data_gives_unit_shape() -> None:
    x = np.random.default_rng(5).exponential(scale=4.0, size=20_000)
    fitted = fit_mle(x)
    assert fitted.shape == pytest.approx(1.0, rel=0.05)
    assert fitted.scale == pytest.approx(4.0, rel=0.05)


def test_fit_does_not_mutate_samples(weibull_samples) -> None:
    original = weibull_samples.copy()
    fit_mle(weibull_samples, initial_shape=2.0)
    np.testing.assert_array_equal(weibull_samples, original)


def test_fit_accepts_plain_lists() -> None:
    fitted = fit_mle([0.8, 1.1, 1.9, 2.4, 3.2, 0.5, 1.4])
    assert fitted.shape > 0
    assert fitted.scale > 0


def test_newton_trace_reports_convergence(weibull_samples) -> None:
    trace = newton_shape(weibull_samples, tolerance=1e-10)
    assert trace.converged
    assert 1 <= trace.iterations < 100
    assert trace.last_step <= 1e-10


def test_iteration_cap_returns_current_estimate(weibull_samples, caplog) -> None:
    trace = newton_shape(weibull_samples, max_iterations=1)
    assert trace.iterations == 1
    assert not trace.converged

    with caplog.at_level("WARNING"):
        capped = fit_mle(weibull_samples, max_iterations=1)
    assert capped.shape == pytest.approx(trace.shape)
    assert capped.scale == pytest.approx(scale_for_shape(weibull_samples, trace.shape))
    assert any("iteration cap" in r.message for r in caplog.records)


def test_first_newton_step_always_runs(weibull_samples) -> None:
    trace = newton_shape(weibull_samples, initial_shape=1.0, max_iterations=1, tolerance=np.inf)
    assert trace.iterations == 1
    assert trace.shape != 1.0


def test_scale_for_shape_closed_form() -> None:
    x = np.array([1.0, 2.0, 3.0])
    assert scale_for_shape(x, 2.0) == pytest.approx(np.sqrt(14.0 / 3.0))


def test_float32_samples_fit_in_float32() -> None:
    x = Weibull(2.0, 1.0).sample(2_000, seed=3).astype(np.float32)
    fitted = fit_mle(x, tolerance=1e-6)
    assert fitted.dtype == np.float32
    assert fitted.shape == pytest.approx(2.0, rel=0.1)


def test_non_positive_samples_yield_invalid_estimate() -> None:
    with np.errstate(all="ignore"), pytest.raises(InvalidParameterError):
        fit_mle([-1.0, 2.0, 3.0])


def test_default_tolerance_reports_convergence(weibull_samples, caplog) -> None:
    trace = newton_shape(weibull_samples)
    assert trace.converged
    with caplog.at_level("WARNING"):
        fit_mle(weibull_samples)
    assert not any("iteration cap" in r.message for r in caplog.records)


@pytest.mark.parametrize("seed", range(10))
def test_default_tolerance_converges_on_small_samples(seed) -> None:
    x = Weibull(1.3, 2.0).sample(500, seed=seed)
    assert newton_shape(x).converged
