"""Two-parameter Weibull distribution.

Density for shape ``alpha`` and scale ``theta``::

    f(x) = (alpha / theta) * (x / theta) ** (alpha - 1) * exp(-(x / theta) ** alpha),  x >= 0

Evaluation goes through the normalized variate ``z = (max(x, 0) / theta) ** alpha``
and its inverse ``x = theta * z ** (1 / alpha)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from scipy.special import gamma, xlogy

from statdist.exceptions import InvalidParameterError
from statdist.utils.logging import get_logger
from statdist.utils.special import EULER_GAMMA, LOG2, log1mexp, promote_params

log = get_logger(__name__, component="weibull")


def _finish(values):
    # 0-d results come back as NumPy scalars
    return np.asarray(values)[()]


def _check_params(shape, scale) -> None:
    if not (shape > 0 and scale > 0):
        raise InvalidParameterError(
            f"Weibull requires shape > 0 and scale > 0, got shape={shape}, scale={scale}"
        )


@dataclass(frozen=True, slots=True, repr=False)
class Weibull:
    """Weibull distribution with shape ``alpha`` and scale ``theta``.

    ``Weibull()`` is the unit exponential, ``Weibull(alpha)`` has unit scale.
    Parameters are promoted to a common floating dtype and validated on
    construction; instances are immutable.
    """

    shape: float = 1.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        shape, scale = promote_params(self.shape, self.scale)
        _check_params(shape, scale)
        object.__setattr__(self, "shape", shape)
        object.__setattr__(self, "scale", scale)

    @classmethod
    def _unchecked(cls, shape, scale) -> "Weibull":
        """Build without validation; callers must already guarantee shape, scale > 0."""
        dist = object.__new__(cls)
        object.__setattr__(dist, "shape", shape)
        object.__setattr__(dist, "scale", scale)
        return dist

    @classmethod
    def default(cls) -> "Weibull":
        return cls._unchecked(np.float64(1.0), np.float64(1.0))

    @classmethod
    def fit(cls, samples, initial_shape: float = 1.0, max_iterations: int = 1000, tolerance: float = 1e-16) -> "Weibull":
        return fit_mle(samples, initial_shape=initial_shape, max_iterations=max_iterations, tolerance=tolerance)

    def __repr__(self) -> str:
        return f"Weibull(shape={self.shape}, scale={self.scale})"

    # Parameters

    @property
    def params(self) -> tuple:
        return (self.shape, self.scale)

    @property
    def dtype(self) -> np.dtype:
        return np.asarray(self.shape).dtype

    def astype(self, dtype) -> "Weibull":
        dtype = np.dtype(dtype)
        if not np.issubdtype(dtype, np.floating):
            raise TypeError(f"Weibull parameters must be floating point, got {dtype}")
        return Weibull._unchecked(dtype.type(self.shape), dtype.type(self.scale))

    # Support

    @property
    def support(self) -> tuple[float, float]:
        return (0.0, np.inf)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return np.inf

    def insupport(self, x):
        x = np.asarray(x)
        return _finish((x >= 0) & (x <= np.inf))

    # Statistics

    def mean(self):
        return self.scale * gamma(1 + 1 / self.shape)

    def median(self):
        return self.scale * LOG2 ** (1 / self.shape)

    def mode(self):
        if self.shape > 1:
            inv_shape = 1 / self.shape
            return self.scale * (1 - inv_shape) ** inv_shape
        return self.dtype.type(0)

    def var(self):
        return self.scale**2 * gamma(1 + 2 / self.shape) - self.mean() ** 2

    def std(self):
        return np.sqrt(self.var())

    def skewness(self):
        mu = self.mean()
        sigma = self.std()
        r = mu / sigma
        return gamma(1 + 3 / self.shape) * (self.scale / sigma) ** 3 - 3 * r - r**3

    def kurtosis(self):
        """Excess kurtosis."""
        alpha, theta = self.params
        sigma = self.std()
        skew = self.skewness()
        r = self.mean() / sigma
        r2 = r**2
        r4 = r2**2
        return (theta / sigma) ** 4 * gamma(1 + 4 / alpha) - 4 * skew * r - 6 * r2 - r4 - 3

    def entropy(self):
        alpha, theta = self.params
        return EULER_GAMMA * (1 - 1 / alpha) + np.log(theta / alpha) + 1

    # Evaluation

    def _asarray(self, x) -> np.ndarray:
        x = np.asarray(x)
        return x.astype(np.result_type(x.dtype, self.dtype), copy=False)

    def _zval(self, x) -> np.ndarray:
        return (np.maximum(x, 0) / self.scale) ** self.shape

    def _xval(self, z):
        return _finish(self.scale * z ** (1 / self.shape))

    def pdf(self, x):
        x = self._asarray(x)
        alpha, theta = self.params
        inside = (x >= 0) & np.isfinite(x)
        z = np.where(inside, x, 0) / theta
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            density = (alpha / theta) * z ** (alpha - 1) * np.exp(-(z**alpha))
        return _finish(np.where(inside, density, 0))

    def logpdf(self, x):
        x = self._asarray(x)
        alpha, theta = self.params
        inside = x >= 0
        z = np.where(inside, x, 0) / theta
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            logdensity = np.log(alpha / theta) + xlogy(alpha - 1, z) - z**alpha
        return _finish(np.where(inside, logdensity, -np.inf))

    def cdf(self, x):
        return _finish(-np.expm1(-self._zval(self._asarray(x))))

    def ccdf(self, x):
        return _finish(np.exp(-self._zval(self._asarray(x))))

    def logcdf(self, x):
        return log1mexp(-self._zval(self._asarray(x)))

    def logccdf(self, x):
        return _finish(0.0 - self._zval(self._asarray(x)))

    def quantile(self, p):
        with np.errstate(divide="ignore"):
            return self._xval(0.0 - np.log1p(-self._asarray(p)))

    def cquantile(self, p):
        with np.errstate(divide="ignore"):
            return self._xval(0.0 - np.log(self._asarray(p)))

    def invlogcdf(self, lp):
        return self._xval(0.0 - log1mexp(self._asarray(lp)))

    def invlogccdf(self, lp):
        return self._xval(0.0 - self._asarray(lp))

    def gradlogpdf(self, x):
        """Derivative of ``logpdf`` with respect to ``x``; zero outside the support."""
        x = self._asarray(x)
        alpha, theta = self.params
        inside = self.insupport(x)
        xs = np.where(inside, x, 1)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            grad = (alpha - 1) / xs - alpha * xs ** (alpha - 1) / theta**alpha
        return _finish(np.where(inside, grad, 0))

    # Sampling

    def from_exponential(self, e):
        """Map standard-exponential variates onto this distribution."""
        return self._xval(self._asarray(e))

    def sample(self, size=None, rng: np.random.Generator | None = None, seed: int | None = None):
        rng = rng if rng is not None else np.random.default_rng(seed)
        draws = np.asarray(rng.standard_exponential(size), dtype=self.dtype)
        return self.from_exponential(draws)


class NewtonTrace(NamedTuple):
    shape: float
    iterations: int
    last_step: float
    converged: bool


def _as_samples(samples) -> np.ndarray:
    x = np.asarray(samples)
    return x.astype(np.result_type(x.dtype, np.float32), copy=False)


def newton_shape(
    samples,
    initial_shape: float = 1.0,
    max_iterations: int = 1000,
    tolerance: float = 1e-16,
) -> NewtonTrace:
    """Solve the Weibull shape likelihood equation with Newton's method.

    Finds the root of ``f(a) = sum(x**a * ln x) / sum(x**a) - mean(ln x) - 1/a``.
    The first step always runs; iteration stops once ``|step| <= tolerance`` or
    ``max_iterations`` steps have been taken. The run counts as converged when
    the last step is within ``tolerance`` or within a few ulp of the estimate.
    Samples must be strictly positive.
    """

    x = _as_samples(samples)
    lnx = np.log(x)
    lnxsq = lnx**2
    mean_lnx = lnx.mean()

    def newton_step(alpha):
        xpow = x**alpha
        sum_xpow = xpow.sum()
        dot_xpow_lnx = xpow @ lnx
        fx = dot_xpow_lnx / sum_xpow - mean_lnx - 1 / alpha
        dfx = (-(dot_xpow_lnx**2) + sum_xpow * (lnxsq @ xpow)) / sum_xpow**2 + 1 / alpha**2
        return fx / dfx

    alpha0 = x.dtype.type(initial_shape)
    step = newton_step(alpha0)
    alpha = alpha0 - step
    err = abs(step)
    iterations = 1
    while err > tolerance and iterations < max_iterations:
        step = newton_step(alpha)
        alpha = alpha - step
        err = abs(step)
        iterations += 1

    # steps stall at a few ulp of alpha, below which tolerance cannot be met
    floor = max(tolerance, 16 * np.finfo(x.dtype).eps * abs(alpha))
    return NewtonTrace(shape=alpha, iterations=iterations, last_step=err, converged=bool(err <= floor))


def scale_for_shape(samples, shape):
    """Maximum-likelihood scale given the shape: ``mean(x**shape) ** (1/shape)``."""
    x = _as_samples(samples)
    return np.mean(x**shape) ** (1 / shape)


def fit_mle(
    samples,
    initial_shape: float = 1.0,
    max_iterations: int = 1000,
    tolerance: float = 1e-16,
) -> Weibull:
    """Maximum-likelihood Weibull fit.

    Hitting ``max_iterations`` is not an error: the current estimate is
    returned and a warning is logged. Raises ``InvalidParameterError`` when the
    iteration ends on a non-positive or NaN estimate.
    """

    trace = newton_shape(samples, initial_shape=initial_shape, max_iterations=max_iterations, tolerance=tolerance)
    theta = scale_for_shape(samples, trace.shape)
    extra = {"model": "weibull", "n_samples": int(np.size(samples)), "iterations": trace.iterations}
    if trace.converged:
        log.debug("Weibull fit converged", extra=extra)
    else:
        log.warning(
            "Weibull fit stopped at iteration cap without converging",
            extra={**extra, "last_step": float(trace.last_step)},
        )
    return Weibull(trace.shape, theta)


__all__ = ["NewtonTrace", "Weibull", "fit_mle", "newton_shape", "scale_for_shape"]
