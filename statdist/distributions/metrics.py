"""Goodness-of-fit helpers usable with any ContinuousDistribution."""

from __future__ import annotations

import numpy as np
from scipy import stats

from statdist.interfaces.distribution import ContinuousDistribution


def log_likelihood(dist: ContinuousDistribution, samples) -> float:
    return float(np.sum(dist.logpdf(np.asarray(samples))))


def aic(log_likelihood: float, k: int) -> float:
    return float(2 * k - 2 * log_likelihood)


def bic(log_likelihood: float, k: int, n: int) -> float:
    return float(k * np.log(max(n, 1)) - 2 * log_likelihood)


def ks_test(dist: ContinuousDistribution, samples) -> tuple[float, float]:
    """One-sample Kolmogorov-Smirnov test of ``samples`` against ``dist.cdf``."""
    result = stats.kstest(np.asarray(samples, dtype=float), dist.cdf)
    return float(result.statistic), float(result.pvalue)


def compute_qq_pairs(dist: ContinuousDistribution, samples, quantiles: np.ndarray | None = None):
    """
    Compute QQ pairs for sample data against a fitted distribution.

    Returns (q, emp_q, model_q) where q are quantile levels.
    """
    if quantiles is None:
        quantiles = np.linspace(0.01, 0.99, 99)
    quantiles = np.asarray(quantiles, dtype=float)
    emp_q = np.quantile(np.asarray(samples, dtype=float), quantiles)
    model_q = np.asarray(dist.quantile(quantiles), dtype=float)
    return quantiles, emp_q, model_q


__all__ = ["aic", "bic", "compute_qq_pairs", "ks_test", "log_likelihood"]
