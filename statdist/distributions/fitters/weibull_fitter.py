"""Weibull fitter wrapper producing FitResult diagnostics."""

from __future__ import annotations

import time

import numpy as np

from statdist.config.fit_config import FitConfig
from statdist.distributions.metrics import aic as calc_aic, bic as calc_bic, ks_test, log_likelihood
from statdist.distributions.models import FitResult
from statdist.distributions.validation import enforce_convergence, validate_samples
from statdist.distributions.weibull import Weibull, newton_shape, scale_for_shape
from statdist.exceptions import DistributionFitError, InvalidParameterError
from statdist.utils.logging import get_logger

log = get_logger(__name__, component="weibull_fitter")


class WeibullFitter:
    name = "weibull"
    k = 2

    def __init__(self, config: FitConfig | None = None) -> None:
        self.config = config or FitConfig()
        self.params: dict[str, float] | None = None
        self._distribution: Weibull | None = None
        self._loglik: float | None = None

    def fit(self, samples) -> FitResult:
        x = validate_samples(samples, self.config.min_samples)
        start = time.perf_counter()
        trace = newton_shape(
            x,
            initial_shape=self.config.initial_shape,
            max_iterations=self.config.max_iterations,
            tolerance=self.config.tolerance,
        )
        theta = scale_for_shape(x, trace.shape)
        try:
            enforce_convergence({"shape": trace.shape, "scale": theta})
            dist = Weibull(trace.shape, theta)
        except (DistributionFitError, InvalidParameterError) as exc:
            log.warning(
                "Model failed to converge",
                extra={"model": self.name, "n_samples": len(x), "iterations": trace.iterations},
            )
            raise DistributionFitError(f"Weibull fit failed: {exc}") from exc

        warnings: list[str] = []
        if not trace.converged:
            warnings.append(
                f"max_iterations={self.config.max_iterations} reached; last Newton step {float(trace.last_step):.3g}"
            )

        loglik = log_likelihood(dist, x)
        ks_stat, ks_p = ks_test(dist, x)
        self._distribution = dist
        self._loglik = loglik
        self.params = {"shape": float(dist.shape), "scale": float(dist.scale)}

        duration_ms = (time.perf_counter() - start) * 1000
        log.info(
            "Weibull fit complete",
            extra={
                "model": self.name,
                "n_samples": len(x),
                "iterations": trace.iterations,
                "duration_ms": round(duration_ms, 3),
            },
        )
        return FitResult(
            model_name=self.name,
            params=dict(self.params),
            log_likelihood=loglik,
            aic=calc_aic(loglik, self.k),
            bic=calc_bic(loglik, self.k, len(x)),
            n=len(x),
            converged=trace.converged,
            iterations=trace.iterations,
            final_step=float(trace.last_step),
            ks_statistic=ks_stat,
            ks_pvalue=ks_p,
            warnings=warnings,
            fit_message="converged" if trace.converged else "max_iterations_reached",
        )

    @property
    def distribution(self) -> Weibull:
        if self._distribution is None:
            raise DistributionFitError("WeibullFitter.distribution accessed before fit")
        return self._distribution

    def sample(self, size=None, seed: int | None = None) -> np.ndarray:
        if self._distribution is None:
            raise DistributionFitError("WeibullFitter.sample called before fit")
        return self._distribution.sample(size, seed=seed)

    def log_likelihood(self) -> float:
        if self._loglik is None:
            raise DistributionFitError("WeibullFitter.log_likelihood called before fit")
        return self._loglik


__all__ = ["WeibullFitter"]
