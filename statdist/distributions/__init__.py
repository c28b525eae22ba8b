"""Distribution models, fitting and goodness-of-fit diagnostics."""

from statdist.distributions.models import FitResult
from statdist.distributions.weibull import NewtonTrace, Weibull, fit_mle, newton_shape

__all__ = ["FitResult", "NewtonTrace", "Weibull", "fit_mle", "newton_shape"]
