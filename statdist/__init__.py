"""Weibull distribution modelling: evaluation, sampling and maximum-likelihood fitting."""

from statdist.distributions.weibull import Weibull, fit_mle
from statdist.exceptions import InvalidParameterError, StatDistError

__version__ = "0.1.0"

__all__ = ["InvalidParameterError", "StatDistError", "Weibull", "fit_mle", "__version__"]
