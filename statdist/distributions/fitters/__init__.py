from statdist.distributions.fitters.weibull_fitter import WeibullFitter

__all__ = ["WeibullFitter"]
