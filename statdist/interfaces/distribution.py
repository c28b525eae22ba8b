"""Distribution interface shared by evaluation and diagnostics code."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class ContinuousDistribution(Protocol):
    """Structural interface for continuous univariate distributions.

    Any object exposing these methods can be passed to the goodness-of-fit and
    likelihood helpers in :mod:`statdist.distributions.metrics`; no base class
    is required.
    """

    def pdf(self, x): ...

    def logpdf(self, x): ...

    def cdf(self, x): ...

    def quantile(self, p): ...

    def mean(self): ...

    def var(self): ...

    def sample(self, size=None, rng: np.random.Generator | None = None, seed: int | None = None): ...
