"""Sample and parameter checks applied before and after fitting."""

from __future__ import annotations

import numpy as np

from statdist.exceptions import DataSourceError, DistributionFitError


def validate_samples(samples, min_samples: int) -> np.ndarray:
    """Return ``samples`` as a 1-D float array, raising on unusable data."""
    if samples is None:
        raise DataSourceError("No samples supplied")
    x = np.asarray(samples)
    if x.ndim != 1:
        raise DataSourceError(f"Samples must be one-dimensional, got shape {x.shape}")
    if not np.issubdtype(x.dtype, np.number) or np.issubdtype(x.dtype, np.complexfloating):
        raise DataSourceError(f"Samples must be real numbers, got dtype {x.dtype}")
    if len(x) < min_samples:
        raise DataSourceError(f"Insufficient samples for fit: need >= {min_samples}, got {len(x)}")
    if not np.isfinite(x).all():
        raise DataSourceError("Samples contain NaN or infinite values")
    if (x <= 0).any():
        raise DataSourceError("Weibull fitting requires strictly positive samples")
    return x.astype(np.result_type(x.dtype, np.float32), copy=False)


def enforce_convergence(values: dict) -> None:
    for key, val in values.items():
        if val is None or not np.isfinite(val):
            raise DistributionFitError(f"Non-finite parameter {key}: {val}")


__all__ = ["enforce_convergence", "validate_samples"]
