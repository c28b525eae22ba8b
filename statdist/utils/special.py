"""Numeric helpers shared by distribution implementations."""

from __future__ import annotations

import math

import numpy as np

LOG2 = math.log(2.0)
EULER_GAMMA = 0.5772156649015328606


def promote_params(*values):
    """Cast parameters to one common floating dtype.

    Integer and boolean inputs promote to float64; float32 inputs stay float32
    unless mixed with something wider.
    """

    dtypes = [np.asarray(v).dtype for v in values]
    dtype = np.result_type(*dtypes)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.result_type(dtype, np.float64)
    if not np.issubdtype(dtype, np.floating):
        raise TypeError(f"Cannot promote parameters of dtype {dtype} to a real floating type")
    return tuple(dtype.type(v) for v in values)


def log1mexp(y):
    """Compute ``log(1 - exp(y))`` for ``y <= 0`` without cancellation.

    Uses ``log(-expm1(y))`` above ``-log(2)`` and ``log1p(-exp(y))`` below it.
    Returns a NumPy scalar for scalar input.
    """

    y = np.asarray(y, dtype=np.result_type(np.asarray(y).dtype, np.float16))
    with np.errstate(divide="ignore", invalid="ignore"):
        near_zero = np.log(-np.expm1(y))
        far = np.log1p(-np.exp(y))
    return np.where(y > -LOG2, near_zero, far)[()]


__all__ = ["EULER_GAMMA", "LOG2", "log1mexp", "promote_params"]
