"""Pointwise evaluation and moment CLI commands."""

from __future__ import annotations

import json
from typing import List

import numpy as np
import typer

from statdist.distributions.weibull import Weibull


def _as_float(value) -> float | None:
    value = float(value)
    # JSON has no encoding for inf/nan
    return value if np.isfinite(value) else None


def evaluate(
    shape: float = typer.Option(..., help="Shape parameter (alpha > 0)"),
    scale: float = typer.Option(1.0, help="Scale parameter (theta > 0)"),
    x: List[float] = typer.Option(..., "--x", help="Point(s) to evaluate; repeat for several"),
) -> None:
    """Evaluate pdf, logpdf, cdf and ccdf at the given points."""
    dist = Weibull(shape, scale)
    points = np.asarray(x, dtype=float)
    rows = [
        {
            "x": float(xi),
            "pdf": _as_float(pdf),
            "logpdf": _as_float(logpdf),
            "cdf": _as_float(cdf),
            "ccdf": _as_float(ccdf),
        }
        for xi, pdf, logpdf, cdf, ccdf in zip(
            points, dist.pdf(points), dist.logpdf(points), dist.cdf(points), dist.ccdf(points)
        )
    ]
    typer.echo(json.dumps({"shape": float(dist.shape), "scale": float(dist.scale), "points": rows}, indent=2))


def describe(
    shape: float = typer.Option(..., help="Shape parameter (alpha > 0)"),
    scale: float = typer.Option(1.0, help="Scale parameter (theta > 0)"),
) -> None:
    """Print the closed-form moments of a Weibull distribution."""
    dist = Weibull(shape, scale)
    stats = {
        "shape": float(dist.shape),
        "scale": float(dist.scale),
        "mean": _as_float(dist.mean()),
        "median": _as_float(dist.median()),
        "mode": _as_float(dist.mode()),
        "var": _as_float(dist.var()),
        "std": _as_float(dist.std()),
        "skewness": _as_float(dist.skewness()),
        "kurtosis": _as_float(dist.kurtosis()),
        "entropy": _as_float(dist.entropy()),
    }
    typer.echo(json.dumps(stats, indent=2))
