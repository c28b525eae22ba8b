"""Fit CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import typer

from statdist.config.fit_config import FitConfig, load_fit_config
from statdist.distributions.fitters.weibull_fitter import WeibullFitter
from statdist.exceptions import DataSourceError
from statdist.utils.logging import get_logger

log = get_logger(__name__, component="cli_fit")


def load_samples(path: Path, column: str | None) -> pd.Series:
    if not path.exists():
        raise DataSourceError(f"Sample file not found: {path}")
    df = pd.read_csv(path)
    if df.empty:
        raise DataSourceError(f"Sample file is empty: {path}")
    if column is None:
        numeric = df.select_dtypes("number").columns
        if len(numeric) == 0:
            raise DataSourceError(f"No numeric column in {path}")
        column = numeric[0]
    elif column not in df.columns:
        raise DataSourceError(f"Column '{column}' not found in {path}; available: {', '.join(map(str, df.columns))}")
    series = df[column].dropna()
    log.info("samples loaded", extra={"n_samples": len(series), "path": str(path), "column": column})
    return series


def fit(
    input: Path = typer.Option(..., "--input", "-i", help="CSV file with sample data"),
    column: str = typer.Option(None, help="Column holding the samples (default: first numeric column)"),
    config: Path = typer.Option(None, help="Optional JSON/YAML fit configuration"),
    initial_shape: float = typer.Option(None, help="Override the Newton starting shape"),
    max_iterations: int = typer.Option(None, help="Override the Newton iteration cap"),
    output: Path = typer.Option(None, help="Write the fit result JSON to this file"),
) -> None:
    """Fit a Weibull distribution to samples by maximum likelihood."""
    fit_config = load_fit_config(config) if config else FitConfig()
    overrides = {}
    if initial_shape is not None:
        overrides["initial_shape"] = initial_shape
    if max_iterations is not None:
        overrides["max_iterations"] = max_iterations
    if overrides:
        fit_config = FitConfig.from_dict({**fit_config.to_dict(), **overrides})

    samples = load_samples(input, column)
    result = WeibullFitter(fit_config).fit(samples.to_numpy())

    payload = json.dumps(result.to_dict(), indent=2)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload)
    typer.echo(payload)
    log.info("fit command completed", extra={"model": result.model_name, "iterations": result.iterations})
