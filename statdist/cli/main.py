"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from statdist.cli.commands.evaluate import describe, evaluate
from statdist.cli.commands.fit import fit
from statdist.cli.commands.sample import sample
from statdist.exceptions import (
    ConfigValidationError,
    DataSourceError,
    DistributionFitError,
    InvalidParameterError,
)
from statdist.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Weibull distribution toolkit")


app.command()(fit)
app.command()(evaluate)
app.command()(describe)
app.command()(sample)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigValidationError as exc:
        log.error(str(exc))
        raise SystemExit(1)
    except DataSourceError as exc:
        log.error(f"Data validation failed: {exc}")
        raise SystemExit(2)
    except DistributionFitError as exc:
        log.error(f"Distribution fitting failed: {exc}")
        raise SystemExit(3)
    except InvalidParameterError as exc:
        log.error(f"Invalid distribution parameters: {exc}")
        raise SystemExit(4)
    except KeyboardInterrupt:
        log.info("Interrupted")
        raise SystemExit(130)
    except Exception:
        log.exception("Unhandled exception")
        raise SystemExit(255)


if __name__ == "__main__":
    sys.exit(main())
