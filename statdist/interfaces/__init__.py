"""Shared interfaces for distribution implementations and generic diagnostics."""

from statdist.interfaces.distribution import ContinuousDistribution

__all__ = ["ContinuousDistribution"]
