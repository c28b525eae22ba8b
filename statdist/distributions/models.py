"""Shared models for distribution fitting."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FitResult:
    model_name: str
    params: Dict[str, float]
    log_likelihood: float
    aic: float
    bic: float
    n: int
    converged: bool
    iterations: int = 0
    final_step: Optional[float] = None
    ks_statistic: Optional[float] = None
    ks_pvalue: Optional[float] = None
    warnings: List[str] = field(default_factory=list)
    fit_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["FitResult"]
