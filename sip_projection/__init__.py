"""Deterministic month-by-month projection of a systematic investment plan."""

__version__ = "0.1.0"

from sip_projection.core.metrics import yearly_summaries
from sip_projection.core.projection import project
from sip_projection.models import PlanConfiguration
from sip_projection.schemas.projection import FinalMetrics, MonthlyRecord, SimulationResult, YearlySummary

__all__ = [
    "PlanConfiguration",
    "MonthlyRecord",
    "YearlySummary",
    "FinalMetrics",
    "SimulationResult",
    "project",
    "yearly_summaries",
]
