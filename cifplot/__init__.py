"""
cifplot: Cumulative incidence plots for competing risks and multi-state fits
"""

__version__ = "0.1.0"

from .data import CurveSeries, CompetingRisksResult, MultiStateResult, ResultConverter
from .tables import cuminc_table, pstate_table
from .exceptions import (
    CifPlotError,
    UnsupportedInputKind,
    InvalidResultShape,
    MalformedGroupEventName
)
from .visualization import (
    plot_competing_risks,
    apply_style,
    theme_survival
)

__all__ = [
    "CurveSeries",
    "CompetingRisksResult",
    "MultiStateResult",
    "ResultConverter",
    "cuminc_table",
    "pstate_table",
    "CifPlotError",
    "UnsupportedInputKind",
    "InvalidResultShape",
    "MalformedGroupEventName",
    "plot_competing_risks",
    "apply_style",
    "theme_survival"
]
