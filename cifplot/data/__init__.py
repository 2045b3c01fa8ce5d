"""
Result containers for cumulative incidence plotting
"""

from .data import CurveSeries, CompetingRisksResult, MultiStateResult
from .data_converter import ResultConverter
from .data_validator import DataValidator

__all__ = [
    "CurveSeries",
    "CompetingRisksResult",
    "MultiStateResult",
    "ResultConverter",
    "DataValidator"
]
