"""
Result containers for competing risks and multi-state fits
"""

import numpy as np
import pandas as pd
from typing import Dict, Mapping, Optional, Sequence, Union

from ..config import TESTS_KEY
from ..exceptions import InvalidResultShape
from .data_validator import DataValidator

ArrayLike = Union[np.ndarray, pd.Series, Sequence[float]]

class CurveSeries:
    """Class for a single cumulative incidence curve"""

    def __init__(self, time: ArrayLike,
                 estimate: ArrayLike,
                 variance: Optional[ArrayLike] = None):
        """
        Initialize a curve

        Parameters
        ----------
        time : array-like
            Time points of the curve
        estimate : array-like
            Cumulative incidence estimate at each time point
        variance : array-like, optional
            Variance of the estimate at each time point
        """
        self.time = np.asarray(time, dtype=float)
        self.estimate = np.asarray(estimate, dtype=float)
        self.variance = None if variance is None else np.asarray(variance, dtype=float)
        DataValidator().validate_curve(self.time, self.estimate, self.variance)

    def __len__(self):
        return len(self.time)

    def __repr__(self):
        return f"CurveSeries(n_points={len(self)})"

class CompetingRisksResult:
    """Class for cumulative incidence curves from a competing risks estimator

    Curves are keyed by ``group + separator + event``. A hypothesis test
    summary can be attached through ``tests``; it is never treated as a
    curve.
    """

    kind = "cuminc"

    def __init__(self, curves: Mapping[str, CurveSeries], tests: Optional[object] = None):
        """
        Initialize competing risks result

        Parameters
        ----------
        curves : mapping of str to CurveSeries
            Curves in display order
        tests : object, optional
            Test statistics reported by the estimator. A ``"Tests"`` entry in
            ``curves`` is moved here.
        """
        curves = dict(curves)
        if TESTS_KEY in curves:
            summary = curves.pop(TESTS_KEY)
            if tests is None:
                tests = summary

        for key, series in curves.items():
            if not isinstance(key, str):
                raise InvalidResultShape(f"Curve keys must be strings, got {key!r}")
            if not isinstance(series, CurveSeries):
                raise InvalidResultShape(
                    f"Curve {key!r} must be a CurveSeries, got {type(series).__name__}"
                )

        self.curves: Dict[str, CurveSeries] = curves
        self.tests = tests

    def keys(self):
        """Curve keys in their natural order"""
        return list(self.curves.keys())

    def __len__(self):
        return len(self.curves)

    def __repr__(self):
        return f"CompetingRisksResult(curves={self.keys()!r})"

class MultiStateResult:
    """Class for state occupation probabilities from a multi-state fit"""

    kind = "survfitms"

    def __init__(self, time: ArrayLike,
                 pstate: Union[np.ndarray, pd.DataFrame],
                 states: Sequence[str],
                 strata: Optional[Mapping[str, int]] = None):
        """
        Initialize multi-state result

        Parameters
        ----------
        time : array-like
            Time points, one per row of ``pstate``
        pstate : array-like of shape (n_times, n_states)
            Probability of occupying each state at each time point
        states : list of str
            State names, one per column of ``pstate``
        strata : mapping of str to int, optional
            Stratum label mapped to the number of consecutive rows it owns.
            Rows are assigned to strata in the order given.

        Notes
        -----
        Without strata all rows belong to one implicit stratum.
        """
        self.time = np.asarray(time, dtype=float)
        self.pstate = np.asarray(pstate, dtype=float)
        self.states = list(states)
        self.strata = None if strata is None else {str(k): int(v) for k, v in strata.items()}
        DataValidator().validate_multi_state(self.time, self.pstate, self.states, self.strata)

    @property
    def n_states(self) -> int:
        return len(self.states)

    def __repr__(self):
        return (f"MultiStateResult(n_times={len(self.time)}, states={self.states!r}, "
                f"strata={None if self.strata is None else list(self.strata)})")
