"""
Shape checks for precomputed survival results
"""

import numpy as np
from typing import Mapping, Optional, Sequence

from ..exceptions import InvalidResultShape

class DataValidator:
    """Validator for cumulative incidence and state occupation results"""

    def validate_curve(self,
                       time: np.ndarray,
                       estimate: np.ndarray,
                       variance: Optional[np.ndarray] = None) -> bool:
        """Validate a single cumulative incidence curve

        Args:
            time: Array of time points
            estimate: Array of cumulative incidence estimates
            variance: Optional array of variance estimates

        Returns:
            True if the curve is valid, raises InvalidResultShape otherwise
        """
        if time.ndim != 1 or estimate.ndim != 1:
            raise InvalidResultShape("Time and estimate must be one-dimensional")

        if len(time) != len(estimate):
            raise InvalidResultShape(
                f"Time and estimate arrays must have same length "
                f"({len(time)} != {len(estimate)})"
            )

        if variance is not None and len(variance) != len(time):
            raise InvalidResultShape(
                f"Variance must have one value per time point "
                f"({len(variance)} != {len(time)})"
            )

        return True

    def validate_multi_state(self,
                             time: np.ndarray,
                             pstate: np.ndarray,
                             states: Sequence[str],
                             strata: Optional[Mapping[str, int]] = None) -> bool:
        """Validate a state occupation result

        Args:
            time: Array of time points, one per row of pstate
            pstate: Matrix of occupation probabilities (time points x states)
            states: State names, one per column of pstate
            strata: Optional mapping of stratum label to its number of rows

        Returns:
            True if the result is valid, raises InvalidResultShape otherwise
        """
        if time.ndim != 1:
            raise InvalidResultShape("Time must be one-dimensional")

        if pstate.ndim != 2:
            raise InvalidResultShape(
                f"State probabilities must be a 2-D matrix, got {pstate.ndim} dimension(s)"
            )

        n_rows, n_cols = pstate.shape
        if n_rows != len(time):
            raise InvalidResultShape(
                f"State probabilities have {n_rows} rows but there are {len(time)} time points"
            )

        if n_cols != len(states):
            raise InvalidResultShape(
                f"State probabilities have {n_cols} columns but {len(states)} states are named"
            )

        if len(set(states)) != len(states):
            raise InvalidResultShape("State names must be unique")

        if strata is not None:
            counts = list(strata.values())
            if any(count < 0 for count in counts):
                raise InvalidResultShape("Strata row counts cannot be negative")
            if sum(counts) != n_rows:
                raise InvalidResultShape(
                    f"Strata row counts sum to {sum(counts)} but there are {n_rows} time points"
                )

        return True
