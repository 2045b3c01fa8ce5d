"""
Conversion of estimator output into result containers
"""

import logging
import numpy as np
import pandas as pd
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..config import DEFAULT_GROUP_SEP, TESTS_KEY
from ..exceptions import InvalidResultShape
from .data import CompetingRisksResult, CurveSeries, MultiStateResult

logger = logging.getLogger(__name__)

class ResultConverter:
    """Utility class for building result containers from other formats"""

    @staticmethod
    def _to_series(key: str, value: Any) -> CurveSeries:
        """Convert one curve entry to a CurveSeries"""
        if isinstance(value, CurveSeries):
            return value

        if isinstance(value, (Mapping, pd.DataFrame)):
            if "time" not in value:
                raise InvalidResultShape(f"Curve {key!r} has no 'time' field")
            for est_field in ("est", "estimate"):
                if est_field in value:
                    break
            else:
                raise InvalidResultShape(f"Curve {key!r} has no 'est' field")
            var_field = next((f for f in ("var", "variance") if f in value), None)
            return CurveSeries(
                value["time"],
                value[est_field],
                None if var_field is None else value[var_field]
            )

        # Sequence of (time, estimate) pairs
        pairs = np.asarray(value, dtype=float)
        if pairs.size == 0:
            return CurveSeries([], [])
        if pairs.ndim != 2 or pairs.shape[1] < 2:
            raise InvalidResultShape(
                f"Curve {key!r} must be a sequence of (time, estimate) pairs"
            )
        return CurveSeries(pairs[:, 0], pairs[:, 1])

    @staticmethod
    def from_cuminc_dict(data: Mapping[str, Any]) -> CompetingRisksResult:
        """Convert a ``cuminc``-style mapping to a CompetingRisksResult.

        Args:
            data: Mapping of ``"group event"`` keys to curves. A curve is a
                mapping (or DataFrame) with ``time``, ``est`` and optional
                ``var`` fields, or a sequence of (time, estimate) pairs. A
                ``"Tests"`` entry is kept as the test summary.

        Returns:
            CompetingRisksResult object
        """
        tests = data.get(TESTS_KEY) if isinstance(data, Mapping) else None
        curves = {
            key: ResultConverter._to_series(key, value)
            for key, value in data.items()
            if key != TESTS_KEY
        }
        return CompetingRisksResult(curves, tests=tests)

    @staticmethod
    def from_aalen_johansen(fitters: Mapping[str, Mapping[str, Any]],
                            group_sep: str = DEFAULT_GROUP_SEP) -> CompetingRisksResult:
        """Convert fitted lifelines ``AalenJohansenFitter`` objects.

        Args:
            fitters: Nested mapping ``{group: {event: fitter}}``
            group_sep: Separator placed between group and event in the keys

        Returns:
            CompetingRisksResult keyed ``group + group_sep + event``
        """
        curves: Dict[str, CurveSeries] = {}
        for group, by_event in fitters.items():
            for event, fitter in by_event.items():
                density = getattr(fitter, "cumulative_density_", None)
                if density is None:
                    raise ValueError(f"Fitter for group {group!r}, event {event!r} is not fitted")

                variance = getattr(fitter, "variance_", None)
                if variance is not None:
                    if isinstance(variance, pd.DataFrame):
                        variance = variance.iloc[:, 0]
                    variance = variance.reindex(density.index).to_numpy()

                key = f"{group}{group_sep}{event}"
                curves[key] = CurveSeries(
                    density.index.to_numpy(),
                    density.iloc[:, 0].to_numpy(),
                    variance
                )

        logger.debug("Converted %d Aalen-Johansen fits", len(curves))
        return CompetingRisksResult(curves)

    @staticmethod
    def from_state_probabilities(times: Sequence[float],
                                 state_probs: Mapping[Any, np.ndarray],
                                 state_names: Optional[List[str]] = None,
                                 strata: Optional[Mapping[str, int]] = None) -> MultiStateResult:
        """Convert per-state occupation probabilities to a MultiStateResult.

        Args:
            times: Time points
            state_probs: Mapping of state to probabilities. Arrays of shape
                (n_samples, n_times) are averaged over samples.
            state_names: Optional names replacing the mapping keys, in order
            strata: Optional strata row counts, see MultiStateResult

        Returns:
            MultiStateResult object
        """
        if not state_probs:
            raise InvalidResultShape("At least one state is required")

        names = [str(state) for state in state_probs] if state_names is None else list(state_names)
        if len(names) != len(state_probs):
            raise InvalidResultShape("Length of state_names must match number of states")

        columns = []
        for probs in state_probs.values():
            probs = np.asarray(probs, dtype=float)
            if probs.ndim == 2:
                probs = probs.mean(axis=0)
            columns.append(probs)

        lengths = {len(col) for col in columns}
        if len(lengths) > 1:
            raise InvalidResultShape("All states must have the same number of time points")

        return MultiStateResult(times, np.column_stack(columns), names, strata=strata)
