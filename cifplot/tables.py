"""
Reshaping of result containers into long-form plotting tables
"""

import logging
import numpy as np
import pandas as pd
from typing import List, Optional, Sequence, Tuple

from .config import (
    ALL_STRATA, DEFAULT_GROUP_SEP, ESTIMATE_COL, EVENT_COL, GROUP_COL,
    NAME_COL, PROBABILITY_COL, STATE_COL, STRATA_COL, TIME_COL
)
from .data import CompetingRisksResult, MultiStateResult
from .exceptions import InvalidResultShape, MalformedGroupEventName

logger = logging.getLogger(__name__)

CUMINC_COLUMNS = [TIME_COL, ESTIMATE_COL, EVENT_COL, GROUP_COL, NAME_COL]
PSTATE_COLUMNS = [TIME_COL, STRATA_COL, STATE_COL, PROBABILITY_COL]

def split_group_event(name: str, group_sep: str = DEFAULT_GROUP_SEP) -> Tuple[str, str]:
    """
    Split a curve name into its group and event parts

    Parameters
    ----------
    name : str
        Curve name such as ``"BRCA progression"``
    group_sep : str, default=" "
        Separator between group and event

    Returns
    -------
    tuple of str
        ``(group, event)``

    Raises
    ------
    MalformedGroupEventName
        If the name does not contain the separator exactly once, or the
        group or event part is empty
    """
    if not group_sep:
        raise ValueError("Group separator cannot be empty")

    parts = str(name).split(group_sep)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedGroupEventName(
            f"Cannot split {name!r} into group and event on separator {group_sep!r}"
        )
    return parts[0], parts[1]

def _empty_cuminc_table() -> pd.DataFrame:
    return pd.DataFrame({
        TIME_COL: pd.Series(dtype=float),
        ESTIMATE_COL: pd.Series(dtype=float),
        EVENT_COL: pd.Series(dtype=object),
        GROUP_COL: pd.Series(dtype=object),
        NAME_COL: pd.Series(dtype=object),
    })

def cuminc_table(fit: CompetingRisksResult,
                 group_names: Optional[Sequence[str]] = None,
                 group_sep: str = DEFAULT_GROUP_SEP) -> pd.DataFrame:
    """
    Flatten competing risks curves into one long table

    Parameters
    ----------
    fit : CompetingRisksResult
        Cumulative incidence curves
    group_names : list of str, optional
        Display names replacing the curve keys. They are matched to the
        keys by position.
    group_sep : str, default=" "
        Separator between group and event in the display names

    Returns
    -------
    pandas.DataFrame
        One row per curve point with columns time, estimate, event, group
        and the unsplit display name
    """
    keys = fit.keys()
    if group_names is None:
        names: List[str] = keys
    else:
        names = list(group_names)
        if len(names) != len(keys):
            raise InvalidResultShape(
                f"Got {len(names)} group names for {len(keys)} curves"
            )

    if not keys:
        return _empty_cuminc_table()

    # Fail on a bad name before building anything
    split = {name: split_group_event(name, group_sep) for name in names}

    frames = []
    for key, name in zip(keys, names):
        series = fit.curves[key]
        frames.append(pd.DataFrame({
            TIME_COL: series.time,
            ESTIMATE_COL: series.estimate,
            NAME_COL: name,
        }))

    table = pd.concat(frames, ignore_index=True)
    table[EVENT_COL] = table[NAME_COL].map(lambda n: split[n][1])
    table[GROUP_COL] = table[NAME_COL].map(lambda n: split[n][0])

    logger.debug("Built cumulative incidence table with %d rows from %d curves",
                 len(table), len(keys))
    return table[CUMINC_COLUMNS]

def strata_labels(fit: MultiStateResult) -> np.ndarray:
    """Stratum label of every time row, in row order"""
    if fit.strata is None:
        return np.full(len(fit.time), ALL_STRATA, dtype=object)
    return np.repeat(
        np.array(list(fit.strata.keys()), dtype=object),
        list(fit.strata.values())
    )

def pstate_table(fit: MultiStateResult) -> pd.DataFrame:
    """
    Melt state occupation probabilities into one long table

    Parameters
    ----------
    fit : MultiStateResult
        State occupation probabilities

    Returns
    -------
    pandas.DataFrame
        One row per (stratum, time, state) with columns time, strata, state
        and probability. ``state`` is categorical and keeps the order of
        ``fit.states``.
    """
    wide = pd.DataFrame(fit.pstate, columns=fit.states)
    long = wide.melt(var_name=STATE_COL, value_name=PROBABILITY_COL, ignore_index=False)

    rows = long.index.to_numpy()
    long.insert(0, STRATA_COL, strata_labels(fit)[rows])
    long.insert(0, TIME_COL, fit.time[rows])
    long = long.reset_index(drop=True)
    long[STATE_COL] = pd.Categorical(long[STATE_COL], categories=fit.states)

    logger.debug("Built state occupation table with %d rows (%d times x %d states)",
                 len(long), len(fit.time), fit.n_states)
    return long[PSTATE_COLUMNS]
