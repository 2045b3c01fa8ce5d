"""
Visualization functions
"""

import logging
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
from typing import Callable, Dict, Optional, Sequence, Union

from ..config import (
    DEFAULT_GROUP_SEP, ESTIMATE_COL, EVENT_COL, FACET_ASPECT, FACET_HEIGHT,
    GROUP_COL, PROBABILITY_COL, STATE_COL, STRATA_COL, TIME_COL, TITLE,
    XLABEL, YLABEL
)
from ..data import CompetingRisksResult, MultiStateResult
from ..exceptions import UnsupportedInputKind
from ..tables import cuminc_table, pstate_table
from .style import apply_style
from .themes import resolve_theme

logger = logging.getLogger(__name__)

def _wrap_columns(n_panels: int) -> int:
    """Number of columns for a roughly square panel layout"""
    return max(int(np.ceil(np.sqrt(n_panels))), 1)

def plot_cuminc(table: pd.DataFrame,
                multiple_panels: bool = True,
                palette: Optional[Union[str, Sequence]] = None) -> sns.FacetGrid:
    """
    Plot cumulative incidence curves as lines

    Parameters
    ----------
    table : pandas.DataFrame
        Output of ``cuminc_table``
    multiple_panels : bool, default=True
        If True, one panel per group with events told apart by colour.
        Otherwise a single panel with colour per event and line style per
        group.
    palette : str or list, optional
        Colours for the events

    Returns
    -------
    seaborn.FacetGrid
        The plot
    """
    if table.empty:
        logger.debug("No curves to draw")
        return sns.FacetGrid(table, height=FACET_HEIGHT, aspect=FACET_ASPECT)

    events = list(pd.unique(table[EVENT_COL]))
    groups = list(pd.unique(table[GROUP_COL]))

    kwargs = dict(
        data=table, x=TIME_COL, y=ESTIMATE_COL,
        hue=EVENT_COL, hue_order=events, palette=palette,
        kind="line", estimator=None, errorbar=None, sort=False,
        height=FACET_HEIGHT, aspect=FACET_ASPECT,
    )
    if multiple_panels:
        grid = sns.relplot(col=GROUP_COL, col_order=groups,
                           col_wrap=_wrap_columns(len(groups)), **kwargs)
        grid.set_titles("{col_name}")
    else:
        grid = sns.relplot(style=GROUP_COL, style_order=groups, **kwargs)

    logger.debug("Drew %d events over %d groups (multiple_panels=%s)",
                 len(events), len(groups), multiple_panels)
    return grid

def _stack_states(data: pd.DataFrame,
                  colors: Sequence,
                  color=None,
                  label=None,
                  **kwargs) -> None:
    """Draw the stacked state areas of one panel"""
    ax = plt.gca()
    states = list(data[STATE_COL].cat.categories)
    rows = [data[data[STATE_COL] == state] for state in states]
    ax.stackplot(
        rows[0][TIME_COL].to_numpy(),
        [r[PROBABILITY_COL].to_numpy() for r in rows],
        labels=[str(state) for state in states],
        colors=colors,
        **kwargs
    )

def plot_pstate(table: pd.DataFrame,
                palette: Optional[Union[str, Sequence]] = None) -> sns.FacetGrid:
    """
    Plot state occupation probabilities as stacked areas, one panel per stratum

    Parameters
    ----------
    table : pandas.DataFrame
        Output of ``pstate_table``
    palette : str or list, optional
        Colours for the states

    Returns
    -------
    seaborn.FacetGrid
        The plot
    """
    if table.empty:
        logger.debug("No state probabilities to draw")
        return sns.FacetGrid(table, height=FACET_HEIGHT, aspect=FACET_ASPECT)

    strata = list(pd.unique(table[STRATA_COL]))
    colors = sns.color_palette(palette, n_colors=len(table[STATE_COL].cat.categories))

    grid = sns.FacetGrid(table, col=STRATA_COL, col_order=strata,
                         col_wrap=_wrap_columns(len(strata)),
                         height=FACET_HEIGHT, aspect=FACET_ASPECT)
    grid.map_dataframe(_stack_states, colors=colors)
    grid.set_titles("{col_name}")
    grid.add_legend(title=STATE_COL)

    logger.debug("Drew stacked state probabilities for %d strata", len(strata))
    return grid

def _render_cuminc(fit: CompetingRisksResult,
                   group_names: Optional[Sequence[str]],
                   group_sep: str,
                   multiple_panels: bool,
                   palette) -> sns.FacetGrid:
    table = cuminc_table(fit, group_names=group_names, group_sep=group_sep)
    return plot_cuminc(table, multiple_panels=multiple_panels, palette=palette)

def _render_pstate(fit: MultiStateResult,
                   group_names: Optional[Sequence[str]],
                   group_sep: str,
                   multiple_panels: bool,
                   palette) -> sns.FacetGrid:
    # Group naming and panel layout only apply to competing risks curves
    return plot_pstate(pstate_table(fit), palette=palette)

RENDERERS: Dict[str, Callable[..., sns.FacetGrid]] = {
    CompetingRisksResult.kind: _render_cuminc,
    MultiStateResult.kind: _render_pstate,
}

def plot_competing_risks(fit: Union[CompetingRisksResult, MultiStateResult],
                         group_names: Optional[Sequence[str]] = None,
                         group_sep: str = DEFAULT_GROUP_SEP,
                         multiple_panels: bool = True,
                         theme: Optional[Union[str, Dict[str, object]]] = None,
                         palette: Optional[Union[str, Sequence]] = None,
                         **style) -> sns.FacetGrid:
    """
    Plot cumulative incidence functions

    Competing risks curves are drawn as lines. State occupation
    probabilities of a multi-state fit are drawn as stacked areas with one
    panel per stratum.

    Parameters
    ----------
    fit : CompetingRisksResult or MultiStateResult
        Result to plot
    group_names : list of str, optional
        Names replacing the curve keys, matched by position (competing
        risks only)
    group_sep : str, default=" "
        Separator between group and event in the curve names (competing
        risks only)
    multiple_panels : bool, default=True
        Plot each group in its own panel (competing risks only)
    theme : str or dict, optional
        seaborn style name or dict of rc parameters. Defaults to
        ``theme_survival()``.
    palette : str or list, optional
        Colour palette for events or states
    **style
        Further options for ``apply_style``

    Returns
    -------
    seaborn.FacetGrid
        The plot
    """
    kind = getattr(fit, "kind", None)
    render = RENDERERS.get(kind) if isinstance(kind, str) else None
    if render is None:
        raise UnsupportedInputKind(
            f"Cannot plot {type(fit).__name__}; expected CompetingRisksResult or MultiStateResult"
        )
    logger.debug("Plotting %s result", kind)

    with sns.axes_style(resolve_theme(theme)):
        grid = render(fit, group_names, group_sep, multiple_panels, palette)
        grid.set_axis_labels(XLABEL, YLABEL)
        grid.figure.suptitle(TITLE)
        grid.tight_layout()
        apply_style(grid, **style)

    return grid
