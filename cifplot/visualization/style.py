"""
Generic post-processing of finished plots
"""

from matplotlib.legend import Legend
import seaborn as sns
from typing import Optional, Tuple

# Legend side -> (loc, bbox_to_anchor) relative to the figure
LEGEND_POSITIONS = {
    "right": ("center left", (1, .5)),
    "left": ("center right", (0, .5)),
    "top": ("lower center", (.5, 1)),
    "bottom": ("upper center", (.5, 0)),
}

def apply_style(grid: sns.FacetGrid,
                legend: Optional[str] = None,
                legend_title: Optional[str] = None,
                xlim: Optional[Tuple[float, float]] = None,
                ylim: Optional[Tuple[float, float]] = None,
                font_size: Optional[float] = None,
                title: Optional[str] = None,
                xlabel: Optional[str] = None,
                ylabel: Optional[str] = None,
                **axes_kwargs) -> sns.FacetGrid:
    """
    Apply styling options to a finished plot

    Parameters
    ----------
    grid : seaborn.FacetGrid
        Plot to modify in place
    legend : str, optional
        "none" hides the legend, "top", "bottom", "left" or "right" puts it
        on that side of the figure. Any matplotlib legend location is also
        accepted.
    legend_title : str, optional
        New legend title
    xlim, ylim : tuple of float, optional
        Axis limits applied to every panel
    font_size : float, optional
        Font size of tick labels, axis labels and panel titles
    title : str, optional
        Figure title
    xlabel, ylabel : str, optional
        Axis labels
    **axes_kwargs
        Passed unchanged to ``FacetGrid.set`` (i.e. ``Axes.set``)

    Returns
    -------
    seaborn.FacetGrid
        The same grid
    """
    if xlabel is not None or ylabel is not None:
        grid.set_axis_labels(x_var=xlabel, y_var=ylabel)

    if title is not None:
        grid.figure.suptitle(title)

    if xlim is not None:
        grid.set(xlim=xlim)
    if ylim is not None:
        grid.set(ylim=ylim)
    if axes_kwargs:
        grid.set(**axes_kwargs)

    if font_size is not None:
        for ax in grid.axes.flat:
            ax.tick_params(labelsize=font_size)
            ax.xaxis.label.set_size(font_size)
            ax.yaxis.label.set_size(font_size)
            ax.title.set_size(font_size)

    if legend is not None:
        _place_legend(grid, legend)

    if legend_title is not None and grid.legend is not None:
        grid.legend.set_title(legend_title)

    return grid

def _place_legend(grid: sns.FacetGrid, legend: str) -> None:
    if legend != "none" and legend not in LEGEND_POSITIONS and legend not in Legend.codes:
        raise ValueError(f"Unknown legend position {legend!r}")

    if grid.legend is None:
        return

    if legend == "none":
        grid.legend.set_visible(False)
        return

    if legend in LEGEND_POSITIONS:
        loc, anchor = LEGEND_POSITIONS[legend]
        ncol = max(len(grid.legend.get_texts()), 1) if legend in ("top", "bottom") else 1
        sns.move_legend(grid, loc, bbox_to_anchor=anchor, ncol=ncol)
    else:
        sns.move_legend(grid, legend)
