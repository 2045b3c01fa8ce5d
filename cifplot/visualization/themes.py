"""
Plot themes
"""

import seaborn as sns
from typing import Dict, Optional, Union

SEABORN_STYLES = ("white", "dark", "whitegrid", "darkgrid", "ticks")

def theme_survival(base_size: float = 12) -> Dict[str, object]:
    """
    Default theme for survival curves

    White background, ticks on the left and bottom axes only, no grid.

    Parameters
    ----------
    base_size : float, default=12
        Base font size in points

    Returns
    -------
    dict
        Matplotlib rc parameters usable with ``seaborn.axes_style``
    """
    theme = dict(sns.axes_style("ticks"))
    theme.update({
        "axes.grid": False,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.edgecolor": "black",
        "axes.labelcolor": "black",
        "xtick.color": "black",
        "ytick.color": "black",
        "legend.frameon": False,
        "font.size": base_size,
        "axes.labelsize": base_size,
        "axes.titlesize": base_size,
        "figure.titlesize": base_size + 2,
        "legend.fontsize": base_size - 1,
        "legend.title_fontsize": base_size - 1,
        "xtick.labelsize": base_size - 1,
        "ytick.labelsize": base_size - 1,
    })
    return theme

def resolve_theme(theme: Optional[Union[str, Dict[str, object]]] = None) -> Dict[str, object]:
    """Turn a theme argument into rc parameters"""
    if theme is None:
        return theme_survival()
    if isinstance(theme, str):
        if theme not in SEABORN_STYLES:
            raise ValueError(f"Unknown theme {theme!r}, expected one of {SEABORN_STYLES}")
        return dict(sns.axes_style(theme))
    if isinstance(theme, dict):
        return dict(theme)
    raise TypeError(f"Theme must be a style name or a dict of rc parameters, got {type(theme).__name__}")
