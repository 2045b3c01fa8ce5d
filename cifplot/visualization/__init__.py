"""
Visualization module
"""

from .visualization import (
    plot_competing_risks,
    plot_cuminc,
    plot_pstate
)
from .style import apply_style
from .themes import theme_survival

__all__ = [
    'plot_competing_risks',
    'plot_cuminc',
    'plot_pstate',
    'apply_style',
    'theme_survival'
]
