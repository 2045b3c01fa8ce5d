from cifplot import MultiStateResult, pstate_table, plot_competing_risks
from lifelines import AalenJohansenFitter
import numpy as np
import pytest
import os
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

def occupation(times, events, timeline):
    """Event free, death and progression probabilities on a common timeline"""
    cif = []
    for code in [1, 2]:
        ajf = AalenJohansenFitter()
        ajf.fit(times, events, event_of_interest=code)
        cif.append(np.asarray(ajf.predict(timeline), dtype=float))
    return np.column_stack([1 - cif[0] - cif[1], cif[0], cif[1]])

def test_multi_state_example(tmp_path):
    """Workflow from simulated data to a stratified state occupation plot"""
    np.random.seed(7)
    n_samples = 300
    times = np.random.exponential(size=n_samples)
    events = np.random.choice([0, 1, 2], size=n_samples)
    group = np.random.choice(["A", "B"], size=n_samples)
    timeline = np.linspace(0, 2, 25)

    blocks = [occupation(times[group == g], events[group == g], timeline) for g in ["A", "B"]]
    assert all(block.shape == (len(timeline), 3) for block in blocks)
    fit = MultiStateResult(
        np.concatenate([timeline, timeline]),
        np.vstack(blocks),
        ["(s0)", "death", "progression"],
        strata={"A": len(timeline), "B": len(timeline)}
    )

    table = pstate_table(fit)
    assert len(table) == 2 * len(timeline) * 3
    totals = table.groupby(["strata", "time"])["probability"].sum()
    assert np.allclose(totals, 1.0)

    grid = plot_competing_risks(fit)
    assert list(grid.axes_dict) == ["A", "B"]

    path = os.path.join(tmp_path, "pstate.png")
    grid.savefig(path)
    assert os.path.exists(path)
    plt.close('all')
