"""
Example of stacked state occupation plots
"""

import os
import numpy as np
import matplotlib.pyplot as plt
from lifelines import AalenJohansenFitter
from cifplot import MultiStateResult, ResultConverter, plot_competing_risks

def occupation_probabilities(time, event, timeline):
    """Probability of being event free, dead or progressed at each time"""
    cif = {}
    for code, name in [(1, "death"), (2, "progression")]:
        ajf = AalenJohansenFitter()
        ajf.fit(time, event, event_of_interest=code)
        cif[name] = np.asarray(ajf.predict(timeline), dtype=float)
    event_free = 1 - cif["death"] - cif["progression"]
    return np.column_stack([event_free, cif["death"], cif["progression"]])

def main():
    np.random.seed(2)
    n_samples = 200
    time = np.random.exponential(size=n_samples)
    group = np.random.choice(["BRCA", "LUNG"], size=n_samples)
    event = np.random.choice([0, 1, 2], size=n_samples)

    timeline = np.linspace(0, 3, 50)
    states = ["(s0)", "death", "progression"]

    # Without strata
    pstate = occupation_probabilities(time, event, timeline)
    fit = MultiStateResult(timeline, pstate, states)

    output_dir = "examples/output"
    os.makedirs(output_dir, exist_ok=True)
    grid = plot_competing_risks(fit)
    grid.savefig(os.path.join(output_dir, "pstate_all.png"), dpi=150)

    # One stratum per group, rows stacked in strata order
    blocks = [occupation_probabilities(time[group == g], event[group == g], timeline)
              for g in ["BRCA", "LUNG"]]
    fit = MultiStateResult(
        np.concatenate([timeline, timeline]),
        np.vstack(blocks),
        states,
        strata={"group=BRCA": len(timeline), "group=LUNG": len(timeline)}
    )
    grid = plot_competing_risks(fit, palette="Set2", legend="top")
    grid.savefig(os.path.join(output_dir, "pstate_strata.png"), dpi=150)

    # Per-state arrays, e.g. averaged predictions for several subjects
    state_probs = {
        1: np.tile(pstate[:, 0], (10, 1)),
        2: np.tile(pstate[:, 1], (10, 1)),
        3: np.tile(pstate[:, 2], (10, 1)),
    }
    fit = ResultConverter.from_state_probabilities(timeline, state_probs, state_names=states)
    grid = plot_competing_risks(fit, xlabel="Years")
    grid.savefig(os.path.join(output_dir, "pstate_predicted.png"), dpi=150)
    plt.close('all')

if __name__ == "__main__":
    main()
