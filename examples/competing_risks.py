"""
Example of cumulative incidence plots for competing risks
"""

import os
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from lifelines import AalenJohansenFitter
from cifplot import ResultConverter, plot_competing_risks, cuminc_table

# Set random seed for reproducibility
np.random.seed(2)

# Simulate follow-up for three cancer types
n_samples = 300
time = np.random.exponential(size=n_samples)
group = np.random.choice(["BRCA", "LUNG", "OV"], size=n_samples)
event = np.random.choice([0, 1, 2], size=n_samples)  # 0 = no event
event_names = {1: "death", 2: "progression"}

# Fit one Aalen-Johansen estimator per group and event type
fitters = {}
for g in np.unique(group):
    mask = group == g
    fitters[g] = {}
    for code, name in event_names.items():
        ajf = AalenJohansenFitter()
        ajf.fit(time[mask], event[mask], event_of_interest=code)
        fitters[g][name] = ajf

fit = ResultConverter.from_aalen_johansen(fitters)

table = cuminc_table(fit)
print("Curves:", fit.keys())
print(table.groupby(["group", "event"])["estimate"].max())

output_dir = "examples/output"
os.makedirs(output_dir, exist_ok=True)

# One panel per cancer type
grid = plot_competing_risks(fit)
grid.savefig(os.path.join(output_dir, "cuminc_panels.png"), dpi=150)

# All curves in one panel, line style per cancer type
grid = plot_competing_risks(fit, multiple_panels=False, palette="deep",
                            legend="bottom", ylim=(0, 1))
grid.savefig(os.path.join(output_dir, "cuminc_single.png"), dpi=150)

# Curves given directly, including a test summary that is not plotted
fit = ResultConverter.from_cuminc_dict({
    "1 death": {"time": [0, 1, 2, 3], "est": [0.0, 0.1, 0.2, 0.25]},
    "1 progression": {"time": [0, 1, 2, 3], "est": [0.0, 0.05, 0.1, 0.2]},
    "2 death": {"time": [0, 1.5, 3], "est": [0.0, 0.15, 0.3]},
    "2 progression": {"time": [0, 1.5, 3], "est": [0.0, 0.1, 0.12]},
    "Tests": pd.DataFrame({"stat": [1.3, 0.4], "pv": [0.25, 0.53], "df": [1, 1]},
                          index=["death", "progression"]),
})
grid = plot_competing_risks(fit, group_names=["Control death", "Control progression",
                                              "Treated death", "Treated progression"],
                            theme="whitegrid")
grid.savefig(os.path.join(output_dir, "cuminc_named.png"), dpi=150)
plt.close('all')
