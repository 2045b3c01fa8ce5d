"""
Package-wide defaults
"""

# Competing risks table
TIME_COL = "time"
ESTIMATE_COL = "estimate"
EVENT_COL = "event"
GROUP_COL = "group"
NAME_COL = "name"

# Multi-state table
STATE_COL = "state"
PROBABILITY_COL = "probability"
STRATA_COL = "strata"

ALL_STRATA = "all"
TESTS_KEY = "Tests"
DEFAULT_GROUP_SEP = " "

YLABEL = "Probability of an event"
XLABEL = "Time"
TITLE = "Cumulative incidence functions"

# Height of a single facet, in inches
FACET_HEIGHT = 4.0
FACET_ASPECT = 1.2
