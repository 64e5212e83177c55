"""
montyhall: Monte Carlo Simulation of the Generalized Monty Hall Problem
=======================================================================

A contestant picks one of N doors hiding a single prize. The host opens a
number of doors that hide neither the prize nor the contestant's pick. The
contestant may then switch to a random door that is still closed. Over many
independent trials the empirical win rate is compared with the closed-form
probability.

Key Features
------------
- Single trials with explicit, reproducible ``numpy.random.Generator`` draws
- Any door count N >= 3 and any reveal count 1 <= r <= N - 2
- Closed-form win probabilities: ``1 / N`` when staying,
  ``(N - 1) / (N * (N - r - 1))`` when switching
- Sequential runs with per-trial observers and a stop signal, or parallel
  runs across worker processes with independent seed streams
- Wilson confidence intervals and exact binomial tests against theory
- Per-trial history as a pandas DataFrame, CSV export, convergence plot

Main Components
---------------
TrialConfig : class
    Door count, reveal count and switch policy.
simulate_trial : function
    One trial, returning a ``TrialResult``.
run_experiments : function
    Repeated trials, returning ``ExperimentResults``.
theoretical_win_rate : function
    Closed-form probability of winning.
Exception hierarchy : module
    Typed exceptions inheriting from ``MontyHallError``.

Quick Start
-----------
>>> from montyhall import TrialConfig, run_experiments
>>>
>>> config = TrialConfig(number_of_doors=3, number_of_doors_to_reveal=1,
...                      contestant_switches=True)
>>> results = run_experiments(config, number_of_experiments=15000, seed=1)
>>> print(results.summary())
"""

from .config import DEFAULT_NUMBER_OF_EXPERIMENTS, TrialConfig
from .experiment import run_experiments, theoretical_win_rate
from .narration import TrialNarrator, format_report, format_trial
from .results import ExperimentResults
from .trial import TrialResult, simulate_trial
from .validation import coerce_config

# Export exception classes
from .exceptions import (
    InvalidConfigError,
    InvalidDoorCountError,
    InvalidParameterError,
    InvalidRevealCountError,
    MontyHallError,
    VisualizationError,
)
from .warnings_categories import (
    ConfigCoercionWarning,
    MontyHallWarning,
    SmallSampleWarning,
)

__version__ = '0.1.0'

__all__ = [
    # Configuration
    'TrialConfig',
    'DEFAULT_NUMBER_OF_EXPERIMENTS',
    'coerce_config',
    # Simulation
    'simulate_trial',
    'TrialResult',
    'run_experiments',
    'theoretical_win_rate',
    'ExperimentResults',
    # Narration
    'TrialNarrator',
    'format_trial',
    'format_report',
    # Exception classes
    'MontyHallError',
    'InvalidParameterError',
    'InvalidConfigError',
    'InvalidDoorCountError',
    'InvalidRevealCountError',
    'VisualizationError',
    # Warning classes
    'MontyHallWarning',
    'ConfigCoercionWarning',
    'SmallSampleWarning',
]
