"""
Narration of trials and experiment reports.

Text output consumed by front ends. Nothing here affects the statistics;
:class:`TrialNarrator` is an observer that ``run_experiments`` calls once per
trial.
"""

import sys
from typing import Optional, TextIO

from .results import ExperimentResults
from .trial import TrialResult


def format_trial(experiment: int, result: TrialResult, number_of_wins: int) -> str:
    """
    One line describing a trial.

    Examples
    --------
    >>> from montyhall import TrialConfig, simulate_trial
    >>> result = simulate_trial(TrialConfig(3, 1, True), prize_door=2, initial_pick=1)
    >>> format_trial(1, result, 1)
    'Experiment #1.  Prize Door = 2, Picked Door = 1.   But Switched to Picked Door = 2.   Win #1'
    """
    line = (
        f"Experiment #{experiment}.  Prize Door = {result.prize_door}, "
        f"Picked Door = {result.initial_pick}.  "
    )
    if result.switched:
        line += f" But Switched to Picked Door = {result.final_pick}."
    if result.won:
        line += f"   Win #{number_of_wins}"
    return line


class TrialNarrator:
    """
    Observer that writes one line per trial.

    Parameters
    ----------
    stream : file-like, optional
        Where to write. Defaults to ``sys.stdout`` at call time.

    Examples
    --------
    >>> from montyhall import TrialConfig, run_experiments
    >>> results = run_experiments(TrialConfig(), 5, observer=TrialNarrator())  # doctest: +SKIP
    Experiment #1.  Prize Door = 3, Picked Door = 3.
    ...
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def __call__(self, experiment: int, result: TrialResult, number_of_wins: int) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(format_trial(experiment, result, number_of_wins) + "\n")


def format_report(results: ExperimentResults) -> str:
    """Final two-line report: actual wins and predicted win percentage."""
    return (
        f"Actual Number of Wins = {results.number_of_wins} = "
        f"{results.empirical_win_percentage:.2f}%\n"
        f"Predicted win percentage =  {results.theoretical_win_percentage:.2f}%"
    )
