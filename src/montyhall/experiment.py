"""
Monte Carlo Experiment Runner

Repeats independent Monty Hall trials, tallies wins, and compares the
empirical win rate with the closed-form probability.
"""

from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, List, Optional
import logging
import random

import numpy as np
import pandas as pd

from .config import DEFAULT_NUMBER_OF_EXPERIMENTS, TrialConfig
from .exceptions import InvalidParameterError
from .results import ExperimentResults
from .trial import TrialResult, simulate_trial
from .validation import resolve_n_jobs, validate_number_of_experiments

# Configure logging
logger = logging.getLogger('montyhall')

TrialObserver = Callable[[int, TrialResult, int], None]

_HISTORY_COLUMNS = [
    'experiment', 'prize_door', 'initial_pick', 'final_pick',
    'switched', 'won', 'number_of_wins',
]


def theoretical_win_rate(config: TrialConfig) -> float:
    """
    Closed-form probability of winning a single trial.

    Staying wins with probability ``1 / N``. Switching wins with probability
    ``(N - 1) / (N * (N - r - 1))``: the prize is behind another door with
    probability ``(N - 1) / N`` and, given that, the random switch lands on
    it among the ``N - r - 1`` closed doors other than the pick.

    Parameters
    ----------
    config : TrialConfig
        Door count ``N``, reveal count ``r`` and switch policy.

    Returns
    -------
    float

    Examples
    --------
    >>> theoretical_win_rate(TrialConfig(3, 1, True))
    0.6666666666666666
    >>> theoretical_win_rate(TrialConfig(3, 1, False))
    0.3333333333333333
    """
    n = config.number_of_doors
    r = config.number_of_doors_to_reveal
    if not config.contestant_switches:
        return 1 / n
    return (n - 1) / (n * (n - r - 1))


def _run_chunk(config: TrialConfig, n_trials: int, seed_seq: np.random.SeedSequence) -> int:
    """Run ``n_trials`` trials on a generator of their own and return the win count."""
    rng = np.random.default_rng(seed_seq)
    wins = 0
    for _ in range(n_trials):
        if simulate_trial(config, rng).won:
            wins += 1
    return wins


def _run_sequential(
    config: TrialConfig,
    number_of_experiments: int,
    seed: int,
    observer: Optional[TrialObserver],
    stop_event,
    record_trials: bool,
):
    rng = np.random.default_rng(seed)
    number_of_wins = 0
    completed = 0
    history: List[tuple] = []

    for experiment in range(1, number_of_experiments + 1):
        if stop_event is not None and stop_event.is_set():
            logger.info(
                "Stop requested after %d of %d experiments", completed, number_of_experiments
            )
            break

        result = simulate_trial(config, rng)
        if result.won:
            number_of_wins += 1
        completed += 1

        if record_trials:
            history.append((
                experiment, result.prize_door, result.initial_pick, result.final_pick,
                result.switched, result.won, number_of_wins,
            ))
        if observer is not None:
            observer(experiment, result, number_of_wins)

    trial_history = None
    if record_trials:
        trial_history = pd.DataFrame(history, columns=_HISTORY_COLUMNS)
        trial_history = trial_history.astype({
            'experiment': 'int64', 'prize_door': 'int64', 'initial_pick': 'int64',
            'final_pick': 'int64', 'switched': bool, 'won': bool, 'number_of_wins': 'int64',
        })

    return number_of_wins, completed, trial_history


def _run_parallel(
    config: TrialConfig,
    number_of_experiments: int,
    seed: int,
    n_workers: int,
) -> int:
    """Split the trials into one chunk per worker and sum the partial win counts."""
    n_chunks = min(n_workers, number_of_experiments)
    chunk_sizes = [len(c) for c in np.array_split(np.arange(number_of_experiments), n_chunks)]
    child_seeds = np.random.SeedSequence(seed).spawn(n_chunks)

    number_of_wins = 0
    with ProcessPoolExecutor(max_workers=n_chunks) as executor:
        futures = {
            executor.submit(_run_chunk, config, size, child): idx
            for idx, (size, child) in enumerate(zip(chunk_sizes, child_seeds))
        }
        for future in as_completed(futures):
            chunk_wins = future.result()
            logger.debug(
                "Chunk %d finished: %d wins in %d trials",
                futures[future], chunk_wins, chunk_sizes[futures[future]],
            )
            number_of_wins += chunk_wins

    return number_of_wins


def run_experiments(
    config: TrialConfig,
    number_of_experiments: int = DEFAULT_NUMBER_OF_EXPERIMENTS,
    *,
    seed: Optional[int] = None,
    observer: Optional[TrialObserver] = None,
    stop_event=None,
    record_trials: bool = False,
    n_jobs: int = 1,
) -> ExperimentResults:
    """
    Run a Monte Carlo experiment of repeated Monty Hall trials

    Parameters
    ----------
    config : TrialConfig
        Configuration shared by every trial.
    number_of_experiments : int, default 15000
        Number of trials to run. Must be positive.
    seed : int, optional
        Random seed for reproducibility. If not specified, a random seed is
        generated and stored in the results.
    observer : callable, optional
        Called after each trial as ``observer(experiment, result,
        number_of_wins)`` where ``experiment`` is the 1-based trial number
        and ``number_of_wins`` the running win count. See
        :class:`montyhall.narration.TrialNarrator`.
    stop_event : object with ``is_set()``, optional
        E.g. a ``threading.Event``. Checked before every trial; once set, the
        run ends after the current trial and the results report the
        completed count.
    record_trials : bool, default False
        Keep one row per trial in ``results.trial_history``.
    n_jobs : int, default 1
        Number of worker processes (-1 for all CPUs). With more than one
        worker the trials are split into chunks, each driven by an
        independent child of ``np.random.SeedSequence(seed)``, and the
        partial win counts are summed. Results are reproducible for a given
        ``(seed, n_jobs)`` pair but differ from the sequential stream.

    Returns
    -------
    ExperimentResults

    Raises
    ------
    InvalidParameterError
        If ``config`` is not a TrialConfig, ``number_of_experiments`` or
        ``n_jobs`` is invalid, or ``observer``, ``stop_event`` or
        ``record_trials`` is combined with more than one worker.
    """
    if not isinstance(config, TrialConfig):
        raise InvalidParameterError(
            f"config must be a TrialConfig, got {type(config).__name__}"
        )
    number_of_experiments = validate_number_of_experiments(number_of_experiments)
    n_workers = resolve_n_jobs(n_jobs)

    if n_workers > 1 and (observer is not None or stop_event is not None or record_trials):
        raise InvalidParameterError(
            "observer, stop_event and record_trials require sequential execution (n_jobs=1)"
        )

    actual_seed = seed if seed is not None else random.randint(1000, 1001000)
    theoretical = theoretical_win_rate(config)

    logger.info(
        "Running %d experiments: doors=%d, reveal=%d, switch=%s, seed=%s, workers=%d",
        number_of_experiments, config.number_of_doors, config.number_of_doors_to_reveal,
        config.contestant_switches, actual_seed, n_workers,
    )

    trial_history = None
    if n_workers == 1:
        number_of_wins, completed, trial_history = _run_sequential(
            config, number_of_experiments, actual_seed, observer, stop_event, record_trials,
        )
    else:
        number_of_wins = _run_parallel(config, number_of_experiments, actual_seed, n_workers)
        completed = number_of_experiments

    results = ExperimentResults(
        results_dict={
            'number_of_experiments': completed,
            'requested_experiments': number_of_experiments,
            'number_of_wins': number_of_wins,
            'theoretical_win_rate': theoretical,
        },
        metadata={
            'config': config,
            'seed': actual_seed,
            'n_jobs': n_workers,
        },
        trial_history=trial_history,
    )

    logger.info(
        "Completed %d experiments: %d wins (%.2f%%), predicted %.2f%%",
        completed, number_of_wins,
        results.empirical_win_percentage, results.theoretical_win_percentage,
    )
    return results
