"""
Results Container Module

Defines the ExperimentResults class for storing, displaying, and exporting the
aggregate outcome of a Monte Carlo experiment.

"""

from typing import Any, Dict, Optional, Tuple
import warnings

import pandas as pd
from scipy import stats
from statsmodels.stats.proportion import proportion_confint

from .config import TrialConfig
from .warnings_categories import SmallSampleWarning

# Below this many completed experiments interval estimates are flagged.
MIN_EXPERIMENTS_FOR_INFERENCE = 100


class ExperimentResults:
    """
    Container for Monte Carlo experiment results

    This class stores the outputs of ``run_experiments()`` and provides
    methods for displaying, testing, visualizing, and exporting them. All
    core attributes are read-only properties to ensure result integrity.

    Attributes
    ----------
    config : TrialConfig
        Configuration shared by every trial.
    number_of_experiments : int
        Number of trials actually completed.
    requested_experiments : int
        Number of trials requested. Larger than ``number_of_experiments``
        only when the run was stopped early.
    stopped_early : bool
        Whether a stop signal ended the run before all trials completed.
    number_of_wins : int
        Number of trials in which the final pick was the prize door.
    empirical_win_rate : float
        ``number_of_wins / number_of_experiments``.
    theoretical_win_rate : float
        Closed-form win probability for the configuration.
    empirical_win_percentage, theoretical_win_percentage : float
        The two rates multiplied by 100.
    binomial_pvalue : float
        Two-sided exact binomial test of the win count against the
        theoretical rate.
    seed : int or None
        Seed the run was started with.
    n_jobs : int
        Number of workers used.
    trial_history : pd.DataFrame or None
        One row per trial (only when ``record_trials=True``) with columns
        experiment, prize_door, initial_pick, final_pick, switched, won,
        number_of_wins.

    Methods
    -------
    summary() : str
        Returns formatted results summary string.
    confidence_interval(alpha=0.05) : tuple
        Wilson score interval for the win rate.
    plot(graph_options=None) : matplotlib.Figure
        Running win rate against the theoretical rate.
    to_dict() : dict
        Summary values as a plain dictionary.
    to_csv(path) : None
        Exports the trial history to CSV.

    Examples
    --------
    >>> from montyhall import TrialConfig, run_experiments
    >>> results = run_experiments(TrialConfig(3, 1, True), 15000, seed=42)
    >>> print(results.summary())
    >>> results.empirical_win_percentage  # doctest: +SKIP
    66.4
    """

    def __init__(
        self,
        results_dict: Dict[str, Any],
        metadata: Dict[str, Any],
        trial_history: Optional[pd.DataFrame] = None,
    ):
        """
        Initialize results object

        Parameters:
            results_dict: Tallies from run_experiments()
            metadata: Configuration and run options
            trial_history: Per-trial records (optional)
        """
        self._number_of_experiments = int(results_dict['number_of_experiments'])
        self._number_of_wins = int(results_dict['number_of_wins'])
        self._requested_experiments = int(
            results_dict.get('requested_experiments', self._number_of_experiments)
        )
        self._theoretical_win_rate = float(results_dict['theoretical_win_rate'])

        self._config: TrialConfig = metadata['config']
        self._seed: Optional[int] = metadata.get('seed')
        self._n_jobs: int = metadata.get('n_jobs', 1)
        self._metadata = metadata

        self._trial_history = trial_history

    @property
    def config(self) -> TrialConfig:
        """Trial configuration"""
        return self._config

    @property
    def number_of_experiments(self) -> int:
        """Number of completed trials"""
        return self._number_of_experiments

    @property
    def requested_experiments(self) -> int:
        """Number of requested trials"""
        return self._requested_experiments

    @property
    def stopped_early(self) -> bool:
        """Whether the run stopped before all requested trials completed"""
        return self._number_of_experiments < self._requested_experiments

    @property
    def number_of_wins(self) -> int:
        """Number of winning trials"""
        return self._number_of_wins

    @property
    def empirical_win_rate(self) -> float:
        """Observed fraction of winning trials (NaN if no trial completed)"""
        if self._number_of_experiments == 0:
            return float('nan')
        return self._number_of_wins / self._number_of_experiments

    @property
    def theoretical_win_rate(self) -> float:
        """Closed-form win probability"""
        return self._theoretical_win_rate

    @property
    def empirical_win_percentage(self) -> float:
        return 100 * self.empirical_win_rate

    @property
    def theoretical_win_percentage(self) -> float:
        return 100 * self._theoretical_win_rate

    @property
    def seed(self) -> Optional[int]:
        """Seed used for the run"""
        return self._seed

    @property
    def n_jobs(self) -> int:
        """Number of workers used"""
        return self._n_jobs

    @property
    def trial_history(self) -> Optional[pd.DataFrame]:
        """Per-trial records (returns copy)"""
        if self._trial_history is None:
            return None
        return self._trial_history.copy()

    @property
    def metadata(self) -> Dict[str, Any]:
        return dict(self._metadata)

    def _warn_if_small(self) -> None:
        if self._number_of_experiments < MIN_EXPERIMENTS_FOR_INFERENCE:
            warnings.warn(
                f"Only {self._number_of_experiments} experiments completed; "
                f"at least {MIN_EXPERIMENTS_FOR_INFERENCE} are recommended for "
                f"interval estimates and tests.",
                SmallSampleWarning,
                stacklevel=3,
            )

    def confidence_interval(self, alpha: float = 0.05) -> Tuple[float, float]:
        """
        Wilson score confidence interval for the win rate

        Parameters
        ----------
        alpha : float, default 0.05
            Significance level; the interval has coverage ``1 - alpha``.

        Returns
        -------
        tuple of float
            ``(lower, upper)`` bounds of the win rate.
        """
        if not 0 < alpha < 1:
            raise ValueError(f"alpha must be in (0, 1), got {alpha}")
        if self._number_of_experiments == 0:
            return float('nan'), float('nan')
        self._warn_if_small()
        lower, upper = proportion_confint(
            self._number_of_wins, self._number_of_experiments, alpha=alpha, method='wilson'
        )
        return float(lower), float(upper)

    @property
    def binomial_pvalue(self) -> float:
        """Two-sided exact binomial test p-value for H0: win rate = theoretical rate"""
        if self._number_of_experiments == 0:
            return float('nan')
        self._warn_if_small()
        test = stats.binomtest(
            self._number_of_wins, self._number_of_experiments, self._theoretical_win_rate
        )
        return float(test.pvalue)

    def summary(self) -> str:
        """Formatted results summary"""
        sep_line = "=" * 60
        sub_line = "-" * 60

        output = []
        output.append(sep_line)
        output.append("                 Monty Hall Monte Carlo Results")
        output.append(sep_line)
        output.append(f"Number of doors:           {self.config.number_of_doors}")
        output.append(f"Doors revealed:            {self.config.number_of_doors_to_reveal}")
        output.append(f"Contestant switches:       {'yes' if self.config.contestant_switches else 'no'}")
        output.append(f"Experiments:               {self.number_of_experiments}")
        if self.stopped_early:
            output.append(f"  (stopped early, {self.requested_experiments} requested)")
        output.append(f"Seed:                      {self.seed}")
        output.append("")
        output.append(sub_line)
        output.append(f"Wins:                      {self.number_of_wins}")
        output.append(f"Empirical win rate:        {self.empirical_win_percentage:>8.2f}%")
        output.append(f"Theoretical win rate:      {self.theoretical_win_percentage:>8.2f}%")

        if self.number_of_experiments > 0:
            with warnings.catch_warnings():
                warnings.simplefilter('ignore', SmallSampleWarning)
                lower, upper = self.confidence_interval()
                pvalue = self.binomial_pvalue
            output.append(f"[95% Conf. Interval]:      {100 * lower:>8.2f}%  {100 * upper:>8.2f}%")
            output.append(f"Binomial test P-value:     {pvalue:>8.3f}")
        output.append(sep_line)

        return "\n".join(output)

    def __repr__(self) -> str:
        return (
            f"ExperimentResults(doors={self.config.number_of_doors}, "
            f"reveal={self.config.number_of_doors_to_reveal}, "
            f"switch={self.config.contestant_switches}, N={self.number_of_experiments}, "
            f"wins={self.number_of_wins})"
        )

    def __str__(self) -> str:
        return self.summary()

    def to_dict(self) -> Dict[str, Any]:
        """Summary values as a plain dictionary"""
        return {
            'number_of_doors': self.config.number_of_doors,
            'number_of_doors_to_reveal': self.config.number_of_doors_to_reveal,
            'contestant_switches': self.config.contestant_switches,
            'number_of_experiments': self.number_of_experiments,
            'requested_experiments': self.requested_experiments,
            'stopped_early': self.stopped_early,
            'number_of_wins': self.number_of_wins,
            'empirical_win_rate': self.empirical_win_rate,
            'theoretical_win_rate': self.theoretical_win_rate,
            'seed': self.seed,
            'n_jobs': self.n_jobs,
        }

    def plot(self, graph_options: Optional[dict] = None):
        from .visualization import prepare_plot_data, plot_results

        if self._trial_history is None:
            raise ValueError("trial history was not recorded; run with record_trials=True to plot")

        plot_data = prepare_plot_data(self._trial_history, self.theoretical_win_rate)
        return plot_results(plot_data, graph_options)

    def to_csv(self, path: str):
        if self._trial_history is None or self._trial_history.empty:
            raise ValueError("trial history is not available for CSV export")
        self._trial_history.to_csv(path, index=False)
