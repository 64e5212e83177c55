"""Results container tests.

Tests for ExperimentResults properties, interval estimates, the binomial test
against theory, the text summary, and export.
"""

import math
import warnings

import pandas as pd
import pytest

from montyhall import ExperimentResults, SmallSampleWarning, TrialConfig, run_experiments


def make_results(wins, n, config=None, requested=None, rate=None, history=None):
    config = config or TrialConfig(3, 1, True)
    return ExperimentResults(
        results_dict={
            'number_of_experiments': n,
            'requested_experiments': requested if requested is not None else n,
            'number_of_wins': wins,
            'theoretical_win_rate': rate if rate is not None else 2 / 3,
        },
        metadata={'config': config, 'seed': 12345, 'n_jobs': 1},
        trial_history=history,
    )


class TestProperties:
    """Read-only summary values."""

    def test_rates_and_percentages(self):
        results = make_results(10000, 15000)
        assert results.number_of_wins == 10000
        assert results.number_of_experiments == 15000
        assert results.empirical_win_rate == pytest.approx(2 / 3)
        assert results.empirical_win_percentage == pytest.approx(66.6667, abs=1e-4)
        assert results.theoretical_win_percentage == pytest.approx(66.6667, abs=1e-4)
        assert results.seed == 12345
        assert results.n_jobs == 1
        assert not results.stopped_early

    def test_stopped_early(self):
        results = make_results(4, 10, requested=100)
        assert results.stopped_early
        assert results.requested_experiments == 100

    def test_read_only(self):
        results = make_results(1, 2)
        with pytest.raises(AttributeError):
            results.number_of_wins = 5

    def test_no_trials(self):
        results = make_results(0, 0, requested=10)
        assert math.isnan(results.empirical_win_rate)
        assert all(math.isnan(b) for b in results.confidence_interval())
        assert math.isnan(results.binomial_pvalue)

    def test_to_dict(self):
        d = make_results(5, 10, config=TrialConfig(5, 2, False), rate=0.2).to_dict()
        assert d['number_of_doors'] == 5
        assert d['number_of_doors_to_reveal'] == 2
        assert d['contestant_switches'] is False
        assert d['number_of_wins'] == 5
        assert d['empirical_win_rate'] == pytest.approx(0.5)
        assert d['theoretical_win_rate'] == pytest.approx(0.2)
        assert d['stopped_early'] is False

    def test_repr(self):
        assert repr(make_results(7, 10)) == (
            "ExperimentResults(doors=3, reveal=1, switch=True, N=10, wins=7)"
        )


class TestInference:
    """Confidence interval and binomial test."""

    def test_interval_covers_theory(self):
        lower, upper = make_results(10000, 15000).confidence_interval()
        assert lower < 2 / 3 < upper
        assert upper - lower < 0.02

    def test_interval_narrows_with_alpha(self):
        results = make_results(10000, 15000)
        lo95, hi95 = results.confidence_interval(0.05)
        lo80, hi80 = results.confidence_interval(0.20)
        assert lo95 < lo80 < hi80 < hi95

    @pytest.mark.parametrize("alpha", [0, 1, -0.1, 1.5])
    def test_invalid_alpha(self, alpha):
        with pytest.raises(ValueError, match="alpha"):
            make_results(10, 15).confidence_interval(alpha)

    def test_pvalue_consistent_with_theory(self):
        assert make_results(10000, 15000).binomial_pvalue > 0.5

    def test_pvalue_rejects_wrong_rate(self):
        assert make_results(5000, 15000).binomial_pvalue < 1e-10

    def test_small_sample_warning(self):
        results = make_results(7, 10)
        with pytest.warns(SmallSampleWarning):
            results.confidence_interval()
        with pytest.warns(SmallSampleWarning):
            results.binomial_pvalue

    def test_no_warning_for_large_sample(self):
        results = make_results(100, 150)
        with warnings.catch_warnings():
            warnings.simplefilter('error', SmallSampleWarning)
            results.confidence_interval()
            results.binomial_pvalue

    def test_simulated_run_passes_test(self, classic_switch_config):
        results = run_experiments(classic_switch_config, 15000, seed=31)
        lower, upper = results.confidence_interval(alpha=0.001)
        assert lower < 2 / 3 < upper


class TestSummary:
    """Formatted summary text."""

    def test_contents(self):
        text = make_results(10000, 15000).summary()
        assert "Monty Hall Monte Carlo Results" in text
        assert "Number of doors:           3" in text
        assert "Contestant switches:       yes" in text
        assert "Wins:                      10000" in text
        assert "66.67%" in text
        assert "Binomial test P-value" in text
        assert str(make_results(10000, 15000)) == text

    def test_stopped_early_noted(self):
        text = make_results(40, 50, requested=1000).summary()
        assert "stopped early, 1000 requested" in text

    def test_small_sample_summary_is_quiet(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error', SmallSampleWarning)
            make_results(3, 5).summary()

    def test_empty_run_summary(self):
        text = make_results(0, 0, requested=5).summary()
        assert "Conf. Interval" not in text


class TestExport:
    """CSV export of the trial history."""

    def test_to_csv(self, tmp_path, classic_switch_config):
        results = run_experiments(classic_switch_config, 40, seed=2, record_trials=True)
        path = tmp_path / 'history.csv'
        results.to_csv(str(path))

        loaded = pd.read_csv(path)
        assert len(loaded) == 40
        assert loaded['number_of_wins'].iloc[-1] == results.number_of_wins
        assert loaded['experiment'].tolist() == list(range(1, 41))

    def test_to_csv_without_history(self, tmp_path):
        with pytest.raises(ValueError, match="trial history"):
            make_results(1, 2).to_csv(str(tmp_path / 'x.csv'))

    def test_plot_without_history(self):
        with pytest.raises(ValueError, match="record_trials"):
            make_results(1, 2).plot()
