"""Running win-rate plot tests."""

import pandas as pd
import pytest

from montyhall import VisualizationError, run_experiments
from montyhall.visualization import plot_results, prepare_plot_data

matplotlib = pytest.importorskip('matplotlib')
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402


class TestPreparePlotData:

    def test_running_rate(self):
        history = pd.DataFrame({'experiment': [1, 2, 3, 4], 'won': [True, False, True, True]})
        data = prepare_plot_data(history, 2 / 3)
        assert data['experiment'] == [1, 2, 3, 4]
        assert data['running_rate'] == pytest.approx([1.0, 0.5, 2 / 3, 0.75])
        assert data['theoretical_rate'] == pytest.approx(2 / 3)

    def test_missing_columns(self):
        with pytest.raises(VisualizationError, match="Missing required columns"):
            prepare_plot_data(pd.DataFrame({'experiment': [1]}), 0.5)

    def test_empty_history(self):
        history = pd.DataFrame({'experiment': [], 'won': []})
        assert prepare_plot_data(history, 0.5)['running_rate'] == []


class TestPlot:

    def test_results_plot(self, classic_switch_config, tmp_path):
        results = run_experiments(classic_switch_config, 100, seed=6, record_trials=True)
        path = tmp_path / 'plot.png'
        fig = results.plot({'title': 'Switching', 'savefig': str(path)})
        try:
            ax = fig.axes[0]
            assert ax.get_title() == 'Switching'
            assert ax.get_ylabel() == 'Win Rate'
            assert len(ax.lines) == 2
            assert path.exists()
        finally:
            plt.close(fig)

    def test_plot_results_defaults(self):
        fig = plot_results({'experiment': [1, 2], 'running_rate': [1.0, 0.5],
                            'theoretical_rate': 0.5})
        try:
            assert fig.axes[0].get_xlabel() == 'Experiment'
        finally:
            plt.close(fig)
