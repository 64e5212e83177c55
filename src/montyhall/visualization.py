"""
Visualization module for the montyhall package.

Provides plotting functions for the running win rate of an experiment.
"""

from typing import Optional

import numpy as np
import pandas as pd

from .exceptions import VisualizationError


def prepare_plot_data(history: pd.DataFrame, theoretical_rate: float) -> dict:
    """
    Prepare plot data dictionary

    Parameters
    ----------
    history : pd.DataFrame
        Trial history with at least the columns ``experiment`` and ``won``.
    theoretical_rate : float
        Closed-form win probability drawn as a reference line.

    Returns
    -------
    dict
        'experiment', 'running_rate', 'theoretical_rate'
    """
    required = {'experiment', 'won'}
    missing = required - set(history.columns)
    if missing:
        raise VisualizationError(f"Missing required columns: {sorted(missing)}")

    experiment = history['experiment'].to_numpy()
    wins = history['won'].astype(int).cumsum().to_numpy()
    running_rate = wins / np.arange(1, len(wins) + 1) if len(wins) else np.array([])

    return {
        'experiment': experiment.tolist(),
        'running_rate': running_rate.tolist(),
        'theoretical_rate': float(theoretical_rate),
    }


def plot_results(
    plot_data: dict,
    graph_options: Optional[dict] = None,
):
    """
    Generate plot from prepared data

    Parameters
    ----------
    plot_data : dict
        Data from prepare_plot_data()
    graph_options : dict, optional
        'figsize', 'title', 'xlabel', 'ylabel', 'legend_loc', 'dpi', 'savefig'

    Returns
    -------
    matplotlib.Figure
        Generated figure
    """
    try:
        import matplotlib.pyplot as plt
    except Exception as exc:
        raise VisualizationError(
            'Install required dependencies: matplotlib>=3.3.'
        ) from exc

    opts = {
        'figsize': (10, 6),
        'title': None,
        'xlabel': 'Experiment',
        'ylabel': 'Win Rate',
        'legend_loc': 'best',
        'dpi': 100,
        'savefig': None,
    }
    if graph_options:
        opts.update(graph_options)

    fig, ax = plt.subplots(figsize=opts['figsize'], dpi=opts['dpi'])

    ax.plot(plot_data['experiment'], plot_data['running_rate'],
            linestyle='-', color='red', linewidth=1.5, label='Empirical')
    ax.axhline(y=plot_data['theoretical_rate'], linestyle='--', color='black',
               linewidth=1.0, alpha=0.7, label='Theoretical')

    ax.set_xlabel(opts['xlabel'])
    ax.set_ylabel(opts['ylabel'])
    ax.set_ylim(0, 1)

    if opts['title']:
        ax.set_title(opts['title'])

    ax.legend(loc=opts['legend_loc'], frameon=True, shadow=True)
    fig.tight_layout()

    if opts['savefig']:
        fig.savefig(opts['savefig'], dpi=opts['dpi'])

    return fig
