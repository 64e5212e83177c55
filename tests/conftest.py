"""
Pytest configuration file providing shared fixtures and helper functions.
"""
import numpy as np
import pytest

from montyhall import TrialConfig


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def classic_switch_config():
    """Three doors, one revealed, contestant switches."""
    return TrialConfig(number_of_doors=3, number_of_doors_to_reveal=1, contestant_switches=True)


@pytest.fixture
def classic_stay_config():
    """Three doors, one revealed, contestant stays."""
    return TrialConfig(number_of_doors=3, number_of_doors_to_reveal=1, contestant_switches=False)


@pytest.fixture
def rng():
    """Seeded generator for reproducible draws."""
    return np.random.default_rng(20240101)
