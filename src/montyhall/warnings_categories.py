"""
Warning category hierarchy for the montyhall package.

All warning classes inherit from :class:`MontyHallWarning`, which itself
inherits from :class:`UserWarning`, so they can be filtered selectively via
Python's standard ``warnings.filterwarnings()`` mechanism.

Examples
--------
Suppress only input coercion warnings while keeping others visible:

>>> import warnings
>>> from montyhall import ConfigCoercionWarning
>>> warnings.filterwarnings('ignore', category=ConfigCoercionWarning)
"""


class MontyHallWarning(UserWarning):
    """Base warning class for all montyhall package warnings."""
    pass


class ConfigCoercionWarning(MontyHallWarning):
    """
    Warning raised when raw user input is replaced or clamped.

    Triggered by :func:`montyhall.validation.coerce_config` when a door
    count or reveal count is not numeric and a default is used instead, or
    when a reveal count is clamped to ``number_of_doors - 2``.
    """
    pass


class SmallSampleWarning(MontyHallWarning):
    """
    Warning raised when too few experiments were run for reliable statistics.

    Triggered when a confidence interval or binomial test is requested on
    results with fewer than 100 completed experiments.
    """
    pass
