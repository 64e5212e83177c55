"""
Exception Classes Module

Defines exception hierarchy for the montyhall package.
"""


class MontyHallError(Exception):
    """
    Base exception class for all montyhall package errors.

    All custom exceptions in the montyhall package inherit from this class,
    allowing users to catch any montyhall-specific error with:

        try:
            results = run_experiments(...)
        except MontyHallError as e:
            # Handle any montyhall error
            print(f"montyhall error: {e}")
    """
    pass


class InvalidParameterError(MontyHallError):
    """
    Exception raised when input parameter validation fails.

    This is a general exception for invalid argument values that do not
    fall into more specific categories. Common triggers include:

    - Non-positive number of experiments
    - Invalid ``n_jobs`` value
    - Forced prize door or initial pick outside the door set
    - Observer, stop event or trial recording combined with parallel execution

    See Also
    --------
    InvalidConfigError : For malformed trial configurations.
    """
    pass


class InvalidConfigError(InvalidParameterError):
    """
    Exception raised when a trial configuration is malformed.

    A valid configuration has at least 3 doors and reveals between 1 and
    ``number_of_doors - 2`` doors, so that at least one door besides the
    contestant's pick and the prize door stays closed.

    See Also
    --------
    montyhall.validation.validate_trial_config : Function that performs this validation.
    """
    pass


class InvalidDoorCountError(InvalidConfigError):
    """
    Exception raised when the number of doors is not an integer >= 3.

    Examples
    --------
    >>> TrialConfig(number_of_doors=2, number_of_doors_to_reveal=1)  # doctest: +SKIP
    InvalidDoorCountError: number_of_doors must be at least 3, got 2
    """
    pass


class InvalidRevealCountError(InvalidConfigError):
    """
    Exception raised when the number of doors to reveal is out of range.

    The reveal count must satisfy ``1 <= r <= number_of_doors - 2``.

    Examples
    --------
    >>> TrialConfig(number_of_doors=5, number_of_doors_to_reveal=4)  # doctest: +SKIP
    InvalidRevealCountError: number_of_doors_to_reveal must be between 1 and 3, got 4
    """
    pass


class VisualizationError(MontyHallError):
    """
    Exception raised for visualization-related errors.

    Trigger conditions include:

    - Plot data missing required columns (``experiment``, ``won``)
    - Missing plotting backend (matplotlib not installed)

    See Also
    --------
    montyhall.visualization.plot_results : Function that generates plots.
    montyhall.results.ExperimentResults.plot : Method that calls plot_results.
    """
    pass
