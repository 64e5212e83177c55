"""
Validation Module

Implements input validation for trial configurations and the coercion of raw
user input (console arguments, dialog answers) into a valid configuration.

"""

import numbers
import os
import warnings
from typing import Any, Optional, Tuple

import numpy as np

from .exceptions import (
    InvalidDoorCountError,
    InvalidParameterError,
    InvalidRevealCountError,
)
from .warnings_categories import ConfigCoercionWarning

MIN_NUMBER_OF_DOORS = 3
DEFAULT_NUMBER_OF_DOORS = 3

_TRUTHY_ANSWERS = frozenset({'yes', 'y', 'true', '1'})


def _is_integer(value: Any) -> bool:
    # bool is an Integral subclass but never a valid count
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def validate_trial_config(
    number_of_doors: int,
    number_of_doors_to_reveal: int,
    contestant_switches: bool,
) -> None:
    """
    Validate the three trial configuration values.

    Parameters
    ----------
    number_of_doors : int
        Total number of doors. Must be an integer >= 3.
    number_of_doors_to_reveal : int
        Number of doors the host opens. Must satisfy
        ``1 <= r <= number_of_doors - 2``.
    contestant_switches : bool
        Whether the contestant switches after the reveal.

    Raises
    ------
    InvalidDoorCountError
        If the door count is not an integer or is below 3.
    InvalidRevealCountError
        If the reveal count is not an integer or is out of range.
    InvalidParameterError
        If ``contestant_switches`` is not a boolean.
    """
    if not _is_integer(number_of_doors):
        raise InvalidDoorCountError(
            f"number_of_doors must be an integer, got {type(number_of_doors).__name__}"
        )
    if number_of_doors < MIN_NUMBER_OF_DOORS:
        raise InvalidDoorCountError(
            f"number_of_doors must be at least {MIN_NUMBER_OF_DOORS}, got {number_of_doors}"
        )

    if not _is_integer(number_of_doors_to_reveal):
        raise InvalidRevealCountError(
            f"number_of_doors_to_reveal must be an integer, "
            f"got {type(number_of_doors_to_reveal).__name__}"
        )
    max_reveal = number_of_doors - 2
    if not 1 <= number_of_doors_to_reveal <= max_reveal:
        raise InvalidRevealCountError(
            f"number_of_doors_to_reveal must be between 1 and {max_reveal}, "
            f"got {number_of_doors_to_reveal}"
        )

    if not isinstance(contestant_switches, (bool, np.bool_)):
        raise InvalidParameterError(
            f"contestant_switches must be a bool, got {type(contestant_switches).__name__}"
        )


def validate_number_of_experiments(number_of_experiments: int) -> int:
    """Check that the experiment count is a positive integer and return it as int."""
    if not _is_integer(number_of_experiments):
        raise InvalidParameterError(
            f"number_of_experiments must be an integer, "
            f"got {type(number_of_experiments).__name__}"
        )
    if number_of_experiments <= 0:
        raise InvalidParameterError(
            f"number_of_experiments must be positive, got {number_of_experiments}"
        )
    return int(number_of_experiments)


def resolve_n_jobs(n_jobs: int) -> int:
    """
    Translate ``n_jobs`` into a worker count.

    ``-1`` means one worker per CPU; any other value must be a positive
    integer.
    """
    if not _is_integer(n_jobs) or n_jobs == 0 or n_jobs < -1:
        raise InvalidParameterError(
            f"n_jobs must be a positive integer or -1, got {n_jobs!r}"
        )
    if n_jobs == -1:
        return os.cpu_count() or 1
    return int(n_jobs)


def _parse_rounded_int(value: Any) -> Optional[int]:
    """Parse a number or numeric string, rounding half away from zero. None if not numeric."""
    if isinstance(value, (bool, np.bool_)):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not np.isfinite(number):
        return None
    return int(np.sign(number) * np.floor(abs(number) + 0.5))


def _parse_answer(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_ANSWERS
    raise InvalidParameterError(
        f"contestant_switches must be a bool or a yes/no answer, got {value!r}"
    )


def coerce_config(
    number_of_doors: Any = None,
    number_of_doors_to_reveal: Any = None,
    contestant_switches: Any = True,
) -> Tuple[int, int, bool]:
    """
    Turn raw user input into valid trial configuration values.

    This is the clamping a front end performs before building a
    :class:`~montyhall.config.TrialConfig`:

    - A missing door count uses the default (3). A non-numeric door count
      uses the default and issues a :class:`ConfigCoercionWarning`.
      Numeric values are rounded to the nearest integer.
    - With exactly 3 doors the reveal count is forced to 1.
    - With more doors a missing reveal count defaults to
      ``number_of_doors - 2``; a non-numeric one does too, with a warning.
      Reveal counts above ``number_of_doors - 2`` are clamped down, with a
      warning.
    - ``contestant_switches`` accepts a bool or a yes/no answer
      (case-insensitive ``'yes'``, ``'y'``, ``'true'``, ``'1'`` mean yes).

    Parameters
    ----------
    number_of_doors : int, float, str or None
        Raw door count.
    number_of_doors_to_reveal : int, float, str or None
        Raw reveal count.
    contestant_switches : bool or str, default True
        Raw switch answer.

    Returns
    -------
    tuple of (int, int, bool)
        ``(number_of_doors, number_of_doors_to_reveal, contestant_switches)``,
        guaranteed to pass :func:`validate_trial_config`.

    Raises
    ------
    InvalidDoorCountError
        If the (rounded) door count is below 3.
    InvalidRevealCountError
        If the (rounded) reveal count is below 1.
    """
    if number_of_doors is None:
        doors = DEFAULT_NUMBER_OF_DOORS
    else:
        doors = _parse_rounded_int(number_of_doors)
        if doors is None:
            doors = DEFAULT_NUMBER_OF_DOORS
            warnings.warn(
                f"Number of doors must be an integer, got {number_of_doors!r}. "
                f"Using {doors} and continuing.",
                ConfigCoercionWarning,
                stacklevel=2,
            )

    if doors < MIN_NUMBER_OF_DOORS:
        raise InvalidDoorCountError(
            f"number_of_doors must be at least {MIN_NUMBER_OF_DOORS}, got {doors}"
        )

    max_reveal = doors - 2
    if doors == MIN_NUMBER_OF_DOORS:
        # With 3 doors, exactly one can be revealed.
        parsed = _parse_rounded_int(number_of_doors_to_reveal)
        if number_of_doors_to_reveal is not None and parsed != 1:
            warnings.warn(
                f"With {doors} doors exactly 1 door is revealed; "
                f"ignoring number_of_doors_to_reveal={number_of_doors_to_reveal!r}.",
                ConfigCoercionWarning,
                stacklevel=2,
            )
        reveal = 1
    elif number_of_doors_to_reveal is None:
        reveal = max_reveal
    else:
        reveal = _parse_rounded_int(number_of_doors_to_reveal)
        if reveal is None:
            reveal = max_reveal
            warnings.warn(
                f"Number of doors to reveal must be an integer, got "
                f"{number_of_doors_to_reveal!r}. Using {reveal} and continuing.",
                ConfigCoercionWarning,
                stacklevel=2,
            )
        elif reveal > max_reveal:
            warnings.warn(
                f"Cannot reveal {reveal} of {doors} doors; revealing {max_reveal} "
                f"so that one other door stays closed.",
                ConfigCoercionWarning,
                stacklevel=2,
            )
            reveal = max_reveal
        elif reveal < 1:
            raise InvalidRevealCountError(
                f"number_of_doors_to_reveal must be at least 1, got {reveal}"
            )

    switches = _parse_answer(contestant_switches)

    validate_trial_config(doors, reveal, switches)
    return doors, reveal, switches
