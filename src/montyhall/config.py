"""
Trial configuration.

Defines the immutable :class:`TrialConfig` shared by every trial of an
experiment, together with the package defaults.
"""

from dataclasses import dataclass

from .validation import (
    DEFAULT_NUMBER_OF_DOORS,
    MIN_NUMBER_OF_DOORS,
    coerce_config,
    validate_trial_config,
)

DEFAULT_NUMBER_OF_EXPERIMENTS = 15000

__all__ = [
    'DEFAULT_NUMBER_OF_DOORS',
    'DEFAULT_NUMBER_OF_EXPERIMENTS',
    'MIN_NUMBER_OF_DOORS',
    'TrialConfig',
]


@dataclass(frozen=True)
class TrialConfig:
    """
    Configuration of a single Monty Hall trial.

    Attributes
    ----------
    number_of_doors : int
        Total number of doors, at least 3. Doors are numbered 1..N.
    number_of_doors_to_reveal : int
        Number of doors the host opens, between 1 and ``number_of_doors - 2``.
    contestant_switches : bool
        Whether the contestant switches to a random remaining door.

    Raises
    ------
    InvalidConfigError
        Raised on construction if any value is out of range.
    """

    number_of_doors: int = DEFAULT_NUMBER_OF_DOORS
    number_of_doors_to_reveal: int = 1
    contestant_switches: bool = True

    def __post_init__(self):
        validate_trial_config(
            self.number_of_doors,
            self.number_of_doors_to_reveal,
            self.contestant_switches,
        )
        # Normalize numpy scalars so configs pickle and compare as plain values.
        object.__setattr__(self, 'number_of_doors', int(self.number_of_doors))
        object.__setattr__(self, 'number_of_doors_to_reveal', int(self.number_of_doors_to_reveal))
        object.__setattr__(self, 'contestant_switches', bool(self.contestant_switches))

    @classmethod
    def from_user_input(cls, number_of_doors=None, number_of_doors_to_reveal=None,
                        contestant_switches=True) -> 'TrialConfig':
        """Build a config from raw input, clamping it with :func:`coerce_config`."""
        doors, reveal, switches = coerce_config(
            number_of_doors, number_of_doors_to_reveal, contestant_switches
        )
        return cls(doors, reveal, switches)
