"""
Trial Simulation Module

Runs a single generalized Monty Hall trial: the prize is hidden behind one of
N doors, the contestant picks a door, the host opens a number of doors that
hide neither the prize nor the pick, and the contestant either stays or
switches to a random door that is still closed.

Doors are numbered 1..N. Every trial draws from its own
``numpy.random.Generator``; no module-level random state is used, so trials
are safe to run in isolation or in separate workers.
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .config import TrialConfig
from .exceptions import InvalidParameterError

RandomState = Union[None, int, np.random.SeedSequence, np.random.Generator]


def _frozen(values: np.ndarray) -> np.ndarray:
    values = np.sort(np.asarray(values, dtype=np.int64))
    values.setflags(write=False)
    return values


@dataclass(frozen=True, eq=False)
class TrialResult:
    """
    Outcome of one trial.

    Attributes
    ----------
    prize_door : int
        Door hiding the prize.
    initial_pick : int
        Door the contestant picked first. May equal ``prize_door``.
    revealed_doors : np.ndarray
        Sorted, read-only array of the doors the host opened. Never contains
        ``prize_door`` or ``initial_pick``.
    switch_candidates : np.ndarray
        Sorted, read-only array of the closed doors the contestant could
        switch to. Never contains ``initial_pick`` and is never empty.
    final_pick : int
        Door the contestant ends up with.
    won : bool
        Whether ``final_pick`` is the prize door.
    """

    prize_door: int
    initial_pick: int
    revealed_doors: np.ndarray
    switch_candidates: np.ndarray
    final_pick: int
    won: bool

    @property
    def switched(self) -> bool:
        """Whether the contestant moved away from the initial pick."""
        return self.final_pick != self.initial_pick

    def __eq__(self, other):
        if not isinstance(other, TrialResult):
            return NotImplemented
        return (
            self.prize_door == other.prize_door
            and self.initial_pick == other.initial_pick
            and self.final_pick == other.final_pick
            and self.won == other.won
            and np.array_equal(self.revealed_doors, other.revealed_doors)
            and np.array_equal(self.switch_candidates, other.switch_candidates)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"TrialResult(prize_door={self.prize_door}, initial_pick={self.initial_pick}, "
            f"revealed={len(self.revealed_doors)}, final_pick={self.final_pick}, "
            f"won={self.won})"
        )


def revealable_doors(number_of_doors: int, prize_door: int, initial_pick: int) -> np.ndarray:
    """
    Doors the host may open.

    All doors except the prize door and the initial pick: ``N - 1`` doors
    when the two coincide, ``N - 2`` otherwise.
    """
    doors = np.arange(1, number_of_doors + 1)
    return doors[(doors != prize_door) & (doors != initial_pick)]


def switch_candidates(prize_door: int, initial_pick: int, hidden_doors: np.ndarray) -> np.ndarray:
    """
    Doors the contestant may switch to.

    The prize door, the initial pick and the doors left closed after the
    reveal, without the initial pick itself.

    Parameters
    ----------
    prize_door : int
        Door hiding the prize.
    initial_pick : int
        Door the contestant holds.
    hidden_doors : np.ndarray
        Revealable doors the host did not open.

    Returns
    -------
    np.ndarray
        Sorted unique door numbers.
    """
    candidates = np.union1d([prize_door, initial_pick], hidden_doors)
    return candidates[candidates != initial_pick]


def _check_forced_door(name: str, door: int, number_of_doors: int) -> int:
    if isinstance(door, (bool, np.bool_)) or not isinstance(door, (int, np.integer)):
        raise InvalidParameterError(f"{name} must be an integer, got {type(door).__name__}")
    if not 1 <= door <= number_of_doors:
        raise InvalidParameterError(
            f"{name} must be between 1 and {number_of_doors}, got {door}"
        )
    return int(door)


def simulate_trial(
    config: TrialConfig,
    rng: RandomState = None,
    *,
    prize_door: Optional[int] = None,
    initial_pick: Optional[int] = None,
) -> TrialResult:
    """
    Simulate one Monty Hall trial.

    Parameters
    ----------
    config : TrialConfig
        Door count, reveal count and switch policy.
    rng : np.random.Generator, int, SeedSequence or None
        Random source. Anything accepted by ``np.random.default_rng``; a
        Generator is used as-is, so consecutive calls continue its stream.
    prize_door : int, optional
        Force the prize door instead of drawing it.
    initial_pick : int, optional
        Force the contestant's first pick instead of drawing it.

    Returns
    -------
    TrialResult

    Raises
    ------
    InvalidParameterError
        If a forced door lies outside 1..N.

    Notes
    -----
    Random draws happen in a fixed order (prize door, initial pick, revealed
    doors, switch target), so a seeded generator reproduces the same trial.
    When the prize door equals the initial pick the revealable set has
    ``N - 1`` doors, leaving ``N - 1 - r >= 1`` closed doors to switch to;
    otherwise the prize door itself is always a candidate.

    Examples
    --------
    >>> config = TrialConfig(3, 1, True)
    >>> result = simulate_trial(config, prize_door=2, initial_pick=1)
    >>> result.revealed_doors.tolist(), result.final_pick, result.won
    ([3], 2, True)
    """
    rng = np.random.default_rng(rng)
    n = config.number_of_doors

    if prize_door is None:
        prize_door = int(rng.integers(1, n + 1))
    else:
        prize_door = _check_forced_door('prize_door', prize_door, n)

    if initial_pick is None:
        initial_pick = int(rng.integers(1, n + 1))
    else:
        initial_pick = _check_forced_door('initial_pick', initial_pick, n)

    revealable = revealable_doors(n, prize_door, initial_pick)
    revealed = rng.choice(revealable, size=config.number_of_doors_to_reveal, replace=False)
    hidden = np.setdiff1d(revealable, revealed, assume_unique=True)

    candidates = switch_candidates(prize_door, initial_pick, hidden)

    if config.contestant_switches:
        final_pick = int(candidates[rng.integers(len(candidates))])
    else:
        final_pick = initial_pick

    return TrialResult(
        prize_door=prize_door,
        initial_pick=initial_pick,
        revealed_doors=_frozen(revealed),
        switch_candidates=_frozen(candidates),
        final_pick=final_pick,
        won=final_pick == prize_door,
    )
