"""Score grids: probability matrices indexed by home goals (rows) and away goals (columns)."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from brumby.comb import Permuter


class GoalEvent(enum.Enum):
    """What happens in a single interval of play."""

    NEITHER = 0
    HOME = 1
    AWAY = 2
    BOTH = 3

    def is_home(self) -> bool:
        return self in (GoalEvent.HOME, GoalEvent.BOTH)

    def is_away(self) -> bool:
        return self in (GoalEvent.AWAY, GoalEvent.BOTH)


class Side(enum.Enum):
    HOME = "home"
    AWAY = "away"


@dataclass(frozen=True)
class Score:
    home: int
    away: int


@dataclass(frozen=True)
class AheadOver:
    """Win handicap: the side must win by more than ``by`` goals."""

    by: int


@dataclass(frozen=True)
class BehindUnder:
    """Win handicap: the side may trail by fewer than ``by`` goals."""

    by: int


@dataclass(frozen=True)
class Ahead:
    """Draw handicap: home finishes exactly ``by`` goals ahead."""

    by: int


@dataclass(frozen=True)
class Behind:
    """Draw handicap: home finishes exactly ``by`` goals behind."""

    by: int


WinHandicap = AheadOver | BehindUnder
DrawHandicap = Ahead | Behind


@dataclass(frozen=True)
class ProbableScoreOutcome:
    score: Score
    probability: float


@dataclass(frozen=True)
class ScoreOutcomeSpace:
    """Per-interval probabilities of a home goal, an away goal, or both."""

    interval_home_prob: float
    interval_away_prob: float
    interval_common_prob: float

    def outcomes(self, intervals: int) -> Iterator[ProbableScoreOutcome]:
        """Every sequence of interval events, with its final score and probability."""
        neither_prob = (
            1.0
            - self.interval_home_prob
            - self.interval_away_prob
            - self.interval_common_prob
        )
        event_probs = {
            GoalEvent.NEITHER: neither_prob,
            GoalEvent.HOME: self.interval_home_prob,
            GoalEvent.AWAY: self.interval_away_prob,
            GoalEvent.BOTH: self.interval_common_prob,
        }
        for ordinals in Permuter([len(GoalEvent)] * intervals):
            probability = 1.0
            home_goals = away_goals = 0
            for ordinal in ordinals:
                event = GoalEvent(ordinal)
                probability *= event_probs[event]
                home_goals += event.is_home()
                away_goals += event.is_away()
            yield ProbableScoreOutcome(Score(home_goals, away_goals), probability)


def from_iterator(
    outcomes: Iterable[ProbableScoreOutcome], scoregrid: NDArray[np.float64]
) -> None:
    """Accumulate each outcome's probability into its cell of ``scoregrid``."""
    for outcome in outcomes:
        scoregrid[outcome.score.home, outcome.score.away] += outcome.probability


def from_correct_score(
    scores: Sequence[Score], probs: Sequence[float], scoregrid: NDArray[np.float64]
) -> None:
    """Accumulate correct-score probabilities; scores off the grid are ignored."""
    rows, cols = scoregrid.shape
    for score, prob in zip(scores, probs, strict=True):
        if not isinstance(score, Score):
            raise TypeError(f"unexpected {score!r}")
        if score.home < rows and score.away < cols:
            scoregrid[score.home, score.away] += prob


def home_away_expectations(scoregrid: NDArray[np.float64]) -> tuple[float, float]:
    """Expected home and away goals under the grid."""
    grid = np.asarray(scoregrid, dtype=np.float64)
    rows, cols = grid.shape
    home = float(np.arange(rows) @ grid.sum(axis=1))
    away = float(np.arange(cols) @ grid.sum(axis=0))
    return home, away


def subtract(
    future: NDArray[np.float64], past: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Distribution of goals still to come, given past and full-time score grids."""
    future = np.asarray(future, dtype=np.float64)
    past = np.asarray(past, dtype=np.float64)
    if future.shape != past.shape:
        raise ValueError(f"shape mismatch: {future.shape} vs {past.shape}")
    rows, cols = future.shape
    diff = np.zeros((rows, cols), dtype=np.float64)
    for past_home in range(rows):
        for past_away in range(cols):
            past_prob = past[past_home, past_away]
            reachable = future[past_home:, past_away:]
            remaining_prob = reachable.sum()
            if remaining_prob > 0.0:
                diff[: rows - past_home, : cols - past_away] += (
                    past_prob * reachable / remaining_prob
                )
    return diff


def inflate_zero(additive: float, scoregrid: NDArray[np.float64]) -> None:
    """Add to the 0:0 cell, then rescale the grid to sum to one."""
    scoregrid[0, 0] += additive
    total = scoregrid.sum()
    scoregrid *= 1.0 / total


def _win_matches(side: Side, handicap: WinHandicap, home: int, away: int) -> bool:
    own, other = (home, away) if side is Side.HOME else (away, home)
    if isinstance(handicap, AheadOver):
        return max(own - other, 0) > handicap.by
    if isinstance(handicap, BehindUnder):
        return own > other or other - own < handicap.by
    raise TypeError(f"unexpected win handicap {handicap!r}")


def gather_win(
    side: Side, handicap: WinHandicap, scoregrid: NDArray[np.float64]
) -> float:
    """Probability that ``side`` wins under the given handicap."""
    rows, cols = scoregrid.shape
    return float(
        sum(
            scoregrid[home, away]
            for home in range(rows)
            for away in range(cols)
            if _win_matches(side, handicap, home, away)
        )
    )


def gather_draw(handicap: DrawHandicap, scoregrid: NDArray[np.float64]) -> float:
    """Probability of a draw under the given handicap."""
    if isinstance(handicap, Ahead):
        def matches(home: int, away: int) -> bool:
            return home - away == handicap.by
    elif isinstance(handicap, Behind):
        def matches(home: int, away: int) -> bool:
            return away - home == handicap.by
    else:
        raise TypeError(f"unexpected draw handicap {handicap!r}")
    rows, cols = scoregrid.shape
    return float(
        sum(
            scoregrid[home, away]
            for home in range(rows)
            for away in range(cols)
            if matches(home, away)
        )
    )


def gather_goals_over(goals: int, scoregrid: NDArray[np.float64]) -> float:
    """Probability that total goals exceed ``goals``."""
    rows, cols = scoregrid.shape
    totals = np.add.outer(np.arange(rows), np.arange(cols))
    return float(scoregrid[totals > goals].sum())


def gather_goals_under(goals: int, scoregrid: NDArray[np.float64]) -> float:
    """Probability that total goals are fewer than ``goals``."""
    rows, cols = scoregrid.shape
    totals = np.add.outer(np.arange(rows), np.arange(cols))
    return float(scoregrid[totals < goals].sum())


def gather_correct_score(score: Score, scoregrid: NDArray[np.float64]) -> float:
    """Probability of the exact score, or zero if it lies off the grid."""
    rows, cols = scoregrid.shape
    if score.home < rows and score.away < cols:
        return float(scoregrid[score.home, score.away])
    return 0.0