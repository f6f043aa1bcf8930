# brumby

Probability tools for soccer scorelines, together with small helpers for combinatorics,
pricing and file handling.

## What it offers

- `brumby.scoregrid`: soccer scoregrids. A scoregrid is a NumPy matrix of probabilities,
  with home goals as rows and away goals as columns.
  - Build grids from per-interval goal probabilities. `ScoreOutcomeSpace.outcomes(intervals)`
    yields every sequence of `GoalEvent`s along with its final `Score` and probability.
    `from_iterator` adds those outcomes into a grid.
  - Build grids from correct-score probabilities with `from_correct_score`. Scores that fall
    off the grid are ignored.
  - Work with grids:
    - `subtract(future, past)` gives the distribution of goals still to come.
    - `inflate_zero` adds to the 0:0 cell and rescales the grid to sum to one.
    - `home_away_expectations` gives the expected goals for each side.
  - Gather outcome probabilities with `gather_win`, `gather_draw`, `gather_goals_over`,
    `gather_goals_under` and `gather_correct_score`.
    - Win handicaps are `AheadOver` and `BehindUnder`.
    - Draw handicaps are `Ahead` and `Behind`.
    - Sides are `Side.HOME` and `Side.AWAY`.
- `brumby.comb`: mixed-radix enumeration (`pick`, `count_permutations`, `Permuter`) and the
  uniqueness checks `is_unique_quadratic` and `is_unique_linear`.
- `brumby.factorial`: exact factorials up to 34!, from `Calculator` or from a precomputed
  `Lookup`.
- `brumby.hash_lookup.HashLookup`: an ordered collection of unique items with constant-time
  index lookup. Adding a duplicate raises `DuplicateItemError`.
- `brumby.arrays.collect_exact`: collects exactly *n* items from an iterable. It raises
  `CapacityExceeded` or `IncompletelyFilled` when the count is wrong.
- `brumby.derived_price.DerivedPrice`: a probability and price pair, with `fair_price()`,
  `overround()` and `decimal()`.
- `brumby.display`: `format_slice` renders `[a, b, c]`; `format_range_inclusive` renders
  `start-end`.
- `brumby.feed_id.FeedId`: parses `provider:id` identifiers with a caller-supplied provider
  parser. Text without a colon raises `FeedIdFormatError`.
- `brumby.csvfile`: plain comma-separated reading and writing, with no quoting
  (`CsvReader`, `CsvWriter`, `Record`). Both reader and writer are context managers.
- `brumby.file`: `read_json` and `write_json` for pretty-printed JSON files, and
  `recurse_dir` for finding files by extension.
- `brumby.cache.CacheStats`: hit and miss counters. Adding `True` records a hit, adding
  `False` records a miss, and adding another `CacheStats` sums the counts.

## What it does not do

- It does not fit scoregrids to market prices.
- It does not price racing podiums or multi-leg bets.
- It offers no command-line program; it is used as a library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import numpy as np
from brumby.scoregrid import (
    AheadOver, ScoreOutcomeSpace, Side, from_iterator, gather_goals_over, gather_win,
)

space = ScoreOutcomeSpace(interval_home_prob=0.25, interval_away_prob=0.2, interval_common_prob=0.0)
grid = np.zeros((5, 5))
from_iterator(space.outcomes(4), grid)
print(gather_goals_over(2, grid))                   # probability of three or more goals
print(gather_win(Side.HOME, AheadOver(0), grid))    # probability of a home win
```

```python
from brumby.comb import Permuter

print(list(Permuter([2, 2])))   # [[0, 0], [1, 0], [0, 1], [1, 1]]
```