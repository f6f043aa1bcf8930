"""Soccer scoregrid probabilities, with combinatorics, pricing and file helpers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "cache",
    "comb",
    "csvfile",
    "derived_price",
    "display",
    "factorial",
    "feed_id",
    "file",
    "hash_lookup",
    "scoregrid",
]