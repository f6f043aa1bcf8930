"""A probability paired with the price quoted for it."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class DerivedPrice:
    probability: float = 0.0
    price: float = math.inf

    def fair_price(self) -> float:
        return 1.0 / self.probability

    def overround(self) -> float:
        return 1.0 / self.probability / self.price

    def decimal(self) -> float:
        """Decimal odds of this price."""
        return self.price