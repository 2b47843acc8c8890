"""Monthly progressive income tax.

Each bracket applies ``gross * rate - deduction`` to the whole amount rather than
marginally; the deduction constants make the schedule continuous at the bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TaxBracket:
    upper_bound: Optional[float]
    rate: float
    deduction: float

    def applies_to(self, gross: float) -> bool:
        return self.upper_bound is None or gross <= self.upper_bound

    def tax_for(self, gross: float) -> float:
        return max(0.0, gross * self.rate - self.deduction)


TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(2000, 0.0, 0),
    TaxBracket(4000, 0.15, 300),
    TaxBracket(7000, 0.20, 500),
    TaxBracket(10000, 0.25, 850),
    TaxBracket(14000, 0.30, 1350),
    TaxBracket(None, 0.35, 2050),
)


def bracket_for(gross: float) -> TaxBracket:
    for bracket in TAX_BRACKETS:
        if bracket.applies_to(gross):
            return bracket
    return TAX_BRACKETS[-1]


def income_tax(gross: float) -> float:
    if gross <= 0:
        return 0.0
    return bracket_for(gross).tax_for(gross)
