import math
from dataclasses import dataclass
from functools import cached_property

from bsgreeks.options.black_scholes import check_market, d1, d2_from_d1

@dataclass(frozen=True)
class MarketState:
    """
    Immutable market state for one option.

      s0    - underlying spot price
      x     - strike price
      t     - time to expiration in years (e.g. 23/365)
      r     - continuously compounded risk-free rate (decimal)
      q     - continuously compounded dividend yield (decimal)
      sigma - annualized volatility (decimal)

    Inputs are validated on construction. d1/d2 and the discount factors are
    computed on first access and cached on the instance, so several Greeks
    for the same state share one evaluation.
    """

    s0: float
    x: float
    t: float
    r: float
    q: float
    sigma: float

    def __post_init__(self):
        check_market(self.s0, self.x, self.t, self.r, self.q, self.sigma)

    @cached_property
    def d1(self) -> float:
        return d1(self.s0, self.x, self.t, self.r, self.q, self.sigma)

    @cached_property
    def d2(self) -> float:
        return d2_from_d1(self.t, self.sigma, self.d1)

    @cached_property
    def div_discount(self) -> float:
        return math.exp(-self.q * self.t)

    @cached_property
    def rate_discount(self) -> float:
        return math.exp(-self.r * self.t)
