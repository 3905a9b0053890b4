import math

from bsgreeks.core.errors import require_finite, require_positive
from bsgreeks.options.normal import norm_cdf

def check_market(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> None:
    require_positive("s0", s0)
    require_positive("x", x)
    require_positive("t", t)
    require_finite("r", r)
    require_finite("q", q)
    require_positive("sigma", sigma)

def d1(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    """Standardized log-moneyness, adjusted for carry and volatility."""
    check_market(s0, x, t, r, q, sigma)
    return (math.log(s0 / x) + t * (r - q + sigma * sigma / 2.0)) / (sigma * math.sqrt(t))

def d2_from_d1(t: float, sigma: float, d1: float) -> float:
    require_positive("t", t)
    require_positive("sigma", sigma)
    require_finite("d1", d1)
    return d1 - sigma * math.sqrt(t)

def d2(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    return d2_from_d1(t, sigma, d1(s0, x, t, r, q, sigma))

def call_price(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    v1 = d1(s0, x, t, r, q, sigma)
    v2 = d2_from_d1(t, sigma, v1)
    return s0 * math.exp(-q * t) * norm_cdf(v1) - x * math.exp(-r * t) * norm_cdf(v2)

def put_price(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    v1 = d1(s0, x, t, r, q, sigma)
    v2 = d2_from_d1(t, sigma, v1)
    return x * math.exp(-r * t) * norm_cdf(-v2) - s0 * math.exp(-q * t) * norm_cdf(-v1)
