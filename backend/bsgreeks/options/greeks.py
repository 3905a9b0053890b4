"""
Closed-form Black-Scholes-Merton Greeks for European options.

Every Greek comes in two shapes:
  * the six-parameter form (s0, x, t, r, q, sigma), which derives d1/d2 itself
  * a *_from_d1 form (or a term function taking d1/d2) for callers that
    already hold d1/d2 for the market state

compute_greeks() evaluates the full set for one MarketState and reuses a
single d1/d2 evaluation across all of them.

Conventions:
  theta - per calendar day (annual theta / days_per_year)
  vega  - per 1 percentage point of volatility
  rho   - per 1 percentage point of rate
"""

import logging
import math
from dataclasses import dataclass
from typing import Literal

from bsgreeks.core.errors import require_finite, require_positive
from bsgreeks.options.black_scholes import d1, d2_from_d1
from bsgreeks.options.market import MarketState
from bsgreeks.options.normal import norm_cdf, norm_pdf

logger = logging.getLogger(__name__)

OptionType = Literal["call", "put"]

DEFAULT_DAYS_PER_YEAR = 365.0

@dataclass(frozen=True)
class Greeks:
    d1: float
    d2: float
    call_price: float
    put_price: float
    delta_call: float
    delta_put: float
    gamma: float
    theta_call: float
    theta_put: float
    vega: float
    rho_call: float
    rho_put: float

def _option_type(option_type: str) -> str:
    option_type = option_type.lower().strip()
    if option_type not in ("call", "put"):
        raise ValueError("option_type must be 'call' or 'put'")
    return option_type

# -------------------------
# Delta
# -------------------------

def delta_call(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    """Sensitivity of the call value to the underlying price."""
    return math.exp(-q * t) * norm_cdf(d1(s0, x, t, r, q, sigma))

def delta_put(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    """Sensitivity of the put value to the underlying price."""
    return math.exp(-q * t) * (norm_cdf(d1(s0, x, t, r, q, sigma)) - 1.0)

# -------------------------
# Gamma (same for call and put)
# -------------------------

def gamma_from_d1(s0: float, t: float, q: float, sigma: float, d1: float) -> float:
    require_positive("s0", s0)
    require_positive("t", t)
    require_finite("q", q)
    require_positive("sigma", sigma)
    require_finite("d1", d1)
    return math.exp(-q * t) / (s0 * sigma * math.sqrt(t)) * norm_pdf(d1)

def gamma(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    """Rate of change of delta with respect to the underlying price."""
    return gamma_from_d1(s0, t, q, sigma, d1(s0, x, t, r, q, sigma))

# -------------------------
# Theta
# -------------------------

def theta_decay(s0: float, t: float, q: float, sigma: float, d1: float) -> float:
    # Volatility decay term, identical for call and put.
    require_positive("s0", s0)
    require_positive("t", t)
    require_finite("q", q)
    require_positive("sigma", sigma)
    require_finite("d1", d1)
    return -(s0 * sigma * math.exp(-q * t)) / (2.0 * math.sqrt(t)) * norm_pdf(d1)

def theta_rate(x: float, t: float, r: float, d2: float) -> float:
    # Call passes d2, put passes -d2.
    require_positive("x", x)
    require_positive("t", t)
    require_finite("r", r)
    require_finite("d2", d2)
    return r * x * math.exp(-r * t) * norm_cdf(d2)

def theta_dividend(s0: float, t: float, q: float, d1: float) -> float:
    # Call passes d1, put passes -d1.
    require_positive("s0", s0)
    require_positive("t", t)
    require_finite("q", q)
    require_finite("d1", d1)
    return q * s0 * math.exp(-q * t) * norm_cdf(d1)

def _theta_call(state: MarketState, days_per_year: float) -> float:
    decay = theta_decay(state.s0, state.t, state.q, state.sigma, state.d1)
    rate = theta_rate(state.x, state.t, state.r, state.d2)
    dividend = theta_dividend(state.s0, state.t, state.q, state.d1)
    return (1.0 / days_per_year) * (decay - rate + dividend)

def _theta_put(state: MarketState, days_per_year: float) -> float:
    decay = theta_decay(state.s0, state.t, state.q, state.sigma, state.d1)
    rate = theta_rate(state.x, state.t, state.r, -state.d2)
    dividend = theta_dividend(state.s0, state.t, state.q, -state.d1)
    return (1.0 / days_per_year) * (decay + rate - dividend)

def theta_call(
    s0: float,
    x: float,
    t: float,
    r: float,
    q: float,
    sigma: float,
    days_per_year: float = DEFAULT_DAYS_PER_YEAR,
) -> float:
    """Per-day time decay of a call."""
    require_positive("days_per_year", days_per_year)
    return _theta_call(MarketState(s0, x, t, r, q, sigma), days_per_year)

def theta_put(
    s0: float,
    x: float,
    t: float,
    r: float,
    q: float,
    sigma: float,
    days_per_year: float = DEFAULT_DAYS_PER_YEAR,
) -> float:
    """Per-day time decay of a put."""
    require_positive("days_per_year", days_per_year)
    return _theta_put(MarketState(s0, x, t, r, q, sigma), days_per_year)

# -------------------------
# Vega (same for call and put)
# -------------------------

def vega_from_d1(s0: float, t: float, q: float, d1: float) -> float:
    require_positive("s0", s0)
    require_positive("t", t)
    require_finite("q", q)
    require_finite("d1", d1)
    return (1.0 / 100.0) * s0 * math.exp(-q * t) * math.sqrt(t) * norm_pdf(d1)

def vega(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    """Sensitivity to a 1 point move in volatility (0.01 in decimal terms)."""
    return vega_from_d1(s0, t, q, d1(s0, x, t, r, q, sigma))

# -------------------------
# Rho
# -------------------------

def rho_call(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    """Sensitivity of the call value to a 1 point move in the risk-free rate."""
    v2 = d2_from_d1(t, sigma, d1(s0, x, t, r, q, sigma))
    return (1.0 / 100.0) * x * t * math.exp(-r * t) * norm_cdf(v2)

def rho_put(s0: float, x: float, t: float, r: float, q: float, sigma: float) -> float:
    """Sensitivity of the put value to a 1 point move in the risk-free rate."""
    v2 = d2_from_d1(t, sigma, d1(s0, x, t, r, q, sigma))
    return -(1.0 / 100.0) * x * t * math.exp(-r * t) * norm_cdf(-v2)

# -------------------------
# MarketState entry points
# -------------------------

def delta(state: MarketState, option_type: OptionType = "call") -> float:
    nd1 = norm_cdf(state.d1)
    if _option_type(option_type) == "call":
        return state.div_discount * nd1
    return state.div_discount * (nd1 - 1.0)

def theta(
    state: MarketState,
    option_type: OptionType = "call",
    days_per_year: float = DEFAULT_DAYS_PER_YEAR,
) -> float:
    require_positive("days_per_year", days_per_year)
    if _option_type(option_type) == "call":
        return _theta_call(state, days_per_year)
    return _theta_put(state, days_per_year)

def rho(state: MarketState, option_type: OptionType = "call") -> float:
    scale = (1.0 / 100.0) * state.x * state.t * state.rate_discount
    if _option_type(option_type) == "call":
        return scale * norm_cdf(state.d2)
    return -scale * norm_cdf(-state.d2)

def compute_greeks(state: MarketState, days_per_year: float = DEFAULT_DAYS_PER_YEAR) -> Greeks:
    """All sensitivities (and prices) for one market state, sharing one d1/d2."""
    require_positive("days_per_year", days_per_year)

    d1_ = state.d1
    d2_ = state.d2
    nd1 = norm_cdf(d1_)
    nd2 = norm_cdf(d2_)
    nmd1 = norm_cdf(-d1_)
    nmd2 = norm_cdf(-d2_)
    disc_q = state.div_discount
    disc_r = state.rate_discount

    logger.debug("greeks for %s: d1=%.6f d2=%.6f", state, d1_, d2_)

    return Greeks(
        d1=d1_,
        d2=d2_,
        call_price=state.s0 * disc_q * nd1 - state.x * disc_r * nd2,
        put_price=state.x * disc_r * nmd2 - state.s0 * disc_q * nmd1,
        delta_call=disc_q * nd1,
        delta_put=disc_q * (nd1 - 1.0),
        gamma=gamma_from_d1(state.s0, state.t, state.q, state.sigma, d1_),
        theta_call=_theta_call(state, days_per_year),
        theta_put=_theta_put(state, days_per_year),
        vega=vega_from_d1(state.s0, state.t, state.q, d1_),
        rho_call=rho(state, "call"),
        rho_put=rho(state, "put"),
    )
