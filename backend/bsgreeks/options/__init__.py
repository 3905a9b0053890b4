from bsgreeks.options.black_scholes import call_price, d1, d2, d2_from_d1, put_price
from bsgreeks.options.greeks import (
    Greeks,
    compute_greeks,
    delta,
    delta_call,
    delta_put,
    gamma,
    gamma_from_d1,
    rho,
    rho_call,
    rho_put,
    theta,
    theta_call,
    theta_decay,
    theta_dividend,
    theta_put,
    theta_rate,
    vega,
    vega_from_d1,
)
from bsgreeks.options.market import MarketState
from bsgreeks.options.normal import norm_cdf, norm_pdf

__all__ = [
    "Greeks",
    "MarketState",
    "call_price",
    "compute_greeks",
    "d1",
    "d2",
    "d2_from_d1",
    "delta",
    "delta_call",
    "delta_put",
    "gamma",
    "gamma_from_d1",
    "norm_cdf",
    "norm_pdf",
    "put_price",
    "rho",
    "rho_call",
    "rho_put",
    "theta",
    "theta_call",
    "theta_decay",
    "theta_dividend",
    "theta_put",
    "theta_rate",
    "vega",
    "vega_from_d1",
]
