import math

import pytest

from bsgreeks.core.errors import DomainError
from bsgreeks.options.black_scholes import call_price, d1, d2, put_price
from bsgreeks.options.greeks import (
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

TOL = 0.001

MARKET_GRID = [
    {"s0": s0, "x": 100.0, "t": t, "r": 0.02, "q": q, "sigma": sigma}
    for s0 in (80.0, 100.0, 120.0)
    for t in (0.25, 1.0)
    for sigma in (0.2, 0.5)
    for q in (0.0, 0.03)
]


# --- reference scenario ---

def test_delta_reference(reference_params):
    assert delta_call(**reference_params) == pytest.approx(0.5079, abs=TOL)
    assert delta_put(**reference_params) == pytest.approx(-0.4908, abs=TOL)


def test_delta_itm_call(itm_call_params):
    assert delta_call(**itm_call_params) == pytest.approx(0.6194, abs=TOL)
    assert delta_put(**itm_call_params) == pytest.approx(-0.3806, abs=TOL)


def test_gamma_reference(reference_params):
    # e^(-qt) * phi(d1) / (s0 * sigma * sqrt(t)); consistent with vega via 100*vega == gamma*s0^2*sigma*t
    assert gamma(**reference_params) == pytest.approx(0.0486, abs=TOL)


def test_theta_reference(reference_params):
    assert theta_call(**reference_params, days_per_year=365.0) == pytest.approx(-0.0703, abs=TOL)
    assert theta_put(**reference_params, days_per_year=365.0) == pytest.approx(-0.0714, abs=TOL)


def test_vega_reference(reference_params):
    assert vega(**reference_params) == pytest.approx(0.0647, abs=TOL)


def test_rho_reference(reference_params):
    assert rho_call(**reference_params) == pytest.approx(0.0187, abs=TOL)
    assert rho_put(**reference_params) == pytest.approx(-0.0222, abs=TOL)


# --- structural properties ---

@pytest.mark.parametrize("params", MARKET_GRID)
def test_delta_parity(params):
    diff = delta_call(**params) - delta_put(**params)
    assert diff == pytest.approx(math.exp(-params["q"] * params["t"]), abs=1e-9)


@pytest.mark.parametrize("params", MARKET_GRID)
def test_sign_bounds(params):
    assert 0.0 < delta_call(**params) <= 1.0
    assert -1.0 <= delta_put(**params) < 0.0
    assert gamma(**params) >= 0.0
    assert vega(**params) >= 0.0


@pytest.mark.parametrize("params", MARKET_GRID)
def test_gamma_same_through_every_entry_point(params):
    state = MarketState(**params)
    via_d1 = gamma_from_d1(params["s0"], params["t"], params["q"], params["sigma"], d1(**params))
    assert gamma(**params) == via_d1
    assert compute_greeks(state).gamma == via_d1


@pytest.mark.parametrize("params", MARKET_GRID)
def test_gamma_vega_relation(params):
    # vega (per unit vol) = gamma * s0^2 * sigma * t
    raw_vega = 100.0 * vega(**params)
    expected = gamma(**params) * params["s0"] ** 2 * params["sigma"] * params["t"]
    assert raw_vega == pytest.approx(expected, rel=1e-12)


def test_vega_from_d1_matches(reference_params):
    p = reference_params
    assert vega_from_d1(p["s0"], p["t"], p["q"], d1(**p)) == vega(**p)


def test_theta_is_per_day(reference_params):
    annual = theta_call(**reference_params, days_per_year=1.0)
    daily = theta_call(**reference_params, days_per_year=365.0)
    assert annual == pytest.approx(365.0 * daily, rel=1e-12)
    assert theta_put(**reference_params) == theta_put(**reference_params, days_per_year=365.0)


def test_theta_composed_from_terms(reference_params):
    p = reference_params
    v1 = d1(**p)
    v2 = d2(**p)
    decay = theta_decay(p["s0"], p["t"], p["q"], p["sigma"], v1)
    call = (decay - theta_rate(p["x"], p["t"], p["r"], v2) + theta_dividend(p["s0"], p["t"], p["q"], v1)) / 365.0
    put = (decay + theta_rate(p["x"], p["t"], p["r"], -v2) - theta_dividend(p["s0"], p["t"], p["q"], -v1)) / 365.0
    assert theta_call(**p) == pytest.approx(call, rel=1e-12)
    assert theta_put(**p) == pytest.approx(put, rel=1e-12)
    assert decay < 0.0


@pytest.mark.parametrize("bad", [0.0, -365.0])
def test_theta_rejects_bad_day_count(reference_params, bad):
    with pytest.raises(DomainError) as exc:
        theta_call(**reference_params, days_per_year=bad)
    assert exc.value.parameter == "days_per_year"
    with pytest.raises(DomainError):
        theta_put(**reference_params, days_per_year=bad)


@pytest.mark.parametrize("fn", [delta_call, delta_put, gamma, vega, rho_call, rho_put, theta_call, theta_put])
@pytest.mark.parametrize("name", ["s0", "x", "t", "sigma"])
def test_degenerate_inputs_raise_instead_of_nan(reference_params, fn, name):
    with pytest.raises(DomainError):
        fn(**dict(reference_params, **{name: 0.0}))


def test_term_functions_validate(reference_params):
    with pytest.raises(DomainError):
        theta_decay(64.68, 0.0, 0.02, 0.5, 0.1)
    with pytest.raises(DomainError):
        theta_rate(0.0, 0.1, 0.01, 0.1)
    with pytest.raises(DomainError):
        gamma_from_d1(64.68, 0.1, 0.02, 0.0, 0.1)


def test_exponential_overflow_propagates():
    with pytest.raises(OverflowError):
        delta_call(100.0, 100.0, 1.0, 0.01, -1000.0, 0.2)


def test_exponential_underflow_gives_zero():
    assert rho_call(100.0, 100.0, 1.0, 800.0, 0.0, 0.2) == 0.0


# --- MarketState entry points ---

def test_compute_greeks_matches_free_functions(reference_params, reference_state):
    g = compute_greeks(reference_state, days_per_year=365.0)
    p = reference_params
    assert g.d1 == d1(**p)
    assert g.d2 == d2(**p)
    assert g.delta_call == pytest.approx(delta_call(**p), rel=1e-12)
    assert g.delta_put == pytest.approx(delta_put(**p), rel=1e-12)
    assert g.theta_call == pytest.approx(theta_call(**p), rel=1e-12)
    assert g.theta_put == pytest.approx(theta_put(**p), rel=1e-12)
    assert g.vega == vega(**p)
    assert g.rho_call == pytest.approx(rho_call(**p), rel=1e-12)
    assert g.rho_put == pytest.approx(rho_put(**p), rel=1e-12)
    assert g.call_price == pytest.approx(call_price(**p), rel=1e-12)
    assert g.put_price == pytest.approx(put_price(**p), rel=1e-12)


def test_dispatch_helpers(reference_params, reference_state):
    assert delta(reference_state, "call") == pytest.approx(delta_call(**reference_params), rel=1e-12)
    assert delta(reference_state, " PUT ") == pytest.approx(delta_put(**reference_params), rel=1e-12)
    assert theta(reference_state, "put", 365.0) == pytest.approx(theta_put(**reference_params), rel=1e-12)
    assert rho(reference_state, "put") == pytest.approx(rho_put(**reference_params), rel=1e-12)


def test_dispatch_rejects_unknown_option_type(reference_state):
    with pytest.raises(ValueError, match="option_type"):
        delta(reference_state, "straddle")
    with pytest.raises(ValueError, match="option_type"):
        rho(reference_state, "")


def test_compute_greeks_rejects_bad_day_count(reference_state):
    with pytest.raises(DomainError):
        compute_greeks(reference_state, days_per_year=0.0)


def test_underflowing_denominator_propagates():
    # s0 * sigma * sqrt(t) rounds to 0.0
    with pytest.raises(ZeroDivisionError):
        gamma(1e-200, 1.0, 1.0, 0.0, 0.0, 1e-200)
