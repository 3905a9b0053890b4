import logging
from typing import Callable, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from bsgreeks.core.config import Settings, get_settings
from bsgreeks.options.greeks import (
    compute_greeks,
    delta,
    gamma_from_d1,
    rho,
    theta,
    vega_from_d1,
)
from bsgreeks.options.market import MarketState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/greeks", tags=["greeks"])

class GreeksRequest(BaseModel):
    s0: float = Field(..., gt=0, description="Underlying spot price")
    x: float = Field(..., gt=0, description="Strike price")
    t: float = Field(..., gt=0, description="Time to expiry in years (e.g., 23/365)")
    r: float = Field(..., description="Risk-free rate as decimal (e.g., 0.015)")
    q: float = Field(0.0, description="Dividend yield as decimal (e.g., 0.021)")
    sigma: float = Field(..., gt=0, description="Volatility as decimal (e.g., 0.5051)")
    days_per_year: Optional[float] = Field(None, gt=0, description="Theta day-count basis")

class SingleGreekRequest(GreeksRequest):
    option_type: Literal["call", "put"] = "call"

class GreeksResponse(BaseModel):
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

class SingleGreekResponse(BaseModel):
    name: str
    option_type: str
    value: float

def _state(req: GreeksRequest) -> MarketState:
    return MarketState(s0=req.s0, x=req.x, t=req.t, r=req.r, q=req.q, sigma=req.sigma)

def _days(req: GreeksRequest, config: Settings) -> float:
    return req.days_per_year if req.days_per_year is not None else config.days_per_year

SINGLE_GREEKS = ("d1", "d2", "delta", "gamma", "theta", "vega", "rho")

def _single(name: str, state: MarketState, option_type: str, days_per_year: float) -> float:
    if name == "d1":
        return state.d1
    if name == "d2":
        return state.d2
    if name == "delta":
        return delta(state, option_type)
    if name == "gamma":
        return gamma_from_d1(state.s0, state.t, state.q, state.sigma, state.d1)
    if name == "theta":
        return theta(state, option_type, days_per_year)
    if name == "vega":
        return vega_from_d1(state.s0, state.t, state.q, state.d1)
    if name == "rho":
        return rho(state, option_type)
    raise KeyError(name)

def _evaluate(what: str, fn: Callable[[], object]):
    try:
        return fn()
    except OverflowError:
        logger.warning("numerical overflow in %s", what)
        raise HTTPException(status_code=400, detail="numerical overflow")
    except ArithmeticError as e:
        # e.g. s0 * sigma * sqrt(t) underflowing to 0.0
        logger.warning("numerical failure in %s: %s", what, e)
        raise HTTPException(status_code=400, detail="numerical failure")
    except ValueError as e:
        logger.warning("rejected %s request: %s", what, e)
        raise HTTPException(status_code=400, detail=str(e))

@router.post("", response_model=GreeksResponse)
def greeks(req: GreeksRequest, config: Settings = Depends(get_settings)):
    res = _evaluate("greeks", lambda: compute_greeks(_state(req), _days(req, config)))
    logger.debug("computed greeks for %s", req)
    return GreeksResponse(**res.__dict__)

@router.post("/{name}", response_model=SingleGreekResponse)
def single_greek(name: str, req: SingleGreekRequest, config: Settings = Depends(get_settings)):
    name = name.lower()
    if name not in SINGLE_GREEKS:
        raise HTTPException(status_code=404, detail=f"unknown greek '{name}'")
    value = _evaluate(name, lambda: _single(name, _state(req), req.option_type, _days(req, config)))
    return SingleGreekResponse(name=name, option_type=req.option_type, value=value)
