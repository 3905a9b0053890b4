"""
Shared market-state fixtures.
"""

import pytest

from bsgreeks.options.market import MarketState


@pytest.fixture
def reference_params():
    """Near-the-money option, 23 days to expiry, with a dividend yield."""
    return {
        "s0": 64.68,
        "x": 65.00,
        "t": 23.0 / 365.0,
        "r": 0.0150,
        "q": 0.0210,
        "sigma": 0.5051,
    }


@pytest.fixture
def itm_call_params():
    """In-the-money call, no dividends."""
    return {
        "s0": 36.07,
        "x": 35.00,
        "t": 26.0 / 365.0,
        "r": 0.01,
        "q": 0.0,
        "sigma": 0.4825,
    }


@pytest.fixture
def reference_state(reference_params):
    return MarketState(**reference_params)