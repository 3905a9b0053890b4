import logging
import math

logger = logging.getLogger(__name__)

class DomainError(ValueError):
    """An input lies outside the domain where the Black-Scholes formulas are defined."""

    def __init__(self, parameter: str, value: float, requirement: str):
        self.parameter = parameter
        self.value = value
        self.requirement = requirement
        super().__init__(f"{parameter} must be {requirement}, got {value!r}")

def require_positive(name: str, value: float) -> float:
    # `not value > 0` also rejects NaN
    if not value > 0 or math.isinf(value):
        logger.debug("rejecting %s=%r (not positive and finite)", name, value)
        raise DomainError(name, value, "> 0 and finite")
    return value

def require_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        logger.debug("rejecting %s=%r (not finite)", name, value)
        raise DomainError(name, value, "finite")
    return value
