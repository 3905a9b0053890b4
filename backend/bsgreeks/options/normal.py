import math

SQRT_2 = math.sqrt(2.0)
SQRT_2PI = math.sqrt(2.0 * math.pi)

def norm_pdf(x: float) -> float:
    """phi(x), the standard normal density."""
    return math.exp(-0.5 * x * x) / SQRT_2PI

def norm_cdf(x: float) -> float:
    """Phi(x) = P(Z <= x) for Z ~ N(0, 1); Phi(-x) == 1 - Phi(x) up to rounding."""
    return 0.5 * (1.0 + math.erf(x / SQRT_2))
