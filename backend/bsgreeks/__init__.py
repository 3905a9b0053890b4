"""Black-Scholes option Greeks: closed-form library plus a small HTTP API."""

__version__ = "0.1.0"
