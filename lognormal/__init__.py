"""
Constant-coefficient lognormal process

A one-dimensional Black-Scholes process whose rate, dividend yield and
volatility are constants read from observable market quotes, together
with the discretization and path generation used to simulate it.
"""

from .quotes import Handle, Quote, SimpleQuote, UnavailableQuoteError
from .discretization import Discretization, EulerDiscretization
from .process import StochasticProcess1D
from .black_scholes import ConstantLognormalProcess, LognormalParameters
from .paths import PathGenerator

__all__ = [
    "Handle",
    "Quote",
    "SimpleQuote",
    "UnavailableQuoteError",
    "Discretization",
    "EulerDiscretization",
    "StochasticProcess1D",
    "ConstantLognormalProcess",
    "LognormalParameters",
    "PathGenerator",
]
