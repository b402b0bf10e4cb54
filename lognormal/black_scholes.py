"""
Black-Scholes process with constant coefficients.

The log of the asset level follows

    d ln S = (r - q - sigma^2 / 2) dt + sigma dW

where r, q and sigma are constants read from market quotes. Drift and
diffusion do not depend on time or level, and the state is updated
multiplicatively:

    S(t + dt) = S(t) * exp(dx)
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .discretization import Discretization, State
from .process import StochasticProcess1D
from .quotes import Handle, Quote, SimpleQuote


@dataclass
class LognormalParameters:
    """Market inputs for a ConstantLognormalProcess."""

    s0: float  # Initial asset level
    r: float  # Risk-free rate (continuously compounded)
    sigma: float  # Volatility (annualized)
    q: float = 0.0  # Dividend yield (continuous)

    def __post_init__(self):
        if self.s0 <= 0:
            raise ValueError("Initial price must be positive")
        if self.sigma < 0:
            raise ValueError("Volatility cannot be negative")


def _as_handle(quote: Union[Handle, Quote]) -> Handle:
    return quote if isinstance(quote, Handle) else Handle(quote)


class ConstantLognormalProcess(StochasticProcess1D):
    """
    Lognormal process with constant rate, dividend yield and volatility.

    The four inputs are held as handles and read on every call, so a quote
    changed after construction is used by the next drift(), diffusion() or
    evolve() without rebuilding the process. The volatility is used as
    read; negative values are not rejected here.

    Example:
        spot, vol = SimpleQuote(100.0), SimpleQuote(0.2)
        process = ConstantLognormalProcess(
            Handle(spot), Handle(SimpleQuote(0.02)),
            Handle(SimpleQuote(0.05)), Handle(vol),
        )
        process.drift(1.0, 100.0)   # 0.05 - 0.02 - 0.02 = 0.01
        vol.set_value(0.3)
        process.diffusion(1.0, 100.0)   # 0.3
    """

    def __init__(
        self,
        x0: Union[Handle, Quote],
        dividend_yield: Union[Handle, Quote],
        risk_free_rate: Union[Handle, Quote],
        volatility: Union[Handle, Quote],
        discretization: Optional[Discretization] = None,
    ):
        """
        Args:
            x0: Initial asset level
            dividend_yield: Continuous dividend yield q
            risk_free_rate: Continuously compounded risk-free rate r
            volatility: Black volatility sigma
            discretization: Stepping scheme (default: EulerDiscretization)
        """
        super().__init__(discretization)
        self._x0 = _as_handle(x0)
        self._dividend_yield = _as_handle(dividend_yield)
        self._risk_free_rate = _as_handle(risk_free_rate)
        self._volatility = _as_handle(volatility)

        for handle in (
            self._x0,
            self._dividend_yield,
            self._risk_free_rate,
            self._volatility,
        ):
            self.register_with(handle)

    @classmethod
    def from_parameters(
        cls,
        params: LognormalParameters,
        discretization: Optional[Discretization] = None,
    ) -> "ConstantLognormalProcess":
        """Build a process backed by fresh SimpleQuotes holding params."""
        return cls(
            Handle(SimpleQuote(params.s0, name="x0")),
            Handle(SimpleQuote(params.q, name="dividend_yield")),
            Handle(SimpleQuote(params.r, name="risk_free_rate")),
            Handle(SimpleQuote(params.sigma, name="volatility")),
            discretization,
        )

    @property
    def x0(self) -> Handle:
        return self._x0

    @property
    def dividend_yield(self) -> Handle:
        return self._dividend_yield

    @property
    def risk_free_rate(self) -> Handle:
        return self._risk_free_rate

    @property
    def volatility(self) -> Handle:
        return self._volatility

    def initial_value(self) -> float:
        return self._x0.value()

    def drift(self, t: float, x: State) -> float:
        """r - q - sigma^2 / 2, independent of t and x."""
        sigma = self._volatility.value()
        return self._risk_free_rate.value() - self._dividend_yield.value() - 0.5 * sigma * sigma

    def diffusion(self, t: float, x: State) -> float:
        """sigma, independent of t and x."""
        return self._volatility.value()

    def apply(self, x0: State, dx: State) -> State:
        """Multiplicative update: x0 * exp(dx)."""
        return x0 * np.exp(dx)
