"""
One-dimensional stochastic process contract.

A process follows

    dx = mu(t, x) dt + sigma(t, x) dW

Subclasses provide initial_value(), drift() and diffusion(), and override
apply() when the state is not updated additively. Evolution over a step is
delegated to a Discretization, so those primitives are all a path
generator needs.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .discretization import Discretization, EulerDiscretization, State
from .quotes import Observable, Observer


class StochasticProcess1D(Observer, Observable, ABC):
    """
    Abstract one-dimensional stochastic process.

    The process observes its market data and forwards any change to its
    own observers through update().
    """

    def __init__(self, discretization: Optional[Discretization] = None):
        """
        Args:
            discretization: Stepping scheme (default: EulerDiscretization)
        """
        Observable.__init__(self)
        self._discretization = (
            discretization if discretization is not None else EulerDiscretization()
        )

    @property
    def discretization(self) -> Discretization:
        return self._discretization

    def size(self) -> int:
        return 1

    def factors(self) -> int:
        return 1

    def update(self) -> None:
        self.notify_observers()

    @abstractmethod
    def initial_value(self) -> float:
        pass

    @abstractmethod
    def drift(self, t: float, x: State) -> State:
        pass

    @abstractmethod
    def diffusion(self, t: float, x: State) -> State:
        pass

    def apply(self, x0: State, dx: State) -> State:
        """Add an increment to a state."""
        return x0 + dx

    def expectation(self, t0: float, x0: State, dt: float) -> State:
        """Expected state at t0 + dt given x0 at t0."""
        return self.apply(x0, self._discretization.drift(self, t0, x0, dt))

    def std_deviation(self, t0: float, x0: State, dt: float) -> State:
        return np.sqrt(self._discretization.variance(self, t0, x0, dt))

    def variance(self, t0: float, x0: State, dt: float) -> State:
        return self._discretization.variance(self, t0, x0, dt)

    def evolve(self, t0: float, x0: State, dt: float, dw: State) -> State:
        """
        State at t0 + dt given x0 at t0 and a standard normal draw dw.

        Args:
            t0: Start time
            x0: State (scalar or array) at t0
            dt: Time step
            dw: Standard normal draw(s), same shape as x0

        Returns:
            apply(x0, discretization.increment(self, t0, x0, dt, dw))
        """
        return self.apply(x0, self._discretization.increment(self, t0, x0, dt, dw))
