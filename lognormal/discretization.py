"""
Discretization schemes for one-dimensional stochastic processes.

A discretization turns the instantaneous drift and diffusion of a process
into the finite-step quantities used when the process is evolved over dt.
The random shock dw passed to increment() is a standard normal draw; the
scheme is responsible for scaling it to the step length.
"""

from abc import ABC, abstractmethod
from typing import Union

import numpy as np

# A single state or an array of states, one per path
State = Union[float, np.ndarray]


class Discretization(ABC):
    """
    Abstract discretization of dx = mu(t, x) dt + sigma(t, x) dW.

    To implement a custom scheme, subclass this and implement drift(),
    diffusion() and variance(). All methods accept scalar or array states.
    """

    @abstractmethod
    def drift(self, process, t0: float, x0: State, dt: float) -> State:
        """Deterministic part of the increment over [t0, t0 + dt]."""
        pass

    @abstractmethod
    def diffusion(self, process, t0: float, x0: State, dt: float) -> State:
        """Factor applied to a standard normal draw over [t0, t0 + dt]."""
        pass

    @abstractmethod
    def variance(self, process, t0: float, x0: State, dt: float) -> State:
        """Variance of the increment over [t0, t0 + dt]."""
        pass

    def increment(
        self, process, t0: float, x0: State, dt: float, dw: State
    ) -> State:
        """
        Compute the state increment over one step.

        Args:
            process: Process providing drift(t, x) and diffusion(t, x)
            t0: Start time of the step
            x0: State at t0
            dt: Step length
            dw: Standard normal draw(s)

        Returns:
            drift(...) + diffusion(...) * dw
        """
        return self.drift(process, t0, x0, dt) + self.diffusion(process, t0, x0, dt) * dw


class EulerDiscretization(Discretization):
    """
    Euler scheme:

        drift     = mu(t0, x0) * dt
        diffusion = sigma(t0, x0) * sqrt(dt)
        variance  = sigma(t0, x0)^2 * dt
    """

    def drift(self, process, t0: float, x0: State, dt: float) -> State:
        return process.drift(t0, x0) * dt

    def diffusion(self, process, t0: float, x0: State, dt: float) -> State:
        return process.diffusion(t0, x0) * np.sqrt(dt)

    def variance(self, process, t0: float, x0: State, dt: float) -> State:
        sigma = process.diffusion(t0, x0)
        return sigma * sigma * dt
