"""
Path generation for one-dimensional stochastic processes.

Paths are built the way a Monte Carlo driver uses a process: start from
initial_value() and call evolve() once per time step with a standard
normal draw. All paths are advanced together as numpy arrays.
"""

import logging
from typing import Optional

import numpy as np
from scipy.stats import norm

from .process import StochasticProcess1D

logger = logging.getLogger(__name__)

_NORMAL_METHODS = ("standard", "ppf")


class PathGenerator:
    """
    Generates paths of a StochasticProcess1D on a uniform time grid.

    Normal draws come either from the generator's standard_normal
    ("standard") or from uniforms mapped through the inverse normal CDF
    ("ppf"). With antithetic=True, the second half of the draws is the
    negation of the first half.
    """

    def __init__(
        self,
        process: StochasticProcess1D,
        seed: Optional[int] = None,
        antithetic: bool = False,
        normal_method: str = "standard",
        eps: float = 1e-12,
    ):
        """
        Initialize the path generator.

        Args:
            process: Process to simulate
            seed: Random seed for reproducibility
            antithetic: If True, pair each draw Z with -Z
            normal_method: "standard" or "ppf"
            eps: Bound keeping ppf uniforms away from 0 and 1
        """
        if normal_method not in _NORMAL_METHODS:
            raise ValueError("normal_method must be 'standard' or 'ppf'")
        self.process = process
        self.antithetic = antithetic
        self.normal_method = normal_method
        self.eps = eps
        self.rng = np.random.default_rng(seed)

    def _normals(self, shape) -> np.ndarray:
        if self.normal_method == "ppf":
            u = self.rng.uniform(self.eps, 1.0 - self.eps, size=shape)
            return norm.ppf(u)
        return self.rng.standard_normal(shape)

    def draw_shocks(self, n_paths: int, n_steps: int) -> np.ndarray:
        """
        Draw standard normal shocks.

        Returns:
            Array with shape (n_paths, n_steps)
        """
        if not self.antithetic:
            return self._normals((n_paths, n_steps))

        half = (n_paths + 1) // 2
        z_half = self._normals((half, n_steps))
        return np.vstack([z_half, -z_half])[:n_paths, :]

    def get_time_grid(self, t: float, n_steps: int) -> np.ndarray:
        """
        Get the time grid for path simulation.

        Returns:
            Array of time points with shape (n_steps + 1,)
        """
        return np.linspace(0, t, n_steps + 1)

    def simulate_paths(self, t: float, n_steps: int, n_paths: int) -> np.ndarray:
        """
        Simulate full paths from time 0 to t.

        Args:
            t: Total time horizon (in years)
            n_steps: Number of time steps
            n_paths: Number of simulation paths

        Returns:
            Array of paths with shape (n_paths, n_steps + 1).
            First column is the initial value, last column is the state at t.

        Raises:
            UnavailableQuoteError: if the process cannot read its market data
        """
        if n_steps <= 0:
            raise ValueError("n_steps must be >= 1")
        if n_paths <= 0:
            raise ValueError("n_paths must be >= 1")
        if t < 0:
            raise ValueError("t must be >= 0")

        # Read before drawing so missing market data fails immediately
        x0 = self.process.initial_value()

        logger.debug(
            "Simulating %d paths over %d steps to t=%s", n_paths, n_steps, t
        )
        time_grid = self.get_time_grid(t, n_steps)
        dt = t / n_steps
        z = self.draw_shocks(n_paths, n_steps)

        paths = np.empty((n_paths, n_steps + 1))
        paths[:, 0] = x0
        for i in range(n_steps):
            paths[:, i + 1] = self.process.evolve(time_grid[i], paths[:, i], dt, z[:, i])

        return paths

    def simulate_terminal(self, t: float, n_paths: int, n_steps: int = 1) -> np.ndarray:
        """
        Simulate states at time t only.

        Returns:
            Array with shape (n_paths,)
        """
        return self.simulate_paths(t, n_steps, n_paths)[:, -1]
