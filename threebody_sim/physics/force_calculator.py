"""Pairwise Newtonian gravity.

All forces for a tick are evaluated from a single snapshot of positions and
masses. For a pair ``i < j`` the stored force is

    f_ij = -G * m_i * m_j / |r_ij|^2 * r_ij / |r_ij|,    r_ij = r_j - r_i

which is the pull felt by body j toward body i. Body i feels ``-f_ij``.
"""

import math
from typing import Dict, Tuple
import numpy as np
from threebody_sim.physics.errors import SingularityError


def magnitude(vec: np.ndarray) -> float:
    """Euclidean length: sqrt of the sum of squares."""
    return float(np.sqrt(np.sum(np.square(vec))))


def normalize(vec: np.ndarray) -> np.ndarray:
    """Unit vector along vec."""
    return vec / magnitude(vec)


def closest_pair(positions: np.ndarray) -> Tuple[int, int, float]:
    """Pair i < j with the smallest separation, as (i, j, distance)."""
    n = positions.shape[0]
    best = (0, 1, math.inf)
    for i in range(n):
        for j in range(i + 1, n):
            distance = magnitude(positions[j] - positions[i])
            if distance < best[2]:
                best = (i, j, distance)
    return best


def pair_force(
    pos_i: np.ndarray,
    pos_j: np.ndarray,
    m_i: float,
    m_j: float,
    G: float,
    singularity_epsilon: float = 0.0,
    pair: Tuple[int, int] = (0, 1),
) -> np.ndarray:
    """Force exerted on body j by body i.

    Args:
        pos_i: Position of body i
        pos_j: Position of body j
        m_i: Mass of body i
        m_j: Mass of body j
        G: Gravitational constant
        singularity_epsilon: Separations at or below this raise SingularityError
        pair: Indices reported in the error

    Returns:
        Force vector f_ij

    Raises:
        SingularityError: If the bodies coincide (or nearly so)
    """
    r = pos_j - pos_i
    distance = magnitude(r)
    if not math.isfinite(distance) or distance <= singularity_epsilon or distance ** 2 == 0.0:
        raise SingularityError(pair[0], pair[1], distance)
    return -G * m_i * m_j / distance ** 2 * normalize(r)


class ForceCalculator:
    """Direct-summation gravity for a small body set."""

    def __init__(self, G: float = 10000.0, singularity_epsilon: float = 0.0):
        """Initialize force calculator.

        Args:
            G: Gravitational constant
            singularity_epsilon: Minimum allowed pair separation (>= 0)
        """
        if singularity_epsilon < 0:
            raise ValueError(f"singularity_epsilon must be >= 0, got {singularity_epsilon}")
        self.G = float(G)
        self.singularity_epsilon = float(singularity_epsilon)

    def pair_forces(self, positions: np.ndarray, masses: np.ndarray) -> Dict[Tuple[int, int], np.ndarray]:
        """Compute f_ij for every unordered pair i < j.

        Args:
            positions: (n, 2) positions
            masses: (n,) masses

        Returns:
            Mapping (i, j) -> f_ij
        """
        n = positions.shape[0]
        forces = {}
        for i in range(n):
            for j in range(i + 1, n):
                forces[(i, j)] = pair_force(
                    positions[i], positions[j], masses[i], masses[j],
                    self.G, self.singularity_epsilon, pair=(i, j)
                )
        return forces

    def net_forces(self, positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
        """Sum of the pull toward every other body, per body.

        Partners are summed in ascending index order. For three bodies this is
        exactly F1 = f_21 - f_13, F2 = f_12 - f_23, F3 = f_13 + f_23.

        Args:
            positions: (n, 2) positions
            masses: (n,) masses

        Returns:
            (n, 2) net forces
        """
        n = positions.shape[0]
        pairs = self.pair_forces(positions, masses)
        net = np.zeros((n, positions.shape[1]))
        for i in range(n):
            for j in range(n):
                if j == i:
                    continue
                if j > i:
                    net[i] = net[i] - pairs[(i, j)]
                else:
                    net[i] = net[i] + pairs[(j, i)]
        return net
