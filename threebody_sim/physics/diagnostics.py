"""Conservation diagnostics for a body set."""

import numpy as np
from typing import Sequence, Tuple
from threebody_sim.physics.body import Body, stack_state


class Diagnostics:
    """Compute energy and momentum diagnostics matching the force law."""
    
    def __init__(self, G: float = 10000.0):
        """Initialize diagnostics.
        
        Args:
            G: Gravitational constant (must match the integrator)
        """
        self.G = G
    
    def total_momentum(self, bodies: Sequence[Body]) -> np.ndarray:
        """Vector sum of all momenta. Constant up to rounding while no singularity occurs."""
        _, momenta, _ = stack_state(bodies)
        return np.sum(momenta, axis=0)
    
    def kinetic_energy(self, bodies: Sequence[Body]) -> float:
        """K = Σ |p_i|^2 / (2 m_i)"""
        _, momenta, masses = stack_state(bodies)
        p_sq = np.sum(momenta ** 2, axis=1)
        return float(np.sum(p_sq / (2.0 * masses)))
    
    def potential_energy(self, bodies: Sequence[Body]) -> float:
        """U = -G * Σ_{i<j} m_i * m_j / r_ij"""
        positions, _, masses = stack_state(bodies)
        n = len(masses)
        U = 0.0
        for i in range(n):
            for j in range(i + 1, n):
                r = np.linalg.norm(positions[j] - positions[i])
                if r == 0:
                    return float("-inf")
                U -= self.G * masses[i] * masses[j] / r
        return float(U)
    
    def compute_energies(self, bodies: Sequence[Body]) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.
        
        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        K = self.kinetic_energy(bodies)
        U = self.potential_energy(bodies)
        return K, U, K + U
    
    def angular_momentum(self, bodies: Sequence[Body]) -> float:
        """L_z = Σ (x_i * p_y_i - y_i * p_x_i) about the origin."""
        positions, momenta, _ = stack_state(bodies)
        return float(np.sum(positions[:, 0] * momenta[:, 1] - positions[:, 1] * momenta[:, 0]))
    
    def center_of_mass(self, bodies: Sequence[Body]) -> np.ndarray:
        positions, _, masses = stack_state(bodies)
        return np.sum(masses[:, np.newaxis] * positions, axis=0) / np.sum(masses)
    
    def min_separation(self, bodies: Sequence[Body]) -> float:
        """Smallest pairwise distance (inf for fewer than two bodies)."""
        positions, _, _ = stack_state(bodies)
        n = positions.shape[0]
        best = np.inf
        for i in range(n):
            for j in range(i + 1, n):
                best = min(best, float(np.linalg.norm(positions[j] - positions[i])))
        return float(best)
