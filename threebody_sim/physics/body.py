"""Point-mass body record."""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import numpy as np
from threebody_sim.physics.errors import InvalidMassError


def _as_vector(value, label: str) -> np.ndarray:
    vec = np.array(value, dtype=np.float64)
    if vec.shape != (2,):
        raise ValueError(f"{label} must be a 2D vector (x, y), got shape {vec.shape}")
    return vec


def check_mass(mass, index: Optional[int] = None) -> float:
    """Return mass as float, raising InvalidMassError unless finite and > 0."""
    try:
        value = float(mass)
    except (TypeError, ValueError):
        raise InvalidMassError(mass, index)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidMassError(mass, index)
    return value


@dataclass(eq=False)
class Body:
    """One massive point in the plane.
    
    Note that ``momentum`` is true momentum (mass * velocity); the integrator
    divides by mass to obtain the displacement.
    """
    position: np.ndarray
    momentum: np.ndarray
    mass: float
    name: Optional[str] = None
    
    def __post_init__(self):
        self.position = _as_vector(self.position, "position")
        self.momentum = _as_vector(self.momentum, "momentum")
        self.mass = check_mass(self.mass)
    
    @property
    def velocity(self) -> np.ndarray:
        return self.momentum / self.mass
    
    def copy(self) -> "Body":
        return Body(self.position.copy(), self.momentum.copy(), self.mass, self.name)
    
    def __eq__(self, other):
        if not isinstance(other, Body):
            return NotImplemented
        return (
            np.array_equal(self.position, other.position)
            and np.array_equal(self.momentum, other.momentum)
            and self.mass == other.mass
        )


def stack_state(bodies: Sequence[Body]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Stack a body set into (positions (n, 2), momenta (n, 2), masses (n,))."""
    if len(bodies) == 0:
        return np.zeros((0, 2)), np.zeros((0, 2)), np.zeros(0)
    positions = np.stack([b.position for b in bodies])
    momenta = np.stack([b.momentum for b in bodies])
    masses = np.array([b.mass for b in bodies], dtype=np.float64)
    return positions, momenta, masses
