"""Canonical three-star configuration."""

from typing import List, Optional, Sequence
from threebody_sim.physics.body import Body
from threebody_sim.presets.base import Preset

# (name, position, momentum, mass)
THREE_STARS = (
    ("A", (200.0, 0.0), (0.0, 20.0), 1.0),
    ("B", (0.0, 0.0), (5.0, 0.0), 10.0),
    ("C", (-200.0, 0.0), (0.0, -20.0), 1.0),
)


class ThreeStars(Preset):
    """Light star A and C orbiting a heavier B, on opposite sides.
    
    Optional ``masses`` replace the default masses (1, 10, 1) while keeping
    the canonical positions and momenta.
    """
    
    def __init__(self, masses: Optional[Sequence[float]] = None):
        if masses is not None and len(masses) != len(THREE_STARS):
            raise ValueError(f"ThreeStars needs {len(THREE_STARS)} masses, got {len(masses)}")
        self.masses = list(masses) if masses is not None else None
    
    @property
    def name(self) -> str:
        return "three_stars"
    
    def generate(self) -> List[Body]:
        bodies = []
        for index, (label, position, momentum, mass) in enumerate(THREE_STARS):
            if self.masses is not None:
                mass = self.masses[index]
            bodies.append(Body(position, momentum, mass, name=label))
        return bodies
