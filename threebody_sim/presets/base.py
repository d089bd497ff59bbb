"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List
from threebody_sim.physics.body import Body


class Preset(ABC):
    """Abstract base class for preset scenarios."""
    
    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.
        
        Every call returns freshly built Body objects.
        
        Returns:
            Ordered list of bodies
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
