"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Sequence
from threebody_sim.physics.body import Body


class Integrator(ABC):
    """Abstract interface for numerical integrators."""
    
    @abstractmethod
    def step(self, bodies: Sequence[Body]) -> Sequence[Body]:
        """Advance the body set by one timestep, in place.
        
        Args:
            bodies: Ordered body set
            
        Returns:
            The same body set, updated
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
    
    @property
    @abstractmethod
    def G(self) -> float:
        """Gravitational constant used for forces."""
        pass
    
    @property
    @abstractmethod
    def dt(self) -> float:
        """Fixed time step advanced by one call to step."""
        pass
    
    @property
    @abstractmethod
    def n_bodies(self) -> int:
        """Number of bodies one step integrates; other sizes are not advanced."""
        pass
