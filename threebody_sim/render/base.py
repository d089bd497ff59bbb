"""Base renderer interface and screen placement."""

from abc import ABC, abstractmethod
from typing import Sequence
import numpy as np
from threebody_sim.physics.body import Body, stack_state


def position_translation(bodies: Sequence[Body], depth: float = 0.0) -> np.ndarray:
    """Screen placement (x, y, depth) for each body.
    
    Args:
        bodies: Body set
        depth: Fixed z value for every marker
        
    Returns:
        Array of shape (n, 3)
    """
    positions, _, _ = stack_state(bodies)
    placement = np.empty((positions.shape[0], 3))
    placement[:, :2] = positions
    placement[:, 2] = depth
    return placement


class Renderer(ABC):
    """Abstract base class for renderers."""
    
    @abstractmethod
    def render(self, bodies: Sequence[Body]):
        """Render current frame.
        
        Args:
            bodies: Body set to draw (read only)
        """
        pass
    
    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass
    
    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
