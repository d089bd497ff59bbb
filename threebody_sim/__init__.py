"""
Three Celestial Bodies - an interactive three-body gravity simulation.

Features:
- Pairwise Newtonian gravity with a semi-implicit Euler step
- Play/pause/reset control with per-body mass sliders
- 2D matplotlib rendering and a tkinter control panel
- Headless CLI with conservation diagnostics
"""

__version__ = "0.1.0"

from threebody_sim.physics.body import Body
from threebody_sim.physics.integrators.semi_implicit_euler import GravityIntegrator
from threebody_sim.physics.simulator import Simulator

__all__ = [
    "Body",
    "GravityIntegrator",
    "Simulator",
]
