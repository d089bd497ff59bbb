"""Physics core: bodies, pairwise gravity and the integrator."""

from threebody_sim.physics.body import Body
from threebody_sim.physics.errors import (
    SimulationError,
    SingularityError,
    InvalidBodyCountError,
    InvalidMassError,
)
from threebody_sim.physics.integrators import GravityIntegrator
from threebody_sim.physics.simulator import Simulator, SimulationState

__all__ = [
    "Body",
    "GravityIntegrator",
    "Simulator",
    "SimulationState",
    "SimulationError",
    "SingularityError",
    "InvalidBodyCountError",
    "InvalidMassError",
]
