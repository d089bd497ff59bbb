"""Numerical integrators for the three-body core."""

from threebody_sim.physics.integrators.base import Integrator
from threebody_sim.physics.integrators.semi_implicit_euler import GravityIntegrator

__all__ = ["Integrator", "GravityIntegrator"]
