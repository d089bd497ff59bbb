"""Tests for conservation diagnostics."""

import numpy as np
import pytest
from threebody_sim.physics.body import Body
from threebody_sim.physics.diagnostics import Diagnostics
from threebody_sim.physics.integrators.semi_implicit_euler import GravityIntegrator
from threebody_sim.presets import ThreeStars


def test_energy_calculation():
    """Test energy computation on the canonical preset."""
    diagnostics = Diagnostics(G=10000.0)
    bodies = ThreeStars().generate()
    
    K, U, E = diagnostics.compute_energies(bodies)
    
    # K = 20^2/2 + 5^2/20 + 20^2/2
    assert K == pytest.approx(401.25)
    # U = -G (1*10/200 + 1*1/400 + 10*1/200)
    assert U == pytest.approx(-10000.0 * (0.05 + 0.0025 + 0.05))
    assert E == pytest.approx(K + U)


def test_total_momentum_and_angular_momentum():
    diagnostics = Diagnostics()
    bodies = ThreeStars().generate()
    
    assert np.allclose(diagnostics.total_momentum(bodies), [5.0, 0.0])
    # L_z = 200*20 + 0 + (-200)*(-20)
    assert diagnostics.angular_momentum(bodies) == pytest.approx(8000.0)


def test_center_of_mass_and_separation():
    diagnostics = Diagnostics()
    bodies = [
        Body((0.0, 0.0), (0.0, 0.0), 1.0),
        Body((3.0, 0.0), (0.0, 0.0), 2.0),
        Body((0.0, 4.0), (0.0, 0.0), 1.0),
    ]
    
    assert np.allclose(diagnostics.center_of_mass(bodies), [1.5, 1.0])
    assert diagnostics.min_separation(bodies) == pytest.approx(3.0)


def test_potential_energy_at_coincidence():
    diagnostics = Diagnostics()
    bodies = [Body((1.0, 1.0), (0.0, 0.0), 1.0), Body((1.0, 1.0), (0.0, 0.0), 1.0)]
    
    assert diagnostics.potential_energy(bodies) == float("-inf")


def test_angular_momentum_conserved():
    """Central pairwise forces conserve L_z up to rounding."""
    diagnostics = Diagnostics(G=10000.0)
    integrator = GravityIntegrator()
    bodies = ThreeStars().generate()
    
    L0 = diagnostics.angular_momentum(bodies)
    for _ in range(200):
        integrator.step(bodies)
    L = diagnostics.angular_momentum(bodies)
    
    assert L == pytest.approx(L0, rel=1e-9)


def test_energy_drift_bounded():
    """Energy error stays bounded over a few orbits."""
    diagnostics = Diagnostics(G=10000.0)
    integrator = GravityIntegrator()
    bodies = ThreeStars().generate()
    
    E0 = diagnostics.compute_energies(bodies)[2]
    for _ in range(300):
        integrator.step(bodies)
    E = diagnostics.compute_energies(bodies)[2]
    
    assert np.isfinite(E)
    assert abs(E - E0) / abs(E0) < 0.5
