"""Tests for the semi-implicit Euler gravity integrator."""

import numpy as np
import pytest
from threebody_sim.physics.body import Body
from threebody_sim.physics.errors import InvalidBodyCountError, InvalidMassError, SingularityError
from threebody_sim.physics.integrators.base import Integrator
from threebody_sim.physics.integrators.semi_implicit_euler import GravityIntegrator
from threebody_sim.presets import ThreeStars


def test_integrator_properties():
    integrator = GravityIntegrator()
    
    assert integrator.name == "semi_implicit_euler"
    assert integrator.order == 1
    assert integrator.G == 10000.0
    assert integrator.dt == 0.1
    assert integrator.n_bodies == 3


@pytest.mark.parametrize("kwargs", [
    {"dt": 0.0},
    {"dt": -0.1},
    {"dt": float("nan")},
    {"G": float("inf")},
    {"n_bodies": 1},
    {"on_bad_count": "explode"},
    {"singularity_epsilon": -1.0},
])
def test_integrator_rejects_bad_parameters(kwargs):
    with pytest.raises(ValueError):
        GravityIntegrator(**kwargs)


@pytest.mark.parametrize("count", [2, 4])
def test_wrong_count_is_a_noop(count):
    bodies = [Body((100.0 * i, 0.0), (0.0, 1.0), 1.0) for i in range(count)]
    before = [b.copy() for b in bodies]
    
    with pytest.warns(UserWarning, match="expects 3 bodies"):
        result = GravityIntegrator().step(bodies)
    
    assert result is bodies
    assert bodies == before


@pytest.mark.parametrize("count", [2, 4])
def test_wrong_count_strict(count):
    bodies = [Body((100.0 * i, 0.0), (0.0, 1.0), 1.0) for i in range(count)]
    
    with pytest.raises(InvalidBodyCountError) as excinfo:
        GravityIntegrator(on_bad_count="raise").step(bodies)
    
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == count


@pytest.mark.parametrize("mass", [0.0, -5.0])
def test_mutated_bad_mass_rejected(mass):
    """A mass changed after construction is still checked before stepping."""
    bodies = ThreeStars().generate()
    before = [b.copy() for b in bodies]
    bodies[1].mass = mass
    
    with pytest.raises(InvalidMassError) as excinfo:
        GravityIntegrator().step(bodies)
    
    assert excinfo.value.index == 1
    assert np.array_equal(bodies[0].position, before[0].position)


def test_non_finite_step_is_atomic():
    """A step producing non-finite values raises and mutates nothing."""
    integrator = GravityIntegrator()
    integrator.force_calculator.net_forces = lambda positions, masses: np.full(positions.shape, np.inf)
    bodies = ThreeStars().generate()
    before = [b.copy() for b in bodies]
    
    with pytest.raises(SingularityError, match="too close to integrate") as excinfo:
        integrator.step(bodies)
    
    assert bodies == before
    # Closest pair of the snapshot: A and B, 200 apart
    assert (excinfo.value.i, excinfo.value.j) == (0, 1)
    assert excinfo.value.distance == 200.0


def test_step_mutates_in_place():
    bodies = ThreeStars().generate()
    position_before = bodies[0].position.copy()
    
    result = GravityIntegrator().step(bodies)
    
    assert result is bodies
    assert not np.array_equal(bodies[0].position, position_before)


def test_constants_are_parameters():
    """G and dt come from the constructor, so tests can vary them."""
    weak = ThreeStars().generate()
    strong = ThreeStars().generate()
    
    GravityIntegrator(G=1.0).step(weak)
    GravityIntegrator(G=20000.0).step(strong)
    
    # A is pulled in -x; the pull scales with G
    assert np.isclose(weak[0].momentum[0], -0.25625 / 10000.0)
    assert np.isclose(strong[0].momentum[0], -0.25625 * 2.0)


def test_two_body_group():
    """The arity is configurable; equal masses move symmetrically."""
    # Circular orbit: v^2 = G m / (2 d)
    p = 5.0 * np.sqrt(10000.0 * 5.0 / 200.0)
    bodies = [
        Body((-50.0, 0.0), (0.0, -p), 5.0),
        Body((50.0, 0.0), (0.0, p), 5.0),
    ]
    integrator = GravityIntegrator(n_bodies=2)
    
    for _ in range(100):
        integrator.step(bodies)
    
    assert np.allclose(bodies[0].position, -bodies[1].position)
    assert np.allclose(bodies[0].momentum + bodies[1].momentum, 0.0, atol=1e-9)
    assert abs(np.linalg.norm(bodies[0].position) - 50.0) < 10.0


def test_integrator_interface_requires_constants():
    """An integrator must declare G, dt and n_bodies to be instantiated."""
    class Incomplete(Integrator):
        name = "incomplete"
        order = 1
        
        def step(self, bodies):
            return bodies
    
    with pytest.raises(TypeError):
        Incomplete()
