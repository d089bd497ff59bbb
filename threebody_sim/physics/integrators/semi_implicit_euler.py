"""Semi-implicit (symplectic) Euler integrator for a fixed-size body group."""

import math
import warnings
from typing import Literal, Sequence
import numpy as np
from threebody_sim.physics.body import Body, check_mass, stack_state
from threebody_sim.physics.errors import InvalidBodyCountError, SingularityError
from threebody_sim.physics.force_calculator import ForceCalculator, closest_pair
from threebody_sim.physics.integrators.base import Integrator

DEFAULT_G = 10000.0
DEFAULT_DT = 0.1
DEFAULT_N_BODIES = 3


class GravityIntegrator(Integrator):
    """Pairwise gravity with a semi-implicit Euler step.
    
    Each tick:
    1. forces from the pre-update snapshot
    2. p_new = p + F*dt
    3. x_new = x + p_new*dt/m   (uses the just-updated momentum)
    
    The integrator is built for exactly ``n_bodies`` bodies. A set of any
    other size is either left untouched with a warning
    (``on_bad_count="ignore"``) or rejected with InvalidBodyCountError
    (``on_bad_count="raise"``).
    """
    
    def __init__(
        self,
        G: float = DEFAULT_G,
        dt: float = DEFAULT_DT,
        n_bodies: int = DEFAULT_N_BODIES,
        singularity_epsilon: float = 0.0,
        on_bad_count: Literal["ignore", "raise"] = "ignore",
    ):
        """Initialize integrator.
        
        Args:
            G: Gravitational constant
            dt: Fixed time step (> 0)
            n_bodies: Exact number of bodies in one integration group
            singularity_epsilon: Pair separations at or below this are singular
            on_bad_count: 'ignore' (warn, no-op) or 'raise'
        """
        if not math.isfinite(dt) or dt <= 0:
            raise ValueError(f"dt must be finite and > 0, got {dt}")
        if not math.isfinite(G):
            raise ValueError(f"G must be finite, got {G}")
        if n_bodies < 2:
            raise ValueError(f"n_bodies must be >= 2, got {n_bodies}")
        if on_bad_count not in ("ignore", "raise"):
            raise ValueError(f"on_bad_count must be 'ignore' or 'raise', got {on_bad_count!r}")
        self._G = float(G)
        self._dt = float(dt)
        self._n_bodies = int(n_bodies)
        self.on_bad_count = on_bad_count
        self.force_calculator = ForceCalculator(G=self._G, singularity_epsilon=singularity_epsilon)
    
    @property
    def G(self) -> float:
        return self._G
    
    @property
    def dt(self) -> float:
        return self._dt
    
    @property
    def n_bodies(self) -> int:
        return self._n_bodies
    
    @property
    def name(self) -> str:
        return "semi_implicit_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    @property
    def singularity_epsilon(self) -> float:
        return self.force_calculator.singularity_epsilon
    
    def step(self, bodies: Sequence[Body]) -> Sequence[Body]:
        """Advance every body by one tick.
        
        Nothing is mutated unless the whole tick succeeds.
        
        Args:
            bodies: Ordered sequence of exactly n_bodies bodies
            
        Returns:
            The same sequence, mutated in place
            
        Raises:
            InvalidBodyCountError: Wrong body count and on_bad_count='raise'
            InvalidMassError: A mass is not finite and positive
            SingularityError: Two bodies coincide or the step went non-finite
        """
        if len(bodies) != self.n_bodies:
            if self.on_bad_count == "raise":
                raise InvalidBodyCountError(self.n_bodies, len(bodies))
            warnings.warn(
                f"GravityIntegrator expects {self.n_bodies} bodies, got {len(bodies)}; skipping tick",
                UserWarning
            )
            return bodies
        
        for index, body in enumerate(bodies):
            check_mass(body.mass, index)
        
        positions, momenta, masses = stack_state(bodies)
        forces = self.force_calculator.net_forces(positions, masses)
        
        new_momenta = momenta + forces * self.dt
        new_positions = positions + new_momenta * self.dt / masses[:, np.newaxis]
        
        # Overflow from a near-miss encounter; blame the closest pair of the snapshot
        finite = np.isfinite(new_positions).all(axis=1) & np.isfinite(new_momenta).all(axis=1)
        if not finite.all():
            i, j, distance = closest_pair(positions)
            raise SingularityError(i, j, distance, reason="too close to integrate")
        
        for body, position, momentum in zip(bodies, new_positions, new_momenta):
            body.momentum = momentum
            body.position = position
        
        return bodies
