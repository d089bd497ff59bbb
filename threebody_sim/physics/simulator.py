"""Main simulator controller."""

import enum
import math
import warnings
from typing import Callable, List, Optional
import numpy as np
from threebody_sim.physics.body import Body, stack_state
from threebody_sim.physics.diagnostics import Diagnostics
from threebody_sim.physics.errors import InvalidBodyCountError, InvalidMassError, SimulationError
from threebody_sim.physics.integrators.base import Integrator
from threebody_sim.physics.integrators.semi_implicit_euler import GravityIntegrator
from threebody_sim.presets.base import Preset
from threebody_sim.presets.three_stars import ThreeStars


class SimulationState(enum.Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class Simulator:
    """Main simulation controller.

    Owns the body set and the play/pause/reset state machine. The integrator
    itself knows nothing about playing or pausing: a paused simulation simply
    does not call ``integrator.step``.
    """

    def __init__(
        self,
        preset: Optional[Preset] = None,
        integrator: Optional[Integrator] = None,
        mass_min: float = 1.0,
        mass_max: float = 100.0,
    ):
        """Initialize simulator.

        Args:
            preset: Source of the initial body set (default: ThreeStars)
            integrator: Integrator to use (default: GravityIntegrator)
            mass_min: Lower bound of the mass control
            mass_max: Upper bound of the mass control
        """
        if not 0 < mass_min <= mass_max:
            raise ValueError(f"Need 0 < mass_min <= mass_max, got [{mass_min}, {mass_max}]")
        self.preset = preset or ThreeStars()
        self.integrator = integrator or GravityIntegrator()
        self.mass_min = float(mass_min)
        self.mass_max = float(mass_max)

        self.bodies: List[Body] = self.preset.generate()
        self.state = SimulationState.STOPPED
        self.time = 0.0
        self.step_count = 0
        self.last_error: Optional[SimulationError] = None

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.on_error_callback: Optional[Callable] = None
        self.debug_table: bool = False
        self._debug_table_interval = 100

    @classmethod
    def from_config(cls, config) -> "Simulator":
        """Build a simulator from a utils.config.Config."""
        from threebody_sim.presets import get_preset

        integrator = GravityIntegrator(
            G=config.G,
            dt=config.dt,
            n_bodies=config.n_bodies,
            singularity_epsilon=config.singularity_epsilon,
            on_bad_count=config.on_bad_count,
        )
        preset = get_preset(config.preset, **config.preset_kwargs())
        count = len(preset.generate())
        if count != integrator.n_bodies:
            raise InvalidBodyCountError(integrator.n_bodies, count)
        return cls(preset, integrator, mass_min=config.mass_min, mass_max=config.mass_max)

    @property
    def dt(self) -> float:
        return self.integrator.dt

    @property
    def G(self) -> float:
        return self.integrator.G

    @property
    def debug_table_interval(self) -> int:
        """Steps between [Diag] lines when debug_table is on."""
        return self._debug_table_interval

    @debug_table_interval.setter
    def debug_table_interval(self, interval: int):
        if interval < 1:
            raise ValueError(f"debug_table_interval must be >= 1, got {interval}")
        self._debug_table_interval = int(interval)

    @property
    def playing(self) -> bool:
        return self.state is SimulationState.PLAYING

    @property
    def started(self) -> bool:
        return self.state is not SimulationState.STOPPED

    def play(self):
        """Start or resume the simulation."""
        self.state = SimulationState.PLAYING

    def pause(self):
        """Pause simulation."""
        if self.state is SimulationState.PLAYING:
            self.state = SimulationState.PAUSED

    def toggle(self):
        """Play/Pause button."""
        if self.playing:
            self.pause()
        else:
            self.play()

    def reset(self):
        """Replace every body with a fresh preset set and stop."""
        self.bodies = self.preset.generate()
        self.state = SimulationState.STOPPED
        self.time = 0.0
        self.step_count = 0
        self.last_error = None

    def set_mass(self, index: int, mass: float) -> float:
        """Apply a mass from the control surface.

        Args:
            index: Body index
            mass: Requested mass

        Returns:
            The mass actually applied (clamped into [mass_min, mass_max])

        Raises:
            InvalidMassError: If mass is not finite or not positive
        """
        try:
            value = float(mass)
        except (TypeError, ValueError):
            raise InvalidMassError(mass, index)
        if not math.isfinite(value) or value <= 0.0:
            raise InvalidMassError(mass, index)
        clamped = min(max(value, self.mass_min), self.mass_max)
        if clamped != value:
            warnings.warn(
                f"Mass {value} for body {index} outside [{self.mass_min}, {self.mass_max}]; using {clamped}",
                UserWarning
            )
        self.bodies[index].mass = clamped
        return clamped

    def step(self) -> bool:
        """Perform one simulation step regardless of play state.

        A body set the integrator cannot advance (wrong count under the
        'ignore' policy) leaves time, step count and callbacks untouched.

        Returns:
            True if the bodies were advanced
        """
        if len(self.bodies) != self.integrator.n_bodies:
            # Integrator warns (or raises under 'raise') and mutates nothing
            self.integrator.step(self.bodies)
            return False

        self.integrator.step(self.bodies)
        self.time += self.dt
        self.step_count += 1

        if self.debug_table and (self.step_count % self.debug_table_interval == 0):
            self._log_stability_table()

        if self.on_step_callback:
            self.on_step_callback(self)
        return True

    def tick(self) -> bool:
        """Advance one frame if playing.

        Errors from the physics core pause the simulation instead of
        propagating; the error is kept in ``last_error``.

        Returns:
            True if a step was taken
        """
        if not self.playing:
            return False
        try:
            return self.step()
        except SimulationError as e:
            self.state = SimulationState.PAUSED
            self.last_error = e
            print(f"[Paused] step={self.step_count} t={self.time:.2f}: {e}")
            if self.on_error_callback:
                self.on_error_callback(self, e)
            return False

    def run_steps(self, k: int) -> int:
        """Tick up to k times, stopping early at the first tick not taken.

        Returns:
            Number of steps taken
        """
        taken = 0
        for _ in range(k):
            if not self.tick():
                break
            taken += 1
        return taken

    def _log_stability_table(self):
        """Log K, U, E, P, Lz."""
        diagnostics = Diagnostics(self.G)
        K, U, E = diagnostics.compute_energies(self.bodies)
        P = diagnostics.total_momentum(self.bodies)
        Lz = diagnostics.angular_momentum(self.bodies)
        print(f"[Diag] step={self.step_count} K={K:.4f} U={U:.4f} E={E:.4f} "
              f"P=({P[0]:.4f}, {P[1]:.4f}) Lz={Lz:.4f}")

    def positions(self) -> np.ndarray:
        """Current (n, 2) positions, as a copy for the presentation layer."""
        positions, _, _ = stack_state(self.bodies)
        return positions.copy()

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, momenta, masses, time, step_count)
        """
        positions, momenta, masses = stack_state(self.bodies)
        return positions, momenta, masses, self.time, self.step_count

    def get_energy(self) -> float:
        """Get current total energy."""
        return Diagnostics(self.G).compute_energies(self.bodies)[2]
