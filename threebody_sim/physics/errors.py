"""Exceptions raised by the physics core."""


class SimulationError(Exception):
    """Base class for errors that stop a simulation tick."""


class SingularityError(SimulationError, ArithmeticError):
    """Two bodies are too close for the force law to be evaluated."""

    def __init__(self, i: int, j: int, distance: float, reason: str = "singular"):
        self.i = i
        self.j = j
        self.distance = distance
        self.reason = reason
        super().__init__(
            f"Bodies {i} and {j} are {reason} (separation {distance!r})"
        )


class InvalidBodyCountError(SimulationError, ValueError):
    """Body set size does not match the integrator's arity."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected exactly {expected} bodies, got {actual}")


class InvalidMassError(SimulationError, ValueError):
    """Mass is zero, negative or not finite."""

    def __init__(self, mass, index=None):
        self.mass = mass
        self.index = index
        where = f" for body {index}" if index is not None else ""
        super().__init__(f"Mass must be finite and > 0{where}, got {mass!r}")
