"""Preset built from user-supplied body definitions."""

from typing import Any, Dict, List, Optional, Sequence
from threebody_sim.physics.body import Body
from threebody_sim.presets.base import Preset

_BODY_KEYS = {"position", "momentum", "mass", "name"}


class CustomPreset(Preset):
    """Bodies read from a config file.
    
    Each entry is a mapping with ``position``, ``momentum`` and ``mass``
    (and optionally ``name``).
    """
    
    def __init__(self, bodies: Sequence[Dict[str, Any]], masses: Optional[Sequence[float]] = None):
        if not bodies:
            raise ValueError("CustomPreset needs at least one body definition")
        for index, entry in enumerate(bodies):
            missing = {"position", "momentum", "mass"} - set(entry)
            if missing:
                raise ValueError(f"Body {index} is missing {sorted(missing)}")
            unknown = set(entry) - _BODY_KEYS
            if unknown:
                raise ValueError(f"Body {index} has unknown keys {sorted(unknown)}")
        if masses is not None and len(masses) != len(bodies):
            raise ValueError(f"Got {len(masses)} masses for {len(bodies)} bodies")
        self.bodies = [dict(entry) for entry in bodies]
        self.masses = list(masses) if masses is not None else None
        # Fail at load time rather than at the first reset
        self.generate()
    
    @property
    def name(self) -> str:
        return "custom"
    
    def generate(self) -> List[Body]:
        result = []
        for index, entry in enumerate(self.bodies):
            mass = self.masses[index] if self.masses is not None else entry["mass"]
            result.append(Body(entry["position"], entry["momentum"], mass, name=entry.get("name")))
        return result
