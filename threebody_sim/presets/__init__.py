"""Preset scenarios for the three-body simulation."""

from typing import List
from threebody_sim.presets.base import Preset
from threebody_sim.presets.three_stars import ThreeStars
from threebody_sim.presets.custom import CustomPreset

_PRESETS = {
    "three_stars": ThreeStars,
    "custom": CustomPreset,
}


def list_presets() -> List[str]:
    """Names accepted by get_preset."""
    return list(_PRESETS.keys())


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = _PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    return preset_class(**kwargs)


__all__ = ["Preset", "ThreeStars", "CustomPreset", "get_preset", "list_presets"]
