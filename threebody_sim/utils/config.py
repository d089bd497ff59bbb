"""Configuration management."""

import json
import yaml
from typing import Dict, Any, List, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields


@dataclass
class Config:
    """Simulation configuration."""
    # Physics
    G: float = 10000.0
    dt: float = 0.1
    n_bodies: int = 3
    singularity_epsilon: float = 0.0
    on_bad_count: str = "ignore"
    
    # Control surface
    mass_min: float = 1.0
    mass_max: float = 100.0
    
    # Preset
    preset: str = "three_stars"
    masses: Optional[List[float]] = None
    bodies: Optional[List[Dict[str, Any]]] = None
    
    # Run
    steps: int = 1000
    debug_every: int = 10
    
    # Rendering
    render: bool = False
    render_every: int = 1
    show_trails: bool = False
    fps: int = 30
    
    def __post_init__(self):
        if self.on_bad_count not in ("ignore", "raise"):
            raise ValueError(f"on_bad_count must be 'ignore' or 'raise', got {self.on_bad_count!r}")
        if not 0 < self.mass_min <= self.mass_max:
            raise ValueError(f"Need 0 < mass_min <= mass_max, got [{self.mass_min}, {self.mass_max}]")
        if self.dt <= 0:
            raise ValueError(f"dt must be > 0, got {self.dt}")
        if self.steps < 0:
            raise ValueError(f"steps must be >= 0, got {self.steps}")
        if self.debug_every < 0:
            raise ValueError(f"debug_every must be >= 0 (0 disables), got {self.debug_every}")
        if self.render_every < 1:
            raise ValueError(f"render_every must be >= 1, got {self.render_every}")
        if self.fps <= 0:
            raise ValueError(f"fps must be > 0, got {self.fps}")
    
    def preset_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for presets.get_preset."""
        kwargs: Dict[str, Any] = {}
        if self.masses is not None:
            kwargs["masses"] = list(self.masses)
        if self.preset == "custom":
            kwargs["bodies"] = self.bodies or []
        return kwargs


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    
    data = data or {}
    known = {f.name for f in fields(Config)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            yaml.dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
