"""CLI main entry point."""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional
from threebody_sim.physics.diagnostics import Diagnostics
from threebody_sim.physics.errors import SimulationError
from threebody_sim.physics.simulator import Simulator
from threebody_sim.presets import list_presets
from threebody_sim.utils.config import Config, load_config


def build_config(args) -> Config:
    """Merge command-line flags over the config file (or defaults)."""
    config = load_config(args.config) if args.config else Config()
    overrides = {}
    if args.preset is not None:
        overrides['preset'] = args.preset
    if args.steps is not None:
        overrides['steps'] = args.steps
    if args.dt is not None:
        overrides['dt'] = args.dt
    if args.gravity is not None:
        overrides['G'] = args.gravity
    if args.masses is not None:
        overrides['masses'] = args.masses
    if args.singularity_epsilon is not None:
        overrides['singularity_epsilon'] = args.singularity_epsilon
    if args.strict_count:
        overrides['on_bad_count'] = 'raise'
    if args.debug_every is not None:
        overrides['debug_every'] = args.debug_every
    if args.render:
        overrides['render'] = True
    if args.render_every is not None:
        overrides['render_every'] = args.render_every
    if args.trails:
        overrides['show_trails'] = True
    return replace(config, **overrides)


def _print_row(step: int, sim: Simulator, diagnostics: Diagnostics, E0: float):
    K, U, E = diagnostics.compute_energies(sim.bodies)
    P = diagnostics.total_momentum(sim.bodies)
    Lz = diagnostics.angular_momentum(sim.bodies)
    dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
    print(f"{step:<8} {sim.time:<10.2f} {K:<12.2f} {U:<12.2f} {E:<12.2f} "
          f"{P[0]:<10.4f} {P[1]:<10.4f} {Lz:<12.2f} {dE:<10.2f}%")


def run_simulation(config: Config) -> int:
    """Run a headless simulation.

    Returns:
        Process exit status (1 if the run stopped on a physics error)
    """
    try:
        sim = Simulator.from_config(config)
    except (SimulationError, ValueError) as e:
        print(f"Invalid configuration: {e}")
        return 2

    renderer = None
    if config.render:
        from threebody_sim.render.renderer_2d import Renderer2D
        renderer = Renderer2D(show_trails=config.show_trails, target_fps=config.fps)

    diagnostics = Diagnostics(G=sim.G)
    print(f"Running simulation: {sim.preset.name} with {len(sim.bodies)} bodies")
    print(f"Integrator: {sim.integrator.name}, G: {sim.G}, dt: {sim.dt}, "
          f"masses: {[b.mass for b in sim.bodies]}")

    E0 = diagnostics.compute_energies(sim.bodies)[2]
    print(f"{'Step':<8} {'Time':<10} {'K':<12} {'U':<12} {'E':<12} {'Px':<10} {'Py':<10} {'Lz':<12} {'dE/E0':<10}")
    print("-" * 100)
    _print_row(0, sim, diagnostics, E0)

    status = 0
    sim.play()
    for step in range(1, config.steps + 1):
        if not sim.tick():
            reason = sim.last_error or "tick skipped (wrong body count)"
            print(f"Simulation stopped at step {sim.step_count}: {reason}")
            status = 1
            break

        if renderer and step % config.render_every == 0:
            renderer.render(sim.bodies)

        if config.debug_every > 0 and step % config.debug_every == 0:
            _print_row(step, sim, diagnostics, E0)

    if renderer:
        renderer.close()

    if status == 0:
        print("Simulation complete!")
    return status


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Three Celestial Bodies - three-body gravity simulation")

    parser.add_argument('--config', type=str, default=None,
                       help='Config file (.json, .yaml or .yml)')
    parser.add_argument('--preset', type=str, default=None,
                       choices=list_presets(),
                       help='Preset scenario (default: three_stars)')
    parser.add_argument('--steps', type=int, default=None,
                       help='Number of simulation steps (default: 1000)')
    parser.add_argument('--dt', type=float, default=None,
                       help='Time step (default: 0.1)')
    parser.add_argument('-G', '--gravity', type=float, default=None,
                       help='Gravitational constant (default: 10000)')
    parser.add_argument('--masses', type=float, nargs='+', default=None,
                       help='Body masses in preset order, e.g. --masses 1 10 1')
    parser.add_argument('--singularity-epsilon', type=float, default=None,
                       help='Separations at or below this stop the run (default: 0)')
    parser.add_argument('--strict-count', action='store_true',
                       help='Raise instead of skipping ticks when the body count is wrong')
    parser.add_argument('--debug-every', type=int, default=None,
                       help='Print diagnostics every N steps (default: 10)')

    # Rendering
    parser.add_argument('--render', action='store_true',
                       help='Enable real-time rendering')
    parser.add_argument('--render-every', type=int, default=None,
                       help='Render every N steps')
    parser.add_argument('--trails', action='store_true',
                       help='Show body trails')

    # Info
    parser.add_argument('--list-presets', action='store_true',
                       help='List available presets and exit')

    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in list_presets():
            print(f"  - {name}")
        return 0

    try:
        config = build_config(args)
    except (OSError, ValueError, TypeError) as e:
        print(f"Invalid configuration: {e}")
        return 2

    return run_simulation(config)


if __name__ == '__main__':
    sys.exit(main())
