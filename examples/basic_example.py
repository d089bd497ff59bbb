"""Basic example of using the three-body simulator."""

from threebody_sim import GravityIntegrator, Simulator
from threebody_sim.physics.diagnostics import Diagnostics
from threebody_sim.presets import ThreeStars

def main():
    """Run the canonical three-star simulation headless."""
    # Heavier outer stars than the default (1, 10, 1)
    preset = ThreeStars(masses=[2.0, 10.0, 2.0])
    
    sim = Simulator(preset, GravityIntegrator(G=10000.0, dt=0.1))
    diagnostics = Diagnostics(G=sim.G)
    
    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6f}")
    
    sim.play()
    for step in range(500):
        if not sim.tick():
            print(f"Stopped: {sim.last_error}")
            break
        if step % 100 == 0:
            P = diagnostics.total_momentum(sim.bodies)
            print(f"Step {step}: Time={sim.time:.2f}, Energy={sim.get_energy():.6f}, "
                  f"Momentum=({P[0]:.6f}, {P[1]:.6f})")
    
    print(f"Final energy: {sim.get_energy():.6f}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
