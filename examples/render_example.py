"""Example with real-time rendering."""

from threebody_sim import Simulator
from threebody_sim.render import Renderer2D

def main():
    """Run the three-star simulation with trails."""
    sim = Simulator()
    renderer = Renderer2D(show_trails=True)
    
    print("Running simulation with rendering...")
    print("Press Ctrl+C to stop.")
    
    sim.play()
    try:
        for _ in range(2000):
            if not sim.tick():
                break
            renderer.render(sim.bodies)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        renderer.close()
        print("Simulation complete!")

if __name__ == "__main__":
    main()
