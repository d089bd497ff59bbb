"""GUI control panel using tkinter."""

import tkinter as tk
from tkinter import ttk
from typing import List, Optional
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from threebody_sim.physics.errors import InvalidMassError
from threebody_sim.physics.simulator import Simulator, SimulationState
from threebody_sim.render.renderer_2d import Renderer2D
from threebody_sim.utils.config import Config


class ControlPanelGUI:
    """Main GUI application: mass sliders, Play/Pause and Reset."""

    def __init__(self, root, config: Optional[Config] = None):
        self.root = root
        self.root.title("Three Celestial Bodies")
        self.root.geometry("1000x800")

        self.config = config or Config()
        self.simulator = Simulator.from_config(self.config)
        self.frame_ms = max(1, int(1000 / self.config.fps))
        self.mass_vars: List[tk.DoubleVar] = []
        self.mass_labels: List[ttk.Label] = []

        self._create_widgets()
        self._setup_layout()
        self._sync_from_simulator()
        self.root.after(self.frame_ms, self._frame)

    def _create_widgets(self):
        """Create GUI widgets."""
        self.control_frame = ttk.LabelFrame(self.root, text="Control Panel", padding=10)

        row = 0
        for index, body in enumerate(self.simulator.bodies):
            label = body.name or str(index + 1)
            ttk.Label(self.control_frame, text=f"Star {label}", font=("TkDefaultFont", 11, "bold")).grid(
                row=row, column=0, columnspan=2, sticky='w', pady=(8, 0))
            row += 1
            var = tk.DoubleVar(value=body.mass)
            self.mass_vars.append(var)
            scale = ttk.Scale(self.control_frame, from_=self.simulator.mass_min, to=self.simulator.mass_max,
                              variable=var, orient='horizontal', length=180,
                              command=lambda v, i=index: self._on_mass(i, v))
            scale.grid(row=row, column=0, pady=2)
            value_label = ttk.Label(self.control_frame, text=f"mass {body.mass:.1f}", width=12)
            value_label.grid(row=row, column=1, sticky='w')
            self.mass_labels.append(value_label)
            row += 1

        self.play_button = ttk.Button(self.control_frame, text="▶ Play", command=self.toggle_play)
        self.play_button.grid(row=row, column=0, columnspan=2, pady=(15, 5), sticky='ew')
        row += 1

        self.reset_button = ttk.Button(self.control_frame, text="Reset", command=self.reset)
        self.reset_button.grid(row=row, column=0, columnspan=2, pady=5, sticky='ew')
        row += 1

        self.status_label = ttk.Label(self.control_frame, text="Ready", foreground="green", wraplength=220)
        self.status_label.grid(row=row, column=0, columnspan=2, pady=10)

        # Info display
        self.info_frame = ttk.LabelFrame(self.root, text="Simulation Info", padding=10)
        self.time_label = ttk.Label(self.info_frame, text="Time: 0.00")
        self.time_label.pack(anchor='w')
        self.steps_label = ttk.Label(self.info_frame, text="Steps: 0")
        self.steps_label.pack(anchor='w')
        self.energy_label = ttk.Label(self.info_frame, text="Energy: 0.00")
        self.energy_label.pack(anchor='w')

        # Embedded matplotlib view
        self.figure = Figure(figsize=(7, 7), dpi=100)
        self.figure.patch.set_facecolor("black")
        ax = self.figure.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.figure, master=self.root)
        self.renderer = Renderer2D(ax=ax, show_trails=self.config.show_trails)

    def _setup_layout(self):
        """Setup window layout."""
        self.control_frame.pack(side='left', fill='y', padx=10, pady=10)
        self.info_frame.pack(side='left', fill='y', padx=10, pady=10)
        self.canvas.get_tk_widget().pack(side='right', fill='both', expand=True)

    def _on_mass(self, index: int, value):
        try:
            applied = self.simulator.set_mass(index, float(value))
        except InvalidMassError as e:
            self.status_label.config(text=str(e), foreground="red")
            return
        self.mass_labels[index].config(text=f"mass {applied:.1f}")

    def _sync_from_simulator(self):
        """Push body masses into the sliders (after reset)."""
        for var, label, body in zip(self.mass_vars, self.mass_labels, self.simulator.bodies):
            var.set(body.mass)
            label.config(text=f"mass {body.mass:.1f}")
        self.renderer.clear()
        self.renderer.render(self.simulator.bodies)
        self.canvas.draw_idle()
        self.update_info()

    def toggle_play(self):
        """Toggle play/pause."""
        self.simulator.toggle()
        if self.simulator.playing:
            self.play_button.config(text="⏸ Pause")
            self.status_label.config(text="Running", foreground="green")
        else:
            self.play_button.config(text="▶ Play")
            self.status_label.config(text="Paused", foreground="orange")

    def reset(self):
        """Replace all bodies with the preset and stop."""
        self.simulator.reset()
        self.play_button.config(text="▶ Play")
        self.status_label.config(text="Ready", foreground="green")
        self._sync_from_simulator()

    def _frame(self):
        """One frame: tick if playing, then redraw."""
        was_playing = self.simulator.playing
        self.simulator.tick()
        if was_playing and self.simulator.state is SimulationState.PAUSED and self.simulator.last_error:
            self.play_button.config(text="▶ Play")
            self.status_label.config(text=f"Paused: {self.simulator.last_error}", foreground="red")
        self.renderer.render(self.simulator.bodies)
        self.canvas.draw_idle()
        self.update_info()
        self.root.after(self.frame_ms, self._frame)

    def update_info(self):
        """Update info display."""
        self.time_label.config(text=f"Time: {self.simulator.time:.2f}")
        self.steps_label.config(text=f"Steps: {self.simulator.step_count}")
        self.energy_label.config(text=f"Energy: {self.simulator.get_energy():.2f}")


def run_gui():
    """Run GUI application."""
    root = tk.Tk()
    app = ControlPanelGUI(root)
    root.mainloop()


if __name__ == '__main__':
    run_gui()
