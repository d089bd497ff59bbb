"""2D renderer using matplotlib."""

import time
from collections import deque
from typing import Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from threebody_sim.physics.body import Body
from threebody_sim.render.base import Renderer, position_translation

STAR_COLORS = ("tab:blue", "tab:orange", "tab:green", "tab:red", "tab:purple")


class Renderer2D(Renderer):
    """2D real-time renderer using matplotlib.
    
    Draws one marker per body on a black background, sized by mass. The view
    is fixed so that motion reads against the frame rather than being
    re-centred every frame.
    """
    
    def __init__(
        self,
        figsize: Tuple[int, int] = (10, 8),
        dpi: int = 100,
        extent: float = 500.0,
        show_trails: bool = False,
        trail_length: int = 300,
        target_fps: float = 30.0,
        ax: Optional[Axes] = None,
    ):
        """Initialize 2D renderer.
        
        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            extent: Half-width of the visible square, in simulation units
            show_trails: Whether to show body trails
            trail_length: Number of previous positions to keep
            target_fps: Frame rate limit for standalone windows
            ax: Existing axes to draw into (e.g. embedded in the GUI)
        """
        self.figsize = figsize
        self.dpi = dpi
        self.extent = extent
        self.show_trails = show_trails
        self.trail_length = trail_length
        self.frame_time = 1.0 / target_fps if target_fps > 0 else 0.0
        self.last_render_time = 0.0
        
        self.embedded = ax is not None
        self.ax: Optional[Axes] = ax
        self.fig: Optional[Figure] = ax.figure if ax is not None else None
        self.scatter = None
        self.trail_lines = []
        self.trails: deque = deque(maxlen=trail_length)
        self.initialized = False
    
    def _initialize(self):
        """Create the figure and axes if not already done."""
        if self.initialized:
            return
        if self.ax is None:
            self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
            plt.show(block=False)
        self._style_axes()
        self.initialized = True
    
    def _style_axes(self):
        self.ax.set_facecolor("black")
        self.ax.set_aspect("equal")
        self.ax.set_xlim(-self.extent, self.extent)
        self.ax.set_ylim(-self.extent, self.extent)
        self.ax.set_title("Three Celestial Bodies")
        self.ax.set_xticks([])
        self.ax.set_yticks([])
    
    @staticmethod
    def marker_sizes(masses: np.ndarray) -> np.ndarray:
        """Marker area grows with mass; mass 1 gives 30, mass 100 gives 300."""
        return 30.0 * np.sqrt(np.asarray(masses, dtype=float))
    
    def render(self, bodies: Sequence[Body]):
        """Render current frame."""
        if not self.embedded and self.initialized and not plt.fignum_exists(self.fig.number):
            return
        
        current_time = time.time()
        if not self.embedded and self.initialized and (current_time - self.last_render_time) < self.frame_time:
            return
        self.last_render_time = current_time
        self._initialize()
        
        placement = position_translation(bodies)
        xy = placement[:, :2]
        masses = np.array([b.mass for b in bodies])
        colors = [STAR_COLORS[i % len(STAR_COLORS)] for i in range(len(bodies))]
        
        if self.show_trails:
            self.trails.append(xy.copy())
            self._draw_trails(colors)
        
        if self.scatter is None or len(self.scatter.get_offsets()) != len(bodies):
            if self.scatter is not None:
                self.scatter.remove()
            self.scatter = self.ax.scatter(
                xy[:, 0], xy[:, 1],
                s=self.marker_sizes(masses), c=colors,
                edgecolors="white", linewidths=0.5, zorder=3
            )
        else:
            self.scatter.set_offsets(xy)
            self.scatter.set_sizes(self.marker_sizes(masses))
        
        self.fig.canvas.draw_idle()
        if not self.embedded:
            plt.pause(0.001)
    
    def _draw_trails(self, colors):
        history = np.stack(self.trails)  # (t, n, 2)
        n = history.shape[1]
        if len(self.trail_lines) != n:
            for line in self.trail_lines:
                line.remove()
            self.trail_lines = [
                self.ax.plot([], [], "-", color=colors[i], alpha=0.5, linewidth=0.8)[0]
                for i in range(n)
            ]
        for i, line in enumerate(self.trail_lines):
            line.set_data(history[:, i, 0], history[:, i, 1])
    
    def clear(self):
        """Clear the renderer."""
        self.trails.clear()
        for line in self.trail_lines:
            line.remove()
        self.trail_lines = []
        if self.scatter is not None:
            self.scatter.remove()
            self.scatter = None
    
    def close(self):
        """Close the renderer."""
        if self.fig is not None and not self.embedded:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
        self.scatter = None
        self.trail_lines = []
        self.initialized = False
