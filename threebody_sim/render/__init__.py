"""Rendering for the three-body simulation."""

from threebody_sim.render.base import Renderer, position_translation
from threebody_sim.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "Renderer2D", "position_translation"]
