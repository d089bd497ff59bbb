"""Graphical control panel."""
