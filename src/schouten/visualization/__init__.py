"""Visualization of the conical prime spiral."""

from schouten.visualization.conical import ConicalSpiral, generate_spiral_figure
from schouten.visualization.renderer import prime_colors, render_point_cloud, save_figure

__all__ = [
    "ConicalSpiral",
    "generate_spiral_figure",
    "prime_colors",
    "render_point_cloud",
    "save_figure",
]
