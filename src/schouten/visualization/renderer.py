"""Matplotlib rendering for 3D prime point clouds."""

from __future__ import annotations

import colorsys
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np

from schouten.core.engine import SpiralPoint

if TYPE_CHECKING:
    import matplotlib.figure

logger = logging.getLogger(__name__)


def prime_colors(
    primes: np.ndarray,
    saturation: float = 0.8,
    lightness: float = 0.6,
) -> np.ndarray:
    """Color each prime by hue (p mod 360) / 360.

    Args:
        primes: Prime values.
        saturation: HSL saturation.
        lightness: HSL lightness.

    Returns:
        Float array of shape (len(primes), 3) with RGB in [0, 1].
    """
    hues = (np.asarray(primes, dtype=np.int64) % 360) / 360.0
    rgb = [colorsys.hls_to_rgb(h, lightness, saturation) for h in hues]
    return np.array(rgb, dtype=np.float64).reshape(-1, 3)


def render_coordinates(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    colors: np.ndarray,
    ax=None,
    show_line: bool = True,
    show_axes: bool = True,
    axis_length: float = 5.0,
    title: str | None = None,
    figsize: tuple[int, int] = (10, 10),
) -> "matplotlib.figure.Figure":
    """Draw a 3D point cloud from coordinate arrays.

    Args:
        x, y, z: Coordinates in index order.
        colors: (N, 3) RGB array.
        ax: Existing 3D axes to draw onto. A new figure is created when
            omitted.
        show_line: Connect consecutive points with a faint line.
        show_axes: Draw x/y/z guide axes from the origin.
        axis_length: Length of the guide axes.
        title: Optional axes title.
        figsize: Size in inches of a newly created figure.

    Returns:
        The Figure holding the axes.
    """
    if ax is None:
        import matplotlib.pyplot as plt

        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(111, projection="3d")
        fig.patch.set_facecolor("#000011")
        created = True
    else:
        fig = ax.get_figure()
        created = False

    ax.set_facecolor("#000011")
    ax.scatter(x, y, z, c=colors, marker="o", s=12, alpha=0.8, depthshade=False)

    if show_line and len(x) > 1:
        ax.plot(x, y, z, color="#444444", alpha=0.3, linewidth=0.8)

    if show_axes:
        for direction, color in zip(np.eye(3), ("red", "green", "blue")):
            end = direction * axis_length
            ax.plot([0, end[0]], [0, end[1]], [0, end[2]], color=color, linewidth=1)

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")  # type: ignore[attr-defined]
    ax.view_init(elev=45, azim=45)

    if title:
        ax.set_title(title, color="white")

    if created:
        fig.tight_layout()
    return fig


def render_point_cloud(
    points: Sequence[SpiralPoint],
    colors: np.ndarray | None = None,
    ax=None,
    **kwargs,
) -> "matplotlib.figure.Figure":
    """Render an ordered sequence of spiral points as a 3D scatter.

    Args:
        points: Points in index order.
        colors: Optional (N, 3) RGB array. Defaults to prime_colors.
        ax: Existing 3D axes to draw onto.
        **kwargs: Additional arguments passed to render_coordinates.

    Returns:
        Matplotlib Figure object.
    """
    x = np.array([p.x for p in points], dtype=np.float64)
    y = np.array([p.y for p in points], dtype=np.float64)
    z = np.array([p.z for p in points], dtype=np.float64)

    if colors is None:
        colors = prime_colors(np.array([p.prime for p in points], dtype=np.int64))

    return render_coordinates(x, y, z, colors, ax=ax, **kwargs)


def save_figure(
    fig: "matplotlib.figure.Figure",
    path: str | Path,
    dpi: int = 150,
) -> Path:
    """Save a figure to disk and close it.

    Args:
        fig: Figure to save.
        path: Output file path (PNG, PDF, SVG, ...).
        dpi: Resolution in dots per inch.

    Returns:
        The output path.
    """
    import matplotlib.pyplot as plt

    path = Path(path)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)

    logger.info(f"Saved to {path}")
    return path
