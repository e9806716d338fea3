"""Conical prime spiral.

The nth prime p_n is placed at

    (ln p_n cos t_n, ln p_n sin t_n, n),   t_n = arctan(n / ln p_n)

so the radius grows logarithmically with the prime while the height is
the prime's index. The angle approaches pi/2 as n grows, which bends the
points onto the surface of a cone.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

import numpy as np

from schouten.core.engine import PrimeEngine, SpiralPoint, get_engine
from schouten.visualization.renderer import prime_colors, render_coordinates, save_figure

if TYPE_CHECKING:
    import matplotlib.figure


class ConicalSpiral:
    """Generator for conical prime spiral point clouds.

    Attributes:
        count: Number of primes (points) in the spiral.
        engine: Engine used to generate primes.
    """

    def __init__(self, count: int, engine: Optional[PrimeEngine] = None):
        """Initialize the spiral.

        Args:
            count: Number of points, n = 1..count.
            engine: Engine to use. Defaults to the shared engine.

        Raises:
            ValueError: If count < 1.
        """
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")

        self.count = count
        self.engine = engine if engine is not None else get_engine()
        self._coords: tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray] | None = None

    def generate_coordinates(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Generate coordinates for n = 1..count.

        Returns:
            Tuple of (x, y, z, primes) arrays.
        """
        if self._coords is not None:
            return self._coords

        primes = self.engine.first_primes(self.count)
        n = np.arange(1, self.count + 1, dtype=np.int64)

        log_p = np.log(primes.astype(np.float64))
        theta = np.arctan(n / log_p)

        x = log_p * np.cos(theta)
        y = log_p * np.sin(theta)

        self._coords = (x, y, n, primes)
        return self._coords

    def points(self) -> List[SpiralPoint]:
        """Spiral points in index order."""
        return self.engine.spiral_points(self.count)

    def colors(self) -> np.ndarray:
        """Per-point RGB colors keyed on each prime."""
        _, _, _, primes = self.generate_coordinates()
        return prime_colors(primes)

    def render(
        self,
        ax=None,
        show_line: bool = True,
        show_axes: bool = True,
    ) -> "matplotlib.figure.Figure":
        """Render the spiral as a 3D scatter.

        Args:
            ax: Existing 3D axes to draw onto. A new figure is created
                when omitted.
            show_line: Connect consecutive points.
            show_axes: Draw guide axes from the origin.

        Returns:
            The Figure holding the spiral.
        """
        x, y, z, primes = self.generate_coordinates()
        return render_coordinates(
            x,
            y,
            z,
            prime_colors(primes),
            ax=ax,
            show_line=show_line,
            show_axes=show_axes,
            title=f"Conical prime spiral ({self.count} primes)",
        )

    def save(self, path: str | Path, dpi: int = 150) -> Path:
        """Render and save to an image file."""
        return save_figure(self.render(), path, dpi=dpi)


def generate_spiral_figure(
    count: int,
    engine: Optional[PrimeEngine] = None,
) -> "matplotlib.figure.Figure":
    """Convenience function to render a conical spiral.

    Args:
        count: Number of points.
        engine: Engine to use.

    Returns:
        Matplotlib Figure object.
    """
    return ConicalSpiral(count, engine=engine).render()
