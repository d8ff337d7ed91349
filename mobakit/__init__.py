"""Building blocks for 2D games: vectors, grid points, outline shapes, colours and Perlin noise."""

__version__ = "0.1.0"