"""Utilities for voxel simulations: file helpers, logging, numeric helpers, memory usage, Perlin noise, voxel grids and argument parsing."""

__version__ = "0.1.0"