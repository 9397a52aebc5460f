"""Building blocks for 2D games: math types, input, assets, physics kernels and shadow geometry."""

__version__ = "0.1.0"