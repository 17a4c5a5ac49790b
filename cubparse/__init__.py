"""Parse and validate .cub scene files for grid-based raycaster levels."""

__version__ = "0.1.0"