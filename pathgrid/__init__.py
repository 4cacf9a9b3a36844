# pathgrid/__init__.py
"""Octile A* pathfinding on obstacle grids."""

__version__ = "0.1.0"
