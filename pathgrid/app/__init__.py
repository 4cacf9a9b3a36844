# pathgrid/app/__init__.py
"""Collaborators around the core: map files, raster export, viewer."""
