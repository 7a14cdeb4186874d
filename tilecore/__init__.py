"""Geometry, window, workspace, tag, focus and status snapshot models for a tiling window manager."""

__version__ = "0.1.0"