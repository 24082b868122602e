"""Stencil -- create a new project from a bundled template."""

__version__ = "0.1.0"
