"""Wireframe meshes drawn in software through local, world, view, clip and screen space."""

__version__ = "0.1.0"