"""A small path tracer for scenes of spheres with diffuse, metal and glass materials."""

__version__ = "0.1.0"