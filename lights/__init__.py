"""Game building blocks: binary packing, 2D collision and physics, meshes, type generation, configuration and a login server."""

__version__ = "0.1.0"