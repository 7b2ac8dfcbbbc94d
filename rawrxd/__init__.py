"""A small software rasterizer drawing triangle meshes to a terminal or a pygame window."""

__version__ = "0.1.0"
__all__ = ["lin", "color", "model", "renderer", "terminal", "window"]