"""Cartoon robot eye rendering and expression animations as RGB frames."""

__version__ = "0.1.0"

__all__ = ["angry", "animations", "canvas", "eye", "flame", "lids"]