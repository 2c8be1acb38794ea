"""Convert Figma frames into static HTML + CSS."""

__version__ = "0.1.0"
