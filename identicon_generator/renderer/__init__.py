"""Rendering subpackage.

Turns the immutable pipeline ``State`` into a pixel buffer. Rectangles are
painted into a NumPy ``uint8`` canvas and wrapped as a Pillow RGBA image, which
the writer then encodes.

See :mod:`identicon_generator.renderer.raster` for the rasterizer.
"""
