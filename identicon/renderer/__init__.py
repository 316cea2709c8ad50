"""Rendering subpackage.

Turns a fully mapped :class:`identicon.image.ImageDescriptor` into a bitmap.
The renderer is a thin wrapper around the pure pipeline:

* One flat colour (``rgb``) per image, white background.
* Rectangles are drawn in ``pixel_map`` order onto a 250x250 canvas.
* Pillow does the drawing and PNG encoding; NumPy exposes pixel arrays.

See :mod:`identicon.renderer.draw` for the drawing routines.
"""
