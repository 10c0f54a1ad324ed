"""GUI adapter layer.

This package provides thin Qt-shaped adapters over engine services.

Notes
-----
Adapters exist to:
- keep GUI code free of persistence details,
- translate engine domain errors into user-visible messages,
- tell screens when the data they render has changed.
"""
