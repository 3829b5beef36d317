"""
teamcanvas - team roster canvas: default layout, geometry, drag handling,
SVG rendering and persistence.
"""

__version__ = "0.1.0"
