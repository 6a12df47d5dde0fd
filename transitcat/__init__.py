"""Transport catalogue with route statistics, trip routing and SVG maps, driven by JSON."""

__version__ = "0.1.0"