"""Force-directed graph layout with DOT, GML and JSON Graph formats and SVG rendering."""

__version__ = "0.9.1"