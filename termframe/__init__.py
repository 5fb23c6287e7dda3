"""Terminal UI toolkit: cell buffers, constraint layouts, widgets and a diffing render loop."""

__version__ = "0.1.0"

__all__ = [
    "buffer",
    "demo",
    "geometry",
    "layout",
    "progress",
    "style",
    "terminal",
    "widgets",
]