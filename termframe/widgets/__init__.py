"""Built-in widgets, one per module, and the Widget base class."""

__all__ = [
    "base",
    "block",
    "bordered",
    "centered",
    "divider",
    "fill",
    "gauge",
    "padding",
    "popup",
    "progress_bar",
    "spinner",
    "stack",
    "table",
    "text",
]