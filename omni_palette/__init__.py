"""Command palette logic: result selection, toggle geometry, extension catalog search and settings layout."""

__version__ = "0.1.0"
__all__ = [
    "palette",
    "toggle",
    "models",
    "catalog_view",
    "settings_layout",
]