"""Console menu and helpers for managing shop orders, clients, products and offers in SQLite."""

__version__ = "0.1.0"
__all__ = ["__version__"]