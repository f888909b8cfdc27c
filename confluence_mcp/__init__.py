"""Confluence Cloud adapter for Model Context Protocol clients."""

__version__ = "1.0.0"
