"""
Data source handlers for the importer.
"""

from services.importer.sources.local import LocalSource

__all__ = [
    "LocalSource",
]
