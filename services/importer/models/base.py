"""
Base models shared by all import stages.
"""

from pydantic import BaseModel


class ImportStats(BaseModel):
    """Statistics from one import stage."""

    files_processed: int = 0
    records_read: int = 0
    records_saved: int = 0
    lookups_saved: int = 0
