"""
Importer exceptions.

Every failure is fatal to the run; these only let the CLI tell a
configuration problem apart from a data problem.
"""

from typing import Optional


class ImporterError(Exception):
    """Base class for importer failures."""


class ConfigurationError(ImporterError):
    """Missing or invalid configuration (database settings, input directory)."""


class InputFileError(ImporterError):
    """An input file is missing, is not valid JSON, or holds invalid records."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"{filename}: {reason}")


class MissingReferenceError(ImporterError):
    """A join target could not be found for a record."""

    def __init__(self, entity: str, key, referenced_by: Optional[str] = None):
        self.entity = entity
        self.key = key
        self.referenced_by = referenced_by
        message = f"{entity} '{key}' not found"
        if referenced_by:
            message += f" (referenced by {referenced_by})"
        super().__init__(message)
