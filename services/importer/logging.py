"""
Importer logging - Capture and archive the log of an import run.
"""

import gzip
import io
from datetime import datetime
from pathlib import Path
from typing import Optional
from contextlib import contextmanager

from loguru import logger


class ImportLogger:
    """
    Captures logs during an import run and archives them.

    Usage:
        with ImportLogger("parto_import", local_backup_dir="logs/") as log:
            # do import work
            logger.info("Processing...")
        # Log is compressed and written to logs/
    """

    def __init__(
        self,
        run_name: str,
        local_backup_dir: Optional[str] = None,
    ):
        """
        Initialize the import logger.

        Args:
            run_name: Name used in markers and the archive filename
            local_backup_dir: Directory for the compressed log (optional)
        """
        self.run_name = run_name
        self.local_backup_dir = local_backup_dir

        self._log_buffer = io.StringIO()
        self._handler_id: Optional[int] = None
        self._start_time: Optional[datetime] = None
        self.archive_path: Optional[Path] = None

    def __enter__(self) -> "ImportLogger":
        """Start capturing logs."""
        self._start_time = datetime.utcnow()

        self._handler_id = logger.add(
            self._log_buffer,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}",
            level="DEBUG",
        )

        logger.info(f"=== Import started: {self.run_name} ===")
        logger.info(f"Start time: {self._start_time.isoformat()}")

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop capturing and archive logs."""
        end_time = datetime.utcnow()
        duration = end_time - self._start_time

        if exc_type:
            logger.error(f"Import failed with error: {exc_val}")

        logger.info(f"End time: {end_time.isoformat()}")
        logger.info(f"Duration: {duration}")
        logger.info(f"=== Import completed: {self.run_name} ===")

        if self._handler_id is not None:
            logger.remove(self._handler_id)
            self._handler_id = None

        if self.local_backup_dir:
            try:
                self.archive_path = self._save_local(self.content, end_time)
                logger.info(f"Log saved locally: {self.archive_path}")
            except OSError as e:
                logger.error(f"Local save failed: {e}")

        return False  # Don't suppress exceptions

    @property
    def content(self) -> str:
        return self._log_buffer.getvalue()

    def _save_local(self, content: str, timestamp: datetime) -> Path:
        """Compress and save the log file."""
        date_str = timestamp.strftime("%Y-%m-%d")
        time_str = timestamp.strftime("%H%M%S")
        filename = f"{self.run_name}_{date_str}_{time_str}.log.gz"

        backup_dir = Path(self.local_backup_dir)
        backup_dir.mkdir(parents=True, exist_ok=True)

        filepath = backup_dir / filename
        filepath.write_bytes(gzip.compress(content.encode("utf-8")))

        return filepath


@contextmanager
def capture_import_logs(run_name: str, local_backup_dir: Optional[str] = None):
    """
    Context manager to capture import logs.

    Usage:
        with capture_import_logs("parto_import") as log:
            # do work
            logger.info("Processing...")
    """
    with ImportLogger(run_name=run_name, local_backup_dir=local_backup_dir) as log:
        yield log
