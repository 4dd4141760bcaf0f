"""JSON File Storage — reads and writes the registry document on disk.

Invariants:
    - read_registry returns None when the file does not exist (first run)
    - save_registry is atomic: write to a sibling temp file, then os.replace
    - Every OSError mapped to StorageError; bytes that are not UTF-8 to MalformedDocumentError
    - Domain errors from the document (missing, invalid, duplicate) propagate unchanged

Design Decisions:
    - Text <-> model conversion delegated to schemas/registry_document.py
"""

import logging
import os
import tempfile
from pathlib import Path

from trackascholar.core.errors import ErrorContext, MalformedDocumentError, StorageError
from trackascholar.core.registry import ApplicantRegistry
from trackascholar.schemas.registry_document import registry_from_json, registry_to_json

logger = logging.getLogger(__name__)


class JsonRegistryStorage:
    """RegistryStorage backed by a single JSON file."""

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    def read_registry(self) -> ApplicantRegistry | None:
        if not self.file_path.exists():
            logger.info(
                "Data file not found, nothing to load",
                extra={"file_path": str(self.file_path)},
            )
            return None
        try:
            text = self.file_path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to read data file: {e}",
                         extra={"file_path": str(self.file_path)})
            raise StorageError(str(e), "read", self._context()) from e
        except UnicodeDecodeError as e:
            logger.error(f"Data file is not valid UTF-8: {e}",
                         extra={"file_path": str(self.file_path)})
            raise MalformedDocumentError(
                f"not valid UTF-8 at byte {e.start}", self._context(),
            ) from e
        return registry_from_json(text)

    def save_registry(self, registry: ApplicantRegistry) -> None:
        text = registry_to_json(registry)
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.file_path.parent, prefix=f".{self.file_path.name}.", suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    tmp.write(text)
                os.replace(tmp_name, self.file_path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Failed to write data file: {e}",
                         extra={"file_path": str(self.file_path)})
            raise StorageError(str(e), "write", self._context()) from e
        logger.info(
            "Registry saved",
            extra={"file_path": str(self.file_path), "count": len(registry)},
        )

    def _context(self) -> ErrorContext:
        return ErrorContext(file_path=str(self.file_path))
