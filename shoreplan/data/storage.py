import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from shoreplan.utils.defaults import STORAGE_FILE_SUFFIX, STORAGE_KEY_PATTERN
from shoreplan.validation.exceptions import PersistenceCorrupt, ValidationError

logger = logging.getLogger(__name__)


def _check_key(key: str) -> str:
    if not isinstance(key, str) or not STORAGE_KEY_PATTERN.match(key):
        raise ValidationError(f"Invalid storage key: {key!r}")
    return key


class KeyValueStorage:
    """
    Durable key-value surface holding serialized text documents.
    """

    def read(self, key: str) -> Optional[str]:
        """Return the stored text, or None if nothing is stored under key."""
        raise NotImplementedError

    def write(self, key: str, text: str) -> None:
        """Store text under key, replacing any previous value."""
        raise NotImplementedError

    def delete(self, key: str) -> None:
        """Remove key if present."""
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    """
    In-process storage, for headless use and tests.
    """

    def __init__(self, initial: Optional[dict] = None):
        self._data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(_check_key(key))

    def write(self, key: str, text: str) -> None:
        self._data[_check_key(key)] = text

    def delete(self, key: str) -> None:
        self._data.pop(_check_key(key), None)


class FileStorage(KeyValueStorage):
    """
    Simple file-based storage, one YAML file per key.

    Writes go through a temporary file and an atomic rename so a crash never
    leaves a half-written document behind.
    """

    def __init__(self, storage_dir: Union[str, Path] = ".shoreplan"):
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.storage_dir / f"{_check_key(key)}{STORAGE_FILE_SUFFIX}"

    def read(self, key: str) -> Optional[str]:
        """Retrieve the document for key if it exists; non-UTF-8 bytes are corrupt."""
        path = self._path(key)
        if not path.exists():
            return None
        raw = path.read_bytes()
        logger.debug(f"Storage read: {key}")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PersistenceCorrupt(f"Stored document {path} is not UTF-8: {e}") from e

    def write(self, key: str, text: str) -> None:
        """Save document under key."""
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.storage_dir, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            logger.debug(f"Stored: {key}")
        except Exception as e:
            logger.error(f"Storage write error for {key}: {e}")
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        """Remove specific item."""
        path = self._path(key)
        if path.exists():
            path.unlink()
