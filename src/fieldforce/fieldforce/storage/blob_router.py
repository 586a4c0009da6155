from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator, Mapping, Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..core.constants import UPLOAD_URL_PREFIX
from ..core.exceptions import NotFound

logger = logging.getLogger(__name__)

BUCKETS = {
    "ad_image": "ads",
    "photo": "photos",
    "resume": "resumes",
}
FALLBACK_BUCKET = "resumes"


def _millis() -> int:
    return int(time.time() * 1000)


class BlobPlacementRouter:
    """Decides where an uploaded file lives on local disk.

    Stored paths look like ``uploads/<bucket>/<millis>_<name>`` and are what
    the rows record and what ``/uploads/...`` serves back.
    """

    def __init__(self, upload_root: str | Path, *, clock: Optional[Callable[[], int]] = None):
        self._root = Path(upload_root)
        self._clock = clock or _millis

    @property
    def root(self) -> Path:
        return self._root

    def bucket_for(self, field_name: str) -> str:
        bucket = BUCKETS.get(field_name)
        if bucket is None:
            logger.warning("unrecognised upload field %r, storing under %s", field_name, FALLBACK_BUCKET)
            return FALLBACK_BUCKET
        return bucket

    def filename_for(self, original: str) -> str:
        name = secure_filename(original or "") or "upload"
        return f"{self._clock()}_{name}"

    def save(self, field_name: str, file: FileStorage) -> str:
        bucket = self.bucket_for(field_name)
        directory = self._root / bucket
        directory.mkdir(parents=True, exist_ok=True)

        name = self.filename_for(file.filename or "")
        file.save(str(directory / name))
        stored = f"{UPLOAD_URL_PREFIX}/{bucket}/{name}"
        logger.info("stored %s upload at %s", field_name, stored)
        return stored

    def resolve(self, stored_path: str) -> Path:
        """Map a stored path back onto disk, refusing anything outside the upload root."""
        relative = stored_path
        prefix = f"{UPLOAD_URL_PREFIX}/"
        if relative.startswith(prefix):
            relative = relative[len(prefix):]

        root = self._root.resolve()
        candidate = (root / relative).resolve()
        if root not in candidate.parents or not candidate.is_file():
            raise NotFound()
        return candidate

    def discard(self, stored_path: Optional[str]) -> None:
        """Best-effort removal of a file written for a request that then failed."""
        if not stored_path:
            return
        try:
            self.resolve(stored_path).unlink()
            logger.info("discarded orphaned upload %s", stored_path)
        except (NotFound, OSError):
            logger.warning("could not discard upload %s", stored_path)

    @contextmanager
    def staged(self, files: Mapping[str, Optional[FileStorage]]) -> Iterator[Dict[str, Optional[str]]]:
        """Write every present file, and discard them again if the block raises.

        Compensation is best-effort: there is no two-phase commit between
        the disk and the database.
        """
        stored: Dict[str, Optional[str]] = {}
        try:
            for field_name, file in files.items():
                stored[field_name] = self.save(field_name, file) if file is not None and file.filename else None
            yield stored
        except Exception:
            for path in stored.values():
                self.discard(path)
            raise
