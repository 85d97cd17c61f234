"""Per-request scratch storage for uploaded files.

Each upload is written into its own directory, keyed by the request id,
and the directory is removed when the scope exits, on success and on
error alike. Nothing is shared between concurrent requests.
"""

from __future__ import annotations

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import BinaryIO
from uuid import uuid4

from tabprobe.core.exceptions import UploadTooLargeError
from tabprobe.core.logging import get_logger

logger = get_logger(__name__)

_CHUNK_SIZE = 64 * 1024


def safe_filename(filename: str) -> str:
    """Strip any directory part from a client-supplied file name."""
    name = PurePosixPath(filename.replace("\\", "/")).name
    return name or "upload"


@contextmanager
def scoped_upload(
    stream: BinaryIO,
    filename: str,
    max_bytes: int,
    base_dir: Path | None = None,
    request_id: str | None = None,
) -> Iterator[Path]:
    """Copy an upload stream to a private file for the duration of the scope.

    Args:
        stream: Binary stream of the uploaded payload
        filename: Client-supplied file name (only its last part is used)
        max_bytes: Size limit; exceeding it raises UploadTooLargeError
        base_dir: Parent for the scratch directory (default: system temp)
        request_id: Key for the scratch directory (default: a fresh uuid)

    Yields:
        Path to the stored file
    """
    request_id = request_id or uuid4().hex
    if base_dir is not None:
        base_dir.mkdir(parents=True, exist_ok=True)
    directory = Path(tempfile.mkdtemp(prefix=f"tabprobe-{request_id}-", dir=base_dir))

    try:
        target = directory / safe_filename(filename)
        written = 0
        with target.open("wb") as out:
            while chunk := stream.read(_CHUNK_SIZE):
                written += len(chunk)
                if written > max_bytes:
                    raise UploadTooLargeError(written, max_bytes, source=filename)
                out.write(chunk)
        logger.debug("upload_stored", path=str(target), size=written)
        yield target
    finally:
        shutil.rmtree(directory, ignore_errors=True)
        logger.debug("upload_released", request_id=request_id)
