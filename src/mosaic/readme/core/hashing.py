# mosaic/readme/core/hashing.py
"""
Directory fingerprints.

A fingerprint is the SHA-256 of every file's bytes under a root, fed in
walk order and truncated to a short hex prefix. It only signals that a
component changed; it is not a security property.

Walk order is part of the result: entries are visited depth first in
lexical order per directory, with subdirectories expanded in place.
"""
from __future__ import annotations

import hashlib
import logging
import os
import stat
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

FINGERPRINT_LENGTH = 8


def iter_files(root: Path | str) -> Iterator[Path]:
    """Yield every non-directory entry under ``root`` in walk order.

    Entries are classified with ``lstat``, so symlinks are yielded as
    files even when they point at a directory.

    Raises:
        OSError: If ``root`` or any directory below it cannot be listed.
    """
    root = Path(root)
    st = os.lstat(root)
    if not stat.S_ISDIR(st.st_mode):
        yield root
        return

    for name in sorted(os.listdir(root)):
        yield from iter_files(root / name)


def calculate_directory_hash(
    root: Path | str, length: int = FINGERPRINT_LENGTH
) -> str:
    """Return the truncated hex SHA-256 of all file contents under ``root``.

    Args:
        root: Directory (or single file) to fingerprint.
        length: Number of hex characters to keep.

    Raises:
        OSError: If the root is missing or any entry cannot be read.
    """
    digest = hashlib.sha256()
    count = 0
    for path in iter_files(root):
        digest.update(path.read_bytes())
        count += 1

    fingerprint = digest.hexdigest()[:length]
    logger.debug("Hashed %d file(s) under %s -> %s", count, root, fingerprint)
    return fingerprint
