"""Cache-busting fingerprint for stylesheets.

The token is appended to stylesheet URLs as ``?v=<token>`` so that browsers
fetch a fresh copy whenever any of the fingerprinted files change. It is a
cache key only; MD5 is fine here.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from pathlib import Path

TOKEN_LENGTH = 8


def compute_fingerprint(paths: Iterable[Path], length: int = TOKEN_LENGTH) -> str:
    """Hash the bytes of each file, in order, into one short hex token.

    Args:
        paths: Ordered stylesheet paths. Order matters.
        length: Number of hex characters to keep.

    Returns:
        Truncated hex digest.

    Raises:
        OSError: If any file cannot be read.
    """
    digest = hashlib.md5()
    for path in paths:
        digest.update(Path(path).read_bytes())
    return digest.hexdigest()[:length]
