"""
Content hashing for generated documents.

Canonicalization happens in the caller. This module hashes bytes and
nothing else.
"""

import hashlib
from typing import Union


def compute_document_hash(canonical_bytes: Union[bytes, bytearray]) -> str:
    """
    Compute a human-readable SHA-256 hash of canonical document bytes.

    Returns the hex digest with an explicit algorithm prefix, e.g.
    ``SHA-256:3b7c0e4c...``.
    """
    if not isinstance(canonical_bytes, (bytes, bytearray)):
        raise TypeError(
            "compute_document_hash expects canonical bytes, "
            f"got {type(canonical_bytes).__name__}"
        )

    digest = hashlib.sha256(canonical_bytes).hexdigest()
    return f"SHA-256:{digest}"
