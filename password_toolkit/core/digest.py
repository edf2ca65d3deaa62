"""
Digest functions for the Password Security Toolkit.

Every hash in the toolkit goes through this module, so the algorithm is
chosen in exactly one place.
"""

import hashlib
import re

from password_toolkit.utils.exceptions import HashAlgorithmUnavailableError
from password_toolkit.utils.logger import critical

DIGEST_ALGORITHM = "sha256"
DIGEST_HEX_LENGTH = 64

_DIGEST_HEX_RE = re.compile(r"[0-9a-f]{%d}" % DIGEST_HEX_LENGTH)


def new_hasher():
    """Create a fresh hash object for the toolkit's digest algorithm

    Raises:
        HashAlgorithmUnavailableError: If this Python build lacks the algorithm.
            There is no fallback to another algorithm.
    """
    try:
        return hashlib.new(DIGEST_ALGORITHM)
    except ValueError as e:
        critical(f"Digest algorithm {DIGEST_ALGORITHM} is not available: {e}")
        raise HashAlgorithmUnavailableError(
            f"Digest algorithm {DIGEST_ALGORITHM} is not available in this runtime"
        ) from e


def hash_password(text: str) -> str:
    """Hash text with SHA-256

    Args:
        text: Any string; it is hashed as UTF-8 bytes

    Returns:
        64-character lowercase hexadecimal digest
    """
    hasher = new_hasher()
    hasher.update(text.encode("utf-8"))
    return hasher.hexdigest()


def is_digest_hex(value: str) -> bool:
    """Check whether value has the exact shape hash_password returns"""
    return isinstance(value, str) and _DIGEST_HEX_RE.fullmatch(value) is not None
