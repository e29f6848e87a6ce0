"""Hash utilities for sha1py."""

from sha1py.core.logs import get_logger
from sha1py.core.sha1 import DEFAULT_CHUNK_SIZE, Digest, digest, digest_file

logger = get_logger(__name__)


def digest_to_bytes(words: Digest) -> bytes:
    """
    Serialize digest words to the canonical 20-byte SHA-1 digest.

    Args:
        words: Five 32-bit hash words (h0..h4)

    Returns:
        20 bytes, each word big-endian
    """
    return b''.join(word.to_bytes(4, 'big') for word in words)


def digest_to_hex(words: Digest) -> str:
    """Format digest words as a 40-character lowercase hex string."""
    return digest_to_bytes(words).hex()


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.

    Args:
        data: Bytes to hash

    Returns:
        40-character hex string
    """
    return digest_to_hex(digest(data))


def hash_file(filepath, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Compute SHA-1 hash of file.

    Args:
        filepath: Path to file
        chunk_size: Bytes read per call

    Returns:
        40-character hex string
    """
    words, size = digest_file(filepath, chunk_size)
    logger.debug("file_hashed", path=str(filepath), size=size)
    return digest_to_hex(words)
