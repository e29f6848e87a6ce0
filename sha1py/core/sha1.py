"""Incremental SHA-1 hashing.

This module contains the hashing state machine:
- Sha1: running hash state (64 byte buffer, block counter, five hash words)
- message_schedule / compress: the block compression function
- digest / digest_stream / digest_file: one-shot helpers

Digests are returned as a tuple of five 32-bit words (h0..h4). Use
sha1py.core.hash to turn them into bytes or hex strings.
"""

import struct
from typing import BinaryIO, List, Optional, Tuple, Union

from sha1py.core.logs import get_logger

logger = get_logger(__name__)

Digest = Tuple[int, int, int, int, int]
BytesLike = Union[bytes, bytearray, memoryview]

BLOCK_SIZE = 64
DEFAULT_CHUNK_SIZE = 64 * 1024

INITIAL_STATE: Digest = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_MASK = 0xFFFFFFFF
_WORDS = struct.Struct('>16I')


def leftrotate(word: int, bits: int) -> int:
    """Rotate a 32-bit word left by 1-31 bits."""
    return ((word << bits) | (word >> (32 - bits))) & _MASK


def message_schedule(block: BytesLike) -> List[int]:
    """Expand a 64 byte block into the 80 words fed to the rounds."""
    w = list(_WORDS.unpack_from(block))

    for i in range(16, 32):
        w.append(leftrotate(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    # Same words as the rotate-by-1 recurrence applied twice
    for i in range(32, 80):
        w.append(leftrotate(w[i - 6] ^ w[i - 16] ^ w[i - 28] ^ w[i - 32], 2))

    return w


def compress(state: Digest, block: BytesLike) -> Digest:
    """
    Mix one 64 byte block into the hash words.

    Args:
        state: Current hash words (h0, h1, h2, h3, h4)
        block: 64 bytes of message data

    Returns:
        Updated hash words
    """
    w = message_schedule(block)
    a, b, c, d, e = state

    for i in range(0, 20):
        f = (b & c) | (~b & d)
        tmp = (leftrotate(a, 5) + f + e + 0x5A827999 + w[i]) & _MASK
        e, d, c, b, a = d, c, leftrotate(b, 30), a, tmp

    for i in range(20, 40):
        f = b ^ c ^ d
        tmp = (leftrotate(a, 5) + f + e + 0x6ED9EBA1 + w[i]) & _MASK
        e, d, c, b, a = d, c, leftrotate(b, 30), a, tmp

    for i in range(40, 60):
        f = (b & c) | (b & d) | (c & d)
        tmp = (leftrotate(a, 5) + f + e + 0x8F1BBCDC + w[i]) & _MASK
        e, d, c, b, a = d, c, leftrotate(b, 30), a, tmp

    for i in range(60, 80):
        f = b ^ c ^ d
        tmp = (leftrotate(a, 5) + f + e + 0xCA62C1D6 + w[i]) & _MASK
        e, d, c, b, a = d, c, leftrotate(b, 30), a, tmp

    h0, h1, h2, h3, h4 = state
    return (
        (h0 + a) & _MASK,
        (h1 + b) & _MASK,
        (h2 + c) & _MASK,
        (h3 + d) & _MASK,
        (h4 + e) & _MASK,
    )


class Sha1:
    """
    SHA-1 hash state. Represents one single hash.

    Can be reset and reused, but hashes one message at a time. Copy it
    (copy(), copy.copy or copy.deepcopy) when several messages share a
    common prefix; copies are fully independent.

    Example:
        s = Sha1()
        s.update(b'First part')
        s.update(b'Second part')
        words = s.finish()

    Calling update() or finish() again after finish() without reset()
    does not fail, but the resulting digest is meaningless.
    """

    name = 'sha1'
    block_size = BLOCK_SIZE
    digest_size = 20

    def __init__(self, data: Optional[BytesLike] = None):
        """
        Create a fresh hash state.

        Args:
            data: Optional bytes to absorb immediately
        """
        self.buffer = bytearray(BLOCK_SIZE)
        self.filled = 0
        self.blocks_processed = 0
        self.h0, self.h1, self.h2, self.h3, self.h4 = INITIAL_STATE

        if data is not None:
            self.update(data)

    def reset(self) -> None:
        """Return to the initial state. The buffer is left as is; filled=0 hides it."""
        self.filled = 0
        self.blocks_processed = 0
        self.h0, self.h1, self.h2, self.h3, self.h4 = INITIAL_STATE

    @property
    def state(self) -> Digest:
        """Current hash words."""
        return (self.h0, self.h1, self.h2, self.h3, self.h4)

    def update(self, data: BytesLike) -> None:
        """
        Absorb bytes. Every full 64 byte block is compressed right away,
        including blocks completed by bytes left over from earlier calls.
        """
        data = memoryview(data).cast('B')

        used = self.filled
        free = BLOCK_SIZE - used
        i = 0
        remaining = len(data)

        while remaining >= free:
            self.buffer[used:BLOCK_SIZE] = data[i:i + free]
            self._process_block()

            remaining -= free
            i += free
            used = 0
            free = BLOCK_SIZE

        self.buffer[used:used + remaining] = data[i:]
        self.filled = used + remaining

    def finish(self) -> Digest:
        """
        Pad the message and return the final hash words.

        The state is consumed afterwards; call reset() before hashing
        another message.

        Returns:
            Tuple (h0, h1, h2, h3, h4)
        """
        # Length is captured before padding touches blocks_processed
        message_length = (self.blocks_processed * 512 + 8 * self.filled) & 0xFFFFFFFFFFFFFFFF

        self.buffer[self.filled] = 0x80
        self.filled += 1

        if self.filled <= 56:
            self.buffer[self.filled:56] = bytes(56 - self.filled)
        else:
            # No room for the length suffix in this block
            self.buffer[self.filled:BLOCK_SIZE] = bytes(BLOCK_SIZE - self.filled)
            self._process_block()
            self.buffer[0:56] = bytes(56)

        self.buffer[56:BLOCK_SIZE] = message_length.to_bytes(8, 'big')
        self._process_block()
        self.filled = 0

        return self.state

    def copy(self) -> 'Sha1':
        """Return an independent copy of this hash state."""
        other = Sha1.__new__(Sha1)
        other.buffer = bytearray(self.buffer)
        other.filled = self.filled
        other.blocks_processed = self.blocks_processed
        other.h0, other.h1, other.h2, other.h3, other.h4 = self.state
        return other

    def __copy__(self) -> 'Sha1':
        return self.copy()

    def __deepcopy__(self, memo) -> 'Sha1':
        return self.copy()

    def write(self, data: BytesLike) -> int:
        """File-like sink: same as update(), returns the number of bytes taken."""
        self.update(data)
        return memoryview(data).nbytes

    def flush(self) -> None:
        """Nothing is buffered beneath the hash state."""

    def _process_block(self) -> None:
        self.blocks_processed += 1
        self.h0, self.h1, self.h2, self.h3, self.h4 = compress(self.state, self.buffer)

    def __repr__(self) -> str:
        return f"Sha1(blocks_processed={self.blocks_processed}, filled={self.filled})"


def digest(data: BytesLike) -> Digest:
    """
    Hash an in-memory byte sequence in one call.

    Equivalent to:
        s = Sha1()
        s.update(data)
        s.finish()
    """
    s = Sha1()
    s.update(data)
    return s.finish()


def digest_stream(source: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Tuple[Digest, int]:
    """
    Hash everything readable from a binary stream.

    Args:
        source: Object with read(n) returning bytes, b'' at end of input
        chunk_size: Bytes requested per read

    Returns:
        Tuple of (digest words, number of bytes read)

    Raises:
        OSError: If reading from the source fails
        BlockingIOError: If a non-blocking source has no data ready
        ValueError: If chunk_size is not positive
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    s = Sha1()
    total = 0
    while True:
        chunk = source.read(chunk_size)
        if chunk is None:
            # Non-blocking raw streams return None when nothing is ready yet
            raise BlockingIOError(f"source had no data ready after {total} bytes")
        if not chunk:
            break
        s.update(chunk)
        total += len(chunk)

    message_blocks = s.blocks_processed
    words = s.finish()
    logger.debug("stream_digested", size=total, blocks=message_blocks)
    return words, total


def digest_file(path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Tuple[Digest, int]:
    """
    Hash the contents of a file.

    Args:
        path: Path to file
        chunk_size: Bytes requested per read

    Returns:
        Tuple of (digest words, file size in bytes)

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(path, 'rb') as f:
        return digest_stream(f, chunk_size)
