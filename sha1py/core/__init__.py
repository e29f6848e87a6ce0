"""Core functionality for sha1py.

This module contains:
- The SHA-1 hash state and compression function
- Digest formatting and file hashing helpers
- Configuration management
- The benchmark harness

For the command-line interface, see sha1py.cli
"""

from sha1py.core.sha1 import (Sha1, compress, message_schedule, leftrotate, digest, digest_stream,
                              digest_file, INITIAL_STATE, BLOCK_SIZE, DEFAULT_CHUNK_SIZE)
from sha1py.core.hash import digest_to_bytes, digest_to_hex, hash_object, hash_file
from sha1py.core.config import Config, get_config

__all__ = [
    'Sha1',
    'compress',
    'message_schedule',
    'leftrotate',
    'digest',
    'digest_stream',
    'digest_file',
    'INITIAL_STATE',
    'BLOCK_SIZE',
    'DEFAULT_CHUNK_SIZE',
    'digest_to_bytes',
    'digest_to_hex',
    'hash_object',
    'hash_file',
    'Config',
    'get_config',
]
