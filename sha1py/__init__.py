"""sha1py - An incremental SHA-1 implementation in pure Python."""

__version__ = '0.1.0'
__author__ = 'Flambeau Iriho'
__email__ = 'irihoflambeau@gmail.com'

from sha1py.core.sha1 import Sha1, digest, digest_stream, digest_file
from sha1py.core.hash import digest_to_bytes, digest_to_hex, hash_object, hash_file

__all__ = [
    'Sha1',
    'digest',
    'digest_stream',
    'digest_file',
    'digest_to_bytes',
    'digest_to_hex',
    'hash_object',
    'hash_file',
]
