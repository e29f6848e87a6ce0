"""Benchmark sha1py against the interpreter's hashlib implementation."""

import hashlib
import time
from dataclasses import dataclass
from typing import Callable, Dict, List

from sha1py.core.logs import get_logger
from sha1py.core.hash import digest_to_bytes
from sha1py.core.sha1 import digest

logger = get_logger(__name__)

HELLO_WORLD = b"Hello, world!"


def _sha1py_digest(data: bytes) -> bytes:
    return digest_to_bytes(digest(data))


def _hashlib_digest(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


IMPLEMENTATIONS: Dict[str, Callable[[bytes], bytes]] = {
    'sha1py': _sha1py_digest,
    'hashlib': _hashlib_digest,
}


@dataclass
class BenchResult:
    """Timing of one implementation over one payload."""
    implementation: str
    payload: str
    size: int
    iterations: int
    seconds: float

    @property
    def per_call_us(self) -> float:
        return self.seconds / self.iterations * 1e6

    @property
    def throughput_mib(self) -> float:
        """Throughput in MiB/s, 0 when the timer did not advance."""
        if self.seconds <= 0:
            return 0.0
        return self.size * self.iterations / self.seconds / (1024 * 1024)


def make_payloads(size: int) -> Dict[str, bytes]:
    """The short greeting plus a repeating byte pattern of the given size."""
    pattern = bytes(range(256))
    large = (pattern * (size // len(pattern) + 1))[:size]
    return {
        'hello-world': HELLO_WORLD,
        f'{size}-bytes': large,
    }


def verify(payloads: Dict[str, bytes]) -> None:
    """
    Check every implementation agrees on every payload.

    Raises:
        ValueError: On the first payload where digests differ
    """
    for name, data in payloads.items():
        expected = _hashlib_digest(data)
        actual = _sha1py_digest(data)
        if actual != expected:
            raise ValueError(
                f"digest mismatch for {name}: sha1py={actual.hex()} hashlib={expected.hex()}"
            )


def run_benchmarks(iterations: int, size: int) -> List[BenchResult]:
    """
    Time each implementation over each payload.

    Args:
        iterations: Calls per implementation and payload
        size: Size of the large payload in bytes

    Returns:
        List of BenchResult, grouped by payload
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    payloads = make_payloads(size)
    verify(payloads)

    results = []
    for payload_name, data in payloads.items():
        for impl_name, func in IMPLEMENTATIONS.items():
            start = time.perf_counter()
            for _ in range(iterations):
                func(data)
            elapsed = time.perf_counter() - start

            result = BenchResult(impl_name, payload_name, len(data), iterations, elapsed)
            logger.debug("bench_result", implementation=impl_name, payload=payload_name,
                         seconds=round(elapsed, 6))
            results.append(result)

    return results
