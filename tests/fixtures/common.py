"""
Common test fixtures shared by all modules.

Provides factory functions for:
- Hashed leaf sets
- Single-byte corruption of digests
- A call-counting hash function spy
"""

from typing import Callable

from merkle_core.crypto.hashing import sha256

# Known SHA-256 vectors
HELLO_HEX = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
WORLD_HEX = "486ea46224d1bb4fb680f34f7c9ad96a8f24ec88be73ea8e5a6c65260e9cb8a7"
FOO_HEX = "2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae"
HELLO_WORLD_ROOT_HEX = "7305db9b2abccd706c256db3d97e5ff48d677cfe4d3a5904afb7da0e3950e1e2"
HELLO_WORLD_FOO_ROOT_HEX = "ea150034b1804b2bddd35b65d55d675252f0d9ef4ba6d47f8f457895283eabdb"


def make_leaves(
    count: int,
    prefix: str = "leaf",
    hash_function: Callable[[bytes], bytes] = sha256,
) -> list[bytes]:
    """Create count distinct hashed leaves."""
    return [hash_function(f"{prefix}{i}".encode()) for i in range(count)]


def flip_byte(data: bytes, position: int = 0) -> bytes:
    """Return a copy of data with one byte inverted."""
    mutable = bytearray(data)
    mutable[position] ^= 0xFF
    return bytes(mutable)


class CountingHash:
    """Hash function spy that records every preimage it sees."""

    def __init__(self, hash_function: Callable[[bytes], bytes] = sha256) -> None:
        self._hash_function = hash_function
        self.calls: list[bytes] = []

    def __call__(self, data: bytes) -> bytes:
        self.calls.append(data)
        return self._hash_function(data)

    @property
    def call_count(self) -> int:
        return len(self.calls)
