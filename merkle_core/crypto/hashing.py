"""
Hashing Utilities
Digest functions and hex helpers for Merkle trees.

This module provides:
- SHA-256 and a small registry of hashlib digests by name
- RFC 6962 style domain-separated leaf / inner-node hashing
- Hex encoding/decoding

Leaf vs. inner-node hashing:
    A tree built with the same function for leaves and inner nodes lets
    an inner node masquerade as a leaf. Prefixing leaf preimages with
    0x00 and inner-node preimages with 0x01 removes that ambiguity:
        LeafHash(data)  = H(0x00 || data)
        InnerHash(data) = H(0x01 || data)
"""
from __future__ import annotations

import hashlib
from typing import Callable

from merkle_core.schemas.errors import ConfigurationException


HashFunction = Callable[[bytes], bytes]

LEAF_PREFIX: bytes = b"\x00"
INNER_PREFIX: bytes = b"\x01"

SUPPORTED_ALGORITHMS: frozenset[str] = frozenset({
    "sha256",
    "sha512",
    "sha3_256",
    "blake2b",
    "blake2s",
})


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_bytes(data: bytes, algorithm: str = "sha256") -> bytes:
    """
    Hash raw bytes with a named algorithm.

    Args:
        data: Raw bytes to hash
        algorithm: One of SUPPORTED_ALGORITHMS

    Returns:
        Digest bytes

    Raises:
        ConfigurationException: If algorithm is not supported
    """
    return get_hash_function(algorithm)(data)


def get_hash_function(algorithm: str) -> HashFunction:
    """
    Resolve an algorithm name to a bytes -> bytes digest function.

    Raises:
        ConfigurationException: If algorithm is not supported
    """
    name = algorithm.lower().replace("-", "_")
    if name not in SUPPORTED_ALGORITHMS:
        raise ConfigurationException(
            f"Unknown hash algorithm: {algorithm}",
            setting="hash.algorithm",
            details={"supported": sorted(SUPPORTED_ALGORITHMS)},
        )
    if name == "sha256":
        return sha256

    def digest(data: bytes) -> bytes:
        return hashlib.new(name, data).digest()

    digest.__name__ = name
    return digest


def hash_leaf(data: bytes) -> bytes:
    """Hash a leaf with domain separation: SHA256(0x00 || data)."""
    return sha256(LEAF_PREFIX + data)


def hash_inner(data: bytes) -> bytes:
    """Hash an inner-node preimage with domain separation: SHA256(0x01 || data)."""
    return sha256(INNER_PREFIX + data)


def domain_separated(hash_function: HashFunction) -> tuple[HashFunction, HashFunction]:
    """
    Derive a (leaf_hash, inner_hash) pair from any base hash function.

    Use leaf_hash to prepare leaves before building a tree, and pass
    inner_hash to the tree as its hash function.
    """
    def leaf_hash(data: bytes) -> bytes:
        return hash_function(LEAF_PREFIX + data)

    def inner_hash(data: bytes) -> bytes:
        return hash_function(INNER_PREFIX + data)

    return leaf_hash, inner_hash


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hex string without prefix.

    Example:
        >>> to_hex(b"hi")
        '6869'
    """
    return bytes(data).hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hex string to bytes. A leading 0x is accepted.

    Raises:
        ValueError: If the string has odd length or invalid hex characters

    Example:
        >>> from_hex("0xdeadbeef").hex()
        'deadbeef'
    """
    hex_content = hex_string[2:] if hex_string.startswith("0x") else hex_string

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length, got length {len(hex_content)}"
        )

    # Decode (will raise ValueError for invalid hex chars)
    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "HashFunction",
    "LEAF_PREFIX",
    "INNER_PREFIX",
    "SUPPORTED_ALGORITHMS",
    "sha256",
    "hash_bytes",
    "get_hash_function",
    "hash_leaf",
    "hash_inner",
    "domain_separated",
    "to_hex",
    "from_hex",
]
