"""
Core cryptographic utilities.

Digest functions, domain-separated hashing and hex helpers.
"""
from .hashing import (
    HashFunction,
    INNER_PREFIX,
    LEAF_PREFIX,
    SUPPORTED_ALGORITHMS,
    domain_separated,
    from_hex,
    get_hash_function,
    hash_bytes,
    hash_inner,
    hash_leaf,
    sha256,
    to_hex,
)

__all__ = [
    "HashFunction",
    "INNER_PREFIX",
    "LEAF_PREFIX",
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
