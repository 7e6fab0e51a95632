"""
Merkle Tree and Inclusion Proofs

This module provides:
- MerkleTree: immutable tree over unique leaves with an injected hash
- verify_inclusion_proof: verify a proof without a tree
- compute_tree_depth: layer count under the carry-up rule
- MerkleProver / MerkleVerifier: one-shot convenience wrappers

Commitment Rules:
1. Leaves are used as given (callers pre-hash them)
2. Parent hashing: H(left + right)
3. Odd layers: last node carried up unchanged
4. Single leaf: root = leaf

Usage:
    from merkle_core.merkle import MerkleTree
    from merkle_core.crypto import sha256

    leaves = [sha256(item) for item in items]
    tree = MerkleTree(leaves, sha256)

    proof = tree.proof(leaves[2])
    assert tree.verify(proof)
"""
from .merkle_tree import (
    MerkleTree,
    build_layers,
    compute_tree_depth,
    verify_inclusion_proof,
)

from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Core types
    "MerkleTree",
    # Core functions
    "build_layers",
    "verify_inclusion_proof",
    "compute_tree_depth",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
]
