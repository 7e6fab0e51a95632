"""
Merkle Proofs Convenience Wrappers
Thin wrappers around the Merkle tree for one-shot use.

This module provides class-based interfaces:
- MerkleProver: build a tree and prove a leaf in one call
- MerkleVerifier: verify proofs without any tree object

A verifier only needs the proof and the hash function the tree was
built with; the tree itself can be long gone.
"""
from __future__ import annotations

from typing import Sequence

from merkle_core.crypto.hashing import HashFunction, sha256
from merkle_core.merkle.merkle_tree import MerkleTree, verify_inclusion_proof
from merkle_core.schemas.errors import InvalidInputException
from merkle_core.schemas.proof import (
    InclusionProof,
    PrettyInclusionProof,
    ProofSibling,
)


class MerkleProver:
    """
    Convenience class for generating proofs.

    Example:
        >>> leaves = [sha256(b"a"), sha256(b"b"), sha256(b"c")]
        >>> proof = MerkleProver.prove(leaves, leaves[1])
        >>> proof.leaf == leaves[1]
        True
    """

    @staticmethod
    def prove(
        leaves: Sequence[bytes],
        leaf: bytes,
        hash_function: HashFunction = sha256,
    ) -> InclusionProof:
        """
        Build a tree over leaves and generate a proof for leaf.

        Raises:
            InvalidInputException: Malformed leaves
            DuplicateLeafException: Two leaves are byte-equal
        """
        return MerkleTree(leaves, hash_function).proof(leaf)

    @staticmethod
    def prove_index(
        leaves: Sequence[bytes],
        index: int,
        hash_function: HashFunction = sha256,
    ) -> InclusionProof:
        """
        Build a tree over leaves and generate a proof for the leaf at index.

        Raises:
            IndexError: If index is out of range
        """
        return MerkleTree(leaves, hash_function).proof_for_index(index)

    @staticmethod
    def compute_root(
        leaves: Sequence[bytes],
        hash_function: HashFunction = sha256,
    ) -> bytes:
        return MerkleTree(leaves, hash_function).root


class MerkleVerifier:
    """
    Convenience class for verifying proofs without a tree.

    Gives the same answer as MerkleTree.verify() for the same proof and
    hash function.
    """

    @staticmethod
    def verify(proof: InclusionProof, hash_function: HashFunction = sha256) -> bool:
        return verify_inclusion_proof(proof, hash_function)

    @staticmethod
    def verify_pretty(
        pretty: PrettyInclusionProof,
        hash_function: HashFunction = sha256,
    ) -> bool:
        """
        Verify a hex-rendered proof.

        Raises:
            ValueError: If the proof contains invalid hex
        """
        return verify_inclusion_proof(InclusionProof.from_pretty(pretty), hash_function)

    @staticmethod
    def verify_leaf_in_root(
        leaf: bytes,
        siblings: Sequence[ProofSibling],
        root: bytes,
        hash_function: HashFunction = sha256,
    ) -> bool:
        """
        Verify a leaf against a root using raw components.

        Args:
            leaf: The leaf to verify
            siblings: Sibling entries, leaf level first
            root: The root the proof claims
            hash_function: Inner-node hash function the tree used

        Returns:
            True if the proof is valid, False otherwise

        Raises:
            InvalidInputException: If leaf or root is not a byte string
        """
        for name, value in (("leaf", leaf), ("root", root)):
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise InvalidInputException(
                    f"{name.capitalize()} should be a byte string, got {type(value).__name__}",
                    field_path=name,
                )
        proof = InclusionProof(leaf=bytes(leaf), siblings=tuple(siblings), root=bytes(root))
        return verify_inclusion_proof(proof, hash_function)


__all__ = [
    "MerkleProver",
    "MerkleVerifier",
]
