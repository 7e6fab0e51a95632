"""
merkle_core

Binary Merkle trees over caller-supplied leaves with an injected hash
function: construction, inclusion proofs, and verification.
"""

from merkle_core.crypto.hashing import sha256
from merkle_core.merkle import MerkleProver, MerkleTree, MerkleVerifier
from merkle_core.schemas import (
    DuplicateLeafException,
    HashContractViolationException,
    InclusionProof,
    InvalidInputException,
    MerkleException,
    PrettyInclusionProof,
    ProofSibling,
    SiblingPosition,
)

__version__ = "0.1.0"

__all__ = [
    "MerkleTree",
    "MerkleProver",
    "MerkleVerifier",
    "InclusionProof",
    "PrettyInclusionProof",
    "ProofSibling",
    "SiblingPosition",
    "MerkleException",
    "InvalidInputException",
    "DuplicateLeafException",
    "HashContractViolationException",
    "sha256",
]
