"""
Schemas & Canonicalization

Purpose: Export the public API for the schemas module.
"""

# Canonical serialization API
from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonicalize_value,
    dumps_canonical,
)

# Error models and exceptions
from .errors import (
    CanonicalizationException,
    ConfigurationException,
    DuplicateLeafException,
    ErrorCodes,
    HashContractViolationException,
    InvalidInputException,
    MerkleError,
    MerkleException,
)

# Proof value objects
from .proof import (
    InclusionProof,
    PrettyInclusionProof,
    PrettyProofSibling,
    ProofSibling,
    SiblingPosition,
)

__all__ = [
    # Canonical
    "CANONICAL_JSON_SEPARATORS",
    "canonicalize_value",
    "dumps_canonical",
    # Errors
    "ErrorCodes",
    "MerkleError",
    "MerkleException",
    "InvalidInputException",
    "DuplicateLeafException",
    "HashContractViolationException",
    "CanonicalizationException",
    "ConfigurationException",
    # Proofs
    "SiblingPosition",
    "ProofSibling",
    "InclusionProof",
    "PrettyProofSibling",
    "PrettyInclusionProof",
]
