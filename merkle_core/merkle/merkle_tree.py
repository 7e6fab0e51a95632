"""
Merkle Tree Implementation
Eager layer-table construction, proof generation, and verification.

This module provides:
- MerkleTree: immutable tree over a fixed set of unique leaves
- build_layers: compute every layer from leaves up to the root
- verify_inclusion_proof: check a proof without a tree
- compute_tree_depth: number of layers for a given leaf count

Commitment Rules:
1. Leaves are used as given. The tree never hashes leaves itself;
   callers pre-hash them if they want leaf hashing.
2. Parent hashing: parent = H(left + right) with the injected H
3. Odd layers: the last node is carried up unchanged (not re-hashed)
4. Single leaf: root = leaf
5. Empty leaf sets and duplicate leaves are rejected

Determinism Notes:
- This module never sorts leaves - it trusts input order
- The hash function must be pure; its digests are type-checked after
  every call
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

from merkle_core.config.runtime import RuntimeConfig, get_default_config
from merkle_core.crypto.hashing import HashFunction
from merkle_core.schemas.canonical import canonicalize_value, dumps_canonical
from merkle_core.schemas.errors import (
    DuplicateLeafException,
    HashContractViolationException,
    InvalidInputException,
)
from merkle_core.schemas.proof import (
    InclusionProof,
    PrettyInclusionProof,
    ProofSibling,
    SiblingPosition,
)

logger = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray, memoryview)

Layer = tuple[bytes, ...]


def _validate_leaves(leaves: Any) -> Layer:
    """
    Check the leaf set and normalize every leaf to immutable bytes.

    Raises:
        InvalidInputException: Not a sequence, empty, or a non-bytes leaf
        DuplicateLeafException: Two leaves are byte-equal
    """
    if not isinstance(leaves, Sequence) or isinstance(leaves, (str, *_BYTES_TYPES)):
        raise InvalidInputException(
            f"Leaves should be a sequence of byte strings, got {type(leaves).__name__}",
            field_path="leaves",
        )

    if len(leaves) == 0:
        raise InvalidInputException(
            "At least one leaf is required, got 0",
            field_path="leaves",
        )

    normalized: list[bytes] = []
    for index, leaf in enumerate(leaves):
        if not isinstance(leaf, _BYTES_TYPES):
            raise InvalidInputException(
                f"Leaves should only contain byte strings, got {type(leaf).__name__} at index {index}",
                field_path=f"leaves[{index}]",
                details={"index": index, "type": type(leaf).__name__},
            )
        normalized.append(bytes(leaf))

    duplicate = _find_duplicate(normalized)
    if duplicate is not None:
        index, duplicate_index = duplicate
        leaf = normalized[index]
        raise DuplicateLeafException(
            f"Duplicate leaf found: {leaf.hex()} at index {index} "
            f"is repeated at index {duplicate_index}",
            leaf=leaf,
            index=index,
            duplicate_index=duplicate_index,
        )

    return tuple(normalized)


def _find_duplicate(leaves: Sequence[bytes]) -> Optional[tuple[int, int]]:
    """
    Find the lowest index whose leaf occurs again.

    Returns (first_index, first_repeat_index) or None. The reported
    offender is the same one an exhaustive pairwise scan finds first.
    """
    first_seen: dict[bytes, int] = {}
    offender: Optional[tuple[int, int]] = None

    for index, leaf in enumerate(leaves):
        first = first_seen.setdefault(leaf, index)
        if first != index and (offender is None or first < offender[0]):
            offender = (first, index)

    return offender


def _digest(hash_function: HashFunction, preimage: bytes) -> bytes:
    """Call the hash function and enforce its bytes -> bytes contract."""
    digest = hash_function(preimage)
    if not isinstance(digest, _BYTES_TYPES):
        raise HashContractViolationException(
            f"Hash function should output bytes, got {type(digest).__name__}",
            digest_type=type(digest).__name__,
        )
    return bytes(digest)


def build_layers(leaves: Layer, hash_function: HashFunction) -> tuple[Layer, ...]:
    """
    Build every layer of the tree, leaves first and root last.

    Example: [a, b, c] -> [[a, b, c], [H(a+b), c], [H(H(a+b)+c)]]

    Args:
        leaves: Validated, non-empty leaf layer
        hash_function: Inner-node hash function

    Returns:
        Tuple of layers; the last layer holds exactly the root

    Raises:
        HashContractViolationException: If a digest is not bytes
    """
    layers: list[Layer] = [leaves]
    current_layer = leaves

    while len(current_layer) > 1:
        next_layer: list[bytes] = []
        for i in range(0, len(current_layer) - 1, 2):
            left = current_layer[i]
            right = current_layer[i + 1]
            next_layer.append(_digest(hash_function, left + right))

        # Carry the unpaired node up unchanged
        if len(current_layer) % 2 == 1:
            next_layer.append(current_layer[-1])

        current_layer = tuple(next_layer)
        layers.append(current_layer)

    return tuple(layers)


def verify_inclusion_proof(proof: InclusionProof, hash_function: HashFunction) -> bool:
    """
    Verify an inclusion proof against the root it carries.

    Folds the siblings into the leaf from the bottom up:
    - sibling on the left:  acc = H(sibling + acc)
    - sibling on the right: acc = H(acc + sibling)
    and compares the result with proof.root.

    A proof with no siblings verifies exactly when leaf == root.
    Exceptions raised by hash_function propagate unchanged.
    """
    accumulator = proof.leaf
    for sibling in proof.siblings:
        if sibling.side is SiblingPosition.LEFT:
            preimage = sibling.hash + accumulator
        else:
            preimage = accumulator + sibling.hash
        accumulator = hash_function(preimage)

    return accumulator == proof.root


def compute_tree_depth(num_leaves: int) -> int:
    """
    Number of layers (leaves and root inclusive) for a given leaf count.

    With carry-up each layer has ceil(n / 2) nodes, so 3 and 4 leaves
    both give depth 3 and 5 leaves give depth 4.

    Returns:
        Tree depth (0 for an empty tree)
    """
    if num_leaves < 0:
        raise ValueError(f"Leaf count must be non-negative, got {num_leaves}")
    if num_leaves == 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        n = (n + 1) // 2
        depth += 1

    return depth


class MerkleTree:
    """
    Binary Merkle tree over a fixed, ordered set of unique leaves.

    Every layer is computed at construction time; queries only walk the
    stored layer table. Layers are tuples and no mutation API exists, so
    a built tree can be shared freely between readers.

    Example:
        >>> leaves = [sha256(b"hello"), sha256(b"world")]
        >>> tree = MerkleTree(leaves, sha256)
        >>> tree.pretty_root()
        '7305db9b2abccd706c256db3d97e5ff48d677cfe4d3a5904afb7da0e3950e1e2'
        >>> tree.verify(tree.proof(leaves[0]))
        True
    """

    __slots__ = ("_layers", "_hash_function")

    def __init__(self, leaves: Sequence[bytes], hash_function: HashFunction) -> None:
        """
        Build the full layer table.

        Raises:
            InvalidInputException: Malformed leaves or non-callable hash_function
            DuplicateLeafException: Two leaves are byte-equal
            HashContractViolationException: hash_function returned non-bytes
        """
        if not callable(hash_function):
            raise InvalidInputException(
                f"Hash function should be callable, got {type(hash_function).__name__}",
                field_path="hash_function",
            )

        validated = _validate_leaves(leaves)

        self._hash_function = hash_function
        self._layers = build_layers(validated, hash_function)

        logger.debug(
            f"Built Merkle tree: {len(validated)} leaves, "
            f"{len(self._layers)} layers, root={self.pretty_root()}"
        )

    @classmethod
    def from_config(
        cls,
        leaves: Sequence[bytes],
        config: Optional[RuntimeConfig] = None,
    ) -> "MerkleTree":
        """
        Build a tree with the inner-node hash function named by config.

        Leaves are still used as given; prepare them with
        config.hash.resolve_leaf_hash() if leaf hashing is wanted.
        """
        config = config or get_default_config()
        return cls(leaves, config.hash.resolve())

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def leaves(self) -> Layer:
        return self._layers[0]

    @property
    def layers(self) -> tuple[Layer, ...]:
        return self._layers

    @property
    def root(self) -> bytes:
        return self._layers[-1][0]

    @property
    def hash_function(self) -> HashFunction:
        return self._hash_function

    @property
    def depth(self) -> int:
        return len(self._layers)

    def __len__(self) -> int:
        return len(self._layers[0])

    def __contains__(self, leaf: object) -> bool:
        if not isinstance(leaf, _BYTES_TYPES):
            return False
        return self.index_of(bytes(leaf)) is not None

    def __repr__(self) -> str:
        return f"MerkleTree(leaves={len(self)}, depth={self.depth}, root={self.pretty_root()})"

    def __str__(self) -> str:
        return self.to_display_string()

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def pretty_root(self) -> str:
        return self.root.hex()

    def pretty_layers(self) -> list[list[str]]:
        return [[node.hex() for node in layer] for layer in self._layers]

    def to_display_string(self) -> str:
        """
        Render the layer table as compact JSON of hex strings.

        Example: '[["2cf2...","486e..."],["7305..."]]'
        """
        return dumps_canonical(self.pretty_layers())

    def to_dict(self) -> dict[str, Any]:
        return canonicalize_value({
            "root": self.root,
            "depth": self.depth,
            "leaf_count": len(self),
            "layers": self._layers,
        })

    # ------------------------------------------------------------------
    # Proofs
    # ------------------------------------------------------------------

    def index_of(self, leaf: bytes) -> Optional[int]:
        """Index of the first leaf byte-equal to leaf, or None."""
        for index, candidate in enumerate(self._layers[0]):
            if candidate == leaf:
                return index
        return None

    def proof(self, leaf: bytes) -> InclusionProof:
        """
        Generate an inclusion proof for a leaf.

        If the leaf is not in the tree, the proof has no siblings and the
        tree's real root. Since the leaf is not the root, it fails verify().

        Raises:
            InvalidInputException: If leaf is not a byte string
        """
        if not isinstance(leaf, _BYTES_TYPES):
            raise InvalidInputException(
                f"Leaf should be a byte string, got {type(leaf).__name__}",
                field_path="leaf",
            )
        leaf = bytes(leaf)

        index = self.index_of(leaf)
        if index is None:
            logger.warning(f"Leaf {leaf.hex()} not found in tree; returning proof with no siblings")
            return InclusionProof(leaf=leaf, siblings=(), root=self.root)

        return self._proof_at(index)

    def proof_for_index(self, index: int) -> InclusionProof:
        """
        Generate an inclusion proof for the leaf at index.

        Raises:
            IndexError: If index is out of range
        """
        if index < 0 or index >= len(self):
            raise IndexError(f"Leaf index {index} out of range for {len(self)} leaves")
        return self._proof_at(index)

    def _proof_at(self, index: int) -> InclusionProof:
        siblings: list[ProofSibling] = []
        current_index = index

        # The root layer has no siblings
        for layer in self._layers[:-1]:
            if current_index % 2 == 0:
                node_position = SiblingPosition.LEFT
                sibling_index = current_index + 1
            else:
                node_position = SiblingPosition.RIGHT
                sibling_index = current_index - 1

            # No sibling means the node was carried up; nothing to record
            if sibling_index < len(layer):
                siblings.append(
                    ProofSibling(hash=layer[sibling_index], side=node_position.opposite)
                )

            current_index = current_index // 2

        return InclusionProof(
            leaf=self._layers[0][index],
            siblings=tuple(siblings),
            root=self.root,
        )

    def pretty_proof(self, leaf: bytes) -> PrettyInclusionProof:
        return self.proof(leaf).to_pretty()

    def verify(self, proof: InclusionProof) -> bool:
        """
        Verify a proof with this tree's hash function.

        The proof is checked against the root it carries, so this agrees
        with verify_inclusion_proof() on every input. A proof with no
        siblings passes only when its leaf equals its root.
        """
        if not isinstance(proof, InclusionProof):
            raise InvalidInputException(
                f"Expected an InclusionProof, got {type(proof).__name__}",
                field_path="proof",
            )
        return verify_inclusion_proof(proof, self._hash_function)


__all__ = [
    "MerkleTree",
    "build_layers",
    "verify_inclusion_proof",
    "compute_tree_depth",
]
