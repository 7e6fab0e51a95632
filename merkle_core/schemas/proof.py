"""
Schemas & Canonicalization
File: proof.py

Purpose: Inclusion proof value objects.

Proofs are frozen and carry no reference to the tree that produced
them, so they can be verified long after the tree is gone.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBytes


class SiblingPosition(str, Enum):
    """Side of the running accumulator a sibling is concatenated on."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "SiblingPosition":
        if self is SiblingPosition.LEFT:
            return SiblingPosition.RIGHT
        return SiblingPosition.LEFT


class ProofSibling(BaseModel):
    """A single sibling entry on the path from a leaf to the root."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hash: StrictBytes = Field(..., description="Sibling node digest")
    side: SiblingPosition = Field(..., description="Side the sibling sits on")


class InclusionProof(BaseModel):
    """
    Inclusion proof for a single leaf.

    Attributes:
        leaf: The leaf being proven
        siblings: Sibling entries ordered from the leaf level upward
        root: The root the proof claims to reach

    A proof generated for a leaf that is not in the tree has no
    siblings and the tree's real root.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    leaf: StrictBytes
    siblings: tuple[ProofSibling, ...] = Field(default=())
    root: StrictBytes

    @property
    def sibling_count(self) -> int:
        return len(self.siblings)

    def to_pretty(self) -> "PrettyInclusionProof":
        """Render every byte value as lowercase hex."""
        return PrettyInclusionProof(
            leaf=self.leaf.hex(),
            siblings=tuple(
                PrettyProofSibling(hash=s.hash.hex(), side=s.side)
                for s in self.siblings
            ),
            root=self.root.hex(),
        )

    @classmethod
    def from_pretty(cls, pretty: "PrettyInclusionProof") -> "InclusionProof":
        """
        Decode a hex-rendered proof back into bytes.

        Raises:
            ValueError: If any value is not valid hex
        """
        from merkle_core.crypto.hashing import from_hex

        return cls(
            leaf=from_hex(pretty.leaf),
            siblings=tuple(
                ProofSibling(hash=from_hex(s.hash), side=s.side)
                for s in pretty.siblings
            ),
            root=from_hex(pretty.root),
        )


class PrettyProofSibling(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    hash: str
    side: SiblingPosition


class PrettyInclusionProof(BaseModel):
    """Hex-rendered InclusionProof, for display and debugging."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    leaf: str
    siblings: tuple[PrettyProofSibling, ...] = Field(default=())
    root: str

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
