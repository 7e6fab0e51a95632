"""
Schemas & Errors
File: errors.py

Purpose: Error taxonomy for Merkle tree construction and queries.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Construction Errors
    INVALID_INPUT = "INVALID_INPUT"
    DUPLICATE_LEAF = "DUPLICATE_LEAF"
    HASH_CONTRACT_VIOLATION = "HASH_CONTRACT_VIOLATION"

    # Rendering Errors
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Configuration Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Error model for structured error communication.

    Lets callers pass or serialize a failure without holding on to
    the raised exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle tree errors.

    Carries structured error information and converts to a
    MerkleError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidInputException(MerkleException):
    """Exception raised when constructor or query arguments are malformed."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_INPUT,
            details=full_details,
            retryable=False,
        )


class DuplicateLeafException(MerkleException):
    """Exception raised when two leaves are byte-equal."""

    def __init__(
        self,
        message: str,
        leaf: bytes,
        index: int,
        duplicate_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.leaf = leaf
        self.index = index
        self.duplicate_index = duplicate_index

        full_details = details or {}
        full_details["leaf"] = leaf.hex()
        full_details["index"] = index
        if duplicate_index is not None:
            full_details["duplicate_index"] = duplicate_index
        super().__init__(
            message=message,
            code=ErrorCodes.DUPLICATE_LEAF,
            details=full_details,
            retryable=False,
        )


class HashContractViolationException(MerkleException):
    """Exception raised when the injected hash function returns a non-bytes digest."""

    def __init__(
        self,
        message: str,
        digest_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if digest_type:
            full_details["digest_type"] = digest_type
        super().__init__(
            message=message,
            code=ErrorCodes.HASH_CONTRACT_VIOLATION,
            details=full_details,
            retryable=False,
        )


class CanonicalizationException(MerkleException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class ConfigurationException(MerkleException):
    """Exception raised for unknown hash algorithms or invalid config values."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if setting:
            full_details["setting"] = setting
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_ERROR,
            details=full_details,
            retryable=False,
        )
