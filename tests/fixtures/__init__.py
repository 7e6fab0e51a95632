"""
Shared test fixtures and factories.
"""

from .common import (
    FOO_HEX,
    HELLO_HEX,
    HELLO_WORLD_FOO_ROOT_HEX,
    HELLO_WORLD_ROOT_HEX,
    WORLD_HEX,
    CountingHash,
    flip_byte,
    make_leaves,
)

__all__ = [
    "FOO_HEX",
    "HELLO_HEX",
    "HELLO_WORLD_FOO_ROOT_HEX",
    "HELLO_WORLD_ROOT_HEX",
    "WORLD_HEX",
    "CountingHash",
    "flip_byte",
    "make_leaves",
]
