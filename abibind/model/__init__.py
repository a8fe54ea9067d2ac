"""
ABI model module.

This module provides the immutable, normalized representation of a
contract interface consumed by the code generators.
"""

from .abi import (
    Abi,
    AbiMember,
    Parameter,
    Function,
    Constructor,
    Event,
    Fallback,
    CALL_MUTABILITY,
    STATE_MUTABILITIES,
)

__all__ = [
    'Abi',
    'AbiMember',
    'Parameter',
    'Function',
    'Constructor',
    'Event',
    'Fallback',
    'CALL_MUTABILITY',
    'STATE_MUTABILITIES',
]
