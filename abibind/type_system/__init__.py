"""
Types module for the ABI binding generator.

This module provides the ABI type grammar and the conversion utilities
between decoded ABI values and AssemblyScript types.
"""

from .mappings import (
    ABI_TO_ASC_MAP,
    RUNTIME_IMPORTS,
    RUNTIME_MODULE,
    ValueMapping,
    asc_type_for_ethereum,
    array_element_type,
    ethereum_value_from_asc,
    ethereum_value_to_asc,
    indexed_input_type,
    is_array_type,
    is_tuple_type,
    validate_abi_type,
)

__all__ = [
    'ABI_TO_ASC_MAP',
    'RUNTIME_IMPORTS',
    'RUNTIME_MODULE',
    'ValueMapping',
    'asc_type_for_ethereum',
    'array_element_type',
    'ethereum_value_from_asc',
    'ethereum_value_to_asc',
    'indexed_input_type',
    'is_array_type',
    'is_tuple_type',
    'validate_abi_type',
]
