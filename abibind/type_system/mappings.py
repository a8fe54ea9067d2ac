"""
Type mappings and value conversions from ABI types to AssemblyScript.

This module contains the table that maps ABI primitive types to their
binding-runtime equivalents, together with the functions that build the
expressions converting a generic decoded ``EthereumValue`` into the mapped
type and back. Tuples are not mapped here: the tuple synthesizer passes in
the name of the class it generated for each tuple occurrence.
"""

import re
from typing import Dict, NamedTuple, Optional

from ..errors import UnsupportedAbiType
from ..ir import (
    Expression,
    Identifier,
    Lambda,
    MethodCall,
    Param,
    StaticCall,
    Cast,
)


# =============================================================================
# RUNTIME IDENTIFIERS
# =============================================================================

# Names supplied by the binding runtime; generated code references them verbatim
ETHEREUM_CALL = 'EthereumCall'
ETHEREUM_EVENT = 'EthereumEvent'
ETHEREUM_VALUE = 'EthereumValue'
ETHEREUM_TUPLE = 'EthereumTuple'
SMART_CONTRACT = 'SmartContract'
TYPED_MAP = 'TypedMap'
JSON_VALUE = 'JSONValue'
ENTITY = 'Entity'
BIG_INT = 'BigInt'
BYTES = 'Bytes'
ADDRESS = 'Address'

RUNTIME_MODULE = '@graphprotocol/graph-ts'

RUNTIME_IMPORTS = (
    # Base classes
    ETHEREUM_CALL,
    ETHEREUM_EVENT,
    SMART_CONTRACT,
    ETHEREUM_VALUE,
    JSON_VALUE,
    TYPED_MAP,
    ENTITY,
    ETHEREUM_TUPLE,
    # AssemblyScript types
    BYTES,
    ADDRESS,
    BIG_INT,
)


# =============================================================================
# TYPE MAPPING CONSTANTS
# =============================================================================

class ValueMapping(NamedTuple):
    """How one ABI primitive is represented and converted."""
    asc_type: str
    to_kind: str  # EthereumValue.to<Kind>()
    from_kind: str  # EthereumValue.from<Kind>()


ABI_TO_ASC_MAP: Dict[str, ValueMapping] = {
    'address': ValueMapping(ADDRESS, 'Address', 'Address'),
    'bool': ValueMapping('boolean', 'Boolean', 'Boolean'),
    'string': ValueMapping('string', 'String', 'String'),
    'bytes': ValueMapping(BYTES, 'Bytes', 'Bytes'),
    # Aliases of the 256-bit integers
    'uint': ValueMapping(BIG_INT, 'BigInt', 'UnsignedBigInt'),
    'int': ValueMapping(BIG_INT, 'BigInt', 'SignedBigInt'),
}
ABI_TO_ASC_MAP.update({
    f'bytes{size}': ValueMapping(BYTES, 'Bytes', 'FixedBytes')
    for size in range(1, 33)
})
# Every integer width maps to BigInt, including those that would fit an i32
ABI_TO_ASC_MAP.update({
    f'uint{bits}': ValueMapping(BIG_INT, 'BigInt', 'UnsignedBigInt')
    for bits in range(8, 257, 8)
})
ABI_TO_ASC_MAP.update({
    f'int{bits}': ValueMapping(BIG_INT, 'BigInt', 'SignedBigInt')
    for bits in range(8, 257, 8)
})

TUPLE_TYPE = 'tuple'

# Matches `uint256[]` and `uint256[12]`: any type with a trailing bracket pair,
# optionally holding a length
ARRAY_SUFFIX_PATTERN = re.compile(r'^(.+)\[([0-9]*)\]$')

# Dynamic shapes whose indexed values are stored as a keccak256 digest
HASHED_TOPIC_TYPES = frozenset({'string', 'bytes', TUPLE_TYPE})
HASHED_TOPIC_TYPE = 'bytes32'


# =============================================================================
# TYPE GRAMMAR
# =============================================================================

def is_array_type(abi_type: str) -> bool:
    """Whether the type ends in an array suffix."""
    return ARRAY_SUFFIX_PATTERN.match(abi_type) is not None


def array_element_type(abi_type: str) -> str:
    """Strip the outermost array suffix (`uint8[2][]` -> `uint8[2]`)."""
    match = ARRAY_SUFFIX_PATTERN.match(abi_type)
    if match is None:
        raise UnsupportedAbiType(abi_type)
    return match.group(1)


def is_tuple_type(abi_type: str) -> bool:
    """Whether the type is a tuple or a (possibly nested) array of tuples."""
    while is_array_type(abi_type):
        abi_type = array_element_type(abi_type)
    return abi_type == TUPLE_TYPE


def validate_abi_type(abi_type: str, context: Optional[str] = None) -> None:
    """
    Check a type string against the supported ABI type grammar.

    Args:
        abi_type: The ABI type (e.g., 'uint256', 'bytes32[]', 'tuple[2]')
        context: Where the type was found, used in the error message

    Raises:
        UnsupportedAbiType: If the type is not covered
    """
    match = ARRAY_SUFFIX_PATTERN.match(abi_type)
    if match is not None:
        length = match.group(2)
        if length and int(length) == 0:
            raise UnsupportedAbiType(abi_type, context)
        validate_abi_type(match.group(1), context)
        return
    if abi_type != TUPLE_TYPE and abi_type not in ABI_TO_ASC_MAP:
        raise UnsupportedAbiType(abi_type, context)


def _value_mapping(abi_type: str) -> ValueMapping:
    mapping = ABI_TO_ASC_MAP.get(abi_type)
    if mapping is None:
        raise UnsupportedAbiType(abi_type)
    return mapping


def indexed_input_type(abi_type: str) -> str:
    """
    Get the effective type of an indexed event parameter.

    Strings, bytes, tuples and arrays of any kind are hashed into a bytes32
    topic, so only the digest can be decoded. Other types are unchanged.
    """
    if abi_type in HASHED_TOPIC_TYPES or is_array_type(abi_type):
        return HASHED_TOPIC_TYPE
    return abi_type


# =============================================================================
# TYPE CONVERSION FUNCTIONS
# =============================================================================

def asc_type_for_ethereum(abi_type: str, tuple_class: Optional[str] = None) -> str:
    """
    Convert an ABI type to its AssemblyScript type name.

    Args:
        abi_type: The ABI type string
        tuple_class: The synthesized class standing in for `tuple`

    Returns:
        The AssemblyScript type (e.g., 'BigInt', 'Array<Address>')
    """
    if is_array_type(abi_type):
        return f'Array<{asc_type_for_ethereum(array_element_type(abi_type), tuple_class)}>'
    if abi_type == TUPLE_TYPE:
        return tuple_class or ETHEREUM_TUPLE
    return _value_mapping(abi_type).asc_type


def ethereum_value_to_asc(
    value: Expression,
    abi_type: str,
    tuple_class: Optional[str] = None,
) -> Expression:
    """
    Build the expression converting a decoded EthereumValue to its AssemblyScript type.

    Args:
        value: Expression producing the EthereumValue
        abi_type: The ABI type of the value
        tuple_class: The synthesized class standing in for `tuple`

    Returns:
        The conversion expression
    """
    if is_array_type(abi_type):
        element_type = array_element_type(abi_type)
        if is_array_type(element_type):
            element_asc = asc_type_for_ethereum(element_type, tuple_class)
            convert = Lambda(
                parameter=Param('value', ETHEREUM_VALUE),
                return_type=element_asc,
                body=ethereum_value_to_asc(Identifier('value'), element_type, tuple_class),
            )
            return MethodCall(MethodCall(value, 'toArray'), 'map', (convert,), (element_asc,))
        if element_type == TUPLE_TYPE:
            return MethodCall(value, 'toTupleArray', (), (tuple_class or ETHEREUM_TUPLE,))
        return MethodCall(value, f'to{_value_mapping(element_type).to_kind}Array')

    if abi_type == TUPLE_TYPE:
        tuple_value = MethodCall(value, 'toTuple')
        if tuple_class:
            return Cast(tuple_value, tuple_class)
        return tuple_value

    return MethodCall(value, f'to{_value_mapping(abi_type).to_kind}')


def ethereum_value_from_asc(
    value: Expression,
    abi_type: str,
    tuple_class: Optional[str] = None,
) -> Expression:
    """
    Build the expression converting an AssemblyScript value to an encodable EthereumValue.

    Args:
        value: Expression producing the AssemblyScript value
        abi_type: The ABI type the value is encoded as
        tuple_class: The synthesized class standing in for `tuple`

    Returns:
        The conversion expression
    """
    if is_array_type(abi_type):
        element_type = array_element_type(abi_type)
        if is_array_type(element_type):
            convert = Lambda(
                parameter=Param('value', asc_type_for_ethereum(element_type, tuple_class)),
                return_type=ETHEREUM_VALUE,
                body=ethereum_value_from_asc(Identifier('value'), element_type, tuple_class),
            )
            mapped = MethodCall(value, 'map', (convert,), (ETHEREUM_VALUE,))
            return StaticCall(ETHEREUM_VALUE, 'fromArray', (mapped,))
        if element_type == TUPLE_TYPE:
            return StaticCall(ETHEREUM_VALUE, 'fromTupleArray', (value,))
        return StaticCall(ETHEREUM_VALUE, f'from{_value_mapping(element_type).from_kind}Array', (value,))

    if abi_type == TUPLE_TYPE:
        return StaticCall(ETHEREUM_VALUE, 'fromTuple', (value,))

    return StaticCall(ETHEREUM_VALUE, f'from{_value_mapping(abi_type).from_kind}', (value,))
