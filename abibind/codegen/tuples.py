"""
Tuple synthesis and parameter accessor generation.

ABI tuples have no native representation, so every tuple occurrence is
materialized as its own class extending EthereumTuple. The class name is
derived from the full chain of enclosing identifiers, which keeps names
globally unique without a registry. Components are processed with the same
accessor logic used for top-level parameters, so tuples nest arbitrarily.

All functions here are pure: they return the getter for the parent class
together with the classes they created, and callers compose the results.
"""

from dataclasses import replace
from typing import FrozenSet, List, NamedTuple, Tuple

from ..errors import MalformedAbiMember
from ..ir import (
    ClassDefinition,
    Expression,
    IndexAccess,
    Literal,
    MemberAccess,
    Method,
    MethodKind,
    Return,
    This,
)
from ..model import Parameter
from ..type_system.mappings import (
    ETHEREUM_TUPLE,
    asc_type_for_ethereum,
    ethereum_value_to_asc,
    indexed_input_type,
    is_tuple_type,
)
from .names import capitalize, disambiguate_names, safe_identifier


# =============================================================================
# VALUE SOURCES
# =============================================================================

class ValueSource(NamedTuple):
    """
    Where a getter reads its raw value from.

    Events read `this._event.parameters[i].value`, calls read
    `this._call.inputValues[i].value` (or outputValues) and tuple
    components read `this[i]`.
    """
    kind: str
    field: str = ''

    EVENT = 'event'
    CALL = 'call'
    TUPLE = 'tuple'

    def value_at(self, index: int) -> Expression:
        if self.kind == ValueSource.TUPLE:
            return IndexAccess(This(), Literal(index))
        values = MemberAccess(MemberAccess(This(), f'_{self.kind}'), self.field)
        return MemberAccess(IndexAccess(values, Literal(index)), 'value')

    def default_name(self, index: int) -> str:
        if self.kind == ValueSource.EVENT:
            return f'param{index}'
        return f'value{index}'


EVENT_PARAMETERS = ValueSource(ValueSource.EVENT, 'parameters')
CALL_INPUTS = ValueSource(ValueSource.CALL, 'inputValues')
CALL_OUTPUTS = ValueSource(ValueSource.CALL, 'outputValues')
TUPLE_COMPONENTS = ValueSource(ValueSource.TUPLE)


class Accessor(NamedTuple):
    """A getter for the parent class plus the classes created for it."""
    getter: Method
    classes: Tuple[ClassDefinition, ...] = ()


# =============================================================================
# NAMING
# =============================================================================

def tuple_identifier(ancestor: str, field_name: str) -> str:
    """The identifier that nested components use as their ancestor.

    The ancestor is kept verbatim so that `update` and `Update` stay distinct.
    """
    return ancestor + capitalize(field_name)


def tuple_class_name(ancestor: str, field_name: str) -> str:
    """Name of the class synthesized for a tuple field (`GetData` + `info` -> `GetDataInfoStruct`)."""
    return tuple_identifier(ancestor, field_name) + 'Struct'


def disambiguate_parameters(
    params: Tuple[Parameter, ...],
    default_prefix: str,
    reserved: FrozenSet[str] = frozenset(),
) -> List[Parameter]:
    """Give every parameter a distinct, non-reserved name (`<prefix><index>` when unnamed).

    Names in `reserved` are escaped like reserved words, for locals the
    enclosing method already declares.
    """
    return disambiguate_names(
        params,
        get_name=lambda param, index: safe_identifier(param.name or f'{default_prefix}{index}', reserved),
        set_name=lambda param, name: replace(param, name=name),
    )


# =============================================================================
# SYNTHESIS
# =============================================================================

def build_tuple_classes(
    param: Parameter,
    field_name: str,
    ancestor: str,
) -> Tuple[ClassDefinition, ...]:
    """
    Build the class for a tuple parameter and, recursively, its nested tuples.

    Args:
        param: The tuple (or tuple array) parameter
        field_name: The resolved name of the parameter
        ancestor: The enclosing class, function or event identifier

    Returns:
        The tuple class followed by all nested tuple classes, depth-first

    Raises:
        MalformedAbiMember: If the tuple declares no components
    """
    if not param.components:
        raise MalformedAbiMember(f'tuple "{field_name}" has no components', ancestor)

    identifier = tuple_identifier(ancestor, field_name)
    methods = []
    nested: List[ClassDefinition] = []

    components = disambiguate_parameters(param.components, 'value')
    for index, component in enumerate(components):
        accessor = generate_accessor(component, index, identifier, TUPLE_COMPONENTS)
        methods.append(accessor.getter)
        nested.extend(accessor.classes)

    klass = ClassDefinition(
        name=identifier + 'Struct',
        exported=True,
        base_type=ETHEREUM_TUPLE,
        methods=tuple(methods),
    )
    return (klass, *nested)


def synthesize_tuple(
    param: Parameter,
    index: int,
    ancestor: str,
    source: ValueSource,
) -> Accessor:
    """
    Generate the getter and classes for a tuple-typed parameter.

    Args:
        param: The tuple (or tuple array) parameter
        index: Position of the parameter among its siblings
        ancestor: The enclosing class, function or event identifier
        source: Where the parent class reads raw values from

    Returns:
        The getter for the parent class and the synthesized classes
    """
    name = param.name or source.default_name(index)
    class_name = tuple_class_name(ancestor, name)

    getter = Method(
        name=name,
        return_type=asc_type_for_ethereum(param.type, class_name),
        body=(Return(ethereum_value_to_asc(source.value_at(index), param.type, class_name)),),
        kind=MethodKind.GETTER,
    )
    return Accessor(getter, build_tuple_classes(param, name, ancestor))


def generate_accessor(
    param: Parameter,
    index: int,
    parent_class: str,
    source: ValueSource,
) -> Accessor:
    """
    Generate the getter for one parameter, plus classes for tuple types.

    Args:
        param: The parameter
        index: Position of the parameter among its siblings
        parent_class: Identifier of the class the getter is installed on
        source: Where the parent class reads raw values from

    Returns:
        The getter and any synthesized tuple classes
    """
    name = param.name or source.default_name(index)
    value_type = param.type
    if source.kind == ValueSource.EVENT and param.indexed:
        value_type = indexed_input_type(value_type)

    if is_tuple_type(value_type):
        return synthesize_tuple(param, index, parent_class, source)

    getter = Method(
        name=name,
        return_type=asc_type_for_ethereum(value_type),
        body=(Return(ethereum_value_to_asc(source.value_at(index), value_type)),),
        kind=MethodKind.GETTER,
    )
    return Accessor(getter)
