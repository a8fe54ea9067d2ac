"""
Normalized, immutable representation of a contract ABI.

This module contains the dataclasses describing the members of a contract
interface (functions, constructor, events, fallback) and their parameters.
Instances are frozen: generators derive renamed copies with
``dataclasses.replace`` instead of mutating them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..errors import MalformedAbiMember


# =============================================================================
# MUTABILITY
# =============================================================================

STATE_MUTABILITIES = ('pure', 'view', 'nonpayable', 'payable', 'constant')

# Mutabilities of state-mutating transaction entrypoints
CALL_MUTABILITY = frozenset({'nonpayable', 'payable'})

# Member kinds that exist in ABI JSON but have no binding representation
IGNORED_MEMBER_KINDS = frozenset({'error', 'receive'})


# =============================================================================
# PARAMETERS
# =============================================================================

@dataclass(frozen=True)
class Parameter:
    """A function input/output or event parameter."""
    type: str
    name: Optional[str] = None
    indexed: bool = False
    components: Optional[Tuple['Parameter', ...]] = None  # tuple types only


# =============================================================================
# MEMBERS
# =============================================================================

@dataclass(frozen=True)
class Function:
    """A named contract function."""
    name: str
    inputs: Tuple[Parameter, ...] = ()
    outputs: Tuple[Parameter, ...] = ()
    state_mutability: str = 'nonpayable'
    kind = 'function'


@dataclass(frozen=True)
class Constructor:
    """The contract constructor."""
    inputs: Tuple[Parameter, ...] = ()
    state_mutability: str = 'nonpayable'
    name = None
    outputs: Tuple[Parameter, ...] = field(default=(), init=False)
    kind = 'constructor'


@dataclass(frozen=True)
class Event:
    """An event emitted by the contract."""
    name: str
    inputs: Tuple[Parameter, ...] = ()
    anonymous: bool = False
    kind = 'event'


@dataclass(frozen=True)
class Fallback:
    """The unnamed fallback function."""
    state_mutability: str = 'nonpayable'
    name = None
    inputs: Tuple[Parameter, ...] = field(default=(), init=False)
    outputs: Tuple[Parameter, ...] = field(default=(), init=False)
    kind = 'fallback'


AbiMember = Union[Function, Constructor, Event, Fallback]


# =============================================================================
# ABI
# =============================================================================

@dataclass(frozen=True)
class Abi:
    """A contract name together with its ordered ABI members."""
    name: str
    members: Tuple[AbiMember, ...] = ()

    def events(self) -> List[Event]:
        return [m for m in self.members if isinstance(m, Event)]

    def functions(self) -> List[Function]:
        return [m for m in self.members if isinstance(m, Function)]

    def call_functions(self) -> List[AbiMember]:
        """Constructor plus every function or fallback that may alter state."""
        return [
            m for m in self.members
            if isinstance(m, Constructor)
            or (isinstance(m, (Function, Fallback)) and m.state_mutability in CALL_MUTABILITY)
        ]

    @classmethod
    def from_json(cls, name: str, entries: Iterable[Dict[str, Any]]) -> 'Abi':
        """
        Build an Abi from already-normalized ABI JSON entries.

        Args:
            name: The contract identifier
            entries: The decoded ABI JSON array

        Returns:
            A new immutable Abi

        Raises:
            MalformedAbiMember: If an entry lacks a field its kind requires
        """
        members = []
        for position, entry in enumerate(entries):
            member = _member_from_json(entry, position)
            if member is not None:
                members.append(member)
        return cls(name=name, members=tuple(members))


# =============================================================================
# JSON HELPERS
# =============================================================================

def _resolve_mutability(entry: Dict[str, Any]) -> str:
    """Resolve stateMutability, falling back to the legacy constant/payable flags."""
    mutability = entry.get('stateMutability')
    if mutability:
        if mutability not in STATE_MUTABILITIES:
            raise MalformedAbiMember(f'unknown stateMutability "{mutability}"', entry.get('name'))
        return mutability
    if entry.get('payable'):
        return 'payable'
    if entry.get('constant'):
        return 'view'
    return 'nonpayable'


def _parameter_from_json(entry: Dict[str, Any], owner: str) -> Parameter:
    abi_type = entry.get('type')
    if not abi_type:
        raise MalformedAbiMember('parameter without a type', owner)
    components = None
    if 'components' in entry and entry['components'] is not None:
        components = tuple(_parameter_from_json(c, owner) for c in entry['components'])
    return Parameter(
        type=abi_type,
        name=entry.get('name') or None,
        indexed=bool(entry.get('indexed', False)),
        components=components,
    )


def _parameters_from_json(entries: Optional[List[Dict[str, Any]]], owner: str) -> Tuple[Parameter, ...]:
    return tuple(_parameter_from_json(e, owner) for e in entries or [])


def _member_from_json(entry: Dict[str, Any], position: int) -> Optional[AbiMember]:
    kind = entry.get('type', 'function')
    name = entry.get('name')
    owner = name or f'member #{position}'

    if kind in IGNORED_MEMBER_KINDS:
        return None

    if kind == 'function':
        if not name:
            raise MalformedAbiMember('function without a name', owner)
        return Function(
            name=name,
            inputs=_parameters_from_json(entry.get('inputs'), owner),
            outputs=_parameters_from_json(entry.get('outputs'), owner),
            state_mutability=_resolve_mutability(entry),
        )
    if kind == 'constructor':
        return Constructor(
            inputs=_parameters_from_json(entry.get('inputs'), owner),
            state_mutability=_resolve_mutability(entry),
        )
    if kind == 'event':
        if not name:
            raise MalformedAbiMember('event without a name', owner)
        return Event(
            name=name,
            inputs=_parameters_from_json(entry.get('inputs'), owner),
            anonymous=bool(entry.get('anonymous', False)),
        )
    if kind == 'fallback':
        return Fallback(state_mutability=_resolve_mutability(entry))

    raise MalformedAbiMember(f'unknown member type "{kind}"', owner)
