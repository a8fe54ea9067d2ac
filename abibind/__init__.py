"""
ABI to AssemblyScript binding generator

This package translates a normalized smart-contract ABI into strongly-typed
class definitions for the graph-ts binding runtime, so that indexing code can
call contract functions and decode events and calls without parsing the ABI
by hand.

Module Structure:
- model/: Immutable ABI model (Abi, Function, Constructor, Event, Fallback, Parameter)
- type_system/: ABI type grammar and value conversions
- ir/: Class-definition IR (ClassDefinition, Method, expression and statement nodes)
- codegen/: Generators (events, calls, contract wrapper), tuple synthesis,
  name disambiguation, diagnostics and the AssemblyScript emitter

Usage:
    from abibind import Abi, AbiCodeGenerator, AssemblyScriptEmitter

    abi = Abi.from_json('ERC20', entries)
    result = AbiCodeGenerator(abi).generate()
    source = AssemblyScriptEmitter().emit(result.imports, result.classes)
"""

from .errors import AbiBindError, UnsupportedAbiType, MalformedAbiMember
from .model import Abi, Parameter, Function, Constructor, Event, Fallback
from .codegen import AbiCodeGenerator, AssemblyScriptEmitter, GeneratorOptions, GenerationResult

__all__ = [
    'AbiBindError',
    'UnsupportedAbiType',
    'MalformedAbiMember',
    'Abi',
    'Parameter',
    'Function',
    'Constructor',
    'Event',
    'Fallback',
    'AbiCodeGenerator',
    'AssemblyScriptEmitter',
    'GeneratorOptions',
    'GenerationResult',
]
