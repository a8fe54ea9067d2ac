"""
Code generation module for the ABI binding generator.

This module turns an ABI model into class definitions and renders them as
AssemblyScript.
"""

from .context import GenerationContext, GeneratorOptions, READ_ACCESSIBLE_MUTABILITY, VIEW_ONLY_MUTABILITY
from .diagnostics import GenerationDiagnostics, Diagnostic, DiagnosticSeverity
from .names import disambiguate_names, safe_identifier, capitalize
from .tuples import Accessor, ValueSource, generate_accessor, synthesize_tuple, tuple_class_name
from .base import BaseGenerator
from .event import EventGenerator
from .call import CallGenerator
from .contract import ContractGenerator
from .generator import AbiCodeGenerator, GenerationResult
from .emitter import AssemblyScriptEmitter

__all__ = [
    'GenerationContext',
    'GeneratorOptions',
    'READ_ACCESSIBLE_MUTABILITY',
    'VIEW_ONLY_MUTABILITY',
    'GenerationDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
    'disambiguate_names',
    'safe_identifier',
    'capitalize',
    'Accessor',
    'ValueSource',
    'generate_accessor',
    'synthesize_tuple',
    'tuple_class_name',
    'BaseGenerator',
    'EventGenerator',
    'CallGenerator',
    'ContractGenerator',
    'AbiCodeGenerator',
    'GenerationResult',
    'AssemblyScriptEmitter',
]
