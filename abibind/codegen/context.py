"""
Configuration and per-run context for the binding generator.

This module provides the options that tune code generation and the context
object that holds all state of a single generation pass, so that no mutable
state is shared between passes.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from ..model import Abi
from ..type_system.mappings import RUNTIME_MODULE
from .diagnostics import GenerationDiagnostics


# Functions the contract wrapper exposes, when they have outputs. Legacy ABIs
# mark plain getters nonpayable/constant, so those count as read-accessible.
READ_ACCESSIBLE_MUTABILITY: FrozenSet[str] = frozenset({'view', 'pure', 'nonpayable', 'constant'})

# Stricter policy exposing only functions declared side-effect free
VIEW_ONLY_MUTABILITY: FrozenSet[str] = frozenset({'view', 'pure'})


@dataclass(frozen=True)
class GeneratorOptions:
    """Options controlling code generation."""
    read_accessible_mutability: FrozenSet[str] = READ_ACCESSIBLE_MUTABILITY
    runtime_module: str = RUNTIME_MODULE
    verbose: bool = False


@dataclass
class GenerationContext:
    """
    Holds all state needed during one generation pass.

    A context is created per pass and discarded afterwards.
    """

    abi: Abi
    options: GeneratorOptions = field(default_factory=GeneratorOptions)

    # Diagnostics collector
    _diagnostics: Optional[GenerationDiagnostics] = None

    @property
    def diagnostics(self) -> GenerationDiagnostics:
        """Get the diagnostics collector, creating one if needed."""
        if self._diagnostics is None:
            self._diagnostics = GenerationDiagnostics(verbose=self.options.verbose)
        return self._diagnostics

    @property
    def contract_name(self) -> str:
        return self.abi.name
