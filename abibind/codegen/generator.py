"""
Binding generator entry point.

The AbiCodeGenerator composes the event, contract and call generators into a
single deterministic pass from an ABI model to a list of class definitions.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import MalformedAbiMember
from ..ir import ClassDefinition, ImportDefinition
from ..model import Abi, AbiMember, Parameter
from ..type_system.mappings import RUNTIME_IMPORTS, is_tuple_type, validate_abi_type
from .call import CallGenerator, default_call_name
from .context import GenerationContext, GeneratorOptions
from .contract import ContractGenerator
from .diagnostics import GenerationDiagnostics
from .event import EventGenerator


@dataclass(frozen=True)
class GenerationResult:
    """Everything produced by one generation pass."""
    imports: Tuple[ImportDefinition, ...]
    classes: Tuple[ClassDefinition, ...]
    diagnostics: GenerationDiagnostics


class AbiCodeGenerator:
    """
    Generates binding classes for a contract ABI.

    Usage:
        generator = AbiCodeGenerator(abi)
        result = generator.generate()
        source = AssemblyScriptEmitter().emit(result.imports, result.classes)

    Each call to generate() starts from a fresh context, so repeated calls on
    the same ABI produce equal trees.
    """

    def __init__(self, abi: Abi, options: Optional[GeneratorOptions] = None):
        self.abi = abi
        self.options = options or GeneratorOptions()

    def generate(self) -> GenerationResult:
        """
        Run a full generation pass.

        Returns:
            The module imports, the ordered class definitions and diagnostics

        Raises:
            UnsupportedAbiType: If any parameter type is outside the ABI grammar
            MalformedAbiMember: If a tuple parameter declares no components
        """
        ctx = GenerationContext(abi=self.abi, options=self.options)
        self._validate()

        classes = [
            *EventGenerator(ctx).generate(),
            *ContractGenerator(ctx).generate(),
            *CallGenerator(ctx).generate(),
        ]
        return GenerationResult(
            imports=tuple(self.generate_module_imports()),
            classes=tuple(classes),
            diagnostics=ctx.diagnostics,
        )

    def generate_types(self) -> List[ClassDefinition]:
        """Generate the class definitions only."""
        return list(self.generate().classes)

    def generate_module_imports(self) -> List[ImportDefinition]:
        """The runtime names every generated module imports."""
        return [ImportDefinition(names=RUNTIME_IMPORTS, module=self.options.runtime_module)]

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def _validate(self) -> None:
        """Check every parameter type up front so no pass yields partial output."""
        for member in self.abi.members:
            owner = self._member_label(member)
            for param in (*member.inputs, *getattr(member, 'outputs', ())):
                self._validate_parameter(param, owner)

    def _validate_parameter(self, param: Parameter, owner: str) -> None:
        context = f'{owner}.{param.name}' if param.name else owner
        validate_abi_type(param.type, context)
        if is_tuple_type(param.type):
            if not param.components:
                raise MalformedAbiMember('tuple parameter without components', context)
            for component in param.components:
                self._validate_parameter(component, context)

    def _member_label(self, member: AbiMember) -> str:
        if member.kind == 'event':
            return member.name
        return default_call_name(member)
