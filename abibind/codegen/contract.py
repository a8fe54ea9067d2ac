"""
Contract wrapper generation.

This module generates the class that binds a contract address and exposes
one method per read-accessible function, together with the result types of
functions returning more than one value and the classes synthesized for
tuple inputs and outputs.
"""

from typing import List, Optional, Tuple

from ..ir import (
    ArrayLiteral,
    Assign,
    ClassDefinition,
    Expression,
    ExpressionStatement,
    Field,
    Identifier,
    IndexAccess,
    Let,
    Literal,
    MemberAccess,
    Method,
    MethodCall,
    MethodKind,
    New,
    Param,
    Return,
    SuperCall,
    This,
)
from ..model import Function, Parameter
from ..type_system.mappings import (
    ADDRESS,
    ETHEREUM_VALUE,
    SMART_CONTRACT,
    TYPED_MAP,
    asc_type_for_ethereum,
    ethereum_value_from_asc,
    ethereum_value_to_asc,
    is_tuple_type,
)
from .base import BaseGenerator
from .names import disambiguate_names, safe_identifier
from .tuples import build_tuple_classes, disambiguate_parameters, tuple_class_name


RESULT_MAP_TYPE = f'{TYPED_MAP}<string,{ETHEREUM_VALUE}>'

# Local holding the raw call result inside every wrapper method
RESULT_LOCAL = 'result'


class ContractGenerator(BaseGenerator):
    """
    Generates the smart contract wrapper class.

    This class handles:
    - The static `bind` factory
    - Read-accessible function selection and name disambiguation
    - Input encoding and result decoding
    - Result types for functions with several outputs
    """

    # =========================================================================
    # FUNCTION SELECTION
    # =========================================================================

    def read_accessible_functions(self) -> List[Function]:
        """Functions with at least one output and a mutability allowed by the policy."""
        allowed = self._ctx.options.read_accessible_mutability
        functions = []
        for fn in self._ctx.abi.functions():
            if not fn.outputs:
                self.diagnostics.info_function_skipped(fn.name)
            elif fn.state_mutability not in allowed:
                self.diagnostics.warn_function_excluded(fn.name, fn.state_mutability)
            else:
                functions.append(fn)
        return functions

    # =========================================================================
    # GENERATION
    # =========================================================================

    def generate(self) -> List[ClassDefinition]:
        """Generate the contract class.

        Returns:
            Result and tuple classes for each function, followed by the contract class
        """
        contract_name = self._ctx.contract_name
        functions = disambiguate_names(
            self.read_accessible_functions(),
            get_name=lambda fn, index: safe_identifier(fn.name),
            set_name=lambda fn, name: (fn, name),
            on_rename=lambda original, alias: self.diagnostics.info_name_disambiguated(
                contract_name, original, alias),
        )

        types: List[ClassDefinition] = []
        methods = [self._bind_method()]
        for fn, alias in functions:
            method, classes = self.generate_function(fn, alias)
            methods.append(method)
            types.extend(classes)

        klass = ClassDefinition(
            name=contract_name,
            exported=True,
            base_type=SMART_CONTRACT,
            methods=tuple(methods),
        )
        return [*types, klass]

    def _bind_method(self) -> Method:
        contract_name = self._ctx.contract_name
        return Method(
            name='bind',
            params=(Param('address', ADDRESS),),
            return_type=contract_name,
            body=(Return(New(contract_name, (Literal(contract_name), Identifier('address')))),),
            kind=MethodKind.STATIC,
        )

    def generate_function(self, fn: Function, alias: str) -> Tuple[Method, List[ClassDefinition]]:
        """Generate the wrapper method for a function.

        Args:
            fn: The read-accessible function
            alias: The disambiguated method name

        Returns:
            The method and the classes it needs (result type, tuple types)
        """
        contract_name = self._ctx.contract_name
        input_classes: List[ClassDefinition] = []
        output_classes: List[ClassDefinition] = []

        # Inputs: convert from AssemblyScript values to encodable values
        input_ancestor = f'{contract_name}__{alias}Input__'
        params = []
        encoded = []
        for param in disambiguate_parameters(fn.inputs, 'param', frozenset({RESULT_LOCAL})):
            tuple_class = self._tuple_class(param, param.name, input_ancestor, input_classes)
            params.append(Param(param.name, asc_type_for_ethereum(param.type, tuple_class)))
            encoded.append(ethereum_value_from_asc(Identifier(param.name), param.type, tuple_class))

        # Outputs: decode each raw result value
        output_ancestor = f'{contract_name}__{alias}Result__'
        outputs: List[Tuple[str, Optional[str]]] = []
        for index, output in enumerate(fn.outputs):
            tuple_class = self._tuple_class(output, f'value{index}', output_ancestor, output_classes)
            outputs.append((output.type, tuple_class))

        decoded = [
            ethereum_value_to_asc(IndexAccess(Identifier(RESULT_LOCAL), Literal(index)), abi_type, tuple_class)
            for index, (abi_type, tuple_class) in enumerate(outputs)
        ]

        if len(outputs) == 1:
            abi_type, tuple_class = outputs[0]
            return_type = asc_type_for_ethereum(abi_type, tuple_class)
            returned: Expression = decoded[0]
            classes = [*output_classes, *input_classes]
        else:
            result_class = self.generate_result_class(alias, outputs)
            return_type = result_class.name
            returned = New(result_class.name, tuple(decoded))
            classes = [result_class, *output_classes, *input_classes]

        call = SuperCall('call', (Literal(fn.name), ArrayLiteral(tuple(encoded))))
        method = Method(
            name=alias,
            params=tuple(params),
            return_type=return_type,
            body=(Let(RESULT_LOCAL, call), Return(returned)),
            kind=MethodKind.METHOD,
        )
        return method, classes

    def _tuple_class(
        self,
        param: Parameter,
        field_name: str,
        ancestor: str,
        classes: List[ClassDefinition],
    ) -> Optional[str]:
        """Synthesize the classes for a tuple parameter, returning its class name."""
        if not is_tuple_type(param.type):
            return None
        classes.extend(build_tuple_classes(param, field_name, ancestor))
        return tuple_class_name(ancestor, field_name)

    # =========================================================================
    # RESULT TYPES
    # =========================================================================

    def generate_result_class(
        self,
        alias: str,
        outputs: List[Tuple[str, Optional[str]]],
    ) -> ClassDefinition:
        """Generate `<Contract>__<alias>Result` holding one field per output value.

        Args:
            alias: The disambiguated function name
            outputs: (ABI type, tuple class name or None) per output

        Returns:
            The result class with fields value0..valueN, a constructor and toMap()
        """
        name = f'{self._ctx.contract_name}__{alias}Result'
        value_names = [f'value{index}' for index in range(len(outputs))]
        value_types = [
            asc_type_for_ethereum(abi_type, tuple_class) for abi_type, tuple_class in outputs
        ]

        fields = tuple(Field(n, t) for n, t in zip(value_names, value_types))

        constructor = Method(
            name='constructor',
            params=tuple(Param(n, t) for n, t in zip(value_names, value_types)),
            body=tuple(Assign(MemberAccess(This(), n), Identifier(n)) for n in value_names),
            kind=MethodKind.CONSTRUCTOR,
        )

        map_entries = tuple(
            ExpressionStatement(MethodCall(
                Identifier('map'),
                'set',
                (Literal(n), ethereum_value_from_asc(MemberAccess(This(), n), abi_type, tuple_class)),
            ))
            for n, (abi_type, tuple_class) in zip(value_names, outputs)
        )
        to_map = Method(
            name='toMap',
            return_type=RESULT_MAP_TYPE,
            body=(Let('map', New(RESULT_MAP_TYPE)), *map_entries, Return(Identifier('map'))),
            kind=MethodKind.METHOD,
        )

        return ClassDefinition(
            name=name,
            exported=True,
            fields=fields,
            methods=(constructor, to_map),
        )
