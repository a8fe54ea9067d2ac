"""
Call class generation.

For every state-mutating entrypoint (the constructor, and functions or the
fallback declared nonpayable or payable) this module generates a call
class extending EthereumCall with `__Inputs` and `__Outputs` holders.
"""

from typing import List, Tuple

from ..ir import ClassDefinition, Method
from ..model import AbiMember, Constructor, Parameter
from ..type_system.mappings import ETHEREUM_CALL
from .base import BaseGenerator
from .names import capitalize, disambiguate_names
from .tuples import (
    CALL_INPUTS,
    CALL_OUTPUTS,
    ValueSource,
    disambiguate_parameters,
    generate_accessor,
)


def default_call_name(member: AbiMember) -> str:
    """Name of a call function, defaulting the constructor and the unnamed fallback."""
    if member.name:
        return member.name
    if isinstance(member, Constructor):
        return 'constructor'
    return 'default'


class CallGenerator(BaseGenerator):
    """Generates decoding classes for transaction calls."""

    def generate(self) -> List[ClassDefinition]:
        """Generate the classes for all call functions, in declaration order.

        Returns:
            For each call: the call class, inputs class, outputs class, then tuple classes
        """
        call_functions = disambiguate_names(
            self._ctx.abi.call_functions(),
            get_name=lambda member, index: capitalize(default_call_name(member)),
            set_name=lambda member, name: (member, name),
            on_rename=lambda original, alias: self.diagnostics.info_name_disambiguated(
                'call functions', original, alias),
        )

        classes: List[ClassDefinition] = []
        for member, alias in call_functions:
            classes.extend(self.generate_call(member, alias))
        return classes

    def generate_call(self, member: AbiMember, alias: str) -> List[ClassDefinition]:
        """Generate the classes for a single call function.

        Args:
            member: The constructor, function or fallback
            alias: The disambiguated, capitalized function name

        Returns:
            The call class, inputs class, outputs class, then tuple classes
        """
        class_name = f'{alias}Call'
        inputs_class_name = class_name + '__Inputs'
        outputs_class_name = class_name + '__Outputs'

        input_getters, input_tuples = self._value_getters(member.inputs, inputs_class_name, CALL_INPUTS)
        output_getters, output_tuples = self._value_getters(member.outputs, outputs_class_name, CALL_OUTPUTS)

        inputs_class = self._holder_class(inputs_class_name, 'call', class_name, input_getters)
        outputs_class = self._holder_class(outputs_class_name, 'call', class_name, output_getters)

        klass = ClassDefinition(
            name=class_name,
            exported=True,
            base_type=ETHEREUM_CALL,
            methods=(
                self._holder_getter('inputs', inputs_class_name),
                self._holder_getter('outputs', outputs_class_name),
            ),
        )
        return [klass, inputs_class, outputs_class, *input_tuples, *output_tuples]

    def _value_getters(
        self,
        params: Tuple[Parameter, ...],
        ancestor: str,
        source: ValueSource,
    ) -> Tuple[List[Method], List[ClassDefinition]]:
        """Build one getter per recorded value, collecting synthesized tuple classes."""
        getters = []
        tuple_classes: List[ClassDefinition] = []
        for index, param in enumerate(disambiguate_parameters(params, 'value')):
            accessor = generate_accessor(param, index, ancestor, source)
            getters.append(accessor.getter)
            tuple_classes.extend(accessor.classes)
        return getters, tuple_classes
