"""
Event class generation.

For every event in the ABI this module generates the event class itself
(extending EthereumEvent), a `__Params` holder exposing one getter per
parameter, and the classes synthesized for tuple parameters.
"""

from typing import List

from ..ir import ClassDefinition
from ..model import Event
from ..type_system.mappings import ETHEREUM_EVENT, indexed_input_type
from .base import BaseGenerator
from .names import disambiguate_names
from .tuples import EVENT_PARAMETERS, disambiguate_parameters, generate_accessor


class EventGenerator(BaseGenerator):
    """
    Generates decoding classes for ABI events.

    Indexed parameters of dynamic types (strings, bytes, tuples and
    arrays) are only recorded as a topic hash, so their getters return the
    bytes32 digest instead of the declared type.
    """

    def generate(self) -> List[ClassDefinition]:
        """Generate the classes for all events, in declaration order.

        Returns:
            For each event: the event class, its params class, then its tuple classes
        """
        events = disambiguate_names(
            self._ctx.abi.events(),
            get_name=lambda event, index: event.name,
            set_name=lambda event, name: (event, name),
            on_rename=lambda original, alias: self.diagnostics.info_name_disambiguated(
                'events', original, alias),
        )

        classes: List[ClassDefinition] = []
        for event, alias in events:
            classes.extend(self.generate_event(event, alias))
        return classes

    def generate_event(self, event: Event, class_name: str) -> List[ClassDefinition]:
        """Generate the classes for a single event.

        Args:
            event: The event ABI member
            class_name: The disambiguated event class name

        Returns:
            The event class, its params class, then its tuple classes
        """
        params_class_name = class_name + '__Params'
        getters = []
        tuple_classes: List[ClassDefinition] = []

        params = disambiguate_parameters(event.inputs, 'param')
        for index, param in enumerate(params):
            if param.indexed and indexed_input_type(param.type) != param.type:
                self.diagnostics.info_indexed_param_hashed(class_name, param.name, param.type)
            accessor = generate_accessor(param, index, class_name, EVENT_PARAMETERS)
            getters.append(accessor.getter)
            tuple_classes.extend(accessor.classes)

        params_class = self._holder_class(params_class_name, 'event', class_name, getters)

        klass = ClassDefinition(
            name=class_name,
            exported=True,
            base_type=ETHEREUM_EVENT,
            methods=(self._holder_getter('params', params_class_name),),
        )
        return [klass, params_class, *tuple_classes]
