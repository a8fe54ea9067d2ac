"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that contains the helpers
shared by the event, call and contract generators.
"""

from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import GenerationContext

from ..ir import (
    Assign,
    ClassDefinition,
    Field,
    Identifier,
    MemberAccess,
    Method,
    MethodKind,
    New,
    Param,
    Return,
    This,
)
from .diagnostics import GenerationDiagnostics


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared utilities for:
    - Access to the per-run context and diagnostics
    - Holder classes wrapping a back-reference to a raw event or call
    - Getters returning a fresh holder instance
    """

    def __init__(self, ctx: 'GenerationContext'):
        """
        Initialize the base generator.

        Args:
            ctx: The generation context containing all state
        """
        self._ctx = ctx

    @property
    def diagnostics(self) -> GenerationDiagnostics:
        return self._ctx.diagnostics

    # =========================================================================
    # HOLDER CLASSES
    # =========================================================================

    def _holder_class(
        self,
        name: str,
        reference: str,
        owner_class: str,
        getters: Iterable[Method],
    ) -> ClassDefinition:
        """Build a class holding `_<reference>: <owner_class>` and exposing getters.

        Args:
            name: Name of the holder class (e.g., 'Transfer__Params')
            reference: Name of the wrapped object ('event' or 'call')
            owner_class: Type of the wrapped object
            getters: The value getters

        Returns:
            The holder class definition
        """
        field_name = f'_{reference}'
        constructor = Method(
            name='constructor',
            params=(Param(reference, owner_class),),
            body=(Assign(MemberAccess(This(), field_name), Identifier(reference)),),
            kind=MethodKind.CONSTRUCTOR,
        )
        return ClassDefinition(
            name=name,
            exported=True,
            fields=(Field(field_name, owner_class),),
            methods=(constructor, *getters),
        )

    def _holder_getter(self, name: str, holder_class: str) -> Method:
        """Build `get <name>(): <holder_class> { return new <holder_class>(this) }`."""
        return Method(
            name=name,
            return_type=holder_class,
            body=(Return(New(holder_class, (This(),))),),
            kind=MethodKind.GETTER,
        )
