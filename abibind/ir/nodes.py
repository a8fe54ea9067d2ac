"""
Class-definition IR produced by the code generators.

This module contains the dataclasses describing generated classes, their
fields and methods, and the structured statement/expression trees that form
method bodies. Nodes are frozen so generated trees compare structurally;
turning them into text is left to an emitter.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


# =============================================================================
# BASE NODES
# =============================================================================

@dataclass(frozen=True)
class Node:
    """Base class for all IR nodes."""
    pass


@dataclass(frozen=True)
class Expression(Node):
    """Base class for expressions."""
    pass


@dataclass(frozen=True)
class Statement(Node):
    """Base class for statements."""
    pass


# =============================================================================
# EXPRESSIONS
# =============================================================================

@dataclass(frozen=True)
class Identifier(Expression):
    """A plain name reference (local, parameter or type)."""
    name: str


@dataclass(frozen=True)
class This(Expression):
    """The receiver of the current method."""
    pass


@dataclass(frozen=True)
class Literal(Expression):
    """A string, integer or boolean literal."""
    value: Union[str, int, bool]


@dataclass(frozen=True)
class MemberAccess(Expression):
    """Access of a field or property (e.g., this._event)."""
    expression: Expression
    member: str


@dataclass(frozen=True)
class IndexAccess(Expression):
    """Indexing into an array-like value (e.g., result[0])."""
    base: Expression
    index: Expression


@dataclass(frozen=True)
class MethodCall(Expression):
    """Invocation of a method on a value (e.g., value.toBigInt())."""
    target: Expression
    method: str
    arguments: Tuple[Expression, ...] = ()
    type_arguments: Tuple[str, ...] = ()


@dataclass(frozen=True)
class StaticCall(Expression):
    """Invocation of a static method on a type (e.g., EthereumValue.fromAddress(x))."""
    owner: str
    method: str
    arguments: Tuple[Expression, ...] = ()
    type_arguments: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SuperCall(Expression):
    """Invocation of a base-class method (e.g., super.call(...))."""
    method: str
    arguments: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class New(Expression):
    """Instantiation of a class."""
    class_name: str
    arguments: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class Cast(Expression):
    """Reinterpretation of a value as another type."""
    expression: Expression
    type: str


@dataclass(frozen=True)
class ArrayLiteral(Expression):
    """An inline array (e.g., the argument list passed to super.call)."""
    elements: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class Lambda(Expression):
    """A single-parameter arrow function used for element-wise array mapping."""
    parameter: 'Param'
    return_type: str
    body: Expression


# =============================================================================
# STATEMENTS
# =============================================================================

@dataclass(frozen=True)
class Let(Statement):
    """Local variable declaration."""
    name: str
    value: Expression


@dataclass(frozen=True)
class Assign(Statement):
    """Assignment to a field or variable."""
    target: Expression
    value: Expression


@dataclass(frozen=True)
class Return(Statement):
    """Return a value from the method."""
    value: Expression


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """An expression evaluated for its effect."""
    expression: Expression


# =============================================================================
# DECLARATIONS
# =============================================================================

@dataclass(frozen=True)
class Param(Node):
    """A method parameter."""
    name: str
    type: str


@dataclass(frozen=True)
class Field(Node):
    """A class member variable."""
    name: str
    type: str


class MethodKind:
    """How a method is declared on its class."""
    CONSTRUCTOR = 'constructor'
    GETTER = 'getter'
    METHOD = 'method'
    STATIC = 'static'


@dataclass(frozen=True)
class Method(Node):
    """A method, getter, static method or constructor."""
    name: str
    params: Tuple[Param, ...] = ()
    return_type: Optional[str] = None
    body: Tuple[Statement, ...] = ()
    kind: str = MethodKind.METHOD


@dataclass(frozen=True)
class ClassDefinition(Node):
    """A generated class."""
    name: str
    exported: bool = True
    base_type: Optional[str] = None
    fields: Tuple[Field, ...] = ()
    methods: Tuple[Method, ...] = ()


@dataclass(frozen=True)
class ImportDefinition(Node):
    """Names imported from a runtime module."""
    names: Tuple[str, ...]
    module: str
