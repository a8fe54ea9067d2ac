"""
Class-definition IR module.

This module provides the structured nodes that generators build and
emitters render.
"""

from .nodes import (
    Node,
    Expression,
    Statement,
    Identifier,
    This,
    Literal,
    MemberAccess,
    IndexAccess,
    MethodCall,
    StaticCall,
    SuperCall,
    New,
    Cast,
    ArrayLiteral,
    Lambda,
    Let,
    Assign,
    Return,
    ExpressionStatement,
    Param,
    Field,
    MethodKind,
    Method,
    ClassDefinition,
    ImportDefinition,
)

__all__ = [
    'Node',
    'Expression',
    'Statement',
    'Identifier',
    'This',
    'Literal',
    'MemberAccess',
    'IndexAccess',
    'MethodCall',
    'StaticCall',
    'SuperCall',
    'New',
    'Cast',
    'ArrayLiteral',
    'Lambda',
    'Let',
    'Assign',
    'Return',
    'ExpressionStatement',
    'Param',
    'Field',
    'MethodKind',
    'Method',
    'ClassDefinition',
    'ImportDefinition',
]
