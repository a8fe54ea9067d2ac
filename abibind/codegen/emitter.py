"""
AssemblyScript emitter for generated class definitions.

Renders the class-definition IR to AssemblyScript source text. The emitter
is a pure function of the IR and can be swapped for another renderer.
"""

from typing import Iterable, List

from ..ir import (
    ArrayLiteral,
    Assign,
    Cast,
    ClassDefinition,
    Expression,
    ExpressionStatement,
    Identifier,
    ImportDefinition,
    IndexAccess,
    Lambda,
    Let,
    Literal,
    MemberAccess,
    Method,
    MethodCall,
    MethodKind,
    New,
    Return,
    Statement,
    StaticCall,
    SuperCall,
    This,
)


class AssemblyScriptEmitter:
    """
    Renders imports and class definitions to AssemblyScript.

    Usage:
        emitter = AssemblyScriptEmitter()
        source = emitter.emit(generator.generate_module_imports(), classes)
    """

    def __init__(self, indent_str: str = '  '):
        self.indent_str = indent_str

    def indent(self, level: int) -> str:
        """Return the indentation string for a nesting level."""
        return self.indent_str * level

    # =========================================================================
    # MODULE
    # =========================================================================

    def emit(
        self,
        imports: Iterable[ImportDefinition],
        classes: Iterable[ClassDefinition],
    ) -> str:
        """Render a complete module."""
        parts = [self.emit_import(imp) for imp in imports]
        if parts:
            parts.append('')
        parts.extend(self.emit_class(klass) for klass in classes)
        return '\n'.join(parts)

    def emit_import(self, imp: ImportDefinition) -> str:
        lines = ['import {']
        lines.extend(f'{self.indent(1)}{name},' for name in imp.names)
        lines.append(f"}} from '{imp.module}';")
        return '\n'.join(lines)

    # =========================================================================
    # CLASSES
    # =========================================================================

    def emit_class(self, klass: ClassDefinition) -> str:
        """Render one class, followed by a blank line."""
        header = 'export class' if klass.exported else 'class'
        header = f'{header} {klass.name}'
        if klass.base_type:
            header = f'{header} extends {klass.base_type}'

        lines = [f'{header} {{']
        for field in klass.fields:
            lines.append(f'{self.indent(1)}{field.name}: {field.type};')
        for i, method in enumerate(klass.methods):
            if i > 0 or klass.fields:
                lines.append('')
            lines.extend(self.emit_method(method))
        lines.append('}\n')
        return '\n'.join(lines)

    def emit_method(self, method: Method) -> List[str]:
        params = ', '.join(f'{p.name}: {p.type}' for p in method.params)
        if method.kind == MethodKind.CONSTRUCTOR:
            signature = f'constructor({params})'
        elif method.kind == MethodKind.GETTER:
            signature = f'get {method.name}(): {method.return_type}'
        else:
            signature = f'{method.name}({params})'
            if method.return_type:
                signature = f'{signature}: {method.return_type}'
            if method.kind == MethodKind.STATIC:
                signature = f'static {signature}'

        lines = [f'{self.indent(1)}{signature} {{']
        lines.extend(f'{self.indent(2)}{self.emit_statement(s)}' for s in method.body)
        lines.append(f'{self.indent(1)}}}')
        return lines

    # =========================================================================
    # STATEMENTS AND EXPRESSIONS
    # =========================================================================

    def emit_statement(self, stmt: Statement) -> str:
        if isinstance(stmt, Let):
            return f'let {stmt.name} = {self.emit_expression(stmt.value)};'
        if isinstance(stmt, Assign):
            return f'{self.emit_expression(stmt.target)} = {self.emit_expression(stmt.value)};'
        if isinstance(stmt, Return):
            return f'return {self.emit_expression(stmt.value)};'
        if isinstance(stmt, ExpressionStatement):
            return f'{self.emit_expression(stmt.expression)};'
        raise TypeError(f'Cannot emit statement {type(stmt).__name__}')

    def emit_expression(self, expr: Expression) -> str:
        if isinstance(expr, Identifier):
            return expr.name
        if isinstance(expr, This):
            return 'this'
        if isinstance(expr, Literal):
            return self._emit_literal(expr)
        if isinstance(expr, MemberAccess):
            return f'{self._emit_operand(expr.expression)}.{expr.member}'
        if isinstance(expr, IndexAccess):
            return f'{self._emit_operand(expr.base)}[{self.emit_expression(expr.index)}]'
        if isinstance(expr, MethodCall):
            target = self._emit_operand(expr.target)
            return f'{target}.{expr.method}{self._emit_call_suffix(expr.type_arguments, expr.arguments)}'
        if isinstance(expr, StaticCall):
            return f'{expr.owner}.{expr.method}{self._emit_call_suffix(expr.type_arguments, expr.arguments)}'
        if isinstance(expr, SuperCall):
            return f'super.{expr.method}{self._emit_call_suffix((), expr.arguments)}'
        if isinstance(expr, New):
            return f'new {expr.class_name}{self._emit_call_suffix((), expr.arguments)}'
        if isinstance(expr, Cast):
            return f'{self.emit_expression(expr.expression)} as {expr.type}'
        if isinstance(expr, ArrayLiteral):
            return f'[{self._emit_arguments(expr.elements)}]'
        if isinstance(expr, Lambda):
            param = f'{expr.parameter.name}: {expr.parameter.type}'
            return f'({param}): {expr.return_type} => {self.emit_expression(expr.body)}'
        raise TypeError(f'Cannot emit expression {type(expr).__name__}')

    def _emit_literal(self, literal: Literal) -> str:
        value = literal.value
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, int):
            return str(value)
        escaped = value.replace('\\', '\\\\').replace("'", "\\'")
        return f"'{escaped}'"

    def _emit_operand(self, expr: Expression) -> str:
        """Render the left side of a member access, parenthesizing casts and lambdas."""
        rendered = self.emit_expression(expr)
        if isinstance(expr, (Cast, Lambda)):
            return f'({rendered})'
        return rendered

    def _emit_arguments(self, args: Iterable[Expression]) -> str:
        return ', '.join(self.emit_expression(a) for a in args)

    def _emit_call_suffix(self, type_args: Iterable[str], args: Iterable[Expression]) -> str:
        type_args = list(type_args)
        generic = f'<{", ".join(type_args)}>' if type_args else ''
        return f'{generic}({self._emit_arguments(args)})'
