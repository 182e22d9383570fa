"""Text dumps of symbol-table contents."""

from __future__ import annotations

from typing import Iterable

from kplc.symtab import ConstantValue, ObjectKind, ParamKind, Scope, Symbol, Type, TypeClass


def format_type(type_: Type) -> str:
    """Render a type as ``Int``, ``Char`` or ``Arr(size,element)``."""
    if type_.type_class is TypeClass.INT:
        return "Int"
    if type_.type_class is TypeClass.CHAR:
        return "Char"
    return f"Arr({type_.array_size},{format_type(type_.element_type)})"


def format_constant_value(value: ConstantValue) -> str:
    """Render a constant: a number, or a character in single quotes."""
    if value.type_class is TypeClass.INT:
        return str(value.int_value)
    if value.type_class is TypeClass.CHAR:
        return f"'{value.char_value}'"
    return ""


def format_object(obj: Symbol, indent: int = 0) -> str:
    """Render one object, indented; subroutines and programs include their scope."""
    pad = " " * indent
    kind = obj.kind
    if kind is ObjectKind.CONSTANT:
        return f"{pad}Const {obj.name} = {format_constant_value(obj.value)}"
    if kind is ObjectKind.TYPE:
        return f"{pad}Type {obj.name} = {format_type(obj.actual_type)}"
    if kind is ObjectKind.VARIABLE:
        return f"{pad}Var {obj.name} : {format_type(obj.type)}"
    if kind is ObjectKind.PARAMETER:
        label = "Param" if obj.param_kind is ParamKind.VALUE else "Param VAR"
        return f"{pad}{label} {obj.name} : {format_type(obj.type)}"
    if kind is ObjectKind.FUNCTION:
        header = f"{pad}Function {obj.name} : {format_type(obj.return_type)}\n"
        return header + format_scope(obj.scope, indent + 4)
    if kind is ObjectKind.PROCEDURE:
        return f"{pad}Procedure {obj.name}\n" + format_scope(obj.scope, indent + 4)
    return f"{pad}Program {obj.name}\n" + format_scope(obj.scope, indent + 4)


def format_object_list(objects: Iterable[Symbol], indent: int = 0) -> str:
    """Render each object followed by a newline."""
    return "".join(format_object(obj, indent) + "\n" for obj in objects)


def format_scope(scope: Scope, indent: int = 0) -> str:
    """Render the objects declared in ``scope``."""
    return format_object_list(scope.objects, indent)